"""Bucket entity.

ONLY bucket policy - the registry's view of a bucket and its upload size
limits. Read-only for the gateway.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Bucket(BaseModel):
    """Named policy scope with minimum/maximum allowed file size."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    min_upload_file_size: int = Field(default=1, ge=0)
    max_upload_file_size: int = Field(default=50_000_000, ge=0)
    presigned_urls_enabled: bool = True
    download_expiration: int = 30
    cache_control: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
