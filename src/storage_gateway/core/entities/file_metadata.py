"""File metadata entity.

ONLY file metadata - the registry's record of a stored file. Created in two
phases: pre-registration (``is_uploaded`` false) and finalize once the
content store has accepted the bytes.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FileMetadata(BaseModel):
    """Registry view of a stored file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    size: int
    bucket_id: str
    etag: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    is_uploaded: bool = False
    mime_type: str = ""
    uploaded_by_user_id: Optional[str] = None
    blurhash: str = ""

    def to_response(self) -> Dict[str, Any]:
        """Serialize using the wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)
