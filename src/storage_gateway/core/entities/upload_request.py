"""Upload request entities.

ONLY normalized upload input - what the request parser hands to the upload
orchestrator regardless of the wire protocol used.
"""

from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Tuple

from ..value_objects.upload_protocol import UploadProtocol


@dataclass
class FileData:
    """A single uploaded part.

    ``content`` is the raw byte stream as received; it stays owned by the
    multipart form and is released when the request completes.
    """

    name: str
    id: str
    content: BinaryIO
    size: int
    declared_content_type: str = ""


@dataclass(frozen=True)
class UploadRequest:
    """Normalized upload request, immutable after parsing."""

    bucket_id: str
    files: Tuple[FileData, ...]
    headers: Dict[str, str] = field(default_factory=dict)
    protocol: UploadProtocol = UploadProtocol.MULTI_FILE
