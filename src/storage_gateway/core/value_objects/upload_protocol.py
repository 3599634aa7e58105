"""Upload protocol value object.

ONLY wire protocol identification - the two multipart shapes accepted by the
upload endpoint.
"""

from enum import Enum


class UploadProtocol(str, Enum):
    """Wire protocol used by an upload request."""

    # Repeated ``file[]`` parts, optional ``metadata[]`` and ``bucket-id`` form values
    MULTI_FILE = "multi_file"

    # Single ``file`` part, bucket/name/id taken from ``x-nhost-*`` headers
    LEGACY = "legacy"

    @property
    def is_legacy(self) -> bool:
        return self is UploadProtocol.LEGACY
