"""Upload response formatting."""

from .upload_response_formatter import (
    UploadResponseFormatter,
    LEGACY_DEPRECATION_HEADER,
    LEGACY_DEPRECATION_MESSAGE,
)

__all__ = [
    "UploadResponseFormatter",
    "LEGACY_DEPRECATION_HEADER",
    "LEGACY_DEPRECATION_MESSAGE",
]
