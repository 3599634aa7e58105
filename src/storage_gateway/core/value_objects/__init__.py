"""Value objects for the storage gateway."""

from .content_type import (
    OCTET_STREAM,
    WEBP,
    TRANSCODABLE_IMAGE_TYPES,
    is_declared,
    is_transcodable,
)
from .upload_protocol import UploadProtocol
from .request_context import RegistryRequestContext, ADMIN_SECRET_HEADER

__all__ = [
    "OCTET_STREAM",
    "WEBP",
    "TRANSCODABLE_IMAGE_TYPES",
    "is_declared",
    "is_transcodable",
    "UploadProtocol",
    "RegistryRequestContext",
    "ADMIN_SECRET_HEADER",
]
