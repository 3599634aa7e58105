"""Exception hierarchy for the storage gateway."""

from .base import StorageGatewayError, create_error_response
from .upload import (
    FileTooSmallError,
    FileTooBigError,
    WrongMetadataFormatError,
    MetadataLengthMismatchError,
    MultipartFileNotFoundError,
)
from .infrastructure import (
    InternalServerError,
    BucketNotFoundError,
    RegistryError,
    ContentStoreError,
)

__all__ = [
    "StorageGatewayError",
    "create_error_response",
    "FileTooSmallError",
    "FileTooBigError",
    "WrongMetadataFormatError",
    "MetadataLengthMismatchError",
    "MultipartFileNotFoundError",
    "InternalServerError",
    "BucketNotFoundError",
    "RegistryError",
    "ContentStoreError",
]
