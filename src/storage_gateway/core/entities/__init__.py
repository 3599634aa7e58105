"""Entities for the storage gateway."""

from .bucket import Bucket
from .file_metadata import FileMetadata
from .upload_request import FileData, UploadRequest
from .upload_result import UploadResult

__all__ = [
    "Bucket",
    "FileMetadata",
    "FileData",
    "UploadRequest",
    "UploadResult",
]
