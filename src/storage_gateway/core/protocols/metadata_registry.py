"""Metadata registry protocol.

ONLY file metadata system-of-record contract - bucket lookup and the
two-phase file record lifecycle.
"""

from typing import Dict, Protocol, runtime_checkable

from ..entities.bucket import Bucket
from ..entities.file_metadata import FileMetadata


@runtime_checkable
class MetadataRegistry(Protocol):
    """Metadata registry protocol.

    Every call carries the headers to authenticate with; implementations raise
    StorageGatewayError subclasses on failure.
    """

    async def get_bucket_by_id(self, bucket_id: str, headers: Dict[str, str]) -> Bucket:
        """Get bucket policy by identifier.

        Raises BucketNotFoundError if the bucket does not exist.
        """
        ...

    async def initialize_file(
        self,
        file_id: str,
        name: str,
        size: int,
        bucket_id: str,
        mime_type: str,
        headers: Dict[str, str]
    ) -> None:
        """Pre-register a file record with ``is_uploaded`` false."""
        ...

    async def populate_metadata(
        self,
        file_id: str,
        name: str,
        size: int,
        bucket_id: str,
        etag: str,
        is_uploaded: bool,
        mime_type: str,
        blurhash: str,
        headers: Dict[str, str]
    ) -> FileMetadata:
        """Finalize a pre-registered record.

        Overwrites the record in place; calling it twice with the same values
        leaves the same record.
        """
        ...

    async def delete_file_by_id(self, file_id: str, headers: Dict[str, str]) -> None:
        """Delete a file record."""
        ...
