"""Content store protocol.

ONLY binary object storage contract - stores bytes addressed by file
identifier and returns the object's ETag.
"""

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ContentStore(Protocol):
    """Content store protocol."""

    async def put_file(self, content: BinaryIO, file_id: str, content_type: str) -> str:
        """Store ``content`` under ``file_id``.

        Args:
            content: Binary stream positioned at the start of the content
            file_id: Identifier the object is addressed by
            content_type: MIME type stored with the object

        Returns:
            The ETag of the stored object

        Raises:
            ContentStoreError: If the store does not accept the object
        """
        ...
