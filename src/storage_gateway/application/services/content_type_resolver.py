"""Content type resolver.

ONLY content type resolution - trusts an explicit declaration and falls back
to sniffing the leading bytes of the stream with libmagic.
"""

import logging
from typing import BinaryIO, Tuple

import magic

from ...core.entities.upload_request import FileData
from ...core.exceptions.infrastructure import InternalServerError
from ...core.value_objects.content_type import is_declared

logger = logging.getLogger(__name__)

# Leading bytes inspected when sniffing
SNIFF_BYTES = 3072


class ContentTypeResolver:
    """Resolves the MIME type of an uploaded file.

    A declared content type other than ``application/octet-stream`` is
    returned verbatim without reading the stream. Otherwise the type is
    sniffed from the first ``sniff_bytes`` bytes, recorded on the FileData,
    and the stream is reopened from the start so downstream readers see the
    full content.
    """

    def __init__(self, sniff_bytes: int = SNIFF_BYTES):
        self._sniff_bytes = sniff_bytes

    def resolve(self, file: FileData) -> Tuple[BinaryIO, str]:
        """Resolve the content type of ``file``.

        Returns:
            The stream positioned at the start of the content and the
            resolved content type

        Raises:
            InternalServerError: If the stream cannot be (re)opened or sniffed
        """
        if is_declared(file.declared_content_type):
            return self._open(file), file.declared_content_type

        stream = self._open(file)
        try:
            head = stream.read(self._sniff_bytes)
            content_type = magic.from_buffer(head, mime=True)
        except (OSError, magic.MagicException) as e:
            raise InternalServerError(
                f"problem figuring out content type for file {file.name}", e
            ) from e

        logger.debug(f"Sniffed content type {content_type} for file {file.name}")
        file.declared_content_type = content_type

        return self._open(file), content_type

    @staticmethod
    def _open(file: FileData) -> BinaryIO:
        """Rewind the file's stream to its first byte."""
        try:
            file.content.seek(0)
        except (OSError, ValueError) as e:
            raise InternalServerError(f"problem opening file {file.name}", e) from e
        return file.content


def create_content_type_resolver(sniff_bytes: int = SNIFF_BYTES) -> ContentTypeResolver:
    """Create content type resolver."""
    return ContentTypeResolver(sniff_bytes)
