"""Image transformer protocol.

ONLY raster re-encoding contract - converts a decodable raster image into
webp.
"""

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ImageTransformer(Protocol):
    """Image transformer protocol."""

    def save_as_webp(self, source: BinaryIO, size: int, destination: BinaryIO) -> None:
        """Decode ``source`` (``size`` bytes) and write it to ``destination`` as webp.

        Raises on decode or encode failure.
        """
        ...
