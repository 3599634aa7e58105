"""Image transcoder.

ONLY image normalization - re-encodes raster images as webp and derives a
blurhash fingerprint from the re-encoded result.
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import BinaryIO

import blurhash
from PIL import Image

from ...core.exceptions.infrastructure import InternalServerError
from ...core.protocols.image_transformer import ImageTransformer
from ...core.value_objects.content_type import WEBP

logger = logging.getLogger(__name__)

# Blurhash grid resolution
BLURHASH_X_COMPONENTS = 4
BLURHASH_Y_COMPONENTS = 3


@dataclass(frozen=True)
class TranscodedImage:
    """A re-encoded image and its fingerprint."""

    content: BytesIO
    size: int
    blurhash: str
    content_type: str = WEBP


class ImageTranscoder:
    """Normalizes webp/png/jpeg uploads to webp.

    Webp input is re-encoded as well so size and metadata are always computed
    from the gateway's own encoding. The fingerprint is computed from the
    re-encoded buffer, not the original upload.
    """

    def __init__(self, image_transformer: ImageTransformer):
        self._image_transformer = image_transformer

    def transcode(self, source: BinaryIO, size: int, file_name: str = "") -> TranscodedImage:
        """Re-encode ``source`` as webp.

        Args:
            source: Stream positioned at the start of the original image
            size: Declared size of the original image
            file_name: Name used in error messages

        Returns:
            TranscodedImage whose ``size`` is the length of the webp buffer

        Raises:
            InternalServerError: If decoding, encoding or fingerprinting fails
        """
        buffer = BytesIO()
        try:
            self._image_transformer.save_as_webp(source, size, buffer)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise InternalServerError(f"problem converting file {file_name} to webp", e) from e

        encoded = buffer.getvalue()

        try:
            with Image.open(BytesIO(encoded)) as image:
                image.load()
                fingerprint = blurhash.encode(
                    image,
                    x_components=BLURHASH_X_COMPONENTS,
                    y_components=BLURHASH_Y_COMPONENTS,
                )
        except (OSError, ValueError) as e:
            raise InternalServerError(f"problem generating blurhash for file {file_name}", e) from e

        logger.debug(f"Transcoded {file_name}: {size} -> {len(encoded)} bytes")

        return TranscodedImage(content=BytesIO(encoded), size=len(encoded), blurhash=fingerprint)


def create_image_transcoder(image_transformer: ImageTransformer) -> ImageTranscoder:
    """Create image transcoder."""
    return ImageTranscoder(image_transformer)
