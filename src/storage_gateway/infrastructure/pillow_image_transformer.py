"""Pillow image transformer.

Implements the ImageTransformer protocol with Pillow's webp encoder.
"""

import logging
from typing import BinaryIO

from PIL import Image

logger = logging.getLogger(__name__)

WEBP_MODES = ("RGB", "RGBA")


class PillowImageTransformer:
    """Re-encodes raster images as lossy webp."""

    def __init__(self, quality: int = 80):
        self._quality = quality

    def save_as_webp(self, source: BinaryIO, size: int, destination: BinaryIO) -> None:
        with Image.open(source) as image:
            image.load()
            if image.mode not in WEBP_MODES:
                image = image.convert("RGBA" if image.has_transparency_data else "RGB")
            image.save(destination, format="WEBP", quality=self._quality)

        logger.debug(f"Encoded {size} source bytes as webp at quality {self._quality}")
