"""Tests for webp transcoding and blurhash fingerprints."""

from io import BytesIO
from unittest.mock import MagicMock

import pytest
from PIL import Image

from storage_gateway.application.services.image_transcoder import ImageTranscoder
from storage_gateway.core.exceptions import InternalServerError


class TestImageTranscoder:
    """Test raster normalization."""

    @pytest.mark.parametrize("image_format", ["PNG", "JPEG", "WEBP"])
    def test_rasters_are_reencoded_as_webp(self, image_transcoder, image_factory, image_format):
        original = image_factory(image_format)

        transcoded = image_transcoder.transcode(BytesIO(original), len(original), "picture")

        assert transcoded.content_type == "image/webp"
        assert transcoded.size == len(transcoded.content.getvalue())
        assert transcoded.blurhash
        with Image.open(BytesIO(transcoded.content.getvalue())) as image:
            assert image.format == "WEBP"
            assert image.size == (32, 24)

    def test_fingerprint_is_reproducible(self, image_transcoder, png_bytes):
        first = image_transcoder.transcode(BytesIO(png_bytes), len(png_bytes))
        second = image_transcoder.transcode(BytesIO(png_bytes), len(png_bytes))

        assert first.blurhash == second.blurhash
        assert first.content.getvalue() == second.content.getvalue()

    def test_transparent_image_is_encoded(self, image_transcoder):
        buffer = BytesIO()
        Image.new("LA", (16, 16), (120, 128)).save(buffer, format="PNG")

        transcoded = image_transcoder.transcode(BytesIO(buffer.getvalue()), len(buffer.getvalue()))

        assert transcoded.blurhash

    def test_undecodable_content_is_internal_error(self, image_transcoder):
        with pytest.raises(InternalServerError) as exc_info:
            image_transcoder.transcode(BytesIO(b"not an image"), 12, "fake.png")

        assert "fake.png" in exc_info.value.message

    def test_transformer_output_is_fingerprinted(self, png_bytes):
        transformer = MagicMock()
        transformer.save_as_webp.side_effect = lambda source, size, destination: destination.write(b"garbage")
        transcoder = ImageTranscoder(transformer)

        with pytest.raises(InternalServerError) as exc_info:
            transcoder.transcode(BytesIO(png_bytes), len(png_bytes), "photo.png")

        assert "blurhash" in exc_info.value.message
