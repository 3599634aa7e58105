"""Pytest configuration and fixtures for storage gateway tests."""

from io import BytesIO
from typing import Callable
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from PIL import Image

from storage_gateway.application.services.image_transcoder import ImageTranscoder
from storage_gateway.application.services.upload_orchestrator import UploadOrchestrator
from storage_gateway.config.settings import StorageGatewaySettings
from storage_gateway.core.entities.bucket import Bucket
from storage_gateway.core.entities.file_metadata import FileMetadata
from storage_gateway.core.entities.upload_request import FileData
from storage_gateway.core.value_objects.request_context import RegistryRequestContext
from storage_gateway.infrastructure.pillow_image_transformer import PillowImageTransformer


def make_image_bytes(image_format: str, size=(32, 24), color=(200, 30, 30)) -> bytes:
    """Encode a solid-color test image in ``image_format``."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def webp_bytes() -> bytes:
    return make_image_bytes("WEBP")


@pytest.fixture
def sample_bucket() -> Bucket:
    """Default bucket accepting 1 byte to 1 MB."""
    return Bucket(id="default", min_upload_file_size=1, max_upload_file_size=1_000_000)


@pytest.fixture
def make_file_data() -> Callable[..., FileData]:
    """Factory for FileData backed by an in-memory stream."""

    def _make(content: bytes, name: str = "file.txt", content_type: str = "text/plain", file_id=None) -> FileData:
        return FileData(
            name=name,
            id=file_id or str(uuid4()),
            content=BytesIO(content),
            size=len(content),
            declared_content_type=content_type,
        )

    return _make


@pytest.fixture
def mock_metadata_registry(sample_bucket):
    """Mock metadata registry recording every call."""
    registry = AsyncMock()
    registry.get_bucket_by_id = AsyncMock(return_value=sample_bucket)
    registry.initialize_file = AsyncMock(return_value=None)
    registry.delete_file_by_id = AsyncMock(return_value=None)

    async def populate_metadata(file_id, name, size, bucket_id, etag, is_uploaded, mime_type, blurhash, headers):
        return FileMetadata(
            id=file_id,
            name=name,
            size=size,
            bucket_id=bucket_id,
            etag=etag,
            is_uploaded=is_uploaded,
            mime_type=mime_type,
            blurhash=blurhash,
        )

    registry.populate_metadata = AsyncMock(side_effect=populate_metadata)
    return registry


@pytest.fixture
def mock_content_store():
    """Mock content store returning a fixed ETag."""
    store = AsyncMock()
    store.put_file = AsyncMock(return_value='"etag-1"')
    return store


@pytest.fixture
def image_transcoder() -> ImageTranscoder:
    return ImageTranscoder(PillowImageTransformer(quality=80))


@pytest.fixture
def orchestrator(mock_metadata_registry, mock_content_store, image_transcoder) -> UploadOrchestrator:
    return UploadOrchestrator(
        metadata_registry=mock_metadata_registry,
        content_store=mock_content_store,
        image_transcoder=image_transcoder,
    )


@pytest.fixture
def request_context() -> RegistryRequestContext:
    return RegistryRequestContext(
        admin_headers={"x-hasura-admin-secret": "secret"},
        caller_headers={"authorization": "Bearer token"},
    )


@pytest.fixture
def test_settings() -> StorageGatewaySettings:
    return StorageGatewaySettings(
        hasura_endpoint="http://registry.test/v1/graphql",
        hasura_admin_secret="secret",
        s3_bucket="test-bucket",
    )


@pytest.fixture
def image_factory() -> Callable[..., bytes]:
    """Factory for encoded test images."""
    return make_image_bytes
