"""Storage gateway application factory.

Builds the FastAPI application, wiring the upload orchestrator to the
metadata registry, the content store and the image transformer.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.exception_handlers import register_exception_handlers
from .api.routers import health_router, upload_router
from .application.services.image_transcoder import create_image_transcoder
from .application.services.upload_orchestrator import create_upload_orchestrator
from .config.settings import StorageGatewaySettings, get_settings
from .core.protocols.content_store import ContentStore
from .core.protocols.image_transformer import ImageTransformer
from .core.protocols.metadata_registry import MetadataRegistry
from .infrastructure.hasura_metadata_registry import (
    HasuraMetadataRegistry,
    create_hasura_metadata_registry,
)
from .infrastructure.pillow_image_transformer import PillowImageTransformer
from .infrastructure.s3_content_store import S3ContentStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: StorageGatewaySettings = app.state.settings
    logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")

    yield

    registry = app.state.metadata_registry
    if isinstance(registry, HasuraMetadataRegistry):
        await registry.close()
    logger.info(f"Stopped {settings.app_name}")


def create_app(
    settings: Optional[StorageGatewaySettings] = None,
    metadata_registry: Optional[MetadataRegistry] = None,
    content_store: Optional[ContentStore] = None,
    image_transformer: Optional[ImageTransformer] = None
) -> FastAPI:
    """Create the storage gateway application.

    Collaborators not given explicitly are built from settings.

    Args:
        settings: Application settings, defaults to ``get_settings()``
        metadata_registry: Metadata registry implementation
        content_store: Content store implementation
        image_transformer: Image transformer implementation

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    if metadata_registry is None:
        metadata_registry = create_hasura_metadata_registry(
            endpoint=settings.hasura_endpoint,
            timeout_seconds=settings.registry_timeout_seconds,
            user_agent=f"{settings.app_name}/{settings.app_version}",
        )
    if content_store is None:
        content_store = S3ContentStore.from_settings(settings)
    if image_transformer is None:
        image_transformer = PillowImageTransformer(quality=settings.webp_quality)

    app = FastAPI(
        title="Storage Gateway",
        version=settings.app_version,
        description="Upload gateway for files stored in an object store with metadata in a registry",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.metadata_registry = metadata_registry
    app.state.upload_orchestrator = create_upload_orchestrator(
        metadata_registry=metadata_registry,
        content_store=content_store,
        image_transcoder=create_image_transcoder(image_transformer),
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(upload_router, prefix=settings.api_root_prefix)

    return app
