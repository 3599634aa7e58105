"""Upload service dependencies.

ONLY upload dependencies - FastAPI dependency injection for the services
built by the application factory.
"""

from typing import Annotated

from fastapi import Depends, Request

from ...application.services.upload_orchestrator import UploadOrchestrator
from ...config.settings import StorageGatewaySettings
from ...core.value_objects.request_context import RegistryRequestContext
from ..parsers.upload_request_parser import UploadRequestParser, create_upload_request_parser
from ..responses.upload_response_formatter import UploadResponseFormatter


async def get_app_settings(request: Request) -> StorageGatewaySettings:
    """Get the settings the application was built with."""
    return request.app.state.settings


async def get_upload_orchestrator(request: Request) -> UploadOrchestrator:
    """Get the upload orchestrator dependency."""
    return request.app.state.upload_orchestrator


async def get_upload_request_parser(
    settings: Annotated[StorageGatewaySettings, Depends(get_app_settings)]
) -> UploadRequestParser:
    """Get the upload request parser dependency."""
    return create_upload_request_parser(settings.default_bucket_id)


async def get_upload_response_formatter() -> UploadResponseFormatter:
    """Get the upload response formatter dependency."""
    return UploadResponseFormatter()


async def get_registry_request_context(
    request: Request,
    settings: Annotated[StorageGatewaySettings, Depends(get_app_settings)]
) -> RegistryRequestContext:
    """Build the registry headers for this request, once per request."""
    return RegistryRequestContext.from_request_headers(
        request.headers,
        settings.hasura_admin_secret.get_secret_value()
    )
