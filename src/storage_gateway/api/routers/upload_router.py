"""Upload router.

ONLY the upload endpoint - accepts both upload protocols on the same route.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ...application.services.upload_orchestrator import UploadOrchestrator
from ...core.exceptions.base import StorageGatewayError
from ...core.value_objects.request_context import RegistryRequestContext
from ..dependencies.upload_dependencies import (
    get_registry_request_context,
    get_upload_orchestrator,
    get_upload_request_parser,
    get_upload_response_formatter,
)
from ..parsers.upload_request_parser import UploadRequestParser
from ..responses.upload_response_formatter import UploadResponseFormatter

logger = logging.getLogger(__name__)

upload_router = APIRouter(
    prefix="/files",
    tags=["Files"],
)


@upload_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Upload files",
    description="Upload one or more files with file[] (and optional metadata[]), "
                "or a single file with the legacy file part"
)
@upload_router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def upload_file(
    request: Request,
    orchestrator: Annotated[UploadOrchestrator, Depends(get_upload_orchestrator)],
    parser: Annotated[UploadRequestParser, Depends(get_upload_request_parser)],
    formatter: Annotated[UploadResponseFormatter, Depends(get_upload_response_formatter)],
    context: Annotated[RegistryRequestContext, Depends(get_registry_request_context)]
) -> JSONResponse:
    """Upload files."""
    # The form (and every file stream in it) is closed when this block exits
    async with request.form() as form:
        try:
            upload_request = parser.parse(form, request.headers)
        except StorageGatewayError as e:
            logger.error(f"problem processing request: {e.message}")
            return formatter.format_error(e)

        result = await orchestrator.upload(upload_request, context)

    if result.error is not None:
        logger.error(
            f"problem processing request: {result.error.message}",
            exc_info=result.error.__cause__
        )

    return formatter.format(upload_request.protocol, result)
