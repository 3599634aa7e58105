"""
Application exception handlers.

Errors that escape a route are rendered with the same envelope as upload
failures so callers always see ``{"processedFiles": [...], "error": {...}}``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions.base import StorageGatewayError, create_error_response

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
    """
    @app.exception_handler(StorageGatewayError)
    async def storage_gateway_error_handler(request: Request, exc: StorageGatewayError):
        """Handle gateway exceptions."""
        logger.error(f"problem processing request {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=create_error_response(exc)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error processing request {request.url.path}: {exc}",
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "processedFiles": [],
                "error": {"message": "an internal server error occurred"},
            }
        )
