"""FastAPI dependencies."""

from .upload_dependencies import (
    get_app_settings,
    get_upload_orchestrator,
    get_upload_request_parser,
    get_upload_response_formatter,
    get_registry_request_context,
)

__all__ = [
    "get_app_settings",
    "get_upload_orchestrator",
    "get_upload_request_parser",
    "get_upload_response_formatter",
    "get_registry_request_context",
]
