"""Routers."""

from .upload_router import upload_router
from .health_router import health_router

__all__ = ["upload_router", "health_router"]
