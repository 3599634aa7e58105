"""Health router."""

from fastapi import APIRouter

health_router = APIRouter(tags=["System"])


@health_router.get("/healthz", summary="Liveness probe")
async def healthz() -> dict:
    return {"status": "ok"}
