"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str | bool]:
    """Return service health and whether the webhook trigger can fire."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "trigger_configured": bool(settings.trigger_key),
    }
