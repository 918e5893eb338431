"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok with the app name and version."""
    settings = get_settings()
    return HealthResponse(app=settings.app_name, version=settings.app_version)
