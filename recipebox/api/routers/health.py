"""Health check endpoint."""

import logging
import sqlite3

from fastapi import APIRouter

from recipebox.api.schemas.common import HealthResponse
from recipebox.core.config import AuthConfig, VisionConfig
from recipebox.core.database import count_recipes

router = APIRouter(prefix="/api", tags=["health"])
_LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Check API and data health status.

    Returns health information including:
    - Database connectivity and number of recipes
    - Whether card reading (OpenAI) is configured
    - Whether the app PIN is configured
    """
    database_ok = False
    recipe_count: int | None = None
    try:
        recipe_count = count_recipes()
        database_ok = True
    except sqlite3.Error as e:
        _LOGGER.warning("Database health check failed: %s", e)

    vision_configured = VisionConfig.is_configured()
    pin_configured = AuthConfig.is_configured()

    if not database_ok:
        status = "offline"
    elif not vision_configured or not pin_configured:
        status = "degraded"
    else:
        status = "healthy"

    return HealthResponse(
        status=status,
        database_ok=database_ok,
        recipe_count=recipe_count,
        vision_configured=vision_configured,
        pin_configured=pin_configured,
    )
