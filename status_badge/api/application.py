"""FastAPI application factory for the status badge service."""

from fastapi import FastAPI

from status_badge.badge import BadgeService
from status_badge.config import AppSettings
from status_badge.db import DatabaseHealthPort

from .routers import api_create_badge_router, api_create_health_router


def create_api_application(
    settings: AppSettings,
    badge_service: BadgeService,
    db_health_service: DatabaseHealthPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        badge_service: Badge orchestration service behind `/api/badge`.
        db_health_service: Optional database health service used by `/health`.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when badge_service is None.
    """
    application = FastAPI(title="Application Status Badge")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service identification for bootstrap verification."""

        return {
            "service": "status-badge",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_badge_router(badge_service=badge_service))

    return application
