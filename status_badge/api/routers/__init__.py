"""API router package for endpoint composition."""

from .badge import api_create_badge_router
from .health import api_create_health_router

__all__ = ["api_create_badge_router", "api_create_health_router"]
