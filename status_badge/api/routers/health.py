"""Health endpoint router composition for app and database checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from status_badge.db import DatabaseHealthPort


def api_create_health_router(db_health_service: DatabaseHealthPort | None) -> APIRouter:
    """Create health-check router with app and database connectivity status.

    Args:
        db_health_service: DB-layer health service, or None when no store uses the database.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and database health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        if db_health_service is None:
            payload = {"status": "ok", "app": "up", "database": "disabled", "detail": "no database-backed store"}
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

        try:
            db_health = db_health_service.db_check_health()
        except ConnectionError as error:
            payload = {
                "status": "degraded",
                "app": "up",
                "database": "down",
                "detail": str(error),
                "target": db_health_service.db_connection_label(),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

        payload = {
            "status": "ok" if db_health.status == "ok" else "degraded",
            "app": "up",
            "database": db_health.status,
            "detail": db_health.detail,
            "target": db_health_service.db_connection_label(),
        }
        status_code = status.HTTP_200_OK if db_health.status == "ok" else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    return router
