"""Badge endpoint router serving application status SVG badges."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import Response

from status_badge.badge import BadgeService, badge_parse_revision_flag, badge_parse_selector


def api_create_badge_router(badge_service: BadgeService) -> APIRouter:
    """Create badge router exposing the public badge lookup.

    Args:
        badge_service: Badge orchestration service.

    Returns:
        APIRouter: Router exposing `/api/badge`.

    Raises:
        ValueError: Raised when badge_service is None.
    """

    if badge_service is None:
        raise ValueError("badge_service must not be None")

    router = APIRouter(prefix="/api", tags=["badge"])

    @router.get("/badge")
    def api_badge_get(
        name: str | None = Query(default=None),
        project: list[str] = Query(default=[]),
        revision: str | None = Query(default=None),
    ) -> Response:
        """Render the status badge for one application or a set of projects.

        The response is always HTTP 200 with an SVG body. Unknown applications,
        a disabled badge feature and store failures render the same badge.

        Args:
            name: Application name selector.
            project: Project name selectors; ignored when `name` is given.
            revision: Boolean-ish flag requesting a revision suffix.

        Returns:
            Response: SVG badge with `Cache-Control: private, no-store`.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        selector = badge_parse_selector(entity_name=name, project_names=project)
        rendered_badge = badge_service.badge_build(
            selector=selector,
            revision_requested=badge_parse_revision_flag(revision),
        )
        return Response(
            content=rendered_badge.content,
            media_type=rendered_badge.media_type,
            headers=rendered_badge.headers,
        )

    return router
