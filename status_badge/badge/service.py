"""Badge request orchestration from selector to rendered document."""

from __future__ import annotations

import logging
from typing import Final, Iterable

from status_badge.domain import BadgeSelector, RenderedBadge, domain_parse_bool_flag

from .feature_gate import BadgeFeatureGate
from .mapper import badge_map_status, badge_unknown_spec
from .renderer import SVG_MEDIA_TYPE, badge_render_svg
from .status_resolver import BadgeStatusResolver

BADGE_CACHE_CONTROL: Final[str] = "private, no-store"

logger = logging.getLogger(__name__)


def badge_parse_selector(entity_name: str | None, project_names: Iterable[str] | None) -> BadgeSelector:
    """Build a selector from raw request parameters.

    Blank values count as absent. A non-blank entity name wins over projects.

    Args:
        entity_name: Raw `name` parameter.
        project_names: Raw `project` parameter values.

    Returns:
        BadgeSelector: Normalized selector, empty when nothing usable was given.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_name = (entity_name or "").strip()
    if normalized_name:
        return BadgeSelector(entity_name=normalized_name)

    normalized_projects: list[str] = []
    for project_name in project_names or ():
        normalized_project = project_name.strip()
        if normalized_project and normalized_project not in normalized_projects:
            normalized_projects.append(normalized_project)
    return BadgeSelector(project_names=tuple(normalized_projects))


def badge_parse_revision_flag(value: str | None) -> bool:
    """Return whether the request asked for a revision suffix."""

    return domain_parse_bool_flag(value)


class BadgeService:
    """Compose feature gate, status resolution, mapping and rendering per request.

    The service holds no per-request state and can serve concurrent requests.
    """

    def __init__(
        self,
        feature_gate: BadgeFeatureGate,
        status_resolver: BadgeStatusResolver,
        namespace: str,
    ):
        """Initialize badge service.

        Args:
            feature_gate: Feature flag reader.
            status_resolver: Selector to aggregate status resolver.
            namespace: Namespace used for feature flag lookups.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if feature_gate is None:
            raise ValueError("feature_gate must not be None")
        if status_resolver is None:
            raise ValueError("status_resolver must not be None")
        normalized_namespace = (namespace or "").strip()
        if not normalized_namespace:
            raise ValueError("namespace must not be blank")

        self._feature_gate = feature_gate
        self._status_resolver = status_resolver
        self._namespace = normalized_namespace

    def badge_build(self, selector: BadgeSelector, revision_requested: bool = False) -> RenderedBadge:
        """Build the badge document for one request.

        Disabled badges skip status resolution entirely. Not found, disabled
        and failed lookups all produce the same unknown badge.

        Args:
            selector: Parsed application selector.
            revision_requested: Whether the caller asked for a revision suffix.

        Returns:
            RenderedBadge: SVG document with no-store cache headers.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if not self._feature_gate.badge_is_enabled(namespace=self._namespace):
            logger.debug("status badge disabled namespace=%s", self._namespace)
            return self._badge_build_response(badge_render_svg(badge_unknown_spec()))

        aggregate_status = self._status_resolver.badge_resolve(selector)
        revision_enabled = revision_requested and self._feature_gate.badge_is_revision_enabled(
            namespace=self._namespace
        )
        badge_spec = badge_map_status(
            status=aggregate_status,
            enabled=True,
            revision_enabled=revision_enabled,
        )
        return self._badge_build_response(badge_render_svg(badge_spec))

    def _badge_build_response(self, content: bytes) -> RenderedBadge:
        return RenderedBadge(
            content=content,
            media_type=SVG_MEDIA_TYPE,
            headers={"Cache-Control": BADGE_CACHE_CONTROL},
        )
