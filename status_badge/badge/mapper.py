"""Pure mapping from aggregate status to badge colors and labels."""

from __future__ import annotations

from typing import Final

from status_badge.domain import AggregateStatus, BadgeSpec, HealthCode, SyncCode

from .colors import GREY, HEALTH_STATUS_COLORS, PURPLE, SYNC_STATUS_COLORS

SHORT_REVISION_LENGTH: Final[int] = 7
UNKNOWN_BADGE_TEXT: Final[str] = "Unknown"


def badge_format_revision_suffix(revision: str | None) -> str | None:
    """Format a revision as a parenthesized short identifier.

    Args:
        revision: Full revision identifier.

    Returns:
        str | None: `(` + first seven characters + `)`, or None for blank revisions.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_revision = (revision or "").strip()
    if not normalized_revision:
        return None
    return f"({normalized_revision[:SHORT_REVISION_LENGTH]})"


def badge_unknown_spec() -> BadgeSpec:
    """Return the uniform badge used for disabled, missing and failed lookups."""

    return BadgeSpec(
        left_color=PURPLE,
        right_color=PURPLE,
        left_text=UNKNOWN_BADGE_TEXT,
        right_text=UNKNOWN_BADGE_TEXT,
        revision_suffix=None,
    )


def badge_map_status(
    status: AggregateStatus | None,
    enabled: bool,
    revision_enabled: bool = False,
) -> BadgeSpec:
    """Map an aggregate status to badge colors and labels.

    A disabled feature and an unresolved status render identically so callers
    cannot tell them apart.

    Args:
        status: Resolved aggregate status, or None when not found.
        enabled: Whether badge emission is enabled.
        revision_enabled: Whether a revision suffix may be shown.

    Returns:
        BadgeSpec: Colors and labels for rendering.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    if not enabled or status is None:
        return badge_unknown_spec()

    health = HealthCode(status.health)
    sync_status = SyncCode(status.sync_status)
    revision_suffix = badge_format_revision_suffix(status.revision) if revision_enabled else None

    return BadgeSpec(
        left_color=HEALTH_STATUS_COLORS.get(health, GREY),
        right_color=SYNC_STATUS_COLORS.get(sync_status, PURPLE),
        left_text=health.value,
        right_text=sync_status.value,
        revision_suffix=revision_suffix,
    )
