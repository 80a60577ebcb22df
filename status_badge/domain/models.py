"""Typed domain models shared across runtime layers.

This module provides simple immutable data contracts for status lookups,
badge composition and service health reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

BADGE_ENABLED_SETTING_KEY: Final[str] = "statusbadge.enabled"
BADGE_REVISION_ENABLED_SETTING_KEY: Final[str] = "statusbadge.revision.enabled"


class HealthCode(str, Enum):
    """Health states reported for one managed application."""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    PROGRESSING = "Progressing"
    SUSPENDED = "Suspended"
    MISSING = "Missing"
    UNKNOWN = "Unknown"


class SyncCode(str, Enum):
    """Sync states comparing live and desired application state."""

    SYNCED = "Synced"
    OUT_OF_SYNC = "OutOfSync"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ServiceHealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class EntityStatus:
    """Status snapshot of one managed application.

    Attributes:
        entity_name: Application name.
        project_name: Project (group) the application belongs to.
        health: Current health code.
        sync_status: Current sync code.
        revision: Revision applied by the last sync operation, when known.
    """

    entity_name: str
    project_name: str
    health: HealthCode
    sync_status: SyncCode
    revision: str | None = None


@dataclass(frozen=True)
class AggregateStatus:
    """Status outcome for one badge, reduced from one or more entities.

    Attributes:
        health: Dominant health code.
        sync_status: Dominant sync code.
        revision: Revision of the entity that decided the dominant health.
        entity_count: Number of entities that contributed to the outcome.
    """

    health: HealthCode
    sync_status: SyncCode
    revision: str | None
    entity_count: int = 1


@dataclass(frozen=True)
class RgbColor:
    """Opaque RGB color used for badge segments."""

    red: int
    green: int
    blue: int

    def color_to_hex_string(self) -> str:
        """Return color as a `#rrggbb` string.

        Returns:
            str: Lowercase six-digit hex representation prefixed with `#`.

        Raises:
            ValueError: Raised when a channel is outside 0..255.
        """

        for channel in (self.red, self.green, self.blue):
            if channel < 0 or channel > 255:
                raise ValueError("color channels must be within 0..255")
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class BadgeSpec:
    """Colors and labels for one rendered badge.

    Attributes:
        left_color: Health segment color.
        right_color: Sync segment color.
        left_text: Health segment label.
        right_text: Sync segment label.
        revision_suffix: Optional parenthesized short revision.
    """

    left_color: RgbColor
    right_color: RgbColor
    left_text: str
    right_text: str
    revision_suffix: str | None = None


@dataclass(frozen=True)
class BadgeSelector:
    """Application selector parsed from one badge request.

    Attributes:
        entity_name: Single application name, when selecting by name.
        project_names: Project names, when selecting by project.
    """

    entity_name: str | None = None
    project_names: tuple[str, ...] = ()

    @property
    def selector_is_empty(self) -> bool:
        """Return whether the selector names neither an entity nor a project."""

        return self.entity_name is None and not self.project_names


@dataclass(frozen=True)
class RenderedBadge:
    """Rendered badge document ready for an HTTP response.

    Attributes:
        content: Encoded image document.
        media_type: Response content type.
        headers: Extra response headers.
    """

    content: bytes
    media_type: str
    headers: dict[str, str] = field(default_factory=dict)
