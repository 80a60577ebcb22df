"""Domain models used across application layer boundaries."""

from .models import (
    BADGE_ENABLED_SETTING_KEY,
    BADGE_REVISION_ENABLED_SETTING_KEY,
    AggregateStatus,
    BadgeSelector,
    BadgeSpec,
    EntityStatus,
    HealthCode,
    RenderedBadge,
    RgbColor,
    ServiceHealthStatus,
    SyncCode,
)
from .status_parsing import (
    domain_parse_application_document,
    domain_parse_bool_flag,
    domain_parse_health_code,
    domain_parse_sync_code,
)

__all__ = [
    "BADGE_ENABLED_SETTING_KEY",
    "BADGE_REVISION_ENABLED_SETTING_KEY",
    "AggregateStatus",
    "BadgeSelector",
    "BadgeSpec",
    "EntityStatus",
    "HealthCode",
    "RenderedBadge",
    "RgbColor",
    "ServiceHealthStatus",
    "SyncCode",
    "domain_parse_application_document",
    "domain_parse_bool_flag",
    "domain_parse_health_code",
    "domain_parse_sync_code",
]
