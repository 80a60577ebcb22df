"""Badge layer package for status resolution, mapping and rendering."""

from .feature_gate import BADGE_ENABLED_SETTING_KEY, BADGE_REVISION_ENABLED_SETTING_KEY, BadgeFeatureGate
from .interfaces import FeatureConfigPort, StatusStorePort
from .mapper import badge_format_revision_suffix, badge_map_status, badge_unknown_spec
from .renderer import SVG_MEDIA_TYPE, badge_render_svg
from .service import BADGE_CACHE_CONTROL, BadgeService, badge_parse_revision_flag, badge_parse_selector
from .status_resolver import (
    HEALTH_SEVERITY_ORDER,
    SYNC_SEVERITY_ORDER,
    BadgeStatusResolver,
    badge_reduce_statuses,
)

__all__ = [
    "BADGE_CACHE_CONTROL",
    "BADGE_ENABLED_SETTING_KEY",
    "BADGE_REVISION_ENABLED_SETTING_KEY",
    "HEALTH_SEVERITY_ORDER",
    "SVG_MEDIA_TYPE",
    "SYNC_SEVERITY_ORDER",
    "BadgeFeatureGate",
    "BadgeService",
    "BadgeStatusResolver",
    "FeatureConfigPort",
    "StatusStorePort",
    "badge_format_revision_suffix",
    "badge_map_status",
    "badge_parse_revision_flag",
    "badge_parse_selector",
    "badge_reduce_statuses",
    "badge_render_svg",
    "badge_unknown_spec",
]
