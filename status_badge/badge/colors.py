"""Badge palette and status color tables."""

from typing import Final

from status_badge.domain import HealthCode, RgbColor, SyncCode

BLUE: Final[RgbColor] = RgbColor(13, 173, 234)
GREEN: Final[RgbColor] = RgbColor(24, 190, 82)
PURPLE: Final[RgbColor] = RgbColor(178, 102, 255)
ORANGE: Final[RgbColor] = RgbColor(244, 192, 48)
RED: Final[RgbColor] = RgbColor(233, 109, 118)
GREY: Final[RgbColor] = RgbColor(204, 214, 221)

HEALTH_STATUS_COLORS: Final[dict[HealthCode, RgbColor]] = {
    HealthCode.HEALTHY: GREEN,
    HealthCode.DEGRADED: RED,
    HealthCode.PROGRESSING: ORANGE,
    HealthCode.SUSPENDED: GREY,
    HealthCode.MISSING: PURPLE,
    HealthCode.UNKNOWN: PURPLE,
}

SYNC_STATUS_COLORS: Final[dict[SyncCode, RgbColor]] = {
    SyncCode.SYNCED: GREEN,
    SyncCode.OUT_OF_SYNC: ORANGE,
    SyncCode.UNKNOWN: PURPLE,
}
