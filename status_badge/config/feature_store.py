"""Feature configuration store serving badge flags from runtime settings."""

from __future__ import annotations

from status_badge.domain import BADGE_ENABLED_SETTING_KEY, BADGE_REVISION_ENABLED_SETTING_KEY

from .settings import AppSettings


class SettingsFeatureConfigStore:
    """Read-only feature configuration backed by validated `AppSettings`.

    Only the configured badge namespace carries values; lookups for any other
    namespace or key report the setting as absent.
    """

    def __init__(self, settings: AppSettings):
        """Initialize settings-backed feature store.

        Args:
            settings: Validated application settings.

        Raises:
            ValueError: Raised when settings is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        self._namespace = settings.badge_namespace
        self._values = {
            BADGE_ENABLED_SETTING_KEY: "true" if settings.badge_enabled else "false",
            BADGE_REVISION_ENABLED_SETTING_KEY: "true" if settings.badge_revision_enabled else "false",
        }

    def config_get_value(self, namespace: str, key: str) -> str | None:
        """Return the raw setting value for one namespace and key.

        Args:
            namespace: Namespace owning the setting.
            key: Setting key.

        Returns:
            str | None: Raw value, or None when absent.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        if namespace.strip() != self._namespace:
            return None
        return self._values.get(key.strip())
