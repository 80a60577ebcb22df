"""Feature gate deciding whether badges and revision suffixes may be shown."""

from __future__ import annotations

import logging

from status_badge.domain import (
    BADGE_ENABLED_SETTING_KEY,
    BADGE_REVISION_ENABLED_SETTING_KEY,
    domain_parse_bool_flag,
)

from .interfaces import FeatureConfigPort

logger = logging.getLogger(__name__)


class BadgeFeatureGate:
    """Fail-closed reader for the badge feature flags.

    Absent settings, unparseable values and store errors all read as disabled,
    so status is never exposed unless an operator turned the badge on.
    """

    def __init__(self, config_store: FeatureConfigPort):
        """Initialize feature gate.

        Args:
            config_store: Feature configuration store.

        Raises:
            ValueError: Raised when config_store is None.
        """

        if config_store is None:
            raise ValueError("config_store must not be None")
        self._config_store = config_store

    def badge_is_enabled(self, namespace: str) -> bool:
        """Return whether badge emission is enabled for the namespace.

        Args:
            namespace: Namespace owning the badge settings.

        Returns:
            bool: True only when the setting is present and truthy.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self._gate_read_flag(namespace=namespace, key=BADGE_ENABLED_SETTING_KEY)

    def badge_is_revision_enabled(self, namespace: str) -> bool:
        """Return whether revision display is enabled for the namespace.

        Args:
            namespace: Namespace owning the badge settings.

        Returns:
            bool: True only when the setting is present and truthy.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return self._gate_read_flag(namespace=namespace, key=BADGE_REVISION_ENABLED_SETTING_KEY)

    def _gate_read_flag(self, namespace: str, key: str) -> bool:
        try:
            raw_value = self._config_store.config_get_value(namespace=namespace, key=key)
        except (ConnectionError, TimeoutError, RuntimeError, ValueError) as error:
            logger.warning("feature setting lookup failed namespace=%s key=%s: %s", namespace, key, error)
            return False
        return domain_parse_bool_flag(raw_value)
