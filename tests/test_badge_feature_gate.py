"""Tests for fail-closed badge feature flag reads."""

from __future__ import annotations

import pytest

from status_badge.badge import BADGE_ENABLED_SETTING_KEY, BADGE_REVISION_ENABLED_SETTING_KEY, BadgeFeatureGate
from status_badge.config import AppSettings, SettingsFeatureConfigStore


class _ConfigStoreStub:
    """Feature configuration stub keyed by (namespace, key)."""

    def __init__(self, values: dict[tuple[str, str], str]) -> None:
        self._values = values

    def config_get_value(self, namespace: str, key: str) -> str | None:
        return self._values.get((namespace, key))


class _FailingConfigStore:
    """Feature configuration stub raising lookup errors."""

    def config_get_value(self, namespace: str, key: str) -> str | None:
        raise RuntimeError("failed to read feature setting")


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("0", False),
        ("", False),
        ("maybe", False),
    ],
)
def test_badge_is_enabled_parses_flag_values(raw_value: str, expected: bool) -> None:
    """Accept boolean-ish true values and read everything else as disabled.

    Args:
        raw_value: Raw stored setting value.
        expected: Expected gate decision.

    Returns:
        None: Assertions validate gate behavior.

    Raises:
        AssertionError: Raised when the flag is misread.
    """

    gate = BadgeFeatureGate(_ConfigStoreStub({("default", BADGE_ENABLED_SETTING_KEY): raw_value}))

    assert gate.badge_is_enabled("default") is expected


def test_badge_feature_gate_defaults_to_disabled_when_absent() -> None:
    """Read absent settings as disabled."""

    gate = BadgeFeatureGate(_ConfigStoreStub({}))

    assert gate.badge_is_enabled("default") is False
    assert gate.badge_is_revision_enabled("default") is False


def test_badge_feature_gate_reads_namespace_scoped_values() -> None:
    """Read flags only from the requested namespace."""

    gate = BadgeFeatureGate(
        _ConfigStoreStub(
            {
                ("default", BADGE_ENABLED_SETTING_KEY): "true",
                ("default", BADGE_REVISION_ENABLED_SETTING_KEY): "true",
            }
        )
    )

    assert gate.badge_is_enabled("default") is True
    assert gate.badge_is_revision_enabled("default") is True
    assert gate.badge_is_enabled("other") is False


def test_badge_feature_gate_fails_closed_on_lookup_error() -> None:
    """Read lookup failures as disabled instead of raising."""

    gate = BadgeFeatureGate(_FailingConfigStore())

    assert gate.badge_is_enabled("default") is False
    assert gate.badge_is_revision_enabled("default") is False


def test_settings_feature_config_store_serves_configured_flags() -> None:
    """Serve badge flags from settings for the configured namespace only."""

    store = SettingsFeatureConfigStore(
        AppSettings(badge_namespace="argocd", badge_enabled=True, badge_revision_enabled=False)
    )
    gate = BadgeFeatureGate(store)

    assert store.config_get_value("argocd", BADGE_ENABLED_SETTING_KEY) == "true"
    assert store.config_get_value("argocd", "unrelated.key") is None
    assert store.config_get_value("default", BADGE_ENABLED_SETTING_KEY) is None
    assert gate.badge_is_enabled("argocd") is True
    assert gate.badge_is_revision_enabled("argocd") is False
