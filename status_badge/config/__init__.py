"""Configuration package for runtime settings and startup validation."""

from .feature_store import SettingsFeatureConfigStore
from .settings import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings

__all__ = [
    "AppSettings",
    "SettingsFeatureConfigStore",
    "SettingsLoadError",
    "config_load_settings",
    "config_load_database_url",
]
