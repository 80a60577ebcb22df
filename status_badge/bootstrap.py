"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI
from sqlalchemy import Engine

from status_badge.adapters import ApplicationApiStatusAdapter
from status_badge.api import create_api_application
from status_badge.badge import BadgeFeatureGate, BadgeService, BadgeStatusResolver, FeatureConfigPort, StatusStorePort
from status_badge.config import AppSettings, SettingsFeatureConfigStore, config_load_settings
from status_badge.db import (
    SQLAlchemyApplicationStatusService,
    SQLAlchemyDatabaseHealthService,
    SQLAlchemyFeatureSettingService,
    db_create_engine,
)


def bootstrap_create_badge_service(settings: AppSettings, engine: Engine | None = None) -> BadgeService:
    """Build the badge service with the stores selected by settings.

    Args:
        settings: Validated application settings.
        engine: Optional shared engine; created from settings when a database store needs one.

    Returns:
        BadgeService: Fully wired badge service.

    Raises:
        ValueError: Raised when store configuration is invalid.
    """

    if engine is None and settings.settings_uses_database():
        engine = db_create_engine(database_url=settings.database_url)

    status_store: StatusStorePort
    if settings.status_store_backend == "api":
        status_store = ApplicationApiStatusAdapter(
            base_url=settings.application_api_base_url or "",
            token=settings.application_api_token,
            request_timeout_seconds=settings.application_api_timeout_seconds,
        )
    else:
        status_store = SQLAlchemyApplicationStatusService(engine=engine)

    config_store: FeatureConfigPort
    if settings.feature_config_backend == "settings":
        config_store = SettingsFeatureConfigStore(settings=settings)
    else:
        config_store = SQLAlchemyFeatureSettingService(engine=engine)

    return BadgeService(
        feature_gate=BadgeFeatureGate(config_store=config_store),
        status_resolver=BadgeStatusResolver(status_store=status_store),
        namespace=settings.badge_namespace,
    )


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    engine = None
    db_health_service = None
    if settings.settings_uses_database():
        engine = db_create_engine(database_url=settings.database_url)
        db_health_service = SQLAlchemyDatabaseHealthService(engine=engine)
    return create_api_application(
        settings=settings,
        badge_service=bootstrap_create_badge_service(settings=settings, engine=engine),
        db_health_service=db_health_service,
    )
