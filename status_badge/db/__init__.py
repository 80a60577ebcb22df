"""Database layer package for all SQL boundaries."""

from .application_status import SQLAlchemyApplicationStatusService
from .engine import db_create_engine
from .feature_setting import SQLAlchemyFeatureSettingService
from .health import BADGE_STORE_TABLES, SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort

__all__ = [
    "BADGE_STORE_TABLES",
    "DatabaseHealthPort",
    "SQLAlchemyApplicationStatusService",
    "SQLAlchemyDatabaseHealthService",
    "SQLAlchemyFeatureSettingService",
    "db_create_engine",
]
