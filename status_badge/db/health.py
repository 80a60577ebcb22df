"""Database health service implementations for connectivity checks."""

from typing import Final

from sqlalchemy import Engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError

from status_badge.domain import ServiceHealthStatus

from .interfaces import DatabaseHealthPort

BADGE_STORE_TABLES: Final[tuple[str, ...]] = ("application_status", "feature_setting")


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Database health service verifying connectivity and badge store schema."""

    def __init__(self, engine: Engine):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL with the password masked."""

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> ServiceHealthStatus:
        """Verify connectivity and report badge store tables that are missing.

        Returns:
            ServiceHealthStatus: `ok` when all tables exist, `schema_incomplete` otherwise.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                existing_tables = set(inspect(connection).get_table_names())
        except SQLAlchemyError as error:
            raise ConnectionError("database connectivity check failed") from error

        missing_tables = [table for table in BADGE_STORE_TABLES if table not in existing_tables]
        if missing_tables:
            return ServiceHealthStatus(
                status="schema_incomplete",
                detail=f"missing tables: {', '.join(missing_tables)}",
            )
        return ServiceHealthStatus(status="ok", detail="database connectivity verified")
