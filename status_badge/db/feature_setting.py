"""Database service for read-only feature setting lookups."""

from __future__ import annotations

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from status_badge.badge.interfaces import FeatureConfigPort


class SQLAlchemyFeatureSettingService(FeatureConfigPort):
    """SQLAlchemy-backed feature configuration store over `feature_setting` rows."""

    def __init__(self, engine: Engine):
        """Initialize feature setting service.

        Args:
            engine: SQLAlchemy engine used for all lookups.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def config_get_value(self, namespace: str, key: str) -> str | None:
        """Return the raw value of one setting.

        Args:
            namespace: Namespace owning the setting.
            key: Setting key.

        Returns:
            str | None: Raw value, or None when no row exists.

        Raises:
            ValueError: Raised when namespace or key is blank.
            RuntimeError: Raised when the query fails.
        """

        normalized_namespace = namespace.strip()
        normalized_key = key.strip()
        if not normalized_namespace:
            raise ValueError("namespace must not be blank")
        if not normalized_key:
            raise ValueError("key must not be blank")

        try:
            with self._engine.connect() as connection:
                value = connection.execute(
                    text(
                        "SELECT setting_value "
                        "FROM feature_setting "
                        "WHERE namespace = :namespace AND setting_key = :setting_key"
                    ),
                    {"namespace": normalized_namespace, "setting_key": normalized_key},
                ).scalar_one_or_none()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to read feature setting") from error

        return None if value is None else str(value)
