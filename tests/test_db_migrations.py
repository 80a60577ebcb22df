"""Regression tests for the badge store Alembic migration baseline."""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from status_badge.db import SQLAlchemyDatabaseHealthService

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _migration_build_config() -> Config:
    """Build an Alembic config pointing at the project migration scripts.

    The ini file is not loaded so logging configuration stays untouched.

    Returns:
        Config: Alembic configuration object.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config


def test_db_migration_upgrade_creates_badge_store_tables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Upgrade an empty database to head and downgrade back to base.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate created schema.

    Raises:
        AssertionError: Raised when tables or columns are missing.
    """

    database_url = f"sqlite:///{tmp_path / 'badge.db'}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    config = _migration_build_config()

    command.upgrade(config, "head")

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        assert {"application_status", "feature_setting"} <= set(inspector.get_table_names())
        status_columns = {column["name"] for column in inspector.get_columns("application_status")}
        assert {
            "application_name",
            "project_name",
            "health_status",
            "sync_status",
            "operation_sync_revision",
        } <= status_columns
        assert SQLAlchemyDatabaseHealthService(engine=engine).db_check_health().status == "ok"

        command.downgrade(config, "base")

        remaining_tables = set(inspect(engine).get_table_names())
        assert "application_status" not in remaining_tables
        assert "feature_setting" not in remaining_tables
    finally:
        engine.dispose()
