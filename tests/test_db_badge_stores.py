"""Tests for SQLAlchemy-backed status and feature setting stores.

These tests run against an in-memory SQLite engine created through the same
engine factory the runtime uses.
"""

from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy import Engine, text

from status_badge.badge import BadgeFeatureGate, BadgeService, BadgeStatusResolver, badge_parse_selector
from status_badge.db import (
    SQLAlchemyApplicationStatusService,
    SQLAlchemyDatabaseHealthService,
    SQLAlchemyFeatureSettingService,
    db_create_engine,
)
from status_badge.domain import EntityStatus, HealthCode, SyncCode


def _create_schema(engine: Engine) -> None:
    """Create badge store tables matching the baseline migration.

    Args:
        engine: Target engine.

    Returns:
        None: Tables are created as a side effect.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Raised when DDL execution fails.
    """

    with engine.begin() as connection:
        connection.execute(
            text(
                "CREATE TABLE application_status ("
                "application_name TEXT PRIMARY KEY, "
                "project_name TEXT NOT NULL, "
                "health_status TEXT NOT NULL, "
                "sync_status TEXT NOT NULL, "
                "operation_sync_revision TEXT NULL, "
                "updated_at_utc TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP)"
            )
        )
        connection.execute(
            text(
                "CREATE TABLE feature_setting ("
                "namespace TEXT NOT NULL, "
                "setting_key TEXT NOT NULL, "
                "setting_value TEXT NOT NULL, "
                "updated_at_utc TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP, "
                "PRIMARY KEY (namespace, setting_key))"
            )
        )


def _insert_application(
    engine: Engine,
    name: str,
    project: str,
    health: str,
    sync: str,
    revision: str | None,
) -> None:
    with engine.begin() as connection:
        connection.execute(
            text(
                "INSERT INTO application_status "
                "(application_name, project_name, health_status, sync_status, operation_sync_revision) "
                "VALUES (:name, :project, :health, :sync, :revision)"
            ),
            {"name": name, "project": project, "health": health, "sync": sync, "revision": revision},
        )


def _insert_setting(engine: Engine, namespace: str, key: str, value: str) -> None:
    with engine.begin() as connection:
        connection.execute(
            text("INSERT INTO feature_setting (namespace, setting_key, setting_value) VALUES (:namespace, :key, :value)"),
            {"namespace": namespace, "key": key, "value": value},
        )


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """Provide an in-memory engine with seeded badge store tables.

    Returns:
        Iterator[Engine]: SQLite engine shared by one test.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Raised when seeding fails.
    """

    database_engine = db_create_engine("sqlite:///:memory:")
    _create_schema(database_engine)
    _insert_application(database_engine, "testApp", "default", "Healthy", "Synced", "aa29b85")
    _insert_application(database_engine, "testApp2", "default", "Degraded", "OutOfSync", "bbbbbbbcccc")
    _insert_application(database_engine, "noRevision", "tools", "Progressing", "Synced", None)
    _insert_application(database_engine, "strange", "tools", "Exploded", "Drifted", "")
    _insert_setting(database_engine, "default", "statusbadge.enabled", "true")
    yield database_engine
    database_engine.dispose()


def test_db_application_status_get_entity(engine: Engine) -> None:
    """Read one application row as an entity status.

    Args:
        engine: Seeded engine fixture.

    Returns:
        None: Assertions validate row mapping.

    Raises:
        AssertionError: Raised when the row is misread.
    """

    service = SQLAlchemyApplicationStatusService(engine=engine)

    assert service.status_get_entity("testApp") == EntityStatus(
        entity_name="testApp",
        project_name="default",
        health=HealthCode.HEALTHY,
        sync_status=SyncCode.SYNCED,
        revision="aa29b85",
    )
    assert service.status_get_entity("missing") is None


def test_db_application_status_maps_unrecognized_values(engine: Engine) -> None:
    """Map unknown status text to Unknown and blank revisions to None."""

    service = SQLAlchemyApplicationStatusService(engine=engine)

    entity_status = service.status_get_entity("strange")

    assert entity_status.health is HealthCode.UNKNOWN
    assert entity_status.sync_status is SyncCode.UNKNOWN
    assert entity_status.revision is None


def test_db_application_status_list_projects_orders_by_name(engine: Engine) -> None:
    """List applications of the requested projects ordered by name."""

    service = SQLAlchemyApplicationStatusService(engine=engine)

    names = [item.entity_name for item in service.status_list_projects(("default", "tools"))]

    assert names == ["noRevision", "strange", "testApp", "testApp2"]
    assert service.status_list_projects(("nothing",)) == []
    assert service.status_list_projects(()) == []


def test_db_application_status_wraps_query_errors() -> None:
    """Raise RuntimeError when the table is missing."""

    service = SQLAlchemyApplicationStatusService(engine=db_create_engine("sqlite:///:memory:"))

    with pytest.raises(RuntimeError, match="failed to read application status"):
        service.status_get_entity("testApp")


def test_db_feature_setting_get_value(engine: Engine) -> None:
    """Read raw values for one namespace and key."""

    service = SQLAlchemyFeatureSettingService(engine=engine)

    assert service.config_get_value("default", "statusbadge.enabled") == "true"
    assert service.config_get_value("default", "statusbadge.revision.enabled") is None
    assert service.config_get_value("other", "statusbadge.enabled") is None


def test_db_feature_setting_failure_keeps_gate_closed() -> None:
    """Read a missing settings table as a disabled badge."""

    gate = BadgeFeatureGate(SQLAlchemyFeatureSettingService(engine=db_create_engine("sqlite:///:memory:")))

    assert gate.badge_is_enabled("default") is False


def test_db_stores_drive_badge_service(engine: Engine) -> None:
    """Render a project badge end to end from database-backed stores."""

    _insert_setting(engine, "default", "statusbadge.revision.enabled", "true")
    badge_service = BadgeService(
        feature_gate=BadgeFeatureGate(SQLAlchemyFeatureSettingService(engine=engine)),
        status_resolver=BadgeStatusResolver(SQLAlchemyApplicationStatusService(engine=engine)),
        namespace="default",
    )

    rendered_badge = badge_service.badge_build(
        selector=badge_parse_selector(entity_name=None, project_names=["default"]),
        revision_requested=True,
    )
    document = rendered_badge.content.decode("utf-8")

    assert '<text id="leftText" x="' in document
    assert ">Degraded</text>" in document
    assert ">OutOfSync</text>" in document
    assert "(bbbbbbb)" in document
    assert rendered_badge.headers == {"Cache-Control": "private, no-store"}


def test_db_health_reports_missing_tables() -> None:
    """Report an incomplete schema when badge tables do not exist."""

    service = SQLAlchemyDatabaseHealthService(engine=db_create_engine("sqlite:///:memory:"))

    health = service.db_check_health()

    assert health.status == "schema_incomplete"
    assert "application_status" in health.detail


def test_db_health_reports_ok_with_schema(engine: Engine) -> None:
    """Report ok once both badge tables exist."""

    service = SQLAlchemyDatabaseHealthService(engine=engine)

    assert service.db_check_health().status == "ok"
    assert service.db_connection_label() == "sqlite:///:memory:"
