"""Database service for read-only application status lookups."""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import Engine, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from status_badge.badge.interfaces import StatusStorePort
from status_badge.domain import EntityStatus, domain_parse_health_code, domain_parse_sync_code

_STATUS_COLUMNS = (
    "application_name, project_name, health_status, sync_status, operation_sync_revision"
)


class SQLAlchemyApplicationStatusService(StatusStorePort):
    """SQLAlchemy-backed application status store.

    Rows in `application_status` are written by the external sync process;
    this service only reads them.
    """

    def __init__(self, engine: Engine):
        """Initialize application status service.

        Args:
            engine: SQLAlchemy engine used for all lookups.

        Returns:
            None: This initializer does not return a value.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def status_source_name(self) -> str:
        """Return stable source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "database"

    def status_get_entity(self, entity_name: str) -> EntityStatus | None:
        """Return status of one application by name.

        Args:
            entity_name: Application name.

        Returns:
            EntityStatus | None: Status snapshot, or None when no row exists.

        Raises:
            ValueError: Raised when entity_name is blank.
            RuntimeError: Raised when the query fails.
        """

        normalized_entity_name = entity_name.strip()
        if not normalized_entity_name:
            raise ValueError("entity_name must not be blank")

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(
                        f"SELECT {_STATUS_COLUMNS} "
                        "FROM application_status "
                        "WHERE application_name = :application_name"
                    ),
                    {"application_name": normalized_entity_name},
                ).mappings().first()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to read application status") from error

        if row is None:
            return None
        return self._db_map_status_row(row)

    def status_list_projects(self, project_names: tuple[str, ...]) -> list[EntityStatus]:
        """Return status of every application in the given projects.

        Rows are ordered by application name so aggregation tie-breaks are stable.

        Args:
            project_names: Project names to match.

        Returns:
            list[EntityStatus]: Matching status snapshots.

        Raises:
            RuntimeError: Raised when the query fails.
        """

        normalized_project_names = sorted({name.strip() for name in project_names if name.strip()})
        if not normalized_project_names:
            return []

        statement = text(
            f"SELECT {_STATUS_COLUMNS} "
            "FROM application_status "
            "WHERE project_name IN :project_names "
            "ORDER BY application_name ASC"
        ).bindparams(bindparam("project_names", expanding=True))

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(statement, {"project_names": normalized_project_names}).mappings().all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list application statuses") from error

        return [self._db_map_status_row(row) for row in rows]

    def _db_map_status_row(self, row: Mapping[str, Any]) -> EntityStatus:
        """Map one `application_status` row to an entity status.

        Args:
            row: Result row mapping.

        Returns:
            EntityStatus: Parsed status snapshot; blank revisions become None.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        revision = row["operation_sync_revision"]
        return EntityStatus(
            entity_name=str(row["application_name"]),
            project_name=str(row["project_name"]),
            health=domain_parse_health_code(row["health_status"]),
            sync_status=domain_parse_sync_code(row["sync_status"]),
            revision=str(revision) if revision else None,
        )
