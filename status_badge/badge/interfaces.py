"""Typed interfaces for the stores consumed by badge composition."""

from typing import Protocol

from status_badge.domain import EntityStatus


class StatusStorePort(Protocol):
    """Port definition for read-only application status lookups."""

    def status_source_name(self) -> str:
        """Return store source identifier for diagnostics.

        Returns:
            str: Human-readable status source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def status_get_entity(self, entity_name: str) -> EntityStatus | None:
        """Return status of one application by name.

        Args:
            entity_name: Application name.

        Returns:
            EntityStatus | None: Status snapshot, or None when the application does not exist.

        Raises:
            ConnectionError: Raised when the store cannot be reached.
            TimeoutError: Raised when the lookup exceeds its timeout.
            RuntimeError: Raised when the lookup fails unexpectedly.
        """

    def status_list_projects(self, project_names: tuple[str, ...]) -> list[EntityStatus]:
        """Return status of every application belonging to one of the projects.

        Args:
            project_names: Project names to match.

        Returns:
            list[EntityStatus]: Matching status snapshots in store iteration order.

        Raises:
            ConnectionError: Raised when the store cannot be reached.
            TimeoutError: Raised when the lookup exceeds its timeout.
            RuntimeError: Raised when the lookup fails unexpectedly.
        """


class FeatureConfigPort(Protocol):
    """Port definition for read-only feature configuration lookups."""

    def config_get_value(self, namespace: str, key: str) -> str | None:
        """Return the raw value of one named setting.

        Args:
            namespace: Namespace owning the setting.
            key: Setting key.

        Returns:
            str | None: Raw value, or None when the setting is absent.

        Raises:
            ConnectionError: Raised when the store cannot be reached.
            RuntimeError: Raised when the lookup fails unexpectedly.
        """
