"""Status resolution and worst-case aggregation for badge selectors."""

from __future__ import annotations

import logging
from typing import Final, Iterable

from status_badge.domain import AggregateStatus, BadgeSelector, EntityStatus, HealthCode, SyncCode

from .interfaces import StatusStorePort

# Worst first. Every enum member appears exactly once.
HEALTH_SEVERITY_ORDER: Final[tuple[HealthCode, ...]] = (
    HealthCode.UNKNOWN,
    HealthCode.DEGRADED,
    HealthCode.PROGRESSING,
    HealthCode.SUSPENDED,
    HealthCode.MISSING,
    HealthCode.HEALTHY,
)
SYNC_SEVERITY_ORDER: Final[tuple[SyncCode, ...]] = (
    SyncCode.OUT_OF_SYNC,
    SyncCode.SYNCED,
    SyncCode.UNKNOWN,
)

_HEALTH_RANK: Final[dict[HealthCode, int]] = {code: rank for rank, code in enumerate(HEALTH_SEVERITY_ORDER)}
_SYNC_RANK: Final[dict[SyncCode, int]] = {code: rank for rank, code in enumerate(SYNC_SEVERITY_ORDER)}

logger = logging.getLogger(__name__)


def badge_reduce_statuses(statuses: Iterable[EntityStatus]) -> AggregateStatus | None:
    """Reduce entity statuses to one worst-case aggregate.

    Health and sync are reduced independently using `HEALTH_SEVERITY_ORDER`
    and `SYNC_SEVERITY_ORDER`. Ties keep the first worst entity encountered.
    The revision is taken from the entity that decided the dominant health.

    Args:
        statuses: Entity statuses in store iteration order.

    Returns:
        AggregateStatus | None: Aggregate outcome, or None when no statuses were given.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    worst_health_entity: EntityStatus | None = None
    worst_sync_status: SyncCode | None = None
    entity_count = 0

    for entity_status in statuses:
        entity_count += 1
        if worst_health_entity is None or _HEALTH_RANK[entity_status.health] < _HEALTH_RANK[worst_health_entity.health]:
            worst_health_entity = entity_status
        if worst_sync_status is None or _SYNC_RANK[entity_status.sync_status] < _SYNC_RANK[worst_sync_status]:
            worst_sync_status = entity_status.sync_status

    if worst_health_entity is None or worst_sync_status is None:
        return None

    return AggregateStatus(
        health=worst_health_entity.health,
        sync_status=worst_sync_status,
        revision=worst_health_entity.revision,
        entity_count=entity_count,
    )


class BadgeStatusResolver:
    """Resolve a badge selector to one aggregate status through the status store."""

    def __init__(self, status_store: StatusStorePort):
        """Initialize status resolver.

        Args:
            status_store: Application status store.

        Raises:
            ValueError: Raised when status_store is None.
        """

        if status_store is None:
            raise ValueError("status_store must not be None")
        self._status_store = status_store

    def badge_resolve(self, selector: BadgeSelector) -> AggregateStatus | None:
        """Resolve selector to an aggregate status.

        Lookup failures are logged and reported as not found; they are never
        retried.

        Args:
            selector: Parsed badge selector.

        Returns:
            AggregateStatus | None: Aggregate status, or None when nothing matched.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        if selector.selector_is_empty:
            return None

        try:
            if selector.entity_name is not None:
                entity_status = self._status_store.status_get_entity(entity_name=selector.entity_name)
                if entity_status is None:
                    return None
                return badge_reduce_statuses([entity_status])

            project_statuses = self._status_store.status_list_projects(project_names=selector.project_names)
        except (ConnectionError, TimeoutError, RuntimeError, ValueError) as error:
            logger.warning(
                "status lookup failed source=%s name=%s projects=%s: %s",
                self._status_store.status_source_name(),
                selector.entity_name,
                ",".join(selector.project_names),
                error,
            )
            return None

        matched_statuses = [item for item in project_statuses if item.project_name in selector.project_names]
        return badge_reduce_statuses(matched_statuses)
