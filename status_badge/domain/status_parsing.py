"""Parsing helpers turning raw store values into domain status contracts."""

from __future__ import annotations

from typing import Any, Final

from .models import EntityStatus, HealthCode, SyncCode

_TRUE_FLAG_VALUES: Final[frozenset[str]] = frozenset({"1", "t", "true", "yes", "on"})


def domain_parse_health_code(value: str | None) -> HealthCode:
    """Parse a raw health string, mapping unrecognized values to `Unknown`.

    Args:
        value: Raw health text from a status store.

    Returns:
        HealthCode: Parsed health code.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_value = (value or "").strip()
    for health_code in HealthCode:
        if health_code.value == normalized_value:
            return health_code
    return HealthCode.UNKNOWN


def domain_parse_sync_code(value: str | None) -> SyncCode:
    """Parse a raw sync string, mapping unrecognized values to `Unknown`.

    Args:
        value: Raw sync text from a status store.

    Returns:
        SyncCode: Parsed sync code.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    normalized_value = (value or "").strip()
    for sync_code in SyncCode:
        if sync_code.value == normalized_value:
            return sync_code
    return SyncCode.UNKNOWN


def domain_parse_bool_flag(value: str | None) -> bool:
    """Parse a boolean-ish flag value. Absent or unrecognized text is False."""

    if value is None:
        return False
    return value.strip().lower() in _TRUE_FLAG_VALUES


def _domain_object(value: Any) -> dict[str, Any]:
    """Return a nested JSON object, or an empty mapping for any other shape."""

    return value if isinstance(value, dict) else {}


def _domain_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def domain_parse_application_document(document: dict[str, Any]) -> EntityStatus:
    """Build an entity status from one application API document.

    Expected shape::

        {
            "metadata": {"name": "guestbook"},
            "spec": {"project": "default"},
            "status": {
                "health": {"status": "Healthy"},
                "sync": {"status": "Synced"},
                "operationState": {"syncResult": {"revision": "aa29b85"}},
            },
        }

    A missing `operationState` or `syncResult` yields no revision. Nested
    values of the wrong JSON type are read as absent.

    Args:
        document: Decoded application JSON document.

    Returns:
        EntityStatus: Parsed status snapshot.

    Raises:
        ValueError: Raised when the document has no application name.
    """

    if not isinstance(document, dict):
        raise ValueError("application document must be a JSON object")

    metadata = _domain_object(document.get("metadata"))
    spec = _domain_object(document.get("spec"))
    status = _domain_object(document.get("status"))

    entity_name = _domain_text(metadata.get("name"))
    if not entity_name:
        raise ValueError("application document is missing metadata.name")

    operation_state = _domain_object(status.get("operationState"))
    sync_result = _domain_object(operation_state.get("syncResult"))

    return EntityStatus(
        entity_name=entity_name,
        project_name=_domain_text(spec.get("project")),
        health=domain_parse_health_code(_domain_text(_domain_object(status.get("health")).get("status"))),
        sync_status=domain_parse_sync_code(_domain_text(_domain_object(status.get("sync")).get("status"))),
        revision=_domain_text(sync_result.get("revision")) or None,
    )
