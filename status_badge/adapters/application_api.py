"""Application API adapter implementation for status lookups over HTTP."""

from __future__ import annotations

from typing import Any, Final
from urllib.parse import quote

import httpx

from status_badge.badge.interfaces import StatusStorePort
from status_badge.domain import EntityStatus, domain_parse_application_document

from .application_api_errors import (
    ApplicationApiConnectionError,
    ApplicationApiResponseError,
    ApplicationApiTimeoutError,
)


class ApplicationApiStatusAdapter(StatusStorePort):
    """Status store reading application documents from an application API.

    Endpoints:
        `GET {base_url}/api/v1/applications/{name}` returns one document or 404.
        `GET {base_url}/api/v1/applications?projects=a&projects=b` returns `{"items": [...]}`.
    """

    _USER_AGENT: Final[str] = "status-badge/1.0 (Python/httpx)"
    _APPLICATIONS_PATH: Final[str] = "/api/v1/applications"

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        request_timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize application API adapter.

        Args:
            base_url: Base URL of the application API.
            token: Optional bearer token.
            request_timeout_seconds: HTTP request timeout in seconds.
            transport: Optional httpx transport override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_base_url = (base_url or "").strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        headers = {"User-Agent": self._USER_AGENT, "Accept": "application/json"}
        normalized_token = (token or "").strip()
        if normalized_token:
            headers["Authorization"] = f"Bearer {normalized_token}"

        self._base_url = normalized_base_url.rstrip("/")
        self._headers = headers
        self._request_timeout_seconds = request_timeout_seconds
        self._transport = transport

    def status_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "application_api"

    def status_get_entity(self, entity_name: str) -> EntityStatus | None:
        """Fetch one application document by name.

        Args:
            entity_name: Application name.

        Returns:
            EntityStatus | None: Parsed status, or None when the API answers 404.

        Raises:
            ValueError: Raised when entity_name is blank.
            ConnectionError: Raised for transport failures and non-success HTTP status.
            TimeoutError: Raised when the request times out.
            RuntimeError: Raised when the payload is not a valid application document.
        """

        normalized_entity_name = entity_name.strip()
        if not normalized_entity_name:
            raise ValueError("entity_name must not be blank")

        url = f"{self._base_url}{self._APPLICATIONS_PATH}/{quote(normalized_entity_name, safe='')}"
        payload = self._adapter_http_get_json(url=url, query_parameters=None, allow_not_found=True)
        if payload is None:
            return None
        return self._adapter_parse_document(payload)

    def status_list_projects(self, project_names: tuple[str, ...]) -> list[EntityStatus]:
        """Fetch every application document in the given projects.

        Args:
            project_names: Project names to match.

        Returns:
            list[EntityStatus]: Parsed statuses in API order.

        Raises:
            ConnectionError: Raised for transport failures and non-success HTTP status.
            TimeoutError: Raised when the request times out.
            RuntimeError: Raised when the payload violates the list contract.
        """

        normalized_project_names = [name.strip() for name in project_names if name.strip()]
        if not normalized_project_names:
            return []

        payload = self._adapter_http_get_json(
            url=f"{self._base_url}{self._APPLICATIONS_PATH}",
            query_parameters=[("projects", project_name) for project_name in normalized_project_names],
            allow_not_found=False,
        )
        if not isinstance(payload, dict):
            raise ApplicationApiResponseError("application list response must be a JSON object")

        items = payload.get("items") or []
        if not isinstance(items, list):
            raise ApplicationApiResponseError("application list response `items` must be a list")
        return [self._adapter_parse_document(item) for item in items]

    def _adapter_http_get_json(
        self,
        url: str,
        query_parameters: list[tuple[str, str]] | None,
        allow_not_found: bool,
    ) -> Any:
        """Execute one HTTP GET and decode the JSON payload.

        Args:
            url: Endpoint URL.
            query_parameters: Optional query string parameters.
            allow_not_found: Return None instead of raising on HTTP 404.

        Returns:
            Any: Decoded JSON payload, or None for an allowed 404.

        Raises:
            ApplicationApiConnectionError: Raised for network and non-success HTTP status.
            ApplicationApiTimeoutError: Raised when the request times out.
            ApplicationApiResponseError: Raised when the body is not JSON.
        """

        try:
            with httpx.Client(
                headers=self._headers,
                timeout=self._request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(url, params=query_parameters)
        except httpx.TimeoutException as error:
            raise ApplicationApiTimeoutError("application API request timed out") from error
        except httpx.HTTPError as error:
            raise ApplicationApiConnectionError("application API request failed") from error

        if response.status_code == httpx.codes.NOT_FOUND and allow_not_found:
            return None
        if response.status_code >= 400:
            raise ApplicationApiConnectionError(
                f"application API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as error:
            raise ApplicationApiResponseError("application API returned a non-JSON payload") from error

    def _adapter_parse_document(self, document: Any) -> EntityStatus:
        try:
            return domain_parse_application_document(document)
        except ValueError as error:
            raise ApplicationApiResponseError(f"invalid application document: {error}") from error
