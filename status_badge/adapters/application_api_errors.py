"""Project-native typed exceptions for application API adapter failures."""

from __future__ import annotations


class ApplicationApiError(Exception):
    """Base exception for adapter-level application API failures.

    Attributes:
        status_code: Optional upstream HTTP status code.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApplicationApiConnectionError(ApplicationApiError, ConnectionError):
    """Transport-level failure or non-success HTTP status from the application API."""


class ApplicationApiTimeoutError(ApplicationApiError, TimeoutError):
    """Request to the application API exceeded its timeout."""


class ApplicationApiResponseError(ApplicationApiError, RuntimeError):
    """Application API returned a payload that violates the expected contract."""
