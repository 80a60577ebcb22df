"""Adapter layer package for upstream application API boundaries."""

from .application_api import ApplicationApiStatusAdapter
from .application_api_errors import (
    ApplicationApiConnectionError,
    ApplicationApiError,
    ApplicationApiResponseError,
    ApplicationApiTimeoutError,
)

__all__ = [
    "ApplicationApiConnectionError",
    "ApplicationApiError",
    "ApplicationApiResponseError",
    "ApplicationApiStatusAdapter",
    "ApplicationApiTimeoutError",
]
