"""Custom exceptions for the dashboard API client."""

from __future__ import annotations


class DashboardAPIError(Exception):
    """Base exception for dashboard API errors."""


class DashboardAuthenticationError(DashboardAPIError):
    """401 - Invalid or missing API token."""


class DashboardPermissionError(DashboardAPIError):
    """403 - Authenticated but not allowed to touch this project."""


class DashboardNotFoundError(DashboardAPIError):
    """404 - Resource not found."""


class DashboardValidationError(DashboardAPIError):
    """422 - Validation error with details."""

    def __init__(self, details: dict) -> None:
        self.details = details
        super().__init__(str(details))


class DashboardRateLimitError(DashboardAPIError):
    """429 - Rate limit exceeded."""
