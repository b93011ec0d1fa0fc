"""Custom exceptions for the Ergast client."""

from __future__ import annotations


class ErgastError(Exception):
    """Base exception for all Ergast client errors."""


class ErgastConnectionError(ErgastError):
    """Raised when the client cannot connect to the API."""


class ErgastTimeoutError(ErgastError):
    """Raised when a request to the API times out."""


class ErgastAPIError(ErgastError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ErgastResponseError(ErgastError):
    """Raised when a response body is not the JSON object we expect."""


class ErgastValidationError(ErgastError):
    """Raised when API response data fails model validation."""
