"""f1ergast — Typed Python client for the Ergast-compatible F1 statistics API."""

from f1ergast._params import Page
from f1ergast.client import AsyncErgastClient
from f1ergast.exceptions import (
    ErgastAPIError,
    ErgastConnectionError,
    ErgastError,
    ErgastResponseError,
    ErgastTimeoutError,
    ErgastValidationError,
)

__all__ = [
    "AsyncErgastClient",
    "ErgastAPIError",
    "ErgastConnectionError",
    "ErgastError",
    "ErgastResponseError",
    "ErgastTimeoutError",
    "ErgastValidationError",
    "Page",
]

__version__ = "0.1.0"
