"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from f1ergast.exceptions import (
    ErgastAPIError,
    ErgastConnectionError,
    ErgastResponseError,
    ErgastTimeoutError,
)

DEFAULT_BASE_URL = "https://api.jolpi.ca/ergast/f1"
DEFAULT_TIMEOUT = 30.0

Params = list[tuple[str, str]]


def _error_message(response: httpx.Response) -> str:
    """Prefer the ``error`` field of a JSON error body over the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed JSON object."""
    if response.status_code >= 400:
        raise ErgastAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    try:
        body = response.json()
    except ValueError as exc:
        raise ErgastResponseError(f"Invalid JSON from {response.url}: {exc}") from exc
    if not isinstance(body, dict):
        raise ErgastResponseError(
            f"Expected a JSON object from {response.url}, got {type(body).__name__}"
        )
    return body


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(path, params=params or [])
        except httpx.TimeoutException as exc:
            raise ErgastTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise ErgastConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(path, params=params or [])
        except httpx.TimeoutException as exc:
            raise ErgastTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise ErgastConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
