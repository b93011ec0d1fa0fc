"""Public client classes for the Ergast-compatible statistics API."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from f1ergast._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, Params
from f1ergast._params import Page, build_query_params, ensure_json_suffix
from f1ergast.exceptions import ErgastResponseError, ErgastValidationError
from f1ergast.models.race import Race
from f1ergast.models.season import Season

ENVELOPE_KEY = "MRData"


def _validate_list[T](model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise ErgastValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def unwrap_envelope(body: dict[str, Any]) -> dict[str, Any]:
    """Return the ``MRData`` object of an upstream response body."""
    inner = body.get(ENVELOPE_KEY)
    if not isinstance(inner, dict):
        raise ErgastResponseError(f"Response is missing the {ENVELOPE_KEY} envelope")
    return inner


def _table_items(data: dict[str, Any], table: str, key: str) -> list[dict[str, Any]]:
    """Pull ``data[table][key]`` out of an envelope, defaulting to an empty list."""
    items = (data.get(table) or {}).get(key) or []
    if not isinstance(items, list):
        raise ErgastResponseError(f"{table}.{key} is not a list")
    return items


class AsyncErgastClient:
    """Asynchronous client for the Ergast-compatible API.

    Usage:
        async with AsyncErgastClient() as ergast:
            races = await ergast.races(2023)
            quali = await ergast.qualifying(2023, races[0].round)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncErgastClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def fetch(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """GET ``path`` (``.json`` appended if absent) and return the MRData envelope."""
        body = await self._transport.get(ensure_json_suffix(path), params)
        return unwrap_envelope(body)

    async def _races(self, path: str, **kwargs: Any) -> list[Race]:
        data = await self.fetch(path, build_query_params(**kwargs))
        return _validate_list(Race, _table_items(data, "RaceTable", "Races"))

    # ── Endpoints ──────────────────────────────────────────────

    async def seasons(self, limit: int = 100) -> list[Season]:
        """Get championship seasons in upstream (chronological) order."""
        data = await self.fetch("seasons", build_query_params(page=Page(limit=limit)))
        return _validate_list(Season, _table_items(data, "SeasonTable", "Seasons"))

    async def races(self, season: int | str) -> list[Race]:
        """Get the race schedule of a season."""
        return await self._races(f"{season}")

    async def sprint_races(self, season: int | str) -> list[Race]:
        """Get the rounds of a season that held a sprint."""
        return await self._races(f"{season}/sprint")

    async def qualifying(self, season: int | str, round: int | str) -> list[Race]:
        """Get qualifying classification for one round."""
        return await self._races(f"{season}/{round}/qualifying")

    async def results(self, season: int | str, round: int | str) -> list[Race]:
        """Get race classification for one round."""
        return await self._races(f"{season}/{round}/results")

    async def sprint_results(self, season: int | str, round: int | str) -> list[Race]:
        """Get sprint classification for one round."""
        return await self._races(f"{season}/{round}/sprint")
