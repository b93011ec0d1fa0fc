"""Synchronous client for the race globe aggregator."""

from __future__ import annotations

from typing import Any

from f1ergast._http import DEFAULT_TIMEOUT, SyncTransport
from raceglobe.api_logging import log_api_call

from .constants import API_BASE
from .view_state import ViewMode


class AggregatorClient:
    """Thin wrapper over the aggregator's JSON routes.

    Usage:
        with AggregatorClient() as api:
            payload = api.fetch_view(ViewMode.RACES, "2023")

    Failures surface as ``f1ergast.ErgastError`` subclasses; an aggregator
    500 carries its ``error`` message.
    """

    def __init__(self, base_url: str = API_BASE, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> AggregatorClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @log_api_call
    def seasons(self) -> dict[str, Any]:
        return self._transport.get("/seasons.json")

    @log_api_call
    def races(self, season: str) -> dict[str, Any]:
        return self._transport.get(f"/{season}/races.json")

    @log_api_call
    def sprint_races(self, season: str) -> dict[str, Any]:
        return self._transport.get(f"/{season}/sprint/races.json")

    @log_api_call
    def driver_standings(self, season: str) -> dict[str, Any]:
        return self._transport.get(f"/{season}/driverstandings.json")

    @log_api_call
    def constructor_standings(self, season: str) -> dict[str, Any]:
        return self._transport.get(f"/{season}/constructorstandings.json")

    def fetch_view(self, view_mode: ViewMode, season: str) -> dict[str, Any]:
        """Fetch the payload backing a view mode."""
        match view_mode:
            case ViewMode.SPRINT:
                return self.sprint_races(season)
            case ViewMode.DRIVER:
                return self.driver_standings(season)
            case ViewMode.CONSTRUCTOR:
                return self.constructor_standings(season)
            case _:
                return self.races(season)
