"""Race enrichment: attach pole position and winner to each race of a season.

One listing call is followed by per-round fetches for every race. The per-round
fetches run concurrently, bounded by a semaphore per aggregate request, and the
whole aggregate fails if any one of them fails.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from f1ergast import AsyncErgastClient
from f1ergast._http import Params
from f1ergast.models.race import Race

from raceglobe.api_logging import log_api_call, log_service_call
from raceglobe.catalog import DEFAULT_SEASON
from raceglobe.schemas import NOT_APPLICABLE, UNKNOWN, RaceSummary, race_table

logger = logging.getLogger(__name__)

SEASONS_LIMIT = 100

# (pole position, winner)
Enrichment = tuple[str, str]


def _first_error(group: BaseExceptionGroup) -> BaseException:
    exc = group.exceptions[0]
    return _first_error(exc) if isinstance(exc, BaseExceptionGroup) else exc


class RaceAggregator:
    """Aggregating operations over one shared upstream client.

    Holds no per-request state; each call builds its own concurrency limit.
    """

    def __init__(self, client: AsyncErgastClient, max_concurrency: int = 8) -> None:
        self._client = client
        self._max_concurrency = max_concurrency

    @log_api_call
    async def proxy(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """Forward one GET upstream and return its MRData envelope unchanged."""
        return await self._client.fetch(path, params)

    @log_service_call
    async def seasons(self) -> dict[str, Any]:
        seasons = await self._client.seasons(limit=SEASONS_LIMIT)
        return {
            "SeasonTable": {
                "Seasons": [{"season": s.season, "url": s.url} for s in seasons],
            },
        }

    @log_service_call
    async def season_races(self, season: str = DEFAULT_SEASON) -> dict[str, Any]:
        """Races of a season with pole sitter and winner."""
        races = await self._client.races(season)
        enrichments = await self._enrich_all(
            races, lambda race, limit: self._standard_enrichment(season, race, limit),
        )
        return self._summarise(races, enrichments)

    async def current_races(self) -> dict[str, Any]:
        return await self.season_races(DEFAULT_SEASON)

    @log_service_call
    async def sprint_races(self, season: str) -> dict[str, Any]:
        """Sprint rounds of a season with sprint winner; pole is always N/A."""
        races = await self._client.sprint_races(season)
        enrichments = await self._enrich_all(
            races, lambda race, limit: self._sprint_enrichment(season, race, limit),
        )
        return self._summarise(races, enrichments)

    # ── Internals ──────────────────────────────────────────────

    async def _enrich_all(
        self,
        races: list[Race],
        enrich: Callable[[Race, asyncio.Semaphore], Awaitable[Enrichment]],
    ) -> list[Enrichment]:
        limit = asyncio.Semaphore(self._max_concurrency)
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(enrich(race, limit)) for race in races]
        except ExceptionGroup as exc_group:
            error = _first_error(exc_group)
            logger.warning("Enrichment of %d races failed: %s", len(races), error)
            raise error from None
        return [task.result() for task in tasks]

    async def _limited[T](
        self, limit: asyncio.Semaphore, fetch: Callable[..., Awaitable[T]], *args: Any,
    ) -> T:
        async with limit:
            return await fetch(*args)

    async def _standard_enrichment(
        self, season: str, race: Race, limit: asyncio.Semaphore,
    ) -> Enrichment:
        if not race.round:
            return UNKNOWN, UNKNOWN
        async with asyncio.TaskGroup() as group:
            qualifying = group.create_task(
                self._limited(limit, self._client.qualifying, season, race.round),
            )
            results = group.create_task(
                self._limited(limit, self._client.results, season, race.round),
            )
        pole = _first_or_none(qualifying.result(), lambda r: r.pole_sitter)
        winner = _first_or_none(results.result(), lambda r: r.winner)
        return pole or UNKNOWN, winner or UNKNOWN

    async def _sprint_enrichment(
        self, season: str, race: Race, limit: asyncio.Semaphore,
    ) -> Enrichment:
        if not race.round:
            return NOT_APPLICABLE, UNKNOWN
        sprint = await self._limited(limit, self._client.sprint_results, season, race.round)
        return NOT_APPLICABLE, _first_or_none(sprint, lambda r: r.sprint_winner) or UNKNOWN

    @staticmethod
    def _summarise(races: list[Race], enrichments: list[Enrichment]) -> dict[str, Any]:
        summaries = [
            RaceSummary.from_race(race, pole, winner)
            for race, (pole, winner) in zip(races, enrichments)
        ]
        return race_table([s for s in summaries if s is not None])


def _first_or_none(races: list[Race], pick: Callable[[Race], str | None]) -> str | None:
    return pick(races[0]) if races else None
