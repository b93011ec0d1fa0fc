"""View state for the race globe page (no Streamlit dependency).

Every season or view-mode change starts a new fetch generation. A response is
applied only if it carries the token of the current generation, so a slow
response for an old selection never overwrites fresher data.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum

from f1ergast.models.standings import ConstructorStanding, DriverStanding

from .standings import extract_constructor_standings, extract_driver_standings, extract_races

SEASONS_ERROR = "Failed to load seasons"


class ViewMode(str, Enum):
    """What the page shows for the selected season."""

    RACES = "races"
    SPRINT = "sprint"
    DRIVER = "driver"
    CONSTRUCTOR = "constructor"

    @property
    def label(self) -> str:
        return {
            ViewMode.RACES: "Races",
            ViewMode.SPRINT: "Sprint",
            ViewMode.DRIVER: "Drivers",
            ViewMode.CONSTRUCTOR: "Constructors",
        }[self]

    @property
    def shows_globe(self) -> bool:
        return self in (ViewMode.RACES, ViewMode.SPRINT)


@dataclass
class ViewState:
    season: str | None = None
    view_mode: ViewMode = ViewMode.RACES
    seasons: list[str] = field(default_factory=list)
    selected_race: dict | None = None
    loading: bool = False
    error: str | None = None
    seasons_error: str | None = None
    races: list[dict] = field(default_factory=list)
    driver_standings: list[DriverStanding] = field(default_factory=list)
    constructor_standings: list[ConstructorStanding] = field(default_factory=list)
    generation: int = 0
    loaded: tuple[str, ViewMode] | None = None

    # ── Seasons ────────────────────────────────────────────────

    def load_seasons(self, payload: dict) -> None:
        """Newest season first; default to it, or to the current year if none."""
        seasons = (payload.get("SeasonTable") or {}).get("Seasons") or []
        self.seasons = [str(s["season"]) for s in reversed(seasons) if s.get("season")]
        self._set_default_season()

    def fail_seasons(self) -> None:
        """Fall back to the current year; the banner outlives later fetch cycles."""
        self.seasons_error = SEASONS_ERROR
        self._set_default_season()

    @property
    def errors(self) -> list[str]:
        """Banner messages: the seasons failure, then the last fetch failure."""
        return [e for e in (self.seasons_error, self.error) if e]

    def _set_default_season(self) -> None:
        if self.season is None:
            self.season = self.seasons[0] if self.seasons else str(datetime.date.today().year)

    # ── User interaction ───────────────────────────────────────

    def set_season(self, season: str) -> None:
        if season != self.season:
            self.season = season
            self._invalidate()

    def set_view_mode(self, view_mode: ViewMode) -> None:
        if view_mode != self.view_mode:
            self.view_mode = view_mode
            self._invalidate()

    def _invalidate(self) -> None:
        self.generation += 1
        self.loading = False
        self.selected_race = None

    def select_race(self, name: str | None) -> dict | None:
        self.selected_race = next((r for r in self.races if r.get("name") == name), None)
        return self.selected_race

    def close_race(self) -> None:
        self.selected_race = None

    # ── Fetch cycle ────────────────────────────────────────────

    @property
    def needs_fetch(self) -> bool:
        return self.season is not None and self.loaded != (self.season, self.view_mode)

    def begin_fetch(self) -> int:
        self.generation += 1
        self.loading = True
        self.error = None
        return self.generation

    def complete_fetch(self, token: int, payload: dict) -> bool:
        """Apply a response; returns False (and changes nothing) if it is stale."""
        if token != self.generation:
            return False
        if self.view_mode.shows_globe:
            self.races = extract_races(payload)
        elif self.view_mode == ViewMode.DRIVER:
            self.driver_standings = extract_driver_standings(payload)
        else:
            self.constructor_standings = extract_constructor_standings(payload)
        self._finish()
        return True

    def fail_fetch(self, token: int, message: str) -> bool:
        """Record an error; previously displayed data is left as it was."""
        if token != self.generation:
            return False
        self.error = message
        self._finish()
        return True

    def _finish(self) -> None:
        self.loading = False
        self.loaded = (self.season, self.view_mode)  # type: ignore[assignment]
