"""Pure extraction of races and standings from aggregator payloads (no Streamlit dependency)."""

from __future__ import annotations

import math

from pydantic import ValidationError

from f1ergast.models.standings import ConstructorStanding, DriverStanding, StandingsList


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def has_valid_location(race: dict) -> bool:
    """True if the race carries a [longitude, latitude] pair of numbers."""
    location = race.get("location")
    return (
        isinstance(location, (list, tuple))
        and len(location) == 2
        and all(_is_number(c) for c in location)
    )


def extract_races(payload: dict) -> list[dict]:
    """Races from a race-table payload, dropping entries without a usable location."""
    races = (payload.get("RaceTable") or {}).get("Races") or []
    return [race for race in races if isinstance(race, dict) and has_valid_location(race)]


def _first_standings_list(payload: dict) -> StandingsList | None:
    lists = (payload.get("StandingsTable") or {}).get("StandingsLists") or []
    if not lists:
        return None
    try:
        return StandingsList.model_validate(lists[0])
    except ValidationError:
        return None


def extract_driver_standings(payload: dict) -> list[DriverStanding]:
    standings = _first_standings_list(payload)
    return list(standings.driver_standings) if standings else []


def extract_constructor_standings(payload: dict) -> list[ConstructorStanding]:
    standings = _first_standings_list(payload)
    return list(standings.constructor_standings) if standings else []


def driver_rows(standings: list[DriverStanding]) -> list[dict]:
    """Table rows: position, full driver name, points, wins."""
    return [
        {
            "Pos": s.position,
            "Driver": s.driver.full_name if s.driver else "",
            "Points": s.points,
            "Wins": s.wins,
        }
        for s in standings
    ]


def constructor_rows(standings: list[ConstructorStanding]) -> list[dict]:
    """Table rows: position, constructor name, points, wins."""
    return [
        {
            "Pos": s.position,
            "Constructor": s.constructor.name if s.constructor else "",
            "Points": s.points,
            "Wins": s.wins,
        }
        for s in standings
    ]
