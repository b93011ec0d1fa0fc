"""Response shapes produced by the aggregating routes."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from f1ergast.models.race import Race

UNKNOWN = "Unknown"
NOT_APPLICABLE = "N/A"


def parse_coordinate(value: object) -> float | None:
    """Parse an upstream coordinate string; None unless it is a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class RaceSummary(BaseModel):
    """Denormalized race entry shown on the globe."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    country: str
    location: tuple[float, float]  # (longitude, latitude)
    pole_position: str = Field(UNKNOWN, alias="polePosition")
    winner: str = UNKNOWN

    @classmethod
    def from_race(cls, race: Race, pole_position: str, winner: str) -> RaceSummary | None:
        """Build a summary, or None if the race lacks a name, country or usable location."""
        location = race.circuit.location if race.circuit else None
        lng = parse_coordinate(location.long) if location else None
        lat = parse_coordinate(location.lat) if location else None
        if lng is None or lat is None or not race.race_name or not race.country:
            return None
        return cls(
            name=race.race_name,
            country=race.country,
            location=(lng, lat),
            pole_position=pole_position,
            winner=winner,
        )


def race_table(races: list[RaceSummary]) -> dict:
    """Wrap summaries in the standard race-table envelope."""
    return {"RaceTable": {"Races": [r.model_dump(by_alias=True, mode="json") for r in races]}}
