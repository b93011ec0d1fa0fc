"""Per-session classification models (qualifying, race, sprint)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1ergast.models.driver import Constructor, Driver


class QualifyingResult(BaseModel):
    """Qualifying classification entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    number: str | None = None
    position: str | None = None
    driver: Driver | None = Field(None, alias="Driver")
    constructor: Constructor | None = Field(None, alias="Constructor")
    q1: str | None = Field(None, alias="Q1")
    q2: str | None = Field(None, alias="Q2")
    q3: str | None = Field(None, alias="Q3")


class RaceResult(BaseModel):
    """Grand Prix classification entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    number: str | None = None
    position: str | None = None
    position_text: str | None = Field(None, alias="positionText")
    points: str | None = None
    driver: Driver | None = Field(None, alias="Driver")
    constructor: Constructor | None = Field(None, alias="Constructor")
    grid: str | None = None
    laps: str | None = None
    status: str | None = None


class SprintResult(RaceResult):
    """Sprint classification entry. Same shape as a race result."""
