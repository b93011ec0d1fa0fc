"""Championship standings models (drivers and constructors)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1ergast.models.driver import Constructor, Driver


class DriverStanding(BaseModel):
    """Driver championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    position: str | None = None
    position_text: str | None = Field(None, alias="positionText")
    points: str | None = None
    wins: str | None = None
    driver: Driver | None = Field(None, alias="Driver")
    constructors: list[Constructor] = Field(default_factory=list, alias="Constructors")


class ConstructorStanding(BaseModel):
    """Constructor championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    position: str | None = None
    position_text: str | None = Field(None, alias="positionText")
    points: str | None = None
    wins: str | None = None
    constructor: Constructor | None = Field(None, alias="Constructor")


class StandingsList(BaseModel):
    """Standings as of one round of a season."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    season: str | None = None
    round: str | None = None
    driver_standings: list[DriverStanding] = Field(
        default_factory=list, alias="DriverStandings",
    )
    constructor_standings: list[ConstructorStanding] = Field(
        default_factory=list, alias="ConstructorStandings",
    )
