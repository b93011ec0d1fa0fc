"""Ergast data models."""

from f1ergast.models.circuit import Circuit, CircuitLocation
from f1ergast.models.driver import Constructor, Driver
from f1ergast.models.race import Race
from f1ergast.models.result import QualifyingResult, RaceResult, SprintResult
from f1ergast.models.season import Season
from f1ergast.models.standings import ConstructorStanding, DriverStanding, StandingsList

__all__ = [
    "Circuit",
    "CircuitLocation",
    "Constructor",
    "ConstructorStanding",
    "Driver",
    "DriverStanding",
    "QualifyingResult",
    "Race",
    "RaceResult",
    "Season",
    "SprintResult",
    "StandingsList",
]
