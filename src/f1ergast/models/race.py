"""Race model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1ergast.models.circuit import Circuit
from f1ergast.models.result import QualifyingResult, RaceResult, SprintResult


def _first_surname(entries: list[QualifyingResult] | list[RaceResult] | list[SprintResult]) -> str | None:
    if not entries or entries[0].driver is None:
        return None
    return entries[0].driver.family_name or None


class Race(BaseModel):
    """Round of a season, optionally carrying one session's classification."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    season: str | None = None
    round: str | None = None
    url: str | None = None
    race_name: str | None = Field(None, alias="raceName")
    circuit: Circuit | None = Field(None, alias="Circuit")
    date: str | None = None
    time: str | None = None
    qualifying_results: list[QualifyingResult] = Field(
        default_factory=list, alias="QualifyingResults",
    )
    results: list[RaceResult] = Field(default_factory=list, alias="Results")
    sprint_results: list[SprintResult] = Field(default_factory=list, alias="SprintResults")

    @property
    def country(self) -> str | None:
        """Country of the circuit, or None if the location is missing."""
        if self.circuit is None or self.circuit.location is None:
            return None
        return self.circuit.location.country

    @property
    def pole_sitter(self) -> str | None:
        """Surname of the first qualifier, or None."""
        return _first_surname(self.qualifying_results)

    @property
    def winner(self) -> str | None:
        """Surname of the race winner, or None."""
        return _first_surname(self.results)

    @property
    def sprint_winner(self) -> str | None:
        """Surname of the sprint winner, or None."""
        return _first_surname(self.sprint_results)
