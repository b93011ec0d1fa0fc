"""Circuit model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CircuitLocation(BaseModel):
    """Geographic location of a circuit. Coordinates are kept as upstream strings, numbers included."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    lat: str | None = None
    long: str | None = None
    locality: str | None = None
    country: str | None = None


class Circuit(BaseModel):
    """Race track."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    circuit_id: str | None = Field(None, alias="circuitId")
    circuit_name: str | None = Field(None, alias="circuitName")
    url: str | None = None
    location: CircuitLocation | None = Field(None, alias="Location")
