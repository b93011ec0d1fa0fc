"""Driver and constructor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Driver(BaseModel):
    """Driver as embedded in results and standings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    driver_id: str | None = Field(None, alias="driverId")
    code: str | None = None
    permanent_number: str | None = Field(None, alias="permanentNumber")
    given_name: str | None = Field(None, alias="givenName")
    family_name: str | None = Field(None, alias="familyName")
    date_of_birth: str | None = Field(None, alias="dateOfBirth")
    nationality: str | None = None
    url: str | None = None

    @property
    def full_name(self) -> str:
        """Given and family name joined, skipping missing parts."""
        return " ".join(p for p in (self.given_name, self.family_name) if p)


class Constructor(BaseModel):
    """Team entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    constructor_id: str | None = Field(None, alias="constructorId")
    name: str | None = None
    nationality: str | None = None
    url: str | None = None
