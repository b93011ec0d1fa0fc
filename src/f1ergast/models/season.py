"""Season model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Season(BaseModel):
    """Championship season identified by its year."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    season: str | None = None
    url: str | None = None
