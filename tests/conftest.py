"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
from typing import Any

import pytest

UPSTREAM = "https://ergast.test/api/f1"


SAMPLE_DRIVER_VER = {
    "driverId": "max_verstappen",
    "permanentNumber": "33",
    "code": "VER",
    "url": "http://en.wikipedia.org/wiki/Max_Verstappen",
    "givenName": "Max",
    "familyName": "Verstappen",
    "dateOfBirth": "1997-09-30",
    "nationality": "Dutch",
}

SAMPLE_DRIVER_PER = {
    "driverId": "perez",
    "permanentNumber": "11",
    "code": "PER",
    "url": "http://en.wikipedia.org/wiki/Sergio_P%C3%A9rez",
    "givenName": "Sergio",
    "familyName": "Pérez",
    "dateOfBirth": "1990-01-26",
    "nationality": "Mexican",
}

SAMPLE_CONSTRUCTOR = {
    "constructorId": "red_bull",
    "url": "http://en.wikipedia.org/wiki/Red_Bull_Racing",
    "name": "Red Bull",
    "nationality": "Austrian",
}

SAMPLE_CIRCUIT = {
    "circuitId": "bahrain",
    "url": "http://en.wikipedia.org/wiki/Bahrain_International_Circuit",
    "circuitName": "Bahrain International Circuit",
    "Location": {
        "lat": "26.0325",
        "long": "50.5106",
        "locality": "Sakhir",
        "country": "Bahrain",
    },
}

SAMPLE_QUALIFYING_RESULT = {
    "number": "1",
    "position": "1",
    "Driver": SAMPLE_DRIVER_VER,
    "Constructor": SAMPLE_CONSTRUCTOR,
    "Q1": "1:31.295",
    "Q2": "1:30.503",
    "Q3": "1:29.708",
}

SAMPLE_RACE_RESULT = {
    "number": "1",
    "position": "1",
    "positionText": "1",
    "points": "25",
    "Driver": SAMPLE_DRIVER_VER,
    "Constructor": SAMPLE_CONSTRUCTOR,
    "grid": "1",
    "laps": "57",
    "status": "Finished",
}

SAMPLE_SPRINT_RESULT = {
    "number": "11",
    "position": "1",
    "positionText": "1",
    "points": "8",
    "Driver": SAMPLE_DRIVER_PER,
    "Constructor": SAMPLE_CONSTRUCTOR,
    "grid": "2",
    "laps": "17",
    "status": "Finished",
}

SAMPLE_DRIVER_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "575",
    "wins": "19",
    "Driver": SAMPLE_DRIVER_VER,
    "Constructors": [SAMPLE_CONSTRUCTOR],
}

SAMPLE_CONSTRUCTOR_STANDING = {
    "position": "1",
    "positionText": "1",
    "points": "860",
    "wins": "21",
    "Constructor": SAMPLE_CONSTRUCTOR,
}


def make_race(
    round: str = "1",
    race_name: str = "Bahrain Grand Prix",
    country: str = "Bahrain",
    lat: str = "26.0325",
    long: str = "50.5106",
    season: str = "2023",
    **sessions: Any,
) -> dict[str, Any]:
    """Upstream race entry; ``sessions`` adds e.g. Results=[...]."""
    circuit = {
        **SAMPLE_CIRCUIT,
        "Location": {**SAMPLE_CIRCUIT["Location"], "lat": lat, "long": long, "country": country},
    }
    return {
        "season": season,
        "round": round,
        "url": f"https://example.com/{season}/{round}",
        "raceName": race_name,
        "Circuit": circuit,
        "date": "2023-03-05",
        "time": "15:00:00Z",
        **sessions,
    }


def envelope(**tables: Any) -> dict[str, Any]:
    """Wrap tables in the upstream MRData envelope."""
    return {
        "MRData": {
            "xmlns": "",
            "series": "f1",
            "limit": "30",
            "offset": "0",
            "total": "1",
            **tables,
        },
    }


def race_table(*races: dict[str, Any], season: str = "2023") -> dict[str, Any]:
    return envelope(RaceTable={"season": season, "Races": list(races)})


def season_table(*years: str) -> dict[str, Any]:
    return envelope(SeasonTable={
        "Seasons": [
            {"season": y, "url": f"https://en.wikipedia.org/wiki/{y}_Formula_One_World_Championship"}
            for y in years
        ],
    })


@pytest.fixture
def base_url() -> str:
    return UPSTREAM


@pytest.fixture(autouse=True)
def _isolate_api_log(tmp_path, monkeypatch):
    """Send the API call log to tmp_path instead of the repository's logs/ dir."""
    import raceglobe.api_logging as mod

    named_logger = logging.getLogger("raceglobe.api")
    for h in [h for h in named_logger.handlers if isinstance(h, logging.FileHandler)]:
        h.close()
        named_logger.removeHandler(h)

    monkeypatch.setattr(mod, "_logger", None)
    monkeypatch.setattr(mod, "_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(mod, "_LOG_FILE", str(tmp_path / "api_calls.log"))

    yield tmp_path

    for h in [h for h in named_logger.handlers if isinstance(h, logging.FileHandler)]:
        h.close()
        named_logger.removeHandler(h)
