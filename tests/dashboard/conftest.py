"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import pytest

from tests.conftest import SAMPLE_CONSTRUCTOR_STANDING, SAMPLE_DRIVER_STANDING


def _make_race(
    name: str,
    country: str,
    location: list | None,
    pole: str = "Verstappen",
    winner: str = "Verstappen",
) -> dict:
    return {
        "name": name,
        "country": country,
        "location": location,
        "polePosition": pole,
        "winner": winner,
    }


@pytest.fixture
def make_race():
    """Factory fixture for aggregator race summaries."""
    return _make_race


@pytest.fixture
def races_payload() -> dict:
    """Race table with two usable races and one without a usable location."""
    return {"RaceTable": {"Races": [
        _make_race("Bahrain Grand Prix", "Bahrain", [50.5106, 26.0325]),
        _make_race("Mystery Grand Prix", "Nowhere", [float("nan"), 10.0]),
        _make_race("Monaco Grand Prix", "Monaco", [7.4206, 43.7347], pole="Leclerc"),
    ]}}


@pytest.fixture
def seasons_payload() -> dict:
    return {"SeasonTable": {"Seasons": [
        {"season": "2021", "url": "https://example.com/2021"},
        {"season": "2022", "url": "https://example.com/2022"},
        {"season": "2023", "url": "https://example.com/2023"},
    ]}}


@pytest.fixture
def driver_standings_payload() -> dict:
    return {"StandingsTable": {"season": "2023", "StandingsLists": [
        {"season": "2023", "round": "22", "DriverStandings": [SAMPLE_DRIVER_STANDING]},
    ]}}


@pytest.fixture
def constructor_standings_payload() -> dict:
    return {"StandingsTable": {"season": "2023", "StandingsLists": [
        {"season": "2023", "round": "22", "ConstructorStandings": [SAMPLE_CONSTRUCTOR_STANDING]},
    ]}}
