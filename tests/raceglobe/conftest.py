"""Shared fixtures for aggregator tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from raceglobe.app import create_app
from raceglobe.config import Settings
from tests.conftest import UPSTREAM


@pytest.fixture
def settings() -> Settings:
    return Settings(ergast_base_url=UPSTREAM, max_concurrent_requests=4)


@pytest.fixture
def client(settings):
    """FastAPI test client with the app lifespan running."""
    with TestClient(create_app(settings)) as c:
        yield c
