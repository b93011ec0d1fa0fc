"""FastAPI proxy aggregator over the Ergast-compatible statistics API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from f1ergast import AsyncErgastClient, ErgastError

from raceglobe import __version__
from raceglobe.catalog import API_PREFIX, Endpoint, documented_paths, proxied_endpoints
from raceglobe.config import Settings
from raceglobe.enrichment import RaceAggregator

logger = logging.getLogger(__name__)

ERGAST_DOCUMENTATION = "https://ergast.com/mrd/"

router = APIRouter()


def _aggregator(request: Request) -> RaceAggregator:
    return request.app.state.aggregator


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/")
def index() -> dict[str, Any]:
    return {
        "message": "F1 API Running",
        "documentation": ERGAST_DOCUMENTATION,
        "endpoints": documented_paths(),
    }


@router.get(f"{API_PREFIX}/seasons")
@router.get(f"{API_PREFIX}/seasons.json")
async def seasons(request: Request) -> dict[str, Any]:
    """Up to 100 seasons, projected to season and url."""
    return await _aggregator(request).seasons()


@router.get(f"{API_PREFIX}/{{season}}/sprint/races")
@router.get(f"{API_PREFIX}/{{season}}/sprint/races.json")
async def sprint_races(request: Request, season: str) -> dict[str, Any]:
    return await _aggregator(request).sprint_races(season)


@router.get(f"{API_PREFIX}/{{season}}/races")
@router.get(f"{API_PREFIX}/{{season}}/races.json")
async def season_races(request: Request, season: str) -> dict[str, Any]:
    return await _aggregator(request).season_races(season)


@router.get(f"{API_PREFIX}/races")
@router.get(f"{API_PREFIX}/races.json")
async def current_races(request: Request) -> dict[str, Any]:
    return await _aggregator(request).current_races()


def _proxy_handler(endpoint: Endpoint) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    async def proxy(request: Request) -> dict[str, Any]:
        path = endpoint.upstream_path(
            request.path_params.get("season"), request.path_params.get("round"),
        )
        return await _aggregator(request).proxy(path, list(request.query_params.multi_items()))

    proxy.__name__ = f"proxy_{endpoint.name}"
    return proxy


def build_proxy_router() -> APIRouter:
    """Register every plain catalog entry with and without the .json suffix."""
    proxy_router = APIRouter(prefix=API_PREFIX)
    for endpoint in proxied_endpoints():
        handler = _proxy_handler(endpoint)
        for path in endpoint.local_paths:
            proxy_router.add_api_route(path, handler, methods=["GET"], name=f"{handler.__name__}:{path}")
    return proxy_router


async def ergast_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Error serving %s: %s", request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=500)


# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with AsyncErgastClient(
            base_url=settings.ergast_base_url, timeout=settings.upstream_timeout,
        ) as ergast:
            app.state.aggregator = RaceAggregator(ergast, settings.max_concurrent_requests)
            yield

    app = FastAPI(title="F1 Race Globe API", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ErgastError, ergast_error_handler)
    # Aggregating routes first so they win over same-named catalog entries.
    app.include_router(router)
    app.include_router(build_proxy_router())
    return app


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = Settings.from_env()
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
