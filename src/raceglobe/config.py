"""Process configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from f1ergast._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_MAX_CONCURRENT_REQUESTS = 8


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Aggregator settings. The listening port is the only process-wide state."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    ergast_base_url: str = DEFAULT_BASE_URL
    upstream_timeout: float = DEFAULT_TIMEOUT
    max_concurrent_requests: int = DEFAULT_MAX_CONCURRENT_REQUESTS
    cors_origins: tuple[str, ...] = ("*",)

    def __post_init__(self) -> None:
        if self.max_concurrent_requests < 1:
            raise ValueError("MAX_CONCURRENT_REQUESTS must be at least 1")
        if self.upstream_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be positive")

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        origins = os.environ.get("CORS_ORIGINS", "*")
        return cls(
            port=_int_env("PORT", DEFAULT_PORT),
            host=os.environ.get("HOST", DEFAULT_HOST),
            ergast_base_url=os.environ.get("ERGAST_BASE_URL", DEFAULT_BASE_URL),
            upstream_timeout=_float_env("UPSTREAM_TIMEOUT", DEFAULT_TIMEOUT),
            max_concurrent_requests=_int_env(
                "MAX_CONCURRENT_REQUESTS", DEFAULT_MAX_CONCURRENT_REQUESTS,
            ),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
