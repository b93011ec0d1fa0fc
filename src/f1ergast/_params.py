"""Query parameter helpers for Ergast paths and paging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class Page:
    """Paging window for list endpoints.

    Usage:
        Page(limit=100)            # produces: limit=100
        Page(limit=30, offset=60)  # produces: limit=30&offset=60
    """

    limit: int | None = None
    offset: int | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Convert this page to a list of (key, value) pairs."""
        params: list[tuple[str, str]] = []
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.offset is not None:
            params.append(("offset", str(self.offset)))
        return params


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values are stringified. Page instances expand to limit/offset.

    Args:
        **kwargs: Keyword arguments where keys are parameter names and values are
                  either plain values or Page instances (the key is ignored).

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Page):
            params.extend(value.to_params())
        else:
            params.append((key, str(value)))
    return params


def ensure_json_suffix(path: str) -> str:
    """Append ``.json`` to *path* unless it already ends with it."""
    return path if path.endswith(JSON_SUFFIX) else path + JSON_SUFFIX
