"""Fixed table of proxied endpoints and their upstream path templates."""

from __future__ import annotations

from dataclasses import dataclass

from f1ergast._params import JSON_SUFFIX, ensure_json_suffix

API_PREFIX = "/ergast/f1"
DEFAULT_SEASON = "current"


@dataclass(frozen=True)
class Endpoint:
    """A local path pattern and the upstream template it forwards to.

    Both use ``{season}`` and ``{round}`` placeholders.
    """

    path: str
    upstream: str

    @property
    def local_paths(self) -> tuple[str, str]:
        """Extension-less and ``.json`` forms, both served identically."""
        return self.path, self.path + JSON_SUFFIX

    @property
    def name(self) -> str:
        return self.path.strip("/").replace("{", "").replace("}", "").replace("/", "_")

    def upstream_path(self, season: str | None = None, round: str | None = None) -> str:
        """Substitute path parameters into the upstream template."""
        path = (
            self.upstream
            .replace("{season}", season or DEFAULT_SEASON)
            .replace("{round}", round or "")
        )
        return ensure_json_suffix(path)


ENDPOINTS: tuple[Endpoint, ...] = (
    Endpoint("/circuits", "circuits"),
    Endpoint("/constructors", "constructors"),
    Endpoint("/{season}/constructorstandings", "{season}/constructorStandings"),
    Endpoint("/drivers", "drivers"),
    Endpoint("/{season}/driverstandings", "{season}/driverStandings"),
    Endpoint("/{season}/{round}/laps", "{season}/{round}/laps"),
    Endpoint("/{season}/{round}/pitstops", "{season}/{round}/pitstops"),
    Endpoint("/{season}/qualifying", "{season}/qualifying"),
    Endpoint("/races", "races"),
    Endpoint("/results", "results"),
    Endpoint("/seasons", "seasons"),
    Endpoint("/sprint", "sprint"),
    Endpoint("/status", "status"),
)

# Served by the aggregating handlers instead of the plain proxy.
AGGREGATED_PATHS = frozenset({"/races", "/seasons"})


def proxied_endpoints() -> list[Endpoint]:
    """Catalog entries that are forwarded verbatim."""
    return [e for e in ENDPOINTS if e.path not in AGGREGATED_PATHS]


def documented_paths() -> list[str]:
    """Catalog paths as listed by the index route."""
    return [f"{API_PREFIX}{e.path}/" for e in ENDPOINTS]
