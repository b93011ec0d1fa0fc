"""Globe points and figure derived from the race list."""

from __future__ import annotations

from typing import TypedDict

import plotly.graph_objects as go

from .constants import F1_RED, GLOBE_GEO_DEFAULTS, GLOBE_LAYOUT_DEFAULTS, POINT_RADIUS, SPRINT_GREEN
from .formatters import format_point_label
from .standings import has_valid_location
from .view_state import ViewMode

# Plotly marker size per unit of point radius.
_MARKER_SCALE = 14


class GlobePoint(TypedDict):
    id: str
    lat: float
    lng: float
    color: str
    label: str
    radius: float


def point_color(view_mode: ViewMode) -> str:
    return SPRINT_GREEN if view_mode == ViewMode.SPRINT else F1_RED


def build_points(races: list[dict], view_mode: ViewMode) -> list[GlobePoint]:
    """One point per race with a usable location, in race order."""
    color = point_color(view_mode)
    return [
        GlobePoint(
            id=race["name"],
            lat=race["location"][1],
            lng=race["location"][0],
            color=color,
            label=format_point_label(race["name"], race.get("country", "")),
            radius=POINT_RADIUS,
        )
        for race in races
        if has_valid_location(race) and race.get("name")
    ]


def build_globe_figure(points: list[GlobePoint]) -> go.Figure:
    """Orthographic globe with one marker per point; customdata carries the race name."""
    fig = go.Figure(go.Scattergeo(
        lat=[p["lat"] for p in points],
        lon=[p["lng"] for p in points],
        mode="markers",
        marker=dict(
            size=[p["radius"] * _MARKER_SCALE for p in points],
            color=[p["color"] for p in points],
            line=dict(width=0),
        ),
        text=[p["label"].replace("\n", "<br>") for p in points],
        customdata=[p["id"] for p in points],
        hovertemplate="%{text}<extra></extra>",
    ))
    fig.update_geos(**GLOBE_GEO_DEFAULTS)
    fig.update_layout(**GLOBE_LAYOUT_DEFAULTS)
    return fig


def point_at(points: list[GlobePoint], index: int | None) -> GlobePoint | None:
    """Point for a plotly selection index, or None if out of range."""
    if index is None or not 0 <= index < len(points):
        return None
    return points[index]
