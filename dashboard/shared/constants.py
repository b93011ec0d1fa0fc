"""Shared constants for the race globe dashboard."""

from __future__ import annotations

import os

API_BASE = os.environ.get("RACEGLOBE_API_BASE", "http://localhost:5000/ergast/f1")

F1_RED = "#FF1801"
SPRINT_GREEN = "#00FF00"
POINT_RADIUS = 0.7

GLOBE_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0, 0, 0, 0.9)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=0, r=0, t=0, b=0),
    height=640,
    showlegend=False,
)

GLOBE_GEO_DEFAULTS = dict(
    projection_type="orthographic",
    showland=True,
    landcolor="#1B2631",
    showocean=True,
    oceancolor="#0B0F14",
    showcountries=True,
    countrycolor="#3A4A5A",
    bgcolor="rgba(0,0,0,0)",
)
