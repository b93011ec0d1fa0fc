"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import API_BASE, F1_RED, SPRINT_GREEN
from .formatters import format_loading, format_point_label, race_detail_rows

# --- Aggregator access ---
from .client import AggregatorClient

# --- View state & derived views ---
from .globe import GlobePoint, build_globe_figure, build_points, point_at
from .standings import constructor_rows, driver_rows, extract_races
from .view_state import ViewMode, ViewState

__all__ = [
    "API_BASE",
    "AggregatorClient",
    "F1_RED",
    "GlobePoint",
    "SPRINT_GREEN",
    "ViewMode",
    "ViewState",
    "build_globe_figure",
    "build_points",
    "constructor_rows",
    "driver_rows",
    "extract_races",
    "format_loading",
    "format_point_label",
    "point_at",
    "race_detail_rows",
]
