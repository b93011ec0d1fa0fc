"""Formatting helpers for the race globe dashboard."""

from __future__ import annotations

from .view_state import ViewMode


def format_point_label(name: str, country: str) -> str:
    """Hover label for a globe point: race name above country."""
    return f"{name}\n{country}"


def format_loading(season: str | int | None) -> str:
    return f"Loading {season} data..."


def race_detail_rows(race: dict, view_mode: ViewMode) -> list[tuple[str, str]]:
    """Label/value pairs for the race detail panel.

    Sprint mode relabels the winner and omits pole position.
    """
    sprint = view_mode == ViewMode.SPRINT
    rows = [
        ("Country", str(race.get("country", ""))),
        ("Sprint Winner" if sprint else "Winner", str(race.get("winner", ""))),
    ]
    if not sprint:
        rows.append(("Pole Position", str(race.get("polePosition", ""))))
    return rows
