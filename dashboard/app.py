"""F1 Race Globe — Streamlit + Plotly front end for the race globe aggregator."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from f1ergast import ErgastError

from shared import (
    AggregatorClient,
    ViewMode,
    ViewState,
    build_globe_figure,
    build_points,
    constructor_rows,
    driver_rows,
    format_loading,
    point_at,
    race_detail_rows,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Formula 1 Race Globe",
    page_icon="\U0001f3ce\ufe0f",
    layout="wide",
)

if "view_state" not in st.session_state:
    st.session_state["view_state"] = ViewState()
    st.session_state["globe_revision"] = 0
state: ViewState = st.session_state["view_state"]


# ── Seasons (once per session) ───────────────────────────────────────────────

if not state.seasons and state.season is None:
    try:
        with AggregatorClient() as api:
            state.load_seasons(api.seasons())
    except ErgastError:
        state.fail_seasons()


# ── Sidebar: season and view mode ────────────────────────────────────────────

st.sidebar.title("Formula 1 Race Globe")

season_options = state.seasons or [state.season]
selected_season = st.sidebar.selectbox(
    "Season", season_options, index=season_options.index(state.season),
)
selected_mode = st.sidebar.radio(
    "View", list(ViewMode), format_func=lambda m: m.label,
    index=list(ViewMode).index(state.view_mode),
)
state.set_season(selected_season)
state.set_view_mode(selected_mode)


# ── Fetch for the current season and mode ────────────────────────────────────

if state.needs_fetch:
    token = state.begin_fetch()
    with st.spinner(format_loading(state.season)):
        try:
            with AggregatorClient() as api:
                payload = api.fetch_view(state.view_mode, state.season)
        except ErgastError as exc:
            state.fail_fetch(token, str(exc))
        else:
            state.complete_fetch(token, payload)


# ── Main panel ───────────────────────────────────────────────────────────────

for message in state.errors:
    st.error(message)

if state.view_mode.shows_globe and not state.error:
    points = build_points(state.races, state.view_mode)
    event = st.plotly_chart(
        build_globe_figure(points),
        on_select="rerun",
        selection_mode="points",
        key=f"globe-{st.session_state['globe_revision']}",
    )
    selected = event.selection.get("points", []) if event else []
    if selected:
        point = point_at(points, selected[0].get("point_index"))
        state.select_race(point["id"] if point else None)

elif state.view_mode == ViewMode.DRIVER:
    st.subheader(f"{state.season} Driver Standings")
    st.dataframe(pd.DataFrame(driver_rows(state.driver_standings)), hide_index=True)

elif state.view_mode == ViewMode.CONSTRUCTOR:
    st.subheader(f"{state.season} Constructor Standings")
    st.dataframe(pd.DataFrame(constructor_rows(state.constructor_standings)), hide_index=True)


# ── Race detail panel ────────────────────────────────────────────────────────

if state.selected_race:
    with st.container(border=True):
        st.subheader(state.selected_race.get("name", ""))
        for label, value in race_detail_rows(state.selected_race, state.view_mode):
            st.markdown(f"**{label}:** {value}")
        if st.button("Close"):
            state.close_race()
            # A fresh chart key drops the plotly selection that opened the panel.
            st.session_state["globe_revision"] += 1
            st.rerun()
