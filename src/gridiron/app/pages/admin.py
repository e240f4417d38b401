"""Admin helpers for setting up test gameweeks."""

import json
from datetime import datetime, timedelta, timezone

import streamlit as st

from ...client import ServiceError
from ..state import init_session_state


DEFAULT_STATS = '[{"player_id": 1, "pass_yd": 250, "pass_td": 2}]'


def _create_gameweek() -> None:
    gameweek = int(st.session_state.new_gw_id)
    deadline = st.session_state.deadline.strip() or (
        datetime.now(timezone.utc) + timedelta(hours=1)
    ).isoformat()
    try:
        st.session_state.service.create_gameweek(st.session_state.user_id, gameweek, deadline)
    except ServiceError as e:
        st.session_state.admin_message = ("error", f"Create GW failed: {e}")
        return
    st.session_state.admin_message = ("success", "GW created")


def _upload_stats() -> None:
    try:
        stats = json.loads(st.session_state.stats_json)
    except json.JSONDecodeError:
        st.session_state.admin_message = ("error", "Invalid JSON")
        return
    try:
        st.session_state.service.upload_stats(
            st.session_state.user_id, st.session_state.builder.gameweek, stats
        )
    except ServiceError as e:
        st.session_state.admin_message = ("error", f"Upload stats failed: {e}")
        return
    st.session_state.admin_message = ("success", "Stats uploaded")


def _compute_gameweek() -> None:
    try:
        summary = st.session_state.service.compute_gameweek(st.session_state.builder.gameweek)
    except ServiceError as e:
        st.session_state.admin_message = ("error", f"Compute failed: {e}")
        return
    points = (summary or {}).get("gw_points")
    st.session_state.admin_message = ("success", f"GW computed\n{json.dumps(points, indent=2)}")
    if st.session_state.league_id is not None:
        try:
            st.session_state.standings = st.session_state.service.fetch_standings(st.session_state.league_id)
        except ServiceError as e:
            st.session_state.standings_error = str(e)


def render() -> None:
    """Render the admin page."""
    init_session_state()

    st.title("Admin (Testing Only)")

    message = st.session_state.get("admin_message")
    if message:
        kind, text = message
        getattr(st, kind)(text)

    signed_in = st.session_state.user_id is not None
    gw_col, stats_col = st.columns([1, 2])
    with gw_col:
        st.number_input("New GW ID", min_value=1, value=1, step=1, key="new_gw_id")
        st.text_input("Deadline (ISO)", key="deadline", placeholder="2025-10-02T20:00:00Z")
        st.button("Create GW", on_click=_create_gameweek, disabled=not signed_in)
    with stats_col:
        st.text_area("Stats JSON", value=DEFAULT_STATS, key="stats_json", height=160)
        st.caption(f"Applies to gameweek {st.session_state.builder.gameweek}")
        st.button("Upload Stats", on_click=_upload_stats, disabled=not signed_in)
        st.button("Compute GW", on_click=_compute_gameweek)
