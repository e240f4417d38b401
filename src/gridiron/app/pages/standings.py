"""League standings page."""

import streamlit as st

from ...client import ServiceError
from ..state import init_session_state


def _refresh_standings() -> None:
    league_id = st.session_state.league_id
    if league_id is None:
        return
    try:
        st.session_state.standings = st.session_state.service.fetch_standings(league_id)
    except ServiceError as e:
        st.session_state.standings_error = str(e)
    else:
        st.session_state.standings_error = None


def render() -> None:
    """Render the standings page."""
    init_session_state()

    st.title("Standings")
    st.markdown(f"League ID: **{st.session_state.league_id or '-'}**")
    st.button("Refresh Standings", on_click=_refresh_standings, disabled=st.session_state.league_id is None)

    error = st.session_state.get("standings_error")
    if error:
        st.error(f"Could not load standings: {error}")

    rows = st.session_state.standings
    if not rows:
        st.info("No standings yet.")
        return

    st.table(
        [{"#": row.rank, "Team": row.team_name, "Points": row.points} for row in rows]
    )
