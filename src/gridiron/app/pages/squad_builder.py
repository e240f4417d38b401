"""Squad builder page for picking the 15-player squad."""

from typing import Optional

import streamlit as st

from ...analysis import validate_squad
from ...models import Player, PlayerCatalog, Position
from ..components import render_player_table, render_squad_status, render_submission, render_validation
from ..state import init_session_state, refresh_catalog, reset_composer


def _toggle(player_id: int) -> None:
    """Pick or remove a player. A full squad silently ignores picks."""
    st.session_state.builder.toggle(player_id)


def _set_gameweek() -> None:
    st.session_state.builder.gameweek = int(st.session_state.gameweek_input)
    reset_composer()


def _save_squad() -> None:
    """Submit the squad through the gateway."""
    st.session_state.squad_result = st.session_state.gateway.submit_squad(
        st.session_state.user_id,
        st.session_state.builder,
    )


def render() -> None:
    """Render the squad builder page."""
    init_session_state()
    builder = st.session_state.builder

    st.title("Build Squad (15 players)")

    source = st.session_state.get("data_source", "unknown")
    col1, col2 = st.columns([3, 1])
    with col1:
        if source == "live":
            st.success(f"Using live player data ({len(builder.catalog)} players)")
        elif source == "sample":
            st.warning("Using sample data (fantasy service unavailable)")
        else:
            st.info("Loading player data...")
    with col2:
        st.button("Refresh Data", on_click=refresh_catalog)

    st.divider()

    squad_col, players_col = st.columns([1, 1.5])

    with squad_col:
        st.header("Your Squad")
        st.number_input(
            "Gameweek",
            min_value=1,
            value=builder.gameweek,
            step=1,
            key="gameweek_input",
            on_change=_set_gameweek,
        )
        render_squad_status(builder)

        selected = [builder.catalog.get(pid) for pid in builder.current_selection()]
        render_player_table(
            [p for p in selected if p is not None],
            builder,
            on_toggle=_toggle,
            key_prefix="squad",
        )

        st.divider()
        render_validation(validate_squad(builder.selection, builder.catalog, builder.cap))

        can_save = st.session_state.user_id is not None and st.session_state.entry_id is not None
        st.button(
            "Save Squad",
            on_click=_save_squad,
            disabled=not can_save,
            help=None if can_save else "Register and join a league first",
        )
        render_submission(st.session_state.get("squad_result"))

    with players_col:
        st.header("Available Players")

        filter_col1, filter_col2, filter_col3 = st.columns(3)
        with filter_col1:
            position_filter = st.selectbox(
                "Position",
                ["All"] + [p.value for p in Position],
                key="position_filter",
            )
        with filter_col2:
            team_filter = st.selectbox(
                "Team",
                ["All"] + builder.catalog.teams,
                key="team_filter",
            )
        with filter_col3:
            max_price = st.slider(
                "Max Price",
                min_value=0.0,
                max_value=15.0,
                value=15.0,
                step=0.5,
                key="max_price_filter",
            )

        filtered = _filter_players(builder.catalog, position_filter, team_filter, max_price)
        available = [p for p in filtered if not builder.is_selected(p.id)]
        render_player_table(available, builder, on_toggle=_toggle, key_prefix="pick")


def _filter_players(
    catalog: PlayerCatalog,
    position: str,
    team: str,
    max_price: Optional[float] = None,
) -> list[Player]:
    """Filter players by criteria, grouped by position then by price."""
    filtered: list[Player] = []
    for pos, players in catalog.by_position().items():
        if position != "All" and pos.value != position:
            continue
        group = [p for p in players if team == "All" or p.team == team]
        if max_price is not None:
            group = [p for p in group if p.price <= max_price]
        filtered.extend(sorted(group, key=lambda p: p.price, reverse=True))
    return filtered
