"""Lineup page for picking starters, captaincy and chip."""

import streamlit as st

from ...analysis import SelectionState, get_starter_slots_remaining, lineup_state, validate_lineup
from ...models import CHIP_LABELS, STARTER_COUNT, Chip, Player
from ..components import render_submission, render_validation
from ..state import init_session_state


CHIP_OPTIONS = [""] + [chip.value for chip in Chip]


def _chip_label(code: str) -> str:
    if not code:
        return "None"
    return CHIP_LABELS[Chip(code)]


def _set_chip() -> None:
    st.session_state.composer.set_chip(st.session_state.chip_input)


def _save_lineup() -> None:
    st.session_state.lineup_result = st.session_state.gateway.submit_lineup(
        st.session_state.user_id,
        st.session_state.composer,
    )


def render() -> None:
    """Render the lineup page."""
    init_session_state()
    builder = st.session_state.builder
    composer = st.session_state.composer
    lineup = composer.selection()

    st.title(f"Set Lineup ({STARTER_COUNT} starters + C/VC)")

    squad_col, starters_col = st.columns(2)

    with squad_col:
        st.header("Your Squad")
        if not builder.current_selection():
            st.info("No players selected. Build your squad first.")
        for pid in builder.current_selection():
            player = builder.catalog.get(pid)
            if player is not None:
                _render_squad_row(player)

    with starters_col:
        remaining = get_starter_slots_remaining(lineup)
        st.header(f"Starters ({len(lineup.starters)}/{STARTER_COUNT})")
        if remaining:
            st.caption(f"{remaining} starter slot{'s' if remaining > 1 else ''} left")

        for pid in lineup.starters:
            player = builder.catalog.get(pid)
            badge = ""
            if lineup.captain_id == pid:
                badge += " (C)"
            if lineup.vice_captain_id == pid:
                badge += " (VC)"
            name = player.name if player else f"#{pid}"
            st.markdown(f"**{name}**{badge}")

        st.selectbox(
            "Chip",
            CHIP_OPTIONS,
            index=CHIP_OPTIONS.index(lineup.chip.value if lineup.chip else ""),
            format_func=_chip_label,
            key="chip_input",
            on_change=_set_chip,
        )

        st.divider()
        render_validation(validate_lineup(lineup, composer.squad), label="Lineup")
        if lineup_state(composer) == SelectionState.SUBMITTED:
            st.success("Lineup saved")

        st.button(
            "Save Lineup",
            on_click=_save_lineup,
            disabled=st.session_state.user_id is None,
        )
        render_submission(st.session_state.get("lineup_result"))


def _render_squad_row(player: Player) -> None:
    """Render a squad player with start/captain/vice buttons."""
    composer = st.session_state.composer
    is_starter = composer.is_starter(player.id)

    cols = st.columns([3, 1, 1, 1])
    with cols[0]:
        st.markdown(f"**{player.name}**" + (" 🟢" if is_starter else ""))
        st.caption(f"{player.position.value} · {player.team}")
    with cols[1]:
        st.button(
            "Unset" if is_starter else "Start",
            key=f"start_{player.id}",
            on_click=composer.toggle_starter,
            args=(player.id,),
        )
    with cols[2]:
        st.button("C", key=f"cap_{player.id}", on_click=composer.set_captain, args=(player.id,), disabled=not is_starter)
    with cols[3]:
        st.button("VC", key=f"vice_{player.id}", on_click=composer.set_vice_captain, args=(player.id,), disabled=not is_starter)
