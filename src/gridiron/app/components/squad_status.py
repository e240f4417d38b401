"""Squad status component showing budget and squad size."""

import streamlit as st

from ...models import SQUAD_SIZE, SquadBuilder
from ...analysis import SelectionState, get_squad_slots_remaining, squad_state


def render_squad_status(builder: SquadBuilder) -> None:
    """
    Render budget and size metrics for a squad.

    Args:
        builder: The squad to display status for.
    """
    budget_used = builder.budget_used()
    budget_remaining = builder.budget_remaining()

    st.metric(
        label="Budget",
        value=f"£{budget_remaining:.1f}m",
        delta=f"{budget_used:.1f} / {builder.cap:.1f} used",
        delta_color="off",
    )
    st.progress(min(max(budget_used / builder.cap, 0.0), 1.0))

    size = builder.selection.size
    slots = get_squad_slots_remaining(builder.selection)

    col1, col2 = st.columns(2)
    with col1:
        st.metric(
            label="Squad Size",
            value=f"{size} / {SQUAD_SIZE}",
            delta=f"{slots} slots" if slots > 0 else "Full",
            delta_color="off",
        )
    with col2:
        state = squad_state(builder)
        if state == SelectionState.SUBMITTED:
            st.success("Squad saved")
        elif state == SelectionState.VALIDATED:
            st.info("Ready to save")
        else:
            st.warning("Editing")
