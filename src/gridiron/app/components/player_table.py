"""Player table component for displaying and picking players."""

from typing import Callable, Optional

import streamlit as st

from ...models import Player, SquadBuilder
from ...analysis import can_add_player, would_exceed_budget


def render_player_table(
    players: list[Player],
    builder: SquadBuilder,
    on_toggle: Optional[Callable[[int], None]] = None,
    key_prefix: str = "pick",
) -> None:
    """
    Render a list of players with pick/remove buttons.

    Args:
        players: Players to display.
        builder: Current squad for selection context.
        on_toggle: Callback receiving the player id.
        key_prefix: Widget key prefix, unique per table.
    """
    if not players:
        st.info("No players to display.")
        return

    for player in players:
        _render_player_row(player, builder, on_toggle, key_prefix)


def _render_player_row(
    player: Player,
    builder: SquadBuilder,
    on_toggle: Optional[Callable[[int], None]],
    key_prefix: str,
) -> None:
    """Render a single player row."""
    picked = builder.is_selected(player.id)
    cols = st.columns([3, 1, 1])

    with cols[0]:
        st.markdown(f"**{player.name}**" + (" ✅" if picked else ""))
        st.caption(f"{player.team} · {player.position.value}")

    with cols[1]:
        st.markdown(f"£{player.price:.1f}m")

    with cols[2]:
        if on_toggle is None:
            return
        if picked:
            st.button("Remove", key=f"{key_prefix}_{player.id}", on_click=on_toggle, args=(player.id,))
        else:
            help_text = None
            if would_exceed_budget(builder, player):
                help_text = "Over budget: the squad cannot be saved until it is back under the cap"
            st.button(
                "Pick",
                key=f"{key_prefix}_{player.id}",
                on_click=on_toggle,
                args=(player.id,),
                disabled=not can_add_player(builder, player),
                help=help_text,
            )
