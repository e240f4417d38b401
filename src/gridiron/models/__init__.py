"""Data models for Gridiron fantasy."""

from .player import Player, PlayerCatalog, Position
from .squad import BUDGET_CAP, SQUAD_SIZE, SquadBuilder, SquadSelection, exceeds_cap, squad_cost
from .lineup import (
    CHIP_LABELS,
    STARTER_COUNT,
    Chip,
    LineupComposer,
    LineupSelection,
    parse_chip,
)
from .standings import StandingsRow

__all__ = [
    # Player
    "Player",
    "PlayerCatalog",
    "Position",
    # Squad
    "BUDGET_CAP",
    "SQUAD_SIZE",
    "SquadBuilder",
    "SquadSelection",
    "exceeds_cap",
    "squad_cost",
    # Lineup
    "CHIP_LABELS",
    "STARTER_COUNT",
    "Chip",
    "LineupComposer",
    "LineupSelection",
    "parse_chip",
    # Standings
    "StandingsRow",
]
