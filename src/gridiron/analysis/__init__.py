"""Validation of squads and lineups before submission."""

from .validator import (
    SelectionState,
    ValidationResult,
    Violation,
    can_add_player,
    get_max_player_value,
    get_squad_slots_remaining,
    get_starter_slots_remaining,
    lineup_state,
    squad_state,
    validate_lineup,
    validate_squad,
    would_exceed_budget,
)

__all__ = [
    "SelectionState",
    "ValidationResult",
    "Violation",
    "can_add_player",
    "get_max_player_value",
    "get_squad_slots_remaining",
    "get_starter_slots_remaining",
    "lineup_state",
    "squad_state",
    "validate_lineup",
    "validate_squad",
    "would_exceed_budget",
]
