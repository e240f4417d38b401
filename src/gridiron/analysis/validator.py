"""Squad and lineup validation."""

from dataclasses import dataclass, field
from enum import Enum

from ..models.lineup import STARTER_COUNT, LineupComposer, LineupSelection
from ..models.player import Player, PlayerCatalog
from ..models.squad import BUDGET_CAP, SQUAD_SIZE, SquadBuilder, SquadSelection, exceeds_cap


class Violation(Enum):
    """Rule identifiers reported by the validators."""

    SIZE_VIOLATION = "SizeViolation"
    BUDGET_EXCEEDED = "BudgetExceeded"
    STARTER_COUNT_VIOLATION = "StarterCountViolation"
    STARTER_NOT_IN_SQUAD = "StarterNotInSquad"
    MISSING_CAPTAIN = "MissingCaptain"
    MISSING_VICE_CAPTAIN = "MissingViceCaptain"
    CAPTAIN_NOT_STARTER = "CaptainNotStarter"
    VICE_NOT_STARTER = "ViceNotStarter"
    CAPTAIN_VICE_CONFLICT = "CaptainViceConflict"

    @property
    def description(self) -> str:
        return VIOLATION_DESCRIPTIONS[self]


VIOLATION_DESCRIPTIONS = {
    Violation.SIZE_VIOLATION: f"Squad must have exactly {SQUAD_SIZE} players",
    Violation.BUDGET_EXCEEDED: "Squad cost exceeds the budget cap",
    Violation.STARTER_COUNT_VIOLATION: f"Lineup must have exactly {STARTER_COUNT} starters",
    Violation.STARTER_NOT_IN_SQUAD: "Every starter must be in the saved squad",
    Violation.MISSING_CAPTAIN: "No captain selected",
    Violation.MISSING_VICE_CAPTAIN: "No vice-captain selected",
    Violation.CAPTAIN_NOT_STARTER: "Captain must be a starter",
    Violation.VICE_NOT_STARTER: "Vice-captain must be a starter",
    Violation.CAPTAIN_VICE_CONFLICT: "Captain and vice-captain must be different players",
}


class SelectionState(Enum):
    """Submission lifecycle of a squad or lineup."""

    EDITING = "editing"
    VALIDATED = "validated"
    SUBMITTED = "submitted"


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes:
        violations: Every rule the input breaks, in check order.
    """

    violations: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def codes(self) -> list[str]:
        """Violation identifiers as strings."""
        return [v.value for v in self.violations]

    @property
    def messages(self) -> list[str]:
        return [v.description for v in self.violations]


def validate_squad(
    selection: SquadSelection,
    catalog: PlayerCatalog,
    cap: float = BUDGET_CAP,
) -> ValidationResult:
    """
    Validate a squad for submission.

    Args:
        selection: The squad to check.
        catalog: Catalog used to price the squad.
        cap: Budget cap.

    Returns:
        ValidationResult with every violation found.
    """
    violations: list[Violation] = []
    # repeated ids count once
    player_ids = list(dict.fromkeys(selection.player_ids))

    if len(player_ids) != SQUAD_SIZE:
        violations.append(Violation.SIZE_VIOLATION)

    if exceeds_cap(player_ids, catalog, cap):
        violations.append(Violation.BUDGET_EXCEEDED)

    return ValidationResult(violations=violations)


def validate_lineup(lineup: LineupSelection, squad: SquadSelection) -> ValidationResult:
    """
    Validate a lineup against the squad it was drawn from.

    All checks run independently so the caller can show complete feedback.

    Args:
        lineup: The lineup to check.
        squad: The saved squad.

    Returns:
        ValidationResult with every violation found.
    """
    violations: list[Violation] = []
    starters = set(lineup.starters)

    if len(starters) != STARTER_COUNT:
        violations.append(Violation.STARTER_COUNT_VIOLATION)

    if any(pid not in squad for pid in lineup.starters):
        violations.append(Violation.STARTER_NOT_IN_SQUAD)

    if lineup.captain_id is None:
        violations.append(Violation.MISSING_CAPTAIN)

    if lineup.vice_captain_id is None:
        violations.append(Violation.MISSING_VICE_CAPTAIN)

    if lineup.captain_id is not None and lineup.captain_id not in starters:
        violations.append(Violation.CAPTAIN_NOT_STARTER)

    if lineup.vice_captain_id is not None and lineup.vice_captain_id not in starters:
        violations.append(Violation.VICE_NOT_STARTER)

    if lineup.captain_id is not None and lineup.captain_id == lineup.vice_captain_id:
        violations.append(Violation.CAPTAIN_VICE_CONFLICT)

    return ValidationResult(violations=violations)


def squad_state(builder: SquadBuilder) -> SelectionState:
    """Classify a squad builder's current state."""
    if builder.submitted:
        return SelectionState.SUBMITTED
    if validate_squad(builder.selection, builder.catalog, builder.cap).is_valid:
        return SelectionState.VALIDATED
    return SelectionState.EDITING


def lineup_state(composer: LineupComposer) -> SelectionState:
    """Classify a lineup composer's current state."""
    if composer.submitted:
        return SelectionState.SUBMITTED
    if validate_lineup(composer.lineup, composer.squad).is_valid:
        return SelectionState.VALIDATED
    return SelectionState.EDITING


def can_add_player(builder: SquadBuilder, player: Player) -> bool:
    """Check whether toggling an unselected player would add them."""
    return not builder.is_selected(player.id) and builder.selection.size < SQUAD_SIZE


def would_exceed_budget(builder: SquadBuilder, player: Player) -> bool:
    """Check whether adding a player would take the squad over the cap."""
    if builder.is_selected(player.id):
        return False
    return exceeds_cap(builder.current_selection() + (player.id,), builder.catalog, builder.cap)


def get_max_player_value(builder: SquadBuilder) -> float:
    """
    Calculate the maximum price for a new player given current budget.

    Returns:
        Maximum affordable price (0 if over budget).
    """
    return max(0.0, builder.budget_remaining())


def get_squad_slots_remaining(selection: SquadSelection) -> int:
    return max(0, SQUAD_SIZE - selection.size)


def get_starter_slots_remaining(lineup: LineupSelection) -> int:
    return max(0, STARTER_COUNT - len(lineup.starters))
