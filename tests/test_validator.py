"""Tests for squad and lineup validation."""

import pytest

from gridiron.analysis.validator import (
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
from gridiron.models import (
    Chip,
    LineupComposer,
    LineupSelection,
    Player,
    PlayerCatalog,
    Position,
    SquadBuilder,
    SquadSelection,
)


def make_player(id: int, price: float = 6.5) -> Player:
    """Helper to create test players."""
    return Player(id=id, name=f"Player {id}", team="DAL", position=Position.RB, price=price)


def make_catalog(prices: dict[int, float]) -> PlayerCatalog:
    return PlayerCatalog(make_player(pid, price) for pid, price in prices.items())


def priced_squad(last_price: float, count: int = 15) -> tuple[SquadSelection, PlayerCatalog]:
    """Squad where every player costs 6.5 except the last one."""
    prices = {pid: 6.5 for pid in range(1, count)}
    prices[count] = last_price
    return SquadSelection(gameweek=1, player_ids=list(prices)), make_catalog(prices)


def valid_lineup(captain: int = 1, vice: int = 2) -> LineupSelection:
    return LineupSelection(
        gameweek=1,
        starters=list(range(1, 10)),
        captain_id=captain,
        vice_captain_id=vice,
    )


SQUAD = SquadSelection(gameweek=1, player_ids=list(range(1, 16)))


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_is_valid(self) -> None:
        result = ValidationResult()
        assert result.is_valid is True
        assert result.codes == []

    def test_codes_and_messages(self) -> None:
        result = ValidationResult(violations=[Violation.SIZE_VIOLATION, Violation.BUDGET_EXCEEDED])
        assert result.is_valid is False
        assert result.codes == ["SizeViolation", "BudgetExceeded"]
        assert "15 players" in result.messages[0]


class TestValidateSquad:
    """Tests for validate_squad."""

    def test_over_budget_full_squad(self) -> None:
        """15 players costing 101.0 only break the budget."""
        squad, catalog = priced_squad(last_price=10.0)
        result = validate_squad(squad, catalog)
        assert result.violations == [Violation.BUDGET_EXCEEDED]

    def test_short_squad_under_budget(self) -> None:
        """14 players under budget only break the size rule."""
        squad, catalog = priced_squad(last_price=6.5, count=14)
        result = validate_squad(squad, catalog)
        assert result.violations == [Violation.SIZE_VIOLATION]

    def test_both_violations_reported(self) -> None:
        prices = {pid: 10.0 for pid in range(1, 12)}
        squad = SquadSelection(gameweek=1, player_ids=list(prices))
        result = validate_squad(squad, make_catalog(prices))
        assert result.violations == [Violation.SIZE_VIOLATION, Violation.BUDGET_EXCEEDED]

    def test_valid_squad(self) -> None:
        squad, catalog = priced_squad(last_price=8.5)
        result = validate_squad(squad, catalog)
        assert result.is_valid is True

    def test_exactly_at_cap_is_valid(self) -> None:
        squad, catalog = priced_squad(last_price=9.0)
        assert validate_squad(squad, catalog).is_valid is True

    @pytest.mark.parametrize(
        "last_price, over",
        [(8.9, False), (9.0, False), (9.1, True), (25.0, True)],
    )
    def test_budget_exceeded_iff_over_cap(self, last_price: float, over: bool) -> None:
        squad, catalog = priced_squad(last_price=last_price)
        result = validate_squad(squad, catalog)
        assert (Violation.BUDGET_EXCEEDED in result.violations) is over

    @pytest.mark.parametrize("count", [0, 1, 14, 16])
    def test_size_violation_iff_not_fifteen(self, count: int) -> None:
        prices = {pid: 1.0 for pid in range(1, count + 1)}
        squad = SquadSelection(gameweek=1, player_ids=list(prices))
        result = validate_squad(squad, make_catalog(prices))
        assert result.violations == [Violation.SIZE_VIOLATION]

    def test_custom_cap(self) -> None:
        squad, catalog = priced_squad(last_price=8.5)
        result = validate_squad(squad, catalog, cap=50.0)
        assert result.violations == [Violation.BUDGET_EXCEEDED]

    def test_unknown_ids_cost_nothing(self) -> None:
        squad = SquadSelection(gameweek=1, player_ids=list(range(1, 16)))
        result = validate_squad(squad, PlayerCatalog())
        assert result.is_valid is True

    def test_deterministic(self) -> None:
        squad, catalog = priced_squad(last_price=10.0, count=12)
        assert validate_squad(squad, catalog) == validate_squad(squad, catalog)


class TestValidateLineup:
    """Tests for validate_lineup."""

    def test_valid_lineup(self) -> None:
        result = validate_lineup(valid_lineup(), SQUAD)
        assert result.is_valid is True

    def test_captain_vice_conflict(self) -> None:
        """Nine starters with captain and vice both set to 7."""
        result = validate_lineup(valid_lineup(captain=7, vice=7), SQUAD)
        assert result.violations == [Violation.CAPTAIN_VICE_CONFLICT]

    def test_short_lineup_without_captain(self) -> None:
        """Eight starters and no captain."""
        lineup = LineupSelection(gameweek=1, starters=list(range(1, 9)), vice_captain_id=2)
        result = validate_lineup(lineup, SQUAD)
        assert result.violations == [Violation.STARTER_COUNT_VIOLATION, Violation.MISSING_CAPTAIN]

    def test_missing_both_roles(self) -> None:
        lineup = LineupSelection(gameweek=1, starters=list(range(1, 10)))
        result = validate_lineup(lineup, SQUAD)
        assert result.violations == [Violation.MISSING_CAPTAIN, Violation.MISSING_VICE_CAPTAIN]

    def test_roles_not_starters(self) -> None:
        result = validate_lineup(valid_lineup(captain=12, vice=13), SQUAD)
        assert result.violations == [Violation.CAPTAIN_NOT_STARTER, Violation.VICE_NOT_STARTER]

    def test_conflict_regardless_of_starters(self) -> None:
        """Equal captain and vice conflict even when neither starts."""
        lineup = LineupSelection(gameweek=1, starters=[], captain_id=12, vice_captain_id=12)
        result = validate_lineup(lineup, SQUAD)
        assert Violation.CAPTAIN_VICE_CONFLICT in result.violations
        assert result.violations == [
            Violation.STARTER_COUNT_VIOLATION,
            Violation.CAPTAIN_NOT_STARTER,
            Violation.VICE_NOT_STARTER,
            Violation.CAPTAIN_VICE_CONFLICT,
        ]

    def test_distinct_roles_never_conflict(self) -> None:
        lineup = LineupSelection(gameweek=1, starters=[], captain_id=12, vice_captain_id=13)
        assert Violation.CAPTAIN_VICE_CONFLICT not in validate_lineup(lineup, SQUAD).violations

    def test_unset_roles_do_not_conflict(self) -> None:
        lineup = LineupSelection(gameweek=1, starters=list(range(1, 10)))
        assert Violation.CAPTAIN_VICE_CONFLICT not in validate_lineup(lineup, SQUAD).violations

    def test_starter_not_in_squad(self) -> None:
        """A starter dropped from the squad after selection is reported."""
        squad = SquadSelection(gameweek=1, player_ids=list(range(2, 17)))
        result = validate_lineup(valid_lineup(captain=2, vice=3), squad)
        assert result.violations == [Violation.STARTER_NOT_IN_SQUAD]

    def test_chip_does_not_affect_validation(self) -> None:
        lineup = valid_lineup()
        lineup.chip = Chip.WILDCARD
        assert validate_lineup(lineup, SQUAD).is_valid is True


class TestEndToEndSelection:
    """A full squad and lineup both pass before submission."""

    def test_valid_squad_and_lineup(self) -> None:
        squad, catalog = priced_squad(last_price=8.5)
        builder = SquadBuilder(catalog)
        builder.load(squad.player_ids)
        assert builder.budget_used() == 99.5

        composer = LineupComposer(builder.selection)
        for pid in range(1, 10):
            composer.set_starter(pid)
        composer.set_captain(3)
        composer.set_vice_captain(4)

        assert validate_squad(builder.selection, catalog).violations == []
        assert validate_lineup(composer.selection(), builder.selection).violations == []


class TestSelectionState:
    """Tests for squad_state and lineup_state."""

    def test_squad_states(self) -> None:
        squad, catalog = priced_squad(last_price=8.5)
        builder = SquadBuilder(catalog)
        builder.load(squad.player_ids[:14])
        assert squad_state(builder) == SelectionState.EDITING

        builder.toggle(15)
        assert squad_state(builder) == SelectionState.VALIDATED

        builder.mark_submitted()
        assert squad_state(builder) == SelectionState.SUBMITTED

        builder.toggle(15)
        assert squad_state(builder) == SelectionState.EDITING

    def test_lineup_states(self) -> None:
        composer = LineupComposer(SQUAD)
        for pid in range(1, 10):
            composer.set_starter(pid)
        composer.set_captain(1)
        assert lineup_state(composer) == SelectionState.EDITING

        composer.set_vice_captain(2)
        assert lineup_state(composer) == SelectionState.VALIDATED

        composer.mark_submitted()
        assert lineup_state(composer) == SelectionState.SUBMITTED


class TestHelpers:
    """Tests for UI helper predicates."""

    def test_can_add_player(self) -> None:
        catalog = make_catalog({pid: 1.0 for pid in range(1, 17)})
        builder = SquadBuilder(catalog)
        assert can_add_player(builder, catalog.get(1)) is True
        builder.toggle(1)
        assert can_add_player(builder, catalog.get(1)) is False
        for pid in range(2, 16):
            builder.toggle(pid)
        assert can_add_player(builder, catalog.get(16)) is False

    def test_would_exceed_budget(self) -> None:
        catalog = make_catalog({1: 60.0, 2: 30.0, 3: 20.0})
        builder = SquadBuilder(catalog)
        builder.toggle(1)
        assert would_exceed_budget(builder, catalog.get(2)) is False
        assert would_exceed_budget(builder, catalog.get(3)) is False
        builder.toggle(2)
        assert would_exceed_budget(builder, catalog.get(3)) is True
        assert would_exceed_budget(builder, catalog.get(1)) is False

    def test_get_max_player_value(self) -> None:
        catalog = make_catalog({1: 60.0, 2: 50.0})
        builder = SquadBuilder(catalog)
        builder.toggle(1)
        assert get_max_player_value(builder) == 40.0
        builder.toggle(2)
        assert get_max_player_value(builder) == 0.0

    def test_slots_remaining(self) -> None:
        assert get_squad_slots_remaining(SquadSelection(player_ids=[1, 2])) == 13
        assert get_starter_slots_remaining(valid_lineup()) == 0


class TestBudgetPrecision:
    """Budget checks use the exact total, whatever the price precision."""

    def test_fraction_over_cap_is_exceeded(self) -> None:
        prices = {pid: 6.6667 for pid in range(1, 16)}
        squad = SquadSelection(gameweek=1, player_ids=list(prices))
        result = validate_squad(squad, make_catalog(prices))
        assert result.violations == [Violation.BUDGET_EXCEEDED]

    def test_fraction_under_cap_is_valid(self) -> None:
        prices = {pid: 6.6666 for pid in range(1, 16)}
        squad = SquadSelection(gameweek=1, player_ids=list(prices))
        assert validate_squad(squad, make_catalog(prices)).is_valid is True

    def test_would_exceed_budget_by_a_fraction(self) -> None:
        prices = {pid: 6.6667 for pid in range(1, 16)}
        catalog = make_catalog(prices)
        builder = SquadBuilder(catalog)
        builder.load(range(1, 15))
        assert would_exceed_budget(builder, catalog.get(15)) is True


class TestDuplicateIds:
    """Repeated ids count as one player."""

    def test_repeated_squad_id_is_one_player(self) -> None:
        squad = SquadSelection(gameweek=1, player_ids=[1] * 15)
        result = validate_squad(squad, make_catalog({1: 6.5}))
        assert result.violations == [Violation.SIZE_VIOLATION]

    def test_repeated_squad_id_priced_once(self) -> None:
        prices = {pid: 6.5 for pid in range(1, 16)}
        squad = SquadSelection(gameweek=1, player_ids=list(prices) + [1, 1, 1])
        result = validate_squad(squad, make_catalog(prices))
        assert result.is_valid is True

    def test_repeated_starter_counts_once(self) -> None:
        lineup = LineupSelection(
            gameweek=1,
            starters=[1] * 8 + [2],
            captain_id=1,
            vice_captain_id=2,
        )
        result = validate_lineup(lineup, SQUAD)
        assert result.violations == [Violation.STARTER_COUNT_VIOLATION]
