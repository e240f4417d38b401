"""Squad selection model and builder."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from .player import PlayerCatalog


# Game constants
SQUAD_SIZE = 15
BUDGET_CAP = 100.0


@dataclass
class SquadSelection:
    """
    The set of players picked for one gameweek.

    Attributes:
        gameweek: Target gameweek (1-based).
        player_ids: Selected player ids in the order they were picked.
    """

    gameweek: int = 1
    player_ids: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate squad data."""
        if self.gameweek < 1:
            raise ValueError("gameweek must be a positive integer")

    @property
    def size(self) -> int:
        """Return number of players in the selection."""
        return len(self.player_ids)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.player_ids


class SquadBuilder:
    """
    Builds a squad selection against a player catalog.

    Adding a player to a full squad is a silent no-op rather than an error,
    so the picker stays responsive without forcing a removal first. The
    budget is only reported here; it is enforced at submission.
    """

    def __init__(
        self,
        catalog: PlayerCatalog,
        gameweek: int = 1,
        cap: float = BUDGET_CAP,
    ) -> None:
        self.catalog = catalog
        self.cap = cap
        self.selection = SquadSelection(gameweek=gameweek)
        self.submitted = False

    @property
    def gameweek(self) -> int:
        return self.selection.gameweek

    @gameweek.setter
    def gameweek(self, value: int) -> None:
        if value == self.selection.gameweek:
            return
        self.selection = SquadSelection(gameweek=value, player_ids=list(self.selection.player_ids))
        self.submitted = False

    def toggle(self, player_id: int) -> bool:
        """
        Add or remove a player.

        Removal is always allowed. Adding only happens while the squad has
        fewer than SQUAD_SIZE players.

        Returns:
            True if the selection changed.
        """
        if player_id in self.selection.player_ids:
            self.selection.player_ids.remove(player_id)
        elif self.selection.size >= SQUAD_SIZE:
            return False
        else:
            self.selection.player_ids.append(player_id)
        self.submitted = False
        return True

    def is_selected(self, player_id: int) -> bool:
        return player_id in self.selection.player_ids

    def current_selection(self) -> tuple[int, ...]:
        """Selected ids in pick order."""
        return tuple(self.selection.player_ids)

    def budget_used(self) -> float:
        """Sum of current catalog prices of the selected players."""
        return squad_cost(self.selection.player_ids, self.catalog)

    def budget_remaining(self) -> float:
        """Budget left under the cap (negative when over)."""
        return round(self.cap - self.budget_used(), 2)

    def slots_remaining(self) -> int:
        return max(0, SQUAD_SIZE - self.selection.size)

    def clear(self) -> None:
        """Remove every selected player."""
        if self.selection.player_ids:
            self.selection.player_ids.clear()
            self.submitted = False

    def load(self, player_ids: Iterable[int]) -> None:
        """
        Replace the selection, e.g. when restoring a saved squad.

        Duplicates are dropped and anything past SQUAD_SIZE is ignored.
        """
        ids: list[int] = []
        for player_id in player_ids:
            if player_id not in ids and len(ids) < SQUAD_SIZE:
                ids.append(player_id)
        self.selection.player_ids = ids
        self.submitted = False

    def replace_catalog(self, catalog: PlayerCatalog) -> None:
        """Swap in a refreshed catalog; the selection is kept as is."""
        self.catalog = catalog

    def mark_submitted(self) -> None:
        self.submitted = True


def _total(player_ids: Iterable[int], catalog: PlayerCatalog) -> Decimal:
    # str() keeps the price as written, so tenths add up exactly
    return sum((Decimal(str(catalog.price_of(pid))) for pid in player_ids), Decimal(0))


def squad_cost(player_ids: Iterable[int], catalog: PlayerCatalog) -> float:
    """
    Total price of a list of player ids.

    Unknown ids count as 0.
    """
    return float(_total(player_ids, catalog))


def exceeds_cap(player_ids: Iterable[int], catalog: PlayerCatalog, cap: float = BUDGET_CAP) -> bool:
    """Check whether the players' total price is strictly over the cap."""
    return _total(player_ids, catalog) > Decimal(str(cap))
