"""Lineup selection model and composer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .squad import SquadSelection


STARTER_COUNT = 9


class Chip(Enum):
    """One-off lineup modifiers."""

    BENCH_BOOST = "BB"
    TRIPLE_CAPTAIN = "TC"
    WILDCARD = "WC"

    @property
    def label(self) -> str:
        return CHIP_LABELS[self]


CHIP_LABELS = {
    Chip.BENCH_BOOST: "Bench Boost",
    Chip.TRIPLE_CAPTAIN: "Triple Captain",
    Chip.WILDCARD: "Wildcard",
}


def parse_chip(value: Union[Chip, str, None]) -> Optional[Chip]:
    """
    Normalise a chip value.

    Args:
        value: A Chip, its code ("BB", "TC", "WC"), or None/"" for no chip.

    Returns:
        Chip enum value or None.

    Raises:
        ValueError: If the code is not a known chip.
    """
    if value is None or isinstance(value, Chip):
        return value
    code = value.strip().upper()
    if not code or code == "NONE":
        return None
    return Chip(code)


@dataclass
class LineupSelection:
    """
    Starting lineup for one gameweek.

    Attributes:
        gameweek: Gameweek the lineup applies to.
        starters: Starting player ids, a subset of the squad.
        captain_id: Captain (must be a starter to submit).
        vice_captain_id: Vice-captain (must be a starter to submit).
        chip: Optional chip played this gameweek.
    """

    gameweek: int = 1
    starters: list[int] = field(default_factory=list)
    captain_id: Optional[int] = None
    vice_captain_id: Optional[int] = None
    chip: Optional[Chip] = None


class LineupComposer:
    """
    Picks starters and captaincy roles from a saved squad.

    Every setter is a no-op when its precondition fails (full starting
    lineup, player not in the squad, captain candidate not starting).
    Rules that involve more than one field, such as captain and vice being
    different players, are left to validate_lineup at submission time.
    """

    def __init__(self, squad: SquadSelection) -> None:
        self.squad = squad
        self.lineup = LineupSelection(gameweek=squad.gameweek)
        self.submitted = False

    def _changed(self) -> bool:
        self.submitted = False
        return True

    def is_starter(self, player_id: int) -> bool:
        return player_id in self.lineup.starters

    def set_starter(self, player_id: int) -> bool:
        """
        Add a squad player to the starters.

        Returns:
            True if the starters changed.
        """
        if player_id in self.lineup.starters:
            return False
        if player_id not in self.squad:
            return False
        if len(self.lineup.starters) >= STARTER_COUNT:
            return False
        self.lineup.starters.append(player_id)
        return self._changed()

    def unset_starter(self, player_id: int) -> bool:
        """Remove a player from the starters. Captaincy roles are kept."""
        if player_id not in self.lineup.starters:
            return False
        self.lineup.starters.remove(player_id)
        return self._changed()

    def toggle_starter(self, player_id: int) -> bool:
        if self.is_starter(player_id):
            return self.unset_starter(player_id)
        return self.set_starter(player_id)

    def set_captain(self, player_id: int) -> bool:
        """Set the captain; only a current starter can be captain."""
        if not self.is_starter(player_id) or self.lineup.captain_id == player_id:
            return False
        self.lineup.captain_id = player_id
        return self._changed()

    def set_vice_captain(self, player_id: int) -> bool:
        """Set the vice-captain; only a current starter can be vice."""
        if not self.is_starter(player_id) or self.lineup.vice_captain_id == player_id:
            return False
        self.lineup.vice_captain_id = player_id
        return self._changed()

    def clear_captain(self) -> bool:
        if self.lineup.captain_id is None:
            return False
        self.lineup.captain_id = None
        return self._changed()

    def clear_vice_captain(self) -> bool:
        if self.lineup.vice_captain_id is None:
            return False
        self.lineup.vice_captain_id = None
        return self._changed()

    def set_chip(self, chip: Union[Chip, str, None]) -> bool:
        """Set or clear the chip. Chip eligibility is checked by the service."""
        parsed = parse_chip(chip)
        if parsed == self.lineup.chip:
            return False
        self.lineup.chip = parsed
        return self._changed()

    def selection(self) -> LineupSelection:
        """Current lineup state."""
        return self.lineup

    def mark_submitted(self) -> None:
        self.submitted = True
