"""Player data model for NFL fantasy."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Position(Enum):
    """Roster position as reported by the fantasy service."""

    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DST = "DST"


@dataclass(frozen=True)
class Player:
    """
    Represents a player in the fantasy game.

    Attributes:
        id: Unique identifier assigned by the fantasy service.
        name: Player's full name (or team name for defenses).
        team: NFL team abbreviation.
        position: Roster position.
        price: Current price in salary-cap units.
    """

    id: int
    name: str
    team: str
    position: Position
    price: float = 0.0

    def __post_init__(self) -> None:
        """Validate player data after initialization."""
        if self.price < 0:
            raise ValueError("price cannot be negative")


class PlayerCatalog:
    """
    Read-only snapshot of the players available for selection.

    Lookups are by player id. Ids that appear more than once in the source
    list resolve to the last entry.
    """

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._players: dict[int, Player] = {}
        for player in players:
            self._players[player.id] = player

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def get(self, player_id: int) -> Optional[Player]:
        """Get a player by ID."""
        return self._players.get(player_id)

    def price_of(self, player_id: int) -> float:
        """Price of a player, 0.0 when the id is not in the catalog."""
        player = self._players.get(player_id)
        if player is None:
            return 0.0
        return player.price

    def by_position(self) -> dict[Position, list[Player]]:
        """
        Group players by position.

        Returns:
            Dict with an entry for every position (possibly empty), in
            QB, RB, WR, TE, K, DST order.
        """
        groups: dict[Position, list[Player]] = {position: [] for position in Position}
        for player in self._players.values():
            groups[player.position].append(player)
        return groups

    @property
    def teams(self) -> list[str]:
        """Sorted list of distinct team abbreviations."""
        return sorted({p.team for p in self._players.values()})
