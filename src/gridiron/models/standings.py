"""League standings data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StandingsRow:
    """
    One entry in a league table.

    Attributes:
        rank: 1-based position in the order returned by the service.
        entry_id: League entry identifier.
        team_name: Fantasy team name.
        points: Total points as computed by the service.
    """

    rank: int
    entry_id: int
    team_name: str
    points: float = 0.0
