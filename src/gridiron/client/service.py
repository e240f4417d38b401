"""Client for the remote fantasy service endpoints."""

from typing import Any, Optional

from ..logging import get_logger
from ..models import (
    LineupSelection,
    Player,
    PlayerCatalog,
    Position,
    SquadSelection,
    StandingsRow,
)
from .base import ApiClient, ParseError, ServiceError


logger = get_logger(__name__)


def parse_position(position_str: str) -> Position:
    """
    Parse a position string to Position enum.

    Args:
        position_str: Position code, e.g. "QB" or "dst".

    Returns:
        Position enum value.

    Raises:
        ParseError: If position cannot be parsed.
    """
    normalized = position_str.strip().upper()
    if normalized in ("DEF", "D/ST"):
        normalized = "DST"
    try:
        return Position(normalized)
    except ValueError:
        raise ParseError(f"Unknown position: {position_str}")


def parse_player(data: dict[str, Any]) -> Player:
    """
    Build a Player from a service payload.

    Raises:
        ParseError: If required fields are missing or malformed.
    """
    try:
        return Player(
            id=int(data["id"]),
            name=str(data["name"]),
            team=str(data.get("team") or ""),
            position=parse_position(str(data["position"])),
            price=float(data.get("price") or 0.0),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"Invalid player payload {data!r}: {e}")


def parse_standings(rows: list[dict[str, Any]]) -> list[StandingsRow]:
    """Build standings rows, ranked in the order the service returned them."""
    standings: list[StandingsRow] = []
    for rank, row in enumerate(rows, start=1):
        try:
            standings.append(
                StandingsRow(
                    rank=rank,
                    entry_id=int(row["entry_id"]),
                    team_name=str(row["team_name"]),
                    points=float(row.get("points") or 0.0),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Invalid standings row {row!r}: {e}")
    return standings


class FantasyService(ApiClient):
    """
    Endpoints of the NFL fantasy backend.

    Covers:
    - Player catalog and league standings (read-only)
    - Squad and lineup submission
    - Account and league management
    - Admin helpers for test gameweeks
    """

    def fetch_players(self, use_cache: bool = True) -> PlayerCatalog:
        """
        Fetch the player catalog.

        Args:
            use_cache: Whether to use a cached response if available.

        Returns:
            PlayerCatalog snapshot.

        Raises:
            ParseError: If the payload is not a list of players.
        """
        data = self.request("GET", "/players", use_cache=use_cache)
        if not isinstance(data, list):
            raise ParseError("Expected a list of players")
        catalog = PlayerCatalog(parse_player(item) for item in data)
        logger.info("fetched players", count=len(catalog))
        return catalog

    def fetch_standings(self, league_id: int) -> list[StandingsRow]:
        data = self.request("GET", f"/standings/{league_id}")
        if data is None:
            return []
        if not isinstance(data, list):
            raise ParseError("Expected a list of standings rows")
        return parse_standings(data)

    def submit_squad(self, user_id: int, squad: SquadSelection) -> Any:
        """Send a squad. Validation is the caller's job."""
        return self.request(
            "POST",
            "/squad/set",
            body={"gameweek": squad.gameweek, "player_ids": list(squad.player_ids)},
            user_id=user_id,
        )

    def submit_lineup(self, user_id: int, lineup: LineupSelection) -> Any:
        """Send a lineup. Validation is the caller's job."""
        return self.request(
            "POST",
            "/lineup/set",
            body={
                "gameweek": lineup.gameweek,
                "starters": list(lineup.starters),
                "captain_id": lineup.captain_id,
                "vice_captain_id": lineup.vice_captain_id,
                "chip": lineup.chip.value if lineup.chip else None,
            },
            user_id=user_id,
        )

    # Account and league

    def seed_demo(self) -> bool:
        """
        Ask the service to seed demo data.

        Failures are logged and ignored.

        Returns:
            True if the service accepted the request.
        """
        try:
            self.request("POST", "/demo/seed_all")
        except ServiceError as e:
            logger.info("demo seed skipped", reason=str(e))
            return False
        return True

    def register(self, name: str, email: str) -> int:
        """Register a user and return the new user id."""
        data = self.request("POST", "/register", body={"name": name, "email": email})
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError):
            raise ParseError(f"Unexpected register response: {data!r}")

    def me(self, user_id: int) -> dict[str, Any]:
        data = self.request("GET", "/me", user_id=user_id)
        if not isinstance(data, dict):
            raise ParseError(f"Unexpected account response: {data!r}")
        return data

    def create_league(self, user_id: int, team_name: str, name: str = "UK NFL FPL League") -> tuple[int, int]:
        """
        Create a league and enter it.

        Returns:
            (league_id, entry_id)
        """
        data = self.request(
            "POST",
            "/league/create",
            body={"name": name, "team_name": team_name},
            user_id=user_id,
        )
        try:
            return int(data["league_id"]), int(data["entry_id"])
        except (KeyError, TypeError, ValueError):
            raise ParseError(f"Unexpected create league response: {data!r}")

    def join_league(self, user_id: int, league_id: int, team_name: str) -> int:
        """Join a league and return the new entry id."""
        data = self.request(
            "POST",
            "/league/join",
            body={"league_id": league_id, "team_name": team_name},
            user_id=user_id,
        )
        try:
            return int(data["entry_id"])
        except (KeyError, TypeError, ValueError):
            raise ParseError(f"Unexpected join league response: {data!r}")

    # Admin (testing only)

    def create_gameweek(self, user_id: int, gameweek: int, deadline_at: str) -> Any:
        return self.request(
            "POST",
            "/gameweeks/create",
            body={"id": gameweek, "name": f"GW{gameweek}", "deadline_at": deadline_at},
            user_id=user_id,
        )

    def upload_stats(self, user_id: int, gameweek: int, stats: list[dict[str, Any]]) -> Any:
        return self.request(
            "POST",
            "/stats/upload",
            body={"gameweek": gameweek, "stats": stats},
            user_id=user_id,
        )

    def compute_gameweek(self, gameweek: int) -> Optional[dict[str, Any]]:
        """Trigger server-side scoring for a gameweek and return its summary."""
        return self.request("POST", f"/compute/{gameweek}")
