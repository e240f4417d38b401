"""Offline sample catalog used when the service is unavailable."""

from ..models import Player, PlayerCatalog, Position


# (name, team, position, price)
_SAMPLE_PLAYERS: list[tuple[str, str, Position, float]] = [
    ("Patrick Mahomes", "KC", Position.QB, 9.5),
    ("Josh Allen", "BUF", Position.QB, 9.5),
    ("Jalen Hurts", "PHI", Position.QB, 9.0),
    ("Jared Goff", "DET", Position.QB, 7.5),
    ("Christian McCaffrey", "SF", Position.RB, 10.0),
    ("Bijan Robinson", "ATL", Position.RB, 8.5),
    ("Saquon Barkley", "PHI", Position.RB, 9.0),
    ("Kyren Williams", "LAR", Position.RB, 7.0),
    ("James Cook", "BUF", Position.RB, 6.5),
    ("Tony Pollard", "TEN", Position.RB, 5.5),
    ("Justin Jefferson", "MIN", Position.WR, 9.5),
    ("Ja'Marr Chase", "CIN", Position.WR, 9.5),
    ("CeeDee Lamb", "DAL", Position.WR, 9.0),
    ("Amon-Ra St. Brown", "DET", Position.WR, 8.5),
    ("Puka Nacua", "LAR", Position.WR, 8.0),
    ("DK Metcalf", "PIT", Position.WR, 6.5),
    ("Jaylen Waddle", "MIA", Position.WR, 6.0),
    ("Travis Kelce", "KC", Position.TE, 7.5),
    ("Sam LaPorta", "DET", Position.TE, 6.5),
    ("George Kittle", "SF", Position.TE, 7.0),
    ("Dalton Kincaid", "BUF", Position.TE, 5.0),
    ("Justin Tucker", "BAL", Position.K, 5.0),
    ("Harrison Butker", "KC", Position.K, 4.5),
    ("Jake Elliott", "PHI", Position.K, 4.5),
    ("Brandon Aubrey", "DAL", Position.K, 4.0),
    ("San Francisco 49ers", "SF", Position.DST, 5.0),
    ("Baltimore Ravens", "BAL", Position.DST, 5.0),
    ("Cleveland Browns", "CLE", Position.DST, 4.5),
    ("New York Jets", "NYJ", Position.DST, 4.0),
]


def create_sample_players() -> list[Player]:
    """Create the sample player list (ids start at 1)."""
    return [
        Player(id=i, name=name, team=team, position=position, price=price)
        for i, (name, team, position, price) in enumerate(_SAMPLE_PLAYERS, start=1)
    ]


def create_sample_catalog() -> PlayerCatalog:
    return PlayerCatalog(create_sample_players())
