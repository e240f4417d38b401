"""Client for the remote fantasy service."""

from .base import (
    ApiClient,
    FetchError,
    ParseError,
    RateLimitError,
    RejectedError,
    ServiceError,
)
from .service import (
    FantasyService,
    parse_player,
    parse_position,
    parse_standings,
)
from .sample import create_sample_catalog, create_sample_players

__all__ = [
    # Base
    "ApiClient",
    "FetchError",
    "ParseError",
    "RateLimitError",
    "RejectedError",
    "ServiceError",
    # Service
    "FantasyService",
    "parse_player",
    "parse_position",
    "parse_standings",
    # Sample data
    "create_sample_catalog",
    "create_sample_players",
]
