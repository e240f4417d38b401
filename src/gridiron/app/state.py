"""Session state shared by the app pages."""

import streamlit as st

from ..client import FantasyService, FetchError, ParseError, RateLimitError, RejectedError, create_sample_catalog
from ..config import load_settings, settings_path
from ..gateway import SubmissionGateway
from ..logging import configure_logging, get_logger
from ..models import LineupComposer, PlayerCatalog, SquadBuilder


logger = get_logger(__name__)


def init_session_state() -> None:
    """Initialize session state variables."""
    if "service" not in st.session_state:
        settings = load_settings(settings_path())
        configure_logging(settings.log_level, settings.log_json)
        st.session_state.service = FantasyService(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            cache_dir=settings.cache_dir,
            cache_ttl_minutes=settings.cache_ttl_minutes,
        )
        st.session_state.gateway = SubmissionGateway(st.session_state.service)
    if "data_source" not in st.session_state:
        st.session_state.data_source = "unknown"
    if "builder" not in st.session_state:
        st.session_state.builder = SquadBuilder(load_catalog())
    if "composer" not in st.session_state:
        st.session_state.composer = LineupComposer(st.session_state.builder.selection)
    for key in ("user_id", "account", "league_id", "entry_id"):
        if key not in st.session_state:
            st.session_state[key] = None
    if "standings" not in st.session_state:
        st.session_state.standings = []


def load_catalog(use_cache: bool = True) -> PlayerCatalog:
    """
    Get players from the service with fallback to sample data.

    Returns:
        PlayerCatalog snapshot.
    """
    try:
        catalog = st.session_state.service.fetch_players(use_cache=use_cache)
        st.session_state.data_source = "live"
        return catalog
    except (FetchError, ParseError, RateLimitError, RejectedError) as e:
        logger.warning("falling back to sample players", reason=str(e))
        st.session_state.data_source = "sample"
        return create_sample_catalog()


def refresh_catalog() -> None:
    """Refresh player data, keeping the current selection."""
    st.session_state.builder.replace_catalog(load_catalog(use_cache=False))


def reset_composer() -> None:
    """Start a new lineup from the builder's current squad."""
    st.session_state.composer = LineupComposer(st.session_state.builder.selection)
    # the chip widget keeps its own value across reruns
    if "chip_input" in st.session_state:
        del st.session_state["chip_input"]
