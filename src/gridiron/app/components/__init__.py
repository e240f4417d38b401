"""Reusable UI components for the Gridiron application."""

from .player_table import render_player_table
from .squad_status import render_squad_status
from .validation_display import render_submission, render_validation

__all__ = ["render_player_table", "render_squad_status", "render_submission", "render_validation"]
