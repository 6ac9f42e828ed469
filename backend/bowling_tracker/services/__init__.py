"""Internal application services (pure helpers, no I/O)."""

from .validation import (
    ValidationError,
    parse_throws,
    validate_game_frames,
    validate_game_number,
    validate_throws,
)
from .stats import compute_streaks, rolling_average, summarize_sessions

__all__ = [
    "ValidationError",
    "parse_throws",
    "validate_game_frames",
    "validate_game_number",
    "validate_throws",
    "compute_streaks",
    "rolling_average",
    "summarize_sessions",
]
