"""Ten-pin bowling scoring engine."""

from . import bowling
from .frame import FRAMES_PER_GAME, PINS, Frame, FrameKind
from .game import Game, GameState, GameStatistics
from .session import Session, SessionSummary

__all__ = [
    "bowling",
    "FRAMES_PER_GAME",
    "PINS",
    "Frame",
    "FrameKind",
    "Game",
    "GameState",
    "GameStatistics",
    "Session",
    "SessionSummary",
]
