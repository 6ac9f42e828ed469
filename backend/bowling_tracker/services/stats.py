from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Sequence

from ..scoring.session import Session


def rolling_average(scores: Sequence[int], span: int) -> list[float]:
    """Return the rolling average of a sequence of game scores.

    Args:
        scores: Game scores in the order they were bowled.
        span: Size of the rolling window.
    """
    if span <= 0:
        raise ValueError("span must be positive")
    total = 0
    window: deque[int] = deque()
    averages: list[float] = []
    for score in scores:
        window.append(score)
        total += score
        if len(window) > span:
            total -= window.popleft()
        averages.append(total / len(window))
    return averages


def compute_streaks(scores: Sequence[int], threshold: int) -> Dict[str, int]:
    """Compute current and longest runs of games scoring at least ``threshold``."""
    longest = current = 0
    for score in scores:
        if score >= threshold:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return {
        "threshold": threshold,
        "current": current,
        "longest": longest,
    }


def summarize_sessions(sessions: Iterable[Session]) -> Dict[str, Dict[str, float]]:
    """Aggregate sessions by date.

    Returns:
        dict mapping ISO date to ``{"games", "average", "strikeRate", "spareRate"}``.
        Sessions sharing a date are merged before the rates are computed.
    """
    merged: Dict[str, Session] = {}
    for session in sessions:
        key = session.date.isoformat()
        target = merged.setdefault(key, Session(session.date))
        for game in session:
            target.add_game(game)
    return {
        key: {
            "games": len(session),
            "average": session.average(),
            "strikeRate": session.strike_rate(),
            "spareRate": session.spare_rate(),
        }
        for key, session in sorted(merged.items())
    }
