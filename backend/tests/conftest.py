import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# main.py fails fast without explicit, non-wildcard origins
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")

from bowling_tracker.scoring import Frame, Game  # noqa: E402

SAMPLE_FRAMES = {
    300: [[10]] * 9 + [[10, 10, 10]],
    200: [[10], [9, 1]] * 4 + [[10], [9, 1, 10]],
    191: [[9, 1]] * 9 + [[9, 1, 10]],
    155: [[10, 0], [10, 0], [6, 3], [8, 1], [9, 1], [8, 0], [9, 0], [6, 2], [10, 0], [10, 9, 1]],
    150: [[5, 5]] * 9 + [[5, 5, 5]],
    80: [[4, 4]] * 10,
    40: [[2, 2]] * 10,
    0: [[0, 0]] * 10,
}


def _build_game(frames, number=1):
    return Game(number, [Frame.from_throws(throws) for throws in frames])


@pytest.fixture
def build_game():
    """Build a ``Game`` from ten raw throw lists."""
    return _build_game


@pytest.fixture
def sample_games():
    """Complete games keyed by their expected score."""
    return {score: _build_game(frames) for score, frames in SAMPLE_FRAMES.items()}
