import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from bowling_tracker.scoring import bowling


def _roll_all(rolls, config=None):
    state = bowling.init_state(config or {})
    for pins in rolls:
        state = bowling.apply({"type": "ROLL", "pins": pins}, state)
    return state


def test_bowling_simple_score():
    summary = bowling.summary(_roll_all([1] * 20))
    assert summary["total"] == 20
    assert summary["complete"] is True
    assert summary["currentFrame"] is None


def test_perfect_game():
    summary = bowling.summary(_roll_all([10] * 12))
    assert summary["total"] == 300
    assert summary["frames"][0] == [10]
    assert summary["frames"][9] == [10, 10, 10]
    assert summary["scores"][-1] == 300


def test_running_total_waits_for_strike_bonus():
    state = _roll_all([3, 4, 10])
    summary = bowling.summary(state)
    assert summary["scores"][:2] == [7, None]
    assert summary["total"] == 7
    assert summary["currentFrame"] == 3
    assert summary["complete"] is False

    summary = bowling.summary(_roll_all([3, 4, 10, 5, 2]))
    assert summary["scores"][:3] == [7, 24, 31]
    assert summary["total"] == 31


def test_pending_frame_is_reported():
    summary = bowling.summary(_roll_all([7]))
    assert summary["frames"][0] == [7]
    assert summary["scores"][0] is None


def test_tenth_frame_bonus_after_spare():
    summary = bowling.summary(_roll_all([0] * 18 + [6, 4, 8]))
    assert summary["frames"][9] == [6, 4, 8]
    assert summary["total"] == 18
    assert summary["complete"] is True


def test_game_number_from_config():
    state = _roll_all([], {"gameNumber": 4})
    assert state["game"].number == 4


def test_rejects_unknown_event():
    state = bowling.init_state({})
    with pytest.raises(ValueError, match="invalid bowling event"):
        bowling.apply({"type": "POINT"}, state)


@pytest.mark.parametrize("pins", [-1, 11])
def test_rejects_pins_out_of_range(pins):
    with pytest.raises(ValueError, match="out of range"):
        _roll_all([pins])


def test_rejects_more_pins_than_standing():
    with pytest.raises(ValueError, match="standing"):
        _roll_all([6, 5])
    with pytest.raises(ValueError, match="standing"):
        _roll_all([0] * 18 + [10, 3, 8])


def test_rejects_roll_after_game_complete():
    with pytest.raises(ValueError, match="no rolls left"):
        _roll_all([0] * 21)
