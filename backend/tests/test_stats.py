from datetime import date

import pytest
from bowling_tracker.scoring import Session
from bowling_tracker.services.stats import (
    compute_streaks,
    rolling_average,
    summarize_sessions,
)


def test_rolling_average():
    assert rolling_average([100, 200, 150, 250], 2) == [100.0, 150.0, 175.0, 200.0]
    assert rolling_average([], 3) == []


def test_rolling_average_requires_positive_span():
    with pytest.raises(ValueError):
        rolling_average([100], 0)


def test_compute_streaks():
    assert compute_streaks([210, 190, 200, 220, 205, 180, 201], 200) == {
        "threshold": 200,
        "current": 1,
        "longest": 3,
    }
    assert compute_streaks([], 200) == {"threshold": 200, "current": 0, "longest": 0}


def test_summarize_sessions_merges_dates(sample_games):
    first = Session(date(2024, 2, 5), [sample_games[300].with_number(1)])
    second = Session(date(2024, 2, 5), [sample_games[0].with_number(1)])
    other = Session(date(2024, 1, 30))
    other.add_game(sample_games[80])

    summary = summarize_sessions([first, second, other])

    assert list(summary) == ["2024-01-30", "2024-02-05"]
    assert summary["2024-02-05"]["games"] == 2
    assert summary["2024-02-05"]["average"] == pytest.approx(150.0)
    assert summary["2024-02-05"]["strikeRate"] == pytest.approx(12 / 22)
    assert summary["2024-01-30"]["spareRate"] == 0.0
