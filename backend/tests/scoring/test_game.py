import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from bowling_tracker.scoring import Frame, Game, GameState


def test_new_game_is_empty():
    game = Game(3)
    assert game.number == 3
    assert len(game.frames) == 10
    assert all(f == Frame.empty() for f in game.frames)
    assert game.state() is GameState.EMPTY
    assert not game.is_valid()
    assert game.next_frame_number() == 1


def test_game_needs_exactly_ten_frames():
    with pytest.raises(ValueError, match="exactly 10 frames"):
        Game(1, [Frame.empty()] * 11)


def test_sample_scores(sample_games):
    for expected, game in sample_games.items():
        assert game.is_valid(), expected
        assert game.score() == expected


def test_score_through_ten_matches_score(sample_games):
    for expected, game in sample_games.items():
        assert game.score_through(10) == expected


def test_running_scores_of_mixed_game(sample_games):
    assert sample_games[155].running_scores() == [
        26, 45, 54, 63, 81, 89, 98, 106, 135, 155,
    ]


def test_running_scores_of_perfect_game(sample_games):
    assert sample_games[300].running_scores() == [30 * n for n in range(1, 11)]


def test_strike_in_eighth_waits_for_ninth(build_game):
    frames = [[3, 4]] * 7 + [[10], [], []]
    game = build_game(frames)
    assert game.state() is GameState.IN_PROGRESS
    assert game.score_through(7) == 49
    assert game.score_through(8) is None
    assert game.score_through(10) is None
    assert game.next_frame_number() == 9


def test_double_in_eighth_and_ninth_waits_for_tenth(build_game):
    frames = [[0, 0]] * 7 + [[10], [10], []]
    game = build_game(frames)
    assert game.score_through(7) == 0
    assert game.score_through(8) is None

    finished = game.with_frame(10, Frame.three(7, 3, 10))
    assert finished.score_through(8) == 27
    assert finished.score_through(9) == 47
    assert finished.score_through(10) == 67
    assert finished.score() == 67


def test_strike_in_eighth_followed_by_open_ninth_needs_no_tenth(build_game):
    frames = [[0, 0]] * 7 + [[10], [3, 4], []]
    game = build_game(frames)
    assert game.score_through(8) == 17
    assert game.score_through(9) == 24
    assert game.score_through(10) is None


def test_spare_in_ninth_waits_for_a_complete_tenth(build_game):
    frames = [[1, 1]] * 8 + [[6, 4], [5, 5]]
    game = build_game(frames)
    # the tenth has a spare but no bonus throw yet
    assert game.score_through(8) == 16
    assert game.score_through(9) is None

    game = game.with_frame(10, Frame.three(5, 5, 2))
    assert game.score_through(9) == 31
    assert game.score() == 43


def test_invalid_frame_makes_later_scores_undefined(build_game):
    frames = [[3, 4], [8, 5]] + [[0, 0]] * 8
    game = build_game(frames)
    assert not game.is_valid()
    assert game.score_through(1) == 7
    assert game.score_through(2) is None
    assert game.score_through(10) is None


def test_score_through_rejects_bad_frame_numbers(sample_games):
    game = sample_games[300]
    for n in (0, 11):
        with pytest.raises(ValueError):
            game.score_through(n)


def test_score_of_in_progress_game_counts_recorded_pins(build_game):
    game = build_game([[10], [10], [4, 2]] + [[]] * 7)
    assert game.score() == 24 + 16 + 6
    assert game.running_scores() == [24, 40, 46] + [None] * 7


def test_tenth_frame_open_game_is_valid(build_game):
    game = build_game([[10]] * 9 + [[9, 0]])
    assert game.is_valid()
    # frames 1-7: 30 each, frame 8: 10+10+9, frame 9: 10+9+0, frame 10: 9
    assert game.score() == 210 + 29 + 19 + 9


def test_tenth_frame_mark_without_bonus_is_invalid(build_game):
    for tenth in ([9, 1], [10], [10, 10]):
        game = build_game([[0, 0]] * 9 + [tenth])
        assert not game.is_valid(), tenth
        assert game.state() is GameState.IN_PROGRESS


def test_with_frame_replaces_whole_frame(sample_games):
    game = sample_games[0]
    edited = game.with_frame(5, Frame.two(5, 5))
    assert game.frame(5) == Frame.two(0, 0)
    assert edited.frame(5) == Frame.two(5, 5)
    assert edited.score() == 10
    assert edited.number == game.number


def test_equality_covers_number_and_frames(sample_games):
    game = sample_games[80]
    assert game == game.with_number(1)
    assert game != game.with_number(2)
    assert game != sample_games[40]


def test_pin_count(sample_games):
    assert sample_games[300].pin_count() == 120
    assert sample_games[191].pin_count() == 110
    assert sample_games[80].pin_count() == 80
    assert Game().pin_count() == 0


@pytest.mark.parametrize(
    "score, strikes, spares, strike_chances, spare_chances",
    [
        (300, 12, 0, 12, 0),
        (200, 6, 5, 10, 5),
        (191, 1, 10, 10, 10),
        (150, 0, 10, 10, 10),
        (155, 4, 2, 11, 7),
        (80, 0, 0, 10, 10),
    ],
)
def test_mark_counts(sample_games, score, strikes, spares, strike_chances, spare_chances):
    game = sample_games[score]
    assert game.num_strikes() == strikes
    assert game.num_spares() == spares
    assert game.strike_chances() == strike_chances
    assert game.spare_chances() == spare_chances


def test_open_and_clean_frames(sample_games):
    assert sample_games[300].open_frames() == 0
    assert sample_games[300].clean_frames() == 10
    assert sample_games[155].open_frames() == 5
    assert sample_games[155].clean_frames() == 5
    assert sample_games[80].open_frames() == 10
    assert Game().open_frames() == 10


def test_avg_first_ball_pinfall(sample_games):
    assert sample_games[300].avg_first_ball_pinfall() == 10.0
    assert sample_games[191].avg_first_ball_pinfall() == 9.0
    assert sample_games[155].avg_first_ball_pinfall() == pytest.approx(8.6)
    assert Game().avg_first_ball_pinfall() == 0.0


def test_statistics_bundle(sample_games, build_game):
    stats = sample_games[155].statistics()
    assert stats.score == 155
    assert stats.pin_count == 103
    assert stats.open_frames == 5

    in_progress = build_game([[10]] + [[]] * 9).statistics()
    assert in_progress.score is None
    assert in_progress.strikes == 1
