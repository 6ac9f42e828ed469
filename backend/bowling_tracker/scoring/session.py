"""A dated session of games and the roll-up statistics across them."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Iterator, List, Optional, Tuple

from ..time_utils import session_date
from .frame import FRAMES_PER_GAME
from .game import Game


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass(frozen=True)
class SessionSummary:
    date: date
    games: int
    average: float
    high_game: Optional[int]
    low_game: Optional[int]
    total_pinfall: int
    strike_rate: float
    spare_rate: float
    open_frame_rate: float
    clean_frame_rate: float
    avg_first_ball_pinfall: float


class Session:
    """Games bowled on one date, numbered 1..N in the order they were added.

    The date is always supplied by the caller. Aggregates over an empty
    session, or over zero chances, are reported as ``0.0``.
    """

    def __init__(self, played_on: date | datetime, games: Iterable[Game] = ()) -> None:
        self.date = session_date(played_on, field_name="played_on")
        # pre-numbered games are kept as given so is_valid() can reject them
        self._games: List[Game] = list(games)

    @property
    def games(self) -> Tuple[Game, ...]:
        return tuple(self._games)

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[Game]:
        return iter(tuple(self._games))

    def add_game(self, game: Game) -> Game:
        numbered = game.with_number(len(self._games) + 1)
        self._games.append(numbered)
        return numbered

    def replace_game(self, number: int, game: Game) -> Game:
        if not 1 <= number <= len(self._games):
            raise ValueError(f"session has no game #{number}")
        numbered = game.with_number(number)
        self._games[number - 1] = numbered
        return numbered

    def is_valid(self) -> bool:
        numbered = all(g.number == n for n, g in enumerate(self._games, start=1))
        return numbered and all(g.is_valid() for g in self._games)

    # Statistics -----------------------------------------------------------

    def average(self) -> float:
        return _ratio(sum(g.score() for g in self._games), len(self._games))

    def high_game(self) -> Optional[int]:
        return max((g.score() for g in self._games), default=None)

    def low_game(self) -> Optional[int]:
        return min((g.score() for g in self._games), default=None)

    def total_pinfall(self) -> int:
        return sum(g.pin_count() for g in self._games)

    def strike_rate(self) -> float:
        return _ratio(
            sum(g.num_strikes() for g in self._games),
            sum(g.strike_chances() for g in self._games),
        )

    def spare_rate(self) -> float:
        return _ratio(
            sum(g.num_spares() for g in self._games),
            sum(g.spare_chances() for g in self._games),
        )

    def open_frame_rate(self) -> float:
        return _ratio(
            sum(g.open_frames() for g in self._games),
            len(self._games) * FRAMES_PER_GAME,
        )

    def clean_frame_rate(self) -> float:
        return _ratio(
            sum(g.clean_frames() for g in self._games),
            len(self._games) * FRAMES_PER_GAME,
        )

    def avg_first_ball_pinfall(self) -> float:
        return _ratio(
            sum(g.avg_first_ball_pinfall() for g in self._games), len(self._games)
        )

    def summary(self) -> SessionSummary:
        return SessionSummary(
            date=self.date,
            games=len(self._games),
            average=self.average(),
            high_game=self.high_game(),
            low_game=self.low_game(),
            total_pinfall=self.total_pinfall(),
            strike_rate=self.strike_rate(),
            spare_rate=self.spare_rate(),
            open_frame_rate=self.open_frame_rate(),
            clean_frame_rate=self.clean_frame_rate(),
            avg_first_ball_pinfall=self.avg_first_ball_pinfall(),
        )
