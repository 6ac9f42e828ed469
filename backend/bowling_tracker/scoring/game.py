"""A single ten-frame bowling game and its scoring rules."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .frame import FRAMES_PER_GAME, PINS, Frame, check_frame_number


class GameState(str, enum.Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class GameStatistics:
    score: Optional[int]
    pin_count: int
    strikes: int
    spares: int
    strike_chances: int
    spare_chances: int
    open_frames: int
    clean_frames: int
    avg_first_ball_pinfall: float


class Game:
    """Ten frames plus the game's 1-based number within its session.

    Games are values: editing a frame goes through ``with_frame`` which
    returns a new game.
    """

    __slots__ = ("_number", "_frames")

    def __init__(self, number: int = 1, frames: Optional[Iterable[Frame]] = None) -> None:
        if frames is None:
            frames = [Frame.empty() for _ in range(FRAMES_PER_GAME)]
        frames = tuple(frames)
        if len(frames) != FRAMES_PER_GAME:
            raise ValueError(
                f"a game needs exactly {FRAMES_PER_GAME} frames, got {len(frames)}"
            )
        self._number = int(number)
        self._frames: Tuple[Frame, ...] = frames

    @classmethod
    def from_throws(cls, number: int, frames: Sequence[Sequence[int]]) -> "Game":
        return cls(number, [Frame.from_throws(throws) for throws in frames])

    @property
    def number(self) -> int:
        return self._number

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    def frame(self, frame_number: int) -> Frame:
        return self._frames[check_frame_number(frame_number) - 1]

    def with_frame(self, frame_number: int, frame: Frame) -> "Game":
        index = check_frame_number(frame_number) - 1
        frames = list(self._frames)
        frames[index] = frame
        return Game(self._number, frames)

    def with_number(self, number: int) -> "Game":
        return Game(number, self._frames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self._number == other._number and self._frames == other._frames

    def __hash__(self) -> int:
        return hash((self._number, self._frames))

    def __repr__(self) -> str:
        return f"Game(number={self._number!r}, frames={list(self._frames)!r})"

    # Validity -------------------------------------------------------------

    def is_valid(self) -> bool:
        return all(
            frame.is_valid_for_position(n)
            for n, frame in enumerate(self._frames, start=1)
        )

    def state(self) -> GameState:
        if all(frame.is_empty for frame in self._frames):
            return GameState.EMPTY
        if self.is_valid():
            return GameState.COMPLETE
        return GameState.IN_PROGRESS

    def next_frame_number(self) -> Optional[int]:
        for n, frame in enumerate(self._frames, start=1):
            if frame.is_empty:
                return n
        return None

    # Scoring --------------------------------------------------------------

    def _bonus(self, frame_number: int) -> int:
        if frame_number == FRAMES_PER_GAME:
            return 0
        frame = self.frame(frame_number)
        following = self.frame(frame_number + 1)
        if frame.is_strike():
            if frame_number == FRAMES_PER_GAME - 1:
                # the tenth frame supplies both bonus balls itself
                return sum(following.throws[:2])
            if following.is_strike():
                return PINS + self.frame(frame_number + 2).first_throw
            return following.score()
        if frame.is_spare():
            return following.first_throw
        return 0

    def _bonus_frames(self, frame_number: int) -> Tuple[int, ...]:
        frame = self.frame(frame_number)
        if frame_number == FRAMES_PER_GAME or frame.is_open():
            return ()
        if (
            frame.is_strike()
            and frame_number < FRAMES_PER_GAME - 1
            and self.frame(frame_number + 1).is_strike()
        ):
            return (frame_number + 1, frame_number + 2)
        return (frame_number + 1,)

    def score(self) -> int:
        """Full-game score. Always computable; only meaningful when
        ``is_valid()`` holds."""
        return sum(
            frame.score() + self._bonus(n)
            for n, frame in enumerate(self._frames, start=1)
        )

    def score_through(self, frame_number: int) -> Optional[int]:
        """Running score as of ``frame_number``.

        Returns ``None`` when any frame up to ``frame_number``, or any frame
        its bonus depends on, is not yet legally recorded.
        """
        check_frame_number(frame_number)
        total = 0
        for n in range(1, frame_number + 1):
            needed = (n,) + self._bonus_frames(n)
            if not all(self.frame(k).is_valid_for_position(k) for k in needed):
                return None
            total += self.frame(n).score() + self._bonus(n)
        return total

    def running_scores(self) -> List[Optional[int]]:
        return [self.score_through(n) for n in range(1, FRAMES_PER_GAME + 1)]

    # Statistics -----------------------------------------------------------

    def pin_count(self) -> int:
        return sum(frame.score() for frame in self._frames)

    def num_strikes(self) -> int:
        return sum(frame.num_strikes() for frame in self._frames)

    def num_spares(self) -> int:
        return sum(frame.num_spares() for frame in self._frames)

    def strike_chances(self) -> int:
        return sum(frame.strike_chances() for frame in self._frames)

    def spare_chances(self) -> int:
        return sum(frame.spare_chances() for frame in self._frames)

    def open_frames(self) -> int:
        return sum(1 for frame in self._frames if frame.is_open())

    def clean_frames(self) -> int:
        return FRAMES_PER_GAME - self.open_frames()

    def avg_first_ball_pinfall(self) -> float:
        return sum(frame.first_throw for frame in self._frames) / FRAMES_PER_GAME

    def statistics(self) -> GameStatistics:
        return GameStatistics(
            score=self.score() if self.is_valid() else None,
            pin_count=self.pin_count(),
            strikes=self.num_strikes(),
            spares=self.num_spares(),
            strike_chances=self.strike_chances(),
            spare_chances=self.spare_chances(),
            open_frames=self.open_frames(),
            clean_frames=self.clean_frames(),
            avg_first_ball_pinfall=self.avg_first_ball_pinfall(),
        )
