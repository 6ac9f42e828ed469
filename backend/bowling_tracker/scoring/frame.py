"""Frame values for ten-pin bowling games.

A frame is one of three shapes: empty (nothing recorded yet), two throws,
or three throws (only legal in the tenth frame after a strike or spare).
Frames never raise for illegal pin counts; legality is reported by
``is_valid`` / ``is_valid_for_position`` so callers can decide what to do
with bad input.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

PINS = 10
FRAMES_PER_GAME = 10
MAX_FRAME_PINFALL = 3 * PINS


class FrameKind(str, enum.Enum):
    EMPTY = "empty"
    TWO = "two"
    THREE = "three"


_THROW_COUNTS = {FrameKind.EMPTY: 0, FrameKind.TWO: 2, FrameKind.THREE: 3}


def check_frame_number(frame_number: int) -> int:
    """Return ``frame_number`` if it names one of the ten frames."""
    if isinstance(frame_number, bool) or not isinstance(frame_number, int):
        raise TypeError("frame number must be an integer")
    if not 1 <= frame_number <= FRAMES_PER_GAME:
        raise ValueError(f"frame number must be between 1 and {FRAMES_PER_GAME}")
    return frame_number


def standing_pins(throws: Iterable[int]) -> int:
    """Pins left standing after ``throws``, resetting the rack after a
    strike, a spare or two balls."""
    standing, ball = PINS, 0
    for pins in throws:
        standing -= pins
        ball += 1
        if standing <= 0 or ball == 2:
            standing, ball = PINS, 0
    return standing


def _marks(throws: Iterable[int]) -> List[str]:
    marks: List[str] = []
    standing, ball = PINS, 0
    for pins in throws:
        if pins == standing:
            marks.append("X" if ball == 0 else "/")
        else:
            marks.append("-" if pins == 0 else str(pins))
        standing -= pins
        ball += 1
        if standing <= 0 or ball == 2:
            standing, ball = PINS, 0
    return marks


@dataclass(frozen=True)
class Frame:
    kind: FrameKind = FrameKind.EMPTY
    throws: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        kind = FrameKind(self.kind)
        throws = tuple(self.throws)
        if len(throws) != _THROW_COUNTS[kind]:
            raise ValueError(
                f"{kind.value} frame needs {_THROW_COUNTS[kind]} throws, got {len(throws)}"
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "throws", throws)

    # Constructors ---------------------------------------------------------

    @classmethod
    def empty(cls) -> "Frame":
        return cls()

    @classmethod
    def two(cls, first: int, second: int) -> "Frame":
        return cls(FrameKind.TWO, (first, second))

    @classmethod
    def three(cls, first: int, second: int, third: int) -> "Frame":
        return cls(FrameKind.THREE, (first, second, third))

    @classmethod
    def from_throws(cls, throws: Iterable[int]) -> "Frame":
        """Build a frame from 1-3 raw pin counts.

        A lone ``10`` is a strike and becomes ``(10, 0)``. Any other length
        gives an empty frame; the values themselves are not range-checked.
        """
        values = tuple(int(t) for t in throws)
        if len(values) == 1 and values[0] == PINS:
            return cls.two(PINS, 0)
        if len(values) == 2:
            return cls(FrameKind.TWO, values)
        if len(values) == 3:
            return cls(FrameKind.THREE, values)
        return cls.empty()

    # Accessors ------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.kind is FrameKind.EMPTY

    @property
    def first_throw(self) -> int:
        return self.throws[0] if self.throws else 0

    def throw(self, throw_number: int) -> int:
        value = self.throw_opt(throw_number)
        if value is None:
            raise IndexError(
                f"{self.kind.value} frame has no throw #{throw_number}"
            )
        return value

    def throw_opt(self, throw_number: int) -> Optional[int]:
        if 1 <= throw_number <= len(self.throws):
            return self.throws[throw_number - 1]
        return None

    # Validity -------------------------------------------------------------

    def _pins_in_range(self) -> bool:
        return all(0 <= t <= PINS for t in self.throws)

    def _earns_bonus(self) -> bool:
        first, second = self.throws[0], self.throws[1]
        return first == PINS or first + second == PINS

    def is_valid(self) -> bool:
        if self.kind is FrameKind.EMPTY or not self._pins_in_range():
            return False
        if self.kind is FrameKind.TWO:
            return self.score() <= PINS
        return self._earns_bonus() and self.score() <= MAX_FRAME_PINFALL

    def is_valid_for_position(self, frame_number: int) -> bool:
        check_frame_number(frame_number)
        if not self.is_valid():
            return False
        if frame_number < FRAMES_PER_GAME:
            return self.kind is FrameKind.TWO
        if self.kind is FrameKind.TWO:
            # a mark in the tenth makes the bonus throw mandatory
            return self.score() < PINS
        return True

    # Scoring --------------------------------------------------------------

    def score(self) -> int:
        return sum(self.throws)

    def is_strike(self) -> bool:
        return self.first_throw == PINS

    def is_spare(self) -> bool:
        if len(self.throws) < 2 or self.is_strike():
            return False
        return self.throws[0] + self.throws[1] == PINS

    def is_open(self) -> bool:
        return not self.is_strike() and not self.is_spare()

    def num_strikes(self) -> int:
        if self.kind is FrameKind.TWO:
            return 1 if self.is_strike() else 0
        if self.kind is FrameKind.THREE:
            first, second, third = self.throws
            if first == PINS:
                if second != PINS:
                    return 1
                return 3 if third == PINS else 2
            if first + second == PINS and third == PINS:
                return 1
        return 0

    def num_spares(self) -> int:
        if self.kind is FrameKind.EMPTY:
            return 0
        if self.is_spare():
            return 1
        if self.kind is FrameKind.THREE:
            _, second, third = self.throws
            if self.is_strike() and second != PINS and second + third == PINS:
                return 1
        return 0

    def strike_chances(self) -> int:
        if self.kind is FrameKind.EMPTY:
            return 0
        if self.kind is FrameKind.TWO:
            return 1
        first, second, _ = self.throws
        if first == PINS:
            return 3 if second == PINS else 2
        # the bonus ball after a spare is not counted as a strike chance
        return 1

    def spare_chances(self) -> int:
        if self.kind is FrameKind.EMPTY:
            return 0
        if self.kind is FrameKind.TWO:
            return 0 if self.is_strike() else 1
        first, second, _ = self.throws
        if first == PINS and second == PINS:
            return 0
        return 1

    def symbols(self) -> str:
        """Score-sheet notation, e.g. ``"X"``, ``"9 /"``, ``"X X 7"``."""
        if self.kind is FrameKind.TWO and self.is_strike():
            return "X"
        return " ".join(_marks(self.throws))
