import logging
from typing import Any, List, Sequence

from ..scoring.frame import FRAMES_PER_GAME, PINS, Frame, FrameKind
from ..scoring.game import Game

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when submitted throws or games are invalid."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def parse_throws(text: str) -> List[int]:
    """Parse whitespace-separated pin counts typed by a bowler.

    Parsing stops at the first token that is not an integer between 0 and
    10, so ``"10 7 x 2"`` yields ``[10, 7]``.
    """
    throws: List[int] = []
    for token in (text or "").split():
        try:
            value = int(token)
        except ValueError:
            break
        if not 0 <= value <= PINS:
            break
        throws.append(value)
    return throws


def _coerce_throws(values: Sequence[Any], frame_number: int) -> List[int]:
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise ValidationError(
            f"Frame #{frame_number} throws must be a sequence of integers."
        )
    if not 1 <= len(values) <= 3:
        raise ValidationError(f"Frame #{frame_number} must have 1 to 3 throws.")

    normalized: List[int] = []
    for index, raw in enumerate(values, start=1):
        # bool is a subclass of int
        if isinstance(raw, bool):
            raise ValidationError(
                f"Frame #{frame_number} throw #{index} must be an integer (not a boolean)."
            )
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValidationError(
                f"Frame #{frame_number} throw #{index} must be an integer."
            )
        if not 0 <= value <= PINS:
            raise ValidationError(
                f"Frame #{frame_number} throw #{index} must be between 0 and {PINS}."
            )
        normalized.append(value)
    return normalized


def _explain(frame: Frame, frame_number: int) -> str:
    if frame.kind is FrameKind.EMPTY:
        return f"Frame #{frame_number} needs a second throw."
    if frame_number < FRAMES_PER_GAME:
        if frame.kind is FrameKind.THREE:
            return f"Frame #{frame_number} allows at most two throws."
        return f"Frame #{frame_number} knocks down more than {PINS} pins."
    if frame.kind is FrameKind.TWO:
        if frame.score() > PINS and not frame.is_strike():
            return f"Frame #{frame_number} knocks down more than {PINS} pins."
        return f"Frame #{frame_number} needs a bonus throw after a strike or spare."
    if not (frame.is_strike() or frame.is_spare()):
        return f"Frame #{frame_number} only earns a third throw after a strike or spare."
    return f"Frame #{frame_number} is not a legal frame."


def validate_throws(values: Sequence[Any], *, frame_number: int) -> Frame:
    """Validate raw throws for one frame and return the recorded ``Frame``.

    Rules:
    - ``frame_number`` must be between 1 and 10
    - 1 to 3 integer throws (booleans are rejected), each between 0 and 10
    - frames 1-9 hold a strike or two throws totalling at most 10
    - frame 10 holds two throws without a mark, or three after a mark
    """
    if isinstance(frame_number, bool) or not isinstance(frame_number, int):
        raise ValidationError("Frame number must be an integer.")
    if not 1 <= frame_number <= FRAMES_PER_GAME:
        raise ValidationError(
            f"Frame number must be between 1 and {FRAMES_PER_GAME}."
        )

    frame = Frame.from_throws(_coerce_throws(values, frame_number))
    if not frame.is_valid_for_position(frame_number):
        detail = _explain(frame, frame_number)
        logger.debug("rejected throws %r: %s", values, detail)
        raise ValidationError(detail)
    return frame


def validate_game_number(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("Game number must be an integer (not a boolean).")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Game number must be an integer.")
    if number < 1:
        raise ValidationError("Game number must be >= 1.")
    return number


def validate_game_frames(frames: Sequence[Sequence[Any]], *, number: int = 1) -> Game:
    """Validate ten frames of raw throws and return the complete ``Game``."""
    if not isinstance(frames, Sequence) or isinstance(frames, (str, bytes)):
        raise ValidationError("Frames must be provided as a list of throw lists.")
    if len(frames) != FRAMES_PER_GAME:
        raise ValidationError(
            f"A game must have exactly {FRAMES_PER_GAME} frames, got {len(frames)}."
        )
    number = validate_game_number(number)
    return Game(
        number,
        [validate_throws(throws, frame_number=n) for n, throws in enumerate(frames, start=1)],
    )
