"""Roll-by-roll ten-pin bowling recorder."""
import logging
from typing import Dict, List

from .frame import FRAMES_PER_GAME, PINS, Frame, standing_pins
from .game import Game, GameState

logger = logging.getLogger(__name__)


def init_state(config: Dict) -> Dict:
    return {
        "config": config,
        "game": Game(int(config.get("gameNumber", 1))),
        "frameNumber": 1,
        "pending": [],
    }


def _frame_closed(rolls: List[int], frame_number: int) -> bool:
    if frame_number < FRAMES_PER_GAME:
        return rolls[0] == PINS or len(rolls) == 2
    return len(rolls) == 3 or (len(rolls) == 2 and sum(rolls) < PINS)


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    pins = int(event.get("pins", 0))
    if not 0 <= pins <= PINS:
        raise ValueError("pins out of range")
    frame_number = state["frameNumber"]
    if frame_number is None:
        raise ValueError("no rolls left in game")
    pending = state["pending"]
    if pins > standing_pins(pending):
        raise ValueError("more pins than are standing")
    pending.append(pins)
    if _frame_closed(pending, frame_number):
        frame = Frame.from_throws(pending)
        state["game"] = state["game"].with_frame(frame_number, frame)
        logger.debug("frame %d closed with %s", frame_number, frame.symbols())
        state["pending"] = []
        state["frameNumber"] = (
            frame_number + 1 if frame_number < FRAMES_PER_GAME else None
        )
    return state


def _rolls(frame: Frame) -> List[int]:
    if frame.is_strike() and len(frame.throws) == 2:
        return [PINS]
    return list(frame.throws)


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    frames = [_rolls(f) for f in game.frames]
    if state["pending"]:
        frames[state["frameNumber"] - 1] = list(state["pending"])
    scores = game.running_scores()
    known = [s for s in scores if s is not None]
    return {
        "frames": frames,
        "scores": scores,
        "total": known[-1] if known else 0,
        "complete": game.state() is GameState.COMPLETE,
        "currentFrame": state["frameNumber"],
    }
