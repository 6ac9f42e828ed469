# backend/bowling_tracker/routers/games.py
import logging

from fastapi import APIRouter

from ..exceptions import InvalidThrows, http_problem
from ..schemas import FrameIn, FrameOut, GameIn, GameOut, GameStatsOut, RollsIn, RollsOut
from ..scoring import Game, bowling
from ..scoring.frame import PINS, Frame
from ..services import ValidationError, validate_game_frames, validate_throws

logger = logging.getLogger(__name__)

# Resource-only prefix
router = APIRouter(prefix="/bowling", tags=["bowling"])


def frame_out(frame_number: int, frame: Frame, running: int | None = None) -> FrameOut:
    return FrameOut(
        frameNumber=frame_number,
        throws=list(frame.throws),
        symbols=frame.symbols(),
        valid=frame.is_valid_for_position(frame_number),
        score=frame.score(),
        strike=frame.is_strike(),
        spare=frame.is_spare(),
        runningScore=running,
    )


def game_out(game: Game) -> GameOut:
    stats = game.statistics()
    running = game.running_scores()
    return GameOut(
        number=game.number,
        state=game.state().value,
        valid=game.is_valid(),
        total=stats.score,
        frames=[
            frame_out(n, frame, running[n - 1])
            for n, frame in enumerate(game.frames, start=1)
        ],
        stats=GameStatsOut(
            pinCount=stats.pin_count,
            strikes=stats.strikes,
            spares=stats.spares,
            strikeChances=stats.strike_chances,
            spareChances=stats.spare_chances,
            openFrames=stats.open_frames,
            cleanFrames=stats.clean_frames,
            avgFirstBallPinfall=stats.avg_first_ball_pinfall,
        ),
    )


def game_from_payload(body: GameIn) -> Game:
    """Build a game from raw throws.

    In-progress games are accepted (unplayed frames are empty lists), so only
    pin ranges are rejected here; legality is reported through ``valid``.
    """
    for n, throws in enumerate(body.frames, start=1):
        if any(not 0 <= t <= PINS for t in throws):
            raise InvalidThrows(f"Frame #{n} throws must be between 0 and {PINS}.")
    return Game.from_throws(body.number or 1, body.frames)


# POST /api/v0/bowling/frames/validate
@router.post("/frames/validate", response_model=FrameOut)
def validate_frame(body: FrameIn) -> FrameOut:
    try:
        frame = validate_throws(body.throws, frame_number=body.frameNumber)
    except ValidationError as exc:
        raise InvalidThrows(exc.detail)
    return frame_out(body.frameNumber, frame)


# POST /api/v0/bowling/games/score
@router.post("/games/score", response_model=GameOut)
def score_game(body: GameIn) -> GameOut:
    game = game_from_payload(body)
    logger.debug("scored game %d: state=%s", game.number, game.state().value)
    return game_out(game)


# POST /api/v0/bowling/games/validate
@router.post("/games/validate", response_model=GameOut)
def validate_game(body: GameIn) -> GameOut:
    try:
        game = validate_game_frames(body.frames, number=body.number or 1)
    except ValidationError as exc:
        raise InvalidThrows(exc.detail)
    return game_out(game)


# POST /api/v0/bowling/games/rolls
@router.post("/games/rolls", response_model=RollsOut)
def record_rolls(body: RollsIn) -> RollsOut:
    state = bowling.init_state({"gameNumber": body.gameNumber})
    for index, pins in enumerate(body.rolls, start=1):
        try:
            state = bowling.apply({"type": "ROLL", "pins": pins}, state)
        except ValueError as exc:
            raise http_problem(422, f"Roll #{index}: {exc}", "invalid_roll")
    return RollsOut(**bowling.summary(state))
