# backend/bowling_tracker/routers/sessions.py
from typing import Dict

from fastapi import APIRouter

from ..config import ROLLING_AVERAGE_SPAN, STREAK_THRESHOLD
from ..schemas import SessionHistoryIn, SessionIn, SessionOut, SessionRollupOut, StreakOut
from ..scoring import Session
from ..services import compute_streaks, rolling_average, summarize_sessions
from .games import game_from_payload, game_out

router = APIRouter(prefix="/bowling/sessions", tags=["bowling"])


# POST /api/v0/bowling/sessions/summary
@router.post("/summary", response_model=SessionOut)
def summarize_session(body: SessionIn) -> SessionOut:
    session = Session(body.date)
    for game in body.games:
        # the session numbers its own games
        session.add_game(game_from_payload(game))

    summary = session.summary()
    scores = [g.score() for g in session]
    return SessionOut(
        date=summary.date,
        valid=session.is_valid(),
        games=[game_out(g) for g in session],
        average=summary.average,
        highGame=summary.high_game,
        lowGame=summary.low_game,
        totalPinfall=summary.total_pinfall,
        strikeRate=summary.strike_rate,
        spareRate=summary.spare_rate,
        openFrameRate=summary.open_frame_rate,
        cleanFrameRate=summary.clean_frame_rate,
        avgFirstBallPinfall=summary.avg_first_ball_pinfall,
        rollingAverage=rolling_average(scores, ROLLING_AVERAGE_SPAN),
        streak=StreakOut(**compute_streaks(scores, STREAK_THRESHOLD)),
    )


# POST /api/v0/bowling/sessions/history
@router.post("/history", response_model=Dict[str, SessionRollupOut])
def session_history(body: SessionHistoryIn) -> Dict[str, SessionRollupOut]:
    sessions = []
    for entry in body.sessions:
        session = Session(entry.date)
        for game in entry.games:
            session.add_game(game_from_payload(game))
        sessions.append(session)
    return {
        day: SessionRollupOut(**rollup)
        for day, rollup in summarize_sessions(sessions).items()
    }
