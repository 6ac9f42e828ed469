from typing import Any, List, Literal, Optional
from datetime import date as date_type, datetime
from pydantic import BaseModel, Field, TypeAdapter, field_validator, ConfigDict

from .time_utils import session_date

MAX_GAMES_PER_SESSION = 100

_DATETIME = TypeAdapter(datetime)

Throws = List[int]


def _reject_booleans(value: Any) -> Any:
    if isinstance(value, list):
        for raw in value:
            if isinstance(raw, bool):
                raise ValueError("throws must be integers (not booleans)")
    return value


class FrameIn(BaseModel):
    frameNumber: int = Field(..., ge=1, le=10)
    throws: Throws = Field(..., min_length=1, max_length=3)

    model_config = ConfigDict(extra="forbid")

    @field_validator("throws", mode="before")
    @classmethod
    def _validate_throws(cls, value: Any) -> Any:
        return _reject_booleans(value)


class FrameOut(BaseModel):
    frameNumber: int
    throws: Throws
    symbols: str
    valid: bool
    score: int
    strike: bool
    spare: bool
    runningScore: Optional[int] = None


class GameIn(BaseModel):
    number: Optional[int] = Field(default=None, ge=1)
    frames: List[Throws] = Field(..., min_length=10, max_length=10)

    model_config = ConfigDict(extra="forbid")

    @field_validator("frames", mode="before")
    @classmethod
    def _validate_frames(cls, value: Any) -> Any:
        if isinstance(value, list):
            for throws in value:
                _reject_booleans(throws)
        return value


class GameStatsOut(BaseModel):
    pinCount: int
    strikes: int
    spares: int
    strikeChances: int
    spareChances: int
    openFrames: int
    cleanFrames: int
    avgFirstBallPinfall: float


class GameOut(BaseModel):
    number: int
    state: Literal["empty", "in_progress", "complete"]
    valid: bool
    total: Optional[int] = None
    frames: List[FrameOut]
    stats: GameStatsOut


class SessionIn(BaseModel):
    date: date_type
    games: List[GameIn] = Field(default_factory=list, max_length=MAX_GAMES_PER_SESSION)

    model_config = ConfigDict(extra="forbid")

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return date_type.fromisoformat(value.strip())
            except ValueError:
                # not a plain date; sessions stamped with a time are filed by UTC date
                value = _DATETIME.validate_python(value)
        if isinstance(value, datetime):
            return session_date(value, field_name="date")
        return value


class StreakOut(BaseModel):
    threshold: int
    current: int
    longest: int


class SessionOut(BaseModel):
    date: date_type
    valid: bool
    games: List[GameOut]
    average: float
    highGame: Optional[int] = None
    lowGame: Optional[int] = None
    totalPinfall: int
    strikeRate: float
    spareRate: float
    openFrameRate: float
    cleanFrameRate: float
    avgFirstBallPinfall: float
    rollingAverage: List[float]
    streak: StreakOut


class RollsIn(BaseModel):
    gameNumber: int = Field(default=1, ge=1)
    rolls: List[int] = Field(default_factory=list, max_length=21)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rolls", mode="before")
    @classmethod
    def _validate_rolls(cls, value: Any) -> Any:
        return _reject_booleans(value)


class RollsOut(BaseModel):
    frames: List[Throws]
    scores: List[Optional[int]]
    total: int
    complete: bool
    currentFrame: Optional[int] = None


class SessionHistoryIn(BaseModel):
    sessions: List[SessionIn] = Field(..., min_length=1, max_length=MAX_GAMES_PER_SESSION)

    model_config = ConfigDict(extra="forbid")


class SessionRollupOut(BaseModel):
    games: int
    average: float
    strikeRate: float
    spareRate: float
