from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, model_validator, field_validator, ConfigDict

FRAMES_PER_GAME = 10


class Frame(BaseModel):
    """One of the ten scoring units of a game.

    ``roll3`` is only meaningful for the tenth frame. Frames 1-9 carry it too,
    always ``None`` and serialized as ``null``; the scorer never reads it there
    and ``validate_frames`` rejects a value. ``frame_score`` and
    ``running_total`` stay ``None`` while bonus balls are still pending.
    """

    roll1: Optional[int] = None
    roll2: Optional[int] = None
    roll3: Optional[int] = None
    is_strike: bool = Field(default=False, alias="isStrike")
    is_spare: bool = Field(default=False, alias="isSpare")
    frame_score: Optional[int] = Field(default=None, alias="frameScore")
    running_total: Optional[int] = Field(default=None, alias="runningTotal")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    def _coerce(cls, value: Any) -> Dict[str, Any]:
        """Allow a frame to be given as a list/tuple of up to three rolls."""
        if isinstance(value, (list, tuple)):
            if len(value) > 3:
                raise ValueError("A frame holds at most three rolls.")
            rolls = list(value) + [None] * (3 - len(value))
            return {"roll1": rolls[0], "roll2": rolls[1], "roll3": rolls[2]}
        return value

    @field_validator("roll1", "roll2", "roll3", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("rolls must be integers (not booleans)")
        return value


def _check_frame_count(frames: List[Frame]) -> List[Frame]:
    if len(frames) != FRAMES_PER_GAME:
        raise ValueError(f"a game has exactly {FRAMES_PER_GAME} frames")
    return frames


def _check_handicap(value: Any) -> Any:
    if value is None:
        return value
    if isinstance(value, bool):
        raise ValueError("handicap must be an integer (not a boolean)")
    if not isinstance(value, int) or value < 0:
        raise ValueError("handicap must be a non-negative integer")
    return value


class BowlingGame(BaseModel):
    frames: List[Frame]
    total_score: int = Field(default=0, alias="totalScore")
    handicap: int = 0
    final_score: int = Field(default=0, alias="finalScore")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("frames")
    @classmethod
    def _validate_frames(cls, value: List[Frame]) -> List[Frame]:
        return _check_frame_count(value)

    @field_validator("handicap", mode="before")
    @classmethod
    def _validate_handicap(cls, value: Any) -> Any:
        return _check_handicap(value)

    @model_validator(mode="after")
    def _validate_final_score(self) -> "BowlingGame":
        if self.final_score != self.total_score + self.handicap:
            raise ValueError("finalScore must equal totalScore + handicap")
        return self


class ScoreSubmission(BaseModel):
    """One bowler's frame sheet for one game of a match."""

    match_id: str = Field(..., min_length=1, alias="matchId")
    team_member_id: str = Field(..., min_length=1, alias="teamMemberId")
    game_number: int = Field(..., ge=1, alias="gameNumber")
    frames: List[Frame]
    handicap: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("frames")
    @classmethod
    def _validate_frames(cls, value: List[Frame]) -> List[Frame]:
        return _check_frame_count(value)

    @field_validator("handicap", mode="before")
    @classmethod
    def _validate_handicap(cls, value: Any) -> Any:
        return _check_handicap(value)


class ScoringRecord(BaseModel):
    match_id: str = Field(alias="matchId")
    team_member_id: str = Field(alias="teamMemberId")
    game_number: int = Field(alias="gameNumber")
    frames: List[Frame]
    total_score: int = Field(alias="totalScore")
    handicap: int = 0
    final_score: int = Field(alias="finalScore")

    model_config = ConfigDict(populate_by_name=True)


class LiveScore(BaseModel):
    """Snapshot of the most recently bowled frame for live displays."""

    match_id: str = Field(alias="matchId")
    team_member_id: str = Field(alias="teamMemberId")
    game_number: int = Field(alias="gameNumber")
    frame: int
    roll1: Optional[int] = None
    roll2: Optional[int] = None
    roll3: Optional[int] = None
    frame_score: int = Field(default=0, alias="frameScore")
    total_score: int = Field(default=0, alias="totalScore")
    is_strike: bool = Field(default=False, alias="isStrike")
    is_spare: bool = Field(default=False, alias="isSpare")

    model_config = ConfigDict(populate_by_name=True)
