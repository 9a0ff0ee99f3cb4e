from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: Optional[str] = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class InvalidRoll(DomainException):
    def __init__(self, frame: int, pins: int, reason: str) -> None:
        super().__init__(
            status_code=400,
            title="Invalid roll",
            detail=f"frame {frame}: {pins} pins {reason}",
            code="invalid_roll",
        )
        self.frame = frame
        self.pins = pins


class GameComplete(DomainException):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game complete",
            detail="no rolls left in final frame",
            code="game_complete",
        )


class FrameCountError(DomainException):
    def __init__(self, count: int) -> None:
        super().__init__(
            status_code=400,
            title="Invalid frame count",
            detail=f"a game has exactly 10 frames, got {count}",
            code="frame_count",
        )
        self.count = count
