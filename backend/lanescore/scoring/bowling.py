"""Ten-pin bowling scoring engine.

Every call works on a full ten-frame sheet and returns fresh frames; nothing is
kept between calls. A frame's score stays ``None`` until every ball it depends
on has been bowled.
"""
import math
from typing import Any, Iterable, List, Optional, Tuple

from ..exceptions import FrameCountError, GameComplete, InvalidRoll
from ..schemas import FRAMES_PER_GAME, BowlingGame, Frame

PINS = 10
LAST_FRAME = FRAMES_PER_GAME - 1
HANDICAP_PERCENT = 0.8


def _coerce(frames: Iterable[Any]) -> List[Frame]:
    frames = list(frames)
    if len(frames) != FRAMES_PER_GAME:
        raise FrameCountError(len(frames))
    return [
        f.model_copy() if isinstance(f, Frame) else Frame.model_validate(f)
        for f in frames
    ]


def _balls_after(frames: List[Frame], i: int, wanted: int) -> List[int]:
    """Up to ``wanted`` balls bowled after frame ``i``, stopping at a gap."""
    balls: List[int] = []
    for j in range(i + 1, FRAMES_PER_GAME):
        f = frames[j]
        if j == LAST_FRAME:
            rolls = [f.roll1, f.roll2, f.roll3]
        elif f.roll1 == PINS:
            rolls = [f.roll1]
        else:
            rolls = [f.roll1, f.roll2]
        for pins in rolls:
            if pins is None or len(balls) == wanted:
                return balls
            balls.append(pins)
    return balls


def _tenth_frame_score(f: Frame) -> Optional[int]:
    if f.roll1 is None or f.roll2 is None:
        return None
    if (f.roll1 == PINS or f.roll1 + f.roll2 == PINS) and f.roll3 is None:
        return None
    return f.roll1 + f.roll2 + (f.roll3 or 0)


def _frame_score(frames: List[Frame], i: int) -> Optional[int]:
    f = frames[i]
    if i == LAST_FRAME:
        return _tenth_frame_score(f)
    if f.roll1 is None:
        return None
    if f.roll1 == PINS:  # strike
        bonus = _balls_after(frames, i, 2)
        return PINS + sum(bonus) if len(bonus) == 2 else None
    if f.roll2 is None:
        return None
    if f.roll1 + f.roll2 == PINS:  # spare
        bonus = _balls_after(frames, i, 1)
        return PINS + bonus[0] if bonus else None
    return f.roll1 + f.roll2


def resolve(frames: Iterable[Any]) -> List[Frame]:
    """Return a scored copy of a ten-frame sheet.

    Running totals accumulate strictly left to right: once a frame is
    pending, every later running total is ``None`` even if that frame's own
    score could be worked out.
    """
    frames = _coerce(frames)
    running: Optional[int] = 0
    for i, f in enumerate(frames):
        f.is_strike = f.roll1 == PINS
        f.is_spare = (
            f.roll1 is not None
            and f.roll2 is not None
            and f.roll1 < PINS
            and f.roll1 + f.roll2 == PINS
        )
        f.frame_score = _frame_score(frames, i)
        if running is not None and f.frame_score is not None:
            running += f.frame_score
            f.running_total = running
        else:
            running = None
            f.running_total = None
    return frames


def compute_handicap(average: float, base: int = 200) -> int:
    if average >= base:
        return 0
    return math.floor((base - average) * HANDICAP_PERCENT)


def validate_roll(roll: int, previous_roll: Optional[int] = None) -> bool:
    if roll < 0 or roll > PINS:
        return False
    if previous_roll is not None and previous_roll + roll > PINS:
        return False
    return True


def create_empty_game() -> BowlingGame:
    return BowlingGame(frames=[Frame() for _ in range(FRAMES_PER_GAME)])


def _next_slot(frames: List[Frame]) -> Tuple[int, str, Optional[int]]:
    """Locate the next ball: (frame index, roll field, pins already down)."""
    for i, f in enumerate(frames):
        if f.roll1 is None:
            return i, "roll1", None
        if i < LAST_FRAME:
            if f.roll1 != PINS and f.roll2 is None:
                return i, "roll2", f.roll1
            continue
        if f.roll2 is None:
            # a strike resets the rack
            return i, "roll2", None if f.roll1 == PINS else f.roll1
        if f.roll3 is None and (f.roll1 == PINS or f.roll1 + f.roll2 == PINS):
            standing = f.roll2 if f.roll1 == PINS and f.roll2 < PINS else None
            return i, "roll3", standing
    raise GameComplete()


def record_roll(frames: Iterable[Any], pins: int) -> List[Frame]:
    """Place one ball in the next open slot and return the rescored sheet."""
    frames = _coerce(frames)
    i, field, previous = _next_slot(frames)
    # bool is a subclass of int
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidRoll(i + 1, pins, "must be an integer")
    if not validate_roll(pins, previous):
        reason = (
            "out of range"
            if not validate_roll(pins)
            else f"exceeds the {PINS - previous} pins standing"
        )
        raise InvalidRoll(i + 1, pins, reason)
    setattr(frames[i], field, pins)
    return resolve(frames)


def is_complete(frames: Iterable[Any]) -> bool:
    return resolve(frames)[LAST_FRAME].frame_score is not None


def _last_total(resolved: List[Frame]) -> int:
    totals = [f.running_total for f in resolved if f.running_total is not None]
    return totals[-1] if totals else 0


def total_score(frames: Iterable[Any]) -> int:
    """Last known running total of the sheet, 0 when nothing is resolved."""
    return _last_total(resolve(frames))


def summary(frames: Iterable[Any], handicap: int = 0) -> BowlingGame:
    resolved = resolve(frames)
    total = _last_total(resolved)
    return BowlingGame(
        frames=resolved,
        total_score=total,
        handicap=handicap,
        final_score=total + handicap,
    )
