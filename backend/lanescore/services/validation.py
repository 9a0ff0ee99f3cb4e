from typing import Any, List, Optional, Sequence

from ..schemas import FRAMES_PER_GAME, Frame
from ..scoring.bowling import PINS, validate_roll


class ValidationError(Exception):
    """Raised when a submitted frame sheet is not a legal game."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def _as_rolls(i: int, frame: Any) -> List[Optional[int]]:
    if isinstance(frame, Frame):
        return [frame.roll1, frame.roll2, frame.roll3]
    if isinstance(frame, (list, tuple)):
        if len(frame) > 3:
            raise ValidationError(f"Frame #{i} has more than three rolls.")
        return list(frame) + [None] * (3 - len(frame))
    if isinstance(frame, dict):
        return [frame.get("roll1"), frame.get("roll2"), frame.get("roll3")]
    raise ValidationError(f"Frame #{i} must be an object with roll1, roll2, roll3.")


def _check_pins(i: int, slot: int, pins: Any, standing: Optional[int]) -> int:
    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise ValidationError(f"Frame #{i} roll {slot} must be an integer.")
    if not validate_roll(pins):
        raise ValidationError(f"Frame #{i} roll {slot} must be between 0 and {PINS}.")
    if not validate_roll(pins, standing):
        raise ValidationError(
            f"Frame #{i} roll {slot} knocks down more than the "
            f"{PINS - standing} pins standing."
        )
    return pins


def validate_frames(frames: Sequence[Any]) -> None:
    """Validate a whole ten-frame sheet.

    Rules:
    - Exactly ten frames
    - Every roll is an integer between 0 and 10
    - Two rolls in a frame never exceed the pins standing
    - Frames 1-9 have no second roll after a strike and never a third roll
    - The tenth frame gets a third roll only after a strike or spare, and the
      rack is reset after each strike or spare
    - No roll follows an unbowled one, and no frame is bowled after an
      unfinished frame
    """

    if not isinstance(frames, Sequence) or isinstance(frames, (str, bytes)):
        raise ValidationError("Frames must be provided as a list.")
    if len(frames) != FRAMES_PER_GAME:
        raise ValidationError(f"A game must have exactly {FRAMES_PER_GAME} frames.")

    finished = True
    for i, frame in enumerate(frames, start=1):
        r1, r2, r3 = _as_rolls(i, frame)
        bowled = [r for r in (r1, r2, r3) if r is not None]
        if bowled and not finished:
            raise ValidationError(
                f"Frame #{i} is bowled before frame #{i - 1} is finished."
            )
        if (r1 is None and r2 is not None) or (r2 is None and r3 is not None):
            raise ValidationError(f"Frame #{i} has a roll after an unbowled one.")
        if r1 is None:
            finished = False
            continue

        _check_pins(i, 1, r1, None)
        if i < FRAMES_PER_GAME:
            if r3 is not None:
                raise ValidationError(f"Frame #{i} cannot have a third roll.")
            if r1 == PINS:
                if r2 is not None:
                    raise ValidationError(
                        f"Frame #{i} is a strike and cannot have a second roll."
                    )
                continue
            if r2 is None:
                finished = False
                continue
            _check_pins(i, 2, r2, r1)
            continue

        if r2 is None:
            continue
        _check_pins(i, 2, r2, None if r1 == PINS else r1)
        if r3 is None:
            continue
        if r1 != PINS and r1 + r2 != PINS:
            raise ValidationError(
                f"Frame #{i} only earns a third roll after a strike or spare."
            )
        standing = r2 if r1 == PINS and r2 < PINS else None
        _check_pins(i, 3, r3, standing)

    return None

