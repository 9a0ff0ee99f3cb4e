"""Services around the scoring engine (validation, scorecards, live scores)."""

from .validation import ValidationError, validate_frames
from .scorecard import build_scorecard, handicap_for_average
from .live import last_frame_snapshot, rank_live_scores
from .broadcast import ScoreBroadcaster

__all__ = [
    "validate_frames",
    "ValidationError",
    "build_scorecard",
    "handicap_for_average",
    "last_frame_snapshot",
    "rank_live_scores",
    "ScoreBroadcaster",
]
