"""Turn a submitted frame sheet into a stored scoring record."""
import logging
from typing import Any, Optional

from .. import config
from ..schemas import ScoreSubmission, ScoringRecord
from ..scoring import bowling
from .validation import validate_frames

logger = logging.getLogger(__name__)


def build_scorecard(submission: Any, *, validate: bool = True) -> ScoringRecord:
    """Score one bowler's game.

    ``submission`` may be a :class:`ScoreSubmission` or its JSON payload. The
    sheet is checked with :func:`validate_frames` first unless ``validate`` is
    ``False``; the resolver itself never re-validates rolls.
    """
    if not isinstance(submission, ScoreSubmission):
        submission = ScoreSubmission.model_validate(submission)
    if validate:
        validate_frames(submission.frames)

    game = bowling.summary(submission.frames, submission.handicap or 0)
    logger.debug(
        "Scored match %s member %s game %d: total=%d handicap=%d final=%d",
        submission.match_id,
        submission.team_member_id,
        submission.game_number,
        game.total_score,
        game.handicap,
        game.final_score,
    )
    return ScoringRecord(
        match_id=submission.match_id,
        team_member_id=submission.team_member_id,
        game_number=submission.game_number,
        frames=game.frames,
        total_score=game.total_score,
        handicap=game.handicap,
        final_score=game.final_score,
    )


def handicap_for_average(average: Optional[float], base: Optional[int] = None) -> int:
    """Handicap for a bowler's historical average; 0 without any history."""
    if average is None:
        return 0
    if base is None:
        base = config.DEFAULT_HANDICAP_BASE
    return bowling.compute_handicap(average, base)
