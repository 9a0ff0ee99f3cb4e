from typing import Iterable, List

from ..schemas import LiveScore, ScoringRecord


def last_frame_snapshot(record: ScoringRecord) -> LiveScore:
    """Snapshot of the last frame with any roll bowled (frame 1 when none)."""
    last = 0
    for i, f in enumerate(record.frames):
        if f.roll1 is not None or f.roll2 is not None or f.roll3 is not None:
            last = i
    f = record.frames[last]
    return LiveScore(
        match_id=record.match_id,
        team_member_id=record.team_member_id,
        game_number=record.game_number,
        frame=last + 1,
        roll1=f.roll1,
        roll2=f.roll2,
        roll3=f.roll3,
        frame_score=f.frame_score or 0,
        total_score=record.final_score,
        is_strike=f.is_strike,
        is_spare=f.is_spare,
    )


def rank_live_scores(records: Iterable[ScoringRecord]) -> List[LiveScore]:
    """Live snapshots ordered by final score, highest first; ties keep input order."""
    snapshots = [last_frame_snapshot(r) for r in records]
    return sorted(snapshots, key=lambda s: s.total_score, reverse=True)
