from lanescore.services import build_scorecard, last_frame_snapshot, rank_live_scores


def _record(member, frames, handicap=0):
    frames = list(frames) + [[] for _ in range(10 - len(frames))]
    return build_scorecard(
        {
            "matchId": "m1",
            "teamMemberId": member,
            "gameNumber": 1,
            "frames": frames,
            "handicap": handicap,
        }
    )


def test_snapshot_of_last_bowled_frame():
    snap = last_frame_snapshot(_record("a", [[4, 3], [10]], handicap=5))
    assert snap.frame == 2
    assert snap.roll1 == 10
    assert snap.is_strike
    assert snap.frame_score == 0
    assert snap.total_score == 12
    assert snap.model_dump(by_alias=True)["teamMemberId"] == "a"


def test_snapshot_of_resolved_frame():
    snap = last_frame_snapshot(_record("a", [[4, 3], [5, 5], [2, 1]]))
    assert snap.frame == 3
    assert (snap.roll1, snap.roll2, snap.roll3) == (2, 1, None)
    assert snap.frame_score == 3
    assert snap.total_score == 22


def test_snapshot_before_first_ball():
    snap = last_frame_snapshot(_record("a", []))
    assert snap.frame == 1
    assert snap.roll1 is None
    assert snap.total_score == 0


def test_rank_live_scores():
    records = [
        _record("low", [[1, 1]]),
        _record("tie-first", [[4, 4]]),
        _record("high", [[9, 0]], handicap=10),
        _record("tie-second", [[5, 3]]),
    ]
    ranked = rank_live_scores(records)
    assert [s.team_member_id for s in ranked] == ["high", "tie-first", "tie-second", "low"]
    assert rank_live_scores([]) == []
