import asyncio
import json

import fakeredis.aioredis
import redis.asyncio as redis

from lanescore.services import ScoreBroadcaster, build_scorecard
from lanescore.services import broadcast as broadcast_module
from lanescore.utils import sentry


def _record():
    frames = [[10], [7, 3]] + [[] for _ in range(8)]
    return build_scorecard(
        {"matchId": "m1", "teamMemberId": "tm1", "gameNumber": 2, "frames": frames}
    )


async def _next_message(pubsub):
    for _ in range(20):
        msg = await pubsub.get_message(ignore_subscribe_messages=True, timeout=0.1)
        if msg and msg.get("type") == "message":
            return json.loads(msg["data"])
    return None


def test_channels_use_prefix():
    broadcaster = ScoreBroadcaster(client=None, prefix="league")
    assert broadcaster.match_channel("m1") == "league:matches:m1"
    assert broadcaster.tournament_channel("t1") == "league:tournaments:t1"


def test_broadcast_score_reaches_subscribers():
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    broadcaster = ScoreBroadcaster(client, prefix="test")
    record = _record()

    async def call():
        pubsub = client.pubsub()
        await pubsub.subscribe(
            broadcaster.match_channel("m1"), broadcaster.tournament_channel("t1")
        )
        ok = await broadcaster.broadcast_score(record, tournament_id="t1")
        first = await _next_message(pubsub)
        second = await _next_message(pubsub)
        await pubsub.unsubscribe()
        return ok, first, second

    ok, score, live = asyncio.run(call())
    assert ok is True
    assert score["type"] == "score"
    assert score["data"]["matchId"] == "m1"
    assert score["data"]["totalScore"] == 20
    assert score["data"]["frames"][0]["runningTotal"] == 20
    assert live["type"] == "live_score"
    assert live["data"]["frame"] == 2
    assert live["data"]["totalScore"] == 20


def test_broadcast_connection_error(monkeypatch):
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)

    async def fake_publish(channel, message):
        raise redis.ConnectionError("unavailable")

    monkeypatch.setattr(client, "publish", fake_publish)
    captured = []
    monkeypatch.setattr(
        broadcast_module.sentry_sdk, "capture_exception", captured.append
    )
    broadcaster = ScoreBroadcaster(client, prefix="test")

    ok = asyncio.run(broadcaster.broadcast_score(_record(), tournament_id="t1"))
    assert ok is False
    assert len(captured) == 2
    assert all(isinstance(exc, redis.ConnectionError) for exc in captured)


def test_from_url_uses_configured_prefix(monkeypatch):
    monkeypatch.setattr(broadcast_module.config, "SENTRY_DSN", None)
    monkeypatch.setattr(broadcast_module.config, "SCORE_CHANNEL_PREFIX", "lanes")
    broadcaster = ScoreBroadcaster.from_url("redis://localhost:6379/0")
    assert broadcaster.match_channel("m9") == "lanes:matches:m9"


def test_from_url_turns_on_sentry(monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))
    monkeypatch.setattr(sentry, "_initialized", False)
    monkeypatch.setattr(broadcast_module.config, "SENTRY_DSN", "https://key@example.invalid/1")

    ScoreBroadcaster.from_url("redis://localhost:6379/0")
    ScoreBroadcaster.from_url("redis://localhost:6379/1")
    assert len(calls) == 1
    assert calls[0]["dsn"] == "https://key@example.invalid/1"
