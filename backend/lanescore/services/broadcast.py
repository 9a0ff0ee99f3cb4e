import json
import logging
from typing import Any, Optional

import redis.asyncio as redis
import sentry_sdk

from .. import config
from ..schemas import ScoringRecord
from ..utils.sentry import init_sentry
from .live import last_frame_snapshot

logger = logging.getLogger(__name__)


class ScoreBroadcaster:
    """Publish computed scores to Redis pub/sub channels.

    Subscribers (websocket handlers, display screens) live with the caller;
    this class only pushes plain JSON onto per-match and per-tournament
    channels.
    """

    def __init__(self, client: Any, prefix: Optional[str] = None) -> None:
        self._client = client
        self._prefix = prefix or config.SCORE_CHANNEL_PREFIX

    @classmethod
    def from_url(
        cls, url: Optional[str] = None, prefix: Optional[str] = None
    ) -> "ScoreBroadcaster":
        """Process-level constructor; also turns on Sentry when configured."""
        init_sentry()
        client = redis.from_url(url or config.REDIS_URL, decode_responses=True)
        return cls(client, prefix)

    def match_channel(self, match_id: str) -> str:
        return f"{self._prefix}:matches:{match_id}"

    def tournament_channel(self, tournament_id: str) -> str:
        return f"{self._prefix}:tournaments:{tournament_id}"

    async def publish(self, channel: str, message: dict) -> bool:
        """Publish a message; returns ``False`` when Redis is unreachable."""
        try:
            await self._client.publish(channel, json.dumps(message))
        except redis.ConnectionError as exc:
            logger.warning("Could not publish to %s: %s", channel, exc)
            sentry_sdk.capture_exception(exc)
            return False
        return True

    async def broadcast_score(
        self, record: ScoringRecord, *, tournament_id: Optional[str] = None
    ) -> bool:
        ok = await self.publish(
            self.match_channel(record.match_id),
            {"type": "score", "data": record.model_dump(by_alias=True)},
        )
        if tournament_id:
            live = last_frame_snapshot(record)
            published = await self.publish(
                self.tournament_channel(tournament_id),
                {"type": "live_score", "data": live.model_dump(by_alias=True)},
            )
            ok = ok and published
        return ok
