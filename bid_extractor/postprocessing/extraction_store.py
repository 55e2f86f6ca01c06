"""
Extraction Store — Redis persistence for validated bid records.

Only records that passed validation are written. A failed write is logged
and counted but never blocks the caller: the record is still returned to the
popup / export layer.

Key scheme
----------
  bid:{message_id}:record   – JSON bid record (TTL = EXTRACTION_TTL_SECONDS)
  bid:recent                – list of recent message ids, newest first
"""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from bid_extractor.config.constants import RECENT_LIMIT
from bid_extractor.postprocessing.metrics import record_store_write

logger = logging.getLogger(__name__)

RECENT_KEY: str = "bid:recent"


def _safe_mid(message_id: str) -> str:
    """Strip/replace characters that are unsafe in Redis key names."""
    return (
        message_id
        .replace("<", "")
        .replace(">", "")
        .replace(" ", "_")
        .replace("/", "_")
    )


def record_key(message_id: str) -> str:
    return f"bid:{_safe_mid(message_id)}:record"


class ExtractionStore:
    """Persist and retrieve bid records keyed by message id."""

    def __init__(self, redis_client: Any, ttl: Optional[int] = None, recent_limit: int = RECENT_LIMIT):
        if ttl is None:
            from bid_extractor.config.settings import EXTRACTION_TTL_SECONDS

            ttl = EXTRACTION_TTL_SECONDS
        self.redis = redis_client
        self.ttl = ttl
        self.recent_limit = recent_limit

    def save(self, record: dict) -> bool:
        """
        Write *record* and push its id onto the recent list.

        Returns:
            True on success; False when the record has no messageId or the
            transaction failed (nothing is written in that case).
        """
        message_id = record.get("messageId") or ""
        if not message_id:
            logger.warning("ExtractionStore: record without messageId not persisted")
            record_store_write("skipped")
            return False

        key = record_key(message_id)
        try:
            # record and recent list are written in one MULTI/EXEC
            pipe = self.redis.pipeline(transaction=True)
            pipe.set(key, json.dumps(record, default=str), ex=self.ttl)
            pipe.lrem(RECENT_KEY, 0, message_id)
            pipe.lpush(RECENT_KEY, message_id)
            pipe.ltrim(RECENT_KEY, 0, self.recent_limit - 1)
            pipe.execute()
        except Exception as exc:  # noqa: BLE001
            logger.warning("ExtractionStore: failed to persist %s: %s", key, exc)
            record_store_write("failed")
            return False

        logger.debug("ExtractionStore: record persisted → %s", key)
        record_store_write("ok")
        return True

    def get(self, message_id: str) -> Optional[dict]:
        """Retrieve a stored record, or None if not found/expired."""
        data = self.redis.get(record_key(message_id))
        return json.loads(data) if data else None

    def recent(self, limit: Optional[int] = None) -> List[dict]:
        """Most recent stored records, newest first; expired ids are skipped."""
        count = self.recent_limit if limit is None else limit
        if count <= 0:
            return []
        records = []
        for message_id in self.redis.lrange(RECENT_KEY, 0, count - 1):
            record = self.get(message_id)
            if record is not None:
                records.append(record)
        return records

    def delete(self, message_id: str) -> int:
        self.redis.lrem(RECENT_KEY, 0, message_id)
        return self.redis.delete(record_key(message_id))


def build_redis_client(url: Optional[str] = None) -> Any:
    """
    Build and return a redis.Redis client.

    Falls back to REDIS_URL from settings if *url* is not provided.
    """
    import redis

    from bid_extractor.config.settings import REDIS_URL

    target_url = url or REDIS_URL
    client = redis.Redis.from_url(target_url, decode_responses=True)
    logger.debug("Redis client created for URL: %s", target_url)
    return client


# ---------------------------------------------------------------------------
# Null / no-op client (for local runs without a Redis instance)
# ---------------------------------------------------------------------------

class NullRedisClient:
    """
    Drop-in replacement that discards all writes and returns None on reads.
    Useful in local development without a Redis server.

    pipeline() returns the client itself, so queued commands are discarded
    the same way and execute() reports no results.
    """

    def pipeline(self, transaction: bool = True) -> "NullRedisClient":  # noqa: ARG002
        return self

    def execute(self) -> list:
        return []

    def set(self, key: str, value: str, **kwargs: Any) -> None:  # noqa: ARG002
        pass

    def get(self, key: str) -> None:  # noqa: ARG002
        return None

    def lpush(self, key: str, *values: str) -> int:  # noqa: ARG002
        return 0

    def lrem(self, key: str, count: int, value: str) -> int:  # noqa: ARG002
        return 0

    def ltrim(self, key: str, start: int, end: int) -> None:  # noqa: ARG002
        pass

    def lrange(self, key: str, start: int, end: int) -> list:  # noqa: ARG002
        return []

    def delete(self, *keys: str) -> int:  # noqa: ARG002
        return 0
