"""
Travel Concierge - Conversation Store
Per-trip message history.

The core only needs two operations (append and fetch in insertion order),
so any persistence layer can sit behind ``ConversationStore``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections import defaultdict
from typing import Protocol

from redis.asyncio import Redis

from concierge.domains.chat.schemas import Message

logger = logging.getLogger(__name__)


class ConversationStore(Protocol):
    """Append-only message history keyed by trip."""

    async def append(self, message: Message) -> None: ...

    async def fetch(self, trip_id: str) -> list[Message]: ...


class InMemoryConversationStore:
    """Process-local store; history is lost on restart."""

    def __init__(self) -> None:
        self._messages: dict[str, list[Message]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def append(self, message: Message) -> None:
        if not message.trip_id:
            raise ValueError("Message must carry a trip_id to be stored")
        async with self._lock:
            self._messages[message.trip_id].append(message)

    async def fetch(self, trip_id: str) -> list[Message]:
        async with self._lock:
            return list(self._messages.get(trip_id, []))


class RedisConversationStore:
    """
    Redis list per trip, one JSON-encoded message per entry.

    The key expiry is refreshed on every append, so a conversation lives
    ``ttl_seconds`` after its last message.
    """

    KEY_PREFIX = "conversation"

    def __init__(self, redis: Redis, ttl_seconds: int | None = None) -> None:
        self.redis = redis
        self.ttl_seconds = ttl_seconds

    def _key(self, trip_id: str) -> str:
        return f"{self.KEY_PREFIX}:{trip_id}"

    async def append(self, message: Message) -> None:
        if not message.trip_id:
            raise ValueError("Message must carry a trip_id to be stored")
        key = self._key(message.trip_id)
        await self.redis.rpush(key, json.dumps(message.to_wire()))
        if self.ttl_seconds:
            await self.redis.expire(key, self.ttl_seconds)

    async def fetch(self, trip_id: str) -> list[Message]:
        raw_messages = await self.redis.lrange(self._key(trip_id), 0, -1)
        messages = []
        for raw in raw_messages:
            try:
                messages.append(Message.model_validate(json.loads(raw)))
            except ValueError as e:
                logger.warning(f"Skipping unreadable message in trip {trip_id}: {e}")
        return messages
