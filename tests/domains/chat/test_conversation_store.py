"""
Tests for conversation stores.
"""

import json
from unittest.mock import AsyncMock

import pytest

from concierge.domains.chat.schemas import Message, MessageKind, MessageRole, ProviderMeta
from concierge.domains.chat.store import InMemoryConversationStore, RedisConversationStore


class TestInMemoryConversationStore:
    @pytest.mark.asyncio
    async def test_messages_come_back_in_order_per_trip(self):
        store = InMemoryConversationStore()

        await store.append(Message.user("first", trip_id="trip-1"))
        await store.append(Message.user("other trip", trip_id="trip-2"))
        await store.append(Message.user("second", trip_id="trip-1"))

        history = await store.fetch("trip-1")
        assert [m.content for m in history] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_unknown_trip_is_empty(self):
        assert await InMemoryConversationStore().fetch("missing") == []

    @pytest.mark.asyncio
    async def test_fetch_returns_a_copy(self):
        store = InMemoryConversationStore()
        await store.append(Message.user("hello", trip_id="trip-1"))

        history = await store.fetch("trip-1")
        history.clear()

        assert len(await store.fetch("trip-1")) == 1

    @pytest.mark.asyncio
    async def test_message_without_trip_is_rejected(self):
        with pytest.raises(ValueError):
            await InMemoryConversationStore().append(Message.user("hello"))


class TestRedisConversationStore:
    @pytest.mark.asyncio
    async def test_append_pushes_json_and_refreshes_ttl(self):
        redis = AsyncMock()
        store = RedisConversationStore(redis, ttl_seconds=3600)

        await store.append(Message.user("hello", trip_id="trip-1", user_id="u-1"))

        key, raw = redis.rpush.await_args.args
        assert key == "conversation:trip-1"
        assert json.loads(raw)["tripId"] == "trip-1"
        assert json.loads(raw)["userId"] == "u-1"
        redis.expire.assert_awaited_once_with("conversation:trip-1", 3600)

    @pytest.mark.asyncio
    async def test_fetch_round_trips_assistant_metadata(self):
        message = Message(
            role=MessageRole.ASSISTANT,
            content="Here is your plan",
            trip_id="trip-1",
            kind=MessageKind.PLAN,
            data={"destination": "Paris"},
            provider_meta=ProviderMeta(provider="openai", model="gpt-4o", note=None),
        )
        redis = AsyncMock()
        redis.lrange.return_value = [json.dumps(message.to_wire()), "not json"]
        store = RedisConversationStore(redis)

        history = await store.fetch("trip-1")

        redis.lrange.assert_awaited_once_with("conversation:trip-1", 0, -1)
        assert history == [message]
