"""
Tests for turn routing and plan submission.
"""

from unittest.mock import AsyncMock

import pytest

from concierge.domains.ai.errors import AllProvidersExhaustedError
from concierge.domains.ai.router import ProviderRouter
from concierge.domains.chat.schemas import Message, MessageKind, MessageRole
from concierge.domains.chat.services.conversation_manager import (
    ConversationManager,
    is_plan_request,
    plan_flow_in_progress,
)
from concierge.domains.chat.services.responder import ConversationalResponder
from concierge.domains.chat.store import InMemoryConversationStore
from concierge.domains.itinerary.errors import ExtractionAmbiguity, GenerationError
from concierge.domains.itinerary.schemas import PlanRequest
from concierge.domains.itinerary.services.plan_synthesizer import PlanSynthesizer
from concierge.domains.itinerary.tools.base import APIClientError
from concierge.domains.itinerary.tools.recommendations import CatalogRecommendationLookup
from concierge.domains.itinerary.tools.weather import CurrentConditions, WeatherReport
from conftest import ScriptedProvider, TimingOutProvider


def _manager(provider, settings, weather_lookup=None, recommendation_lookup=None):
    router = ProviderRouter([provider], timeout=5)
    store = InMemoryConversationStore()
    manager = ConversationManager(
        store,
        PlanSynthesizer(router, settings),
        ConversationalResponder(router, settings),
        weather_lookup,
        recommendation_lookup,
    )
    return manager, store


def _assistant(kind: MessageKind) -> Message:
    return Message(role=MessageRole.ASSISTANT, content="...", kind=kind)


class TestRoutingRule:
    @pytest.mark.parametrize(
        "text",
        [
            "Can you plan something for me?",
            "I need a TRIP idea",
            "Travel tips please",
            "[Context: destination=Rome] hi",
        ],
    )
    def test_plan_requests(self, text):
        assert is_plan_request(text)

    def test_weather_question_is_not_a_plan_request(self):
        assert not is_plan_request("What's the weather like?")

    def test_flow_in_progress_after_form(self):
        history = [Message.user("plan a trip"), _assistant(MessageKind.PLAN_FORM)]

        assert plan_flow_in_progress(history)

    def test_flow_finished_after_plan(self):
        history = [
            _assistant(MessageKind.PLAN_FORM),
            _assistant(MessageKind.PLAN),
            _assistant(MessageKind.CHAT),
        ]

        assert not plan_flow_in_progress(history)

    def test_no_flow_without_form(self):
        assert not plan_flow_in_progress([Message.user("hi"), _assistant(MessageKind.CHAT)])


class TestHandleTurn:
    @pytest.mark.asyncio
    async def test_weather_question_goes_to_responder(self, settings):
        provider = ScriptedProvider("gemini", ["It is sunny."])
        manager, store = _manager(provider, settings)

        reply = await manager.handle_turn("trip-1", "u-1", None, "What's the weather like?")

        assert reply.kind == MessageKind.CHAT
        assert reply.content == "It is sunny."
        assert len(provider.calls) == 1
        history = await store.fetch("trip-1")
        assert [m.role for m in history] == [MessageRole.USER, MessageRole.ASSISTANT]

    @pytest.mark.asyncio
    async def test_plan_request_returns_form_without_ai_call(self, settings):
        provider = ScriptedProvider("gemini", ["unused"])
        manager, store = _manager(provider, settings)

        reply = await manager.handle_turn(
            "trip-1",
            "u-1",
            None,
            "Plan a 5 day trip to Tokyo with $3000 budget, I love food and shopping",
        )

        assert reply.kind == MessageKind.PLAN_FORM
        assert reply.data["intent"] == {
            "destination": "Tokyo",
            "durationDays": 5,
            "budgetAmount": 3000.0,
            "interests": ["food", "shopping"],
            "startDate": None,
        }
        assert reply.data["missingFields"] == []
        assert provider.calls == []
        assert len(await store.fetch("trip-1")) == 2

    @pytest.mark.asyncio
    async def test_form_lists_missing_fields(self, settings):
        manager, _ = _manager(ScriptedProvider("gemini", ["unused"]), settings)

        reply = await manager.handle_turn("trip-1", None, None, "Let's plan a trip to Rome")

        assert reply.data["intent"]["destination"] == "Rome"
        assert reply.data["missingFields"] == ["durationDays", "budgetAmount", "interests"]

    @pytest.mark.asyncio
    async def test_plan_words_during_open_form_go_to_responder(self, settings):
        provider = ScriptedProvider("gemini", ["Sure, 5 days is a good length."])
        manager, _ = _manager(provider, settings)
        history = [Message.user("plan a trip"), _assistant(MessageKind.PLAN_FORM)]

        reply = await manager.handle_turn("trip-1", None, history, "Is 5 days enough for this trip?")

        assert reply.kind == MessageKind.CHAT
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_user_message_is_stored_even_when_providers_fail(self, settings):
        manager, store = _manager(TimingOutProvider("gemini"), settings)

        with pytest.raises(AllProvidersExhaustedError):
            await manager.handle_turn("trip-1", None, None, "Hello there")

        history = await store.fetch("trip-1")
        assert [m.content for m in history] == ["Hello there"]

    @pytest.mark.asyncio
    async def test_weather_is_looked_up_for_destination(self, settings):
        provider = ScriptedProvider("gemini", ["Pack layers."])
        weather = AsyncMock()
        weather.get_weather.return_value = WeatherReport(
            location="Lisbon",
            current=CurrentConditions(temp_c=19, condition="Windy"),
        )
        manager, _ = _manager(provider, settings, weather_lookup=weather)

        await manager.handle_turn("trip-1", None, None, "What should I pack to visit Lisbon?")

        weather.get_weather.assert_awaited_once_with("Lisbon")
        system = provider.calls[0]["messages"][0].content
        assert "Current conditions: Windy" in system

    @pytest.mark.asyncio
    async def test_weather_failure_is_ignored(self, settings):
        provider = ScriptedProvider("gemini", ["Pack layers."])
        weather = AsyncMock()
        weather.get_weather.side_effect = APIClientError("HTTP error: 500", tool_name="WeatherAPIClient")
        manager, _ = _manager(provider, settings, weather_lookup=weather)

        reply = await manager.handle_turn("trip-1", None, None, "What should I pack to visit Lisbon?")

        assert reply.content == "Pack layers."
        assert "checked the current weather" not in provider.calls[0]["messages"][0].content

    @pytest.mark.asyncio
    async def test_catalog_recommendations_reach_the_prompt(self, settings):
        provider = ScriptedProvider("gemini", ["Stay at Mama Shelter."])
        manager, _ = _manager(
            provider, settings, recommendation_lookup=CatalogRecommendationLookup()
        )

        await manager.handle_turn("trip-1", None, None, "Where should I stay in Paris?")

        system = provider.calls[0]["messages"][0].content
        assert "use ONLY the specific authentic recommendations" in system
        assert "Authentic hotel recommendations for Paris:" in system
        assert "**Ritz Paris** (Ritz-Carlton)" in system
        assert "**Louvre Museum Skip-the-Line Tour** (cultural)" in system

    @pytest.mark.asyncio
    async def test_unknown_destination_adds_no_recommendations(self, settings):
        provider = ScriptedProvider("gemini", ["Reykjavik is great."])
        manager, _ = _manager(
            provider, settings, recommendation_lookup=CatalogRecommendationLookup()
        )

        await manager.handle_turn("trip-1", None, None, "Where should I stay in Reykjavik?")

        assert "Authentic hotel" not in provider.calls[0]["messages"][0].content

    @pytest.mark.asyncio
    async def test_recommendation_failure_is_ignored(self, settings):
        provider = ScriptedProvider("gemini", ["Try the Marais."])
        lookup = AsyncMock()
        lookup.get_recommendations.side_effect = APIClientError(
            "HTTP error: 503", tool_name="HotelFeed"
        )
        manager, _ = _manager(provider, settings, recommendation_lookup=lookup)

        reply = await manager.handle_turn("trip-1", None, None, "Where should I stay in Paris?")

        lookup.get_recommendations.assert_awaited_once_with("Paris")
        assert reply.content == "Try the Marais."
        assert "use ONLY" not in provider.calls[0]["messages"][0].content


class TestSubmitPlan:
    @pytest.mark.asyncio
    async def test_explicit_request(self, settings, paris_plan_json):
        provider = ScriptedProvider("gemini", [paris_plan_json])
        manager, store = _manager(provider, settings)
        request = PlanRequest(destination="Paris", duration_days=3, budget=1500, interests=["museums"])

        reply = await manager.submit_plan("trip-1", "u-1", request)

        assert reply.kind == MessageKind.PLAN
        assert reply.data["durationDays"] == 3
        assert reply.data["remainingBudget"] == 604
        assert "Day 1: Arrival and the Louvre" in reply.content
        assert reply.provider_meta.provider == "gemini"
        assert (await store.fetch("trip-1"))[-1] == reply

    @pytest.mark.asyncio
    async def test_request_from_history(self, settings, paris_plan_json):
        provider = ScriptedProvider("gemini", [paris_plan_json])
        manager, _ = _manager(provider, settings)
        await manager.handle_turn(
            "trip-1", None, None, "Plan a 3 day trip to Paris with $1500, I love museums and food"
        )

        reply = await manager.submit_plan("trip-1", None)

        assert reply.kind == MessageKind.PLAN
        prompt = provider.calls[0]["messages"][1].content
        assert "3-day trip to Paris with a budget of $1500.00" in prompt

    @pytest.mark.asyncio
    async def test_form_flow_closes_after_plan(self, settings, paris_plan_json):
        provider = ScriptedProvider("gemini", [paris_plan_json])
        manager, store = _manager(provider, settings)
        await manager.handle_turn(
            "trip-1", None, None, "Plan a 3 day trip to Paris with $1500, I love museums and food"
        )
        await manager.submit_plan("trip-1", None)

        assert not plan_flow_in_progress(await store.fetch("trip-1"))

    @pytest.mark.asyncio
    async def test_incomplete_history_raises(self, settings):
        manager, _ = _manager(ScriptedProvider("gemini", ["unused"]), settings)
        await manager.handle_turn("trip-1", None, None, "Plan a trip to Paris")

        with pytest.raises(ExtractionAmbiguity) as exc_info:
            await manager.submit_plan("trip-1", None)

        assert "budgetAmount" in exc_info.value.missing_fields

    @pytest.mark.asyncio
    async def test_generation_failure_propagates(self, settings):
        manager, store = _manager(TimingOutProvider("gemini"), settings)
        request = PlanRequest(destination="Paris", duration_days=3, budget=1500)

        with pytest.raises(GenerationError):
            await manager.submit_plan("trip-1", None, request)

        assert await store.fetch("trip-1") == []
