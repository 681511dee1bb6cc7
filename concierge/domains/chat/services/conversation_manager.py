"""
Travel Concierge - Conversation Manager
Routes each user turn to the trip form flow or the conversational responder,
and keeps the per-trip history in the conversation store.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from concierge.domains.chat.schemas import Message, MessageKind, MessageRole, ProviderMeta
from concierge.domains.chat.services.responder import ConversationalResponder
from concierge.domains.chat.store import ConversationStore
from concierge.domains.itinerary.schemas import PlanRequest, TravelPlan
from concierge.domains.itinerary.services.intent_extractor import (
    extract_destinations,
    extract_intent,
)
from concierge.domains.itinerary.services.plan_synthesizer import PlanSynthesizer
from concierge.domains.itinerary.tools.base import ToolError
from concierge.domains.itinerary.tools.recommendations import (
    DestinationRecommendations,
    RecommendationLookup,
)
from concierge.domains.itinerary.tools.weather import WeatherLookup, WeatherReport

logger = logging.getLogger(__name__)


PLAN_KEYWORDS_PATTERN = re.compile(r"plan|trip|travel", re.IGNORECASE)
CONTEXT_MARKER = "[Context:"

PLAN_FORM_PROMPT = (
    "Let's plan your trip! Please confirm the details below so I can build "
    "a day-by-day itinerary."
)


def is_plan_request(text: str) -> bool:
    """True when the text asks for a structured plan."""
    return bool(PLAN_KEYWORDS_PATTERN.search(text)) or CONTEXT_MARKER in text


def plan_flow_in_progress(history: Sequence[Message]) -> bool:
    """
    A form was shown and no plan has been delivered since.

    Only the latest ``plan_form`` message matters.
    """
    for message in reversed(history):
        if message.kind == MessageKind.PLAN:
            return False
        if message.kind == MessageKind.PLAN_FORM:
            return True
    return False


def render_plan_summary(plan: TravelPlan) -> str:
    """Short markdown summary that accompanies the structured plan."""
    spent = plan.budget - plan.remaining_budget
    lines = [
        f"## 🗺️ {plan.duration_days}-Day Trip to {plan.destination}",
        "",
        f"**Weather**: {plan.weather.temp}, {plan.weather.condition}",
        "",
    ]
    for day in plan.days:
        day_cost = sum(activity.cost for activity in day.activities)
        lines.append(f"### Day {day.day}: {day.title}")
        lines.extend(
            f"- {activity.description} (**${activity.cost:,.2f}**)"
            for activity in day.activities
        )
        lines.append(f"- 💰 **Daily total**: ${day_cost:,.2f}")
        lines.append("")

    breakdown = plan.budget_breakdown
    lines.extend(
        [
            "```",
            f"Budget:          ${plan.budget:,.2f}",
            f"Accommodation:   ${breakdown.accommodation:,.2f}",
            f"Food:            ${breakdown.food:,.2f}",
            f"Activities:      ${breakdown.activities:,.2f}",
            f"Transportation:  ${breakdown.transportation:,.2f}",
            f"Miscellaneous:   ${breakdown.miscellaneous:,.2f}",
            f"Spent:           ${spent:,.2f}",
            f"Remaining:       ${plan.remaining_budget:,.2f}",
            "```",
        ]
    )
    return "\n".join(lines)


class ConversationManager:
    """Entry point for chat turns and trip form submissions."""

    def __init__(
        self,
        store: ConversationStore,
        synthesizer: PlanSynthesizer,
        responder: ConversationalResponder,
        weather_lookup: WeatherLookup | None = None,
        recommendation_lookup: RecommendationLookup | None = None,
    ):
        self.store = store
        self.synthesizer = synthesizer
        self.responder = responder
        self.weather_lookup = weather_lookup
        self.recommendation_lookup = recommendation_lookup

    async def handle_turn(
        self,
        trip_id: str,
        user_id: str | None,
        history: Sequence[Message] | None,
        new_message_text: str,
    ) -> Message:
        """
        Process one user message and return the assistant reply.

        The user message is stored before any AI call, so it survives a
        provider outage.

        Raises:
            AllProvidersExhaustedError: the conversational path had no provider
        """
        if history is None:
            history = await self.store.fetch(trip_id)
        history = list(history)

        await self.store.append(Message.user(new_message_text, trip_id=trip_id, user_id=user_id))

        if is_plan_request(new_message_text) and not plan_flow_in_progress(history):
            logger.info(f"Trip {trip_id}: routing turn to the plan form")
            reply = self._plan_form_message(trip_id, user_id, history, new_message_text)
        else:
            logger.info(f"Trip {trip_id}: routing turn to the conversational responder")
            weather = await self._lookup_weather(new_message_text)
            recommendations = await self._lookup_recommendations(new_message_text)
            reply = await self.responder.respond(
                history,
                new_message_text,
                weather_context=weather,
                trip_id=trip_id,
                user_id=user_id,
                recommendations=recommendations,
            )

        await self.store.append(reply)
        return reply

    async def submit_plan(
        self,
        trip_id: str,
        user_id: str | None,
        request: PlanRequest | None = None,
    ) -> Message:
        """
        Synthesize a plan for the trip and append it to the conversation.

        Without an explicit ``request`` the parameters come from the intent
        extracted from the stored history.

        Raises:
            ExtractionAmbiguity: history does not name every trip detail
            GenerationError: the plan could not be generated or validated
        """
        if request is None:
            history = await self.store.fetch(trip_id)
            request = extract_intent(history).to_plan_request()

        synthesis = await self.synthesizer.synthesize(request)
        plan = synthesis.plan

        reply = Message(
            role=MessageRole.ASSISTANT,
            content=render_plan_summary(plan),
            trip_id=trip_id,
            user_id=user_id,
            kind=MessageKind.PLAN,
            data=plan.to_wire(),
            provider_meta=ProviderMeta(
                provider=synthesis.provider_name,
                model=synthesis.model,
                note=synthesis.note,
            ),
        )
        await self.store.append(reply)
        return reply

    def _plan_form_message(
        self,
        trip_id: str,
        user_id: str | None,
        history: Sequence[Message],
        new_message_text: str,
    ) -> Message:
        user_turn = Message.user(new_message_text, trip_id=trip_id, user_id=user_id)
        intent = extract_intent([*history, user_turn])
        return Message(
            role=MessageRole.ASSISTANT,
            content=PLAN_FORM_PROMPT,
            trip_id=trip_id,
            user_id=user_id,
            kind=MessageKind.PLAN_FORM,
            data={
                "intent": intent.to_wire(),
                "missingFields": intent.missing_fields,
            },
        )

    async def _lookup_weather(self, text: str) -> WeatherReport | None:
        if self.weather_lookup is None:
            return None

        destinations = extract_destinations(text)
        if not destinations:
            return None

        try:
            return await self.weather_lookup.get_weather(destinations[0])
        except ToolError as e:
            logger.warning(f"Weather lookup for {destinations[0]} failed: {e.message}")
            return None

    async def _lookup_recommendations(
        self, text: str
    ) -> DestinationRecommendations | None:
        if self.recommendation_lookup is None:
            return None

        destinations = extract_destinations(text)
        if not destinations:
            return None

        try:
            recommendations = await self.recommendation_lookup.get_recommendations(
                destinations[0]
            )
        except ToolError as e:
            logger.warning(
                f"Recommendation lookup for {destinations[0]} failed: {e.message}"
            )
            return None
        return None if recommendations.is_empty else recommendations
