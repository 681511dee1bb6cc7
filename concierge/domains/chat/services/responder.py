"""
Travel Concierge - Conversational Responder
Free-text travel advice with a fixed markdown formatting contract.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from concierge.core.config import Settings
from concierge.core.config import settings as default_settings
from concierge.domains.ai.router import ProviderRouter
from concierge.domains.ai.schemas import ChatTurn, PromptSpec, TurnRole
from concierge.domains.chat.schemas import Message, MessageRole, ProviderMeta
from concierge.domains.itinerary.tools.recommendations import DestinationRecommendations
from concierge.domains.itinerary.tools.weather import WeatherReport

logger = logging.getLogger(__name__)


# ============ Prompts ============


CONCIERGE_PERSONA = (
    "You are an AI travel concierge that helps plan personalized travel "
    "experiences. You provide helpful, friendly advice about destinations, "
    "activities, accommodations, and local customs. Always be conversational "
    "but focused on travel planning."
)


MARKDOWN_CONTRACT = """Important: Format your responses using markdown for better readability. Follow these formatting guidelines:

1. Use ## for Day headings (e.g., ## Day 1: Paris Exploration)
2. Use ### for section headings (e.g., ### Morning Activities)
3. Use bullet points with emoji prefixes for activities and recommendations:
   - 🏨 For accommodations
   - 🍽️ For restaurants/food
   - 🚶 For walking tours/exploration
   - 🚌 For transportation
   - 🎭 For entertainment
   - 🏛️ For museums/historical sites
   - 💰 For budget information
4. Use **bold** for important information and costs
5. Use *italics* for tips and additional notes
6. For detailed itineraries, use proper markdown tables
7. ALWAYS put budget breakdowns in code blocks for special formatting
8. ALWAYS include properly formatted weather information in code blocks when relevant
9. Use proper indentation for all content to improve readability
10. When mentioning attractions, landmarks, or scenery, include images where possible

Example of good formatting:
## 🗓️ Day 1: Arrival in Paris
- 🏨 **Hotel**: Sofitel Paris ($220/night)
- 🍽️ **Lunch**: Café de Flore ($30 per person)
- 🚶 **Afternoon**: Explore the Latin Quarter
  * Visit Shakespeare & Company bookstore
  * Stroll along Seine River
- 🍽️ **Dinner**: Le Comptoir ($40 per person)
- 💰 **Daily Budget**: $300

*Tip: The Museum Pass can save you money if visiting multiple museums.*"""


def format_weather_context(weather: WeatherReport) -> str:
    """Weather block injected between the persona and the formatting rules."""
    lines = [
        f"Important: I've checked the current weather for {weather.location}:",
        f"Current temperature: {weather.current.temp_c:g}°C",
        f"Current conditions: {weather.current.condition}",
    ]
    if weather.forecast:
        lines.append(f"Forecast for the next {len(weather.forecast)} days:")
        lines.extend(
            f"- Day {i}: High {day.maxtemp_c:g}°C, Low {day.mintemp_c:g}°C, "
            f"{day.condition}"
            for i, day in enumerate(weather.forecast, start=1)
        )
    lines.append(
        "Please incorporate this weather information into your travel advice and "
        "be sure to mention the weather in a properly formatted weather code block "
        "in your response."
    )
    return "\n".join(lines)


RECOMMENDATIONS_INSTRUCTION = (
    "When recommending hotels and activities, use ONLY the specific authentic "
    "recommendations provided in the context below. Do not invent or suggest any "
    "hotels, restaurants, or activities not listed here."
)


def format_recommendations_context(recommendations: DestinationRecommendations) -> str:
    """Hotel and event blocks the model must choose from."""
    blocks = [RECOMMENDATIONS_INSTRUCTION]

    if recommendations.hotels:
        lines = [f"Authentic hotel recommendations for {recommendations.destination}:"]
        for i, hotel in enumerate(recommendations.hotels, start=1):
            price = hotel.price_range
            lines.extend(
                [
                    f"{i}. **{hotel.name}** ({hotel.brand})",
                    f"   - Location: {hotel.address}, {hotel.district}",
                    f"   - Rating: {hotel.rating:.1f}/5",
                    f"   - Price Range: ${price.min:,.0f}-{price.max:,.0f} "
                    f"{price.currency} per night",
                    f"   - Category: {hotel.category.value}",
                    f"   - Amenities: {', '.join(hotel.amenities)}",
                    f"   - Highlights: {', '.join(hotel.highlights)}",
                ]
            )
        blocks.append("\n".join(lines))

    if recommendations.events:
        lines = [
            "Authentic activity and event recommendations for "
            f"{recommendations.destination}:"
        ]
        for i, event in enumerate(recommendations.events, start=1):
            price = event.price_range
            lines.extend(
                [
                    f"{i}. **{event.name}** ({event.type.value})",
                    f"   - Venue: {event.venue}",
                    f"   - Duration: {event.duration}",
                    f"   - Price Range: ${price.min:,.0f}-{price.max:,.0f} {price.currency}",
                    f"   - Category: {event.category.value}",
                    f"   - Description: {event.description}",
                    f"   - Highlights: {', '.join(event.highlights)}",
                ]
            )
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def build_system_prompt(
    weather: WeatherReport | None = None,
    recommendations: DestinationRecommendations | None = None,
) -> str:
    sections = [CONCIERGE_PERSONA]
    if recommendations is not None and not recommendations.is_empty:
        sections.append(format_recommendations_context(recommendations))
    if weather is not None:
        sections.append(format_weather_context(weather))
    sections.append(MARKDOWN_CONTRACT)
    return "\n\n".join(sections)


_TURN_ROLES = {
    MessageRole.USER: TurnRole.USER,
    MessageRole.ASSISTANT: TurnRole.ASSISTANT,
}


# ============ Responder ============


class ConversationalResponder:
    """Answers open-ended travel questions through the provider router."""

    def __init__(self, router: ProviderRouter, settings: Settings | None = None):
        self.router = router
        self.settings = settings or default_settings

    def build_messages(
        self,
        history: Sequence[Message],
        new_message: str,
        weather_context: WeatherReport | None = None,
        recommendations: DestinationRecommendations | None = None,
    ) -> list[ChatTurn]:
        """
        System prompt, the recent history window, then the new user text.

        ``history`` must not already contain ``new_message``.
        """
        limit = self.settings.CONVERSATION_HISTORY_LIMIT
        window = list(history)[-limit:] if limit else []

        system_prompt = build_system_prompt(weather_context, recommendations)
        turns = [ChatTurn(role=TurnRole.SYSTEM, content=system_prompt)]
        turns.extend(
            ChatTurn(role=_TURN_ROLES[message.role], content=message.content)
            for message in window
        )
        turns.append(ChatTurn(role=TurnRole.USER, content=new_message))
        return turns

    async def respond(
        self,
        history: Sequence[Message],
        new_message: str,
        weather_context: WeatherReport | None = None,
        trip_id: str | None = None,
        user_id: str | None = None,
        recommendations: DestinationRecommendations | None = None,
    ) -> Message:
        """
        Produce the assistant reply to ``new_message``.

        Raises:
            AllProvidersExhaustedError: no provider answered
        """
        spec = PromptSpec(
            messages=self.build_messages(
                history, new_message, weather_context, recommendations
            ),
            json_mode=False,
            temperature=self.settings.CHAT_TEMPERATURE,
            max_tokens=self.settings.CHAT_MAX_TOKENS,
        )

        result = await self.router.call(spec)

        logger.info(
            f"Conversational reply from {result.provider_name}:{result.model} "
            f"({len(result.raw_content)} chars)"
        )

        return Message(
            role=MessageRole.ASSISTANT,
            content=result.raw_content,
            trip_id=trip_id,
            user_id=user_id,
            provider_meta=ProviderMeta(
                provider=result.provider_name,
                model=result.model,
                note=result.note,
            ),
        )
