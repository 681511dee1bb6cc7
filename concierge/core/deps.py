"""FastAPI dependencies wiring the concierge services together.

Providers, the router and the in-memory store are built once per process;
everything else is cheap and built per request. Tests replace any of these
through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from concierge.core.config import Settings, get_settings
from concierge.domains.ai.providers import build_providers
from concierge.domains.ai.router import ProviderRouter
from concierge.domains.chat.services.conversation_manager import ConversationManager
from concierge.domains.chat.services.responder import ConversationalResponder
from concierge.domains.chat.store import (
    ConversationStore,
    InMemoryConversationStore,
    RedisConversationStore,
)
from concierge.domains.itinerary.services.plan_synthesizer import PlanSynthesizer
from concierge.domains.itinerary.tools.recommendations import (
    CatalogRecommendationLookup,
    RecommendationLookup,
)
from concierge.domains.itinerary.tools.weather import WeatherAPIClient, WeatherLookup


@lru_cache
def get_provider_router() -> ProviderRouter:
    """Router over the providers named in AI_PROVIDER_ORDER."""
    settings = get_settings()
    return ProviderRouter(
        build_providers(settings),
        timeout=settings.AI_PROVIDER_TIMEOUT_SECONDS,
    )


@lru_cache
def _memory_store() -> InMemoryConversationStore:
    return InMemoryConversationStore()


async def get_conversation_store() -> ConversationStore:
    """Conversation store selected by CONVERSATION_STORE."""
    settings = get_settings()
    if settings.CONVERSATION_STORE == "redis":
        from concierge.infra.redis import get_redis

        return RedisConversationStore(
            await get_redis(),
            ttl_seconds=settings.CONVERSATION_TTL_HOURS * 3600,
        )
    return _memory_store()


def get_weather_lookup() -> WeatherLookup | None:
    """Weather client, or None when no API key is configured."""
    settings = get_settings()
    if not settings.WEATHER_API_KEY:
        return None
    return WeatherAPIClient(settings=settings)


@lru_cache
def _catalog_lookup(limit: int) -> CatalogRecommendationLookup:
    return CatalogRecommendationLookup(limit=limit)


def get_recommendation_lookup() -> RecommendationLookup | None:
    """Hotel and event catalog, or None when RECOMMENDATIONS_ENABLED is off."""
    settings = get_settings()
    if not settings.RECOMMENDATIONS_ENABLED:
        return None
    return _catalog_lookup(settings.RECOMMENDATION_LIMIT)


def get_plan_synthesizer(
    router: Annotated[ProviderRouter, Depends(get_provider_router)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PlanSynthesizer:
    return PlanSynthesizer(router, settings)


def get_responder(
    router: Annotated[ProviderRouter, Depends(get_provider_router)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ConversationalResponder:
    return ConversationalResponder(router, settings)


def get_conversation_manager(
    store: Annotated[ConversationStore, Depends(get_conversation_store)],
    synthesizer: Annotated[PlanSynthesizer, Depends(get_plan_synthesizer)],
    responder: Annotated[ConversationalResponder, Depends(get_responder)],
    weather_lookup: Annotated[WeatherLookup | None, Depends(get_weather_lookup)],
    recommendation_lookup: Annotated[
        RecommendationLookup | None, Depends(get_recommendation_lookup)
    ],
) -> ConversationManager:
    return ConversationManager(
        store, synthesizer, responder, weather_lookup, recommendation_lookup
    )


# Type aliases for cleaner endpoint signatures
ConversationManagerDep = Annotated[ConversationManager, Depends(get_conversation_manager)]
ConversationStoreDep = Annotated[ConversationStore, Depends(get_conversation_store)]
PlanSynthesizerDep = Annotated[PlanSynthesizer, Depends(get_plan_synthesizer)]
WeatherLookupDep = Annotated[WeatherLookup | None, Depends(get_weather_lookup)]
RecommendationLookupDep = Annotated[
    RecommendationLookup | None, Depends(get_recommendation_lookup)
]
