"""Hotel and event recommendations for a destination.

Gives the conversational responder a fixed set of real places to suggest,
so the model does not invent hotels or activities.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Protocol

from pydantic import Field

from concierge.domains.itinerary.schemas import CamelModel
from concierge.domains.itinerary.tools.recommendation_catalog import (
    CITY_EVENTS,
    CITY_HOTELS,
)

logger = logging.getLogger(__name__)


# ============ Output Schemas ============


class HotelCategory(str, Enum):
    LUXURY = "luxury"
    BUSINESS = "business"
    BOUTIQUE = "boutique"
    BUDGET = "budget"
    FAMILY = "family"


class EventType(str, Enum):
    CULTURAL = "cultural"
    ENTERTAINMENT = "entertainment"
    SPORTS = "sports"
    FOOD = "food"
    NIGHTLIFE = "nightlife"
    SHOPPING = "shopping"
    OUTDOOR = "outdoor"


class EventCategory(str, Enum):
    MUST_SEE = "must-see"
    POPULAR = "popular"
    HIDDEN_GEM = "hidden-gem"
    SEASONAL = "seasonal"


class PriceRange(CamelModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    currency: str = "USD"


class Coordinates(CamelModel):
    lat: float
    lng: float


class HotelRecommendation(CamelModel):
    """A specific hotel with nightly price range."""

    id: str
    name: str
    brand: str
    address: str
    district: str
    rating: float = Field(..., ge=1.0, le=5.0)
    price_range: PriceRange
    amenities: list[str] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    booking_url: str | None = None
    images: list[str] = Field(default_factory=list)
    category: HotelCategory
    coordinates: Coordinates | None = None


class EventRecommendation(CamelModel):
    """A specific activity or event with per-person price range."""

    id: str
    name: str
    type: EventType
    description: str
    venue: str
    address: str
    date: str | None = None
    duration: str
    price_range: PriceRange
    highlights: list[str] = Field(default_factory=list)
    booking_url: str | None = None
    category: EventCategory


class DestinationRecommendations(CamelModel):
    """Hotels and events known for one destination."""

    destination: str
    hotels: list[HotelRecommendation] = Field(default_factory=list)
    events: list[EventRecommendation] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.hotels and not self.events


class RecommendationLookup(Protocol):
    """Anything that can list hotels and events for a place name."""

    async def get_recommendations(
        self,
        destination: str,
        budget: float | None = None,
        interests: Sequence[str] | None = None,
    ) -> DestinationRecommendations: ...


# ============ Catalog Lookup ============


class CatalogRecommendationLookup:
    """
    Recommendations served from an in-process catalog.

    Destinations match case-insensitively. Unknown destinations give an
    empty result rather than an error.
    """

    def __init__(
        self,
        hotels: dict[str, list[dict]] | None = None,
        events: dict[str, list[dict]] | None = None,
        limit: int = 3,
    ):
        hotels = CITY_HOTELS if hotels is None else hotels
        events = CITY_EVENTS if events is None else events
        self.limit = limit
        self._hotels = {
            city.lower(): [HotelRecommendation.model_validate(h) for h in entries]
            for city, entries in hotels.items()
        }
        self._events = {
            city.lower(): [EventRecommendation.model_validate(e) for e in entries]
            for city, entries in events.items()
        }

    def supported_destinations(self) -> list[str]:
        return sorted(set(self._hotels) | set(self._events))

    def get_hotels(
        self, destination: str, budget: float | None = None
    ) -> list[HotelRecommendation]:
        """Hotels for ``destination``; with a budget, only those starting at or below it."""
        hotels = self._hotels.get(destination.strip().lower(), [])
        if budget is not None:
            hotels = [h for h in hotels if h.price_range.min <= budget]
        return hotels[: self.limit]

    def get_events(
        self, destination: str, interests: Sequence[str] | None = None
    ) -> list[EventRecommendation]:
        """Events for ``destination``; with interests, only those matching one by type or description."""
        events = self._events.get(destination.strip().lower(), [])
        wanted = [i.strip().lower() for i in interests or [] if i.strip()]
        if wanted:
            events = [
                e
                for e in events
                if any(
                    interest in e.type.value or interest in e.description.lower()
                    for interest in wanted
                )
            ]
        return events[: self.limit]

    async def get_recommendations(
        self,
        destination: str,
        budget: float | None = None,
        interests: Sequence[str] | None = None,
    ) -> DestinationRecommendations:
        recommendations = DestinationRecommendations(
            destination=destination,
            hotels=self.get_hotels(destination, budget),
            events=self.get_events(destination, interests),
        )
        logger.info(
            f"Recommendations for {destination}: {len(recommendations.hotels)} hotels, "
            f"{len(recommendations.events)} events"
        )
        return recommendations
