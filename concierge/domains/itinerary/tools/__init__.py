"""External data sources used by the itinerary domain.

- WeatherAPIClient: current conditions and short forecast for a location
- CatalogRecommendationLookup: curated hotels and events per destination
"""

from concierge.domains.itinerary.tools.base import (
    APIClientError,
    AuthenticationError,
    BaseAsyncAPIClient,
    ToolError,
)
from concierge.domains.itinerary.tools.recommendations import (
    CatalogRecommendationLookup,
    DestinationRecommendations,
    EventRecommendation,
    HotelRecommendation,
    RecommendationLookup,
)
from concierge.domains.itinerary.tools.weather import (
    CurrentConditions,
    ForecastDay,
    WeatherAPIClient,
    WeatherLookup,
    WeatherReport,
)

__all__ = [
    "APIClientError",
    "AuthenticationError",
    "BaseAsyncAPIClient",
    "CatalogRecommendationLookup",
    "CurrentConditions",
    "DestinationRecommendations",
    "EventRecommendation",
    "ForecastDay",
    "HotelRecommendation",
    "RecommendationLookup",
    "ToolError",
    "WeatherAPIClient",
    "WeatherLookup",
    "WeatherReport",
]
