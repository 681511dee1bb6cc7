"""Weather lookup backed by WeatherAPI.com.

Provides current conditions plus a short daily forecast for a location,
used to ground conversational answers in the actual weather.
"""

import logging
from typing import Protocol

from pydantic import BaseModel, Field

from concierge.core.config import Settings
from concierge.core.config import settings as default_settings
from concierge.domains.itinerary.tools.base import APIClientError, BaseAsyncAPIClient

logger = logging.getLogger(__name__)


# ============ Output Schemas ============


class CurrentConditions(BaseModel):
    """Weather right now."""

    temp_c: float
    condition: str


class ForecastDay(BaseModel):
    """One day of the forecast."""

    date: str
    maxtemp_c: float
    mintemp_c: float
    condition: str


class WeatherReport(BaseModel):
    """Current weather and forecast for a location."""

    location: str
    current: CurrentConditions
    forecast: list[ForecastDay] = Field(default_factory=list)


class WeatherLookup(Protocol):
    """Anything that can produce a WeatherReport for a place name."""

    async def get_weather(self, location: str) -> WeatherReport: ...


# ============ Weather API Client ============


class WeatherAPIClient(BaseAsyncAPIClient):
    """Async client for the WeatherAPI.com forecast endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        forecast_days: int | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or default_settings
        self.api_key = api_key or settings.WEATHER_API_KEY
        self.forecast_days = forecast_days or settings.WEATHER_FORECAST_DAYS
        super().__init__(base_url or settings.WEATHER_API_BASE_URL)

    async def _get_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def get_weather(self, location: str) -> WeatherReport:
        """
        Fetch current weather and a daily forecast.

        Args:
            location: City name or "lat,lon"

        Raises:
            APIClientError: no API key, request failure or malformed body
        """
        if not self.api_key:
            raise APIClientError(
                "Weather API key not configured",
                tool_name=self.__class__.__name__,
            )

        logger.info(f"Fetching weather for {location}")

        async with self:
            data = await self.get(
                "/forecast.json",
                params={
                    "key": self.api_key,
                    "q": location,
                    "days": self.forecast_days,
                    "aqi": "no",
                },
            )

        return self._parse_report(location, data)

    def _parse_report(self, location: str, data: dict) -> WeatherReport:
        try:
            current = data["current"]
            forecast = [
                ForecastDay(
                    date=day["date"],
                    maxtemp_c=day["day"]["maxtemp_c"],
                    mintemp_c=day["day"]["mintemp_c"],
                    condition=day["day"]["condition"]["text"],
                )
                for day in data.get("forecast", {}).get("forecastday", [])
            ]
            return WeatherReport(
                location=data.get("location", {}).get("name") or location,
                current=CurrentConditions(
                    temp_c=current["temp_c"],
                    condition=current["condition"]["text"],
                ),
                forecast=forecast,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise APIClientError(
                f"Unexpected weather response shape: {e}",
                tool_name=self.__class__.__name__,
            ) from e
