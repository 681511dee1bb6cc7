"""Weather lookup endpoint."""

import logging

from fastapi import APIRouter

from concierge.core.deps import WeatherLookupDep
from concierge.core.exceptions import WeatherUnavailableError
from concierge.domains.itinerary.tools.base import ToolError
from concierge.domains.itinerary.tools.weather import WeatherReport

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{location}", response_model=WeatherReport, summary="Current weather and forecast")
async def get_weather(location: str, weather_lookup: WeatherLookupDep) -> WeatherReport:
    if weather_lookup is None:
        raise WeatherUnavailableError("Weather service is not configured")
    try:
        return await weather_lookup.get_weather(location)
    except ToolError as e:
        logger.warning(f"Weather lookup for {location} failed: {e.message}")
        raise WeatherUnavailableError(e.message) from e
