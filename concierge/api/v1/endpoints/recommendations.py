"""Hotel and event recommendation endpoint."""

import logging

from fastapi import APIRouter, Query

from concierge.core.deps import RecommendationLookupDep
from concierge.core.exceptions import NotFoundError
from concierge.domains.itinerary.tools.recommendations import DestinationRecommendations

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{destination}",
    response_model=DestinationRecommendations,
    summary="Curated hotels and events for a destination",
)
async def get_recommendations(
    destination: str,
    recommendation_lookup: RecommendationLookupDep,
    budget: float | None = Query(default=None, ge=0, description="Highest nightly starting price"),
    interests: str | None = Query(default=None, description="Comma-separated interests"),
) -> DestinationRecommendations:
    if recommendation_lookup is None:
        raise NotFoundError("Recommendations are not enabled")

    interest_list = [i.strip() for i in interests.split(",")] if interests else None
    result = await recommendation_lookup.get_recommendations(
        destination, budget=budget, interests=interest_list
    )
    if result.is_empty:
        raise NotFoundError(f"No recommendations available for {destination}")
    return result
