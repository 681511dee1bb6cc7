"""Stateless plan generation endpoint."""

import logging
from typing import Any

from fastapi import APIRouter

from concierge.core.deps import PlanSynthesizerDep
from concierge.core.exceptions import PlanGenerationFailedError
from concierge.domains.itinerary.errors import GenerationError
from concierge.domains.itinerary.schemas import PlanRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    summary="Generate a travel plan",
    description="""
    Generate a day-by-day itinerary with costed activities, a budget
    breakdown and rated recommendations. The returned `remainingBudget`
    always equals `budget` minus the sum of all activity costs.
    """,
)
async def create_plan(
    request: PlanRequest,
    synthesizer: PlanSynthesizerDep,
) -> dict[str, Any]:
    try:
        synthesis = await synthesizer.synthesize(request)
    except GenerationError as e:
        logger.error(f"Plan generation for {request.destination} failed: {e.message}")
        raise PlanGenerationFailedError(e.message, failures=e.failure_dicts()) from e
    return synthesis.plan.to_wire()
