"""
Travel Concierge - Plan Synthesizer
Generates a structured, budget-consistent itinerary through the provider router.
"""

from __future__ import annotations

import logging
from datetime import date

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel

from concierge.core.config import Settings
from concierge.core.config import settings as default_settings
from concierge.domains.ai.errors import AllProvidersExhaustedError
from concierge.domains.ai.router import ProviderRouter
from concierge.domains.ai.schemas import ChatTurn, PromptSpec, TurnRole
from concierge.domains.itinerary.errors import GenerationError
from concierge.domains.itinerary.schemas import PlanRequest, TravelPlan
from concierge.domains.itinerary.services.plan_validator import (
    parse_plan_content,
    validate_plan_payload,
)

logger = logging.getLogger(__name__)


# ============ Prompts ============


PLAN_SYSTEM_PROMPT = (
    "You are an expert travel planner AI that creates detailed, realistic travel "
    "itineraries. Always provide accurate cost estimates and realistic "
    "recommendations. Format your response as JSON."
)


PLAN_USER_PROMPT = """Generate a detailed travel plan for a {duration_days}-day trip to {destination} with a budget of ${budget}.
The traveler is interested in: {interests}.
{start_date_line}
Please provide a comprehensive itinerary with the following information in JSON format:
1. Day-by-day activities with estimated costs
2. Budget breakdown (accommodation, food, activities, transportation, miscellaneous)
3. Recommendations for places to visit based on the interests
4. Estimated remaining budget

Rules:
- "days" must contain exactly {duration_days} entries numbered 1 to {duration_days}
- every "cost" is a non-negative number in USD
- "budget" must be {budget}
- the five "budgetBreakdown" values must add up to the total of all activity costs
- "remainingBudget" is the budget minus the total of all activity costs
- every recommendation "rating" is between 1.0 and 5.0

Format the response as a valid JSON object with the following structure:
{{
  "destination": string,
  "durationDays": number,
  "budget": number,
  "remainingBudget": number,
  "weather": {{ "temp": string, "condition": string }},
  "days": [
    {{
      "day": number,
      "title": string,
      "activities": [
        {{
          "type": string, // One of: accommodation, food, activity, transportation
          "description": string,
          "cost": number
        }}
      ]
    }}
  ],
  "budgetBreakdown": {{
    "accommodation": number,
    "food": number,
    "activities": number,
    "transportation": number,
    "miscellaneous": number
  }},
  "recommendations": [
    {{
      "name": string,
      "rating": number, // Between 1.0 and 5.0
      "description": string
    }}
  ]
}}

Return ONLY the JSON object, no markdown."""


def build_plan_messages(request: PlanRequest) -> list[ChatTurn]:
    """System and user turns for itinerary generation."""
    start_date_line = (
        f"The trip will start on {request.start_date.isoformat()}.\n"
        if request.start_date
        else ""
    )
    user_prompt = PromptTemplate.from_template(PLAN_USER_PROMPT).format(
        duration_days=request.duration_days,
        destination=request.destination,
        budget=f"{request.budget:.2f}",
        interests=", ".join(request.interests) or "general sightseeing",
        start_date_line=start_date_line,
    )
    return [
        ChatTurn(role=TurnRole.SYSTEM, content=PLAN_SYSTEM_PROMPT),
        ChatTurn(role=TurnRole.USER, content=user_prompt),
    ]


# ============ Synthesizer ============


class PlanSynthesis(BaseModel):
    """A validated plan plus the provider that produced it."""

    plan: TravelPlan
    provider_name: str
    model: str
    note: str | None = None


class PlanSynthesizer:
    """Builds the plan prompt, calls the router once, validates the answer."""

    def __init__(self, router: ProviderRouter, settings: Settings | None = None):
        self.router = router
        self.settings = settings or default_settings

    async def synthesize_plan(
        self,
        destination: str,
        duration_days: int,
        budget: float,
        interests: list[str],
        start_date: date | None = None,
    ) -> TravelPlan:
        """
        Generate a travel plan.

        Raises:
            GenerationError: all providers failed
            SchemaError: the answer is missing fields or has wrong types
            RangeError: the answer breaks a numeric invariant
        """
        request = PlanRequest(
            destination=destination,
            duration_days=duration_days,
            budget=budget,
            interests=interests,
            start_date=start_date,
        )
        synthesis = await self.synthesize(request)
        return synthesis.plan

    async def synthesize(self, request: PlanRequest) -> PlanSynthesis:
        """Generate and validate a plan for ``request``."""
        logger.info(
            f"Synthesizing {request.duration_days}-day plan for "
            f"{request.destination} (budget {request.budget:.2f})"
        )

        spec = PromptSpec(
            messages=build_plan_messages(request),
            json_mode=True,
            temperature=self.settings.PLAN_TEMPERATURE,
            max_tokens=self.settings.PLAN_MAX_TOKENS,
        )

        try:
            result = await self.router.call(spec)
        except AllProvidersExhaustedError as e:
            raise GenerationError(
                "All AI providers failed to generate a travel plan",
                failures=e.failures,
            ) from e

        payload = (
            result.parsed
            if result.parsed is not None
            else parse_plan_content(result.raw_content)
        )

        try:
            plan = validate_plan_payload(payload, request, self.settings)
        except GenerationError as e:
            e.details.setdefault("provider", result.provider_name)
            logger.error(
                f"Plan from {result.provider_name} rejected: {e.message}"
            )
            raise

        logger.info(
            f"Plan generated using {result.provider_name}:{result.model} "
            f"({len(plan.days)} days, remaining {plan.remaining_budget:.2f})"
        )

        return PlanSynthesis(
            plan=plan,
            provider_name=result.provider_name,
            model=result.model,
            note=result.note,
        )
