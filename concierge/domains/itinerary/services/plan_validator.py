"""
Travel Concierge - Plan Validator
Turns raw model JSON into a TravelPlan that satisfies the budget invariants.

Model output is never trusted for derived numbers: the remaining budget is
always recomputed from the itemised activity costs. Anything else that is
wrong (missing fields, bad types, out-of-range values, inconsistent
arithmetic) fails the plan instead of being patched.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from concierge.core.config import Settings
from concierge.core.config import settings as default_settings
from concierge.domains.ai.parsing import loads_json
from concierge.domains.itinerary.errors import RangeError, SchemaError
from concierge.domains.itinerary.schemas import PlanRequest, TravelPlan

logger = logging.getLogger(__name__)

# pydantic error types that mean "right type, value out of bounds"
RANGE_ERROR_TYPES = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
}


def _summarize_errors(error: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "type": err["type"],
            "msg": err["msg"],
        }
        for err in error.errors()
    ]


def parse_plan_content(content: str) -> dict[str, Any]:
    """Decode model text into the raw plan dict."""
    try:
        payload = loads_json(content)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Plan response is not valid JSON: {e.msg}") from e

    if not isinstance(payload, dict):
        raise SchemaError("Plan response must be a JSON object")
    return payload


def validate_plan_payload(
    payload: Any,
    request: PlanRequest,
    settings: Settings | None = None,
) -> TravelPlan:
    """
    Validate a decoded plan against the request that produced it.

    Args:
        payload: Decoded JSON from the provider
        request: The parameters the plan was generated for
        settings: Source of the budget tolerance

    Returns:
        TravelPlan whose remaining budget equals budget minus activity costs

    Raises:
        SchemaError: missing fields or wrong types
        RangeError: negative costs, ratings outside 1-5, wrong day count,
            or budget figures that do not add up
    """
    settings = settings or default_settings

    if not isinstance(payload, dict):
        raise SchemaError("Plan response must be a JSON object")

    try:
        plan = TravelPlan.model_validate(payload)
    except ValidationError as e:
        errors = _summarize_errors(e)
        fields = ", ".join(err["loc"] for err in errors)
        if all(err["type"] in RANGE_ERROR_TYPES for err in errors):
            raise RangeError(
                f"Plan values out of range: {fields}",
                details={"errors": errors},
            ) from e
        raise SchemaError(
            f"Plan does not match the required schema: {fields}",
            details={"errors": errors},
        ) from e

    tolerance = settings.budget_tolerance(request.budget)

    # Day structure
    if plan.duration_days != request.duration_days:
        raise RangeError(
            f"Plan covers {plan.duration_days} days, "
            f"{request.duration_days} were requested"
        )
    if len(plan.days) != request.duration_days:
        raise RangeError(
            f"Plan has {len(plan.days)} day entries, "
            f"expected {request.duration_days}"
        )

    days = sorted(plan.days, key=lambda d: d.day)
    day_numbers = [d.day for d in days]
    if day_numbers != list(range(1, request.duration_days + 1)):
        raise RangeError(
            f"Day numbers must run 1..{request.duration_days} without gaps, "
            f"got {[d.day for d in plan.days]}"
        )

    # Budget echo
    if abs(plan.budget - request.budget) > tolerance:
        raise RangeError(
            f"Plan budget {plan.budget:.2f} does not match requested "
            f"budget {request.budget:.2f}"
        )

    plan = plan.model_copy(update={"days": days, "budget": request.budget})

    # Remaining budget is derived, never trusted
    spent = plan.total_activity_cost
    remaining = plan.budget - spent
    if abs(plan.remaining_budget - remaining) > tolerance:
        logger.warning(
            f"Model remainingBudget {plan.remaining_budget:.2f} disagrees with "
            f"recomputed {remaining:.2f}; using recomputed value"
        )
    if remaining < 0:
        logger.warning(
            f"Plan for {plan.destination} exceeds budget by {-remaining:.2f}"
        )

    breakdown_total = plan.budget_breakdown.total
    if abs(breakdown_total - spent) > tolerance:
        raise RangeError(
            f"Budget breakdown totals {breakdown_total:.2f} but activities "
            f"cost {spent:.2f} (tolerance {tolerance:.2f})",
            details={"breakdown_total": breakdown_total, "spent": spent},
        )

    return plan.model_copy(update={"remaining_budget": remaining})
