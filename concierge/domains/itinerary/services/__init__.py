"""Itinerary services: intent extraction, plan synthesis and validation."""

from concierge.domains.itinerary.services.intent_extractor import (
    extract_destinations,
    extract_intent,
)
from concierge.domains.itinerary.services.plan_synthesizer import (
    PlanSynthesis,
    PlanSynthesizer,
    build_plan_messages,
)
from concierge.domains.itinerary.services.plan_validator import (
    parse_plan_content,
    validate_plan_payload,
)

__all__ = [
    "PlanSynthesis",
    "PlanSynthesizer",
    "build_plan_messages",
    "extract_destinations",
    "extract_intent",
    "parse_plan_content",
    "validate_plan_payload",
]
