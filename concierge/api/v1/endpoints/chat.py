"""
Travel Concierge - Chat API Endpoints
Per-trip conversation with the travel concierge.
"""

import logging
from typing import Any

from fastapi import APIRouter

from concierge.core.deps import ConversationManagerDep, ConversationStoreDep
from concierge.core.exceptions import (
    ConversationUnavailableError,
    IncompleteTravelDetailsError,
    PlanGenerationFailedError,
)
from concierge.domains.ai.errors import AllProvidersExhaustedError
from concierge.domains.chat.schemas import (
    ChatMessageRequest,
    ConversationHistoryResponse,
    PlanSubmitRequest,
)
from concierge.domains.itinerary.errors import ExtractionAmbiguity, GenerationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{trip_id}/messages",
    summary="Send a message to the travel concierge",
    description="""
    Send a user message for a trip and get the assistant reply.

    Messages that ask for a plan ("plan", "trip", "travel" or a
    `[Context: ...]` marker) get a `plan_form` reply carrying the trip
    details found so far and the ones still missing. Everything else is
    answered conversationally in markdown.
    """,
)
async def send_message(
    trip_id: str,
    request: ChatMessageRequest,
    manager: ConversationManagerDep,
) -> dict[str, Any]:
    try:
        reply = await manager.handle_turn(trip_id, request.user_id, None, request.message)
    except AllProvidersExhaustedError as e:
        logger.error(f"Chat for trip {trip_id} failed: {e}")
        raise ConversationUnavailableError(
            "The travel assistant is temporarily unavailable",
            failures=e.failure_dicts(),
        ) from e
    return reply.to_wire()


@router.get(
    "/{trip_id}/messages",
    response_model=ConversationHistoryResponse,
    summary="Get conversation history",
)
async def get_messages(
    trip_id: str,
    store: ConversationStoreDep,
) -> ConversationHistoryResponse:
    """Messages for the trip, oldest first."""
    messages = await store.fetch(trip_id)
    return ConversationHistoryResponse(
        trip_id=trip_id,
        messages=[message.to_wire() for message in messages],
        total_messages=len(messages),
    )


@router.post(
    "/{trip_id}/plan",
    summary="Generate the trip plan",
    description="""
    Submit the trip form. With an explicit `plan` body the plan is generated
    from it; without one the details are taken from the conversation.
    """,
)
async def submit_plan(
    trip_id: str,
    request: PlanSubmitRequest,
    manager: ConversationManagerDep,
) -> dict[str, Any]:
    try:
        reply = await manager.submit_plan(trip_id, request.user_id, request.plan)
    except ExtractionAmbiguity as e:
        raise IncompleteTravelDetailsError(e.missing_fields) from e
    except GenerationError as e:
        logger.error(f"Plan for trip {trip_id} failed: {e.message}")
        raise PlanGenerationFailedError(e.message, failures=e.failure_dicts()) from e
    return reply.to_wire()
