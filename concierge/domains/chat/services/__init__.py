"""Chat services: conversational replies and turn orchestration."""

from concierge.domains.chat.services.conversation_manager import (
    ConversationManager,
    is_plan_request,
    plan_flow_in_progress,
    render_plan_summary,
)
from concierge.domains.chat.services.responder import (
    ConversationalResponder,
    build_system_prompt,
    format_weather_context,
)

__all__ = [
    "ConversationManager",
    "ConversationalResponder",
    "build_system_prompt",
    "format_weather_context",
    "is_plan_request",
    "plan_flow_in_progress",
    "render_plan_summary",
]
