"""Pydantic schemas for the Chat domain."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from concierge.domains.itinerary.schemas import PlanRequest


class MessageRole(str, Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageKind(str, Enum):
    """What an assistant message carries besides its text."""

    CHAT = "chat"  # free-text reply
    PLAN_FORM = "plan_form"  # ask the UI to collect trip details
    PLAN = "plan"  # synthesized TravelPlan in data


class ProviderMeta(BaseModel):
    """Which model produced an assistant message."""

    model_config = ConfigDict(frozen=True)

    provider: str
    model: str
    note: str | None = None


class Message(BaseModel):
    """
    A single conversation turn.

    Immutable once created; the store persists it and nothing in the core
    edits it afterwards.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    trip_id: str | None = None
    user_id: str | None = None
    provider_meta: ProviderMeta | None = None
    kind: MessageKind = MessageKind.CHAT
    data: dict[str, Any] | None = None

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def user(cls, content: str, trip_id: str | None = None, user_id: str | None = None) -> "Message":
        return cls(
            role=MessageRole.USER,
            content=content,
            trip_id=trip_id,
            user_id=user_id,
        )


# ============ API Schemas ============


class ChatMessageRequest(BaseModel):
    """Chat message request."""

    message: str = Field(..., description="User message", min_length=1, max_length=4000)
    user_id: str | None = Field(None, description="Opaque user identifier")


class PlanSubmitRequest(BaseModel):
    """Trip form submission; omit ``plan`` to use details found in the chat."""

    user_id: str | None = Field(None, description="Opaque user identifier")
    plan: PlanRequest | None = Field(None, description="Explicit trip details")


class ConversationHistoryResponse(BaseModel):
    """Conversation history response."""

    trip_id: str
    messages: list[dict[str, Any]]
    total_messages: int
