"""Pydantic schemas shared by the AI providers and the router."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from concierge.domains.ai.providers import AIProvider


class TurnRole(str, Enum):
    """Roles understood by chat-completion style providers."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """A single provider-facing message."""

    model_config = ConfigDict(frozen=True)

    role: TurnRole
    content: str


class PromptSpec(BaseModel):
    """Everything the router needs to run one prompt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    messages: list[ChatTurn] = Field(..., min_length=1)
    json_mode: bool = Field(default=False, description="Require a JSON-only answer")
    providers: list[Any] | None = Field(
        default=None,
        description="Ordered AIProvider list; the router's own list when omitted",
    )
    temperature: float | None = None
    max_tokens: int | None = None

    def provider_list(self, default: list[AIProvider]) -> list[AIProvider]:
        return list(self.providers) if self.providers is not None else list(default)


class ProviderFailure(BaseModel):
    """Why one provider was skipped."""

    provider_name: str
    error_type: str
    reason: str


class ProviderResult(BaseModel):
    """Successful routed call."""

    provider_name: str
    model: str
    raw_content: str
    parsed: Any | None = Field(
        default=None,
        description="Decoded JSON when the call ran in JSON mode",
    )
    failures: list[ProviderFailure] = Field(
        default_factory=list,
        description="Providers that failed before this one answered",
    )

    @property
    def note(self) -> str | None:
        """Human readable fallback note, None when the first provider answered."""
        if not self.failures:
            return None
        skipped = ", ".join(
            f"{f.provider_name} ({f.error_type})" for f in self.failures
        )
        return f"Answered by {self.provider_name} after fallback from {skipped}"
