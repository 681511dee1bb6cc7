"""
Travel Concierge - AI Providers
Chat-model vendors behind a single ``generate`` capability.

The router only ever sees ``AIProvider``; adding a vendor means adding a
subclass and registering it in ``PROVIDER_FACTORIES``.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import Runnable
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from concierge.core.config import Settings
from concierge.domains.ai.errors import (
    ProviderEmptyResponse,
    ProviderError,
    ProviderHTTPError,
    ProviderTimeout,
)
from concierge.domains.ai.schemas import ChatTurn, TurnRole

logger = logging.getLogger(__name__)


# ============ Provider Capability ============


class AIProvider(ABC):
    """A chat-completion vendor the router can call."""

    name: str = "provider"

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    async def generate(
        self,
        messages: list[ChatTurn],
        json_mode: bool = False,
        timeout: float = 30.0,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """
        Return the model's text for ``messages``.

        Raises a ProviderError subclass on timeout, HTTP failure or empty
        content. Implementations make exactly one attempt.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model!r})"


# ============ LangChain-backed Providers ============


_ROLE_TO_MESSAGE: dict[TurnRole, type[BaseMessage]] = {
    TurnRole.SYSTEM: SystemMessage,
    TurnRole.USER: HumanMessage,
    TurnRole.ASSISTANT: AIMessage,
}


def to_langchain_messages(messages: list[ChatTurn]) -> list[BaseMessage]:
    """Convert provider-neutral turns to LangChain message objects."""
    return [_ROLE_TO_MESSAGE[turn.role](content=turn.content) for turn in messages]


def _content_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return ""


class LangChainProvider(AIProvider):
    """Provider backed by a LangChain chat model built per call."""

    default_temperature = 0.7

    def __init__(self, api_key: str, model: str):
        super().__init__(model)
        self.api_key = api_key

    @abstractmethod
    def build_llm(
        self,
        json_mode: bool,
        temperature: float,
        max_tokens: int | None,
    ) -> BaseChatModel | Runnable:
        """Create the chat model for one call."""

    async def generate(
        self,
        messages: list[ChatTurn],
        json_mode: bool = False,
        timeout: float = 30.0,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        llm = self.build_llm(
            json_mode=json_mode,
            temperature=self.default_temperature if temperature is None else temperature,
            max_tokens=max_tokens,
        )

        try:
            response = await asyncio.wait_for(
                llm.ainvoke(to_langchain_messages(messages)),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise ProviderTimeout(
                f"No response within {timeout:g}s",
                provider_name=self.name,
            ) from e
        except ProviderError:
            raise
        except Exception as e:
            raise self.wrap_error(e) from e

        content = _content_text(getattr(response, "content", response))
        if not content.strip():
            raise ProviderEmptyResponse(
                "Empty response",
                provider_name=self.name,
            )
        return content

    def wrap_error(self, error: Exception) -> ProviderError:
        """Map an SDK exception onto the provider error taxonomy."""
        status_code = getattr(error, "status_code", None)
        if status_code is None:
            response = getattr(error, "response", None)
            status_code = getattr(response, "status_code", None)

        if isinstance(status_code, int):
            return ProviderHTTPError(
                f"HTTP error: {status_code}",
                provider_name=self.name,
                status_code=status_code,
            )

        message = str(error) or type(error).__name__
        if "timeout" in message.lower() or "timed out" in message.lower():
            return ProviderTimeout(message, provider_name=self.name)
        return ProviderError(message, provider_name=self.name)


class OpenAIProvider(LangChainProvider):
    """OpenAI chat completions via langchain-openai."""

    name = "openai"

    def build_llm(
        self,
        json_mode: bool,
        temperature: float,
        max_tokens: int | None,
    ) -> BaseChatModel | Runnable:
        llm = ChatOpenAI(
            model=self.model,
            api_key=self.api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            max_retries=0,
        )
        if json_mode:
            return llm.bind(response_format={"type": "json_object"})
        return llm


class GeminiProvider(LangChainProvider):
    """Google Gemini via langchain-google-genai."""

    name = "gemini"

    def build_llm(
        self,
        json_mode: bool,
        temperature: float,
        max_tokens: int | None,
    ) -> BaseChatModel | Runnable:
        kwargs: dict[str, Any] = {}
        if json_mode:
            kwargs["response_mime_type"] = "application/json"
        return ChatGoogleGenerativeAI(
            model=self.model,
            google_api_key=self.api_key,
            temperature=temperature,
            max_output_tokens=max_tokens,
            max_retries=0,
            **kwargs,
        )


# ============ Provider Registry ============


PROVIDER_FACTORIES: dict[str, Callable[[Settings], AIProvider | None]] = {
    "openai": lambda s: (
        OpenAIProvider(api_key=s.OPENAI_API_KEY, model=s.OPENAI_MODEL)
        if s.OPENAI_API_KEY
        else None
    ),
    "gemini": lambda s: (
        GeminiProvider(api_key=s.GEMINI_API_KEY, model=s.GEMINI_MODEL)
        if s.GEMINI_API_KEY
        else None
    ),
}


def build_providers(settings: Settings) -> list[AIProvider]:
    """Build the ordered provider list from AI_PROVIDER_ORDER."""
    providers: list[AIProvider] = []

    for name in settings.AI_PROVIDER_ORDER:
        factory = PROVIDER_FACTORIES.get(name)
        if factory is None:
            logger.warning(f"Unknown AI provider in AI_PROVIDER_ORDER: {name}")
            continue

        provider = factory(settings)
        if provider is None:
            logger.warning(f"Skipping AI provider {name}: no API key configured")
            continue

        providers.append(provider)

    logger.info(
        f"AI providers configured: {[p.name for p in providers] or 'none'}"
    )
    return providers
