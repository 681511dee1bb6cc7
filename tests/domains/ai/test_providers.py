"""
Tests for the LangChain-backed providers and the provider registry.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from concierge.core.config import Settings
from concierge.domains.ai.errors import (
    ProviderEmptyResponse,
    ProviderError,
    ProviderHTTPError,
    ProviderTimeout,
)
from concierge.domains.ai.providers import (
    GeminiProvider,
    OpenAIProvider,
    build_providers,
    to_langchain_messages,
)
from concierge.domains.ai.schemas import ChatTurn, TurnRole
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

MESSAGES = [
    ChatTurn(role=TurnRole.SYSTEM, content="You are helpful."),
    ChatTurn(role=TurnRole.USER, content="Hi"),
]


def _mock_llm(ainvoke: AsyncMock) -> MagicMock:
    llm = MagicMock()
    llm.ainvoke = ainvoke
    llm.bind.return_value = llm
    return llm


class TestMessageConversion:
    def test_roles_map_to_langchain_messages(self):
        converted = to_langchain_messages(
            [*MESSAGES, ChatTurn(role=TurnRole.ASSISTANT, content="Hello!")]
        )

        assert isinstance(converted[0], SystemMessage)
        assert isinstance(converted[1], HumanMessage)
        assert isinstance(converted[2], AIMessage)
        assert converted[1].content == "Hi"


class TestOpenAIProvider:
    """OpenAIProvider wraps ChatOpenAI and maps its failures."""

    @pytest.mark.asyncio
    async def test_returns_content(self):
        llm = _mock_llm(AsyncMock(return_value=AIMessage(content="Bonjour")))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm) as chat_cls:
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            content = await provider.generate(MESSAGES, temperature=0.3, max_tokens=50)

        assert content == "Bonjour"
        kwargs = chat_cls.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 50
        assert kwargs["max_retries"] == 0
        llm.bind.assert_not_called()

    @pytest.mark.asyncio
    async def test_json_mode_requests_json_object(self):
        llm = _mock_llm(AsyncMock(return_value=AIMessage(content='{"a": 1}')))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm):
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            await provider.generate(MESSAGES, json_mode=True)

        llm.bind.assert_called_once_with(response_format={"type": "json_object"})

    @pytest.mark.asyncio
    async def test_slow_call_raises_timeout(self):
        async def slow(_messages):
            await asyncio.sleep(1)
            return AIMessage(content="late")

        llm = _mock_llm(AsyncMock(side_effect=slow))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm):
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            with pytest.raises(ProviderTimeout) as exc_info:
                await provider.generate(MESSAGES, timeout=0.01)

        assert exc_info.value.provider_name == "openai"

    @pytest.mark.asyncio
    async def test_empty_content_raises(self):
        llm = _mock_llm(AsyncMock(return_value=AIMessage(content="   ")))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm):
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            with pytest.raises(ProviderEmptyResponse):
                await provider.generate(MESSAGES)

    @pytest.mark.asyncio
    async def test_status_error_maps_to_http_error(self):
        class FakeStatusError(Exception):
            status_code = 429

        llm = _mock_llm(AsyncMock(side_effect=FakeStatusError("rate limited")))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm):
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            with pytest.raises(ProviderHTTPError) as exc_info:
                await provider.generate(MESSAGES)

        assert exc_info.value.status_code == 429
        assert exc_info.value.to_failure().error_type == "http_error"

    @pytest.mark.asyncio
    async def test_other_errors_map_to_provider_error(self):
        llm = _mock_llm(AsyncMock(side_effect=ValueError("bad payload")))
        with patch("concierge.domains.ai.providers.ChatOpenAI", return_value=llm):
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4o")
            with pytest.raises(ProviderError) as exc_info:
                await provider.generate(MESSAGES)

        assert type(exc_info.value) is ProviderError
        assert exc_info.value.message == "bad payload"


class TestGeminiProvider:
    @pytest.mark.asyncio
    async def test_json_mode_sets_mime_type(self):
        llm = _mock_llm(AsyncMock(return_value=AIMessage(content='{"a": 1}')))
        with patch(
            "concierge.domains.ai.providers.ChatGoogleGenerativeAI", return_value=llm
        ) as chat_cls:
            provider = GeminiProvider(api_key="g-test", model="gemini-2.0-flash")
            content = await provider.generate(MESSAGES, json_mode=True, max_tokens=2048)

        assert content == '{"a": 1}'
        kwargs = chat_cls.call_args.kwargs
        assert kwargs["response_mime_type"] == "application/json"
        assert kwargs["max_output_tokens"] == 2048
        assert kwargs["google_api_key"] == "g-test"

    @pytest.mark.asyncio
    async def test_list_content_is_flattened(self):
        response = AIMessage(content=[{"type": "text", "text": "Hello "}, "world"])
        llm = _mock_llm(AsyncMock(return_value=response))
        with patch("concierge.domains.ai.providers.ChatGoogleGenerativeAI", return_value=llm):
            provider = GeminiProvider(api_key="g-test", model="gemini-2.0-flash")
            content = await provider.generate(MESSAGES)

        assert content == "Hello world"


class TestBuildProviders:
    def test_order_follows_settings(self):
        settings = Settings(
            _env_file=None,
            AI_PROVIDER_ORDER="openai, gemini",
            OPENAI_API_KEY="sk-test",
            GEMINI_API_KEY="g-test",
        )

        providers = build_providers(settings)

        assert [p.name for p in providers] == ["openai", "gemini"]

    def test_providers_without_key_or_unknown_are_skipped(self):
        settings = Settings(
            _env_file=None,
            AI_PROVIDER_ORDER='["gemini", "claude", "openai"]',
            OPENAI_API_KEY="sk-test",
            GEMINI_API_KEY="",
        )

        providers = build_providers(settings)

        assert [p.name for p in providers] == ["openai"]
        assert providers[0].model == settings.OPENAI_MODEL
