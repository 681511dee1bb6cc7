"""
Travel Concierge - AI Domain
Provider capability, vendor implementations and the fallback router.
"""

from concierge.domains.ai.errors import (
    AllProvidersExhaustedError,
    ProviderEmptyResponse,
    ProviderError,
    ProviderHTTPError,
    ProviderInvalidJSON,
    ProviderTimeout,
)
from concierge.domains.ai.providers import (
    AIProvider,
    GeminiProvider,
    OpenAIProvider,
    build_providers,
)
from concierge.domains.ai.router import ProviderRouter
from concierge.domains.ai.schemas import (
    ChatTurn,
    PromptSpec,
    ProviderFailure,
    ProviderResult,
    TurnRole,
)

__all__ = [
    "AIProvider",
    "AllProvidersExhaustedError",
    "ChatTurn",
    "GeminiProvider",
    "OpenAIProvider",
    "PromptSpec",
    "ProviderEmptyResponse",
    "ProviderError",
    "ProviderFailure",
    "ProviderHTTPError",
    "ProviderInvalidJSON",
    "ProviderResult",
    "ProviderRouter",
    "ProviderTimeout",
    "TurnRole",
    "build_providers",
]
