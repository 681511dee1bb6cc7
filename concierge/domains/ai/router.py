"""
Travel Concierge - Provider Router
Tries AI providers one at a time, in preference order, until one answers.
"""

from __future__ import annotations

import json
import logging

from concierge.core.config import settings as default_settings
from concierge.domains.ai.errors import (
    AllProvidersExhaustedError,
    ProviderEmptyResponse,
    ProviderError,
    ProviderInvalidJSON,
)
from concierge.domains.ai.parsing import loads_json
from concierge.domains.ai.providers import AIProvider
from concierge.domains.ai.schemas import PromptSpec, ProviderFailure, ProviderResult

logger = logging.getLogger(__name__)


class ProviderRouter:
    """
    Sequential fallback across AI providers.

    Each provider gets at most one attempt per call. Providers are never
    raced, so a call is billed once per attempted provider and the
    preference order is deterministic.
    """

    def __init__(
        self,
        providers: list[AIProvider],
        timeout: float | None = None,
    ):
        self.providers = list(providers)
        self.timeout = (
            timeout
            if timeout is not None
            else default_settings.AI_PROVIDER_TIMEOUT_SECONDS
        )

    async def call(self, spec: PromptSpec) -> ProviderResult:
        """
        Run the prompt against the providers in order.

        Returns the first successful result. Blank content is a failure. In
        JSON mode the content must also decode as JSON to count as a success.

        Raises:
            AllProvidersExhaustedError: every provider failed; carries one
                failure entry per provider tried.
        """
        failures: list[ProviderFailure] = []

        for provider in spec.provider_list(self.providers):
            logger.info(
                f"Calling provider {provider.name}:{provider.model} "
                f"(json_mode={spec.json_mode})"
            )
            try:
                content = await provider.generate(
                    spec.messages,
                    json_mode=spec.json_mode,
                    timeout=self.timeout,
                    temperature=spec.temperature,
                    max_tokens=spec.max_tokens,
                )
                if not content or not content.strip():
                    raise ProviderEmptyResponse(
                        "Empty response", provider_name=provider.name
                    )
                parsed = self._decode(provider, content) if spec.json_mode else None
            except ProviderError as e:
                logger.warning(
                    f"Provider {provider.name} failed ({e.error_type}): {e.message}"
                )
                failures.append(e.to_failure())
                continue
            except Exception as e:
                logger.warning(f"Provider {provider.name} raised unexpectedly: {e}")
                failures.append(
                    ProviderFailure(
                        provider_name=provider.name,
                        error_type="provider_error",
                        reason=str(e) or type(e).__name__,
                    )
                )
                continue

            if failures:
                logger.info(
                    f"Provider {provider.name} answered after "
                    f"{len(failures)} failed attempt(s)"
                )

            return ProviderResult(
                provider_name=provider.name,
                model=provider.model,
                raw_content=content,
                parsed=parsed,
                failures=failures,
            )

        logger.error(f"All AI providers failed: {[f.provider_name for f in failures]}")
        raise AllProvidersExhaustedError(failures)

    @staticmethod
    def _decode(provider: AIProvider, content: str):
        try:
            return loads_json(content)
        except json.JSONDecodeError as e:
            raise ProviderInvalidJSON(
                f"Response is not valid JSON: {e.msg}",
                provider_name=provider.name,
                details={"preview": content[:200]},
            ) from e
