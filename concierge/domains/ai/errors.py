"""Errors raised by AI providers and the provider router."""

from typing import Any

from concierge.domains.ai.schemas import ProviderFailure


class ProviderError(Exception):
    """Base exception for a single failed provider call."""

    error_type = "provider_error"

    def __init__(
        self,
        message: str,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.provider_name = provider_name
        self.details = details or {}
        super().__init__(self.message)

    def to_failure(self) -> ProviderFailure:
        """Summarise this error for the router's failure list."""
        return ProviderFailure(
            provider_name=self.provider_name,
            error_type=self.error_type,
            reason=self.message,
        )


class ProviderTimeout(ProviderError):
    """The provider did not answer within the per-call timeout."""

    error_type = "timeout"


class ProviderHTTPError(ProviderError):
    """The provider answered with a non-2xx status."""

    error_type = "http_error"

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        details = {**(details or {}), "status_code": status_code}
        super().__init__(message, provider_name, details)


class ProviderEmptyResponse(ProviderError):
    """The provider answered with no content."""

    error_type = "empty_response"


class ProviderInvalidJSON(ProviderError):
    """JSON mode was requested but the content does not parse."""

    error_type = "invalid_json"


class AllProvidersExhaustedError(Exception):
    """Every configured provider failed for a single call."""

    def __init__(self, failures: list[ProviderFailure]):
        self.failures = failures
        if failures:
            summary = "; ".join(f"{f.provider_name}: {f.reason}" for f in failures)
        else:
            summary = "no providers configured"
        super().__init__(f"All AI providers failed ({summary})")

    def failure_dicts(self) -> list[dict[str, str]]:
        return [failure.model_dump() for failure in self.failures]
