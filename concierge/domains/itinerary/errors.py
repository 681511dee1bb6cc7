"""Errors raised while turning chat text and model output into plans."""

from typing import TYPE_CHECKING, Any

from concierge.domains.ai.schemas import ProviderFailure

if TYPE_CHECKING:
    from concierge.domains.itinerary.schemas import TravelIntent


class GenerationError(Exception):
    """A travel plan could not be generated."""

    def __init__(
        self,
        message: str,
        failures: list[ProviderFailure] | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.failures = failures or []
        self.details = details or {}
        super().__init__(self.message)

    def failure_dicts(self) -> list[dict[str, str]]:
        return [failure.model_dump() for failure in self.failures]


class SchemaError(GenerationError):
    """Model output is not JSON, or a required field is missing or mistyped."""


class RangeError(GenerationError):
    """Model output has the right shape but violates a numeric invariant."""


class ExtractionAmbiguity(Exception):
    """Chat text did not resolve every field a plan needs."""

    def __init__(self, missing_fields: list[str], intent: "TravelIntent | None" = None):
        self.missing_fields = missing_fields
        self.intent = intent
        super().__init__(f"Missing travel details: {', '.join(missing_fields)}")
