"""Shared fixtures: scripted AI providers and a valid plan payload."""

import asyncio
import copy
import json

import pytest

from concierge.core.config import Settings
from concierge.domains.ai.errors import ProviderTimeout
from concierge.domains.ai.providers import AIProvider


class ScriptedProvider(AIProvider):
    """Provider that replays canned answers and records every call."""

    def __init__(self, name: str, answers: list, model: str = "test-model"):
        super().__init__(model)
        self.name = name
        self.answers = list(answers)
        self.calls: list[dict] = []

    async def generate(
        self,
        messages,
        json_mode=False,
        timeout=30.0,
        *,
        temperature=None,
        max_tokens=None,
    ) -> str:
        self.calls.append(
            {
                "messages": messages,
                "json_mode": json_mode,
                "timeout": timeout,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        answer = self.answers.pop(0) if len(self.answers) > 1 else self.answers[0]
        if isinstance(answer, BaseException):
            raise answer
        return answer


class TimingOutProvider(AIProvider):
    """Provider that never answers in time."""

    def __init__(self, name: str = "slow"):
        super().__init__("slow-model")
        self.name = name
        self.calls = 0

    async def generate(self, messages, json_mode=False, timeout=30.0, **kwargs) -> str:
        self.calls += 1
        raise ProviderTimeout(f"No response within {timeout:g}s", provider_name=self.name)


class HangingProvider(AIProvider):
    """Provider whose call blocks until cancelled."""

    def __init__(self, name: str = "hanging"):
        super().__init__("hanging-model")
        self.name = name
        self.started = asyncio.Event()
        self.cancelled = False

    async def generate(self, messages, json_mode=False, timeout=30.0, **kwargs) -> str:
        self.started.set()
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return ""


PARIS_PLAN = {
    "destination": "Paris",
    "durationDays": 3,
    "budget": 1500,
    "remainingBudget": 604,
    "weather": {"temp": "18°C", "condition": "Partly cloudy"},
    "days": [
        {
            "day": 1,
            "title": "Arrival and the Louvre",
            "activities": [
                {"type": "accommodation", "description": "Hotel in Le Marais", "cost": 200},
                {"type": "activity", "description": "Louvre Museum", "cost": 22},
                {"type": "food", "description": "Dinner at Le Comptoir", "cost": 58},
            ],
        },
        {
            "day": 2,
            "title": "Orsay and Saint-Germain",
            "activities": [
                {"type": "accommodation", "description": "Hotel in Le Marais", "cost": 200},
                {"type": "activity", "description": "Musée d'Orsay", "cost": 16},
                {"type": "food", "description": "Food tour in Saint-Germain", "cost": 110},
                {"type": "transportation", "description": "Metro passes", "cost": 24},
            ],
        },
        {
            "day": 3,
            "title": "Montmartre",
            "activities": [
                {"type": "accommodation", "description": "Hotel in Le Marais", "cost": 200},
                {"type": "food", "description": "Bistro lunch", "cost": 40},
                {"type": "transportation", "description": "Airport train", "cost": 14},
                {"type": "activity", "description": "Orangerie Museum", "cost": 12},
            ],
        },
    ],
    "budgetBreakdown": {
        "accommodation": 600,
        "food": 208,
        "activities": 50,
        "transportation": 38,
        "miscellaneous": 0,
    },
    "recommendations": [
        {"name": "Musée Rodin", "rating": 4.6, "description": "Sculpture garden"},
        {"name": "Marché des Enfants Rouges", "rating": 4.4, "description": "Covered food market"},
    ],
}

PARIS_SPENT = 896


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        AI_PROVIDER_TIMEOUT_SECONDS=5.0,
        OPENAI_API_KEY="",
        GEMINI_API_KEY="",
        WEATHER_API_KEY="",
    )


@pytest.fixture
def paris_plan() -> dict:
    """Fresh copy of a valid 3-day Paris plan (budget 1500, spent 896)."""
    return copy.deepcopy(PARIS_PLAN)


@pytest.fixture
def paris_plan_json(paris_plan) -> str:
    return json.dumps(paris_plan)
