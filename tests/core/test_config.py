"""
Tests for application settings.
"""

from concierge.core.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.AI_PROVIDER_TIMEOUT_SECONDS == 30.0
        assert settings.PLAN_TEMPERATURE == 0.2
        assert settings.CONVERSATION_HISTORY_LIMIT == 10
        assert settings.RECOMMENDATIONS_ENABLED is True
        assert settings.RECOMMENDATION_LIMIT == 3

    def test_provider_order_from_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("AI_PROVIDER_ORDER", "OpenAI , gemini")

        settings = Settings(_env_file=None)

        assert settings.AI_PROVIDER_ORDER == ["openai", "gemini"]

    def test_provider_order_from_json_env(self, monkeypatch):
        monkeypatch.setenv("AI_PROVIDER_ORDER", '["gemini"]')

        assert Settings(_env_file=None).AI_PROVIDER_ORDER == ["gemini"]

    def test_budget_tolerance(self):
        settings = Settings(_env_file=None)

        assert settings.budget_tolerance(1500) == 15
        assert settings.budget_tolerance(100) == 5.0

    def test_redis_url(self):
        settings = Settings(_env_file=None, REDIS_HOST="cache", REDIS_PORT=6380, REDIS_DB=2)

        assert str(settings.REDIS_URL) == "redis://cache:6380/2"
