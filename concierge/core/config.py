"""Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env file.
"""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, RedisDsn, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ============ Application Settings ============
    APP_NAME: str = "Travel Concierge"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # ============ Server Settings ============
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 1

    # ============ CORS Settings ============
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ============ AI Provider Settings ============
    AI_PROVIDER_ORDER: Annotated[list[str], NoDecode] = Field(
        default=["gemini", "openai"],
        description="Providers tried in order: primary first, then backups",
    )
    AI_PROVIDER_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single provider call",
    )
    OPENAI_API_KEY: str = Field(
        default="",
        description="OpenAI API Key",
    )
    OPENAI_MODEL: str = Field(
        default="gpt-4o",
        description="OpenAI model to use",
    )
    GEMINI_API_KEY: str = Field(
        default="",
        description="Google Gemini API Key",
    )
    GEMINI_MODEL: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model to use",
    )

    # Structured itinerary generation wants low temperature
    PLAN_TEMPERATURE: float = 0.2
    PLAN_MAX_TOKENS: int = 2048

    # Conversational replies
    CHAT_TEMPERATURE: float = 0.7
    CHAT_MAX_TOKENS: int = 4096
    CONVERSATION_HISTORY_LIMIT: int = Field(
        default=10,
        ge=0,
        description="Number of previous messages sent with a conversational prompt",
    )

    # ============ Budget Validation Settings ============
    BUDGET_TOLERANCE_RATIO: float = Field(
        default=0.01,
        ge=0,
        description="Allowed budget drift as a share of the total budget",
    )
    BUDGET_TOLERANCE_MIN: float = Field(
        default=5.0,
        ge=0,
        description="Minimum allowed budget drift in currency units",
    )

    # ============ Weather API Settings ============
    WEATHER_API_KEY: str = Field(
        default="",
        description="WeatherAPI.com API Key",
    )
    WEATHER_API_BASE_URL: str = Field(
        default="https://api.weatherapi.com/v1",
        description="Weather API Base URL",
    )
    WEATHER_FORECAST_DAYS: int = Field(default=3, ge=1, le=14)

    # ============ Recommendation Settings ============
    RECOMMENDATIONS_ENABLED: bool = True
    RECOMMENDATION_LIMIT: int = Field(default=3, ge=1, le=10)

    # ============ Conversation Store Settings ============
    CONVERSATION_STORE: Literal["memory", "redis"] = "memory"
    CONVERSATION_TTL_HOURS: int = 24

    # ============ Redis Settings ============
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: str | None = None
    REDIS_DB: int = 0
    REDIS_MAX_CONNECTIONS: int = 10

    @computed_field  # type: ignore[misc]
    @property
    def REDIS_URL(self) -> RedisDsn:
        """Construct Redis connection URL."""
        if self.REDIS_PASSWORD:
            return RedisDsn.build(
                scheme="redis",
                password=self.REDIS_PASSWORD,
                host=self.REDIS_HOST,
                port=self.REDIS_PORT,
                path=str(self.REDIS_DB),
            )
        return RedisDsn.build(
            scheme="redis",
            host=self.REDIS_HOST,
            port=self.REDIS_PORT,
            path=str(self.REDIS_DB),
        )

    # ============ Logging Settings ============
    LOG_LEVEL: str = "INFO"

    @field_validator("AI_PROVIDER_ORDER", mode="before")
    @classmethod
    def split_provider_order(cls, v):
        """Accept ``gemini,openai`` or a JSON list from the environment."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                v = json.loads(v)
            else:
                v = v.split(",")
        return [str(part).strip().lower() for part in v if str(part).strip()]

    def budget_tolerance(self, budget: float) -> float:
        """Allowed drift for budget arithmetic on a plan of ``budget``."""
        return max(budget * self.BUDGET_TOLERANCE_RATIO, self.BUDGET_TOLERANCE_MIN)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
