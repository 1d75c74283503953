"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_nutrition.adapters.anthropic_client import DEFAULT_ANTHROPIC_MODEL
from recipe_nutrition.adapters.gemini_client import DEFAULT_GEMINI_MODEL
from recipe_nutrition.services.cross_validation import ConfidenceThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    anthropic_api_key: str | None = None
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    anthropic_base_url: str | None = None
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str | None = None
    model_temperature: float = 0.1
    model_max_output_tokens: int = 500
    provider_timeout_seconds: float = 55.0
    provider_retry_attempts: int = 0
    provider_retry_delay_seconds: float = 1.0
    confidence_high_below: float = 0.15
    confidence_medium_below: float = 0.30
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    admin_token: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        protected_namespaces=(),
    )

    def confidence_thresholds(self) -> ConfidenceThresholds:
        """Return the configured confidence tier cutoffs."""
        return ConfidenceThresholds(
            high_below=self.confidence_high_below,
            medium_below=self.confidence_medium_below,
        )
