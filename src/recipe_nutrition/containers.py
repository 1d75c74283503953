"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_nutrition.adapters.anthropic_client import AnthropicNutritionClient
from recipe_nutrition.adapters.gemini_client import GeminiNutritionClient
from recipe_nutrition.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recipe_nutrition.config import Settings
from recipe_nutrition.services.analysis import (
    NutritionAnalysisService,
    NutritionModelClient,
)
from recipe_nutrition.services.recipes import RecipeNutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: NutritionAnalysisService
    recipe_service: RecipeNutritionService | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    claude_client = None
    if resolved_settings.anthropic_api_key:
        claude_client = AnthropicNutritionClient.create(
            resolved_settings.anthropic_api_key,
            model=resolved_settings.anthropic_model,
            base_url=resolved_settings.anthropic_base_url,
            temperature=resolved_settings.model_temperature,
            max_output_tokens=resolved_settings.model_max_output_tokens,
            timeout_seconds=resolved_settings.provider_timeout_seconds,
        )
    gemini_client = None
    if resolved_settings.gemini_api_key:
        gemini_client = GeminiNutritionClient.create(
            resolved_settings.gemini_api_key,
            model=resolved_settings.gemini_model,
            base_url=resolved_settings.gemini_base_url,
            temperature=resolved_settings.model_temperature,
            max_output_tokens=resolved_settings.model_max_output_tokens,
            timeout_seconds=resolved_settings.provider_timeout_seconds,
        )
    analysis_service = NutritionAnalysisService(
        claude=claude_client,
        gemini=gemini_client,
        thresholds=resolved_settings.confidence_thresholds(),
        timeout_seconds=resolved_settings.provider_timeout_seconds,
        retry_attempts=resolved_settings.provider_retry_attempts,
        retry_delay_seconds=resolved_settings.provider_retry_delay_seconds,
    )

    recipe_service = None
    if resolved_settings.supabase_url and resolved_settings.supabase_service_key:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        recipe_service = RecipeNutritionService(
            repository=SupabaseRecipeRepository(supabase_client),
            analysis_service=analysis_service,
        )

    model_clients: list[NutritionModelClient] = [
        client for client in (claude_client, gemini_client) if client is not None
    ]

    async def close_resources() -> None:
        for client in model_clients:
            await client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
