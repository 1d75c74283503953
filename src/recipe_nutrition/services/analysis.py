"""Dual-model nutrition analysis service."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from recipe_nutrition.domain.nutrition import AdapterStatus, AnalysisResult, NutrientSet
from recipe_nutrition.domain.recipes import AnalysisRequest
from recipe_nutrition.errors import (
    AllProvidersFailedError,
    ConfigurationError,
    IngredientValidationError,
    ProviderError,
)
from recipe_nutrition.services.cross_validation import (
    DEFAULT_THRESHOLDS,
    ConfidenceThresholds,
    reconcile,
)
from recipe_nutrition.services.prompts import build_prompt, render_ingredient_lines

_logger = logging.getLogger(__name__)


class NutritionModelClient(Protocol):
    """Interface for a text-generation provider that estimates nutrition."""

    name: str

    async def analyze(self, prompt: str) -> NutrientSet:
        """Send the prompt and parse a nutrient set from the reply."""

    async def close(self) -> None:
        """Release any underlying HTTP resources."""


@dataclass(frozen=True)
class _Outcome:
    nutrition: NutrientSet | None
    error: str | None

    @property
    def status(self) -> AdapterStatus:
        return AdapterStatus.OK if self.nutrition is not None else AdapterStatus.FAILED


@dataclass
class NutritionAnalysisService:
    """Runs both providers concurrently and reconciles their estimates."""

    claude: NutritionModelClient | None
    gemini: NutritionModelClient | None
    thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS
    timeout_seconds: float = 55.0
    retry_attempts: int = 0
    retry_delay_seconds: float = 1.0

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Estimate per-serving nutrition for a recipe."""
        if self.claude is None and self.gemini is None:
            raise ConfigurationError(
                "No AI API keys configured. Add ANTHROPIC_API_KEY and/or "
                "GEMINI_API_KEY to your environment variables."
            )
        if not request.usable_ingredients:
            raise IngredientValidationError("No ingredients provided")

        prompt = build_prompt(
            request.title,
            request.servings,
            render_ingredient_lines(request.ingredients),
        )
        claude_outcome, gemini_outcome = await asyncio.gather(
            self._run(self.claude, "Anthropic", prompt),
            self._run(self.gemini, "Gemini", prompt),
        )

        errors = {
            name: outcome.error
            for name, outcome in (("claude", claude_outcome), ("gemini", gemini_outcome))
            if outcome.error
        }
        try:
            reconciliation = reconcile(
                claude_outcome.nutrition,
                gemini_outcome.nutrition,
                self.thresholds,
                errors=errors,
            )
        except AllProvidersFailedError:
            _logger.error("Nutrition analysis failed for %r: %s", request.title, errors)
            raise

        _logger.info(
            "Nutrition analysis for %r: method=%s confidence=%s",
            request.title,
            reconciliation.method,
            reconciliation.confidence,
        )
        return AnalysisResult(
            nutrition=reconciliation.nutrition,
            method=reconciliation.method,
            confidence=reconciliation.confidence,
            claude=claude_outcome.status,
            gemini=gemini_outcome.status,
            claude_error=claude_outcome.error,
            gemini_error=gemini_outcome.error,
        )

    async def _run(
        self, client: NutritionModelClient | None, label: str, prompt: str
    ) -> _Outcome:
        """Call one provider, converting its failure into an error outcome."""
        if client is None:
            return _Outcome(nutrition=None, error=f"{label} API key not configured")
        try:
            nutrition = await self._call_with_retry(client, prompt)
        except ProviderError as exc:
            _logger.warning("%s failed: %s", client.name, exc.message)
            return _Outcome(nutrition=None, error=exc.message)
        except TimeoutError:
            message = f"{label} request timed out after {self.timeout_seconds:g}s"
            _logger.warning("%s failed: %s", client.name, message)
            return _Outcome(nutrition=None, error=message)
        except Exception as exc:
            message = f"Unexpected {label} error: {exc!r}"
            _logger.exception("%s failed unexpectedly", client.name)
            return _Outcome(nutrition=None, error=message)
        return _Outcome(nutrition=nutrition, error=None)

    async def _call_with_retry(
        self, client: NutritionModelClient, prompt: str
    ) -> NutrientSet:
        """Call a provider, retrying transient failures a bounded number of times."""
        attempt = 0
        while True:
            try:
                return await asyncio.wait_for(
                    client.analyze(prompt), timeout=self.timeout_seconds
                )
            except ProviderError as exc:
                attempt += 1
                if not exc.retryable or attempt > self.retry_attempts:
                    raise
                _logger.warning(
                    "%s failed (attempt %s/%s, status=%s): %s",
                    client.name,
                    attempt,
                    self.retry_attempts + 1,
                    exc.status_code or "n/a",
                    exc.message,
                )
                await asyncio.sleep(self.retry_delay_seconds)
