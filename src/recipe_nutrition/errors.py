"""Errors raised by the nutrition analysis pipeline."""


class NutritionAnalysisError(Exception):
    """Base class for nutrition analysis failures."""


class ConfigurationError(NutritionAnalysisError):
    """Raised when no model provider credentials are configured."""


class IngredientValidationError(NutritionAnalysisError):
    """Raised when a request carries no usable ingredient lines."""


class RecipeNotFoundError(NutritionAnalysisError):
    """Raised when a recipe id does not exist in the recipe store."""


class ProviderError(NutritionAnalysisError):
    """A single model provider failed to produce a valid nutrient set."""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int | None = None,
        *,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message
        self.status_code = status_code
        self.transient = transient

    @property
    def retryable(self) -> bool:
        """Return True for transport failures, rate limits and server errors."""
        if self.transient:
            return True
        if self.status_code is None:
            return False
        return self.status_code == 429 or self.status_code >= 500  # noqa: PLR2004


class AllProvidersFailedError(NutritionAnalysisError):
    """Raised when every configured provider failed."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        details = "; ".join(f"{name}: {message}" for name, message in errors.items())
        super().__init__(f"Both models failed to produce results ({details})")
