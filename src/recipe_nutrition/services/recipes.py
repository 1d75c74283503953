"""Recipe store integration for nutrition analysis."""

import logging
from dataclasses import dataclass
from typing import Protocol

from recipe_nutrition.domain.nutrition import AnalysisResult, NutrientSet
from recipe_nutrition.domain.recipes import AnalysisRequest, RecipeRecord
from recipe_nutrition.errors import RecipeNotFoundError
from recipe_nutrition.services.analysis import NutritionAnalysisService

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def get_recipe(self, recipe_id: str) -> RecipeRecord | None:
        """Return the recipe with the given id, if present."""

    def update_nutrition(self, recipe_id: str, nutrition: NutrientSet) -> None:
        """Store per-serving nutrition on the recipe."""


@dataclass
class RecipeNutritionService:
    """Analyzes stored recipes and writes the results back."""

    repository: RecipeRepository
    analysis_service: NutritionAnalysisService

    async def analyze_recipe(self, recipe_id: str, *, save: bool = True) -> AnalysisResult:
        """Analyze a stored recipe, optionally persisting the nutrition."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(f"Recipe {recipe_id} not found")

        result = await self.analysis_service.analyze(
            AnalysisRequest.create(recipe.title, recipe.servings, recipe.ingredients)
        )
        if save:
            self.repository.update_nutrition(recipe_id, result.nutrition.rounded())
            _logger.info(
                "Saved nutrition for recipe %s (confidence=%s)",
                recipe_id,
                result.confidence,
            )
        return result
