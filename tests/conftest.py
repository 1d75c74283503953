"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.domain.nutrition import NutrientSet
from recipe_nutrition.domain.recipes import IngredientLine, RecipeRecord
from recipe_nutrition.errors import ProviderError
from recipe_nutrition.services.analysis import (
    NutritionAnalysisService,
    NutritionModelClient,
)
from recipe_nutrition.services.recipes import RecipeNutritionService, RecipeRepository

CLAUDE_NUTRITION = NutrientSet(
    calories=312,
    protein=24.6,
    fat=9.8,
    saturated_fat=3.1,
    carbs=30.4,
    sugars=2.2,
    fiber=0.8,
    sodium=620,
)

GEMINI_NUTRITION = NutrientSet(
    calories=298,
    protein=23.9,
    fat=10.4,
    saturated_fat=3.3,
    carbs=29.1,
    sugars=2.0,
    fiber=0.8,
    sodium=598,
)


@dataclass
class FakeModelClient(NutritionModelClient):
    """Fake model client returning queued results or raising errors."""

    name: str
    results: list[NutrientSet | Exception] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    closed: bool = False

    async def analyze(self, prompt: str) -> NutrientSet:
        self.prompts.append(prompt)
        outcome = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


def failing_client(name: str, message: str = "boom", **kwargs) -> FakeModelClient:  # type: ignore[no-untyped-def]
    """Return a fake client that always raises a provider error."""
    return FakeModelClient(name=name, results=[ProviderError(name, message, **kwargs)])


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[str, RecipeRecord] = field(default_factory=dict)
    saved: dict[str, NutrientSet] = field(default_factory=dict)

    def get_recipe(self, recipe_id: str) -> RecipeRecord | None:
        return self.recipes.get(recipe_id)

    def update_nutrition(self, recipe_id: str, nutrition: NutrientSet) -> None:
        self.saved[recipe_id] = nutrition


@pytest.fixture
def settings() -> Settings:
    return Settings(
        anthropic_api_key="anthropic-key",
        gemini_api_key="gemini-key",
        supabase_url=None,
        supabase_service_key=None,
        admin_token="admin-token",
    )


@pytest.fixture
def claude_client() -> FakeModelClient:
    return FakeModelClient(name="claude", results=[CLAUDE_NUTRITION])


@pytest.fixture
def gemini_client() -> FakeModelClient:
    return FakeModelClient(name="gemini", results=[GEMINI_NUTRITION])


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    repository = InMemoryRecipeRepository()
    repository.recipes["recipe-1"] = RecipeRecord(
        id="recipe-1",
        title="Protein Pancakes",
        servings=2,
        ingredients=[
            IngredientLine(amount="1", unit="cup", item="TPP Buttermilk Mix"),
            IngredientLine(amount="2", unit="", item="eggs"),
        ],
    )
    return repository


@pytest.fixture
def container(
    settings: Settings,
    claude_client: FakeModelClient,
    gemini_client: FakeModelClient,
    recipe_repository: InMemoryRecipeRepository,
) -> AppContainer:
    analysis_service = NutritionAnalysisService(
        claude=claude_client,
        gemini=gemini_client,
        thresholds=settings.confidence_thresholds(),
    )
    recipe_service = RecipeNutritionService(
        repository=recipe_repository,
        analysis_service=analysis_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        recipe_service=recipe_service,
        close_resources=close_resources,
    )
