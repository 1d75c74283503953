"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

from recipe_nutrition.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from tests.conftest import CLAUDE_NUTRITION


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "select":
            return FakeResponse(data=self.rows)
        return FakeResponse(data=[])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_get_recipe_maps_ingredients() -> None:
    client = FakeSupabaseClient()
    client.table("recipes").rows = [
        {
            "id": "abc",
            "title": "Protein Pancakes",
            "servings": 2,
            "ingredients": [
                {"amount": "1", "unit": "cup", "item": "TPP Buttermilk Mix"},
                {"amount": "2", "item": "eggs", "notes": "large"},
            ],
        }
    ]
    repository = SupabaseRecipeRepository(client)

    recipe = repository.get_recipe("abc")

    assert recipe is not None
    assert recipe.title == "Protein Pancakes"
    assert recipe.servings == 2
    assert recipe.ingredients[1].unit == ""
    assert recipe.ingredients[1].render() == "2  eggs (large)"
    assert ("id", "abc") in client.tables["recipes"].last_filters


def test_get_recipe_missing_returns_none() -> None:
    repository = SupabaseRecipeRepository(FakeSupabaseClient())

    assert repository.get_recipe("missing") is None


def test_get_recipe_defaults_servings() -> None:
    client = FakeSupabaseClient()
    client.table("recipes").rows = [
        {"id": "abc", "title": None, "servings": None, "ingredients": None}
    ]
    repository = SupabaseRecipeRepository(client)

    recipe = repository.get_recipe("abc")

    assert recipe is not None
    assert recipe.servings == 1
    assert recipe.ingredients == []


def test_update_nutrition_writes_macro_columns() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseRecipeRepository(client)

    repository.update_nutrition("abc", CLAUDE_NUTRITION.rounded())

    table = client.tables["recipes"]
    assert table.last_payload == {
        "calories": 312,
        "protein": 24.6,
        "carbs": 30.4,
        "fat": 9.8,
    }
    assert ("id", "abc") in table.last_filters
