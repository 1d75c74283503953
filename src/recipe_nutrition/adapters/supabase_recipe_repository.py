"""Supabase-backed recipe repository."""

from dataclasses import dataclass

from supabase import Client

from recipe_nutrition.domain.nutrition import NutrientSet
from recipe_nutrition.domain.recipes import IngredientLine, RecipeRecord
from recipe_nutrition.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe reads and nutrition write-back."""

    client: Client

    def get_recipe(self, recipe_id: str) -> RecipeRecord | None:
        """Return the recipe with the given id, if present."""
        response = (
            self.client.table("recipes")
            .select("id, title, servings, ingredients")
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return RecipeRecord(
            id=str(row["id"]),
            title=row.get("title") or "",
            servings=row.get("servings") or 1,
            ingredients=[_to_ingredient(item) for item in row.get("ingredients") or []],
        )

    def update_nutrition(self, recipe_id: str, nutrition: NutrientSet) -> None:
        """Write the macro columns the recipes table carries."""
        self.client.table("recipes").update(
            {
                "calories": nutrition.calories,
                "protein": nutrition.protein,
                "carbs": nutrition.carbs,
                "fat": nutrition.fat,
            }
        ).eq("id", recipe_id).execute()


def _to_ingredient(row: dict[str, object]) -> IngredientLine:
    return IngredientLine(
        amount=str(row.get("amount") or ""),
        unit=str(row.get("unit") or ""),
        item=str(row.get("item") or ""),
        notes=row.get("notes") or None,
    )
