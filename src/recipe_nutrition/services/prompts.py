"""Prompt construction for recipe nutrition analysis."""

from recipe_nutrition.domain.recipes import DEFAULT_TITLE, IngredientLine
from recipe_nutrition.domain.reference import format_reference_context

_OUTPUT_FORMAT = """You MUST respond with ONLY a JSON object in this exact format, no other text:
{
  "calories": <number in kcal, whole number>,
  "protein": <number in grams, 1 decimal>,
  "fat": <number in grams, 1 decimal>,
  "saturated_fat": <number in grams, 1 decimal>,
  "carbs": <number in grams, 1 decimal>,
  "sugars": <number in grams, 1 decimal>,
  "fiber": <number in grams, 1 decimal>,
  "sodium": <number in milligrams, whole number>
}"""


def render_ingredient_lines(ingredients: list[IngredientLine]) -> str:
    """Render non-blank ingredient lines, one per line."""
    return "\n".join(line.render() for line in ingredients if not line.is_blank)


def build_prompt(title: str | None, servings: int | None, ingredient_lines: str) -> str:
    """Compose the per-serving nutrition analysis prompt."""
    servings = servings if servings and servings >= 1 else 1
    return (
        "You are a professional nutritionist and food scientist. Analyze the "
        "following recipe and provide accurate nutritional information PER "
        "SERVING.\n\n"
        f"{format_reference_context()}\n\n"
        "---\n\n"
        f"Recipe: {title or DEFAULT_TITLE}\n"
        f"Servings: {servings}\n\n"
        "Ingredients:\n"
        f"{ingredient_lines}\n\n"
        "Calculate the nutritional values for ONE SERVING of this recipe.\n\n"
        "CRITICAL RULES:\n"
        "1. If a TPP product is used (any of The Protein Pancake mixes or "
        "syrup), use the EXACT nutritional data provided above, scaled by the "
        "amount used.\n"
        "2. For other branded ingredients (protein powders, etc.), use "
        "standard database values for similar products.\n"
        "3. For whole foods (eggs, milk, banana, etc.), use USDA/FSANZ "
        "standard reference values.\n"
        "4. Calculate the total for ALL ingredients combined, THEN divide by "
        f"{servings} servings.\n"
        "5. Account for cooking method (e.g., oil/butter for frying adds fat).\n"
        "6. Be conservative and precise. Do NOT overestimate calories.\n\n"
        f"{_OUTPUT_FORMAT}"
    )
