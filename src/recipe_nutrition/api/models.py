"""Request and response models for the nutrition API."""

from pydantic import BaseModel, Field

from recipe_nutrition.domain.nutrition import AnalysisResult
from recipe_nutrition.domain.recipes import AnalysisRequest, IngredientLine


class IngredientPayload(BaseModel):
    """Ingredient line as sent by the recipe editor."""

    amount: str = ""
    unit: str | None = ""
    item: str = ""
    notes: str | None = None

    def to_domain(self) -> IngredientLine:
        """Convert to the domain ingredient line."""
        return IngredientLine(
            amount=self.amount,
            unit=self.unit or "",
            item=self.item,
            notes=self.notes,
        )


class AnalyzeNutritionPayload(BaseModel):
    """Body of a nutrition analysis request."""

    title: str | None = None
    servings: int | None = None
    ingredients: list[IngredientPayload] | None = None

    def to_request(self) -> AnalysisRequest:
        """Convert to a domain analysis request."""
        return AnalysisRequest.create(
            title=self.title,
            servings=self.servings,
            ingredients=[item.to_domain() for item in self.ingredients or []],
        )


class AnalyzeNutritionResponse(BaseModel):
    """Successful analysis response."""

    success: bool = True
    nutrition: dict[str, int | float]
    meta: dict[str, str]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeNutritionResponse":
        """Build the response body from an analysis result."""
        return cls(nutrition=result.nutrition.as_dict(), meta=result.meta())


class RecipeNutritionResponse(AnalyzeNutritionResponse):
    """Analysis response for a stored recipe."""

    recipe_id: str
    saved: bool = Field(default=False)
