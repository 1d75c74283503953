"""Recipe and ingredient domain models."""

from dataclasses import dataclass

DEFAULT_TITLE = "Untitled Recipe"


@dataclass(frozen=True)
class IngredientLine:
    """Free-text ingredient line as entered in the recipe editor."""

    amount: str
    unit: str
    item: str
    notes: str | None = None

    @property
    def is_blank(self) -> bool:
        """Return True when the line has no item text."""
        return not self.item.strip()

    def render(self) -> str:
        """Render the line verbatim for a prompt."""
        line = f"{self.amount} {self.unit} {self.item}"
        if self.notes:
            line += f" ({self.notes})"
        return line


@dataclass(frozen=True)
class AnalysisRequest:
    """Input for a single nutrition analysis."""

    title: str
    servings: int
    ingredients: list[IngredientLine]

    @classmethod
    def create(
        cls,
        title: str | None,
        servings: int | None,
        ingredients: list[IngredientLine],
    ) -> "AnalysisRequest":
        """Build a request, applying the title and servings defaults."""
        return cls(
            title=title or DEFAULT_TITLE,
            servings=servings if servings and servings >= 1 else 1,
            ingredients=ingredients,
        )

    @property
    def usable_ingredients(self) -> list[IngredientLine]:
        """Return ingredient lines that have item text."""
        return [line for line in self.ingredients if not line.is_blank]


@dataclass(frozen=True)
class RecipeRecord:
    """Recipe fields needed for nutrition analysis."""

    id: str
    title: str
    servings: int
    ingredients: list[IngredientLine]
