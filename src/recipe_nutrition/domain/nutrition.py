"""Nutrition domain models."""

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

NUTRIENT_FIELDS: tuple[str, ...] = (
    "calories",
    "protein",
    "fat",
    "saturated_fat",
    "carbs",
    "sugars",
    "fiber",
    "sodium",
)

# Energy (kcal) and sodium (mg) are whole numbers; everything else is grams.
WHOLE_NUMBER_FIELDS: frozenset[str] = frozenset({"calories", "sodium"})


class AnalysisMethod(StrEnum):
    """How the final nutrient set was produced."""

    CLAUDE_ONLY = "claude_only"
    GEMINI_ONLY = "gemini_only"
    DUAL_MODEL_AVERAGE = "dual_model_average"


class Confidence(StrEnum):
    """Trust tier attached to an analysis."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AdapterStatus(StrEnum):
    """Outcome of a single provider call."""

    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class NutrientSet:
    """Per-serving nutrition profile with the eight tracked nutrients."""

    calories: float
    protein: float
    fat: float
    saturated_fat: float
    carbs: float
    sugars: float
    fiber: float
    sodium: float

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "NutrientSet":
        """Build a nutrient set, rejecting missing, non-numeric or non-finite fields."""
        values: dict[str, float] = {}
        for name in NUTRIENT_FIELDS:
            value = payload.get(name)
            if (
                isinstance(value, bool)
                or not isinstance(value, int | float)
                or not math.isfinite(value)
            ):
                raise ValueError(f"Missing or invalid field: {name}")
            values[name] = value
        return cls(**values)

    def as_dict(self) -> dict[str, float]:
        """Return the wire representation."""
        return asdict(self)

    def rounded(self) -> "NutrientSet":
        """Round whole-number fields to integers and the rest to one decimal."""
        return NutrientSet(
            **{
                field.name: round_nutrient(field.name, getattr(self, field.name))
                for field in fields(self)
            }
        )


def round_nutrient(name: str, value: float) -> float:
    """Round a nutrient value half-up using its field's precision."""
    if name in WHOLE_NUMBER_FIELDS:
        return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Reconciliation:
    """Outcome of combining the provider estimates."""

    nutrition: NutrientSet
    method: AnalysisMethod
    confidence: Confidence
    max_deviation: float | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Reconciled nutrition plus per-provider diagnostics."""

    nutrition: NutrientSet
    method: AnalysisMethod
    confidence: Confidence
    claude: AdapterStatus
    gemini: AdapterStatus
    claude_error: str | None = None
    gemini_error: str | None = None

    def meta(self) -> dict[str, str]:
        """Return the response metadata block."""
        meta: dict[str, str] = {
            "method": self.method.value,
            "confidence": self.confidence.value,
            "claude": self.claude.value,
            "gemini": self.gemini.value,
        }
        if self.claude_error:
            meta["claude_error"] = self.claude_error
        if self.gemini_error:
            meta["gemini_error"] = self.gemini_error
        return meta
