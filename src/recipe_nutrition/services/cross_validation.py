"""Reconciliation of two independent nutrition estimates."""

from dataclasses import dataclass

from recipe_nutrition.domain.nutrition import (
    NUTRIENT_FIELDS,
    AnalysisMethod,
    Confidence,
    NutrientSet,
    Reconciliation,
)
from recipe_nutrition.errors import AllProvidersFailedError


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Relative-deviation cutoffs for the confidence tiers."""

    high_below: float = 0.15
    medium_below: float = 0.30


DEFAULT_THRESHOLDS = ConfidenceThresholds()


def max_relative_deviation(first: NutrientSet, second: NutrientSet) -> float:
    """Return the largest per-field disagreement relative to the field average."""
    worst = 0.0
    for name in NUTRIENT_FIELDS:
        a = getattr(first, name)
        b = getattr(second, name)
        average = (a + b) / 2
        if average == 0:
            continue
        worst = max(worst, abs(a - b) / abs(average))
    return worst


def classify_confidence(
    deviation: float, thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS
) -> Confidence:
    """Map a maximum relative deviation onto a confidence tier."""
    if deviation < thresholds.high_below:
        return Confidence.HIGH
    if deviation < thresholds.medium_below:
        return Confidence.MEDIUM
    return Confidence.LOW


def average_nutrients(first: NutrientSet, second: NutrientSet) -> NutrientSet:
    """Return the element-wise mean, rounded to each field's precision."""
    averaged = NutrientSet(
        **{
            name: (getattr(first, name) + getattr(second, name)) / 2
            for name in NUTRIENT_FIELDS
        }
    )
    return averaged.rounded()


def reconcile(
    claude: NutrientSet | None,
    gemini: NutrientSet | None,
    thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS,
    errors: dict[str, str] | None = None,
) -> Reconciliation:
    """Combine the provider results into one estimate with a confidence tier.

    A single surviving result is returned unchanged with medium confidence.
    When both are present the worst-agreeing field decides the tier.
    """
    if claude is None and gemini is None:
        raise AllProvidersFailedError(errors or {})
    if claude is None:
        return Reconciliation(
            nutrition=gemini,
            method=AnalysisMethod.GEMINI_ONLY,
            confidence=Confidence.MEDIUM,
        )
    if gemini is None:
        return Reconciliation(
            nutrition=claude,
            method=AnalysisMethod.CLAUDE_ONLY,
            confidence=Confidence.MEDIUM,
        )

    deviation = max_relative_deviation(claude, gemini)
    return Reconciliation(
        nutrition=average_nutrients(claude, gemini),
        method=AnalysisMethod.DUAL_MODEL_AVERAGE,
        confidence=classify_confidence(deviation, thresholds),
        max_deviation=deviation,
    )
