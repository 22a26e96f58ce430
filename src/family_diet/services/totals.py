"""Scaling and aggregation of nutrition totals."""

import math
from collections.abc import Iterable

from family_diet.domain.nutrition import (
    DEFAULT_PERSON_TOTALS,
    EMPTY_TOTALS,
    NutritionTotals,
)
from family_diet.services.normalizer import round_half_away


def scale_nutrition_totals(
    totals: NutritionTotals | None, multiplier: float
) -> NutritionTotals:
    """Multiply totals by a serving multiplier and round for display.

    Calories and sodium are rounded to whole numbers, macros to one decimal.
    Unknown sodium stays unknown at any multiplier, including zero. A field
    that is not finite, or overflows once scaled, comes back as zero; a
    non-finite sodium counts as unknown.
    """
    if totals is None or not _is_valid_multiplier(multiplier):
        return EMPTY_TOTALS
    sodium = (
        None
        if totals.sodium is None or not math.isfinite(totals.sodium)
        else int(_scaled(totals.sodium, multiplier))
    )
    return NutritionTotals(
        calories=int(_scaled(totals.calories, multiplier)),
        carbohydrates=_scaled(totals.carbohydrates, multiplier, 1),
        protein=_scaled(totals.protein, multiplier, 1),
        fat=_scaled(totals.fat, multiplier, 1),
        sodium=sodium,
    )


def _scaled(value: float, multiplier: float, places: int = 0) -> float:
    product = value * multiplier
    if not math.isfinite(product):
        return 0.0
    return round_half_away(product, places)


def sum_nutrition_totals(items: Iterable[NutritionTotals]) -> NutritionTotals:
    """Sum totals field by field; sodium is unknown only if unknown everywhere."""
    total = EMPTY_TOTALS
    for item in items:
        if item.sodium is None:
            sodium = total.sodium
        else:
            sodium = (total.sodium or 0) + item.sodium
        total = NutritionTotals(
            calories=total.calories + item.calories,
            carbohydrates=total.carbohydrates + item.carbohydrates,
            protein=total.protein + item.protein,
            fat=total.fat + item.fat,
            sodium=sodium,
        )
    return total


def unified_nutrition_totals(
    totals: NutritionTotals | None, included_count: int
) -> NutritionTotals:
    """Scale unified-view totals by the number of included members."""
    base = totals if totals is not None else DEFAULT_PERSON_TOTALS
    return scale_nutrition_totals(base, included_count)


def _is_valid_multiplier(multiplier: object) -> bool:
    if isinstance(multiplier, bool) or not isinstance(multiplier, int | float):
        return False
    return math.isfinite(multiplier) and multiplier >= 0
