"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionTotals:
    """Nutrition totals for a meal or a set of meals.

    ``sodium`` is ``None`` when the magnitude is unknown, which is not the same
    as a known value of zero.
    """

    calories: float
    carbohydrates: float
    protein: float
    fat: float
    sodium: float | None = None


EMPTY_TOTALS = NutritionTotals(
    calories=0, carbohydrates=0.0, protein=0.0, fat=0.0, sodium=None
)

DEFAULT_PERSON_TOTALS = NutritionTotals(
    calories=2000, carbohydrates=250.0, protein=80.0, fat=70.0, sodium=None
)
