"""Domain models for recipes and disease-based food exclusions."""

import unicodedata
from dataclasses import dataclass, field

from family_diet.domain.nutrition import NutritionTotals

KEYWORD_RULE_TYPES = frozenset({"recipe_keyword", "dish"})


@dataclass(frozen=True)
class RecipeIngredient:
    """Single ingredient line of a recipe."""

    name: str
    amount: str | None = None
    unit: str | None = None


@dataclass(frozen=True)
class RecipeForDiet:
    """Recipe as consumed by the diet filters."""

    id: str
    title: str
    ingredients: tuple[RecipeIngredient, ...] = ()
    nutrition: NutritionTotals | None = None
    description: str | None = None


@dataclass(frozen=True)
class ExcludedFoodRule:
    """Disease-to-food mapping that must not be recommended."""

    disease: str
    excluded_food_name: str | None
    excluded_type: str = "ingredient"
    severity: str = "moderate"
    reason: str | None = None
    id: str | None = None

    @property
    def search_term(self) -> str | None:
        """Return the trimmed lowercase food name, or None when inert."""
        if not isinstance(self.excluded_food_name, str):
            return None
        term = unicodedata.normalize("NFC", self.excluded_food_name).strip().lower()
        return term or None

    @property
    def matches_keywords(self) -> bool:
        """Whether the rule also applies to recipe titles and descriptions."""
        return self.excluded_type in KEYWORD_RULE_TYPES


@dataclass(frozen=True)
class ExclusionVerdict:
    """Outcome of checking one recipe against a rule set."""

    excluded: bool
    rule: ExcludedFoodRule | None = None
    reason: str | None = None
    severity: str | None = None


@dataclass(frozen=True)
class ExcludedFoodStats:
    """Rule counts grouped by disease, type and severity."""

    by_disease: dict[str, int] = field(default_factory=dict)
    by_type: dict[str, int] = field(default_factory=dict)
    by_severity: dict[str, int] = field(default_factory=dict)
