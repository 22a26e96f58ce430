"""Pydantic models for API request and response payloads."""

from pydantic import BaseModel, ConfigDict, Field

from family_diet.adapters.records import (
    parse_excluded_food_rule,
    parse_member_tab,
    parse_nutrition_totals,
    parse_recipe,
)
from family_diet.domain.family import FamilyMemberTab
from family_diet.domain.legacy import LegacyFilterState
from family_diet.domain.nutrition import NutritionTotals
from family_diet.domain.recipes import ExcludedFoodRule, RecipeForDiet


class NutritionTotalsPayload(BaseModel):
    """Nutrition totals payload; a missing sodium means unknown."""

    calories: float = 0.0
    carbohydrates: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    sodium: float | None = None

    def to_domain(self) -> NutritionTotals:
        """Convert to the domain record."""
        return parse_nutrition_totals(self.model_dump())


class RecipeIngredientPayload(BaseModel):
    """Recipe ingredient payload."""

    name: str
    amount: str | None = None
    unit: str | None = None


class RecipePayload(BaseModel):
    """Recipe payload."""

    id: str
    title: str
    description: str | None = None
    ingredients: list[RecipeIngredientPayload] = Field(default_factory=list)
    nutrition: NutritionTotalsPayload | None = None

    def to_domain(self) -> RecipeForDiet:
        """Convert to the domain record."""
        return parse_recipe(self.model_dump())


class ExcludedFoodRulePayload(BaseModel):
    """Excluded-food rule payload; the food name may be missing."""

    disease: str = ""
    excluded_food_name: str | None = None
    excluded_type: str = "ingredient"
    severity: str = "moderate"
    reason: str | None = None

    def to_domain(self) -> ExcludedFoodRule:
        """Convert to the domain record."""
        return parse_excluded_food_rule(self.model_dump())


class RecipeFilterRequest(BaseModel):
    """Request to filter recipes for a set of diseases."""

    recipes: list[RecipePayload]
    diseases: list[str] = Field(default_factory=list)
    rules: list[ExcludedFoodRulePayload] = Field(default_factory=list)


class MemberTabPayload(BaseModel):
    """Family member tab payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    role: str = "member"
    include_in_unified: bool | None = Field(default=None, alias="includeInUnified")

    def to_domain(self) -> FamilyMemberTab:
        """Convert to the domain record."""
        return parse_member_tab(self.model_dump())


class UnifiedViewRequest(BaseModel):
    """Request for the unified family diet view."""

    model_config = ConfigDict(populate_by_name=True)

    member_tabs: list[MemberTabPayload] = Field(
        default_factory=list, alias="memberTabs"
    )
    included_member_ids: list[str] | None = Field(
        default=None, alias="includedMemberIds"
    )
    nutrient_totals: NutritionTotalsPayload | None = Field(
        default=None, alias="nutrientTotals"
    )


class LegacyFilterRequest(BaseModel):
    """Legacy archive filter state."""

    model_config = ConfigDict(populate_by_name=True)

    region: list[str] = Field(default_factory=list)
    era: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    search_term: str = Field(default="", alias="searchTerm")

    def to_domain(self) -> LegacyFilterState:
        """Convert to the domain record."""
        return LegacyFilterState(
            region=tuple(self.region),
            era=tuple(self.era),
            ingredients=tuple(self.ingredients),
            search_term=self.search_term,
        )
