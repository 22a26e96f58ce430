"""Parsers turning loosely-typed store rows into domain records."""

from family_diet.domain.family import FamilyMemberTab
from family_diet.domain.fruits import Fruit, FruitNutrition
from family_diet.domain.legacy import (
    LegacyDocument,
    LegacyDocumentIngredient,
    LegacyMaster,
    LegacyVideo,
    ReplacementGuide,
    ReplacementIngredient,
)
from family_diet.domain.nutrition import NutritionTotals
from family_diet.domain.recipes import (
    ExcludedFoodRule,
    RecipeForDiet,
    RecipeIngredient,
)
from family_diet.services.normalizer import nutrition_value, to_finite_float

UNKNOWN_MASTER_NAME = "미상 명인"
UNKNOWN_MASTER_TITLE = "전문가"


def parse_excluded_food_rule(row: dict[str, object]) -> ExcludedFoodRule:
    """Parse a disease_excluded_foods row; a blank food name stays inert."""
    name = row.get("excluded_food_name")
    return ExcludedFoodRule(
        id=_optional_str(row.get("id")),
        disease=str(row.get("disease") or ""),
        excluded_food_name=name if isinstance(name, str) else None,
        excluded_type=str(row.get("excluded_type") or "ingredient"),
        severity=str(row.get("severity") or "moderate"),
        reason=_optional_str(row.get("reason")),
    )


def parse_nutrition_totals(payload: object) -> NutritionTotals | None:
    """Parse a nutrition mapping, keeping an absent sodium as unknown."""
    if not isinstance(payload, dict):
        return None
    return NutritionTotals(
        calories=nutrition_value(payload, "calories"),
        carbohydrates=nutrition_value(payload, "carbohydrates", "carbs"),
        protein=nutrition_value(payload, "protein"),
        fat=nutrition_value(payload, "fat"),
        sodium=_optional_float(payload.get("sodium")),
    )


def parse_recipe(row: dict[str, object]) -> RecipeForDiet:
    """Parse a recipe row with its ingredient list."""
    recipe_id = row.get("id")
    if recipe_id is None:
        raise ValueError("Recipe row is missing an id")
    ingredients = tuple(
        RecipeIngredient(
            name=str(item.get("name") or ""),
            amount=_optional_str(item.get("amount")),
            unit=_optional_str(item.get("unit")),
        )
        for item in _dict_items(row.get("ingredients"))
    )
    return RecipeForDiet(
        id=str(recipe_id),
        title=str(row.get("title") or ""),
        ingredients=ingredients,
        nutrition=parse_nutrition_totals(row.get("nutrition")),
        description=_optional_str(row.get("description")),
    )


def parse_member_tab(row: dict[str, object]) -> FamilyMemberTab:
    """Parse a member tab; a non-boolean inclusion flag counts as absent."""
    flag = row.get("includeInUnified", row.get("include_in_unified"))
    return FamilyMemberTab(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or ""),
        role=str(row.get("role") or "member"),
        include_in_unified=flag if isinstance(flag, bool) else None,
    )


def parse_fruit(row: dict[str, object]) -> Fruit:
    """Parse a fruit catalog row."""
    nutrition = row.get("nutrition") if isinstance(row.get("nutrition"), dict) else {}
    potassium = nutrition.get("potassium")
    return Fruit(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or ""),
        season_months=tuple(
            month
            for month in _list(row.get("season", row.get("season_months")))
            if isinstance(month, int) and not isinstance(month, bool)
        ),
        nutrition=FruitNutrition(
            serving_size=str(nutrition.get("servingSize") or ""),
            calories=to_finite_float(nutrition.get("calories")),
            protein=to_finite_float(nutrition.get("protein")),
            carbs=to_finite_float(nutrition.get("carbs")),
            fat=to_finite_float(nutrition.get("fat")),
            fiber=to_finite_float(nutrition.get("fiber")),
            vitamin_c=_optional_float(nutrition.get("vitaminC")),
            calcium=_optional_float(nutrition.get("calcium")),
            iron=_optional_float(nutrition.get("iron")),
            potassium=_optional_float(potassium),
        ),
        good_for_kids=bool(row.get("goodForKids", False)),
        availability=str(row.get("availability") or "medium"),
        avoid_for_diseases=tuple(
            str(code) for code in _list(row.get("avoidForDiseases"))
        ),
        benefits=tuple(str(item) for item in _list(row.get("benefits"))),
        kids_benefits=_optional_str(row.get("kidsBenefits")),
        emoji=str(row.get("emoji") or ""),
    )


def parse_legacy_video(row: dict[str, object]) -> LegacyVideo:
    """Parse a legacy_videos row joined with its master."""
    region = str(row.get("region") or "")
    master_row = row.get("master")
    if isinstance(master_row, dict):
        master = LegacyMaster(
            name=str(master_row.get("name") or UNKNOWN_MASTER_NAME),
            region=str(master_row.get("region") or region),
            title=str(master_row.get("title") or UNKNOWN_MASTER_TITLE),
        )
    else:
        master = LegacyMaster(
            name=UNKNOWN_MASTER_NAME, region=region, title=UNKNOWN_MASTER_TITLE
        )
    return LegacyVideo(
        id=str(row.get("id") or ""),
        slug=str(row.get("slug") or ""),
        title=str(row.get("title") or ""),
        description=str(row.get("description") or ""),
        region=region,
        era=str(row.get("era") or ""),
        ingredients=tuple(str(item) for item in _list(row.get("ingredients"))),
        master=master,
        tags=tuple(str(item) for item in _list(row.get("tags"))),
        duration_minutes=int(to_finite_float(row.get("duration_minutes"))),
        premium_only=bool(row.get("premium_only", False)),
    )


def parse_legacy_document(row: dict[str, object]) -> LegacyDocument:
    """Parse a legacy_documents row."""
    return LegacyDocument(
        id=str(row.get("id") or ""),
        title=str(row.get("title") or ""),
        summary=str(row.get("summary") or ""),
        region=str(row.get("region") or ""),
        era=str(row.get("era") or ""),
        ingredients=tuple(
            LegacyDocumentIngredient(
                name=str(item.get("name") or ""),
                amount=_optional_str(item.get("amount")),
            )
            for item in _dict_items(row.get("ingredients"))
        ),
        source=_optional_str(row.get("source")),
    )


def parse_replacement_guide(row: dict[str, object]) -> ReplacementGuide:
    """Parse a legacy_replacement_guides row."""
    return ReplacementGuide(
        traditional=_parse_replacement_side(row.get("traditional")),
        modern=_parse_replacement_side(row.get("modern")),
        tips=tuple(str(tip) for tip in _list(row.get("tips"))),
    )


def _parse_replacement_side(payload: object) -> ReplacementIngredient:
    if not isinstance(payload, dict):
        return ReplacementIngredient(name="")
    return ReplacementIngredient(
        name=str(payload.get("name") or ""),
        description=_optional_str(payload.get("description")),
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return to_finite_float(value)


def _list(value: object) -> list[object]:
    return list(value) if isinstance(value, list | tuple) else []


def _dict_items(value: object) -> list[dict[str, object]]:
    return [item for item in _list(value) if isinstance(item, dict)]
