"""Seed rows of the disease_excluded_foods catalog."""

from family_diet.adapters.records import parse_excluded_food_rule
from family_diet.domain.recipes import ExcludedFoodRule

EXCLUDED_FOOD_ROWS: list[dict[str, object]] = [
    {
        "id": "ckd-banana",
        "disease": "kidney_disease",
        "excluded_food_name": "바나나",
        "excluded_type": "ingredient",
        "reason": "칼륨 함량이 높음",
        "severity": "severe",
    },
    {
        "id": "ckd-spinach",
        "disease": "kidney_disease",
        "excluded_food_name": "시금치",
        "excluded_type": "ingredient",
        "reason": "칼륨 함량이 높음",
        "severity": "moderate",
    },
    {
        "id": "diabetes-sugar",
        "disease": "diabetes",
        "excluded_food_name": "설탕",
        "excluded_type": "ingredient",
        "reason": "혈당 급상승",
        "severity": "moderate",
    },
    {
        "id": "diabetes-syrup",
        "disease": "diabetes",
        "excluded_food_name": "물엿",
        "excluded_type": "ingredient",
        "severity": "moderate",
    },
    {
        "id": "hypertension-jeotgal",
        "disease": "hypertension",
        "excluded_food_name": "젓갈",
        "excluded_type": "ingredient",
        "reason": "나트륨 함량이 높음",
        "severity": "severe",
    },
    {
        "id": "hypertension-ramen",
        "disease": "hypertension",
        "excluded_food_name": "라면",
        "excluded_type": "recipe_keyword",
        "reason": "나트륨 함량이 높음",
        "severity": "moderate",
    },
    {
        "id": "gout-anchovy",
        "disease": "gout",
        "excluded_food_name": "멸치",
        "excluded_type": "ingredient",
        "reason": "퓨린 함량이 높음",
        "severity": "moderate",
    },
    {
        "id": "gout-beer",
        "disease": "gout",
        "excluded_food_name": "맥주",
        "excluded_type": "ingredient",
        "severity": "severe",
    },
]


def default_excluded_food_rules() -> list[ExcludedFoodRule]:
    """Return the seed rules as domain records."""
    return [parse_excluded_food_rule(row) for row in EXCLUDED_FOOD_ROWS]
