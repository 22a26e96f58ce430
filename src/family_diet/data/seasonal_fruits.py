"""Seasonal fruit catalog (per 100 g or one piece serving)."""

from family_diet.adapters.records import parse_fruit
from family_diet.domain.fruits import Fruit

SEASONAL_FRUIT_ROWS: list[dict[str, object]] = [
    {
        "id": "strawberry",
        "name": "딸기",
        "season": [3, 4, 5],
        "nutrition": {
            "servingSize": "100g (중간 크기 7개)",
            "calories": 32,
            "protein": 0.7,
            "carbs": 7.7,
            "fat": 0.3,
            "fiber": 2.0,
            "vitaminC": 58.8,
            "calcium": 16,
            "iron": 0.4,
        },
        "goodForKids": True,
        "availability": "high",
        "benefits": ["비타민C 풍부", "항산화 효과", "면역력 강화"],
        "kidsBenefits": "비타민C가 풍부하여 면역력 강화와 피부 건강에 좋습니다.",
        "emoji": "🍓",
    },
    {
        "id": "cherry",
        "name": "체리",
        "season": [5, 6],
        "nutrition": {
            "servingSize": "100g (약 10개)",
            "calories": 50,
            "protein": 1.0,
            "carbs": 12.2,
            "fat": 0.3,
            "fiber": 1.6,
            "vitaminC": 7.0,
            "potassium": 222,
        },
        "goodForKids": True,
        "availability": "medium",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["항산화 효과", "수면 유도", "염증 완화"],
        "emoji": "🍒",
    },
    {
        "id": "watermelon",
        "name": "수박",
        "season": [6, 7, 8],
        "nutrition": {
            "servingSize": "100g (한 컵)",
            "calories": 30,
            "protein": 0.6,
            "carbs": 7.6,
            "fat": 0.2,
            "fiber": 0.4,
            "vitaminC": 8.1,
            "calcium": 7,
        },
        "goodForKids": True,
        "availability": "high",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["수분 보충", "전해질 균형", "더위 해소"],
        "emoji": "🍉",
    },
    {
        "id": "peach",
        "name": "복숭아",
        "season": [7, 8],
        "nutrition": {
            "servingSize": "100g (중간 크기 1개)",
            "calories": 39,
            "protein": 0.9,
            "carbs": 9.5,
            "fat": 0.3,
            "fiber": 1.5,
            "vitaminC": 6.6,
            "potassium": 190,
        },
        "goodForKids": True,
        "availability": "high",
        "benefits": ["소화 촉진", "피부 건강", "면역력 강화"],
        "emoji": "🍑",
    },
    {
        "id": "melon",
        "name": "멜론",
        "season": [6, 7, 8],
        "nutrition": {
            "servingSize": "100g",
            "calories": 34,
            "protein": 0.8,
            "carbs": 8.2,
            "fat": 0.2,
            "fiber": 0.9,
            "vitaminC": 36.7,
            "potassium": 267,
        },
        "goodForKids": True,
        "availability": "high",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["수분 공급", "비타민C 풍부", "피로 회복"],
        "emoji": "🍈",
    },
    {
        "id": "grape",
        "name": "포도",
        "season": [8, 9, 10],
        "nutrition": {
            "servingSize": "100g (약 15알)",
            "calories": 69,
            "protein": 0.7,
            "carbs": 18.1,
            "fat": 0.2,
            "fiber": 0.9,
            "vitaminC": 3.2,
            "potassium": 191,
        },
        "goodForKids": True,
        "availability": "high",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["항산화 효과", "심혈관 건강", "피로 회복"],
        "emoji": "🍇",
    },
    {
        "id": "pear",
        "name": "배",
        "season": [9, 10, 11],
        "nutrition": {
            "servingSize": "100g (중간 크기 1/2개)",
            "calories": 57,
            "protein": 0.4,
            "carbs": 15.2,
            "fat": 0.1,
            "fiber": 3.1,
            "vitaminC": 4.3,
            "potassium": 116,
        },
        "goodForKids": True,
        "availability": "high",
        "benefits": ["소화 촉진", "기관지 건강", "수분 공급"],
        "emoji": "🍐",
    },
    {
        "id": "apple",
        "name": "사과",
        "season": [9, 10, 11, 12],
        "nutrition": {
            "servingSize": "100g (중간 크기 1/2개)",
            "calories": 52,
            "protein": 0.3,
            "carbs": 13.8,
            "fat": 0.2,
            "fiber": 2.4,
            "vitaminC": 4.6,
            "potassium": 107,
        },
        "goodForKids": True,
        "availability": "high",
        "benefits": ["소화 촉진", "콜레스테롤 조절", "혈당 안정"],
        "emoji": "🍎",
    },
    {
        "id": "persimmon",
        "name": "감",
        "season": [10, 11],
        "nutrition": {
            "servingSize": "100g (중간 크기 1개)",
            "calories": 70,
            "protein": 0.6,
            "carbs": 18.6,
            "fat": 0.2,
            "fiber": 3.6,
            "vitaminC": 7.5,
            "potassium": 161,
        },
        "goodForKids": True,
        "availability": "high",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["비타민A 풍부", "피로 회복", "면역력 강화"],
        "emoji": "🍊",
    },
    {
        "id": "kiwi",
        "name": "키위",
        "season": [1, 2, 11, 12],
        "nutrition": {
            "servingSize": "100g (중간 크기 1.5개)",
            "calories": 61,
            "protein": 1.1,
            "carbs": 14.7,
            "fat": 0.5,
            "fiber": 3.0,
            "vitaminC": 92.7,
            "potassium": 312,
        },
        "goodForKids": True,
        "availability": "high",
        "benefits": ["비타민C 매우 풍부", "소화 촉진", "면역력 강화"],
        "emoji": "🥝",
    },
    {
        "id": "banana",
        "name": "바나나",
        "season": [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
        "nutrition": {
            "servingSize": "1개 (중간 크기 120g)",
            "calories": 105,
            "protein": 1.3,
            "carbs": 27.0,
            "fat": 0.4,
            "fiber": 3.1,
            "vitaminC": 10.3,
            "potassium": 422,
        },
        "goodForKids": True,
        "availability": "high",
        "avoidForDiseases": ["diabetes"],
        "benefits": ["에너지 공급", "소화 개선", "혈압 조절"],
        "emoji": "🍌",
    },
]

SEASONAL_FRUITS: tuple[Fruit, ...] = tuple(
    parse_fruit(row) for row in SEASONAL_FRUIT_ROWS
)
