"""Shared test fixtures."""

import pytest

from family_diet.adapters.memory_repositories import (
    InMemoryExcludedFoodRepository,
    InMemoryFruitCatalog,
    InMemoryLegacyContentRepository,
)
from family_diet.config import Settings
from family_diet.containers import AppContainer
from family_diet.data.seasonal_fruits import SEASONAL_FRUITS
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
from family_diet.services.exclusions import ExclusionService
from family_diet.services.fruits import FruitSnackService
from family_diet.services.legacy import LegacyArchiveService


@pytest.fixture
def settings() -> Settings:
    return Settings(
        admin_token="admin-token",
        renal_disease_codes="ckd,kidney_disease",
        renal_potassium_limit_mg=200.0,
        max_fruit_servings=3,
    )


@pytest.fixture
def recipes() -> list[RecipeForDiet]:
    return [
        RecipeForDiet(
            id="r1",
            title="시금치 나물",
            ingredients=(
                RecipeIngredient(name="시금치", amount="200", unit="g"),
                RecipeIngredient(name="참기름", amount="1", unit="큰술"),
            ),
            nutrition=NutritionTotals(
                calories=80, carbohydrates=6.0, protein=4.5, fat=5.0, sodium=320
            ),
        ),
        RecipeForDiet(
            id="r2",
            title="바나나 스무디",
            ingredients=(
                RecipeIngredient(name="Banana", amount="1", unit="개"),
                RecipeIngredient(name="우유", amount="200", unit="ml"),
            ),
        ),
        RecipeForDiet(
            id="r3",
            title="현미밥",
            ingredients=(RecipeIngredient(name="현미", amount="1", unit="공기"),),
        ),
        RecipeForDiet(
            id="r4",
            title="해물 라면",
            description="얼큰한 라면",
            ingredients=(RecipeIngredient(name="오징어"),),
        ),
    ]


@pytest.fixture
def excluded_food_rules() -> list[ExcludedFoodRule]:
    return [
        ExcludedFoodRule(
            disease="kidney_disease",
            excluded_food_name="시금치",
            severity="moderate",
            reason="칼륨 함량이 높음",
        ),
        ExcludedFoodRule(
            disease="hypertension",
            excluded_food_name="라면",
            excluded_type="recipe_keyword",
            severity="moderate",
        ),
        ExcludedFoodRule(disease="diabetes", excluded_food_name=None),
    ]


@pytest.fixture
def legacy_videos() -> list[LegacyVideo]:
    return [
        LegacyVideo(
            id="v1",
            slug="andong",
            title="안동 헛제삿밥",
            description="향토 비빔밥",
            region="경북 안동",
            era="조선 후기",
            ingredients=("간장", "고사리", "도라지"),
            master=LegacyMaster(name="김종가", region="경북 안동", title="명인"),
        ),
        LegacyVideo(
            id="v2",
            slug="jeonju",
            title="전주 비빔밥",
            description="제철 나물 비빔밥",
            region="전북 전주",
            era="근대",
            ingredients=("간장", "고추장", "콩나물"),
            master=LegacyMaster(name="박명인", region="전북 전주", title="명인"),
        ),
        LegacyVideo(
            id="v3",
            slug="sinseollo",
            title="궁중 신선로",
            description="Royal hot pot",
            region="서울",
            era="조선 중기",
            ingredients=("소고기", "간장", "잣"),
            master=LegacyMaster(name="이수라", region="서울", title="궁중 명인"),
        ),
    ]


@pytest.fixture
def legacy_documents() -> list[LegacyDocument]:
    return [
        LegacyDocument(
            id="d1",
            title="궁중 음식 기록",
            summary="연회 요리",
            region="서울",
            era="조선 중기",
            ingredients=(LegacyDocumentIngredient(name="잣가루"),),
        ),
        LegacyDocument(
            id="d2",
            title="헛제삿밥 기록",
            summary="안동 향토 음식",
            region="경북 안동",
            era="조선 후기",
            ingredients=(LegacyDocumentIngredient(name="말린 고사리"),),
        ),
    ]


@pytest.fixture
def replacement_guides() -> list[ReplacementGuide]:
    return [
        ReplacementGuide(
            traditional=ReplacementIngredient(name="조청"),
            modern=ReplacementIngredient(name="올리고당"),
            tips=("1.2배 분량을 사용하세요.",),
        ),
        ReplacementGuide(
            traditional=ReplacementIngredient(name="집간장"),
            modern=ReplacementIngredient(name="Soy Sauce"),
        ),
    ]


@pytest.fixture
def container(
    settings: Settings,
    excluded_food_rules: list[ExcludedFoodRule],
    legacy_videos: list[LegacyVideo],
    legacy_documents: list[LegacyDocument],
    replacement_guides: list[ReplacementGuide],
) -> AppContainer:
    return AppContainer(
        settings=settings,
        exclusion_service=ExclusionService(
            InMemoryExcludedFoodRepository(list(excluded_food_rules))
        ),
        fruit_snack_service=FruitSnackService(
            InMemoryFruitCatalog(list(SEASONAL_FRUITS)),
            renal_disease_codes=frozenset({"ckd", "kidney_disease"}),
        ),
        legacy_archive_service=LegacyArchiveService(
            InMemoryLegacyContentRepository(
                videos=list(legacy_videos),
                documents=list(legacy_documents),
                guides=list(replacement_guides),
            )
        ),
    )
