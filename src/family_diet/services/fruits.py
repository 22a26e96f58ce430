"""Seasonal fruit snack recommendation."""

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from family_diet.data.seasonal_fruits import SEASONAL_FRUITS
from family_diet.domain.fruits import Fruit, FruitSnack, SeasonalPoolEmptyError
from family_diet.services.text import normalize_text

RENAL_DISEASE_CODES = frozenset({"ckd", "kidney_disease", "chronic_kidney_disease"})
RENAL_POTASSIUM_LIMIT_MG = 200.0
MIN_SERVINGS = 1
MAX_SERVINGS = 3
DECEMBER = 12

_AVAILABILITY_ORDER = {"high": 0, "medium": 1, "low": 2}

_logger = logging.getLogger(__name__)


class FruitCatalog(Protocol):
    """Read interface for the fruit catalog."""

    def list_fruits(self) -> list[Fruit]:
        """Return every fruit in catalog order."""


def seasonal_fruits(
    month: int, fruits: Sequence[Fruit] = SEASONAL_FRUITS
) -> list[Fruit]:
    """Return fruits in season, kid-friendly first, then by availability."""
    in_season = [
        (index, fruit)
        for index, fruit in enumerate(fruits)
        if month in fruit.season_months
    ]
    in_season.sort(
        key=lambda pair: (
            not pair[1].good_for_kids,
            _AVAILABILITY_ORDER.get(pair[1].availability, len(_AVAILABILITY_ORDER)),
            pair[0],
        )
    )
    return [fruit for _, fruit in in_season]


def recommend_fruit_snack(  # noqa: PLR0913
    target_calories: float,
    month_of_year: int,
    is_child: bool,
    disease_codes: Iterable[str] = (),
    *,
    fruits: Sequence[Fruit] = SEASONAL_FRUITS,
    renal_codes: Iterable[str] = RENAL_DISEASE_CODES,
    potassium_limit_mg: float = RENAL_POTASSIUM_LIMIT_MG,
    max_servings: int = MAX_SERVINGS,
) -> FruitSnack:
    """Pick a seasonal fruit and 1-3 servings close to the calorie target.

    Disease preferences narrow the pool only while something is left. The
    renal low-potassium preference runs first, so disease avoidance and the
    child preference only choose among qualifying fruits. An empty seasonal
    pool means the catalog is missing data for the month and raises
    SeasonalPoolEmptyError.
    """
    if (
        isinstance(month_of_year, bool)
        or not isinstance(month_of_year, int)
        or not 1 <= month_of_year <= DECEMBER
    ):
        raise ValueError(f"month_of_year must be between 1 and 12: {month_of_year!r}")

    pool = [
        fruit
        for fruit in seasonal_fruits(month_of_year, fruits)
        if math.isfinite(fruit.nutrition.calories) and fruit.nutrition.calories > 0
    ]
    if not pool:
        raise SeasonalPoolEmptyError(month_of_year)

    cleaned = (normalize_text(code) for code in disease_codes)
    diseases = list(dict.fromkeys(code for code in cleaned if code))
    if set(diseases).intersection(renal_codes):
        pool = _prefer(
            pool,
            lambda fruit: fruit.nutrition.potassium is not None
            and fruit.nutrition.potassium <= potassium_limit_mg,
            "low potassium",
        )
    if diseases:
        pool = _prefer(
            pool,
            lambda fruit: not set(fruit.avoid_for_diseases).intersection(diseases),
            "disease avoidance",
        )
    if is_child:
        pool = _prefer(pool, lambda fruit: fruit.good_for_kids, "kid-friendly")

    fruit, servings = _best_portion(pool, target_calories, max_servings)
    return FruitSnack(
        fruit=fruit,
        servings=servings,
        total_calories=fruit.nutrition.calories * servings,
        reason=_reason(month_of_year, fruit, is_child, diseases),
    )


def _prefer(
    pool: list[Fruit], predicate: Callable[[Fruit], bool], label: str
) -> list[Fruit]:
    preferred = [fruit for fruit in pool if predicate(fruit)]
    if preferred:
        return preferred
    _logger.warning("Fruit filter '%s' matched nothing; keeping full pool", label)
    return pool


def _best_portion(
    pool: list[Fruit], target_calories: float, max_servings: int
) -> tuple[Fruit, int]:
    target = (
        float(target_calories)
        if isinstance(target_calories, int | float)
        and not isinstance(target_calories, bool)
        and math.isfinite(target_calories)
        else 0.0
    )
    upper = min(MAX_SERVINGS, max(MIN_SERVINGS, max_servings))
    candidates = []
    for index, fruit in enumerate(pool):
        potassium = fruit.nutrition.potassium
        for servings in range(MIN_SERVINGS, upper + 1):
            total = fruit.nutrition.calories * servings
            key = (
                total > target,
                abs(target - total),
                potassium if potassium is not None else math.inf,
                index,
                servings,
            )
            candidates.append((key, fruit, servings))
    _, fruit, servings = min(candidates, key=lambda candidate: candidate[0])
    return fruit, servings


def _reason(month: int, fruit: Fruit, is_child: bool, diseases: list[str]) -> str:
    reason = f"{month}월 제철 과일"
    if is_child and fruit.good_for_kids:
        reason += " (성장기 어린이에게 좋음)"
    if diseases:
        reason += f" ({', '.join(diseases)} 고려)"
    return reason


@dataclass
class FruitSnackService:
    """Service recommending snacks from a fruit catalog."""

    catalog: FruitCatalog
    renal_disease_codes: frozenset[str] = RENAL_DISEASE_CODES
    potassium_limit_mg: float = RENAL_POTASSIUM_LIMIT_MG
    max_servings: int = MAX_SERVINGS
    debug: bool = False

    def recommend(
        self,
        target_calories: float,
        month_of_year: int,
        is_child: bool,
        disease_codes: Iterable[str] = (),
    ) -> FruitSnack:
        """Recommend a snack for one family member."""
        snack = recommend_fruit_snack(
            target_calories,
            month_of_year,
            is_child,
            disease_codes,
            fruits=self.catalog.list_fruits(),
            renal_codes=self.renal_disease_codes,
            potassium_limit_mg=self.potassium_limit_mg,
            max_servings=self.max_servings,
        )
        if self.debug:
            _logger.info(
                "Fruit snack: month=%s fruit=%s servings=%s calories=%s",
                month_of_year,
                snack.fruit.id,
                snack.servings,
                snack.total_calories,
            )
        return snack

    def in_season(self, month: int) -> list[Fruit]:
        """Return the ordered seasonal pool for a month."""
        return seasonal_fruits(month, self.catalog.list_fruits())
