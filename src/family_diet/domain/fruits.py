"""Domain models for seasonal fruit snacks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FruitNutrition:
    """Nutrition of a single serving of fruit."""

    serving_size: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    vitamin_c: float | None = None
    calcium: float | None = None
    iron: float | None = None
    potassium: float | None = None


@dataclass(frozen=True)
class Fruit:
    """Fruit catalog entry."""

    id: str
    name: str
    season_months: tuple[int, ...]
    nutrition: FruitNutrition
    good_for_kids: bool = False
    availability: str = "medium"
    avoid_for_diseases: tuple[str, ...] = ()
    benefits: tuple[str, ...] = ()
    kids_benefits: str | None = None
    emoji: str = ""


@dataclass(frozen=True)
class FruitSnack:
    """Selected fruit and how many servings to eat."""

    fruit: Fruit
    servings: int
    total_calories: float
    reason: str


class SeasonalPoolEmptyError(LookupError):
    """Raised when the catalog holds no usable fruit for a month."""

    def __init__(self, month: int) -> None:
        super().__init__(f"No seasonal fruit in catalog for month {month}")
        self.month = month
