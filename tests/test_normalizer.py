"""Tests for nutrition value coercion."""

import math

import pytest

from family_diet.services.normalizer import (
    normalize_nutrition_row,
    nutrition_value,
    round_half_away,
    to_finite_float,
    to_int,
    to_int_or_null,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (12.4, 12),
        (12.5, 13),
        (-2.5, -3),
        ("245.6", 246),
        ("  30 ", 30),
        (7, 7),
    ],
)
def test_to_int_rounds_half_away_from_zero(value, expected) -> None:
    assert to_int(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "abc", "12kcal", math.nan, math.inf, -math.inf, "Infinity", True, [1]],
)
def test_to_int_returns_fallback_for_invalid(value) -> None:
    assert to_int(value) == 0
    assert to_int(value, fallback=-1) == -1


def test_to_int_or_null_distinguishes_unknown() -> None:
    assert to_int_or_null("180.2") == 180
    assert to_int_or_null(0) == 0
    assert to_int_or_null(None) is None
    assert to_int_or_null("n/a") is None
    assert to_int_or_null(math.nan) is None


def test_to_finite_float_parses_strings() -> None:
    assert to_finite_float("3.25") == 3.25
    assert to_finite_float("bad", fallback=1.5) == 1.5
    assert to_finite_float(False) == 0.0


def test_round_half_away_respects_places() -> None:
    assert round_half_away(0.25, 1) == 0.3
    assert round_half_away(-0.25, 1) == -0.3
    assert round_half_away(225.60000000000002, 1) == 225.6


def test_nutrition_value_uses_first_present_alias() -> None:
    nutrition = {"carbs": "41.5", "protein": None}

    assert nutrition_value(nutrition, "carbohydrates", "carbs") == 41.5
    assert nutrition_value(nutrition, "protein") == 0.0
    assert nutrition_value(None, "calories") == 0.0


def test_normalize_nutrition_row_keeps_unknown_minerals() -> None:
    row = normalize_nutrition_row(
        {
            "calories": "512.5",
            "carbohydrates": 60.2,
            "protein": "21",
            "fat": "bad",
            "sodium": 840.4,
            "potassium": "310.6",
        }
    )

    assert row == {
        "calories": 513,
        "carbs_g": 60.2,
        "protein_g": 21.0,
        "fat_g": 0.0,
        "sodium_mg": 840,
        "potassium_mg": 311,
        "phosphorus_mg": None,
    }


def test_normalize_nutrition_row_handles_missing_payload() -> None:
    row = normalize_nutrition_row(None)

    assert row["calories"] == 0
    assert row["sodium_mg"] == 0
    assert row["potassium_mg"] is None
    assert row["phosphorus_mg"] is None


def test_to_int_handles_huge_values() -> None:
    assert to_int("1e30") == int(1e30)
    assert to_int(1e30) == int(1e30)
    assert to_int(-1e300) == int(-1e300)
    assert to_int_or_null(1e28) == int(1e28)


def test_round_half_away_passes_non_finite_through() -> None:
    assert math.isnan(round_half_away(math.nan))
    assert round_half_away(math.inf, 1) == math.inf
    assert round_half_away(2.0**60 + 0.0) == 2.0**60
