"""Coercion of loosely-typed nutrition values into storage-safe numbers."""

import math
from decimal import ROUND_HALF_UP, Decimal

_INTEGRAL_FLOAT_THRESHOLD = 2.0**52

_NUTRITION_ALIASES: dict[str, tuple[str, ...]] = {
    "calories": ("calories",),
    "carbs_g": ("carbohydrates", "carbs"),
    "protein_g": ("protein",),
    "fat_g": ("fat",),
    "sodium_mg": ("sodium",),
    "potassium_mg": ("potassium",),
    "phosphorus_mg": ("phosphorus",),
}


def round_half_away(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals with halves moving away from zero.

    Non-finite values come back unchanged, as do floats at or beyond 2**52,
    which have no fractional part to round.
    """
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_FLOAT_THRESHOLD:
        return float(value)
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_finite_float(value: object, fallback: float = 0.0) -> float:
    """Parse a number or numeric string, returning ``fallback`` when invalid."""
    parsed = _parse_number(value)
    return fallback if parsed is None else parsed


def to_int(value: object, fallback: int = 0) -> int:
    """Return the nearest integer of ``value`` or ``fallback`` when invalid."""
    parsed = _parse_number(value)
    if parsed is None:
        return fallback
    return int(round_half_away(parsed))


def to_int_or_null(value: object) -> int | None:
    """Return the nearest integer of ``value`` or None when invalid."""
    parsed = _parse_number(value)
    if parsed is None:
        return None
    return int(round_half_away(parsed))


def nutrition_value(nutrition: dict[str, object] | None, *keys: str) -> float:
    """Return the first present key as a finite float, 0.0 when none is set."""
    if not isinstance(nutrition, dict):
        return 0.0
    for key in keys:
        value = nutrition.get(key)
        if value is not None:
            return to_finite_float(value)
    return 0.0


def _first_present(nutrition: dict[str, object], keys: tuple[str, ...]) -> object:
    for key in keys:
        value = nutrition.get(key)
        if value is not None:
            return value
    return None


def normalize_nutrition_row(nutrition: dict[str, object] | None) -> dict[str, object]:
    """Build the integer/float columns stored for a diet plan row.

    Potassium and phosphorus stay ``None`` when unknown; calories and sodium
    default to zero.
    """
    source = nutrition if isinstance(nutrition, dict) else {}
    aliases = _NUTRITION_ALIASES
    return {
        "calories": to_int(nutrition_value(source, *aliases["calories"]), 0),
        "carbs_g": nutrition_value(source, *aliases["carbs_g"]),
        "protein_g": nutrition_value(source, *aliases["protein_g"]),
        "fat_g": nutrition_value(source, *aliases["fat_g"]),
        "sodium_mg": to_int(nutrition_value(source, *aliases["sodium_mg"]), 0),
        "potassium_mg": to_int_or_null(
            _first_present(source, aliases["potassium_mg"])
        ),
        "phosphorus_mg": to_int_or_null(
            _first_present(source, aliases["phosphorus_mg"])
        ),
    }


def _parse_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if not isinstance(value, int | float | str):
        return None
    try:
        parsed = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed
