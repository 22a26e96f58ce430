"""Text normalization shared by the filters."""

import unicodedata


def normalize_text(value: object) -> str:
    """Return NFC-normalized, trimmed, lowercase text ('' for non-strings)."""
    if not isinstance(value, str):
        return ""
    return unicodedata.normalize("NFC", value).strip().lower()


def korean_sort_key(value: str) -> tuple[str, str]:
    """Sort key approximating Korean-locale collation.

    Precomposed Hangul syllables are laid out in dictionary order, so NFC
    code-point order gives Korean ordering; casefolding keeps Latin entries
    case-insensitive and the raw value breaks ties deterministically.
    """
    normalized = unicodedata.normalize("NFC", value)
    return normalized.casefold(), normalized
