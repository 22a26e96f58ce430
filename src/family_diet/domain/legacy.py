"""Domain models for the legacy food archive."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LegacyMaster:
    """Cooking master presenting an archive video."""

    name: str
    region: str
    title: str


@dataclass(frozen=True)
class LegacyVideo:
    """Archival cooking video."""

    id: str
    title: str
    description: str
    region: str
    era: str
    ingredients: tuple[str, ...]
    master: LegacyMaster
    slug: str = ""
    tags: tuple[str, ...] = ()
    duration_minutes: int = 0
    premium_only: bool = False


@dataclass(frozen=True)
class LegacyDocumentIngredient:
    """Ingredient line of an archival recipe document."""

    name: str
    amount: str | None = None


@dataclass(frozen=True)
class LegacyDocument:
    """Archival recipe document."""

    id: str
    title: str
    summary: str
    region: str
    era: str
    ingredients: tuple[LegacyDocumentIngredient, ...] = ()
    source: str | None = None


@dataclass(frozen=True)
class LegacyFilterState:
    """User-selected filters; empty collections impose no constraint."""

    region: tuple[str, ...] = ()
    era: tuple[str, ...] = ()
    ingredients: tuple[str, ...] = ()
    search_term: str = ""


@dataclass(frozen=True)
class LegacyFilterOptions:
    """Distinct filter values available in a catalog."""

    regions: list[str]
    eras: list[str]
    ingredients: list[str]


@dataclass(frozen=True)
class ReplacementIngredient:
    """One side of a traditional/modern ingredient pairing."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class ReplacementGuide:
    """Guide for replacing a traditional ingredient with a modern one."""

    traditional: ReplacementIngredient
    modern: ReplacementIngredient
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class LegacyVideoDetail:
    """Video with its matching document and replacement guides."""

    video: LegacyVideo
    document: LegacyDocument | None
    replacements: list[ReplacementGuide]
