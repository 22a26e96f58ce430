"""Filtering and lookup over the legacy food archive."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from family_diet.domain.legacy import (
    LegacyDocument,
    LegacyFilterOptions,
    LegacyFilterState,
    LegacyVideo,
    LegacyVideoDetail,
    ReplacementGuide,
)
from family_diet.services.text import korean_sort_key, normalize_text


class LegacyContentRepository(Protocol):
    """Read interface for archive content."""

    def list_videos(self) -> list[LegacyVideo]:
        """Return archive videos."""

    def list_documents(self) -> list[LegacyDocument]:
        """Return archive documents."""

    def list_replacement_guides(self) -> list[ReplacementGuide]:
        """Return ingredient replacement guides."""


def filter_legacy_videos(
    videos: Sequence[LegacyVideo], filters: LegacyFilterState
) -> list[LegacyVideo]:
    """Return videos passing every active filter, in input order."""
    regions = set(filters.region)
    eras = set(filters.era)
    required_ingredients = set(filters.ingredients)
    term = normalize_text(filters.search_term)

    def matches(video: LegacyVideo) -> bool:
        if regions and video.region not in regions:
            return False
        if eras and video.era not in eras:
            return False
        if not required_ingredients.issubset(video.ingredients):
            return False
        if term:
            haystacks = (
                video.title,
                video.description,
                video.master.name,
                video.region,
            )
            return any(term in normalize_text(text) for text in haystacks)
        return True

    return [video for video in videos if matches(video)]


def extract_legacy_filter_options(
    videos: Iterable[LegacyVideo],
) -> LegacyFilterOptions:
    """Collect distinct regions, eras and ingredients in Korean order."""
    regions: set[str] = set()
    eras: set[str] = set()
    ingredients: set[str] = set()
    for video in videos:
        regions.add(video.region)
        eras.add(video.era)
        ingredients.update(video.ingredients)
    return LegacyFilterOptions(
        regions=sorted(regions, key=korean_sort_key),
        eras=sorted(eras, key=korean_sort_key),
        ingredients=sorted(ingredients, key=korean_sort_key),
    )


def find_replacement_guide(
    guides: Iterable[ReplacementGuide], keyword: str | None
) -> ReplacementGuide | None:
    """Return the first guide whose traditional or modern name has the keyword."""
    needle = normalize_text(keyword)
    if not needle:
        return None
    for guide in guides:
        names = (guide.traditional.name, guide.modern.name)
        if any(needle in normalize_text(name) for name in names):
            return guide
    return None


def find_legacy_video_detail(
    videos: Iterable[LegacyVideo],
    documents: Iterable[LegacyDocument],
    guides: Iterable[ReplacementGuide],
    slug: str,
) -> LegacyVideoDetail | None:
    """Resolve a video by slug with its related document and guides."""
    video = next((item for item in videos if item.slug == slug), None)
    if video is None:
        return None
    document = next(
        (
            doc
            for doc in documents
            if any(
                ingredient in doc_ingredient.name
                for ingredient in video.ingredients
                for doc_ingredient in doc.ingredients
            )
        ),
        None,
    )
    return LegacyVideoDetail(video=video, document=document, replacements=list(guides))


@dataclass
class LegacyArchiveService:
    """Application service for the legacy archive."""

    repository: LegacyContentRepository

    def search(self, filters: LegacyFilterState) -> list[LegacyVideo]:
        """Filter archive videos."""
        return filter_legacy_videos(self.repository.list_videos(), filters)

    def filter_options(self) -> LegacyFilterOptions:
        """Return filter values available across the archive."""
        return extract_legacy_filter_options(self.repository.list_videos())

    def find_replacement(self, keyword: str | None) -> ReplacementGuide | None:
        """Find a replacement guide by ingredient keyword."""
        return find_replacement_guide(
            self.repository.list_replacement_guides(), keyword
        )

    def video_detail(self, slug: str) -> LegacyVideoDetail | None:
        """Return a video detail by slug, if present."""
        return find_legacy_video_detail(
            self.repository.list_videos(),
            self.repository.list_documents(),
            self.repository.list_replacement_guides(),
            slug,
        )
