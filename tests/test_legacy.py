"""Tests for the legacy archive filters and lookups."""

from family_diet.adapters.memory_repositories import InMemoryLegacyContentRepository
from family_diet.domain.legacy import LegacyFilterState
from family_diet.services.legacy import (
    LegacyArchiveService,
    extract_legacy_filter_options,
    filter_legacy_videos,
    find_legacy_video_detail,
    find_replacement_guide,
)


def _ids(videos) -> list[str]:
    return [video.id for video in videos]


def test_empty_filter_returns_all_videos(legacy_videos) -> None:
    assert _ids(filter_legacy_videos(legacy_videos, LegacyFilterState())) == [
        "v1",
        "v2",
        "v3",
    ]


def test_filter_by_region(legacy_videos) -> None:
    filters = LegacyFilterState(region=("경북 안동",))

    assert _ids(filter_legacy_videos(legacy_videos, filters)) == ["v1"]


def test_filter_by_region_and_era_lists(legacy_videos) -> None:
    filters = LegacyFilterState(region=("서울", "전북 전주"), era=("근대",))

    assert _ids(filter_legacy_videos(legacy_videos, filters)) == ["v2"]


def test_filter_requires_every_ingredient(legacy_videos) -> None:
    both = LegacyFilterState(ingredients=("간장", "고추장"))
    shared = LegacyFilterState(ingredients=("간장",))

    assert _ids(filter_legacy_videos(legacy_videos, both)) == ["v2"]
    assert _ids(filter_legacy_videos(legacy_videos, shared)) == ["v1", "v2", "v3"]


def test_search_term_matches_master_and_description(legacy_videos) -> None:
    by_master = LegacyFilterState(search_term="명인")
    by_description = LegacyFilterState(search_term="  ROYAL ")
    by_region = LegacyFilterState(search_term="서울")

    assert _ids(filter_legacy_videos(legacy_videos, by_master)) == ["v2"]
    assert _ids(filter_legacy_videos(legacy_videos, by_description)) == ["v3"]
    assert _ids(filter_legacy_videos(legacy_videos, by_region)) == ["v3"]


def test_filter_without_match_is_empty(legacy_videos) -> None:
    filters = LegacyFilterState(region=("제주",))

    assert filter_legacy_videos(legacy_videos, filters) == []


def test_filter_options_are_distinct_and_sorted(legacy_videos) -> None:
    options = extract_legacy_filter_options(legacy_videos)

    assert options.regions == ["경북 안동", "서울", "전북 전주"]
    assert options.eras == ["근대", "조선 중기", "조선 후기"]
    assert options.ingredients == [
        "간장",
        "고사리",
        "고추장",
        "도라지",
        "소고기",
        "잣",
        "콩나물",
    ]


def test_filter_options_for_empty_archive() -> None:
    options = extract_legacy_filter_options([])

    assert options.regions == []
    assert options.eras == []
    assert options.ingredients == []


def test_find_replacement_guide_matches_either_side(replacement_guides) -> None:
    assert find_replacement_guide(replacement_guides, "조청") is replacement_guides[0]
    assert find_replacement_guide(replacement_guides, "soy") is replacement_guides[1]
    assert find_replacement_guide(replacement_guides, "간장") is replacement_guides[1]


def test_find_replacement_guide_without_match(replacement_guides) -> None:
    assert find_replacement_guide(replacement_guides, "") is None
    assert find_replacement_guide(replacement_guides, "   ") is None
    assert find_replacement_guide(replacement_guides, None) is None
    assert find_replacement_guide(replacement_guides, "버터") is None


def test_video_detail_links_related_document(
    legacy_videos, legacy_documents, replacement_guides
) -> None:
    andong = find_legacy_video_detail(
        legacy_videos, legacy_documents, replacement_guides, "andong"
    )
    jeonju = find_legacy_video_detail(
        legacy_videos, legacy_documents, replacement_guides, "jeonju"
    )

    assert andong.video.id == "v1"
    assert andong.document.id == "d2"
    assert andong.replacements == replacement_guides
    assert jeonju.document is None


def test_video_detail_unknown_slug(legacy_videos, legacy_documents) -> None:
    assert find_legacy_video_detail(legacy_videos, legacy_documents, [], "x") is None


def test_archive_service_delegates_to_repository(
    legacy_videos, legacy_documents, replacement_guides
) -> None:
    service = LegacyArchiveService(
        InMemoryLegacyContentRepository(
            videos=legacy_videos,
            documents=legacy_documents,
            guides=replacement_guides,
        )
    )

    assert _ids(service.search(LegacyFilterState(era=("조선 중기",)))) == ["v3"]
    assert service.filter_options().regions[0] == "경북 안동"
    assert service.find_replacement("올리고") is replacement_guides[0]
    assert service.video_detail("sinseollo").document.id == "d1"


def test_filter_options_ignore_input_order(legacy_videos) -> None:
    forward = extract_legacy_filter_options(legacy_videos)
    backward = extract_legacy_filter_options(list(reversed(legacy_videos)))

    assert forward == backward
