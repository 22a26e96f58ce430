"""Fallback legacy archive content used when no store is wired in."""

from family_diet.adapters.records import (
    parse_legacy_document,
    parse_legacy_video,
    parse_replacement_guide,
)
from family_diet.domain.legacy import LegacyDocument, LegacyVideo, ReplacementGuide

LEGACY_VIDEO_ROWS: list[dict[str, object]] = [
    {
        "id": "legacy-video-1",
        "slug": "andong-heotjesatbap",
        "title": "안동 헛제삿밥",
        "description": "제삿상 음식을 평소에 즐기던 안동의 향토 비빔밥",
        "duration_minutes": 18,
        "region": "경북 안동",
        "era": "조선 후기",
        "ingredients": ["간장", "고사리", "도라지", "두부"],
        "tags": ["향토음식", "비빔밥"],
        "premium_only": False,
        "master": {"name": "김종가", "region": "경북 안동", "title": "종가 음식 명인"},
    },
    {
        "id": "legacy-video-2",
        "slug": "jeonju-bibimbap",
        "title": "전주 비빔밥",
        "description": "사골 육수로 지은 밥에 제철 나물을 올린 전주식 비빔밥",
        "duration_minutes": 22,
        "region": "전북 전주",
        "era": "근대",
        "ingredients": ["간장", "고추장", "콩나물", "황포묵"],
        "tags": ["비빔밥"],
        "premium_only": True,
        "master": {"name": "박명인", "region": "전북 전주", "title": "비빔밥 명인"},
    },
    {
        "id": "legacy-video-3",
        "slug": "royal-sinseollo",
        "title": "궁중 신선로",
        "description": "궁중 연회에 오르던 귀한 전골 요리",
        "duration_minutes": 30,
        "region": "서울",
        "era": "조선 중기",
        "ingredients": ["소고기", "간장", "은행", "잣"],
        "tags": ["궁중음식"],
        "premium_only": True,
        "master": None,
    },
]

LEGACY_DOCUMENT_ROWS: list[dict[str, object]] = [
    {
        "id": "legacy-doc-1",
        "title": "수운잡방 헛제삿밥 기록",
        "summary": "안동 지역 문헌에 남은 헛제삿밥 조리법",
        "region": "경북 안동",
        "era": "조선 후기",
        "ingredients": [
            {"name": "말린 고사리", "amount": "한 줌"},
            {"name": "도라지", "amount": "두 뿌리"},
        ],
        "source": "수운잡방",
    },
]

REPLACEMENT_GUIDE_ROWS: list[dict[str, object]] = [
    {
        "traditional": {"name": "조청", "description": "쌀을 엿기름으로 삭혀 졸인 감미료"},
        "modern": {"name": "올리고당", "description": "시판 저당 감미료"},
        "tips": ["단맛이 약하므로 1.2배 분량을 사용하세요."],
    },
    {
        "traditional": {"name": "집간장", "description": "메주로 담근 재래 간장"},
        "modern": {"name": "양조간장", "description": "시판 간장"},
        "tips": ["염도가 낮으므로 소금으로 간을 보충하세요."],
    },
]


def default_legacy_videos() -> list[LegacyVideo]:
    """Return the fallback videos as domain records."""
    return [parse_legacy_video(row) for row in LEGACY_VIDEO_ROWS]


def default_legacy_documents() -> list[LegacyDocument]:
    """Return the fallback documents as domain records."""
    return [parse_legacy_document(row) for row in LEGACY_DOCUMENT_ROWS]


def default_replacement_guides() -> list[ReplacementGuide]:
    """Return the fallback replacement guides as domain records."""
    return [parse_replacement_guide(row) for row in REPLACEMENT_GUIDE_ROWS]
