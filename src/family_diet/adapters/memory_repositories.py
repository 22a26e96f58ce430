"""In-memory catalog repositories fed by the persistence layer's records."""

from dataclasses import dataclass, field

from family_diet.domain.fruits import Fruit
from family_diet.domain.legacy import LegacyDocument, LegacyVideo, ReplacementGuide
from family_diet.domain.recipes import ExcludedFoodRule
from family_diet.services.exclusions import ExcludedFoodRepository
from family_diet.services.fruits import FruitCatalog
from family_diet.services.legacy import LegacyContentRepository


@dataclass
class InMemoryExcludedFoodRepository(ExcludedFoodRepository):
    """Excluded-food rules held in memory."""

    rules: list[ExcludedFoodRule] = field(default_factory=list)

    def list_rules(self) -> list[ExcludedFoodRule]:
        """Return a copy of the held rules."""
        return list(self.rules)


@dataclass
class InMemoryFruitCatalog(FruitCatalog):
    """Fruit catalog held in memory."""

    fruits: list[Fruit] = field(default_factory=list)

    def list_fruits(self) -> list[Fruit]:
        """Return a copy of the held fruits."""
        return list(self.fruits)


@dataclass
class InMemoryLegacyContentRepository(LegacyContentRepository):
    """Legacy archive content held in memory."""

    videos: list[LegacyVideo] = field(default_factory=list)
    documents: list[LegacyDocument] = field(default_factory=list)
    guides: list[ReplacementGuide] = field(default_factory=list)

    def list_videos(self) -> list[LegacyVideo]:
        """Return a copy of the held videos."""
        return list(self.videos)

    def list_documents(self) -> list[LegacyDocument]:
        """Return a copy of the held documents."""
        return list(self.documents)

    def list_replacement_guides(self) -> list[ReplacementGuide]:
        """Return a copy of the held guides."""
        return list(self.guides)
