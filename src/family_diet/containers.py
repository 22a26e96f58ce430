"""Dependency container wiring for the application."""

from dataclasses import dataclass

from family_diet.adapters.memory_repositories import (
    InMemoryExcludedFoodRepository,
    InMemoryFruitCatalog,
    InMemoryLegacyContentRepository,
)
from family_diet.config import Settings, parse_code_list
from family_diet.data.excluded_foods import default_excluded_food_rules
from family_diet.data.legacy_content import (
    default_legacy_documents,
    default_legacy_videos,
    default_replacement_guides,
)
from family_diet.data.seasonal_fruits import SEASONAL_FRUITS
from family_diet.services.exclusions import ExclusionService
from family_diet.services.fruits import FruitSnackService
from family_diet.services.legacy import LegacyArchiveService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    exclusion_service: ExclusionService
    fruit_snack_service: FruitSnackService
    legacy_archive_service: LegacyArchiveService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container over the seed catalogs."""
    resolved_settings = settings or Settings()
    excluded_food_repository = InMemoryExcludedFoodRepository(
        default_excluded_food_rules()
    )
    fruit_catalog = InMemoryFruitCatalog(list(SEASONAL_FRUITS))
    legacy_repository = InMemoryLegacyContentRepository(
        videos=default_legacy_videos(),
        documents=default_legacy_documents(),
        guides=default_replacement_guides(),
    )
    exclusion_service = ExclusionService(
        repository=excluded_food_repository,
        debug=resolved_settings.debug,
    )
    fruit_snack_service = FruitSnackService(
        catalog=fruit_catalog,
        renal_disease_codes=parse_code_list(resolved_settings.renal_disease_codes),
        potassium_limit_mg=resolved_settings.renal_potassium_limit_mg,
        max_servings=resolved_settings.max_fruit_servings,
        debug=resolved_settings.debug,
    )
    legacy_archive_service = LegacyArchiveService(legacy_repository)

    return AppContainer(
        settings=resolved_settings,
        exclusion_service=exclusion_service,
        fruit_snack_service=fruit_snack_service,
        legacy_archive_service=legacy_archive_service,
    )
