"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from family_diet.api.admin import router as admin_router
from family_diet.api.models import (
    LegacyFilterRequest,
    RecipeFilterRequest,
    UnifiedViewRequest,
)
from family_diet.app_logging import configure_logging
from family_diet.containers import AppContainer
from family_diet.domain.fruits import SeasonalPoolEmptyError
from family_diet.services.family import derive_included_member_ids
from family_diet.services.normalizer import normalize_nutrition_row
from family_diet.services.totals import (
    sum_nutrition_totals,
    unified_nutrition_totals,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(SeasonalPoolEmptyError)
    async def seasonal_pool_empty(
        request: Request, exc: SeasonalPoolEmptyError
    ) -> JSONResponse:
        logger.error("Fruit catalog gap: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc), "month": exc.month},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/diet/recipes/filter")
    async def filter_recipes(
        payload: RecipeFilterRequest, request: Request
    ) -> dict[str, object]:
        """Drop recipes excluded by the members' diseases or extra rules."""
        state_container: AppContainer = request.app.state.container
        verdicts = state_container.exclusion_service.verdicts_for_diseases(
            [item.to_domain() for item in payload.recipes],
            payload.diseases,
            [rule.to_domain() for rule in payload.rules],
        )
        kept = [recipe for recipe, verdict in verdicts if not verdict.excluded]
        excluded = [
            {
                "id": recipe.id,
                "title": recipe.title,
                "reason": verdict.reason,
                "severity": verdict.severity,
            }
            for recipe, verdict in verdicts
            if verdict.excluded
        ]
        totals = sum_nutrition_totals(
            recipe.nutrition for recipe in kept if recipe.nutrition is not None
        )
        return {
            "recipes": [asdict(recipe) for recipe in kept],
            "excluded": excluded,
            "totals": asdict(totals),
        }

    @app.post("/family/unified")
    async def unified_view(payload: UnifiedViewRequest) -> dict[str, object]:
        """Resolve included members and scale the unified nutrition totals."""
        included = derive_included_member_ids(
            [tab.to_domain() for tab in payload.member_tabs],
            payload.included_member_ids,
        )
        base = payload.nutrient_totals.to_domain() if payload.nutrient_totals else None
        totals = unified_nutrition_totals(base, len(included))
        return {
            "included_member_ids": included,
            "totals": asdict(totals),
            "row": normalize_nutrition_row(asdict(totals)),
        }

    @app.get("/snacks/fruit")
    async def fruit_snack(
        request: Request,
        month: int = Query(ge=1, le=12),
        target_calories: float = 100.0,
        is_child: bool = False,
        disease: list[str] | None = Query(default=None),
    ) -> dict[str, object]:
        """Recommend a seasonal fruit snack."""
        state_container: AppContainer = request.app.state.container
        snack = state_container.fruit_snack_service.recommend(
            target_calories, month, is_child, disease or []
        )
        return asdict(snack)

    @app.post("/legacy/videos/search")
    async def search_legacy_videos(
        payload: LegacyFilterRequest, request: Request
    ) -> dict[str, object]:
        """Filter archive videos."""
        state_container: AppContainer = request.app.state.container
        videos = state_container.legacy_archive_service.search(payload.to_domain())
        return {"videos": [asdict(video) for video in videos]}

    @app.get("/legacy/filter-options")
    async def legacy_filter_options(request: Request) -> dict[str, object]:
        """Return the archive's filter values."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.legacy_archive_service.filter_options())

    @app.get("/legacy/replacements")
    async def legacy_replacement(
        request: Request, keyword: str = ""
    ) -> dict[str, object]:
        """Find a replacement guide by ingredient keyword."""
        state_container: AppContainer = request.app.state.container
        guide = state_container.legacy_archive_service.find_replacement(keyword)
        if guide is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return asdict(guide)

    @app.get("/legacy/videos/{slug}")
    async def legacy_video_detail(slug: str, request: Request) -> dict[str, object]:
        """Return a video with its document and replacement guides."""
        state_container: AppContainer = request.app.state.container
        detail = state_container.legacy_archive_service.video_detail(slug)
        if detail is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return asdict(detail)

    return app
