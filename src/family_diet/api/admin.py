"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from family_diet.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/excluded-foods", dependencies=[Depends(require_admin)])
async def list_excluded_foods(
    request: Request,
    query: str | None = None,
    disease: str | None = None,
    excluded_type: str | None = None,
) -> dict[str, object]:
    """Search the excluded-food catalog."""
    container: AppContainer = request.app.state.container
    rules = container.exclusion_service.search(query, disease, excluded_type)
    return {"rules": [asdict(rule) for rule in rules]}


@router.get("/excluded-foods/stats", dependencies=[Depends(require_admin)])
async def excluded_food_stats(request: Request) -> dict[str, object]:
    """Return excluded-food counts by disease, type and severity."""
    container: AppContainer = request.app.state.container
    return asdict(container.exclusion_service.stats())
