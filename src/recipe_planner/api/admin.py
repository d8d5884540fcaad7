"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from recipe_planner.catalog import SAMPLE_RECIPES
from recipe_planner.services.nutrition import nutrition_stats

if TYPE_CHECKING:
    from recipe_planner.containers import AppContainer

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


@router.get("/events", dependencies=[Depends(require_admin)])
async def list_events(
    request: Request,
    user_id: UUID,
    event_type: str | None = None,
    limit: int = Query(default=100, ge=1, le=500),
) -> dict[str, object]:
    """Return a user's recent analytics events."""
    container: AppContainer = request.app.state.container
    events = container.analytics_service.list_events(user_id, event_type, limit)
    return {
        "events": [
            {
                "event_type": event.event_type,
                "event_data": event.event_data,
                "timestamp": event.timestamp.isoformat(),
            }
            for event in events
        ]
    }


@router.get("/nutrition-stats", dependencies=[Depends(require_admin)])
async def catalog_nutrition_stats(request: Request) -> dict[str, int]:
    """Return average nutrition across the catalog after enhancement."""
    container: AppContainer = request.app.state.container
    recipes = await container.nutrition_service.enhance_recipes(SAMPLE_RECIPES)
    stats = nutrition_stats(recipes)
    return {
        "total_recipes": stats.total_recipes,
        "recipes_with_nutrition": stats.recipes_with_nutrition,
        "average_calories": stats.average_calories,
        "average_protein": stats.average_protein,
        "average_carbs": stats.average_carbs,
        "average_fat": stats.average_fat,
    }
