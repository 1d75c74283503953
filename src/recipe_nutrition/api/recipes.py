"""Recipe nutrition endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from recipe_nutrition.api.models import RecipeNutritionResponse

if TYPE_CHECKING:
    from recipe_nutrition.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _get_admin_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/{recipe_id}/nutrition", dependencies=[Depends(require_admin)])
async def analyze_recipe(
    recipe_id: str, request: Request, save: bool = True
) -> RecipeNutritionResponse:
    """Analyze a stored recipe and optionally write the nutrition back."""
    container: AppContainer = request.app.state.container
    if container.recipe_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe store not configured",
        )
    result = await container.recipe_service.analyze_recipe(recipe_id, save=save)
    return RecipeNutritionResponse(
        nutrition=result.nutrition.as_dict(),
        meta=result.meta(),
        recipe_id=recipe_id,
        saved=save,
    )
