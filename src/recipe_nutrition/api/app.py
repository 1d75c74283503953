"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from recipe_nutrition.api.models import AnalyzeNutritionPayload, AnalyzeNutritionResponse
from recipe_nutrition.api.recipes import router as recipes_router
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.errors import (
    AllProvidersFailedError,
    ConfigurationError,
    IngredientValidationError,
    RecipeNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(recipes_router)

    @app.exception_handler(IngredientValidationError)
    async def handle_validation_error(
        _request: Request, exc: IngredientValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(RecipeNotFoundError)
    async def handle_not_found(
        _request: Request, exc: RecipeNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(ConfigurationError)
    @app.exception_handler(AllProvidersFailedError)
    async def handle_analysis_failure(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("Nutrition analysis error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": f"Nutrition analysis failed: {exc}"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/nutrition/analyze")
    async def analyze_nutrition(
        payload: AnalyzeNutritionPayload, request: Request
    ) -> AnalyzeNutritionResponse:
        """Estimate per-serving nutrition with both models."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.analysis_service.analyze(payload.to_request())
        return AnalyzeNutritionResponse.from_result(result)

    return app
