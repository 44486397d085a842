"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from slimming_tracker.api.diary import router as diary_router
from slimming_tracker.api.foods import router as foods_router
from slimming_tracker.api.migrations import router as migrations_router
from slimming_tracker.api.products import router as products_router
from slimming_tracker.api.profile import router as profile_router
from slimming_tracker.api.weight import router as weight_router
from slimming_tracker.app_logging import configure_logging
from slimming_tracker.containers import AppContainer
from slimming_tracker.services.seed import STARTER_FOODS


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.food_service.seed_if_empty(STARTER_FOODS)
        except Exception:
            logger.exception("Failed to seed the food catalog")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Slimming Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(foods_router)
    app.include_router(products_router)
    app.include_router(diary_router)
    app.include_router(weight_router)
    app.include_router(migrations_router)

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
