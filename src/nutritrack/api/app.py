"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nutritrack.api.foods import router as foods_router
from nutritrack.api.meals import router as meals_router
from nutritrack.api.profile import router as profile_router
from nutritrack.api.weights import router as weights_router
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting nutritrack API",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="nutritrack", lifespan=lifespan)
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(meals_router)
    app.include_router(foods_router)
    app.include_router(weights_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
