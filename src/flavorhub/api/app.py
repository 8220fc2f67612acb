"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from flavorhub.api.ratings import router as ratings_router
from flavorhub.api.recipes import router as recipes_router
from flavorhub.app_logging import configure_logging
from flavorhub.containers import AppContainer
from flavorhub.domain.errors import RatingError, RatingNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="FlavorHub", lifespan=lifespan)
    app.state.container = container

    app.include_router(recipes_router)
    app.include_router(ratings_router)

    @app.exception_handler(RatingNotFoundError)
    async def rating_not_found(
        _request: Request, exc: RatingNotFoundError
    ) -> JSONResponse:
        logger.info("Rating not found", extra={"rating_id": str(exc.rating_id)})
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(RatingError)
    async def rating_rejected(_request: Request, exc: RatingError) -> JSONResponse:
        logger.info("Rating request rejected: %s", type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
