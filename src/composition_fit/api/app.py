"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from composition_fit.api.experiments import router as experiments_router
from composition_fit.api.ui import router as ui_router
from composition_fit.app_logging import configure_logging
from composition_fit.containers import AppContainer
from composition_fit.domain.regression import RegressionError
from composition_fit.services.experiments import (
    PointLimitReachedError,
    SessionNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Composition Fit")
    app.state.container = container

    app.include_router(ui_router)
    app.include_router(experiments_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(RegressionError)
    async def regression_error_handler(
        request: Request, exc: RegressionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": exc.code},
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "code": "session_not_found"},
        )

    @app.exception_handler(PointLimitReachedError)
    async def point_limit_handler(
        request: Request, exc: PointLimitReachedError
    ) -> JSONResponse:
        logger.info("Rejected point for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc), "code": "point_limit_reached"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error.", "code": "internal_error"},
        )

    return app
