"""FastAPI application factory."""
from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from personinfo import __version__
from personinfo.config import settings
from personinfo.domain.exceptions import (
    DuplicateSubjectError,
    InvalidSubjectError,
    NoUpdatedFieldsError,
    PersistenceError,
    PersonInfoError,
    PersonNotFoundError,
    ProviderTimeoutError,
    ProviderUnavailableError,
    ShutdownTimeoutError,
)
from personinfo.logging import configure_logging

logger = logging.getLogger(__name__)

# Most specific first; the first isinstance match wins.
_STATUS_BY_ERROR: list[tuple[type[PersonInfoError], int]] = [
    (DuplicateSubjectError, 409),
    (InvalidSubjectError, 422),
    (ProviderTimeoutError, 504),
    (ProviderUnavailableError, 502),
    (PersonNotFoundError, 404),
    (NoUpdatedFieldsError, 400),
    (PersistenceError, 500),
]


def status_for(exc: PersonInfoError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from personinfo.infra.db import engine as db_engine
        from personinfo.infra.predictors import build_predictors

        configure_logging(settings.LOG_LEVEL)
        engine = db_engine.engine
        # An unreachable database is fatal: the service cannot serve.
        db_engine.ping(engine, settings.HEALTHCHECK_TIMEOUT_SECONDS)
        SQLModel.metadata.create_all(engine)
        app.state.predictors = build_predictors(settings)
        logger.info("service started")
        try:
            yield
        finally:
            app.state.predictors.close()
            try:
                db_engine.dispose(engine, settings.SHUTDOWN_TIMEOUT_SECONDS)
            except ShutdownTimeoutError as exc:
                logger.error("failed to shut down storage: %s", exc)
            logger.info("shutdown complete")

    app = FastAPI(
        title="Person Info API",
        description="Most probable age, gender and nationality for a person.",
        version=__version__,
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from personinfo.api.routers.people import router as people_router
    from personinfo.api.routers.health import router as health_router

    app.include_router(people_router)
    app.include_router(health_router)

    @app.exception_handler(PersonInfoError)
    def _domain_error(request: Request, exc: PersonInfoError) -> JSONResponse:
        status = status_for(exc)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status, content={"detail": exc.message})

    return app
