"""Liveness probe backed by a database round-trip."""
import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from personinfo.config import settings
from personinfo.infra.db import engine as db_engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ops"])


@router.get("/health")
def health() -> JSONResponse:
    try:
        db_engine.ping(db_engine.engine, settings.HEALTHCHECK_TIMEOUT_SECONDS)
    except Exception as exc:
        logger.error("database health check failed: %s", exc)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return JSONResponse(status_code=200, content={"status": "ok"})
