"""Re-export the singleton engine and provide bounded ping/dispose helpers."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Callable, TypeVar

from sqlalchemy import event, text
from sqlalchemy.engine import Engine

from personinfo.db import engine  # singleton; created once at personinfo.db import
from personinfo.domain.exceptions import ShutdownTimeoutError
import personinfo.models  # noqa: F401   registers ORM table mappers

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _set_sqlite_pragmas(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA journal_mode=WAL")
    cur.execute("PRAGMA synchronous=NORMAL")
    cur.close()


if engine.dialect.name == "sqlite":
    event.listen(engine, "connect", _set_sqlite_pragmas)


# One worker: a hung database holds at most one thread, later pings queue and time out.
_PING_POOL = ThreadPoolExecutor(max_workers=1, thread_name_prefix="db.ping")


def _run_bounded(
    fn: Callable[[], T],
    timeout: float,
    what: str,
    pool: ThreadPoolExecutor | None = None,
) -> T:
    """Run *fn* on a helper thread and stop waiting after *timeout* seconds.

    The helper thread is not joined on timeout, so the caller never blocks
    longer than *timeout*. Without *pool* a one-off executor is used.
    """
    executor = pool or ThreadPoolExecutor(max_workers=1, thread_name_prefix=what)
    future = executor.submit(fn)
    try:
        return future.result(timeout=timeout)
    except FutureTimeout as exc:
        future.cancel()  # drop it if still queued behind a hung call
        raise TimeoutError(f"{what} did not finish within {timeout:g}s") from exc
    finally:
        if pool is None:
            executor.shutdown(wait=False)


def ping(db_engine: Engine, timeout: float) -> None:
    """Round-trip ``SELECT 1``. Raises on failure or when *timeout* elapses."""

    def _ping() -> None:
        with db_engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    _run_bounded(_ping, timeout, "db.ping", pool=_PING_POOL)


def dispose(db_engine: Engine, timeout: float) -> None:
    """Release pooled connections, reporting a timeout instead of hanging."""
    try:
        _run_bounded(db_engine.dispose, timeout, "db.dispose")
    except TimeoutError as exc:
        raise ShutdownTimeoutError(str(exc)) from exc
    logger.info("database connections released")


__all__ = ["engine", "ping", "dispose"]
