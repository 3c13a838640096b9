"""Process-wide logging setup."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logger = logging.getLogger("personinfo")


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    logger.setLevel(level)
    if any(getattr(h, "_personinfo", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._personinfo = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
