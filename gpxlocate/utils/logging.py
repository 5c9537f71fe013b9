import logging
import os
import sys
from typing import Optional


LOG_ENV = "GPXLOCATE_LOG"


def _level_from_env(default: str = "INFO") -> int:
    name = os.environ.get(LOG_ENV, default).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Logger writing "[LEVEL] message" lines to stderr.

    The level comes from $GPXLOCATE_LOG unless given explicitly.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else _level_from_env())
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
