"""
utils/logger.py
---------------
Logging setup shared by every layer.

Records go to stdout as ``time | level | logger | message``. The threshold
comes from ``LOG_LEVEL`` in the environment; an unknown name falls back to
INFO. Per-query row counts are logged at DEBUG, so set ``LOG_LEVEL=DEBUG``
to see them.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """Attach the stdout handler to the root logger, once per process."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (normally the caller's ``__name__``)."""
    _init_logging()
    return logging.getLogger(name)
