"""
Logging configuration for the Travel API.

``setup_logging`` configures the ``travel_api`` logger hierarchy rather
than the root logger, so the level of the API's own messages (INFO for
completed mutations, WARNING for rejected ones) can be tuned without
touching the logs of uvicorn or other libraries.  Level and optional
log file come from ``settings`` unless passed explicitly.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

PACKAGE_LOGGER = "travel_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on handlers installed here so a repeated call can replace them.
_HANDLER_MARK = "_travel_api_handler"


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the ``travel_api`` package logger.

    Parameters
    ----------
    level : Optional[str]
        Level name such as ``"DEBUG"``; defaults to ``settings.log_level``.
        Unknown names fall back to INFO.
    logfile : Optional[str]
        File to append log records to; defaults to ``settings.log_file``.
        An empty value disables the file handler.

    Handlers installed by an earlier call are closed and replaced.  A
    console handler is only added when the root logger has none, since
    records still propagate to the root and would otherwise be printed
    twice.
    """
    level = level or settings.log_level
    logfile = settings.log_file if logfile is None else logfile

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if not logging.getLogger().handlers:
        handlers.append(logging.StreamHandler())
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    return logger
