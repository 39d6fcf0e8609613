"""Logging configuration helpers for Kochbuch."""

from __future__ import annotations

import logging
import os
from typing import Final

_DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that report every outbound request at INFO.
_CHATTY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")


def _resolve_level(level_name: str) -> int:
    """Translate a log level string or number into a logging level."""

    value = level_name.strip()
    if value.isdigit():
        return int(value)

    numeric = getattr(logging, value.upper(), None)
    if isinstance(numeric, int):
        return numeric

    return logging.INFO


def _attach_stream_handler(logger: logging.Logger) -> None:
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, _DEFAULT_DATEFMT))
    logger.addHandler(handler)


def configure_logging(*, debug: bool = False) -> None:
    """Stream ``kochbuch.*`` records to the console.

    ``LOG_LEVEL`` (a level name or number) overrides the debug flag. The
    HTTP client loggers stay at WARNING unless debugging, since image
    acquisition issues several requests per import.
    """

    env_level = os.getenv("LOG_LEVEL")
    level = _resolve_level(env_level or ("DEBUG" if debug else "INFO"))

    app_logger = logging.getLogger("kochbuch")
    _attach_stream_handler(app_logger)
    app_logger.setLevel(level)
    app_logger.propagate = False

    client_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
