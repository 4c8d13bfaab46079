"""Logging configuration for the link resolver service."""

import logging
import sys

from linkresolver.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries kept at WARNING even in debug mode.
_QUIET_LOGGERS = ("asyncio", "httpx", "redis", "opentelemetry")


def setup_logging(debug: bool | None = None) -> None:
    """Configure stdout logging for the process.

    With debug on (settings.debug by default) the resolver's cache HIT/MISS
    lines become visible. SQL statement logging is governed separately by
    DATABASE_ECHO.
    """
    if debug is None:
        debug = get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
