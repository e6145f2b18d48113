"""Logging configuration for TCPing."""

import logging
import os
import sys

LOG_LEVEL_ENV = "TCPING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as "debug" to its logging constant.

    Unknown or empty names fall back to DEFAULT_LOG_LEVEL, so a typo in the
    environment never stops the tool from probing.
    """
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging() -> None:
    """Send log records to stderr at the level named by TCPING_LOG_LEVEL.

    The default is WARNING: stdout carries the ping output verbatim, and
    INFO session records on stderr would only be noise for most runs.

    Examples:
        $ TCPING_LOG_LEVEL=DEBUG python -m tcping example.ru 443
    """
    log_level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s", logging.getLevelName(log_level)
    )
