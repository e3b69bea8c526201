"""Logging helpers for jenkins-plugin-cli.

Every module obtains its logger via ``get_logger(__name__)``. The CLI calls
``configure_logging`` once, as early as possible, to attach a single stderr
handler to the package logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "jenkins_plugin_cli"

LOG_FORMAT = "%(levelname)s %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger, namespaced under the package logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    debug: bool = False,
    quiet: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the package logger.

    Resolution decisions are reported at INFO, so INFO is the default level.
    ``quiet`` wins over ``debug`` when both are set.

    Args:
        debug: Log at DEBUG level with timestamps and logger names.
        quiet: Only log errors.
        stream: Stream for the handler (default: stderr).

    Returns:
        The configured package logger.
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
