"""Logging setup for the layout engine and its word sources."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "assignmate"
# Loggers used underneath the question-bank client.
HTTP_LOGGERS = ("urllib3", "requests")


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for a CLI run.

    Records go to ``stream`` (stderr by default) so a JSON layout printed on
    stdout stays parseable. Skipped words are reported as warnings rather than
    raised, so the log is where a caller finds out which entries did not make
    it onto the grid. HTTP connection chatter is only shown at debug level.
    """

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    http_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
