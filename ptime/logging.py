"""Logging utilities for ptime commands.

Command results are the only thing ptime writes to stdout; every log record
goes to stderr (and optionally a file) under the ``ptime`` logger hierarchy.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "ptime"
_CONSOLE_FORMAT = "[ptime] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger such as ``ptime.scanner``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the stderr handler and optional file sink for one CLI run.

    At the default WARNING level a successful scan logs nothing, including for
    photos skipped because they carry no capture date. ``verbose`` switches to
    DEBUG, which traces candidate counts, the fallback field chosen per photo
    and every skipped file.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated main() calls in one process do not double up.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
