"""Logging setup for joborg runs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import JobOrgConfig

_LOGGER_NAME = "joborg"
_CONSOLE_FORMAT = "[joborg] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a phase logger such as ``joborg.scanner``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    config: "JobOrgConfig | None" = None, *, verbose: bool = False
) -> logging.Logger:
    """Install console and optional file handlers on the ``joborg`` logger.

    ``verbose`` on the command line and ``logging.verbose`` in ``.joborg.yml``
    both switch to DEBUG, which adds per-file classification and copy lines.
    The log file named by ``logging.file`` receives the same records with
    timestamps so a failed run can be matched to the file it stopped on.
    """
    debug = verbose or (config is not None and config.verbose)
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    log_file = config.log_file if config is not None else None
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.debug("Writing log to %s", log_file)

    return logger


__all__ = ["configure_logging", "get_logger"]
