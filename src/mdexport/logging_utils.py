"""Log output for the mdexport command line.

Library modules only create loggers under the ``mdexport`` namespace. The
CLI attaches its handlers to that package logger, so the root logger and
any handlers the host process installed there are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "mdexport"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a later call replaces only those
_HANDLER_NAME = "mdexport-cli"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name, INFO if unknown."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _add_handler(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def remove_cli_handlers(logger: Optional[logging.Logger] = None) -> None:
    """Detach and close the handlers a previous ``configure_logging`` added."""
    logger = logger or logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Send mdexport log records to stderr and optionally a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO")
    log_file : str, optional
        File that receives the same records, appended to
    trace_mode : bool, default False
        Use the verbose format with timestamps and logger names

    Returns
    -------
    logging.Logger
        The ``mdexport`` package logger

    """
    level = resolve_level(log_level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    remove_cli_handlers(logger)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    _add_handler(logger, logging.StreamHandler(sys.stderr), formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            _add_handler(logger, file_handler, formatter)
            logger.debug("Logging to file: %s", log_file)

    return logger


__all__ = ["PACKAGE_LOGGER", "configure_logging", "remove_cli_handlers", "resolve_level"]
