"""
Logging setup for Code Census.

Everything the tool logs goes through the ``code_census`` logger
hierarchy. ``setup_logging`` owns that logger's handlers: a RichHandler on
stderr and, optionally, a plain-text log file. The logger does not
propagate, so an embedding application's root handlers (or pytest's) never
receive duplicates and never suppress ours.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "code_census"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(verbose: bool) -> logging.Handler:
    # Paths may contain "[...]", which rich would read as markup
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATE_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Install the Code Census handlers, replacing any from a previous call.

    Args:
        verbose: Log per-file decisions (DEBUG)
        quiet: Only log errors; wins over ``verbose``
        log_file: Also append plain-text records to this file

    Returns:
        The ``code_census`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbose))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module logger under the ``code_census`` hierarchy (e.g. ``get_logger(__name__)``)."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
