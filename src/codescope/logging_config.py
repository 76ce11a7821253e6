"""
Logging setup for codescope.

Analyzers log through ``get_logger(__name__)``; nothing is configured until
the CLI calls ``setup_logging``. Log records go to stderr through a rich
handler, so ``--format json`` output on stdout stays parseable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "codescope"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    # quiet wins over verbose
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route codescope logs to stderr, and optionally to a file.

    Skipped files and parse fallbacks are logged at WARNING and DEBUG, so
    the default level shows skipped files only.

    Args:
        verbose: Also show DEBUG records (parse fallbacks, per-file scores)
        quiet: Show ERROR records only
        log_file: Append plain-text records to this file as well

    Returns:
        The top-level codescope logger
    """
    level = _level_for(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # file paths may contain [brackets]
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # replaces handlers installed by an earlier call in the same process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger under the codescope namespace.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; any other name is nested under ``codescope.``.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
