"""
Logging configuration for Qualytics.

Library modules only create loggers under the ``qualytics`` namespace via
get_logger(). Handlers are attached by setup_logging(), which the CLI calls
once the effective AnalysisConfig is known, so ``verbosity`` and
``log_file`` from TOML files and QUALYTICS_* variables apply as well as the
command-line flags.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_CONFIG, AnalysisConfig

ROOT_LOGGER = "qualytics"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(verbose: bool) -> logging.Handler:
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(path: str) -> logging.Handler:
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(config: Optional[AnalysisConfig] = None) -> logging.Logger:
    """
    Attach handlers to the ``qualytics`` logger for one run.

    The level comes from ``config.verbosity``; ``config.log_file`` adds a
    plain-text file handler. Handlers from a previous call are closed and
    replaced, so repeated runs in one process never duplicate output.
    """
    config = config or DEFAULT_CONFIG
    level = LEVELS[config.verbosity]

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(config.verbosity == "verbose"))
    if config.log_file:
        logger.addHandler(_file_handler(config.log_file))
    logger.setLevel(level)

    logger.debug(f"Logging at {logging.getLevelName(level)} (verbosity={config.verbosity})")
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, always inside the ``qualytics`` namespace."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
