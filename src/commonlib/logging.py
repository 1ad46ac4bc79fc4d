# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Console diagnostics for commonlib.

The config store and file logger report their own failures here, on the
``commonlib`` logger, because they never raise. The dated application log
file is a separate channel, see :mod:`commonlib.filelog`.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "commonlib"
LOG_LEVEL_ENV = "COMMONLIB_LOG_LEVEL"
_CONSOLE_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Route console diagnostics through a rich handler on stderr.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR or CRITICAL; anything else
            means INFO.

    Returns:
        The ``commonlib`` logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Config values and paths may contain square brackets
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    handler.setLevel(numeric_level)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    logger.setLevel(numeric_level)
    return logger


def console_level(*, verbose: bool = False) -> str:
    """Return the console level: ``$COMMONLIB_LOG_LEVEL`` if valid, else by ``verbose``."""
    env_level = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if env_level in _CONSOLE_LEVELS:
        return env_level
    return "DEBUG" if verbose else "INFO"


def init_cli_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure console logging for a ``commonlib`` command."""
    return setup_logging(console_level(verbose=verbose))
