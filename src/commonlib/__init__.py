# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""commonlib - a log file and an XML config file for any program, in one line."""

from __future__ import annotations

from commonlib.__about__ import __version__
from commonlib.bootstrap import Initialization
from commonlib.config.store import ConfigStore, StoreState
from commonlib.filelog import AsyncFileLogger, FileLogger, LogLevel

__all__ = [
    "AsyncFileLogger",
    "ConfigStore",
    "FileLogger",
    "Initialization",
    "LogLevel",
    "StoreState",
    "__version__",
]
