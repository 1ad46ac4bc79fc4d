# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""One-line startup: a dated log file plus a loaded XML configuration.

Create one :class:`Initialization` when the program starts and pass it (or its
``configuration``) to whatever needs it::

    init = Initialization(AppConfig)
    init.logger.info("starting")
    init.configuration.retries += 1
    init.save_configuration()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from commonlib.config.store import ConfigStore
from commonlib.filelog import FileLogger, LogLevel

if TYPE_CHECKING:
    from pathlib import Path

T = TypeVar("T")


class Initialization(Generic[T]):
    """Logger, config store and loaded configuration for one program.

    Args:
        config_type (type[T]): Dataclass describing the configuration file.
        threshold (LogLevel | str): Least severe level written to the log file.
        log_dir (str | Path | None): Log directory override.
        config_path (str | Path | None): Config file path override.
        config_file_name (str | None): Config file name in the executable directory.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        config_type: type[T],
        *,
        threshold: LogLevel | str = LogLevel.TRACE,
        log_dir: str | Path | None = None,
        config_path: str | Path | None = None,
        config_file_name: str | None = None,
    ) -> None:
        self.logger = FileLogger(threshold, log_dir)
        self.store: ConfigStore[T] = ConfigStore(
            config_type,
            path=config_path,
            file_name=config_file_name,
            file_logger=self.logger,
        )
        self.store.load()

    @property
    def configuration(self) -> T:
        """The loaded configuration; change its fields, then save."""
        return self.store.config

    @property
    def config_path(self) -> str:
        """Where the configuration is read from and saved to."""
        return self.store.path

    def save_configuration(self) -> Path | None:
        """Persist the current configuration; return the path or None on failure."""
        return self.store.save()
