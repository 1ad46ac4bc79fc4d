# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Dated, level-filtered application log files.

Each :class:`FileLogger` appends lines of the form::

    2025-01-31 14:05:09.1234 [WRN] - disk almost full

to ``{log_dir}/{yyyyMMdd}.log``. The file name is fixed when the logger is
created, so a process started on a new day writes a new file; old files are
never rotated or removed. Writing is best effort: a failure is reported on the
console logger and otherwise ignored.
"""

from __future__ import annotations

import asyncio
import enum
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from commonlib import pathing
from commonlib.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable

LOG_DIR_ENV = "COMMONLIB_LOG_DIR"
LOG_FILE_EXT = ".log"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class LogLevel(enum.IntEnum):
    """Severity levels, most severe last; values line up with :mod:`logging`."""

    TODO = 1
    TRACE = 5
    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    ALERT = 55
    FATAL = 60

    @property
    def code(self) -> str:
        """Three-letter code written into each log line."""
        return _LEVEL_CODES[self]

    @classmethod
    def parse(cls, value: str | int | LogLevel) -> LogLevel:
        """Return the level for a name (``"warning"``), code (``"WRN"``) or number."""
        if isinstance(value, int):
            return cls(value)
        if not isinstance(value, str):
            msg = f"Unknown log level: {value!r}"
            raise ValueError(msg)
        text = value.strip().upper()
        if text in cls.__members__:
            return cls[text]
        for level, code in _LEVEL_CODES.items():
            if code == text:
                return level
        msg = f"Unknown log level: {value!r}"
        raise ValueError(msg)


_LEVEL_CODES = {
    LogLevel.TODO: "TDO",
    LogLevel.TRACE: "TRC",
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.NOTICE: "NTC",
    LogLevel.WARNING: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.CRITICAL: "CRT",
    LogLevel.ALERT: "ALT",
    LogLevel.FATAL: "FTL",
}


def resolve_log_dir(log_dir: str | Path | None) -> str:
    """Return ``log_dir``, else ``$COMMONLIB_LOG_DIR``, else the default Logs directory."""
    if log_dir:
        return str(Path(log_dir).expanduser())
    env_dir = os.getenv(LOG_DIR_ENV)
    if env_dir:
        return str(Path(env_dir).expanduser())
    return pathing.log_directory()


def _coerce_level(level: LogLevel | str | int) -> LogLevel | None:
    try:
        return LogLevel.parse(level)
    except ValueError as e:
        logger.warning("Dropping log message: %s", e)
        return None


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create log directory %s: %s", directory, e)


def format_line(stamp: datetime, level: LogLevel, message: str) -> str:
    """Return one log line (without newline) for ``message``."""
    # %f is microseconds; the line carries four fractional digits
    return f"{stamp.strftime(TIMESTAMP_FORMAT)[:-2]} [{level.code}] - {message}"


class FileLogger:
    """Append-only logger writing one dated file per day.

    Args:
        threshold (LogLevel): Least severe level that is still written.
        log_dir (str | Path | None): Directory for log files. Defaults to
            ``$COMMONLIB_LOG_DIR`` and then to ``Logs`` beside the executable
            directory.
        clock (Callable[[], datetime]): Source of timestamps and of the file date.
    """

    def __init__(
        self,
        threshold: LogLevel | str | int = LogLevel.TRACE,
        log_dir: str | Path | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.threshold = LogLevel.parse(threshold)
        self._clock = clock
        self._lock = threading.Lock()

        directory = resolve_log_dir(log_dir)
        self.file_path: Path | None = None
        if directory:
            self.file_path = Path(directory) / f"{clock():%Y%m%d}{LOG_FILE_EXT}"
            _ensure_directory(self.file_path.parent)
        else:
            logger.debug("Log directory unknown; file logging disabled")

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return True if a message at ``level`` would be written."""
        return self.file_path is not None and level >= self.threshold

    def _write_line(self, line: str) -> None:
        path = self.file_path
        if path is None:
            return
        with self._lock:
            try:
                with open(path, "a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(line + "\n")
            except OSError as e:
                logger.debug("Could not write to log file %s: %s", path, e)

    def append(self, message: str, level: LogLevel | str = LogLevel.INFO) -> None:
        """Write ``message`` at ``level`` if it passes the threshold.

        An unknown ``level`` drops the message with a console warning.
        """
        parsed = _coerce_level(level)
        if parsed is None or not self.is_enabled_for(parsed):
            return
        self._write_line(format_line(self._clock(), parsed, message))

    def log(self, status: str, exc: BaseException | None = None) -> Any:
        """Write ``status``, followed by the exception when one is given."""
        if exc is None:
            return self.append(status, LogLevel.INFO)
        return self.append(f"{status}, {type(exc).__name__}: {exc}", LogLevel.ERROR)

    def fatal(self, message: str) -> Any:
        """Write ``message`` at FATAL."""
        return self.append(message, LogLevel.FATAL)

    def alert(self, message: str) -> Any:
        """Write ``message`` at ALERT."""
        return self.append(message, LogLevel.ALERT)

    def critical(self, message: str) -> Any:
        """Write ``message`` at CRITICAL."""
        return self.append(message, LogLevel.CRITICAL)

    def error(self, message: str) -> Any:
        """Write ``message`` at ERROR."""
        return self.append(message, LogLevel.ERROR)

    def warning(self, message: str) -> Any:
        """Write ``message`` at WARNING."""
        return self.append(message, LogLevel.WARNING)

    def notice(self, message: str) -> Any:
        """Write ``message`` at NOTICE."""
        return self.append(message, LogLevel.NOTICE)

    def info(self, message: str) -> Any:
        """Write ``message`` at INFO."""
        return self.append(message, LogLevel.INFO)

    def debug(self, message: str) -> Any:
        """Write ``message`` at DEBUG."""
        return self.append(message, LogLevel.DEBUG)

    def trace(self, message: str) -> Any:
        """Write ``message`` at TRACE."""
        return self.append(message, LogLevel.TRACE)

    def todo(self, message: str) -> Any:
        """Write ``message`` at TODO."""
        return self.append(message, LogLevel.TODO)


class AsyncFileLogger(FileLogger):
    """FileLogger whose ``append`` is a coroutine.

    Waiting for the write section and the file write itself happen without
    blocking the event loop. The level helpers return awaitables here, so
    ``await log.warning("...")`` works as expected.
    """

    def __init__(
        self,
        threshold: LogLevel | str | int = LogLevel.TRACE,
        log_dir: str | Path | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(threshold, log_dir, clock=clock)
        self._async_lock = asyncio.Lock()

    async def append(self, message: str, level: LogLevel | str = LogLevel.INFO) -> None:
        """Write ``message`` at ``level`` if it passes the threshold."""
        parsed = _coerce_level(level)
        if parsed is None or not self.is_enabled_for(parsed):
            return
        line = format_line(self._clock(), parsed, message)
        async with self._async_lock:
            await asyncio.to_thread(self._write_line, line)
