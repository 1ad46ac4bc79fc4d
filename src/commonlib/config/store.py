# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""XML-backed persistent config store.

The default file sits next to the running program as ``{name}_Config.xml``.
It can be moved with ``file_name`` (relative to the executable directory),
``path`` (anywhere) or the ``COMMONLIB_CONFIG`` environment variable.

Loading and saving never raise. A missing file is created with defaults, an
unreadable one yields defaults, and a failed save leaves the previous file in
place. Every failure is reported to the attached :class:`FileLogger`, if any,
and to the console logger.
"""

from __future__ import annotations

import enum
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from commonlib import pathing
from commonlib.logging import logger
from commonlib.serialization import SerializationError, XmlCodec

if TYPE_CHECKING:
    from collections.abc import Callable

    from commonlib.filelog import FileLogger

T = TypeVar("T")

ENV_OVERRIDE = "COMMONLIB_CONFIG"


class Codec(Protocol):
    """Pair of pure functions turning a config object into bytes and back."""

    def encode(self, value: Any) -> bytes:
        """Return the serialized form of ``value``."""

    def decode(self, data: bytes, cls: type[T]) -> T:
        """Return a ``cls`` instance parsed from ``data``."""


class StoreState(enum.Enum):
    """Lifecycle of a :class:`ConfigStore`."""

    UNLOADED = "unloaded"
    BOOTSTRAPPED = "bootstrapped"
    LOADED = "loaded"


def resolve_config_path(
    config_type: type | None = None,
    *,
    path: str | Path | None = None,
    file_name: str | None = None,
    suffix: str = pathing.DEFAULT_CONFIG_SUFFIX,
    ext: str = pathing.DEFAULT_CONFIG_EXT,
) -> str:
    """Resolve the config file path; ``""`` means no usable location.

    Precedence: ``path``, then ``file_name`` under the executable directory,
    then ``$COMMONLIB_CONFIG``, then :func:`pathing.default_config_path`.
    """
    if path:
        return str(Path(path).expanduser())
    if file_name:
        base_dir = pathing.executable_path()
        return os.path.join(base_dir, file_name) if base_dir else ""
    env_path = os.getenv(ENV_OVERRIDE)
    if env_path:
        return str(Path(env_path).expanduser())
    return pathing.default_config_path(config_type, suffix, ext)


class ConfigStore(Generic[T]):
    """Owns one configuration object and its file.

    Args:
        config_type (type[T]): Dataclass describing the file contents.
        path (str | Path | None): Fully qualified file path override.
        file_name (str | None): File name placed in the executable directory.
        suffix (str): Suffix of the derived default file name.
        ext (str): Extension of the derived default file name.
        factory (Callable[[], T] | None): Builds the default instance;
            defaults to calling ``config_type()``.
        codec (Codec | None): Serializer; defaults to strict XML.
        file_logger (FileLogger | None): Receives a line for each step and
            failure.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        config_type: type[T],
        *,
        path: str | Path | None = None,
        file_name: str | None = None,
        suffix: str = pathing.DEFAULT_CONFIG_SUFFIX,
        ext: str = pathing.DEFAULT_CONFIG_EXT,
        factory: Callable[[], T] | None = None,
        codec: Codec | None = None,
        file_logger: FileLogger | None = None,
    ) -> None:
        self.config_type = config_type
        self._factory: Callable[[], T] = factory or config_type
        self.codec: Codec = codec or XmlCodec()
        self.file_logger = file_logger
        self._path_options: dict[str, Any] = {
            "path": path,
            "file_name": file_name,
            "suffix": suffix,
            "ext": ext,
        }
        self._path: str | None = None
        self._config: T | None = None
        self.state = StoreState.UNLOADED

    @property
    def path(self) -> str:
        """Resolved config file path, ``""`` when no location is available."""
        if self._path is None:
            self._path = resolve_config_path(self.config_type, **self._path_options)
        return self._path

    @property
    def config(self) -> T:
        """The current configuration object, loading it on first access."""
        if self._config is None:
            return self.load()
        return self._config

    def new_default(self) -> T:
        """Return a freshly constructed default configuration."""
        return self._factory()

    def _report(self, message: str, exc: BaseException | None = None) -> None:
        if exc is None:
            logger.debug(message)
        else:
            logger.warning("%s: %s", message, exc)
        if self.file_logger is not None:
            if exc is None:
                self.file_logger.debug(message)
            else:
                self.file_logger.log(message, exc)

    def create_default(self) -> bool:
        """Write a default file if none exists; return True only if one was written."""
        target = self.path
        if self.state is StoreState.UNLOADED:
            self.state = StoreState.BOOTSTRAPPED
        if not target:
            self._report("Config location unavailable; using in-memory defaults")
            return False
        if os.path.exists(target):
            return False
        self._report(f"Creating default config file {target}")
        return self._write(self.new_default()) is not None

    def load(self) -> T:
        """Load the configuration, falling back to defaults on any failure."""
        target = self.path
        if not target or not os.path.exists(target):
            self.create_default()
            self._config = self.new_default()
            self.state = StoreState.LOADED
            return self._config

        self.state = StoreState.BOOTSTRAPPED
        try:
            with open(target, "rb") as f:
                data = f.read()
            loaded = self.codec.decode(data, self.config_type)
        except (OSError, SerializationError, ValueError) as e:
            self._report(f"Could not load config file {target}; using defaults", e)
            loaded = self.new_default()
        else:
            self._report(f"Loaded config file {target}")

        self._config = loaded
        self.state = StoreState.LOADED
        return loaded

    def save(self, value: T | None = None) -> Path | None:
        """Persist ``value`` (or the current object); return the path or None."""
        if value is not None:
            self._config = value
        current = self._config if self._config is not None else self.new_default()
        if not self.path:
            self._report("Config location unavailable; nothing saved")
            return None
        return self._write(current)

    def _write(self, value: T) -> Path | None:
        target = Path(self.path)
        try:
            data = self.codec.encode(value)
        except (SerializationError, ValueError) as e:
            self._report(f"Could not serialize config for {target}", e)
            return None
        try:
            atomic_write_bytes(target, data)
        except OSError as e:
            self._report(f"Could not save config file {target}", e)
            return None
        self._report(f"Saved config file {target}")
        return target


def atomic_write_bytes(target: Path, data: bytes) -> None:
    """Write ``data`` to ``target`` through a temp file and ``os.replace``.

    Readers see either the previous file or the complete new one. The temp
    file is removed if anything fails before the replace.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        with suppress(OSError):
            os.unlink(tmp_name)
        raise
