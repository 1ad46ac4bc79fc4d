# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Filesystem locations derived from the running program.

Every helper returns a plain string. An empty string means the location could
not be determined (interactive interpreter, ``python -c``, embedded hosts) and
callers must not attempt file I/O with it.
"""

from __future__ import annotations

import os
import sys

DEFAULT_CONFIG_SUFFIX = "_Config"
DEFAULT_CONFIG_EXT = "xml"
LOGS_DIRNAME = "Logs"

# argv[0] placeholders that do not name a file
_NON_FILE_ARGV = ("", "-c", "-m", "-")


def executable_file() -> str:
    """Return the absolute path of the program's entry file, or ``""``."""
    if getattr(sys, "frozen", False):
        return os.path.abspath(sys.executable)

    main_module = sys.modules.get("__main__")
    main_file = getattr(main_module, "__file__", None)
    if main_file:
        return os.path.abspath(main_file)

    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 not in _NON_FILE_ARGV:
        return os.path.abspath(argv0)
    return ""


def executable_path() -> str:
    """Return the directory holding the entry file, or ``""``."""
    entry = executable_file()
    if not entry:
        return ""
    return os.path.dirname(entry)


def executable_name() -> str:
    """Return the entry file name without its extension, or ``""``."""
    entry = executable_file()
    if not entry:
        return ""
    return os.path.splitext(os.path.basename(entry))[0]


def type_identity_name(config_type: type | None) -> str:
    """Return the file-name stem used for ``config_type``'s config file.

    A type defined inside a package is named after its top-level package, the
    closest thing Python has to the assembly a type ships in. Types defined in
    ``__main__`` (or no type at all) fall back to the entry file name.
    """
    module_name = getattr(config_type, "__module__", None) if config_type else None
    if not module_name or module_name == "__main__":
        return executable_name()
    return module_name.split(".", 1)[0]


def default_config_path(
    config_type: type | None = None,
    suffix: str = DEFAULT_CONFIG_SUFFIX,
    ext: str = DEFAULT_CONFIG_EXT,
) -> str:
    """Return ``{executable_path}/{name}{suffix}.{ext}`` for ``config_type``.

    Args:
        config_type (type | None): Configuration class the file belongs to.
        suffix (str): Appended to the name before the extension.
        ext (str): File type without a leading period.

    Returns:
        str: Absolute config file path, or ``""`` when the executable location
        is unknown.
    """
    base_dir = executable_path()
    name = type_identity_name(config_type)
    if not base_dir or not name:
        return ""
    return os.path.join(base_dir, f"{name}{suffix}.{ext.lstrip('.')}")


def log_directory() -> str:
    """Return the ``Logs`` directory one level above the executable directory."""
    base_dir = executable_path()
    if not base_dir:
        return ""
    return os.path.normpath(os.path.join(base_dir, os.pardir, LOGS_DIRNAME))


def user_profile_path() -> str:
    """Return the current user's home directory."""
    return os.path.expanduser("~")
