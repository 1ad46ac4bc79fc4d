# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Configuration helpers for commonlib."""

from __future__ import annotations

from commonlib.config.store import (  # re-export
    ConfigStore,
    StoreState,
    atomic_write_bytes,
    resolve_config_path,
)

__all__ = [
    "ConfigStore",
    "StoreState",
    "atomic_write_bytes",
    "resolve_config_path",
]
