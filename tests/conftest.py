"""Test configuration and global fixtures for commonlib tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from pathlib import Path

import pytest

from commonlib import pathing


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop commonlib environment overrides so tests see the defaults."""
    for name in ("COMMONLIB_CONFIG", "COMMONLIB_LOG_DIR", "COMMONLIB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_executable(monkeypatch, tmp_path) -> Path:
    """Pretend the running program is ``<tmp>/app/bin/myapp.py``."""
    exe_dir = tmp_path / "app" / "bin"
    exe_dir.mkdir(parents=True)
    exe_file = exe_dir / "myapp.py"
    monkeypatch.setattr(pathing, "executable_file", lambda: str(exe_file))
    return exe_file


@pytest.fixture
def no_executable(monkeypatch):
    """Pretend the executable location cannot be determined."""
    monkeypatch.setattr(pathing, "executable_file", lambda: "")


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Directory for dated log files."""
    return tmp_path / "Logs"


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Path of a config file that does not exist yet."""
    return tmp_path / "conf" / "unit_test_config.xml"
