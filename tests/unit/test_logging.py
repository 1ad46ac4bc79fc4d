"""Tests for console logging setup."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import logging

import pytest
from rich.logging import RichHandler

from commonlib.logging import console_level, init_cli_logging, logger


class TestConsoleLevel:
    """Test suite for choosing the console level."""

    def test_verbose_flag(self):
        """Without the environment variable the flag decides."""
        assert console_level(verbose=False) == "INFO"
        assert console_level(verbose=True) == "DEBUG"

    def test_environment_wins(self, monkeypatch):
        """COMMONLIB_LOG_LEVEL overrides the flag."""
        monkeypatch.setenv("COMMONLIB_LOG_LEVEL", " warning ")
        assert console_level(verbose=True) == "WARNING"

    @pytest.mark.parametrize("value", ["", "NOTICE", "loud"])
    def test_invalid_environment_is_ignored(self, monkeypatch, value):
        """Unknown values fall back to the flag."""
        monkeypatch.setenv("COMMONLIB_LOG_LEVEL", value)
        assert console_level(verbose=True) == "DEBUG"


class TestInitCliLogging:
    """Test suite for the CLI logging hook."""

    def test_installs_rich_handler(self, monkeypatch):
        """The root logger gets a rich handler at the chosen level."""
        monkeypatch.setenv("COMMONLIB_LOG_LEVEL", "ERROR")
        configured = init_cli_logging(verbose=True)

        assert configured is logger
        assert logger.level == logging.ERROR
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)
