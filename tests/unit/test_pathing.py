"""Tests for executable-relative path resolution."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import os
import sys
import types

from commonlib import pathing

from ..test_utils import AppConfig


class TestExecutableLocation:
    """Test suite for locating the running program."""

    def test_uses_main_module_file(self, monkeypatch, tmp_path):
        """The entry file comes from ``__main__.__file__`` when present."""
        script = tmp_path / "tool.py"
        fake_main = types.ModuleType("__main__")
        fake_main.__file__ = str(script)
        monkeypatch.setitem(sys.modules, "__main__", fake_main)
        monkeypatch.delattr(sys, "frozen", raising=False)

        assert pathing.executable_file() == str(script)
        assert pathing.executable_path() == str(tmp_path)
        assert pathing.executable_name() == "tool"

    def test_frozen_program_uses_sys_executable(self, monkeypatch, tmp_path):
        """Frozen bundles report the bundle executable."""
        exe = tmp_path / "bundle" / "app.exe"
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(exe))

        assert pathing.executable_file() == str(exe)
        assert pathing.executable_name() == "app"

    def test_falls_back_to_argv(self, monkeypatch, tmp_path):
        """Without a main module file, ``sys.argv[0]`` is used."""
        script = tmp_path / "run.py"
        monkeypatch.setitem(sys.modules, "__main__", types.ModuleType("__main__"))
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", [str(script)])

        assert pathing.executable_file() == str(script)

    def test_interactive_session_is_unknown(self, monkeypatch):
        """``python -c`` and the REPL yield empty paths instead of errors."""
        monkeypatch.setitem(sys.modules, "__main__", types.ModuleType("__main__"))
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", ["-c"])

        assert pathing.executable_file() == ""
        assert pathing.executable_path() == ""
        assert pathing.executable_name() == ""
        assert pathing.log_directory() == ""


class TestDefaultConfigPath:
    """Test suite for derived config file names."""

    def test_default_name_uses_program_name(self, fake_executable):
        """Without a type, the file is named after the entry file."""
        expected = os.path.join(str(fake_executable.parent), "myapp_Config.xml")
        assert pathing.default_config_path() == expected

    def test_type_in_package_uses_top_level_package(self, fake_executable):
        """A type defined in a package names the file after that package."""
        path = pathing.default_config_path(AppConfig)
        assert path == os.path.join(str(fake_executable.parent), "tests_Config.xml")

    def test_type_in_main_uses_program_name(self, fake_executable):
        """Types defined in ``__main__`` fall back to the entry file name."""
        main_type = type("MainConfig", (), {"__module__": "__main__"})
        assert pathing.default_config_path(main_type).endswith("myapp_Config.xml")

    def test_custom_suffix_and_extension(self, fake_executable):
        """Suffix and extension are configurable; a leading period is tolerated."""
        assert pathing.default_config_path(None, "_Settings", ".cfg").endswith(
            "myapp_Settings.cfg"
        )

    def test_path_is_deterministic(self, fake_executable):
        """Repeated calls in one process return identical strings."""
        first = pathing.default_config_path(AppConfig)
        second = pathing.default_config_path(AppConfig)
        assert first == second

    def test_unknown_executable_yields_empty_path(self, no_executable):
        """Callers get an empty string, not an exception."""
        assert pathing.default_config_path(AppConfig) == ""


class TestOtherLocations:
    """Test suite for log and profile directories."""

    def test_log_directory_is_sibling_logs(self, fake_executable):
        """Logs live one level above the executable directory."""
        expected = os.path.join(str(fake_executable.parent.parent), "Logs")
        assert pathing.log_directory() == expected

    def test_user_profile_path(self, monkeypatch, tmp_path):
        """The user profile is the home directory."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert pathing.user_profile_path() == str(tmp_path)
