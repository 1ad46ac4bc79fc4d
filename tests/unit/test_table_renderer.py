# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Tests for table renderer UI component."""

from rich.console import Console

from commonlib.eyecandy.table_renderer import TableRenderer, flatten_fields

from ..test_utils import AppConfig, sample_app_config


class TestFlattenFields:
    """Test cases for flatten_fields."""

    def test_nested_fields_are_dotted(self):
        """Nested dataclass fields get a dotted key."""
        flat = flatten_fields(sample_app_config())
        assert flat["name"] == "UnitTest"
        assert flat["value"] == "999"
        assert flat["nested.description"] == "Nested object for unit test"

    def test_display_forms(self):
        """Booleans, enums, lists and None use readable forms."""
        flat = flatten_fields(AppConfig(debug=True, tags=["a", "b"]))
        assert flat["debug"] == "true"
        assert flat["nested.is_enabled"] == "false"
        assert flat["mode"] == "SAFE"
        assert flat["tags"] == "a, b"
        assert flat["note"] == "None"


class TestTableRenderer:
    """Test cases for TableRenderer class."""

    def test_render_key_values(self):
        """Test rendering key-value pairs displays panel correctly."""
        console = Console(record=True, width=200)
        renderer = TableRenderer(console)
        data = {"Executable File": "/opt/app/bin/app", "Program Name": "app"}

        renderer.render_key_values("Paths", data)

        output = console.export_text()
        assert "Paths" in output
        assert "/opt/app/bin/app" in output
        assert "Program Name" in output

    def test_render_key_values_unavailable(self):
        """Empty values are shown as unavailable."""
        console = Console(record=True, width=200)
        TableRenderer(console).render_key_values("Paths", {"Config File": ""})

        assert "(unavailable)" in console.export_text()

    def test_render_config(self):
        """Every field of the config appears in the panel."""
        console = Console(record=True, width=200)
        TableRenderer(console).render_config("AppConfig", sample_app_config())

        output = console.export_text()
        assert "AppConfig" in output
        assert "nested.is_enabled" in output
        assert "UnitTest" in output
