# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Table renderer interface for the commonlib CLI."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def flatten_fields(obj: Any, prefix: str = "") -> dict[str, str]:
    """Flatten a dataclass instance into ``{"a.b": "value"}`` display pairs."""
    flat: dict[str, str] = {}
    for field in dataclasses.fields(obj):
        key = f"{prefix}{field.name}"
        value = getattr(obj, field.name)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            flat.update(flatten_fields(value, prefix=f"{key}."))
        elif isinstance(value, bool):
            flat[key] = "true" if value else "false"
        elif isinstance(value, enum.Enum):
            flat[key] = value.name
        elif isinstance(value, list):
            flat[key] = ", ".join(str(item) for item in value)
        else:
            flat[key] = str(value)
    return flat


class TableRenderer:
    """
    Declarative interface to render tabular data.

    Args:
        console (Console | None): Rich console instance for output
            (optional, creates default if None)

    Example: path listing and config fields as key-value panels.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_key_values(self, title: str, data: dict[str, Any]) -> None:
        """Render a key/value panel view."""
        table = Table(show_header=False, box=None, pad_edge=False)

        for key, value in data.items():
            shown = str(value) if value != "" else "(unavailable)"
            style = "white" if value != "" else "dim"
            table.add_row(Text(key, style="bold cyan"), Text(shown, style=style))

        panel = Panel(
            table, title=f"[bold blue]{title}[/bold blue]", border_style="blue", padding=(1, 2)
        )

        self.console.print(panel)

    def render_config(self, title: str, config: Any) -> None:
        """Render every field of a configuration dataclass, nested fields dotted."""
        self.render_key_values(title, flatten_fields(config))
