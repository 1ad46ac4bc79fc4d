# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Show the filesystem locations derived from the running program."""

from __future__ import annotations

import rich_click as click

from commonlib import pathing
from commonlib.cli.commands.config import resolve_type_option
from commonlib.config.store import resolve_config_path
from commonlib.eyecandy.table_renderer import TableRenderer
from commonlib.filelog import resolve_log_dir


@click.command()
@click.option("--type", "type_ref", help="Config dataclass as 'module:Class'")
def paths(type_ref: str | None) -> None:
    """Show executable, config file and log directory paths."""
    config_type = resolve_type_option(type_ref) if type_ref else None

    data = {
        "Executable File": pathing.executable_file(),
        "Executable Path": pathing.executable_path(),
        "Program Name": pathing.executable_name(),
        "Config File": resolve_config_path(config_type),
        "Log Directory": resolve_log_dir(None),
        "User Profile": pathing.user_profile_path(),
    }
    TableRenderer().render_key_values("Paths", data)
