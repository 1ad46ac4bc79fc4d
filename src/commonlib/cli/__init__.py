# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for commonlib."""

from __future__ import annotations

import rich_click as click

from commonlib.__about__ import __version__
from commonlib.cli.commands import config, log, paths
from commonlib.logging import init_cli_logging, logger


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]}, invoke_without_command=True
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="commonlib")
def commonlib(*, verbose: bool) -> None:
    """commonlib - inspect the config and log files a program would use."""
    init_cli_logging(verbose=verbose)

    ctx = click.get_current_context()
    if ctx is None or ctx.invoked_subcommand is None:
        logger.info("commonlib - config and log file helpers")
        logger.info("Run 'commonlib --help' for available commands.")


# Register subcommands
commonlib.add_command(paths.paths)
commonlib.add_command(config.config)
commonlib.add_command(log.log_cmd, name="log")
