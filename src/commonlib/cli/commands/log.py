# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Append a line to today's log file."""

from __future__ import annotations

import rich_click as click

from commonlib.filelog import FileLogger, LogLevel

_LEVEL_NAMES = [level.name for level in sorted(LogLevel, reverse=True)]


@click.command("log")
@click.argument("message")
@click.option(
    "--level",
    "-l",
    type=click.Choice(_LEVEL_NAMES, case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Severity of the message",
)
@click.option(
    "--threshold",
    "-t",
    type=click.Choice(_LEVEL_NAMES, case_sensitive=False),
    default="TRACE",
    show_default=True,
    help="Least severe level that is written",
)
@click.option("--log-dir", help="Directory for the dated log file")
def log_cmd(message: str, level: str, threshold: str, log_dir: str | None) -> None:
    """Append MESSAGE to the dated log file."""
    file_logger = FileLogger(threshold, log_dir)
    severity = LogLevel.parse(level)

    if file_logger.file_path is None:
        msg = "Log directory unavailable; pass --log-dir"
        raise click.ClickException(msg)
    if not file_logger.is_enabled_for(severity):
        click.echo(f"Dropped {severity.name} message below threshold {file_logger.threshold.name}")
        return

    file_logger.append(message, severity)
    click.echo(str(file_logger.file_path))
