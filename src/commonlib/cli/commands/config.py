# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Configuration file commands.

Each command takes the configuration dataclass as ``module:Class`` and works
on the file a program using that class would read.
"""

from __future__ import annotations

import os

import rich_click as click

from commonlib.config.store import ConfigStore
from commonlib.eyecandy.table_renderer import TableRenderer
from commonlib.logging import logger
from commonlib.serialization import SerializationError, read_xml
from commonlib.utils.loader import TypeReferenceError, load_config_type


def resolve_type_option(type_ref: str) -> type:
    """Load ``type_ref`` or fail the command with a readable message."""
    try:
        return load_config_type(type_ref)
    except TypeReferenceError as e:
        raise click.ClickException(str(e)) from e


def _build_store(type_ref: str, path: str | None, file_name: str | None) -> ConfigStore:
    return ConfigStore(resolve_type_option(type_ref), path=path, file_name=file_name)


_path_option = click.option("--path", "-p", help="Fully qualified config file path")
_file_name_option = click.option(
    "--file-name", "-f", help="Config file name inside the executable directory"
)


@click.group()
def config() -> None:
    """Create, show and check XML configuration files."""


@config.command()
@click.argument("type_ref", metavar="TYPE")
@_path_option
@_file_name_option
@click.option("--force", is_flag=True, help="Overwrite an existing file with defaults")
def init(type_ref: str, path: str | None, file_name: str | None, *, force: bool) -> None:
    """Write a configuration file holding the defaults of TYPE."""
    store = _build_store(type_ref, path, file_name)
    if not store.path:
        msg = "Config location unavailable; pass --path"
        raise click.ClickException(msg)

    if os.path.exists(store.path) and not force:
        logger.info("Config file already exists: %s", store.path)
        click.echo(store.path)
        return

    written = store.save(store.new_default())
    if written is None:
        msg = f"Could not write config file {store.path}"
        raise click.ClickException(msg)
    logger.info("✅ Wrote default config: %s", written)
    click.echo(str(written))


@config.command()
@click.argument("type_ref", metavar="TYPE")
@_path_option
@_file_name_option
def show(type_ref: str, path: str | None, file_name: str | None) -> None:
    """Load the configuration of TYPE (defaults on failure) and display it."""
    store = _build_store(type_ref, path, file_name)
    loaded = store.load()
    TableRenderer().render_config(store.config_type.__name__, loaded)


@config.command()
@click.argument("type_ref", metavar="TYPE")
@_path_option
@_file_name_option
@click.option("--permissive", is_flag=True, help="Ignore unknown elements and attributes")
def check(type_ref: str, path: str | None, file_name: str | None, *, permissive: bool) -> None:
    """Fail if the configuration file of TYPE would fall back to defaults."""
    store = _build_store(type_ref, path, file_name)
    if not store.path:
        msg = "Config location unavailable; pass --path"
        raise click.ClickException(msg)

    try:
        read_xml(store.path, store.config_type, strict=not permissive)
    except (OSError, SerializationError) as e:
        raise click.ClickException(f"{store.path}: {e}") from e
    click.echo(f"✅ {store.path} is valid")
