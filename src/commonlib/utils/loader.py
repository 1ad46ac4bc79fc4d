# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Resolve ``package.module:ClassName`` references to classes."""

from __future__ import annotations

import dataclasses
import importlib


class TypeReferenceError(ValueError):
    """Raised when a type reference cannot be resolved to a dataclass."""


def load_config_type(reference: str) -> type:
    """Import and return the dataclass named by ``module:Class``.

    Args:
        reference (str): Reference such as ``myapp.settings:AppConfig``.
            Dotted attribute paths (``module:Outer.Inner``) are allowed.

    Returns:
        type: The referenced dataclass.

    Raises:
        TypeReferenceError: If the reference is malformed, the module or
            attribute is missing, or the target is not a dataclass.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Expected 'module:Class', got {reference!r}"
        raise TypeReferenceError(msg)

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Cannot import module {module_name!r}: {e}"
        raise TypeReferenceError(msg) from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            msg = f"{module_name!r} has no attribute {attr_path!r}"
            raise TypeReferenceError(msg) from e

    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        msg = f"{reference!r} is not a dataclass"
        raise TypeReferenceError(msg)
    return target
