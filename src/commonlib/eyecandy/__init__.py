# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Eyecandy UI abstractions for the commonlib CLI.

Rich-based rendering of paths and configuration fields.
"""

from commonlib.eyecandy.table_renderer import TableRenderer, flatten_fields

__all__ = ["TableRenderer", "flatten_fields"]
