# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Main entry point for the commonlib CLI."""

import sys

if __name__ == "__main__":
    from commonlib.cli import commonlib

    sys.exit(commonlib(prog_name="commonlib"))
