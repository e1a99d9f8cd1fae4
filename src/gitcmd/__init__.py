# Author: PB
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/__init__.py

"""git-cmd: extend git with built-in and external subcommands."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-cmd")
except PackageNotFoundError:
    __version__ = "unknown"
