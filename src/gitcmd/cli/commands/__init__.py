# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/cli/commands/__init__.py

"""
Built-in subcommands, registered statically.

- info: read-only commands (help, version, list, which)
- actions: commands that run git (init)

To add a built-in, write a Typer app, wrap it in TyperSubcommand and append
it to BUILTIN_COMMANDS.
"""

from gitcmd.cli.commands.actions import init_command_entry
from gitcmd.cli.commands.info import (
    help_command_entry,
    list_command_entry,
    version_command_entry,
    which_command_entry,
)

BUILTIN_COMMANDS = (
    help_command_entry,
    init_command_entry,
    list_command_entry,
    version_command_entry,
    which_command_entry,
)
