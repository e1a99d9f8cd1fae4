# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/system/display.py

# Standard library imports
import platform
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Mapping, Optional, Sequence

# Third-party imports
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local imports
from gitcmd.core.args import USAGE
from gitcmd.core.locator import TOOL_NAME


def commands_to_table(
    builtins: Sequence[tuple[str, str]],
    externals: Optional[Mapping[str, Path]] = None,
    aliases: Optional[Mapping[str, str]] = None,
) -> Table:
    """Convert built-ins, externals and aliases to a rich Table.

    Args:
        builtins: (verb, summary) pairs from the registry
        externals: verb -> executable path, omitted when None
        aliases: alias -> expansion, omitted when None

    Returns:
        Rich Table object ready for display
    """
    table = Table(box=None, show_header=True, pad_edge=False)
    table.add_column("Command", style="bold")
    table.add_column("Kind")
    table.add_column("Description")

    for verb, summary in builtins:
        table.add_row(escape(verb), "builtin", escape(summary))

    for verb, path in sorted((externals or {}).items()):
        table.add_row(escape(verb), "external", escape(str(path)))

    for name, expansion in sorted((aliases or {}).items()):
        table.add_row(escape(name), "alias", escape(f"alias for '{expansion}'"))

    return table


def display_help(
    console: Console,
    builtins: Sequence[tuple[str, str]],
    externals: Optional[Mapping[str, Path]] = None,
    aliases: Optional[Mapping[str, str]] = None,
) -> None:
    """Print usage and the command table."""
    console.print(escape(USAGE), highlight=False)
    console.print()
    console.print(commands_to_table(builtins, externals, aliases))
    console.print()
    if externals is None:
        console.print(
            f"External commands are found on PATH as '{TOOL_NAME}-<command>'; "
            f"'{TOOL_NAME} help --all' lists the ones available here.",
            highlight=False,
        )
    console.print(
        f"See '{TOOL_NAME} help <command>' to read about a specific command.",
        highlight=False,
    )


def paged(console: Console, enabled: bool):
    """Context manager: send console output through a pager when enabled."""
    return console.pager(styles=True) if enabled else nullcontext()


def display_version(console: Console, version: str, build_options: bool = False) -> None:
    console.print(f"{TOOL_NAME} version {escape(version)}", highlight=False)
    if build_options:
        console.print(f"python: {platform.python_version()}", highlight=False)
        console.print(f"implementation: {platform.python_implementation()}", highlight=False)
        console.print(f"platform: {sys.platform} {platform.machine()}", highlight=False)
