# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/cli/main.py

"""
Console entry point for git-cmd.

The top level is not a Typer app: argv after the verb has to reach the
subcommand untouched, so the Dispatcher parses it. Built-ins are Typer apps
and get their arguments from the dispatcher.
"""

# Standard library imports
import sys
from typing import Optional, Sequence

# Local imports
from gitcmd.cli.commands import BUILTIN_COMMANDS
from gitcmd.core.dispatcher import Dispatcher
from gitcmd.core.registry import SubcommandRegistry


def build_registry() -> SubcommandRegistry:
    return SubcommandRegistry(BUILTIN_COMMANDS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run git-cmd with ``argv`` (default: sys.argv[1:]) and return the exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    return Dispatcher(build_registry()).run(argv)


def cli_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
