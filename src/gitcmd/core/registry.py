# Author: PB
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/registry.py

"""
Built-in subcommand registry.

The registry is populated once at startup from a static list of handlers
and is read-only afterwards.
"""

from types import MappingProxyType
from typing import Iterable, Optional, Protocol, Sequence

import click
import typer
from loguru import logger

from gitcmd.core.types import ExecutionOutcome
from gitcmd.system.exceptions import RegistryError


class Subcommand(Protocol):
    """Interface every built-in handler satisfies."""

    name: str
    summary: str

    def run(self, args: Sequence[str], context) -> ExecutionOutcome:
        """Run with the forwarded arguments and return how it terminated.

        Args:
            args: Forwarded arguments, exactly as they followed the verb
            context: InvocationContext for this run

        Returns:
            ExecutionOutcome of the handler
        """
        ...


class TyperSubcommand:
    """Adapt a Typer app into a Subcommand.

    The forwarded arguments go to Click unmodified. Click usage errors are
    shown the way Click shows them and become a non-zero outcome; the
    command function may return None, an int, or an ExecutionOutcome.
    """

    def __init__(self, name: str, app: typer.Typer, summary: str):
        self.name = name
        self.app = app
        self.summary = summary

    def run(self, args: Sequence[str], context) -> ExecutionOutcome:
        command = typer.main.get_command(self.app)
        try:
            rv = command.main(
                args=list(args),
                prog_name=f"git-cmd {self.name}",
                standalone_mode=False,
                obj=context,
            )
        except click.ClickException as e:
            e.show()
            return ExecutionOutcome(exit_code=e.exit_code)
        except click.exceptions.Abort:
            click.echo("Aborted!", err=True)
            return ExecutionOutcome(exit_code=1)

        if isinstance(rv, ExecutionOutcome):
            return rv
        return ExecutionOutcome(exit_code=rv if isinstance(rv, int) else 0)

    def __repr__(self) -> str:
        return f"TyperSubcommand({self.name!r})"


class SubcommandRegistry:
    """Static mapping from verb to built-in handler."""

    def __init__(self, subcommands: Iterable[Subcommand]):
        entries: dict[str, Subcommand] = {}
        for subcommand in subcommands:
            if subcommand.name in entries:
                raise RegistryError(f"duplicate built-in verb: {subcommand.name}")
            entries[subcommand.name] = subcommand
        self._entries = MappingProxyType(entries)
        logger.debug(f"Registered built-ins: {', '.join(sorted(entries))}")

    def lookup(self, verb: str) -> Optional[Subcommand]:
        return self._entries.get(verb)

    def enumerate(self) -> list[tuple[str, str]]:
        """Return (verb, summary) pairs sorted by verb."""
        return [(verb, self._entries[verb].summary) for verb in sorted(self._entries)]

    def verbs(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, verb: object) -> bool:
        return verb in self._entries

    def __len__(self) -> int:
        return len(self._entries)
