# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/cli/commands/info.py

"""
Read-only built-ins: help, version, list, which.

None of these spawn processes. They read the registry, the locator and the
config from the InvocationContext passed as ``ctx.obj``.
"""

from typing import Any, Optional

import orjson
import typer

from gitcmd.core.locator import resolve_target
from gitcmd.core.registry import TyperSubcommand
from gitcmd.core.types import BuiltIn
from gitcmd.system.display import display_help, display_version, paged
from gitcmd.system.exceptions import CommandNotFound


def _aliases(inv) -> dict[str, str]:
    return dict(inv.config.aliases) if inv.config is not None else {}


# =============================================================================
# help
# =============================================================================

help_app = typer.Typer(add_completion=False)


@help_app.command()
def help_command(
    ctx: typer.Context,
    verb: Optional[str] = typer.Argument(None, help="Command to describe"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Also list external commands and aliases"),
) -> Any:
    """Display help about git-cmd or one of its commands."""
    inv = ctx.obj

    if verb is None:
        externals = inv.locator.discover() if show_all else None
        aliases = _aliases(inv) if show_all else None
        with paged(inv.console, inv.paginate):
            display_help(inv.console, inv.registry.enumerate(), externals, aliases)
        return 0

    handler = inv.registry.lookup(verb)
    if handler is not None:
        return handler.run(["--help"], inv)

    path = inv.locator.locate(verb)
    if path is not None:
        typer.echo(f"'{verb}' is an external command: {path}")
        typer.echo(f"Run 'git-cmd {verb} --help' for its usage.")
        return 0

    expansion = _aliases(inv).get(verb)
    if expansion is not None:
        typer.echo(f"'{verb}' is aliased to '{expansion}'")
        return 0

    raise CommandNotFound(verb)


# =============================================================================
# version
# =============================================================================

version_app = typer.Typer(add_completion=False)


@version_app.command()
def version_command(
    ctx: typer.Context,
    build_options: bool = typer.Option(False, "--build-options", help="Also show interpreter and platform"),
) -> Any:
    """Show the git-cmd version."""
    inv = ctx.obj
    display_version(inv.console, inv.version, build_options=build_options)
    return 0


# =============================================================================
# list
# =============================================================================

list_app = typer.Typer(add_completion=False)


def collect_commands(inv, builtins: bool, externals: bool, aliases: bool) -> list[dict[str, str]]:
    """Commands that can actually be invoked, in resolution order.

    Externals shadowed by a built-in and aliases shadowed by either are
    left out.
    """
    entries: list[dict[str, str]] = []
    registered = set(inv.registry.verbs())
    discovered = inv.locator.discover() if (externals or aliases) else {}

    if builtins:
        for verb, summary in inv.registry.enumerate():
            entries.append({"name": verb, "kind": "builtin", "summary": summary})
    if externals:
        for verb, path in sorted(discovered.items()):
            if verb not in registered:
                entries.append({"name": verb, "kind": "external", "path": str(path)})
    if aliases:
        for name, expansion in sorted(_aliases(inv).items()):
            if name not in registered and name not in discovered:
                entries.append({"name": name, "kind": "alias", "expansion": expansion})
    return entries


@list_app.command()
def list_command(
    ctx: typer.Context,
    builtins: bool = typer.Option(False, "--builtins", help="List built-in commands"),
    externals: bool = typer.Option(False, "--externals", help="List external commands found on the search path"),
    aliases: bool = typer.Option(False, "--aliases", help="List configured aliases"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON"),
) -> Any:
    """List available commands, one per line. Without filters, list everything."""
    inv = ctx.obj
    if not (builtins or externals or aliases):
        builtins = externals = aliases = True

    entries = collect_commands(inv, builtins, externals, aliases)
    if to_json:
        typer.echo(orjson.dumps(entries, option=orjson.OPT_INDENT_2).decode())
    else:
        for entry in entries:
            typer.echo(entry["name"])
    return 0


# =============================================================================
# which
# =============================================================================

which_app = typer.Typer(add_completion=False)


@which_app.command()
def which_command(
    ctx: typer.Context,
    verb: str = typer.Argument(..., help="Command to resolve"),
) -> Any:
    """Show what a command resolves to, without running it."""
    inv = ctx.obj
    try:
        target = resolve_target(verb, inv.registry, inv.locator)
    except CommandNotFound:
        expansion = _aliases(inv).get(verb)
        if expansion is None:
            raise
        typer.echo(f"alias: {expansion}")
        return 0

    if isinstance(target, BuiltIn):
        typer.echo("builtin")
    else:
        typer.echo(str(target.path))
    return 0


help_command_entry = TyperSubcommand("help", help_app, "Display help about git-cmd and its commands")
version_command_entry = TyperSubcommand("version", version_app, "Show the git-cmd version")
list_command_entry = TyperSubcommand("list", list_app, "List built-in, external and alias commands")
which_command_entry = TyperSubcommand("which", which_app, "Show what a command resolves to")
