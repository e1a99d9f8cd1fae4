# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/cli/commands/actions.py

"""
Built-ins that run git itself.

Handles: init
"""

import shlex
import shutil
from pathlib import Path
from typing import Any, Optional

import typer

from gitcmd.core.git_init import GitInit, Hash, parse_shared
from gitcmd.core.registry import TyperSubcommand
from gitcmd.system.exceptions import ExecutionError

init_app = typer.Typer(add_completion=False)


def _find_git(inv) -> str:
    git = shutil.which("git", path=inv.environ.get("PATH"))
    if git is None:
        raise ExecutionError("cannot run git: not found on PATH", command="git")
    return git


@init_app.command()
def init_command(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Argument(None, help="Directory to initialise (default: current)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print error and warning messages"),
    bare: bool = typer.Option(False, "--bare", help="Create a bare repository"),
    template: Optional[Path] = typer.Option(None, "--template", help="Directory from which templates will be used"),
    initial_branch: Optional[str] = typer.Option(None, "--initial-branch", "-b", help="Name of the initial branch"),
    separate_git_dir: Optional[Path] = typer.Option(None, "--separate-git-dir", help="Put the repository here and leave a gitfile"),
    object_format: Optional[Hash] = typer.Option(None, "--object-format", case_sensitive=False, help="Object hash algorithm"),
    shared: Optional[str] = typer.Option(None, "--shared", help="umask, group, all, world, everybody, true, false or an octal mode"),
    print_only: bool = typer.Option(False, "--print", help="Print the git command instead of running it"),
) -> Any:
    """Create an empty git repository through git init."""
    inv = ctx.obj

    builder = GitInit(git="git" if print_only else _find_git(inv))
    if quiet:
        builder.quiet()
    if bare:
        builder.bare()
    if template is not None:
        builder.template(template)
    if initial_branch is not None:
        builder.initial_branch(initial_branch)
    if separate_git_dir is not None:
        builder.separate_git_dir(separate_git_dir)
    if object_format is not None:
        builder.object_format(object_format)
    if shared is not None:
        try:
            builder.shared(parse_shared(shared))
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="'--shared'")
    if directory is not None:
        builder.directory(directory)

    argv = builder.make_cmd()
    if print_only:
        typer.echo(shlex.join(argv))
        return 0
    return inv.runner.run(argv, env=inv.environ)


init_command_entry = TyperSubcommand("init", init_app, "Create an empty git repository")
