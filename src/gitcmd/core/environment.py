# Author: PB
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/environment.py

"""
Search path and child environment construction.

Subcommands can rely on these variables:

- GIT_CMD_VERSION: version of the dispatching git-cmd
- GIT_CMD_EXEC_PATH: extra directories searched before PATH
- GIT_CMD_DEBUG: "1" when run with --debug
- GIT_CMD_PAGINATE: "1" when run with --paginate
- GIT_PAGER / PAGER: "cat" when run with --no-pager

PATH is prefixed with the extra exec directories so that a subcommand
calling another ``git-cmd-*`` resolves it the same way the dispatcher did.
"""

import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from gitcmd.core.types import EngineFlag, ParsedCommand

EXEC_PATH_ENV = "GIT_CMD_EXEC_PATH"
VERSION_ENV = "GIT_CMD_VERSION"
DEBUG_ENV = "GIT_CMD_DEBUG"
PAGINATE_ENV = "GIT_CMD_PAGINATE"


def _split_path(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [entry for entry in value.split(os.pathsep) if entry]


def _dedupe(entries: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    ordered = []
    for entry in entries:
        if entry not in seen:
            seen.add(entry)
            ordered.append(entry)
    return ordered


def extra_exec_dirs(
    environ: Mapping[str, str],
    config_exec_path: Sequence[Path] = (),
    cli_exec_path: Optional[str] = None,
) -> list[str]:
    """Directories searched ahead of PATH, highest priority first.

    Order: --exec-path=<dir>, then GIT_CMD_EXEC_PATH, then config exec_path.
    """
    entries: list[str] = []
    if cli_exec_path:
        entries.append(cli_exec_path)
    entries.extend(_split_path(environ.get(EXEC_PATH_ENV)))
    entries.extend(str(p) for p in config_exec_path)
    return _dedupe(entries)


def build_search_path(
    environ: Mapping[str, str],
    config_exec_path: Sequence[Path] = (),
    cli_exec_path: Optional[str] = None,
) -> tuple[Path, ...]:
    """Full external-executable search path: extra dirs, then PATH.

    Empty PATH entries are dropped so the current directory is never
    searched implicitly.
    """
    extra = extra_exec_dirs(environ, config_exec_path, cli_exec_path)
    entries = _dedupe(extra + _split_path(environ.get("PATH")))
    return tuple(Path(entry) for entry in entries)


def build_child_environment(
    environ: Mapping[str, str],
    parsed: ParsedCommand,
    version: str,
    exec_dirs: Sequence[str] = (),
    extra_env: Optional[Mapping[str, str]] = None,
) -> dict[str, str]:
    """Environment for a subcommand: the parent's plus git-cmd context."""
    env = dict(environ)
    if extra_env:
        env.update(extra_env)

    env[VERSION_ENV] = version
    if exec_dirs:
        env[EXEC_PATH_ENV] = os.pathsep.join(exec_dirs)
        env["PATH"] = os.pathsep.join(_dedupe(list(exec_dirs) + _split_path(env.get("PATH"))))

    if parsed.has(EngineFlag.DEBUG):
        env[DEBUG_ENV] = "1"
    if parsed.has(EngineFlag.PAGINATE):
        env[PAGINATE_ENV] = "1"
    if parsed.has(EngineFlag.NO_PAGER):
        env["GIT_PAGER"] = "cat"
        env["PAGER"] = "cat"
    return env
