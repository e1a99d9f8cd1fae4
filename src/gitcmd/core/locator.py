# Author: PB
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/locator.py

"""
Resolution of a verb to a built-in handler or an external executable.

The search path is an explicit input so resolution is deterministic and can
be exercised against a temporary directory. Nothing here executes anything.
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from gitcmd.core.registry import SubcommandRegistry
from gitcmd.core.types import BuiltIn, External, ResolvedTarget
from gitcmd.system.exceptions import CommandNotFound

TOOL_NAME = "git-cmd"


def is_valid_verb(verb: str) -> bool:
    """A verb can name an external only if it is a plain file-name fragment."""
    if not verb or verb.startswith("-"):
        return False
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    return not any(sep in verb for sep in separators)


class ExecutableLocator:
    """Find ``<prefix>-<verb>`` executables on a search path."""

    def __init__(self, search_path: Sequence[Path], prefix: str = TOOL_NAME):
        self.search_path = tuple(Path(p) for p in search_path)
        self.prefix = prefix

    def executable_name(self, verb: str) -> str:
        return f"{self.prefix}-{verb}"

    def locate(self, verb: str) -> Optional[Path]:
        """Return the first matching executable in search-path order."""
        if not is_valid_verb(verb):
            return None
        found = shutil.which(
            self.executable_name(verb),
            path=os.pathsep.join(str(p) for p in self.search_path),
        )
        if found is None:
            logger.debug(f"No {self.executable_name(verb)} on search path")
            return None
        return Path(found)

    def discover(self) -> dict[str, Path]:
        """Map every discoverable external verb to its executable.

        The first occurrence on the search path wins, matching ``locate``.
        """
        found: dict[str, Path] = {}
        marker = f"{self.prefix}-"
        for directory in self.search_path:
            try:
                entries = sorted(os.scandir(directory), key=lambda e: e.name)
            except OSError:
                continue
            for entry in entries:
                if not entry.name.startswith(marker):
                    continue
                verb = entry.name[len(marker):]
                if sys.platform == "win32":
                    verb = os.path.splitext(verb)[0]
                if not is_valid_verb(verb) or verb in found:
                    continue
                try:
                    if entry.is_file() and os.access(entry.path, os.X_OK):
                        found[verb] = Path(entry.path)
                except OSError:
                    continue
        return found


def resolve_target(
    verb: str,
    registry: SubcommandRegistry,
    locator: ExecutableLocator,
) -> ResolvedTarget:
    """Resolve a verb; built-ins always win over externals.

    Raises:
        CommandNotFound: Neither a built-in nor an external matches
    """
    handler = registry.lookup(verb)
    if handler is not None:
        return BuiltIn(verb=verb, handler=handler)

    path = locator.locate(verb)
    if path is not None:
        logger.debug(f"Resolved '{verb}' to {path}")
        return External(verb=verb, path=path)

    raise CommandNotFound(verb)
