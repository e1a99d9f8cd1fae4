# Author: PB
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/args.py

"""
Argument preprocessing: split the raw invocation into engine flags and the
payload forwarded to the subcommand.

Only tokens *before* the verb are inspected. Everything after the verb is
handed on untouched; quoting, globbing and flag meaning belong to whichever
handler receives it.
"""

from typing import Optional, Sequence

from gitcmd.core.types import EngineFlag, ParsedCommand
from gitcmd.system.exceptions import UsageError

USAGE = (
    "usage: git-cmd [--version] [--help] [--exec-path[=<path>]]\n"
    "               [-p | --paginate | -P | --no-pager] [--debug]\n"
    "               <command> [<args>]"
)

FLAG_ALIASES: dict[str, EngineFlag] = {
    "-h": EngineFlag.HELP,
    "--help": EngineFlag.HELP,
    "-V": EngineFlag.VERSION,
    "--version": EngineFlag.VERSION,
    "-p": EngineFlag.PAGINATE,
    "--paginate": EngineFlag.PAGINATE,
    "-P": EngineFlag.NO_PAGER,
    "--no-pager": EngineFlag.NO_PAGER,
    "--debug": EngineFlag.DEBUG,
    "--exec-path": EngineFlag.EXEC_PATH,
}

# Flags that make a verb-less invocation meaningful
SATISFYING_FLAGS = frozenset({EngineFlag.HELP, EngineFlag.VERSION, EngineFlag.EXEC_PATH})

_PAGER_FLAGS = {
    EngineFlag.PAGINATE: EngineFlag.NO_PAGER,
    EngineFlag.NO_PAGER: EngineFlag.PAGINATE,
}


def parse_invocation(argv: Sequence[str]) -> ParsedCommand:
    """Parse the raw argument vector (without the program name).

    Args:
        argv: Arguments as received by the process

    Returns:
        ParsedCommand with the verb, engine flags and forwarded arguments

    Raises:
        UsageError: On an unknown engine option, an empty ``--exec-path=``,
            or when there is no verb and no flag that stands on its own
    """
    tokens = tuple(argv)
    flags: set[EngineFlag] = set()
    exec_path: Optional[str] = None
    index = 0

    while index < len(tokens):
        token = tokens[index]
        if token == "--":
            index += 1
            break
        if not token.startswith("-"):
            break

        if token.startswith("--exec-path="):
            value = token.split("=", 1)[1]
            if not value:
                raise UsageError("--exec-path= requires a directory")
            exec_path = value
        elif token in FLAG_ALIASES:
            flag = FLAG_ALIASES[token]
            # -p and -P cancel each other; last one wins
            if flag in _PAGER_FLAGS:
                flags.discard(_PAGER_FLAGS[flag])
            flags.add(flag)
        else:
            raise UsageError(f"unknown option: {token}")
        index += 1

    if index < len(tokens):
        return ParsedCommand(
            verb=tokens[index],
            engine_flags=frozenset(flags),
            forwarded_args=tokens[index + 1:],
            exec_path=exec_path,
        )

    if not flags & SATISFYING_FLAGS:
        raise UsageError("no command given")

    return ParsedCommand(verb=None, engine_flags=frozenset(flags), exec_path=exec_path)
