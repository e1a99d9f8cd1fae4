# Author: PB
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/reporter.py

"""
Result reporting: outcome -> exit status, engine error -> diagnostic.

A subcommand's own output is never wrapped or annotated. The only text
written here is the one-line diagnostic for an engine-level error.
"""

import signal

from rich.console import Console
from rich.markup import escape

from gitcmd.core.args import USAGE
from gitcmd.core.types import SIGNAL_EXIT_BASE, ExecutionOutcome
from gitcmd.system.exceptions import (
    CommandNotFound,
    ConfigError,
    ExecutionError,
    GitCmdError,
    UsageError,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 64          # sysexits EX_USAGE
EXIT_CONFIG = 78         # sysexits EX_CONFIG
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127
EXIT_INTERRUPTED = SIGNAL_EXIT_BASE + signal.SIGINT

ERROR_EXIT_CODES: dict[type, int] = {
    UsageError: EXIT_USAGE,
    CommandNotFound: EXIT_NOT_FOUND,
    ExecutionError: EXIT_CANNOT_EXECUTE,
    ConfigError: EXIT_CONFIG,
}


def exit_status(outcome: ExecutionOutcome) -> int:
    """Exit status the dispatcher should terminate with."""
    if outcome.terminated_by_signal is not None:
        return SIGNAL_EXIT_BASE + int(outcome.terminated_by_signal)
    return outcome.exit_code


def exit_code_for(error: GitCmdError) -> int:
    for cls in type(error).__mro__:
        if cls in ERROR_EXIT_CODES:
            return ERROR_EXIT_CODES[cls]
    return EXIT_FAILURE


def report_error(error: GitCmdError, console: Console) -> int:
    """Print a diagnostic for an engine-level error and return its exit code."""
    console.print(f"git-cmd: {escape(str(error))}", highlight=False)

    if isinstance(error, CommandNotFound):
        console.print("See 'git-cmd --help'.", highlight=False)
        if error.suggestions:
            heading = (
                "The most similar command is"
                if len(error.suggestions) == 1
                else "The most similar commands are"
            )
            console.print(f"\n{heading}", highlight=False)
            for suggestion in error.suggestions:
                console.print(f"\t{escape(suggestion)}", highlight=False)
    elif isinstance(error, UsageError):
        console.print(escape(USAGE), highlight=False)

    return exit_code_for(error)
