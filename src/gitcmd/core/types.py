# Author: PB
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/types.py

"""
Per-invocation value types shared by the dispatcher components.

Everything here is immutable and lives for one process run.
"""

import signal
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from gitcmd.system.exceptions import SubcommandFailure

# Shell convention for "terminated by signal N"
SIGNAL_EXIT_BASE = 128

SignalId = Union[signal.Signals, int]


class EngineFlag(Enum):
    """Options consumed by the dispatcher itself, never forwarded."""
    HELP = "help"
    VERSION = "version"
    PAGINATE = "paginate"
    NO_PAGER = "no-pager"
    DEBUG = "debug"
    EXEC_PATH = "exec-path"


@dataclass(frozen=True)
class ParsedCommand:
    """Result of splitting the raw invocation.

    ``verb`` is None only when an engine flag fully satisfies the invocation.
    ``forwarded_args`` is opaque payload, kept in original order.
    """
    verb: Optional[str]
    engine_flags: frozenset = frozenset()
    forwarded_args: tuple = ()
    exec_path: Optional[str] = None

    def has(self, flag: EngineFlag) -> bool:
        return flag in self.engine_flags


@dataclass(frozen=True)
class BuiltIn:
    """Target served by a handler registered in-process."""
    verb: str
    handler: Any


@dataclass(frozen=True)
class External:
    """Target served by a ``git-cmd-<verb>`` executable."""
    verb: str
    path: Path


ResolvedTarget = Union[BuiltIn, External]


@dataclass(frozen=True)
class ExecutionOutcome:
    """How a target terminated. Created once, never mutated."""
    exit_code: int
    terminated_by_signal: Optional[SignalId] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExecutionOutcome":
        """Map a ``Popen.returncode`` (negative means killed by signal)."""
        if returncode >= 0:
            return cls(exit_code=returncode)
        signum = -returncode
        try:
            sig: SignalId = signal.Signals(signum)
        except ValueError:
            sig = signum
        return cls(exit_code=SIGNAL_EXIT_BASE + signum, terminated_by_signal=sig)

    @property
    def success(self) -> bool:
        return self.exit_code == 0 and self.terminated_by_signal is None

    def check(self) -> "ExecutionOutcome":
        """Raise SubcommandFailure unless the target succeeded."""
        if not self.success:
            raise SubcommandFailure(self)
        return self
