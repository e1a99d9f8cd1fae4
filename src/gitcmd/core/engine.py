# Author: PB
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/engine.py

"""
Execution engine: runs exactly one resolved target per invocation.

All process side effects live here. Built-ins are called in-process with
the dispatcher's own streams; externals are spawned with inherited streams
and the child environment, and the dispatcher blocks until they exit.
Signals delivered to the dispatcher while a child runs are forwarded to it.

Nothing is retried: a subcommand may have partial side effects, so a failed
start is reported once and a non-zero exit is simply propagated.
"""

import signal
import subprocess
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence

from loguru import logger
from rich.console import Console

from gitcmd.core.types import (
    BuiltIn,
    EngineFlag,
    ExecutionOutcome,
    External,
    ParsedCommand,
    ResolvedTarget,
)
from gitcmd.system.exceptions import ExecutionError

FORWARDED_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT")
    if hasattr(signal, name)
)


class ExecutionState(Enum):
    RESOLVED = "resolved"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@contextmanager
def forward_signals(process: subprocess.Popen, signals: Sequence[int] = FORWARDED_SIGNALS):
    """Relay signals received by this process to ``process`` while it runs.

    Handlers can only be installed from the main thread; elsewhere this is
    a no-op. Previous handlers are restored on exit.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _forward(signum, frame):
        if process.poll() is None:
            logger.debug(f"Forwarding signal {signum} to pid {process.pid}")
            process.send_signal(signum)

    previous = {}
    for sig in signals:
        previous[sig] = signal.signal(sig, _forward)
    try:
        yield
    finally:
        for sig, handler in previous.items():
            # None means the old handler was not installed from Python
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)


class ProcessRunner:
    """Spawn a child process, wait for it, and report how it terminated."""

    def __init__(
        self,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
        signals: Sequence[int] = FORWARDED_SIGNALS,
    ):
        self._popen = popen
        self._signals = tuple(signals)
        self.spawn_count = 0

    def run(
        self,
        argv: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
    ) -> ExecutionOutcome:
        """Run ``argv`` with inherited stdin/stdout/stderr.

        Raises:
            ExecutionError: The process could not be started
        """
        command = str(argv[0])
        logger.debug(f"Spawning {command} with {len(argv) - 1} argument(s)")
        try:
            process = self._popen(
                [str(a) for a in argv],
                env=dict(env) if env is not None else None,
                cwd=str(cwd) if cwd is not None else None,
            )
        except OSError as e:
            reason = e.strerror or str(e)
            raise ExecutionError(f"cannot run {command}: {reason}", command=command) from e

        self.spawn_count += 1
        with process:
            with forward_signals(process, self._signals):
                returncode = process.wait()

        outcome = ExecutionOutcome.from_returncode(returncode)
        logger.debug(f"{command} finished: {outcome}")
        return outcome


@dataclass
class InvocationContext:
    """Everything a handler may need about the current invocation."""
    parsed: ParsedCommand
    environ: dict[str, str]
    search_path: tuple
    registry: Any
    locator: Any
    runner: ProcessRunner
    config: Any = None
    version: str = "unknown"
    console: Console = field(default_factory=Console)
    err_console: Console = field(default_factory=lambda: Console(stderr=True))

    @property
    def paginate(self) -> bool:
        return self.parsed.has(EngineFlag.PAGINATE)


class Execution:
    """One run of one resolved target: RESOLVED -> RUNNING -> COMPLETED | FAILED."""

    def __init__(self, target: ResolvedTarget, args: Sequence[str], context: InvocationContext):
        self.target = target
        self.args = tuple(args)
        self.context = context
        self.state = ExecutionState.RESOLVED
        self.outcome: Optional[ExecutionOutcome] = None

    def run(self) -> ExecutionOutcome:
        if self.state is not ExecutionState.RESOLVED:
            raise RuntimeError(f"execution already {self.state.value}")
        self.state = ExecutionState.RUNNING

        try:
            if isinstance(self.target, BuiltIn):
                outcome = self.target.handler.run(self.args, self.context)
            elif isinstance(self.target, External):
                outcome = self.context.runner.run(
                    [str(self.target.path), *self.args],
                    env=self.context.environ,
                )
            else:
                raise TypeError(f"unknown target type: {type(self.target).__name__}")
        except BaseException:
            self.state = ExecutionState.FAILED
            raise

        self.state = ExecutionState.COMPLETED
        self.outcome = outcome
        return outcome
