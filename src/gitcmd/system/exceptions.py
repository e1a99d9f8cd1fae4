# Author: PB
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/system/exceptions.py

"""
git-cmd exception classes.

Resolution-phase errors (UsageError, CommandNotFound, AliasError) are raised
before anything runs. ExecutionError means a resolved target could not be
started. A subcommand that ran and failed is not an engine error; its outcome
is propagated, and SubcommandFailure exists only for library callers that
want an exception instead of an exit code.
"""

from typing import Optional, Sequence


class GitCmdError(Exception):
    """Base exception for all git-cmd errors."""
    pass


class ConfigError(GitCmdError):
    """Raised when configuration files fail validation."""
    pass


class RegistryError(GitCmdError):
    """Raised when the built-in registry is inconsistent (duplicate verbs)."""
    pass


# === RESOLUTION ERRORS ===

class UsageError(GitCmdError):
    """Raised when the invocation is malformed or names no command."""
    pass


class CommandNotFound(GitCmdError):
    """No built-in, external executable or alias matches the verb."""

    def __init__(self, verb: str, suggestions: Sequence[str] = ()):
        self.verb = verb
        self.suggestions = tuple(suggestions)
        super().__init__(f"'{verb}' is not a git-cmd command")


class AliasError(UsageError):
    """Raised when alias expansion loops back on itself."""

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__(f"alias loop detected: {' -> '.join(self.chain)}")


# === EXECUTION ERRORS ===

class ExecutionError(GitCmdError):
    """A resolved target failed to start. Never retried."""

    def __init__(self, message: str, command: Optional[str] = None):
        self.command = command
        super().__init__(message)


class SubcommandFailure(GitCmdError):
    """A subcommand ran and reported a non-zero or signal termination."""

    def __init__(self, outcome):
        self.outcome = outcome
        signum = outcome.terminated_by_signal
        if signum is not None:
            message = f"subcommand terminated by {getattr(signum, 'name', f'signal {signum}')}"
        else:
            message = f"subcommand exited with status {outcome.exit_code}"
        super().__init__(message)
