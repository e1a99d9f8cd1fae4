# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/git_init.py

"""
Builder for ``git init`` command lines.

    argv = GitInit().quiet().initial_branch("main").directory(path).make_cmd()

``make_cmd`` only builds the argument vector; running it is up to the
caller (the ``init`` built-in hands it to the ProcessRunner).
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class Hash(Enum):
    """Object format (hash algorithm) for a new repository. SHA1 is git's default."""
    SHA1 = "sha1"
    SHA256 = "sha256"


class Shared(Enum):
    """Named values for ``--shared``. An int is accepted as an octal mode."""
    UMASK = "umask"
    FALSE = "false"
    GROUP = "group"
    TRUE = "true"
    ALL = "all"
    WORLD = "world"
    EVERYBODY = "everybody"


SharedMode = Union[Shared, int]


def parse_shared(value: str) -> SharedMode:
    """Parse a --shared value: a Shared name or an octal mode such as 0640."""
    try:
        return Shared(value.lower())
    except ValueError:
        pass
    try:
        mode = int(value, 8)
    except ValueError:
        names = ", ".join(s.value for s in Shared)
        raise ValueError(f"invalid shared mode {value!r} (expected {names} or an octal mode)")
    _check_octal(mode)
    return mode


def _check_octal(mode: int) -> None:
    if not 0 <= mode <= 0o777:
        raise ValueError(f"octal mode {mode:#o} outside 0000..0777")


def format_shared(shared: SharedMode) -> str:
    if isinstance(shared, Shared):
        return shared.value
    _check_octal(shared)
    return f"{shared:04o}"


class GitInit:
    """Chainable builder for ``git init``."""

    def __init__(self, git: str = "git"):
        self.git = git
        self._quiet = False
        self._bare = False
        self._template: Optional[Path] = None
        self._initial_branch: Optional[str] = None
        self._separate_git_dir: Optional[Path] = None
        self._object_format: Optional[Hash] = None
        self._shared: Optional[SharedMode] = None
        self._directory: Optional[Path] = None

    def quiet(self) -> "GitInit":
        """Only print error and warning messages."""
        self._quiet = True
        return self

    def bare(self) -> "GitInit":
        self._bare = True
        return self

    def template(self, path: Union[str, Path]) -> "GitInit":
        """Directory whose contents are copied into the new ``.git``."""
        self._template = Path(path)
        return self

    def initial_branch(self, name: str) -> "GitInit":
        self._initial_branch = name
        return self

    def separate_git_dir(self, path: Union[str, Path]) -> "GitInit":
        """Place the repository at ``path`` and leave a gitfile pointing to it."""
        self._separate_git_dir = Path(path)
        return self

    def object_format(self, obj: Hash) -> "GitInit":
        self._object_format = obj
        return self

    def shared(self, shared: SharedMode) -> "GitInit":
        if not isinstance(shared, Shared):
            _check_octal(shared)
        self._shared = shared
        return self

    def directory(self, path: Union[str, Path]) -> "GitInit":
        self._directory = Path(path)
        return self

    def make_cmd(self) -> list[str]:
        cmd = [self.git, "init"]
        if self._quiet:
            cmd.append("--quiet")
        if self._bare:
            cmd.append("--bare")
        if self._template is not None:
            cmd.extend(["--template", str(self._template)])
        if self._separate_git_dir is not None:
            cmd.extend(["--separate-git-dir", str(self._separate_git_dir)])
        if self._initial_branch is not None:
            cmd.extend(["--initial-branch", self._initial_branch])
        if self._object_format is not None:
            cmd.extend(["--object-format", self._object_format.value])
        if self._shared is not None:
            cmd.append(f"--shared={format_shared(self._shared)}")
        if self._directory is not None:
            cmd.append(str(self._directory))
        return cmd
