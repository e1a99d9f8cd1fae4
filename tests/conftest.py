# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the git-cmd test suite.
"""

import os
import stat
from pathlib import Path
from typing import Callable
import pytest
from rich.console import Console

from gitcmd.cli.commands import BUILTIN_COMMANDS
from gitcmd.config.manager import DispatcherConfig
from gitcmd.core.dispatcher import Dispatcher
from gitcmd.core.engine import InvocationContext, ProcessRunner
from gitcmd.core.locator import ExecutableLocator
from gitcmd.core.registry import SubcommandRegistry
from gitcmd.core.types import ParsedCommand
from tests.fixtures.subcommands import FakePopen


@pytest.fixture
def bin_dir(tmp_path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def make_executable(bin_dir) -> Callable[..., Path]:
    """Write an executable script into bin_dir (or another directory)."""

    def _make(name: str, body: str = "exit 0\n", directory: Path = None, executable: bool = True) -> Path:
        target_dir = directory or bin_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("#!/bin/sh\n" + body)
        mode = path.stat().st_mode
        if executable:
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        else:
            path.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
        return path

    return _make


@pytest.fixture
def isolated_env(tmp_path, bin_dir) -> dict:
    """Environment with bin_dir first on PATH and no config files in reach."""
    home = tmp_path / "home"
    home.mkdir()
    system_path = os.environ.get("PATH", "/usr/bin:/bin")
    return {
        "PATH": os.pathsep.join([str(bin_dir), system_path]),
        "HOME": str(home),
    }


@pytest.fixture
def registry() -> SubcommandRegistry:
    return SubcommandRegistry(BUILTIN_COMMANDS)


@pytest.fixture
def fake_popen() -> FakePopen:
    return FakePopen()


@pytest.fixture
def make_dispatcher(isolated_env, fake_popen):
    """Build a Dispatcher with an isolated environment and a recording runner."""

    def _make(registry=None, environ=None, config=None, runner=None):
        config = config or DispatcherConfig()
        return Dispatcher(
            registry if registry is not None else SubcommandRegistry(BUILTIN_COMMANDS),
            environ=environ if environ is not None else isolated_env,
            runner=runner or ProcessRunner(popen=fake_popen),
            console=Console(width=200),
            err_console=Console(stderr=True, width=200),
            config_loader=lambda environ: config,
            configure_logging=False,
        )

    return _make


@pytest.fixture
def make_context(isolated_env, bin_dir, registry, fake_popen):
    """InvocationContext for calling built-ins directly."""

    def _make(config=None, parsed=None, search_path=None):
        return InvocationContext(
            parsed=parsed or ParsedCommand(verb="test"),
            environ=dict(isolated_env),
            search_path=tuple(search_path or (bin_dir,)),
            registry=registry,
            locator=ExecutableLocator(search_path or (bin_dir,)),
            runner=ProcessRunner(popen=fake_popen),
            config=config or DispatcherConfig(),
            version="1.2.3",
            console=Console(width=200),
            err_console=Console(stderr=True, width=200),
        )

    return _make
