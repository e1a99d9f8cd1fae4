# Author: PB
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/cli/__init__.py

"""Command Line Interface package for git-cmd."""

from .main import cli_main, main

__all__ = ['main', 'cli_main']
