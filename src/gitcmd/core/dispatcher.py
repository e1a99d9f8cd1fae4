# Author: PB
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/core/dispatcher.py

"""
Dispatcher: raw argv in, exit status out.

    argv -> parse_invocation -> resolve (built-in, external, alias)
         -> Execution.run -> exit_status

Resolution errors are reported before anything runs. The dispatcher itself
prints nothing on success; whatever reaches stdout comes from the handler.
"""

import difflib
import os
import shlex
from typing import Callable, Mapping, Optional, Sequence

from loguru import logger
from rich.console import Console

from gitcmd import __version__
from gitcmd.config.manager import DispatcherConfig, load_merged_config
from gitcmd.core.args import parse_invocation
from gitcmd.core.engine import Execution, InvocationContext, ProcessRunner
from gitcmd.core.environment import (
    build_child_environment,
    build_search_path,
    extra_exec_dirs,
)
from gitcmd.core.locator import ExecutableLocator, resolve_target
from gitcmd.core.registry import SubcommandRegistry
from gitcmd.core.reporter import EXIT_INTERRUPTED, EXIT_SUCCESS, exit_status, report_error
from gitcmd.core.types import EngineFlag, ParsedCommand, ResolvedTarget
from gitcmd.system.display import display_version
from gitcmd.system.exceptions import AliasError, CommandNotFound, ConfigError, GitCmdError
from gitcmd.system.logging_setup import setup_logging

MAX_SUGGESTIONS = 3
SUGGESTION_CUTOFF = 0.6


class Dispatcher:
    """Resolve and run one subcommand per call to ``run``."""

    def __init__(
        self,
        registry: SubcommandRegistry,
        environ: Optional[Mapping[str, str]] = None,
        runner: Optional[ProcessRunner] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        config_loader: Callable[[Mapping[str, str]], DispatcherConfig] = load_merged_config,
        configure_logging: bool = True,
    ):
        self.registry = registry
        self.environ = dict(os.environ if environ is None else environ)
        self.runner = runner or ProcessRunner()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.config_loader = config_loader
        self.configure_logging = configure_logging

    def run(self, argv: Sequence[str]) -> int:
        """Dispatch one invocation and return the exit status."""
        try:
            parsed = parse_invocation(argv)
        except GitCmdError as e:
            return report_error(e, self.err_console)

        debug = parsed.has(EngineFlag.DEBUG)
        if self.configure_logging:
            setup_logging(debug=debug)

        try:
            config = self.config_loader(self.environ)
            if self.configure_logging and config.local_log is not None:
                setup_logging(debug=debug, local_log=config.local_log)
            return self._dispatch(parsed, config)
        except GitCmdError as e:
            logger.debug(f"Dispatch failed: {type(e).__name__}: {e}")
            return report_error(e, self.err_console)
        except KeyboardInterrupt:
            logger.debug("Interrupted")
            return EXIT_INTERRUPTED

    def _dispatch(self, parsed: ParsedCommand, config: DispatcherConfig) -> int:
        exec_dirs = extra_exec_dirs(self.environ, config.exec_path, parsed.exec_path)
        search_path = build_search_path(self.environ, config.exec_path, parsed.exec_path)
        locator = ExecutableLocator(search_path)

        if parsed.has(EngineFlag.VERSION):
            display_version(self.console, __version__)
            return EXIT_SUCCESS
        if parsed.has(EngineFlag.EXEC_PATH):
            self.console.print(os.pathsep.join(str(p) for p in search_path), highlight=False, soft_wrap=True)
            return EXIT_SUCCESS

        if parsed.has(EngineFlag.HELP):
            # git-cmd --help [verb] is git-cmd help [verb]
            verb = "help"
            args: tuple = (parsed.verb, *parsed.forwarded_args) if parsed.verb is not None else ()
        else:
            verb, args = parsed.verb, parsed.forwarded_args

        target, args = self.resolve(verb, args, locator, config)

        context = InvocationContext(
            parsed=parsed,
            environ=build_child_environment(
                self.environ, parsed, __version__, exec_dirs, config.env
            ),
            search_path=search_path,
            registry=self.registry,
            locator=locator,
            runner=self.runner,
            config=config,
            version=__version__,
            console=self.console,
            err_console=self.err_console,
        )
        return exit_status(Execution(target, args, context).run())

    def resolve(
        self,
        verb: str,
        args: Sequence[str],
        locator: ExecutableLocator,
        config: DispatcherConfig,
    ) -> tuple[ResolvedTarget, tuple]:
        """Resolve a verb, expanding aliases when nothing else matches.

        Built-ins win, then externals, then aliases. Alias arguments are
        placed before the forwarded arguments.

        Raises:
            CommandNotFound: Nothing matches
            AliasError: Alias expansion revisits a name
            ConfigError: An alias cannot be split into words
        """
        chain: list[str] = []
        args = tuple(args)
        while True:
            try:
                return resolve_target(verb, self.registry, locator), args
            except CommandNotFound:
                expansion = config.aliases.get(verb)
                if expansion is None:
                    suggestions = self.suggest(verb, locator, config) if config.suggestions else ()
                    raise CommandNotFound(verb, suggestions) from None

            if verb in chain:
                raise AliasError([*chain, verb])
            chain.append(verb)

            try:
                words = shlex.split(expansion)
            except ValueError as e:
                raise ConfigError(f"alias '{verb}': {e}") from e
            if not words:
                raise ConfigError(f"alias '{verb}' is empty")

            logger.debug(f"Expanding alias '{verb}' to {words}")
            verb, args = words[0], (*words[1:], *args)

    def suggest(
        self,
        verb: str,
        locator: ExecutableLocator,
        config: DispatcherConfig,
    ) -> list[str]:
        candidates = set(self.registry.verbs())
        candidates.update(locator.discover())
        candidates.update(config.aliases)
        return difflib.get_close_matches(
            verb, sorted(candidates), n=MAX_SUGGESTIONS, cutoff=SUGGESTION_CUTOFF
        )
