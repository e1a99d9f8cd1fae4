# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_args.py

"""Tests for the argument preprocessor."""

import pytest

from gitcmd.core.args import parse_invocation
from gitcmd.core.types import EngineFlag
from gitcmd.system.exceptions import UsageError


class TestVerbAndForwardedArgs:
    def test_first_non_flag_token_is_verb(self):
        parsed = parse_invocation(["status", "--short", "-b"])
        assert parsed.verb == "status"
        assert parsed.forwarded_args == ("--short", "-b")
        assert parsed.engine_flags == frozenset()

    def test_forwarded_args_are_untouched(self):
        """Everything after the verb is payload, even engine-looking flags."""
        args = ["--help", "--version", "*.txt", "a b", "", "--", "-p", "--exec-path=/x"]
        parsed = parse_invocation(["sync", *args])
        assert parsed.forwarded_args == tuple(args)
        assert parsed.engine_flags == frozenset()
        assert parsed.exec_path is None

    def test_engine_flags_before_verb_are_consumed(self):
        parsed = parse_invocation(["--debug", "-P", "sync", "origin"])
        assert parsed.verb == "sync"
        assert parsed.engine_flags == {EngineFlag.DEBUG, EngineFlag.NO_PAGER}
        assert parsed.forwarded_args == ("origin",)

    def test_double_dash_ends_engine_flags(self):
        parsed = parse_invocation(["--debug", "--", "-weird-verb", "x"])
        assert parsed.verb == "-weird-verb"
        assert parsed.forwarded_args == ("x",)

    def test_empty_string_is_a_verb(self):
        parsed = parse_invocation([""])
        assert parsed.verb == ""

    def test_exec_path_with_value(self):
        parsed = parse_invocation(["--exec-path=/opt/tools", "deploy"])
        assert parsed.exec_path == "/opt/tools"
        assert EngineFlag.EXEC_PATH not in parsed.engine_flags
        assert parsed.verb == "deploy"


class TestPagerFlags:
    @pytest.mark.parametrize("argv, expected", [
        (["-p", "-P", "log"], EngineFlag.NO_PAGER),
        (["--no-pager", "--paginate", "log"], EngineFlag.PAGINATE),
    ])
    def test_last_pager_flag_wins(self, argv, expected):
        parsed = parse_invocation(argv)
        assert parsed.engine_flags == {expected}


class TestSatisfyingFlags:
    @pytest.mark.parametrize("argv, flag", [
        (["--help"], EngineFlag.HELP),
        (["-h"], EngineFlag.HELP),
        (["--version"], EngineFlag.VERSION),
        (["-V"], EngineFlag.VERSION),
        (["--exec-path"], EngineFlag.EXEC_PATH),
    ])
    def test_flag_without_verb(self, argv, flag):
        parsed = parse_invocation(argv)
        assert parsed.verb is None
        assert parsed.has(flag)
        assert parsed.forwarded_args == ()

    def test_help_with_verb_keeps_verb(self):
        parsed = parse_invocation(["--help", "status"])
        assert parsed.verb == "status"
        assert parsed.has(EngineFlag.HELP)


class TestUsageErrors:
    def test_bare_invocation(self):
        with pytest.raises(UsageError, match="no command given"):
            parse_invocation([])

    def test_only_non_satisfying_flags(self):
        with pytest.raises(UsageError, match="no command given"):
            parse_invocation(["--debug", "--no-pager"])

    def test_double_dash_without_verb(self):
        with pytest.raises(UsageError):
            parse_invocation(["--"])

    def test_unknown_engine_option(self):
        with pytest.raises(UsageError, match="unknown option: --bogus"):
            parse_invocation(["--bogus", "status"])

    def test_empty_exec_path_value(self):
        with pytest.raises(UsageError, match="--exec-path="):
            parse_invocation(["--exec-path=", "status"])
