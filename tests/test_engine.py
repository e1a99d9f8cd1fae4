# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_engine.py

import signal
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest

from gitcmd.core.engine import Execution, ExecutionState, ProcessRunner, forward_signals
from gitcmd.core.types import BuiltIn, ExecutionOutcome, External
from gitcmd.system.exceptions import ExecutionError, SubcommandFailure
from tests.fixtures.subcommands import FakePopen, RecordingSubcommand


class TestExecutionOutcome:
    """Test mapping of process return codes."""

    def test_normal_exit(self):
        outcome = ExecutionOutcome.from_returncode(7)
        assert outcome.exit_code == 7
        assert outcome.terminated_by_signal is None
        assert outcome.success is False

    def test_signal_exit(self):
        outcome = ExecutionOutcome.from_returncode(-signal.SIGTERM)
        assert outcome.terminated_by_signal == signal.SIGTERM
        assert outcome.exit_code == 128 + signal.SIGTERM

    def test_unknown_signal_number_kept_as_int(self):
        outcome = ExecutionOutcome.from_returncode(-200)
        assert outcome.terminated_by_signal == 200
        assert outcome.exit_code == 328

    def test_check(self):
        assert ExecutionOutcome(exit_code=0).check().success
        with pytest.raises(SubcommandFailure, match="exited with status 3"):
            ExecutionOutcome(exit_code=3).check()
        with pytest.raises(SubcommandFailure, match="SIGINT"):
            ExecutionOutcome.from_returncode(-signal.SIGINT).check()

    def test_outcome_is_frozen(self):
        outcome = ExecutionOutcome(exit_code=0)
        with pytest.raises(AttributeError):
            outcome.exit_code = 1


class TestProcessRunner:
    """Test process spawning through an injected Popen."""

    def test_run_passes_argv_and_env(self):
        popen = FakePopen(returncode=0)
        runner = ProcessRunner(popen=popen)

        outcome = runner.run(["/bin/tool", "a", "b"], env={"K": "V"})

        assert outcome == ExecutionOutcome(exit_code=0)
        assert popen.calls == [{"argv": ["/bin/tool", "a", "b"], "env": {"K": "V"}, "cwd": None}]
        assert runner.spawn_count == 1

    def test_run_reports_exit_code(self):
        runner = ProcessRunner(popen=FakePopen(returncode=7))
        assert runner.run(["/bin/tool"]).exit_code == 7

    def test_run_reports_signal(self):
        runner = ProcessRunner(popen=FakePopen(returncode=-signal.SIGINT))
        outcome = runner.run(["/bin/tool"])
        assert outcome.terminated_by_signal == signal.SIGINT
        assert outcome.exit_code == 130

    @pytest.mark.parametrize("error", [
        FileNotFoundError(2, "No such file or directory"),
        PermissionError(13, "Permission denied"),
    ])
    def test_spawn_failure_raises_execution_error(self, error):
        popen = MagicMock(side_effect=error)
        runner = ProcessRunner(popen=popen)

        with pytest.raises(ExecutionError) as excinfo:
            runner.run(["/gone/tool"])

        assert excinfo.value.command == "/gone/tool"
        assert error.strerror in str(excinfo.value)
        assert runner.spawn_count == 0
        # Never retried
        assert popen.call_count == 1

    def test_signal_handlers_restored(self):
        before = signal.getsignal(signal.SIGTERM)
        ProcessRunner(popen=FakePopen()).run(["/bin/tool"])
        assert signal.getsignal(signal.SIGTERM) == before


class TestForwardSignals:
    def test_forwards_to_running_child(self):
        process = MagicMock()
        process.poll.return_value = None

        with forward_signals(process, [signal.SIGTERM]):
            handler = signal.getsignal(signal.SIGTERM)
            handler(signal.SIGTERM, None)

        process.send_signal.assert_called_once_with(signal.SIGTERM)

    def test_does_not_signal_exited_child(self):
        process = MagicMock()
        process.poll.return_value = 0

        with forward_signals(process, [signal.SIGTERM]):
            signal.getsignal(signal.SIGTERM)(signal.SIGTERM, None)

        process.send_signal.assert_not_called()

    def test_unknown_previous_handler_reset_to_default(self):
        process = MagicMock()
        with patch("gitcmd.core.engine.signal.signal", return_value=None) as install:
            with forward_signals(process, [signal.SIGTERM]):
                pass

        assert install.call_args_list[-1] == call(signal.SIGTERM, signal.SIG_DFL)


class TestExecution:
    """Test the per-invocation state machine."""

    def test_builtin_gets_forwarded_args(self, make_context):
        handler = RecordingSubcommand("status", exit_code=4)
        execution = Execution(BuiltIn("status", handler), ("-s", "--", "x y"), make_context())

        assert execution.state is ExecutionState.RESOLVED
        outcome = execution.run()

        assert handler.calls == [("-s", "--", "x y")]
        assert outcome.exit_code == 4
        assert execution.state is ExecutionState.COMPLETED
        assert execution.outcome is outcome

    def test_external_spawns_with_context_env(self, make_context, fake_popen):
        context = make_context()
        execution = Execution(External("deploy", Path("/opt/git-cmd-deploy")), ("prod",), context)

        execution.run()

        assert fake_popen.calls[0]["argv"] == ["/opt/git-cmd-deploy", "prod"]
        assert fake_popen.calls[0]["env"] == context.environ

    def test_nonzero_exit_is_completed(self, make_context):
        fake = RecordingSubcommand("fail", exit_code=1)
        execution = Execution(BuiltIn("fail", fake), (), make_context())
        execution.run()
        assert execution.state is ExecutionState.COMPLETED

    def test_spawn_failure_is_failed(self, make_context):
        context = make_context()
        context.runner = ProcessRunner(popen=MagicMock(side_effect=FileNotFoundError(2, "gone")))
        execution = Execution(External("deploy", Path("/gone")), (), context)

        with pytest.raises(ExecutionError):
            execution.run()
        assert execution.state is ExecutionState.FAILED

    def test_runs_at_most_once(self, make_context):
        handler = RecordingSubcommand("status")
        execution = Execution(BuiltIn("status", handler), (), make_context())
        execution.run()

        with pytest.raises(RuntimeError, match="already completed"):
            execution.run()
        assert len(handler.calls) == 1
