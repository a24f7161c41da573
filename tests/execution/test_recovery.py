"""Tests for salvage.execution.recovery: run_with_recovery_log and RecoveryLog."""

import pytest
import structlog
from structlog.testing import capture_logs

from salvage.core.errors import InvalidIterationCountError, InvalidWorkError
from salvage.core.logging import bind_context
from salvage.execution.recovery import IterationError, RecoveryLog, run_with_recovery_log
from tests._support.work import fails_at_half


class TestRunWithRecoveryLog:
    """Loop semantics."""

    def test_failing_iteration_recorded_and_skipped(self):
        log = run_with_recovery_log(10, fails_at_half)

        assert log.errors == [IterationError(iteration=2, error="Error")]
        assert log.result(2) is None
        for i in range(1, 11):
            if i != 2:
                assert log.result(i) == i + 22.5

    def test_results_length_matches_n(self):
        log = run_with_recovery_log(10, fails_at_half)
        assert len(log.results) == 10

    @pytest.mark.parametrize("n", [0, 1, 5, 25])
    def test_exactly_n_iterations(self, n):
        calls = []

        def body(i):
            calls.append(i)
            if i % 3 == 0:
                raise RuntimeError(f"bad {i}")
            return i

        log = run_with_recovery_log(n, body)
        assert calls == list(range(1, n + 1))
        assert len(log.results) == n

    def test_zero_iterations(self):
        log = run_with_recovery_log(0, fails_at_half)
        assert log.results == []
        assert log.errors == []

    def test_every_iteration_fails_loop_still_completes(self):
        def always(i):
            raise ValueError(f"iteration {i} broke")

        log = run_with_recovery_log(4, always)
        assert log.results == [None, None, None, None]
        assert [e.iteration for e in log.errors] == [1, 2, 3, 4]
        assert log.errors[2].error == "iteration 3 broke"

    def test_errors_keep_execution_order(self):
        def body(i):
            if i in (5, 2, 7):
                raise ValueError(str(i))
            return i

        log = run_with_recovery_log(8, body)
        assert log.failed_iterations == [2, 5, 7]
        assert log.succeeded_iterations == [1, 3, 4, 6, 8]

    def test_custom_start(self):
        log = run_with_recovery_log(3, lambda i: i * 10, start=0)
        assert log.results == [0, 10, 20]
        assert list(log.iterations) == [0, 1, 2]

    def test_start_from_settings(self, monkeypatch):
        monkeypatch.setenv("SALVAGE_ITERATION_START", "0")
        log = run_with_recovery_log(2, lambda i: i)
        assert log.start == 0
        assert log.results == [0, 1]

    def test_body_returning_none_is_success(self):
        log = run_with_recovery_log(2, lambda i: None)
        assert log.errors == []
        assert log.succeeded_iterations == [1, 2]


class TestRunWithRecoveryLogMisuse:
    """Infrastructure errors propagate before any iteration runs."""

    @pytest.mark.parametrize("n", [-1, 2.0, "3", True, None])
    def test_invalid_count_raises(self, n):
        calls = []
        with pytest.raises(InvalidIterationCountError):
            run_with_recovery_log(n, calls.append)
        assert calls == []

    def test_invalid_count_is_value_error(self):
        with pytest.raises(ValueError):
            run_with_recovery_log(-5, fails_at_half)

    def test_non_callable_body_raises(self):
        with pytest.raises(InvalidWorkError):
            run_with_recovery_log(3, "not a function")


class TestRecoveryLogging:
    def test_progress_notices(self):
        with capture_logs() as logs:
            run_with_recovery_log(3, fails_at_half)

        progress = [
            (e["event"], e.get("iteration"))
            for e in logs
            if e["event"] in ("iteration_succeeded", "iteration_failed")
        ]
        assert progress == [
            ("iteration_succeeded", 1),
            ("iteration_failed", 2),
            ("iteration_succeeded", 3),
        ]

    def test_failure_notice_carries_message(self):
        with capture_logs() as logs:
            run_with_recovery_log(2, fails_at_half)
        failed = next(e for e in logs if e["event"] == "iteration_failed")
        assert failed["error"] == "Error"
        assert failed["log_level"] == "warning"

    def test_finished_summary_event(self):
        with capture_logs() as logs:
            run_with_recovery_log(10, fails_at_half)
        finished = logs[-1]
        assert finished["event"] == "recovery_loop_finished"
        assert finished["succeeded"] == 9
        assert finished["failed"] == 1

    def test_outer_iteration_binding_survives(self):
        bind_context(iteration="outer")
        run_with_recovery_log(3, fails_at_half)
        assert structlog.contextvars.get_contextvars()["iteration"] == "outer"


class TestRecoveryLog:
    """Accumulator behaviour."""

    def test_prefilled_with_none(self):
        log = RecoveryLog(n=3)
        assert log.results == [None, None, None]

    def test_record_success_and_failure(self):
        log = RecoveryLog(n=3)
        log.record_success(1, "a")
        log.record_failure(2, "broke")
        log.record_success(3, "c")
        assert log.results == ["a", None, "c"]
        assert log.error_for(2) == "broke"
        assert log.error_for(1) is None

    def test_out_of_range_iteration(self):
        log = RecoveryLog(n=2)
        with pytest.raises(IndexError):
            log.result(3)
        with pytest.raises(IndexError):
            log.record_failure(0, "x")

    def test_to_dict(self):
        log = run_with_recovery_log(3, fails_at_half)
        assert log.to_dict() == {
            "n": 3,
            "start": 1,
            "errors": [{"iteration": 2, "error": "Error"}],
            "results": [23.5, None, 25.5],
        }

    def test_iteration_error_is_frozen(self):
        entry = IterationError(iteration=1, error="x")
        with pytest.raises(Exception):
            entry.error = "y"
