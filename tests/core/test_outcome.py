"""Tests for salvage.core.outcome: Outcome and partition_outcomes."""

import pytest

from salvage.core.errors import OutcomeInvariantError, OutcomeUnwrapError
from salvage.core.outcome import Outcome, partition_outcomes


# =====================================================================
# Outcome.ok
# =====================================================================


class TestOutcomeOk:
    def test_ok_basic(self):
        o = Outcome.ok("hello")
        assert o.success is True
        assert o.result == "hello"
        assert o.error is None

    def test_ok_allows_none_result(self):
        o = Outcome.ok(None)
        assert o.success is True
        assert o.result is None

    def test_ok_with_elapsed(self):
        assert Outcome.ok(1, elapsed_ms=12.5).elapsed_ms == 12.5

    def test_is_ok(self):
        o = Outcome.ok(1)
        assert o.is_ok() is True
        assert o.is_err() is False

    def test_unwrap(self):
        assert Outcome.ok(42).unwrap() == 42

    def test_unwrap_or_returns_value(self):
        assert Outcome.ok(10).unwrap_or(99) == 10

    def test_map(self):
        assert Outcome.ok(5).map(lambda x: x * 2).result == 10

    def test_repr(self):
        assert repr(Outcome.ok(2.5)) == "Outcome(success=True, result=2.5)"


# =====================================================================
# Outcome.fail
# =====================================================================


class TestOutcomeFail:
    def test_fail_basic(self):
        o = Outcome.fail("division by zero")
        assert o.success is False
        assert o.result is None
        assert o.error == "division by zero"

    def test_is_err(self):
        o = Outcome.fail("x")
        assert o.is_ok() is False
        assert o.is_err() is True

    def test_unwrap_raises_with_message(self):
        with pytest.raises(OutcomeUnwrapError, match="bad input"):
            Outcome.fail("bad input").unwrap()

    def test_unwrap_or_returns_default(self):
        assert Outcome.fail("x").unwrap_or(0.0) == 0.0

    def test_map_passes_failure_through(self):
        calls = []
        o = Outcome.fail("x").map(lambda v: calls.append(v))
        assert o.success is False
        assert o.error == "x"
        assert calls == []

    def test_repr(self):
        assert repr(Outcome.fail("boom")) == "Outcome(success=False, error='boom')"


# =====================================================================
# Shape invariant
# =====================================================================


class TestOutcomeInvariant:
    def test_success_with_error_rejected(self):
        with pytest.raises(OutcomeInvariantError):
            Outcome(success=True, result=1, error="nope")

    def test_failure_with_result_rejected(self):
        with pytest.raises(OutcomeInvariantError):
            Outcome(success=False, result=1, error="nope")

    def test_failure_without_message_rejected(self):
        with pytest.raises(OutcomeInvariantError):
            Outcome(success=False)

    def test_failure_with_empty_message_rejected(self):
        with pytest.raises(OutcomeInvariantError):
            Outcome.fail("")

    def test_invariant_error_is_value_error(self):
        with pytest.raises(ValueError):
            Outcome.fail("")

    def test_outcome_is_immutable(self):
        o = Outcome.ok(42)
        with pytest.raises(Exception):  # FrozenInstanceError
            o.result = 99


# =====================================================================
# Serialisation / partitioning
# =====================================================================


class TestOutcomeToDict:
    def test_ok_to_dict(self):
        assert Outcome.ok({"k": "v"}).to_dict() == {
            "success": True,
            "result": {"k": "v"},
            "error": None,
        }

    def test_fail_to_dict(self):
        assert Outcome.fail("oops").to_dict() == {
            "success": False,
            "result": None,
            "error": "oops",
        }

    def test_elapsed_rounded(self):
        assert Outcome.ok(1, elapsed_ms=1.23456).to_dict()["elapsed_ms"] == 1.23


class TestPartitionOutcomes:
    def test_partition_mixed(self):
        values, errors = partition_outcomes(
            [Outcome.ok(1), Outcome.fail("a"), Outcome.ok(2), Outcome.fail("b")]
        )
        assert values == [1, 2]
        assert errors == ["a", "b"]

    def test_partition_empty(self):
        assert partition_outcomes([]) == ([], [])

    def test_partition_accepts_generator(self):
        values, errors = partition_outcomes(Outcome.ok(i) for i in range(3))
        assert values == [0, 1, 2]
        assert errors == []
