"""
Outcome record for guarded invocations.

Provides :class:`Outcome`, a typed success/failure envelope produced by
:func:`salvage.execution.guarded.guarded_call` and the recovery loop. A
successful outcome carries the value returned by the work; a failed outcome
carries the human-readable message of the exception the work raised. Exactly
one of the two is populated, and the envelope is immutable once built.

Manifesto:
    - **Errors as values:** a failure is a message string, not control flow
    - **Shape invariant:** ``success`` decides which field is meaningful
    - **Batch-friendly:** collect many outcomes, partition them at the end

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                       Outcome[T]                          │
        ├──────────────────────────────────────────────────────────┤
        │  success: bool                                            │
        │  result:  T | None      (set only when success)           │
        │  error:   str | None    (set only when not success)       │
        │  elapsed_ms: float                                        │
        ├──────────────────────────────────────────────────────────┤
        │  Factories        │  Extraction      │  Transformation    │
        │  • ok(value)      │  • unwrap()      │  • map()           │
        │  • fail(message)  │  • unwrap_or()   │  • to_dict()       │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> Outcome.ok(5.0)
    Outcome(success=True, result=5.0)
    >>> Outcome.fail("division by zero").unwrap_or(0.0)
    0.0
    >>> values, errors = partition_outcomes([Outcome.ok(1), Outcome.fail("x")])
    >>> values, errors
    ([1], ['x'])

Guardrails:
    ❌ DON'T: Call unwrap() without checking success first
    ✅ DO: Use unwrap_or() or branch on ``success``

    ❌ DON'T: Treat ``result is None`` as failure (work may return None)
    ✅ DO: Check ``success``

Tags:
    result-pattern, error-handling, outcome, salvage
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from salvage.core.errors import OutcomeInvariantError, OutcomeUnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """
    Envelope returned by every guarded invocation.

    Factory methods :meth:`ok` and :meth:`fail` should be used instead of
    the constructor directly.

    Attributes:
        success: ``True`` when the work returned without raising.
        result: The returned value (``None`` on failure).
        error: Message of the raised exception (``None`` on success).
        elapsed_ms: Wall-clock time the work took.
    """

    success: bool
    result: T | None = None
    error: str | None = None
    elapsed_ms: float = 0.0

    def __post_init__(self) -> None:
        if self.success:
            if self.error is not None:
                raise OutcomeInvariantError(
                    f"successful outcome cannot carry an error: {self.error!r}"
                )
        else:
            if self.result is not None:
                raise OutcomeInvariantError("failed outcome cannot carry a result")
            if not isinstance(self.error, str) or not self.error:
                raise OutcomeInvariantError("failed outcome requires a non-empty error message")

    # ------------------------------------------------------------------ #
    # Factory helpers
    # ------------------------------------------------------------------ #

    @classmethod
    def ok(cls, value: T, *, elapsed_ms: float = 0.0) -> Outcome[T]:
        """Create a successful outcome."""
        return cls(success=True, result=value, elapsed_ms=elapsed_ms)

    @classmethod
    def fail(cls, message: str, *, elapsed_ms: float = 0.0) -> Outcome[T]:
        """Create a failed outcome."""
        return cls(success=False, error=message, elapsed_ms=elapsed_ms)

    # ------------------------------------------------------------------ #
    # Inspection / extraction
    # ------------------------------------------------------------------ #

    def is_ok(self) -> bool:
        return self.success

    def is_err(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """Return the result, or raise :class:`OutcomeUnwrapError` on failure."""
        if not self.success:
            raise OutcomeUnwrapError(self.error or "")
        return self.result  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the result, or ``default`` on failure."""
        if not self.success:
            return default
        return self.result  # type: ignore[return-value]

    def map(self, f: Callable[[T], U]) -> Outcome[U]:
        """Transform the result if successful; failures pass through unchanged."""
        if not self.success:
            return Outcome.fail(self.error or "", elapsed_ms=self.elapsed_ms)
        return Outcome.ok(f(self.result), elapsed_ms=self.elapsed_ms)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict."""
        d: dict[str, Any] = {
            "success": self.success,
            "result": self.result,
            "error": self.error,
        }
        if self.elapsed_ms:
            d["elapsed_ms"] = round(self.elapsed_ms, 2)
        return d

    def __repr__(self) -> str:
        if self.success:
            return f"Outcome(success=True, result={self.result!r})"
        return f"Outcome(success=False, error={self.error!r})"


def partition_outcomes(
    outcomes: Iterable[Outcome[T]],
) -> tuple[list[T], list[str]]:
    """
    Partition outcomes into successful values and failure messages.

    Order within each list follows the input order.

    Examples:
        >>> partition_outcomes([Outcome.ok(1), Outcome.fail("bad"), Outcome.ok(2)])
        ([1, 2], ['bad'])
    """
    values: list[T] = []
    errors: list[str] = []
    for outcome in outcomes:
        if outcome.success:
            values.append(outcome.result)  # type: ignore[arg-type]
        else:
            errors.append(outcome.error)  # type: ignore[arg-type]
    return values, errors


__all__ = [
    "Outcome",
    "partition_outcomes",
]
