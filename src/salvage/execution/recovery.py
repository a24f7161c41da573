"""Iteration recovery log: keep looping when an iteration fails.

``run_with_recovery_log`` drives ``iteration_body`` over ``n`` consecutive
indices. Each call runs under guarded invocation; a failing iteration adds an
:class:`IterationError` to the log and leaves its result slot empty, then the
loop moves on. The loop always runs exactly ``n`` iterations.

Architecture:
    ::

        for index in start .. start+n-1:
            ┌──────────────────────────────┐
            │ guarded_call(body, index)    │
            └──────────────┬───────────────┘
                 ok        │        fail
            results[slot] = v    errors.append(IterationError(index, msg))
                           │
                  progress notice (structlog)

    Only misuse of the driver itself (negative ``n``, a non-callable body)
    raises; those checks happen before the first iteration.

Example:
    >>> def body(i):
    ...     if 10 / i == 5:
    ...         raise ValueError("Error")
    ...     return i + 22.5
    >>> log = run_with_recovery_log(4, body)
    >>> log.errors
    [IterationError(iteration=2, error='Error')]
    >>> log.results
    [23.5, None, 25.5, 26.5]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from salvage.core.errors import ErrorContext, InvalidIterationCountError, InvalidWorkError
from salvage.core.logging import LogContext, get_logger
from salvage.core.settings import get_settings
from salvage.execution.guarded import guarded_call

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IterationError:
    """A failed iteration and the message its body raised."""

    iteration: int
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"iteration": self.iteration, "error": self.error}


@dataclass
class RecoveryLog(Generic[T]):
    """Accumulators built by :func:`run_with_recovery_log`.

    ``results`` has one slot per iteration, pre-filled with ``None``. Slot
    ``k`` belongs to iteration ``start + k`` and is written only when that
    iteration succeeds. ``errors`` lists failed iterations in the order they
    ran.

    Because a body may legitimately return ``None``, use
    :attr:`failed_iterations` or :meth:`error_for` rather than a ``None``
    slot to decide whether an iteration failed.

    Attributes:
        n: Number of iterations the log covers.
        start: Index of the first iteration.
        errors: One entry per failed iteration, in execution order.
        results: Per-iteration values, ``None`` where the iteration failed.
    """

    n: int
    start: int = 1
    errors: list[IterationError] = field(default_factory=list)
    results: list[T | None] = field(init=False)

    def __post_init__(self) -> None:
        self.results = [None] * self.n

    @property
    def iterations(self) -> range:
        return range(self.start, self.start + self.n)

    def _slot(self, iteration: int) -> int:
        if iteration not in self.iterations:
            raise IndexError(
                f"iteration {iteration} outside {self.start}..{self.start + self.n - 1}"
            )
        return iteration - self.start

    def record_success(self, iteration: int, value: T) -> None:
        self.results[self._slot(iteration)] = value

    def record_failure(self, iteration: int, message: str) -> None:
        self._slot(iteration)
        self.errors.append(IterationError(iteration=iteration, error=message))

    def result(self, iteration: int) -> T | None:
        """Value stored for ``iteration`` (``None`` if it failed)."""
        return self.results[self._slot(iteration)]

    def error_for(self, iteration: int) -> str | None:
        """Message captured for ``iteration``, or ``None`` if it succeeded."""
        self._slot(iteration)
        for entry in self.errors:
            if entry.iteration == iteration:
                return entry.error
        return None

    @property
    def failed_iterations(self) -> list[int]:
        return [entry.iteration for entry in self.errors]

    @property
    def succeeded_iterations(self) -> list[int]:
        failed = set(self.failed_iterations)
        return [i for i in self.iterations if i not in failed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "n": self.n,
            "start": self.start,
            "errors": [entry.to_dict() for entry in self.errors],
            "results": list(self.results),
        }


def run_with_recovery_log(
    n: int,
    iteration_body: Callable[[int], T],
    *,
    start: int | None = None,
) -> RecoveryLog[T]:
    """Run ``iteration_body`` for ``n`` ascending indices without aborting.

    Args:
        n: Number of iterations (``>= 0``).
        iteration_body: Called once per index; returns a value or raises.
        start: First index. Defaults to ``SalvageSettings.iteration_start``.

    Returns:
        The finished :class:`RecoveryLog`.

    Raises:
        InvalidIterationCountError: ``n`` is negative or not an int.
        InvalidWorkError: ``iteration_body`` is not callable.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidIterationCountError(
            f"iteration count must be a non-negative int, got {n!r}",
            context=ErrorContext(operation="run_with_recovery_log"),
        )
    if not callable(iteration_body):
        raise InvalidWorkError(
            f"iteration body must be callable, got {type(iteration_body).__name__}",
            context=ErrorContext(operation="run_with_recovery_log"),
        )
    if start is None:
        start = get_settings().iteration_start

    log: RecoveryLog[T] = RecoveryLog(n=n, start=start)

    for index in log.iterations:
        with LogContext(iteration=index):
            outcome = guarded_call(iteration_body, index)

        if outcome.success:
            log.record_success(index, outcome.result)  # type: ignore[arg-type]
            logger.info("iteration_succeeded", iteration=index)
        else:
            log.record_failure(index, outcome.error)  # type: ignore[arg-type]
            logger.warning("iteration_failed", iteration=index, error=outcome.error)

    logger.info(
        "recovery_loop_finished",
        iterations=n,
        succeeded=n - len(log.errors),
        failed=len(log.errors),
    )
    return log


__all__ = ["IterationError", "RecoveryLog", "run_with_recovery_log"]
