"""
Structured error types for salvage infrastructure.

Failures raised by caller-supplied work are never represented here: those are
captured as plain message strings inside an Outcome. The types in this module
describe misuse of the recovery machinery itself (a negative iteration count,
a body that is not callable, replaying a snapshot that was never captured).
They propagate normally and are never intercepted by guarded invocation.

Manifesto:
    - **Work failures are data:** captured, stored, reported as a message
    - **Infrastructure failures are exceptions:** raised loudly, never captured
    - **Rich context:** errors carry the operation and iteration they concern
    - **Error chaining:** preserve the original exception as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      SalvageError                            │
        │               (category, context, cause)                     │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  ConfigError             OutcomeError          ReplayError   │
        │  (CONFIG)                (OUTCOME)             (REPLAY)      │
        │      │                       │                     │         │
        │  InvalidIterationCount   OutcomeInvariant     SnapshotNotFound│
        │  InvalidWork             OutcomeUnwrap                       │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidIterationCountError("n must be >= 0, got -1")
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> isinstance(error, ValueError)
    True

    >>> error = SnapshotNotFoundError("no snapshot for iteration 7")
    >>> error.with_context(iteration=7).context.iteration
    7

Tags:
    error-handling, exception-hierarchy, error-context, salvage
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Categories for infrastructure errors.

    Attributes:
        CONFIG: Invalid arguments handed to the recovery machinery
        OUTCOME: Misuse of an Outcome record
        REPLAY: Seed snapshot lookup or restore failures
        INTERNAL: Bugs, unexpected state
    """

    CONFIG = "CONFIG"
    OUTCOME = "OUTCOME"
    REPLAY = "REPLAY"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to a SalvageError.

    Examples:
        >>> ErrorContext(operation="run_with_recovery_log", iteration=3).to_dict()
        {'operation': 'run_with_recovery_log', 'iteration': 3}
    """

    operation: str | None = None
    iteration: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        if self.operation is not None:
            result["operation"] = self.operation
        if self.iteration is not None:
            result["iteration"] = self.iteration
        if self.metadata:
            result.update(self.metadata)
        return result


class SalvageError(Exception):
    """
    Base exception for all salvage infrastructure errors.

    Subclasses set ``default_category`` so callers get a sensible category
    without passing one explicitly.

    Examples:
        >>> error = SalvageError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'SalvageError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SalvageError:
        """
        Add context to this error (fluent API).

        Usage:
            raise SnapshotNotFoundError("missing").with_context(iteration=4)
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    # Overrides KeyError.__str__, which would quote the message
    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(SalvageError):
    """Invalid arguments handed to the recovery machinery."""

    default_category = ErrorCategory.CONFIG


class InvalidIterationCountError(ConfigError, ValueError):
    """Iteration count is negative or not an integer."""


class InvalidWorkError(ConfigError, TypeError):
    """Iteration body is not callable."""


# =============================================================================
# OUTCOME ERRORS
# =============================================================================


class OutcomeError(SalvageError):
    """Misuse of an Outcome record."""

    default_category = ErrorCategory.OUTCOME


class OutcomeInvariantError(OutcomeError, ValueError):
    """Outcome constructed with both or neither of result/error populated."""


class OutcomeUnwrapError(OutcomeError):
    """``unwrap()`` called on a failed Outcome; carries the captured message."""


# =============================================================================
# REPLAY ERRORS
# =============================================================================


class ReplayError(SalvageError):
    """Seed snapshot capture or restore failed."""

    default_category = ErrorCategory.REPLAY


class SnapshotNotFoundError(ReplayError, KeyError):
    """No seed snapshot has been captured for the requested index."""


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "SalvageError",
    "ConfigError",
    "InvalidIterationCountError",
    "InvalidWorkError",
    "OutcomeError",
    "OutcomeInvariantError",
    "OutcomeUnwrapError",
    "ReplayError",
    "SnapshotNotFoundError",
]
