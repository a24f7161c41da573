"""
Core primitives for salvage.

- Outcome: immutable success/failure envelope
- Errors: infrastructure error hierarchy
- Logging: structlog configuration and context helpers
- Settings: environment-driven configuration
- Protocols: structural types shared across modules
"""

from salvage.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    InvalidIterationCountError,
    InvalidWorkError,
    OutcomeError,
    OutcomeInvariantError,
    OutcomeUnwrapError,
    ReplayError,
    SalvageError,
    SnapshotNotFoundError,
)
from salvage.core.outcome import Outcome, partition_outcomes
from salvage.core.protocols import StatefulRandom

__all__ = [
    "Outcome",
    "partition_outcomes",
    "StatefulRandom",
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
