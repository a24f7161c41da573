"""
salvage: structured error recovery for iterative and batch work.

Run a unit of work and get back an Outcome instead of an exception, loop
over many iterations while logging the ones that fail, and snapshot a
random generator before each risky draw so a failing iteration can be
reproduced exactly.

Example:
    >>> from salvage import guarded_call, run_with_recovery_log, SeedLedger
    >>> guarded_call(int, "42").result
    42
    >>> guarded_call(int, "forty-two").success
    False
"""

from salvage.core.errors import (
    InvalidIterationCountError,
    InvalidWorkError,
    SalvageError,
    SnapshotNotFoundError,
)
from salvage.core.logging import configure_logging, get_logger
from salvage.core.outcome import Outcome, partition_outcomes
from salvage.core.settings import SalvageSettings, get_settings
from salvage.execution.guarded import guarded, guarded_call
from salvage.execution.recovery import IterationError, RecoveryLog, run_with_recovery_log
from salvage.execution.replay import SeedLedger, SeedSnapshot
from salvage.execution.summary import render_summary

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Outcome",
    "partition_outcomes",
    "guarded_call",
    "guarded",
    "IterationError",
    "RecoveryLog",
    "run_with_recovery_log",
    "SeedLedger",
    "SeedSnapshot",
    "render_summary",
    "SalvageSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "SalvageError",
    "InvalidIterationCountError",
    "InvalidWorkError",
    "SnapshotNotFoundError",
]
