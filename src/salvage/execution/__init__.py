"""
Execution layer: guarded invocation, the recovery loop, and seed replay.
"""

from salvage.execution.guarded import error_message, guarded, guarded_call
from salvage.execution.recovery import IterationError, RecoveryLog, run_with_recovery_log
from salvage.execution.replay import SeedLedger, SeedSnapshot
from salvage.execution.summary import build_summary_table, render_summary

__all__ = [
    "guarded_call",
    "guarded",
    "error_message",
    "IterationError",
    "RecoveryLog",
    "run_with_recovery_log",
    "SeedLedger",
    "SeedSnapshot",
    "build_summary_table",
    "render_summary",
]
