"""
Console summary of a recovery log. Presentation only.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from salvage.execution.recovery import RecoveryLog


def build_summary_table(log: RecoveryLog, *, title: str = "Recovery log") -> Table:
    """One row per iteration: index, status, and result or error message."""
    table = Table(title=title)
    table.add_column("Iteration", justify="right", style="cyan")
    table.add_column("Status")
    table.add_column("Result / Error")

    errors = {entry.iteration: entry.error for entry in log.errors}
    for iteration in log.iterations:
        message = errors.get(iteration)
        if message is None:
            table.add_row(str(iteration), "[green]ok[/green]", escape(repr(log.result(iteration))))
        else:
            table.add_row(str(iteration), "[red]failed[/red]", escape(message))
    return table


def render_summary(
    log: RecoveryLog,
    *,
    console: Console | None = None,
    title: str = "Recovery log",
) -> None:
    """Print the summary table followed by a one-line tally."""
    console = console or Console()
    console.print(build_summary_table(log, title=title))
    failed = len(log.errors)
    console.print(
        f"{log.n - failed} succeeded, "
        f"[{'red' if failed else 'green'}]{failed} failed[/]"
    )


__all__ = ["build_summary_table", "render_summary"]
