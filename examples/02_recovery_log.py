#!/usr/bin/env python3
"""Recovery Log: Keep Looping When One Iteration Fails.

================================================================================
WHAT THIS SHOWS
================================================================================

``run_with_recovery_log`` calls the body once per index. A failing index is
recorded in ``log.errors`` and its result slot stays empty; every other index
still runs. Here the body raises only when ``10 / i == 5`` (i = 2).

Run:
    python examples/02_recovery_log.py
"""

from salvage import configure_logging, render_summary, run_with_recovery_log


def body(i: int) -> float:
    if 10 / i == 5:
        raise ValueError("Error")
    return i + 22.5


def main() -> None:
    configure_logging(level="INFO", json_format=False)

    log = run_with_recovery_log(10, body)

    print(f"errors:  {log.errors}")
    print(f"results: {log.results}")
    render_summary(log, title="10 / i == 5 raises")


if __name__ == "__main__":
    main()
