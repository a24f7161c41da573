#!/usr/bin/env python3
"""Guarded Call: Run One Unit of Work Without Letting It Raise.

================================================================================
WHAT THIS SHOWS
================================================================================

``guarded_call`` runs a callable and hands back an ``Outcome``:

    Outcome(success=True,  result=<value>)  : the work returned
    Outcome(success=False, error=<message>) : the work raised

Two cases below: a division that returns a sentinel for zero (nothing is
raised, so the outcome is a success) and a strict division that rejects a
non-numeric operand (the TypeError becomes a failed outcome).

Run:
    python examples/01_guarded_call.py
"""

from salvage import configure_logging, guarded_call


def divide(a, b):
    if b == 0:
        return float("inf")
    return a / b


def divide_strict(a, b):
    if not isinstance(b, (int, float)):
        raise TypeError(f"non-numeric argument to binary operator: {b!r}")
    return a / b


def main() -> None:
    configure_logging(level="INFO", json_format=False)

    outcome = guarded_call(divide, 10, 0)
    print(f"divide(10, 0)        -> {outcome}")

    outcome = guarded_call(divide_strict, 10, "x")
    print(f"divide_strict(10, x) -> {outcome}")
    print(f"  success={outcome.success} error={outcome.error!r}")


if __name__ == "__main__":
    main()
