#!/usr/bin/env python3
"""Seed Replay: Reproduce the Random Draw That Broke an Iteration.

================================================================================
WHAT THIS SHOWS
================================================================================

Each iteration draws a small normal sample and fails when the sample strays
too far below zero. Just before that draw the generator state is captured in
a ``SeedLedger``. Afterwards, for every failed iteration, ``replay`` rewinds
the generator and the same draw is issued again: the values match exactly.

Replay only restores state. Re-issuing the draw is up to the caller.

Run:
    python examples/03_seed_replay.py
"""

import random

from salvage import SeedLedger, configure_logging, run_with_recovery_log


def main() -> None:
    configure_logging(level="WARNING", json_format=False)

    rng = random.Random(1)
    ledger = SeedLedger(rng)

    def body(i: int) -> float:
        ledger.capture_seed(i)
        sample = [rng.gauss(0, 1) for _ in range(5)]
        if min(sample) < -1.5:
            raise ValueError(f"sample minimum {min(sample):.4f} below -1.5")
        return sum(sample) / len(sample)

    log = run_with_recovery_log(10, body)

    for entry in log.errors:
        ledger.replay(entry.iteration)
        sample = [rng.gauss(0, 1) for _ in range(5)]
        print(f"iteration {entry.iteration}: {entry.error}")
        print(f"  replayed minimum {min(sample):.4f}")


if __name__ == "__main__":
    main()
