"""Deterministic replay via seed capture.

A :class:`SeedLedger` is bound to one pseudo-random generator. Inside an
iteration body, call :meth:`SeedLedger.capture_seed` immediately before the
draw whose failure you care about (after any earlier draws in the same
iteration that are not meant to be replayed). Later, :meth:`SeedLedger.replay`
rewinds the generator to that point; re-issuing the same sequence of draws
then yields bit-identical values.

Replay restores state only. Re-invoking the failing call is up to the caller.

The generator is an explicit object rather than hidden global state. Any
object with ``getstate()``/``setstate()`` works, so the module-level stream
can still be captured by passing the ``random`` module itself. For parallel
use, give each thread of control its own generator and its own ledger; no
locking is provided.

Example:
    >>> ledger = SeedLedger(seed=123)
    >>> draws = {}
    >>> for i in range(1, 4):
    ...     _ = ledger.capture_seed(i)
    ...     draws[i] = ledger.rng.gauss(0, 1)
    >>> ledger.replay(2)
    >>> ledger.rng.gauss(0, 1) == draws[2]
    True
"""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass
from typing import Any, Iterator

from salvage.core.errors import ConfigError, ErrorContext, SnapshotNotFoundError
from salvage.core.logging import get_logger
from salvage.core.protocols import StatefulRandom
from salvage.core.settings import get_settings

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SeedSnapshot:
    """Opaque generator state captured for one iteration index."""

    index: int
    state: Any


class SeedLedger:
    """Per-index seed snapshots for one generator.

    Args:
        rng: Generator to snapshot and restore. When omitted a new
            ``random.Random`` is created.
        seed: Seed for the generator created when ``rng`` is omitted.
            Falls back to ``SalvageSettings.seed``.

    Raises:
        ConfigError: both ``rng`` and ``seed`` were given, or ``rng`` lacks
            ``getstate``/``setstate``.
    """

    def __init__(self, rng: StatefulRandom | None = None, *, seed: int | None = None):
        if rng is not None and seed is not None:
            raise ConfigError(
                "pass either rng or seed, not both",
                context=ErrorContext(operation="SeedLedger"),
            )
        if rng is None:
            if seed is None:
                seed = get_settings().seed
            rng = random.Random(seed)
        elif not isinstance(rng, StatefulRandom):
            raise ConfigError(
                f"rng must provide getstate()/setstate(), got {type(rng).__name__}",
                context=ErrorContext(operation="SeedLedger"),
            )
        self.rng = rng
        self._snapshots: dict[int, SeedSnapshot] = {}

    def capture_seed(self, index: int) -> SeedSnapshot:
        """Store a copy of the current generator state at slot ``index``.

        A second capture for the same index replaces the first.
        """
        snapshot = SeedSnapshot(index=index, state=copy.deepcopy(self.rng.getstate()))
        self._snapshots[index] = snapshot
        logger.debug("seed_captured", iteration=index)
        return snapshot

    def replay(self, index: int) -> None:
        """Restore the generator to the state captured at slot ``index``.

        Raises:
            SnapshotNotFoundError: nothing was captured for ``index``.
        """
        snapshot = self.snapshot(index)
        self.rng.setstate(snapshot.state)
        logger.debug("seed_replayed", iteration=index)

    def snapshot(self, index: int) -> SeedSnapshot:
        try:
            return self._snapshots[index]
        except KeyError:
            raise SnapshotNotFoundError(
                f"no seed snapshot captured for iteration {index}",
                context=ErrorContext(operation="replay", iteration=index),
            ) from None

    def indices(self) -> list[int]:
        return sorted(self._snapshots)

    def clear(self) -> None:
        self._snapshots.clear()

    def __contains__(self, index: object) -> bool:
        return index in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[SeedSnapshot]:
        return (self._snapshots[i] for i in self.indices())


__all__ = ["SeedSnapshot", "SeedLedger"]
