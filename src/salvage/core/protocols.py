"""
Structural protocols used across salvage.

Architecture:
    ::

        protocols.py
        └── StatefulRandom : generator whose state can be saved and restored

    Consumers:
        execution/replay.py

Examples:
    Both a dedicated generator and the module-level stream satisfy it:

    >>> import random
    >>> isinstance(random.Random(7), StatefulRandom)
    True
    >>> isinstance(random, StatefulRandom)
    True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StatefulRandom(Protocol):
    """
    Pseudo-random stream with explicit save/restore points.

    ``getstate()`` returns an opaque value; handing that same value back to
    ``setstate()`` rewinds the stream so subsequent draws repeat exactly.

    Implementations:
        - ``random.Random`` instances (one stream per instance)
        - the ``random`` module itself (the process-wide stream)
    """

    def getstate(self) -> Any:
        """Return an opaque copy of the current state."""
        ...

    def setstate(self, state: Any) -> None:
        """Restore state previously returned by ``getstate()``."""
        ...


__all__ = ["StatefulRandom"]
