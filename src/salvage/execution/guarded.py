"""Guarded invocation: run one unit of work and capture its outcome.

``guarded_call`` is the bridge between exception-raising code and
:class:`~salvage.core.outcome.Outcome`. Whatever the work raises (an
arithmetic fault, a type mismatch, a missing dependency, or the work not
being callable at all) is converted into a failed outcome holding the
exception's message. Nothing raised by the work escapes.

Partial side effects performed by the work before it raised are not rolled
back.

Example:
    >>> from salvage.execution.guarded import guarded_call
    >>> guarded_call(lambda a, b: a / b, 10, 4)
    Outcome(success=True, result=2.5)
    >>> guarded_call(lambda a, b: a / b, 10, 0)
    Outcome(success=False, error='division by zero')
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, TypeVar

from salvage.core.logging import get_logger
from salvage.core.outcome import Outcome

T = TypeVar("T")

logger = get_logger(__name__)


def error_message(exc: BaseException) -> str:
    """Human-readable message for a captured exception.

    Falls back to the exception's class name when ``str(exc)`` is empty or
    itself raises, so a failed outcome never carries an empty message.
    """
    try:
        text = str(exc)
    except Exception:
        text = ""
    return text or type(exc).__name__


def _work_name(work: Any) -> str:
    try:
        name = getattr(work, "__qualname__", None) or getattr(work, "__name__", None)
    except Exception:
        name = None
    if isinstance(name, str) and name:
        return name
    return type(work).__qualname__


def guarded_call(work: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Invoke ``work(*args, **kwargs)`` and return its outcome.

    Args:
        work: Any callable. A non-callable or a wrong-arity call is captured
            as a failure like any other.
        *args: Positional arguments forwarded to ``work``.
        **kwargs: Keyword arguments forwarded to ``work``.

    Returns:
        ``Outcome.ok(value)`` if ``work`` returned, ``Outcome.fail(message)``
        if it raised.
    """
    start = time.perf_counter()
    try:
        value = work(*args, **kwargs)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - start) * 1000
        message = error_message(e)
        logger.debug(
            "work_failed",
            work=_work_name(work),
            error=message,
            error_type=type(e).__name__,
        )
        return Outcome.fail(message, elapsed_ms=elapsed_ms)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.debug("work_succeeded", work=_work_name(work), elapsed_ms=round(elapsed_ms, 3))
    return Outcome.ok(value, elapsed_ms=elapsed_ms)


def guarded(func: Callable[..., T]) -> Callable[..., Outcome[T]]:
    """Decorator form of :func:`guarded_call`.

    Example:
        >>> @guarded
        ... def parse(text):
        ...     return int(text)
        >>> parse("12").result
        12
        >>> parse("twelve").success
        False
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Outcome[T]:
        return guarded_call(func, *args, **kwargs)

    return wrapper


__all__ = ["guarded_call", "guarded", "error_message"]
