"""Aggregators over sequences of result tuples and optional values.

Each element is classified on its own. Iterables are consumed lazily, left to
right, so `all` pulls nothing past the element that stops it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from klaw_err.shape import AbsentType, Failure, Opaque, Success, classify, ok

__all__ = ['all', 'partition', 'values']


def all(items: Iterable[Any]) -> Any:  # noqa: A001
    """Collect payloads into one success, stopping at the first failure or absence.

    Args:
        items: Values of any shape.

    Returns:
        ``None`` at the first absent element, that exact failure tuple at the
        first failure, otherwise ``('ok', [payloads...])`` in input order.
        Opaque elements count as present values and are collected as-is.

    Examples:
        >>> all([('ok', 1), ('ok', 2)])
        ('ok', [1, 2])
        >>> all([('ok', 1), ('error', 'x'), ('error', 'y')])
        ('error', 'x')
        >>> all([])
        ('ok', [])
    """
    out: list[Any] = []
    for item in items:
        match classify(item):
            case Success(payload):
                out.append(payload)
            case Opaque(inner):
                out.append(inner)
            case AbsentType():
                return None
            case Failure():
                return item
    return ok(out)


def values(items: Iterable[Any]) -> list[Any]:
    """Return the payloads of successes and the opaque values, in order.

    Failures and absent values are skipped. Never short-circuits.
    """
    out: list[Any] = []
    for item in items:
        match classify(item):
            case Success(payload):
                out.append(payload)
            case Opaque(inner):
                out.append(inner)
    return out


def partition(items: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """Split success payloads from failure reasons, each list in input order.

    Absent and opaque values are dropped.

    Returns:
        tuple[list[Any], list[Any]]: ``(successes, failures)``.
    """
    successes: list[Any] = []
    failures: list[Any] = []
    for item in items:
        match classify(item):
            case Success(payload):
                successes.append(payload)
            case Failure(reason):
                failures.append(reason)
    return successes, failures
