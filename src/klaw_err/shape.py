"""Shape classification and payload extraction for plain result/option values.

A value is never wrapped by this library. Its shape is read from its
structure:

    ('ok', payload)            Success
    ('error', reason)          Failure
    None                       Absent
    anything else              Opaque (a present option value)

Tuples longer than two slots carry their payload as an ordered list:

    ```python
    from klaw_err.shape import classify, extract

    classify(('ok', 1))
    # Success(payload=1, arity=2)

    extract(('ok', 'row', {'cached': True}))
    # ['row', {'cached': True}]
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeIs

import msgspec

__all__ = [
    'ERROR',
    'OK',
    'Absent',
    'AbsentType',
    'Classified',
    'Failure',
    'Opaque',
    'Shape',
    'Success',
    'classify',
    'err',
    'extract',
    'is_err',
    'is_none',
    'is_ok',
    'is_some',
    'ok',
    'shape_of',
]

OK = 'ok'
"""First-slot marker of a success tuple."""

ERROR = 'error'
"""First-slot marker of a failure tuple."""


class Shape(Enum):
    """The four mutually exclusive shapes a value can take."""

    SUCCESS = 'success'
    FAILURE = 'failure'
    ABSENT = 'absent'
    OPAQUE = 'opaque'


class Success(msgspec.Struct, frozen=True, gc=False):
    """A classified success tuple.

    Attributes:
        payload: Slot 1 for a 2-tuple, otherwise the list of slots 1..N-1.
        arity: Length of the original tuple.
    """

    payload: Any
    arity: int = 2

    @property
    def shape(self) -> Shape:
        return Shape.SUCCESS


class Failure(msgspec.Struct, frozen=True, gc=False):
    """A classified failure tuple.

    Attributes:
        reason: Slot 1 for a 2-tuple, otherwise the list of slots 1..N-1.
        arity: Length of the original tuple.
    """

    reason: Any
    arity: int = 2

    @property
    def shape(self) -> Shape:
        return Shape.FAILURE


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """The classified form of ``None``.

    Use the `Absent` singleton instead of instantiating directly.
    """

    @property
    def shape(self) -> Shape:
        return Shape.ABSENT


class Opaque(msgspec.Struct, frozen=True, gc=False):
    """Any value that is neither a result tuple nor ``None``."""

    value: Any

    @property
    def shape(self) -> Shape:
        return Shape.OPAQUE


Absent: AbsentType = AbsentType()
"""Singleton classification of ``None``."""

type Classified = Success | Failure | AbsentType | Opaque


def _has_marker(value: tuple[Any, ...], marker: str) -> bool:
    head = value[0]
    return isinstance(head, str) and head == marker


def _payload(value: tuple[Any, ...]) -> Any:
    if len(value) == 2:
        return value[1]
    return list(value[1:])


def classify(value: Any) -> Classified:
    """Classify a value into one of the four shapes.

    Decision order, first match wins: ``None`` is Absent; a tuple of at least
    two slots headed by ``'ok'`` is Success; the same headed by ``'error'`` is
    Failure; everything else is Opaque. Never raises.

    Args:
        value: Any value.

    Returns:
        Classified: The tagged variant, with its payload already extracted.

    Example:
        ```python
        match classify(fetch_user(42)):
            case Success(user):
                ...
            case Failure(reason):
                ...
            case AbsentType():
                ...
            case Opaque(value):
                ...
        ```
    """
    if value is None:
        return Absent
    if isinstance(value, tuple) and len(value) >= 2:
        if _has_marker(value, OK):
            return Success(_payload(value), len(value))
        if _has_marker(value, ERROR):
            return Failure(_payload(value), len(value))
    return Opaque(value)


def shape_of(value: Any) -> Shape:
    """Return the `Shape` of a value."""
    return classify(value).shape


def extract(value: Any) -> Any:
    """Extract the payload of a value.

    Args:
        value: Any value.

    Returns:
        Any: For a Success or Failure 2-tuple the bare second slot; for longer
        tuples the remaining slots as a list, in order; for an Opaque value
        the value itself; for ``None`` a new empty list.
    """
    match classify(value):
        case Success(payload):
            return payload
        case Failure(reason):
            return reason
        case Opaque(inner):
            return inner
        case _:
            return []


def ok(value: Any, *extra: Any) -> tuple[Any, ...]:
    """Build a success tuple: ``ok(1) == ('ok', 1)``, ``ok(1, 2) == ('ok', 1, 2)``."""
    return (OK, value, *extra)


def err(reason: Any, *extra: Any) -> tuple[Any, ...]:
    """Build a failure tuple: ``err('boom') == ('error', 'boom')``."""
    return (ERROR, reason, *extra)


def is_ok(value: Any) -> TypeIs[tuple[Any, ...]]:
    """Return True if the value is a success tuple."""
    return isinstance(classify(value), Success)


def is_err(value: Any) -> TypeIs[tuple[Any, ...]]:
    """Return True if the value is a failure tuple."""
    return isinstance(classify(value), Failure)


def is_none(value: Any) -> bool:
    """Return True if the value is absent (``None``)."""
    return value is None


def is_some(value: Any) -> bool:
    """Return True if the value is present.

    Result tuples are present values too: ``is_some(('error', 'x'))`` is True.
    """
    return value is not None
