"""Combinators over plain result tuples and optional values.

Every function here classifies its input once (see `klaw_err.shape.classify`)
and then applies the rule for that shape. Results stay result tuples, options
stay plain values or ``None``:

    ```python
    from klaw_err import combinators as c

    c.map(('ok', 2), lambda x: x + 1)
    # ('ok', 3)

    c.map(2, lambda x: x + 1)
    # 3

    c.map(('error', 'timeout'), lambda x: x + 1)
    # ('error', 'timeout')

    c.unwrap_or(None, 'default.json')
    # 'default.json'
    ```

On a failure or an absent value, the functions passed to `map`, `and_then` and
the ``replace`` family are never called. On a success or an opaque value the
fallbacks of `or_else_lazy` and `unwrap_or_lazy` are never called either.

Transforming a tuple with more than one payload slot yields a 2-tuple: the
callback receives the slots as a list and its result becomes the only payload.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from klaw_err._config import get_config, logging_enabled
from klaw_err._logging import UNEXPECTED_SHAPE, get_logger
from klaw_err.errors import UnexpectedShape
from klaw_err.shape import (
    AbsentType,
    Classified,
    Failure,
    Opaque,
    Shape,
    Success,
    classify,
    err,
    ok,
)

__all__ = [
    'and_then',
    'expect',
    'expect_err',
    'flatten',
    'map',
    'map_err',
    'or_else',
    'or_else_lazy',
    'replace',
    'replace_err',
    'replace_err_lazy',
    'replace_lazy',
    'unwrap_or',
    'unwrap_or_lazy',
]


def map[T, U](value: Any, f: Callable[[T], U]) -> Any:  # noqa: A001
    """Transform the payload of a success, or a present option value.

    Args:
        value: Value of any shape.
        f: Function applied to the payload.

    Returns:
        ``('ok', f(payload))`` for a success, ``f(value)`` for an opaque value,
        the input unchanged otherwise.
    """
    match classify(value):
        case Success(payload):
            return ok(f(payload))
        case Opaque(inner):
            return f(inner)
        case _:
            return value


def map_err[E, F](value: Any, f: Callable[[E], F]) -> Any:
    """Transform the reason of a failure; any other value is returned unchanged.

    Args:
        value: Value of any shape.
        f: Function applied to the failure reason.

    Returns:
        ``('error', f(reason))`` for a failure, the input unchanged otherwise.
    """
    match classify(value):
        case Failure(reason):
            return err(f(reason))
        case _:
            return value


def and_then[T](value: Any, f: Callable[[T], Any]) -> Any:
    """Chain a computation onto a success or a present option value.

    The return value of ``f`` is passed through as-is and is NOT wrapped in a
    success tuple. ``f`` is responsible for returning a correctly shaped value:

        ```python
        and_then(('ok', 5), lambda x: ('ok', x * 2))
        # ('ok', 10)

        and_then(('ok', 5), lambda x: x * 2)
        # 10
        ```

    Use `map` when the callback returns a plain value.

    Args:
        value: Value of any shape.
        f: Function applied to the payload.

    Returns:
        ``f(payload)`` for a success, ``f(value)`` for an opaque value, the
        input unchanged otherwise.
    """
    match classify(value):
        case Success(payload):
            return f(payload)
        case Opaque(inner):
            return f(inner)
        case _:
            return value


def or_else(value: Any, alternative: Any) -> Any:
    """Return ``alternative`` for a failure or an absent value, else ``value``."""
    match classify(value):
        case Failure() | AbsentType():
            return alternative
        case _:
            return value


def or_else_lazy[E](value: Any, f: Callable[[E], Any]) -> Any:
    """Compute a replacement for a failure or an absent value.

    Args:
        value: Value of any shape.
        f: Called with the failure reason, or with an empty list for an
            absent value. Not called otherwise.

    Returns:
        The result of ``f`` for a failure or an absent value, else ``value``.
    """
    match classify(value):
        case Failure(reason):
            return f(reason)
        case AbsentType():
            return f([])
        case _:
            return value


def unwrap_or(value: Any, default: Any) -> Any:
    """Return the payload of a success, ``default`` for a failure or absent value.

    An opaque value is returned as-is.
    """
    match classify(value):
        case Success(payload):
            return payload
        case Opaque(inner):
            return inner
        case _:
            return default


def unwrap_or_lazy[E](value: Any, f: Callable[[E], Any]) -> Any:
    """Return the payload of a success, or compute a default.

    Args:
        value: Value of any shape.
        f: Called with the failure reason, or with an empty list for an
            absent value. Not called otherwise.

    Returns:
        The payload of a success, the opaque value itself, or the result of
        ``f``.
    """
    match classify(value):
        case Success(payload):
            return payload
        case Opaque(inner):
            return inner
        case Failure(reason):
            return f(reason)
        case _:
            return f([])


def _unexpected(descriptor: Any, expected: Shape, classified: Classified) -> NoReturn:
    if logging_enabled() and get_config().log_unexpected_shape:
        get_logger(__name__).debug(
            UNEXPECTED_SHAPE,
            expected=expected.value,
            actual=classified.shape.value,
        )
    exc = UnexpectedShape(descriptor, expected=expected, actual=classified.shape)
    if isinstance(descriptor, BaseException):
        raise exc from descriptor
    raise exc


def expect(value: Any, descriptor: Any) -> Any:
    """Return the payload of a success, or raise.

    Use it only where a failure means a bug: the raise is not meant to be
    caught and turned back into a value.

    Args:
        value: Value expected to be a success.
        descriptor: Message or context to attach to the error. When it is an
            exception it also becomes the ``__cause__``.

    Returns:
        The success payload.

    Raises:
        UnexpectedShape: If ``value`` is not a success.
    """
    classified = classify(value)
    if isinstance(classified, Success):
        return classified.payload
    _unexpected(descriptor, Shape.SUCCESS, classified)


def expect_err(value: Any, descriptor: Any) -> Any:
    """Return the reason of a failure, or raise.

    Raises:
        UnexpectedShape: If ``value`` is not a failure.
    """
    classified = classify(value)
    if isinstance(classified, Failure):
        return classified.reason
    _unexpected(descriptor, Shape.FAILURE, classified)


def replace(value: Any, new_value: Any) -> Any:
    """Replace the payload of a success; any other value is returned unchanged."""
    match classify(value):
        case Success():
            return ok(new_value)
        case _:
            return value


def replace_lazy[T](value: Any, f: Callable[[T], Any]) -> Any:
    """Replace the payload of a success with ``f(payload)``.

    Unlike `map`, an opaque value is returned unchanged.
    """
    match classify(value):
        case Success(payload):
            return ok(f(payload))
        case _:
            return value


def replace_err(value: Any, new_reason: Any) -> Any:
    """Replace the reason of a failure; any other value is returned unchanged."""
    match classify(value):
        case Failure():
            return err(new_reason)
        case _:
            return value


def replace_err_lazy[E](value: Any, f: Callable[[E], Any]) -> Any:
    """Replace the reason of a failure with ``f(reason)``."""
    match classify(value):
        case Failure(reason):
            return err(f(reason))
        case _:
            return value


def flatten(value: Any) -> Any:
    """Remove one level of nesting from a success.

    ``('ok', ('ok', x))`` becomes ``('ok', x)`` and ``('ok', ('error', r))``
    becomes ``('error', r)``. A success with multiple payload slots, a success
    whose payload is not a result, and every other shape are returned
    unchanged.
    """
    match classify(value):
        case Success(payload, 2) if isinstance(classify(payload), Success | Failure):
            return payload
        case _:
            return value
