"""Human-readable messages for exceptions, resolved per error origin.

An exception may carry an ``origin`` attribute naming where it came from. The
origin picks the formatter that turns the exception's ``reason`` into text:

    ```python
    from klaw_err import GenericError, message, register_formatter

    register_formatter('auth', lambda reason: f'Not allowed: {reason}')
    message(GenericError('insufficient_permissions', origin='auth'))
    # 'Not allowed: insufficient_permissions'
    ```

An origin can also be any object with a ``format_error(reason)`` callable,
such as a module or a class, without registering it.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from klaw_err._config import logging_enabled
from klaw_err._logging import FORMATTER_REGISTERED, get_logger
from klaw_err.errors import UnknownOrigin

__all__ = [
    'clear_formatters',
    'format_generic',
    'message',
    'register_formatter',
    'resolve_formatter',
    'unregister_formatter',
]

type Formatter = Callable[[Any], str]

_formatters: dict[Hashable, Formatter] = {}


def format_generic(reason: Any) -> str:
    """Default formatter for errors without an origin."""
    return f'generic error: {reason!r}'


def register_formatter(origin: Hashable, formatter: Formatter) -> None:
    """Register the formatter used for errors coming from ``origin``.

    Registering an origin twice replaces the previous formatter.

    Args:
        origin: Any hashable identifier (a string, an enum member, a class...).
        formatter: Callable taking the error reason and returning a string.
    """
    _formatters[origin] = formatter
    if logging_enabled():
        get_logger(__name__).debug(FORMATTER_REGISTERED, origin=repr(origin))


def unregister_formatter(origin: Hashable) -> None:
    """Remove the formatter registered for ``origin``, if any."""
    _formatters.pop(origin, None)


def clear_formatters() -> None:
    """Remove all registered formatters."""
    _formatters.clear()


def resolve_formatter(origin: Any) -> Formatter:
    """Find the formatter for an origin.

    The registry is consulted first, then a callable ``format_error``
    attribute on the origin itself.

    Raises:
        UnknownOrigin: If neither lookup succeeds.
    """
    try:
        formatter = _formatters.get(origin)
    except TypeError:
        # unhashable, possibly nested (a tuple holding a list)
        formatter = None
    if formatter is not None:
        return formatter
    format_error = getattr(origin, 'format_error', None)
    if callable(format_error):
        return format_error
    raise UnknownOrigin(origin)


def message(exception: BaseException) -> str:
    """Return the message for an exception.

    Exceptions with a non-None ``origin`` are formatted by that origin's
    formatter, given the exception's ``reason``. Anything else uses its own
    string form, or its class name when that is empty (``KeyError()``).

    Raises:
        UnknownOrigin: If the exception names an origin with no formatter.
    """
    origin = getattr(exception, 'origin', None)
    if origin is not None:
        return resolve_formatter(origin)(getattr(exception, 'reason', None))
    return str(exception) or type(exception).__name__
