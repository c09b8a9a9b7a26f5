"""Error types: the fatal UnexpectedShape and the generic error pair.

GenericError follows the dual struct+exception layout: `GenericFailure` is a
frozen struct to carry inside a failure tuple, `GenericError` is the exception
to raise. Each converts into the other.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from klaw_err.shape import Shape

__all__ = [
    'GenericError',
    'GenericFailure',
    'UnexpectedShape',
    'UnknownOrigin',
    'wrap',
]


class UnexpectedShape(Exception):  # noqa: N818
    """Raised by `expect` / `expect_err` when a value has the wrong shape.

    This is the only exception raised by the combinators. It marks a caller
    assertion that turned out to be false, so it is not meant to be caught and
    turned back into a value.

    Attributes:
        descriptor: The caller-supplied message or context, untouched.
        expected: Shape the caller asserted.
        actual: Shape the value really had.
    """

    def __init__(self, descriptor: Any, *, expected: Shape, actual: Shape) -> None:
        self.descriptor = descriptor
        self.expected = expected
        self.actual = actual
        super().__init__(f'expected {expected.value}, got {actual.value}: {_describe(descriptor)}')


def _describe(descriptor: Any) -> str:
    if isinstance(descriptor, str):
        return descriptor
    if isinstance(descriptor, BaseException):
        from klaw_err.formatting import message

        # Building the message must not replace UnexpectedShape with the
        # formatter's own error (UnknownOrigin, or a bug in the formatter).
        try:
            return message(descriptor)
        except Exception:
            return repr(descriptor)
    return repr(descriptor)


class UnknownOrigin(LookupError):  # noqa: N818
    """No formatter is registered for an error origin."""

    def __init__(self, origin: Any) -> None:
        self.origin = origin
        super().__init__(f'No formatter for origin {origin!r}')


class GenericFailure(msgspec.Struct, frozen=True, gc=False):
    """Generic error - struct variant for use as a failure reason."""

    reason: Any = None
    origin: Any = None
    details: Any = None

    def to_exception(self) -> GenericError:
        """Convert to exception for raise-based code."""
        return GenericError(self.reason, origin=self.origin, details=self.details)


class GenericError(Exception):
    """Generic error - exception variant.

    Good enough to get something running; applications usually grow their own
    exception types later.

    Attributes:
        reason: Short string describing what went wrong.
        origin: Where the error came from. Also selects the formatter used by
            `klaw_err.formatting.message`; ``str()`` falls back to the
            generic message when that formatter is missing or fails. Optional.
        details: Whatever caused the error (a validation report, a response...).
            Optional.

    Example:
        ```python
        str(GenericError('app_error'))
        # "generic error: 'app_error'"
        ```
    """

    def __init__(self, reason: Any = None, *, origin: Any = None, details: Any = None) -> None:
        self.reason = reason
        self.origin = origin
        self.details = details
        super().__init__(reason)

    def __str__(self) -> str:
        from klaw_err.formatting import format_generic, message

        if self.origin is not None:
            # unknown origin or failing formatter
            with contextlib.suppress(Exception):
                return message(self)
        return format_generic(self.reason)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(reason={self.reason!r}, origin={self.origin!r})'

    def to_struct(self) -> GenericFailure:
        """Convert to struct for result-based code."""
        return GenericFailure(self.reason, self.origin, self.details)


def wrap(exception: type[BaseException] | None = None, /, *args: Any, **fields: Any) -> BaseException:
    """Build an exception instance from a class and its fields.

    Any exception class can be used, from the standard library, a third-party
    package or your application.

    Args:
        exception: The exception class. When omitted, a `GenericError` is built.
        *args: Positional constructor arguments.
        **fields: Attributes of the new exception. `GenericError` and its
            subclasses receive them as keyword arguments, so a name their
            constructor does not accept raises TypeError instead of being
            dropped. Other classes get them set as attributes after
            construction.

    Returns:
        BaseException: The new, unraised exception.

    Raises:
        TypeError: If ``exception`` is not an exception class, or a field is
            not a keyword of a `GenericError` constructor.

    Example:
        ```python
        wrap(KeyError, key='id').key
        # 'id'

        wrap(reason='boom')
        # GenericError(reason='boom', origin=None)
        ```
    """
    if exception is None:
        return GenericError(*args, **fields)
    if not isinstance(exception, type) or not issubclass(exception, BaseException):
        msg = f'wrap() expects an exception class, got {exception!r}'
        raise TypeError(msg)
    if issubclass(exception, GenericError):
        return exception(*args, **fields)
    exc = exception(*args)
    for name, value in fields.items():
        setattr(exc, name, value)
    return exc
