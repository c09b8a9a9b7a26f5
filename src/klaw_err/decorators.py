"""@safe decorator for turning raised exceptions into failure tuples."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from klaw_err._config import logging_enabled
from klaw_err._logging import SAFE_CAUGHT, get_logger
from klaw_err.shape import err, ok

__all__ = ['safe']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, tuple[Any, ...]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, tuple[Any, ...]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns a failure tuple.

    Wraps a function so that it returns ``('ok', value)`` on success and
    ``('error', exception)`` if one of ``exceptions`` is raised. Other
    exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function returning a result tuple.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # ('ok', 5.0)
        divide(10, 0)
        # ('error', ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> tuple[Any, ...]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            if logging_enabled():
                get_logger(__name__).debug(
                    SAFE_CAUGHT,
                    function=getattr(wrapped, '__qualname__', repr(wrapped)),
                    exception=type(e).__name__,
                )
            return err(e)
        return ok(result)

    if func is not None:
        return wrapper(func)
    return wrapper
