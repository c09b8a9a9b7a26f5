"""Logging for klaw-err's own debug events.

Everything goes through the ``klaw_err`` stdlib logger. `configure_logging`
gives that logger its own structlog-rendered handler and stops it from
propagating, so the host application's root logger and structlog
configuration are left alone.

Events:
    formatter_registered: ``origin`` (repr of the registered origin).
    safe_caught: ``function`` (qualified name), ``exception`` (class name).
    unexpected_shape: ``expected`` and ``actual`` shape names.

Hooks see each event dict before rendering:

    ```python
    from klaw_err import add_log_hook, init

    init('DEBUG')
    add_log_hook(lambda event: metrics.increment(event['event']))
    ```
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'FORMATTER_REGISTERED',
    'LOGGER_NAME',
    'SAFE_CAUGHT',
    'UNEXPECTED_SHAPE',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

LOGGER_NAME = 'klaw_err'

FORMATTER_REGISTERED = 'formatter_registered'
SAFE_CAUGHT = 'safe_caught'
UNEXPECTED_SHAPE = 'unexpected_shape'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each klaw-err event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered hook. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        # A failing hook must not break the caller's combinator.
        with contextlib.suppress(Exception):
            hook(event_dict.copy())
    return event_dict


def _shared_processors() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send klaw-err events to stderr at ``level`` and above.

    Calling it again replaces the handler installed by the previous call.
    Handlers the application attached to ``klaw_err`` itself are kept.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing to ``klaw_err`` or one of its children.

    Args:
        name: Logger name, usually the calling module's ``__name__``. Names
            outside the ``klaw_err`` hierarchy are nested under it.

    Returns:
        A structlog BoundLogger bound to a stdlib logger.
    """
    if name is None:
        name = LOGGER_NAME
    elif name != LOGGER_NAME and not name.startswith(f'{LOGGER_NAME}.'):
        name = f'{LOGGER_NAME}.{name}'
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            _run_hooks,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
