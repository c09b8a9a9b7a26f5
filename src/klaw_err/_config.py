"""Configuration: ErrConfig, initialization and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_err._logging import LOGGER_NAME, configure_logging

__all__ = [
    'ErrConfig',
    'get_config',
    'init',
    'logging_enabled',
]

_LOG_FORMATS = {'json': True, 'console': False}


@dataclass(frozen=True)
class ErrConfig:
    """Configuration for klaw-err.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or for the console (False).
        log_unexpected_shape: Emit a debug event before `expect` / `expect_err`
            raise UnexpectedShape.
    """

    log_level: str | None = None
    json_output: bool = True
    log_unexpected_shape: bool = True


# Global configuration (set by init())
_config: ErrConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_ERR_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('KLAW_ERR_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_json_output() -> bool:
    """Read KLAW_ERR_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('KLAW_ERR_LOG_FORMAT', '').strip().lower()
    if not env_format:
        return True
    if env_format not in _LOG_FORMATS:
        logging.getLogger(LOGGER_NAME).warning("Unknown KLAW_ERR_LOG_FORMAT value '%s', defaulting to json", env_format)
        return True
    return _LOG_FORMATS[env_format]


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    log_unexpected_shape: bool = True,
) -> ErrConfig:
    """Initialize klaw-err with the given configuration.

    Args:
        log_level: Logging level. Read from KLAW_ERR_LOG_LEVEL if None; when
            still unset the library stays silent.
        json_output: JSON or console log rendering. Read from
            KLAW_ERR_LOG_FORMAT if None.
        log_unexpected_shape: Log failed `expect` / `expect_err` assertions.

    Returns:
        The ErrConfig that was set.

    Example:
        ```python
        from klaw_err import init

        # Configure from the environment
        init()

        # Explicit configuration
        init('DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = ErrConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _detect_json_output(),
        log_unexpected_shape=log_unexpected_shape,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> ErrConfig:
    """Get the current configuration, initializing from the environment on first use.

    A lazy initialization only touches the `klaw_err` logger, never the root
    logger or the global structlog configuration.
    """
    if _config is None:
        return init()
    return _config


def logging_enabled() -> bool:
    """Return True if a log level has been configured."""
    return get_config().log_level is not None
