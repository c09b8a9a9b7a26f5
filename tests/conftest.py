"""Pytest configuration and shared fixtures for klaw-err tests."""

import logging

import pytest
from klaw_err import _config, _logging
from klaw_err._logging import LOGGER_NAME, clear_log_hooks
from klaw_err.formatting import clear_formatters


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    """Start each test silent, with no hooks and no registered formatters."""
    monkeypatch.delenv('KLAW_ERR_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KLAW_ERR_LOG_FORMAT', raising=False)
    monkeypatch.setattr(_config, '_config', None)
    monkeypatch.setattr(_logging, '_handler', None)
    clear_log_hooks()
    clear_formatters()
    yield
    clear_log_hooks()
    clear_formatters()
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def boom():
    """A callback that fails the test if it is ever called."""

    def _boom(*args, **kwargs):
        pytest.fail(f'callback should not have been called with {args!r}')

    return _boom


@pytest.fixture
def log_events():
    """Enable debug logging and collect every emitted event dict."""
    from klaw_err import add_log_hook, init

    received = []
    init('DEBUG')
    add_log_hook(received.append)
    return received
