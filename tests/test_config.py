"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from klaw_err import ErrConfig, get_config, init
from klaw_err._config import _detect_json_output, _detect_log_level, logging_enabled


class TestErrConfig:
    """Tests for the ErrConfig dataclass."""

    def test_default_values(self) -> None:
        config = ErrConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.log_unexpected_shape is True

    def test_config_is_frozen(self) -> None:
        config = ErrConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_unset(self) -> None:
        assert _detect_log_level() is None

    def test_env_level(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_env_blank(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None


class TestDetectJsonOutput:
    """Tests for _detect_json_output()."""

    def test_unset_defaults_to_json(self) -> None:
        assert _detect_json_output() is True

    def test_console(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_FORMAT': 'Console'}):
            assert _detect_json_output() is False

    def test_json(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_FORMAT': 'json'}):
            assert _detect_json_output() is True

    def test_unknown_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        with patch.dict(os.environ, {'KLAW_ERR_LOG_FORMAT': 'xml'}):
            assert _detect_json_output() is True
        assert 'Unknown KLAW_ERR_LOG_FORMAT' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_init_defaults_silent(self) -> None:
        config = init()
        assert config.log_level is None
        assert logging_enabled() is False

    def test_init_explicit(self) -> None:
        config = init('debug', json_output=False, log_unexpected_shape=False)
        assert config == ErrConfig(log_level='DEBUG', json_output=False, log_unexpected_shape=False)
        assert get_config() is config
        assert logging_enabled() is True

    def test_init_from_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_LEVEL': 'INFO', 'KLAW_ERR_LOG_FORMAT': 'console'}):
            config = init()
        assert config.log_level == 'INFO'
        assert config.json_output is False

    def test_explicit_overrides_env(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_LEVEL': 'INFO'}):
            config = init('WARNING')
        assert config.log_level == 'WARNING'

    def test_get_config_initializes_lazily(self) -> None:
        with patch.dict(os.environ, {'KLAW_ERR_LOG_LEVEL': 'ERROR'}):
            config = get_config()
        assert config.log_level == 'ERROR'
        assert get_config() is config

    def test_reinit_replaces(self) -> None:
        init('DEBUG')
        config = init()
        assert get_config() is config
        assert config.log_level is None
