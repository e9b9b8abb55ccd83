"""Tests for library configuration."""

import logging

import pytest
from hypothesis import given

from adtkit import Err, Left, Nothing, config, either, maybe, option, result
from tests.strategies import exceptions


class TestDefaults:
    def test_default_config(self):
        cfg = config.get_config()
        assert cfg.log_level is None
        assert cfg.log_format == "json"

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            config.get_config().log_level = "DEBUG"  # type: ignore[misc]


class TestInit:
    def test_init_returns_and_installs(self):
        cfg = config.init(log_level="INFO", log_format="console")
        assert cfg == config.Config(log_level="INFO", log_format="console")
        assert config.get_config() is cfg

    @given(exceptions)
    def test_init_does_not_change_what_is_captured(self, exc):
        config.init(log_level="CRITICAL", log_format="console")

        def boom():
            raise exc

        assert result.from_throwable(boom) == Err(exc)
        assert either.from_throwable(boom) == Left(exc)
        assert option.from_throwable(boom) is Nothing
        assert maybe.from_throwable(boom) is None

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError, match="log_format"):
            config.init(log_format="xml")

    def test_reset(self):
        config.init(log_level="DEBUG")
        config.reset()
        assert config.get_config() == config.Config()


class TestLogLevel:
    def test_log_level_configures_logging(self):
        cfg = config.init(log_level="debug")
        assert cfg.log_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("ADTKIT_LOG_LEVEL", "warning")
        assert config.init().log_level == "WARNING"

    def test_argument_beats_env_var(self, monkeypatch):
        monkeypatch.setenv("ADTKIT_LOG_LEVEL", "warning")
        assert config.init(log_level="ERROR").log_level == "ERROR"

    def test_unknown_level_defaults_to_info(self):
        assert config.init(log_level="chatty").log_level == "INFO"

    def test_format_env_var(self, monkeypatch):
        monkeypatch.setenv("ADTKIT_LOG_FORMAT", "Console")
        assert config.init().log_format == "console"

    def test_no_level_leaves_logging_alone(self, monkeypatch):
        monkeypatch.delenv("ADTKIT_LOG_LEVEL", raising=False)
        handlers = list(logging.getLogger().handlers)
        assert config.init().log_level is None
        assert logging.getLogger().handlers == handlers
