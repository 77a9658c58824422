"""Tests for the evently configuration system."""

import dataclasses
import logging

import pytest

from evently import EventEmitter
from evently.config import DEFAULT_CONFIG
from evently.config import EventlyConfig
from evently.config import config_context
from evently.config import get_config
from evently.config import reset_config
from evently.config import set_config
from evently.config import update_config
from evently.errors import ConfigurationError


class TestEventlyConfig:
    """Test cases for EventlyConfig class."""

    def test_default_config(self) -> None:
        config = EventlyConfig()

        assert config.trace_dispatch is False
        assert config.trace_level == "DEBUG"
        config.validate()

    def test_validate_rejects_unknown_level(self) -> None:
        config = EventlyConfig(trace_level="LOUD")  # type: ignore[arg-type]

        with pytest.raises(ConfigurationError, match="Unknown log level") as excinfo:
            config.validate()
        assert excinfo.value.config_key == "trace_level"

    def test_validate_rejects_non_bool_trace(self) -> None:
        config = EventlyConfig(trace_dispatch="yes")  # type: ignore[arg-type]

        with pytest.raises(ConfigurationError) as excinfo:
            config.validate()
        assert excinfo.value.config_key == "trace_dispatch"


class TestConfigManager:
    """Test cases for the process-wide configuration functions."""

    def test_returned_config_cannot_be_mutated(self) -> None:
        config = get_config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.trace_dispatch = True  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.trace_level = "TRACE"  # type: ignore[misc]

        reset_config()
        assert get_config().trace_dispatch is False
        assert DEFAULT_CONFIG.trace_level == "DEBUG"

    def test_emit_unaffected_by_rejected_mutation(self) -> None:
        emitter = EventEmitter()
        calls = []
        emitter.on("x", lambda: calls.append(1))

        with pytest.raises(AttributeError):
            get_config().trace_level = "TRACE"  # type: ignore[misc]
        emitter.emit("x")

        assert calls == [1]

    def test_set_and_reset(self) -> None:
        config = EventlyConfig(trace_dispatch=True)
        set_config(config)
        assert get_config() is config

        reset_config()
        assert get_config() is DEFAULT_CONFIG

    def test_set_config_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            set_config(EventlyConfig(trace_level="NOPE"))  # type: ignore[arg-type]
        assert get_config() is DEFAULT_CONFIG

    def test_update_config_does_not_touch_defaults(self) -> None:
        update_config(trace_dispatch=True, trace_level="INFO")

        assert get_config().trace_dispatch is True
        assert get_config().trace_level == "INFO"
        assert DEFAULT_CONFIG.trace_dispatch is False

    def test_update_config_warns_on_unknown_keys(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="evently.config.config_manager"):
            update_config(bogus=1)

        assert "bogus" in caplog.text
        assert get_config() == DEFAULT_CONFIG

    def test_config_context_restores(self) -> None:
        with config_context(trace_dispatch=True) as config:
            assert config.trace_dispatch is True
            assert get_config() is config

        assert get_config() is DEFAULT_CONFIG

    def test_config_context_restores_after_error(self) -> None:
        msg = "inside"
        with pytest.raises(RuntimeError), config_context(trace_dispatch=True):
            raise RuntimeError(msg)

        assert get_config().trace_dispatch is False


def test_trace_dispatch_logs_emissions(caplog) -> None:
    emitter = EventEmitter()
    emitter.on("tick", lambda: None)

    with caplog.at_level(logging.INFO, logger="evently.events"):
        emitter.emit("tick")
        assert "emit" not in caplog.text

        with config_context(trace_dispatch=True, trace_level="INFO"):
            emitter.emit("tick")

    assert "emit 'tick' to 1 listener(s) and 0 forward target(s)" in caplog.text
