import io
import logging
import sys
from unittest.mock import patch

import pytest
from environs import Env

from resonance_calc.config import Settings
from resonance_calc.domain.exceptions import UnknownUnitError
from resonance_calc.domain.models.units import FrequencyUnit, MetricPrefix
from resonance_calc.logging_config import get_logger, setup_logging

ENV_VARS = [
    "DISPLAY_PRECISION",
    "DEFAULT_COMPONENT_PREFIX",
    "DEFAULT_FREQUENCY_UNIT",
    "LOGGING_LEVEL",
    "DEBUG",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def package_logger_level():
    """Restore the package logger level changed by setup_logging"""
    logger = logging.getLogger("resonance_calc")
    level = logger.level
    yield
    logger.setLevel(level)


def test_settings_defaults(clean_env):
    settings = Settings.from_env(Env())
    assert settings.display_precision == 2
    assert settings.default_component_prefix is MetricPrefix.MICRO
    assert settings.default_frequency_unit is FrequencyUnit.MHZ


def test_settings_from_env(clean_env):
    clean_env.setenv("DISPLAY_PRECISION", "4")
    clean_env.setenv("DEFAULT_COMPONENT_PREFIX", "n")
    clean_env.setenv("DEFAULT_FREQUENCY_UNIT", "kHz")

    settings = Settings.from_env(Env())

    assert settings.display_precision == 4
    assert settings.default_component_prefix is MetricPrefix.NANO
    assert settings.default_frequency_unit is FrequencyUnit.KHZ


def test_settings_rejects_unknown_prefix(clean_env):
    clean_env.setenv("DEFAULT_COMPONENT_PREFIX", "k")
    with pytest.raises(UnknownUnitError):
        Settings.from_env(Env())


def test_settings_rejects_non_integer_precision(clean_env):
    clean_env.setenv("DISPLAY_PRECISION", "two")
    with pytest.raises(ValueError):
        Settings.from_env(Env())


def test_settings_rejects_out_of_range_precision():
    with pytest.raises(ValueError, match="display_precision"):
        Settings(display_precision=-1)


def test_setup_logging_reads_level(clean_env, package_logger_level):
    clean_env.setenv("LOGGING_LEVEL", "warning")
    with patch.object(logging.root, "handlers", []), patch(
        "resonance_calc.logging_config.logging.basicConfig"
    ) as mock_basic_config:
        setup_logging(Env())

    assert mock_basic_config.call_args.kwargs["level"] == logging.WARNING
    assert logging.getLogger("resonance_calc").level == logging.WARNING


def test_setup_logging_debug_flag_overrides_level(clean_env, package_logger_level):
    clean_env.setenv("LOGGING_LEVEL", "ERROR")
    clean_env.setenv("DEBUG", "true")
    with patch.object(logging.root, "handlers", []), patch(
        "resonance_calc.logging_config.logging.basicConfig"
    ) as mock_basic_config:
        setup_logging(Env())

    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


def test_setup_logging_rejects_invalid_level(clean_env):
    clean_env.setenv("LOGGING_LEVEL", "LOUD")
    with patch.object(logging.root, "handlers", []):
        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            setup_logging(Env())


def test_setup_logging_is_noop_when_configured(clean_env):
    with patch.object(logging.root, "handlers", [logging.NullHandler()]), patch(
        "resonance_calc.logging_config.logging.basicConfig"
    ) as mock_basic_config:
        setup_logging(Env())

    mock_basic_config.assert_not_called()


def test_get_logger():
    assert get_logger("resonance_calc.test").name == "resonance_calc.test"


def test_setup_logging_writes_to_given_stream(clean_env, package_logger_level):
    stream = io.StringIO()
    with patch.object(logging.root, "handlers", []), patch(
        "resonance_calc.logging_config.logging.basicConfig"
    ) as mock_basic_config:
        setup_logging(Env(), stream=stream)

    assert mock_basic_config.call_args.kwargs["stream"] is stream


def test_setup_logging_defaults_to_stdout(clean_env, package_logger_level):
    with patch.object(logging.root, "handlers", []), patch(
        "resonance_calc.logging_config.logging.basicConfig"
    ) as mock_basic_config:
        setup_logging(Env())

    assert mock_basic_config.call_args.kwargs["stream"] is sys.stdout
