import json
import logging
from unittest.mock import patch

import pytest

from resonance_calc.main import main


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Run the CLI with default settings and without touching logging config"""
    for name in ["DISPLAY_PRECISION", "DEFAULT_COMPONENT_PREFIX", "DEFAULT_FREQUENCY_UNIT"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    with patch("resonance_calc.main.setup_logging") as mock_setup_logging:
        yield mock_setup_logging


def test_frequency_mode_prints_report(cli_env, capsys):
    # capacitance, prefix, inductance, prefix
    with patch("builtins.input", side_effect=["100", "n", "10", "µ"]):
        exit_code = main(["--mode", "frequency"])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Calculated Resonance Frequency" in output
    assert "159.15 kHz" in output
    assert "1.5915e+5 Hz" in output
    cli_env.assert_called_once()


def test_component_mode_uses_defaults_for_skipped_units(cli_env, capsys):
    # known component, value, prefix (default µ), frequency, unit (default MHz)
    with patch("builtins.input", side_effect=["", "100", "", "1", ""]):
        exit_code = main([])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Calculated Inductance" in output
    # L = 1 / ((2π·1e6)^2 · 1e-4) ≈ 2.533e-10 H
    assert "253.30 pH" in output
    assert r"\text{µF}" in output


def test_component_mode_json_output(cli_env, capsys):
    with patch("builtins.input", side_effect=["L", "10", "m", "159.154943", "Hz"]):
        exit_code = main(["--mode", "component", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["solved"] == "capacitor"
    assert data["scaled"]["unit"] == "µF"
    assert data["scaled"]["value"] == pytest.approx(100.0, rel=1e-6)


def test_missing_value_prints_error(cli_env, capsys):
    with patch("builtins.input", side_effect=["", "", "10", ""]):
        exit_code = main(["--mode", "frequency"])

    assert exit_code == 1
    assert (
        "Error: Please fill in both capacitance and inductance values"
        in capsys.readouterr().out
    )


def test_zero_frequency_prints_error(cli_env, capsys):
    with patch("builtins.input", side_effect=["C", "100", "p", "0", "MHz"]):
        exit_code = main([])

    assert exit_code == 1
    assert "Error: Frequency must be positive" in capsys.readouterr().out


def test_unknown_unit_prints_error(cli_env, capsys):
    with patch("builtins.input", side_effect=["100", "x"]):
        exit_code = main(["--mode", "frequency"])

    assert exit_code == 1
    assert "Unknown prefix 'x'" in capsys.readouterr().out


def test_end_of_input_prints_error(cli_env, capsys):
    with patch("builtins.input", side_effect=EOFError):
        exit_code = main(["--mode", "frequency"])

    assert exit_code == 1
    assert "input ended" in capsys.readouterr().out


@pytest.fixture
def real_logging(monkeypatch, tmp_path):
    """Run the CLI with the real logging setup; restore logger levels afterwards"""
    for name in [
        "DISPLAY_PRECISION",
        "DEFAULT_COMPONENT_PREFIX",
        "DEFAULT_FREQUENCY_UNIT",
        "LOGGING_LEVEL",
        "DEBUG",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    package_logger = logging.getLogger("resonance_calc")
    levels = (logging.root.level, package_logger.level)
    yield
    logging.root.setLevel(levels[0])
    package_logger.setLevel(levels[1])


def run_main_unconfigured(argv, inputs):
    # pytest installs its own capture handler on the root logger during a test,
    # which would make setup_logging a no-op
    with patch.object(logging.root, "handlers", []), patch(
        "builtins.input", side_effect=inputs
    ) as mock_input:
        exit_code = main(argv)
    return exit_code, mock_input


def test_json_output_is_parseable_with_logging_enabled(real_logging, capsys):
    exit_code, _ = run_main_unconfigured(
        ["--mode", "component", "--json"], ["L", "10", "m", "159.154943", "Hz"]
    )

    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert exit_code == 0
    assert data["title"] == "Calculated Capacitance"
    assert "[INFO]" in captured.err
    assert "Calculated Capacitance: 100.00 µF" in captured.err


def test_json_mode_writes_prompts_to_stderr(real_logging, capsys):
    exit_code, mock_input = run_main_unconfigured(
        ["--mode", "frequency", "--json"], ["100", "n", "10", "µ"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)["scaled"]["unit"] == "kHz"
    assert "Enter capacitance value: " in captured.err
    mock_input.assert_called_with()


def test_console_mode_logs_to_stdout(real_logging, capsys):
    exit_code, _ = run_main_unconfigured(["--mode", "frequency"], ["100", "n", "10", "µ"])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "[INFO] [resonance_calc.application.calculation]" in output
    assert "159.15 kHz" in output
