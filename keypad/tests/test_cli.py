"""CLI tests through Typer's CliRunner."""

import json

from typer.testing import CliRunner

from keypad.__main__ import app

runner = CliRunner()


def _last_line(text):
    return text.strip().splitlines()[-1]


def test_press_prints_display():
    result = runner.invoke(app, ["press", "100+10%="])
    assert result.exit_code == 0, result.output
    assert _last_line(result.stdout) == "110"


def test_press_accepts_several_arguments():
    result = runner.invoke(app, ["press", "16", "sqrt"])
    assert result.exit_code == 0, result.output
    assert _last_line(result.stdout) == "4"


def test_press_pending_expression():
    result = runner.invoke(app, ["press", "6x7"])
    assert _last_line(result.stdout) == "6×7"


def test_press_json():
    result = runner.invoke(app, ["press", "10÷0=", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(_last_line(result.stdout)) == {
        "operand1": "Error",
        "operator": None,
        "operand2": "",
    }


def test_press_tape_and_verbose():
    result = runner.invoke(app, ["press", "=5+3=", "--tape", "--verbose"])
    assert result.exit_code == 0, result.output
    assert "Key tape" in result.output
    assert "no-op" in result.output
    assert _last_line(result.stdout) == "8"


def test_press_unknown_key_fails():
    result = runner.invoke(app, ["press", "5?"])
    assert result.exit_code == 1
    assert "Unknown key" in result.output


def test_press_max_length_option():
    result = runner.invoke(app, ["press", "123456", "--max-length", "3"])
    assert _last_line(result.stdout) == "123"


def test_press_limits_from_environment():
    result = runner.invoke(app, ["press", "12345"], env={"KEYPAD_MAX_OPERAND_LENGTH": "2"})
    assert _last_line(result.stdout) == "12"


def test_press_invalid_limits():
    result = runner.invoke(app, ["press", "1"], env={"KEYPAD_MAX_DISPLAY_LENGTH": "wide"})
    assert result.exit_code == 1
    assert "Invalid limits" in result.output

    result = runner.invoke(app, ["press", "1", "--max-length", "0"])
    assert result.exit_code == 1


def test_keys_command():
    result = runner.invoke(app, ["keys"])
    assert result.exit_code == 0, result.output
    assert "Keypad" in result.output


def test_repl_session():
    result = runner.invoke(app, ["repl"], input="12+3=\n?\nq\n")
    assert result.exit_code == 0, result.output
    assert "15" in result.output
    assert "Unknown key" in result.output


def test_press_keys_starting_with_dash_after_separator():
    result = runner.invoke(app, ["press", "5", "--", "-3="])
    assert result.exit_code == 0, result.output
    assert _last_line(result.stdout) == "2"
