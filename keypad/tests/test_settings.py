"""Limits configuration from the environment."""

import pytest

from keypad.settings import DEFAULT_MAX_LENGTH, Limits


def test_defaults():
    limits = Limits()
    assert limits.max_operand_length == DEFAULT_MAX_LENGTH == 15
    assert limits.max_display_length == 15


def test_from_env_defaults_when_unset():
    assert Limits.from_env({}) == Limits()


def test_from_env_reads_variables():
    limits = Limits.from_env({
        "KEYPAD_MAX_OPERAND_LENGTH": "8",
        "KEYPAD_MAX_DISPLAY_LENGTH": " 10 ",
    })
    assert limits == Limits(max_operand_length=8, max_display_length=10)


def test_from_env_blank_is_default():
    assert Limits.from_env({"KEYPAD_MAX_OPERAND_LENGTH": ""}) == Limits()


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("KEYPAD_MAX_DISPLAY_LENGTH", "9")
    monkeypatch.delenv("KEYPAD_MAX_OPERAND_LENGTH", raising=False)
    assert Limits.from_env() == Limits(max_display_length=9)


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5"])
def test_from_env_rejects_bad_values(raw):
    with pytest.raises(ValueError, match="KEYPAD_MAX_OPERAND_LENGTH|max_operand_length"):
        Limits.from_env({"KEYPAD_MAX_OPERAND_LENGTH": raw})


def test_rejects_non_int():
    with pytest.raises(ValueError):
        Limits(max_display_length=True)
