"""Display derivation and Rich rendering."""

import io

from rich.console import Console

from keypad.display import clear_label, display_text, render_display, render_keys, render_tape
from keypad.keys import parse_keys
from keypad.models import INITIAL_STATE, CalculatorState, Operator
from keypad.session import Session


def make_console():
    buf = io.StringIO()
    return Console(file=buf, width=100, color_system=None), buf


def test_display_text_concatenates_operands_and_symbol():
    assert display_text(CalculatorState("100", Operator.ADD, "10%")) == "100+10%"
    assert display_text(CalculatorState("6", Operator.MULTIPLY, "7")) == "6×7"
    assert display_text(CalculatorState("8", Operator.DIVIDE, "")) == "8÷"
    assert display_text(CalculatorState("8", Operator.SUBTRACT, "2")) == "8-2"
    assert display_text(INITIAL_STATE) == ""


def test_clear_label():
    assert clear_label(INITIAL_STATE) == "AC"
    assert clear_label(CalculatorState("5")) == "C"


def test_render_display_shows_expression():
    console, buf = make_console()
    render_display(CalculatorState("12", Operator.ADD, "3"), console)
    assert "12+3" in buf.getvalue()


def test_render_display_empty_shows_zero():
    console, buf = make_console()
    render_display(INITIAL_STATE, console)
    assert "0" in buf.getvalue()
    assert "AC" in buf.getvalue()


def test_render_tape_rows():
    session = Session()
    session.press_all(parse_keys("2+3="))
    console, buf = make_console()
    render_tape(session.tape, console)
    out = buf.getvalue()
    assert "Key tape" in out
    assert "2+3" in out


def test_render_tape_marks_noop():
    session = Session()
    session.press_all(parse_keys("="))
    console, buf = make_console()
    render_tape(session.tape, console)
    assert "no-op" in buf.getvalue()


def test_render_tape_empty():
    console, buf = make_console()
    render_tape([], console)
    assert "No keys pressed" in buf.getvalue()


def test_render_keys_lists_every_key():
    console, buf = make_console()
    render_keys(console)
    out = buf.getvalue()
    assert "Keypad" in out
    assert "SquareRoot" in out
    assert "+/-" in out
