"""Keypad state reducer.

reduce(state, action) is the whole engine: it takes the current snapshot and
one keypad action and returns the next snapshot. It never mutates its input
and never raises; an action that cannot apply returns the state unchanged.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable, Optional

from keypad.formatting import format_result
from keypad.models import (
    ERROR_SENTINEL,
    INITIAL_STATE,
    PERCENT_MARKER,
    Action,
    Calculate,
    CalculatorState,
    Clear,
    Decimal,
    Delete,
    Digit,
    Operation,
    Operator,
    Percent,
    SignChange,
    SquareRoot,
)
from keypad.percent import parse_number, resolve_percent
from keypad.settings import DEFAULT_LIMITS, Limits


def reduce(
    state: CalculatorState,
    action: Action,
    limits: Optional[Limits] = None,
) -> CalculatorState:
    """Return the snapshot that follows `state` after `action`.

    Args:
        state: Current snapshot.
        action: One of the actions in keypad.models.
        limits: Length limits; canonical defaults (15/15) when omitted.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action, limits or DEFAULT_LIMITS)


def _active(state: CalculatorState) -> str:
    """The operand that typing currently goes to."""
    return state.operand2 if state.operator is not None else state.operand1


def _with_active(state: CalculatorState, text: str) -> CalculatorState:
    if state.operator is not None:
        return replace(state, operand2=text)
    return replace(state, operand1=text)


def _digit(state: CalculatorState, action: Digit, limits: Limits) -> CalculatorState:
    operand = _active(state)
    if PERCENT_MARKER in operand or len(operand) >= limits.max_operand_length:
        return state
    return _with_active(state, operand + str(action.value))


def _decimal(state: CalculatorState, action: Decimal, limits: Limits) -> CalculatorState:
    operand = _active(state)
    if not operand.strip() or "." in operand or PERCENT_MARKER in operand:
        return state
    if len(operand) >= limits.max_operand_length:
        return state
    return _with_active(state, operand + ".")


def _operation(state: CalculatorState, action: Operation, limits: Limits) -> CalculatorState:
    # operand2 is kept on purpose: "5+3" then "×" reads "5×3".
    if not state.operand1.strip():
        return state
    return replace(state, operator=action.operator)


def _delete(state: CalculatorState, action: Delete, limits: Limits) -> CalculatorState:
    if state.operand2.strip():
        return replace(state, operand2=state.operand2[:-1])
    if state.operator is not None:
        return replace(state, operator=None)
    if state.operand1.strip():
        return replace(state, operand1=state.operand1[:-1])
    return state


def _clear(state: CalculatorState, action: Clear, limits: Limits) -> CalculatorState:
    return INITIAL_STATE


def _percent(state: CalculatorState, action: Percent, limits: Limits) -> CalculatorState:
    operand = _active(state)
    if not operand.strip() or PERCENT_MARKER in operand:
        return state
    return _with_active(state, operand + PERCENT_MARKER)


def _square_root(state: CalculatorState, action: SquareRoot, limits: Limits) -> CalculatorState:
    value = parse_number(state.operand1)
    if value is None:
        return state
    root = math.sqrt(value) if value >= 0 else math.nan
    return CalculatorState(operand1=format_result(root, limits.max_display_length))


def _sign_change(state: CalculatorState, action: SignChange, limits: Limits) -> CalculatorState:
    if state.operand2.strip():
        value = parse_number(state.operand2)
        if value is None:
            return state
        return replace(state, operand2=format_result(-value, limits.max_display_length))
    if state.operand1.strip():
        value = parse_number(state.operand1)
        if value is None:
            return state
        return replace(state, operand1=format_result(-value, limits.max_display_length))
    return state


def _calculate(state: CalculatorState, action: Calculate, limits: Limits) -> CalculatorState:
    left, right, op = state.operand1, state.operand2, state.operator

    # Lone percentage: "50%" = 0.5
    if not right.strip() and op is None:
        if PERCENT_MARKER not in left:
            return state
        value = resolve_percent(left)
        if value is None:
            return state
        return CalculatorState(operand1=format_result(value, limits.max_display_length))

    if not (left.strip() and right.strip() and op is not None):
        return state

    # The first operand has nothing before it, so its percent stands alone;
    # the second takes the resolved first operand as its base.
    num1 = resolve_percent(left)
    if num1 is None:
        return state
    num2 = resolve_percent(right, num1, op)
    if num2 is None:
        return state

    if op is Operator.DIVIDE and num2 == 0.0:
        return CalculatorState(operand1=ERROR_SENTINEL)

    result = _APPLY[op](num1, num2)
    return CalculatorState(operand1=format_result(result, limits.max_display_length))


_APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUBTRACT: lambda a, b: a - b,
    Operator.MULTIPLY: lambda a, b: a * b,
    Operator.DIVIDE: lambda a, b: a / b,
}

_HANDLERS: dict[type, Callable[[CalculatorState, Action, Limits], CalculatorState]] = {
    Digit: _digit,
    Decimal: _decimal,
    Operation: _operation,
    Delete: _delete,
    Clear: _clear,
    Percent: _percent,
    SquareRoot: _square_root,
    SignChange: _sign_change,
    Calculate: _calculate,
}
