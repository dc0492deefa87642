"""Data models for the keypad engine.

Operator enum, CalculatorState snapshot and the closed set of keypad
actions: the typed structures that flow through keys → reducer → display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

PERCENT_MARKER = "%"
ERROR_SENTINEL = "Error"


class Operator(str, Enum):
    """Binary operations a pending expression can hold."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}


@dataclass(frozen=True)
class CalculatorState:
    """Immutable snapshot of the two operands and the pending operator.

    Operands are the text being typed, not numbers: they may carry a trailing
    percent marker, a trailing decimal point, or the error sentinel.
    """

    operand1: str = ""
    operator: Optional[Operator] = None
    operand2: str = ""

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "operand1": self.operand1,
            "operator": self.operator.value if self.operator else None,
            "operand2": self.operand2,
        }

    @classmethod
    def from_dict(cls, d: dict) -> CalculatorState:
        """Deserialize from a dict produced by to_dict()."""
        op = d.get("operator")
        return cls(
            operand1=d.get("operand1", ""),
            operator=Operator(op) if op else None,
            operand2=d.get("operand2", ""),
        )


INITIAL_STATE = CalculatorState()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit must be 0-9, got {self.value}")


@dataclass(frozen=True)
class Decimal:
    pass


@dataclass(frozen=True)
class Operation:
    operator: Operator


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class SquareRoot:
    pass


@dataclass(frozen=True)
class SignChange:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Calculate:
    pass


Action = Union[
    Digit, Decimal, Operation, Percent, SquareRoot, SignChange, Delete, Clear, Calculate
]

ALL_ACTION_TYPES = (
    Digit, Decimal, Operation, Percent, SquareRoot, SignChange, Delete, Clear, Calculate
)
