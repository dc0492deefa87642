"""Key table for the keypad.

Each key has a symbol (what the button shows), a few typed aliases and the
action it sends. parse_keys() turns a compact string such as "100+10%="
into the list of keys a user would have pressed.
"""

from __future__ import annotations

from dataclasses import dataclass

from keypad.models import (
    Action,
    Calculate,
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


@dataclass(frozen=True)
class KeySpec:
    """One keypad key."""

    name: str
    symbol: str
    aliases: tuple[str, ...]
    action: Action
    description: str

    @property
    def tokens(self) -> tuple[str, ...]:
        """Every string that presses this key, symbol first."""
        return (self.symbol,) + self.aliases


KEYS: list[KeySpec] = [
    *(
        KeySpec(str(d), str(d), (), Digit(d), f"Type {d}")
        for d in range(10)
    ),
    KeySpec("decimal", ".", (",",), Decimal(), "Decimal point"),
    KeySpec("add", "+", ("plus",), Operation(Operator.ADD), "Add"),
    KeySpec("subtract", "-", ("minus",), Operation(Operator.SUBTRACT), "Subtract"),
    KeySpec("multiply", "×", ("*", "x", "times"), Operation(Operator.MULTIPLY), "Multiply"),
    KeySpec("divide", "÷", ("/", "div"), Operation(Operator.DIVIDE), "Divide"),
    KeySpec("percent", "%", ("pct",), Percent(), "Mark operand as a percentage"),
    KeySpec("sqrt", "√", ("sqrt", "r"), SquareRoot(), "Square root of the first operand"),
    KeySpec("sign", "+/-", ("±", "neg", "n"), SignChange(), "Change sign"),
    KeySpec("delete", "⌫", ("del", "back", "d"), Delete(), "Delete last character"),
    KeySpec("clear", "C", ("AC", "clear", "c"), Clear(), "Clear everything"),
    KeySpec("calculate", "=", ("enter", "eq"), Calculate(), "Calculate"),
]

# Button grid of the keypad face, by key name.
KEYPAD_ROWS: list[list[str]] = [
    ["clear", "sign", "percent", "divide"],
    ["7", "8", "9", "multiply"],
    ["4", "5", "6", "subtract"],
    ["1", "2", "3", "add"],
    ["0", "decimal", "calculate"],
]

_BY_NAME: dict[str, KeySpec] = {k.name: k for k in KEYS}
_BY_TOKEN: dict[str, KeySpec] = {
    token.lower(): k for k in KEYS for token in k.tokens
}
# Longest first so "+/-" wins over "+" and "sqrt" over "s".
_TOKENS_BY_LENGTH = sorted(_BY_TOKEN, key=len, reverse=True)


def key_by_name(name: str) -> KeySpec:
    """Look up a key by its table name (e.g. 'multiply')."""
    return _BY_NAME[name]


def parse_key(token: str) -> KeySpec:
    """Resolve a single typed token to its key.

    Raises:
        ValueError: The token is not a symbol or alias of any key.
    """
    spec = _BY_TOKEN.get(token.strip().lower())
    if spec is None:
        raise ValueError(f"Unknown key: {token!r}")
    return spec


def parse_keys(text: str) -> list[KeySpec]:
    """Split a compact key string into keys.

    Whitespace separates nothing and is skipped; at each position the
    longest matching symbol or alias wins, case-insensitively.

    Raises:
        ValueError: Some position matches no key.
    """
    keys: list[KeySpec] = []
    lowered = text.lower()
    i = 0
    while i < len(lowered):
        if lowered[i].isspace():
            i += 1
            continue
        for token in _TOKENS_BY_LENGTH:
            if lowered.startswith(token, i):
                keys.append(_BY_TOKEN[token])
                i += len(token)
                break
        else:
            raise ValueError(f"Unknown key at position {i}: {lowered[i:]!r}")
    return keys
