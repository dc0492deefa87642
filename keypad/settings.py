"""Length limits for the keypad engine.

Limits come from the process environment so a host can widen or narrow
the display without code changes. Self-contained, no external dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_LENGTH = 15

_OPERAND_VAR = "KEYPAD_MAX_OPERAND_LENGTH"
_DISPLAY_VAR = "KEYPAD_MAX_DISPLAY_LENGTH"


@dataclass(frozen=True)
class Limits:
    """Maximum operand length (typing) and result length (formatting)."""

    max_operand_length: int = DEFAULT_MAX_LENGTH
    max_display_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        for name in ("max_operand_length", "max_display_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Limits:
        """Build limits from KEYPAD_* variables, defaulting to 15 each.

        Args:
            environ: Mapping to read instead of os.environ (mainly for tests).

        Raises:
            ValueError: A variable is set but is not a positive integer.
        """
        env = os.environ if environ is None else environ
        return cls(
            max_operand_length=_read_int(env, _OPERAND_VAR),
            max_display_length=_read_int(env, _DISPLAY_VAR),
        )


def _read_int(env: Mapping[str, str], key: str) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return DEFAULT_MAX_LENGTH
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be a positive integer, got {raw!r}") from None


DEFAULT_LIMITS = Limits()
