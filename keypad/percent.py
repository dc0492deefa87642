"""Operand parsing and deferred percent resolution.

A percent-marked operand ("10%") is not converted when the key is pressed;
it is resolved here at calculation time, using the pending operator and
the other operand as context.
"""

from __future__ import annotations

import re
from typing import Optional

from keypad.models import PERCENT_MARKER, Operator

# Plain decimal text as typed on the keypad or produced by format_result():
# "12", "12.", "-0.5", "1.000000E+15". Rejects "nan", "inf", "1_000", blanks.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> Optional[float]:
    """Parse operand text as a plain number, or None if it is not one."""
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def resolve_percent(
    text: str,
    base: Optional[float] = None,
    operator: Optional[Operator] = None,
) -> Optional[float]:
    """Resolve an operand that may carry a trailing percent marker.

    Args:
        text: Operand text, e.g. "42" or "10%".
        base: The other operand's value, when resolving inside an expression.
        operator: The pending operator, when resolving inside an expression.

    Returns:
        The numeric value, or None if the numeric part does not parse.
        Unmarked text parses as-is. A marked operand without context is
        raw/100. With context, add/subtract take that fraction of the base
        (100 + 10% = 110) while multiply/divide use raw/100 as the factor
        (200 × 10% = 20).
    """
    if not text.endswith(PERCENT_MARKER):
        return parse_number(text)

    raw = parse_number(text[: -len(PERCENT_MARKER)])
    if raw is None:
        return None
    fraction = raw / 100.0

    if base is None or operator is None:
        return fraction
    if operator in (Operator.ADD, Operator.SUBTRACT):
        return base * fraction
    return fraction
