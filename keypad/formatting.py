"""Result formatting for the keypad display."""

from __future__ import annotations

import math

from keypad.models import ERROR_SENTINEL
from keypad.settings import DEFAULT_MAX_LENGTH

# Magnitudes outside [_SCI_LOW, _SCI_HIGH] switch to scientific notation.
_SCI_HIGH = 999_999_999_999.0
_SCI_LOW = 0.0001

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def format_result(number: float, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Format a computed value for the display.

    Very large or very small (but non-zero) magnitudes become "d.ddddddE±xx";
    whole numbers drop the ".0"; everything else uses the shortest repr.
    The text is then cut to max_length characters with no re-rounding, so a
    long value simply loses its tail.

    Non-finite values (sqrt of a negative, overflow) become the error sentinel.
    """
    number = float(number)
    if math.isnan(number) or math.isinf(number):
        return ERROR_SENTINEL

    magnitude = abs(number)
    if magnitude > _SCI_HIGH or (0.0 < magnitude < _SCI_LOW):
        text = f"{number:.6E}"
    elif number.is_integer() and _INT64_MIN <= number <= _INT64_MAX:
        text = str(int(number))
    else:
        text = repr(number)

    return text[:max_length]
