"""Keypad session, the host that owns the current snapshot.

Data flow per key:
1. Parse the typed token into a KeySpec (keys.parse_key)
2. reduce(current, key.action, limits) → next snapshot
3. Replace the current snapshot wholesale and record a Step on the tape

A Session is single-threaded by contract: dispatch one key at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from keypad.keys import KeySpec, key_by_name, parse_key
from keypad.models import INITIAL_STATE, CalculatorState
from keypad.reducer import reduce
from keypad.settings import DEFAULT_LIMITS, Limits


@dataclass(frozen=True)
class Step:
    """One key press and the snapshots on either side of it."""

    key: KeySpec
    before: CalculatorState
    after: CalculatorState

    @property
    def changed(self) -> bool:
        return self.before != self.after


@dataclass
class Session:
    """Holds the current CalculatorState and the tape of steps so far."""

    limits: Limits = DEFAULT_LIMITS
    state: CalculatorState = INITIAL_STATE
    tape: list[Step] = field(default_factory=list)
    # Off for long-lived hosts such as the repl, which never read the tape.
    keep_tape: bool = True
    last_step: Optional[Step] = None

    def dispatch(self, key: KeySpec) -> CalculatorState:
        """Apply one key and return the new snapshot."""
        before = self.state
        self.state = reduce(before, key.action, self.limits)
        self.last_step = Step(key=key, before=before, after=self.state)
        if self.keep_tape:
            self.tape.append(self.last_step)
        return self.state

    def press(self, token: str) -> CalculatorState:
        """Parse a single token ('7', '×', 'sqrt', ...) and dispatch it.

        Raises:
            ValueError: Unknown token; the session is left unchanged.
        """
        return self.dispatch(parse_key(token))

    def press_all(self, keys: Iterable[KeySpec]) -> CalculatorState:
        for key in keys:
            self.dispatch(key)
        return self.state

    def reset(self) -> CalculatorState:
        return self.dispatch(key_by_name("clear"))
