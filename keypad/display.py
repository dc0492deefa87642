"""Keypad display: derives display text and renders it with Rich.

The engine only hands out CalculatorState snapshots; everything a screen
shows (the expression line, the C/AC label, the key tape) is derived here.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from keypad.keys import KEYPAD_ROWS, KEYS, key_by_name
from keypad.models import ERROR_SENTINEL, CalculatorState
from keypad.session import Step


def display_text(state: CalculatorState) -> str:
    """operand1 + operator symbol + operand2, e.g. '100+10%'."""
    symbol = state.operator.symbol if state.operator else ""
    return f"{state.operand1}{symbol}{state.operand2}"


def clear_label(state: CalculatorState) -> str:
    """'C' while there is a first operand to clear, 'AC' on an empty display."""
    return "C" if state.operand1.strip() else "AC"


def render_display(state: CalculatorState, console: Console) -> None:
    """Render the display as a right-aligned panel."""
    text = display_text(state)
    style = "bold red" if state.operand1 == ERROR_SENTINEL else "bold"
    body = Text(text or "0", style=style if text else "dim", justify="right")
    console.print(Panel(body, width=32, subtitle=f"[dim]{clear_label(state)}[/dim]"))


def render_tape(steps: Sequence[Step], console: Console) -> None:
    """Render a Rich table with one row per key press."""
    if not steps:
        console.print("[yellow]No keys pressed.[/yellow]")
        return

    table = Table(title="Key tape", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", style="cyan")
    table.add_column("Display", justify="right", min_width=16)
    table.add_column("Operand 1", justify="right")
    table.add_column("Op", justify="center")
    table.add_column("Operand 2", justify="right")

    for i, step in enumerate(steps, 1):
        after = step.after
        display = display_text(after) or "--"
        if not step.changed:
            display = f"[dim]{display} (no-op)[/dim]"
        elif after.operand1 == ERROR_SENTINEL:
            display = f"[red]{display}[/red]"
        table.add_row(
            str(i),
            step.key.symbol,
            display,
            after.operand1 or "--",
            after.operator.symbol if after.operator else "--",
            after.operand2 or "--",
        )

    console.print()
    console.print(table)
    console.print()


def render_keys(console: Console) -> None:
    """Render the key reference table and the keypad face."""
    table = Table(title="Keys", show_header=True, header_style="bold")
    table.add_column("Key", style="green")
    table.add_column("Aliases")
    table.add_column("Action", style="dim")
    table.add_column("Description")

    for key in KEYS:
        table.add_row(
            key.symbol,
            ", ".join(key.aliases) or "--",
            type(key.action).__name__,
            key.description,
        )

    grid = Table(show_header=False, show_lines=True, title="Keypad")
    for _ in range(max(len(row) for row in KEYPAD_ROWS)):
        grid.add_column(justify="center", min_width=5)
    for row in KEYPAD_ROWS:
        cells = [key_by_name(name).symbol for name in row]
        if len(cells) < 4:
            # The zero key is double width on the keypad face.
            cells.insert(1, "")
        grid.add_row(*cells)

    console.print()
    console.print(table)
    console.print(grid)
    console.print()
