"""CLI for the keypad engine.

Usage:
    python -m keypad keys                       # Show every key and the keypad
    python -m keypad press "100+10%="           # Run keys, print the display
    python -m keypad press 16 sqrt --tape       # Show every step
    python -m keypad press "10÷0=" --json       # Final state as JSON
    python -m keypad press 5 -- -3=             # Keys starting with "-" go after --
    python -m keypad repl                       # Interactive keypad
"""

from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from keypad.display import display_text, render_display, render_keys, render_tape
from keypad.keys import parse_keys
from keypad.session import Session
from keypad.settings import Limits

app = typer.Typer(
    name="keypad",
    help="Two-operand calculator keypad engine",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console(highlight=False)

_QUIT_WORDS = ("q", "quit", "exit")


def _limits(max_length: Optional[int], display_length: Optional[int]) -> Limits:
    """Environment limits with CLI overrides applied."""
    try:
        env = Limits.from_env()
        return Limits(
            max_operand_length=env.max_operand_length if max_length is None else max_length,
            max_display_length=env.max_display_length if display_length is None else display_length,
        )
    except ValueError as e:
        console.print(f"[red]Invalid limits:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("keys")
def cmd_keys() -> None:
    """Show every key, its aliases and the keypad layout."""
    render_keys(console)


@app.command("press")
def cmd_press(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. '100+10%=' or 16 sqrt"),
    tape: bool = typer.Option(False, "--tape", "-t", help="Show a table of every step"),
    as_json: bool = typer.Option(False, "--json", help="Print the final state as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each key as it is pressed"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum operand length"),
    display_length: Optional[int] = typer.Option(None, "--display-length", help="Maximum result length"),
) -> None:
    """Press keys from an empty keypad and print the display."""
    session = Session(limits=_limits(max_length, display_length))

    try:
        parsed = [k for text in keys for k in parse_keys(text)]
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    for key in parsed:
        session.dispatch(key)
        if verbose:
            step = session.last_step
            note = "" if step.changed else "  no-op"
            console.print(f"  [dim]{key.symbol:>4}  {display_text(step.after) or '--'}{note}[/dim]")

    if tape:
        render_tape(session.tape, console)

    if as_json:
        out.print(json.dumps(session.state.to_dict(), ensure_ascii=False), markup=False, emoji=False, soft_wrap=True)
    else:
        out.print(display_text(session.state) or "0", markup=False, emoji=False, soft_wrap=True)


@app.command("repl")
def cmd_repl(
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Maximum operand length"),
    display_length: Optional[int] = typer.Option(None, "--display-length", help="Maximum result length"),
) -> None:
    """Interactive keypad: type keys, see the display after each line."""
    session = Session(limits=_limits(max_length, display_length), keep_tape=False)
    console.print("[dim]Type keys (e.g. 12+3=), 'keys' for help, 'q' to quit.[/dim]")
    render_display(session.state, console)

    while True:
        line = typer.prompt("keys", default="", show_default=False)
        word = line.strip().lower()
        if word in _QUIT_WORDS:
            break
        if word == "keys":
            render_keys(console)
            continue
        try:
            session.press_all(parse_keys(line))
        except ValueError as e:
            console.print(f"[yellow]{escape(str(e))}[/yellow]")
            continue
        render_display(session.state, console)


if __name__ == "__main__":
    app()
