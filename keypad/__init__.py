"""keypad: input and arithmetic engine for a two-operand calculator keypad.

Keys go in one at a time, immutable display snapshots come out. Percent is
deferred until "=" (100 + 10% = 110), results are cut to the display width,
and dividing by zero leaves "Error" on the display until Clear.

Usage:
    python -m keypad keys                 # Show the keypad
    python -m keypad press "100+10%="     # Run keys, print the display
    python -m keypad repl                 # Interactive keypad
"""
