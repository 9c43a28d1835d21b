"""Shared constants for terminal control and key handling."""

# ANSI escape sequences
ESC = b"\x1b"
CSI = ESC + b"["

# Output control (VT100)
CLEAR_SCREEN = CSI + b"2J"
CURSOR_HOME = CSI + b"H"
ERASE_LINE = CSI + b"K"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"
CLEAR_AND_HOME = CLEAR_SCREEN + CURSOR_HOME

LINE_BREAK = b"\r\n"

# Screen decorations
FILLER = b"~"
BANNER = "Kilo editor -- version {version}"


def cursor_position(row: int, col: int) -> bytes:
    """Cursor-position sequence for a 1-indexed (row, col)."""
    return CSI + f"{row};{col}H".encode("ascii")


def ctrl_key(ch: str) -> int:
    """Byte produced by Ctrl+<ch> in raw mode (upper three bits stripped)."""
    return ord(ch) & 0x1F


QUIT_KEY = ctrl_key("q")
