"""Core TUI infrastructure - terminal I/O and key decoding."""

from kilo_editor.cli.core.terminal import Terminal
from kilo_editor.cli.core.input import KeyDecoder, KeyEvent, Key, read_tty_byte

__all__ = [
    "Terminal",
    "KeyDecoder",
    "KeyEvent",
    "Key",
    "read_tty_byte",
]
