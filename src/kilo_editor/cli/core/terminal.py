"""Low-level terminal operations: geometry, raw mode and output."""

from __future__ import annotations

import logging
import os
import sys
import termios
from contextlib import contextmanager
from typing import Iterator, Optional

from kilo_editor.core.constants import CLEAR_AND_HOME
from kilo_editor.core.viewport import ScreenSize
from kilo_editor.errors import OutputError, TerminalError

logger = logging.getLogger(__name__)

# termios attribute list indices
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)


def _stdin_fd() -> int:
    return sys.stdin.fileno()


def _stdout_fd() -> int:
    return sys.stdout.fileno()


class Terminal:
    """Terminal I/O for the editor (Unix only)."""

    @staticmethod
    def size(fd: Optional[int] = None) -> ScreenSize:
        """
        Get current terminal dimensions.

        There is no fallback size: an editor drawing to a guessed
        geometry would leave the screen garbled.
        """
        try:
            size = os.get_terminal_size(_stdout_fd() if fd is None else fd)
        except (OSError, ValueError) as e:
            raise TerminalError("get_terminal_size", e) from e
        if size.lines <= 0 or size.columns <= 0:
            raise TerminalError("get_terminal_size", f"bad size {size.lines}x{size.columns}")
        return ScreenSize(size.lines, size.columns)

    @staticmethod
    def write(data: bytes, fd: Optional[int] = None) -> None:
        """Write ``data`` to the terminal in a single call."""
        try:
            os.write(_stdout_fd() if fd is None else fd, data)
        except OSError as e:
            raise OutputError(e) from e

    @staticmethod
    def clear(fd: Optional[int] = None) -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(CLEAR_AND_HOME, fd)

    @staticmethod
    def raw_attributes(attrs: list, read_timeout_ds: int) -> list:
        """
        Derive raw-mode attributes from ``attrs`` without modifying it.

        No echo, no line buffering, no signal keys, no Ctrl-V, no flow
        control, no CR-to-NL translation, no output post-processing and
        8-bit characters. A read returns after ``read_timeout_ds``
        tenths of a second even when nothing was typed.
        """
        raw = list(attrs)
        raw[CC] = list(attrs[CC])

        raw[IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] |= termios.CS8
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        raw[CC][termios.VMIN] = 0
        raw[CC][termios.VTIME] = read_timeout_ds
        return raw

    @staticmethod
    @contextmanager
    def raw_mode(fd: Optional[int] = None, read_timeout_ds: int = 1) -> Iterator[None]:
        """
        Context manager for raw terminal mode.

        The saved settings are restored exactly once on the way out,
        whether the block returns or raises, so any error message that
        follows is printed to a sane terminal.
        """
        fd = _stdin_fd() if fd is None else fd
        try:
            saved = termios.tcgetattr(fd)
        except termios.error as e:
            raise TerminalError("tcgetattr", e) from e

        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, Terminal.raw_attributes(saved, read_timeout_ds))
        except termios.error as e:
            raise TerminalError("tcsetattr", e) from e
        logger.debug("raw mode enabled on fd %d", fd)

        try:
            yield
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSAFLUSH, saved)
            except termios.error as e:
                raise TerminalError("tcsetattr", e) from e
            logger.debug("raw mode disabled on fd %d", fd)
