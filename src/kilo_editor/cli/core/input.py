"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import errno
import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from functools import partial
from typing import Callable, Iterator, Optional

from kilo_editor.core.constants import ESC
from kilo_editor.errors import InputError

logger = logging.getLogger(__name__)

ByteSource = Callable[[], bytes]


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    ESCAPE = auto()  # Bare Escape, or a sequence we don't recognize


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    code: Optional[int] = None  # Byte value for a literal key
    raw: bytes = b""  # Bytes consumed for this event

    @property
    def is_char(self) -> bool:
        """Check if this is a literal (non-named) key."""
        return self.code is not None and self.key is None

    @property
    def is_control(self) -> bool:
        """Check if this is a literal control character (0x00-0x1F, 0x7F)."""
        return self.is_char and (self.code < 0x20 or self.code == 0x7F)

    @classmethod
    def literal(cls, code: int) -> "KeyEvent":
        return cls(code=code, raw=bytes([code]))


class KeyDecoder:
    """
    Blocking key decoder over a raw byte stream.

    Reads one byte at a time from ``read_byte``, which must return
    ``b""`` when its read times out. The decoder holds no state between
    calls: each ``next_key`` starts a fresh decode.
    """

    # Sequences after ESC [ <digit>, terminated by ~
    TILDE_SEQUENCES: dict[bytes, Key] = {
        b'1': Key.HOME,
        b'3': Key.DELETE,
        b'4': Key.END,
        b'5': Key.PAGE_UP,
        b'6': Key.PAGE_DOWN,
        b'7': Key.HOME,
        b'8': Key.END,
    }

    # Final byte after ESC [
    CSI_SEQUENCES: dict[bytes, Key] = {
        b'A': Key.UP,
        b'B': Key.DOWN,
        b'C': Key.RIGHT,
        b'D': Key.LEFT,
        b'H': Key.HOME,
        b'F': Key.END,
    }

    # Final byte after ESC O
    SS3_SEQUENCES: dict[bytes, Key] = {
        b'H': Key.HOME,
        b'F': Key.END,
    }

    def __init__(self, read_byte: Optional[ByteSource] = None, fd: Optional[int] = None) -> None:
        if read_byte is None:
            fd = sys.stdin.fileno() if fd is None else fd
            read_byte = partial(read_tty_byte, fd)
        self._read_byte = read_byte

    def next_key(self) -> KeyEvent:
        """Block until a key arrives and decode it."""
        c = self._read_byte()
        while not c:
            c = self._read_byte()

        if c != ESC:
            return KeyEvent.literal(c[0])
        return self._decode_escape()

    def __iter__(self) -> Iterator[KeyEvent]:
        while True:
            yield self.next_key()

    def _decode_escape(self) -> KeyEvent:
        """Decode what follows an ESC byte, falling back to a bare Escape."""
        seq0 = self._read_byte()
        if not seq0:
            return self._escape(b"")
        seq1 = self._read_byte()
        if not seq1:
            return self._escape(seq0)

        if seq0 == b'[':
            if seq1.isdigit():
                seq2 = self._read_byte()
                if not seq2:
                    return self._escape(seq0 + seq1)
                if seq2 == b'~' and seq1 in self.TILDE_SEQUENCES:
                    return KeyEvent(key=self.TILDE_SEQUENCES[seq1], raw=ESC + seq0 + seq1 + seq2)
                return self._escape(seq0 + seq1 + seq2)
            if seq1 in self.CSI_SEQUENCES:
                return KeyEvent(key=self.CSI_SEQUENCES[seq1], raw=ESC + seq0 + seq1)
        elif seq0 == b'O':
            if seq1 in self.SS3_SEQUENCES:
                return KeyEvent(key=self.SS3_SEQUENCES[seq1], raw=ESC + seq0 + seq1)

        return self._escape(seq0 + seq1)

    @staticmethod
    def _escape(rest: bytes) -> KeyEvent:
        if rest:
            logger.debug("unrecognized escape sequence %r", ESC + rest)
        return KeyEvent(key=Key.ESCAPE, raw=ESC + rest)


def read_tty_byte(fd: int) -> bytes:
    """
    Read one byte from a raw-mode terminal.

    Returns ``b""`` when the read times out (VMIN=0/VTIME) or is
    interrupted; any other failure raises InputError.
    """
    try:
        return os.read(fd, 1)
    except (BlockingIOError, InterruptedError):
        return b""
    except OSError as e:
        if e.errno == errno.EAGAIN:
            return b""
        raise InputError(e) from e
