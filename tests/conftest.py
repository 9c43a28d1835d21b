"""Pytest configuration: scripted terminals for the editor tests."""

from types import SimpleNamespace
from typing import Iterable, Optional

import pytest

from kilo_editor.cli.core.input import KeyDecoder
from kilo_editor.io.reader import load_lines


class ScriptedInput:
    """
    Byte source that replays ``data`` one byte per read.

    A ``None`` in the script stands for one read that timed out.
    Running off the end behaves like a timeout as well.
    """

    def __init__(self, *chunks: Optional[bytes]) -> None:
        self._reads: list[bytes] = []
        for chunk in chunks:
            if chunk is None:
                self._reads.append(b"")
            else:
                self._reads.extend(bytes([b]) for b in chunk)
        self.calls = 0

    def __call__(self) -> bytes:
        self.calls += 1
        if self._reads:
            return self._reads.pop(0)
        return b""

    @property
    def remaining(self) -> int:
        return len(self._reads)


class RecordingOutput:
    """Output sink that keeps every write as a separate chunk."""

    def __init__(self) -> None:
        self.writes: list[bytes] = []

    def __call__(self, data: bytes) -> None:
        self.writes.append(data)


@pytest.fixture
def scripted_decoder():
    """Factory for a KeyDecoder reading from a ScriptedInput."""
    def make(*chunks: Optional[bytes]) -> KeyDecoder:
        return KeyDecoder(read_byte=ScriptedInput(*chunks))
    return make


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def make_document():
    """Factory for documents built from str lines."""
    def make(lines: Iterable[str]):
        return load_lines(line.encode() for line in lines)
    return make


@pytest.fixture
def fake_termios(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Replace tcgetattr/tcsetattr so raw mode can run without a TTY."""
    import termios

    fake = SimpleNamespace(
        original=[0o2402, 0o5, 0o277, 0o105073, 15, 15, [b"\x00"] * 32],
        calls=[],
    )

    def tcgetattr(fd: int) -> list:
        return [*fake.original[:6], list(fake.original[6])]

    def tcsetattr(fd: int, when: int, attrs: list) -> None:
        fake.calls.append((fd, when, attrs))

    monkeypatch.setattr(termios, "tcgetattr", tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", tcsetattr)
    return fake


@pytest.fixture
def byte_source():
    """The ScriptedInput class, for tests that inspect the source itself."""
    return ScriptedInput
