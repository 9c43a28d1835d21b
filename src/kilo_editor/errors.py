"""Exception hierarchy for fatal editor conditions.

Every error here ends the session: the raw-mode context restores the
terminal while the exception propagates, and the CLI prints
``<operation>: <reason>`` before exiting with status 1. Conditions that
are not fatal (read timeouts, unknown escape sequences) never raise.
"""

from __future__ import annotations

from pathlib import Path


class KiloError(Exception):
    """Base class for fatal editor errors."""

    def __init__(self, operation: str, reason: object = "") -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}" if reason else operation)


class TerminalError(KiloError):
    """Getting or setting terminal mode, or querying geometry, failed."""


class InputError(KiloError):
    """Reading from the terminal failed with something other than a timeout."""

    def __init__(self, reason: object = "") -> None:
        super().__init__("read", reason)


class OutputError(KiloError):
    """Writing a frame to the terminal failed."""

    def __init__(self, reason: object = "") -> None:
        super().__init__("write", reason)


class DocumentLoadError(KiloError):
    """The file named on the command line could not be read."""

    def __init__(self, path: Path, reason: object = "") -> None:
        self.path = path
        super().__init__(f"open {path}", reason)
