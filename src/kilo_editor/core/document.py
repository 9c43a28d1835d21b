"""Document - the ordered list of text rows being viewed."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass
class Row:
    """One line of the document, stored as raw bytes without its line ending."""
    chars: bytearray = field(default_factory=bytearray)

    def __len__(self) -> int:
        return len(self.chars)

    def __bytes__(self) -> bytes:
        return bytes(self.chars)


@dataclass
class Document:
    """
    An ordered, append-only sequence of rows.

    Rows are independent of screen layout: the viewport and compositor
    read them through ``row_length`` and ``row_slice``, both of which
    accept the past-the-last-row index and treat it as an empty row.
    """
    rows: list[Row] = field(default_factory=list)
    source_path: Path | None = None

    @classmethod
    def load(cls, path: str | Path) -> "Document":
        """Load a text file from disk."""
        from kilo_editor.io.reader import load
        return load(path)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def append_row(self, data: bytes) -> Row:
        """Copy ``data`` into a new last row, dropping trailing CR/LF bytes."""
        row = Row(bytearray(data.rstrip(b"\r\n")))
        self.rows.append(row)
        return row

    def row_length(self, index: int) -> int:
        """Length of row ``index``; 0 for any index with no row."""
        if 0 <= index < len(self.rows):
            return len(self.rows[index])
        return 0

    def row_slice(self, index: int, start: int, length: int) -> bytes:
        """
        Up to ``length`` bytes of row ``index`` beginning at ``start``.

        The length is clamped to what the row actually holds, and a
        start past the end of the row gives an empty slice.
        """
        if not 0 <= index < len(self.rows) or length <= 0:
            return b""
        chars = self.rows[index].chars
        if start >= len(chars):
            return b""
        start = max(start, 0)
        return bytes(chars[start:start + length])

    @property
    def title(self) -> str:
        """Filename shown for this document."""
        if self.source_path:
            return self.source_path.name
        return "[No Name]"
