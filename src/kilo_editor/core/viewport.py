"""Viewport model: cursor position, scrolling and cursor clamping.

All positions are in document coordinates. The screen shows the
rectangle starting at ``ScrollOffset`` that is ``ScreenSize`` large.
The cursor row may equal the document's row count: that is the
"past the last line" position reached by moving down off the final
row, and it always has length 0.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kilo_editor.core.document import Document


@dataclass(frozen=True)
class ScreenSize:
    """Terminal dimensions."""
    rows: int
    cols: int


@dataclass(frozen=True)
class Cursor:
    """Cursor position in document coordinates."""
    col: int = 0
    row: int = 0


@dataclass(frozen=True)
class ScrollOffset:
    """Document coordinate shown at the top-left of the screen."""
    row_offset: int = 0
    col_offset: int = 0


def recompute_scroll(cursor: Cursor, scroll: ScrollOffset, screen: ScreenSize) -> ScrollOffset:
    """
    Return the scroll offset that puts ``cursor`` on screen.

    Each axis is clamped independently and only as far as needed: a
    cursor above (or left of) the viewport lands on its first line
    (column), a cursor below (or right of) it lands on its last.
    """
    row_offset = scroll.row_offset
    col_offset = scroll.col_offset

    if cursor.row < row_offset:
        row_offset = cursor.row
    if cursor.row >= row_offset + screen.rows:
        row_offset = cursor.row - screen.rows + 1

    if cursor.col < col_offset:
        col_offset = cursor.col
    if cursor.col >= col_offset + screen.cols:
        col_offset = cursor.col - screen.cols + 1

    if (row_offset, col_offset) == (scroll.row_offset, scroll.col_offset):
        return scroll
    return ScrollOffset(row_offset, col_offset)


def clamp_cursor_to_row(cursor: Cursor, document: "Document") -> Cursor:
    """Pull the column back to the end of the cursor's row if it overshoots."""
    # Past-the-last-row (row >= row_count) reports length 0, forcing col to 0.
    row_len = document.row_length(cursor.row)
    if cursor.col > row_len:
        return replace(cursor, col=row_len)
    return cursor
