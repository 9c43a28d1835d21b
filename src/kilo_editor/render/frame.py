"""Compose a full-screen frame as one block of terminal output."""

from __future__ import annotations

from kilo_editor import __version__
from kilo_editor.core.constants import (
    BANNER,
    CURSOR_HOME,
    ERASE_LINE,
    FILLER,
    HIDE_CURSOR,
    LINE_BREAK,
    SHOW_CURSOR,
    cursor_position,
)
from kilo_editor.core.state import EditorState


class FrameCompositor:
    """
    Render EditorState to one VT100 byte string.

    The whole screen is built into a fresh buffer per frame and handed
    back for a single write, so the terminal never shows a partially
    drawn frame. Lines are overdrawn in place and erased to the end,
    rather than clearing the screen first.
    """

    def __init__(self, banner: str | None = None) -> None:
        self.banner = (banner or BANNER.format(version=__version__)).encode()

    def compose(self, state: EditorState) -> bytes:
        """Build the frame for the current cursor and scroll position."""
        buf = bytearray()

        buf += HIDE_CURSOR
        buf += CURSOR_HOME
        self._draw_rows(buf, state)

        cursor, scroll = state.cursor, state.scroll
        buf += cursor_position(
            cursor.row - scroll.row_offset + 1,
            cursor.col - scroll.col_offset + 1,
        )
        buf += SHOW_CURSOR

        return bytes(buf)

    def _draw_rows(self, buf: bytearray, state: EditorState) -> None:
        doc = state.document
        rows, cols = state.screen.rows, state.screen.cols

        for y in range(rows):
            file_row = y + state.scroll.row_offset
            if file_row < doc.row_count:
                buf += doc.row_slice(file_row, state.scroll.col_offset, cols)
            elif doc.row_count == 0 and y == rows // 3:
                buf += self._centered_banner(cols)
            else:
                buf += FILLER

            buf += ERASE_LINE
            if y < rows - 1:
                buf += LINE_BREAK

    def _centered_banner(self, cols: int) -> bytes:
        banner = self.banner[:cols]
        padding = (cols - len(banner)) // 2
        if not padding:
            return banner
        # The filler marker takes the first column of the padding
        return FILLER + b" " * (padding - 1) + banner


def compose_frame(state: EditorState) -> bytes:
    """Compose one frame with the default banner."""
    return FrameCompositor().compose(state)
