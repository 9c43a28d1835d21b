"""Tests for frame composition."""

import pytest

from kilo_editor import __version__
from kilo_editor.core.constants import (
    CURSOR_HOME,
    ERASE_LINE,
    HIDE_CURSOR,
    LINE_BREAK,
    SHOW_CURSOR,
    cursor_position,
)
from kilo_editor.core.state import EditorState
from kilo_editor.core.viewport import Cursor, ScreenSize, ScrollOffset
from kilo_editor.render.frame import FrameCompositor, compose_frame


def split_frame(frame: bytes) -> tuple[list[bytes], bytes]:
    """Split a frame into its screen lines (without erase codes) and its trailer."""
    assert frame.startswith(HIDE_CURSOR + CURSOR_HOME)
    body = frame[len(HIDE_CURSOR + CURSOR_HOME):]
    end = body.rindex(ERASE_LINE) + len(ERASE_LINE)
    lines = body[:end].split(LINE_BREAK)
    assert all(line.endswith(ERASE_LINE) for line in lines)
    return [line[:-len(ERASE_LINE)] for line in lines], body[end:]


class TestEmptyDocument:
    """Frames for a document with no rows."""

    def test_line_count_and_banner(self) -> None:
        frame = compose_frame(EditorState(screen=ScreenSize(24, 80)))
        lines, trailer = split_frame(frame)

        assert frame.count(LINE_BREAK) == 23
        assert len(lines) == 24
        banner = f"Kilo editor -- version {__version__}".encode()
        assert lines[8].endswith(banner)
        assert lines[8].startswith(b"~ ")
        assert len(lines[8]) == (80 - len(banner)) // 2 + len(banner)
        assert all(line == b"~" for i, line in enumerate(lines) if i != 8)
        assert trailer == cursor_position(1, 1) + SHOW_CURSOR

    def test_banner_clipped_to_narrow_screen(self) -> None:
        frame = FrameCompositor(banner="0123456789").compose(EditorState(screen=ScreenSize(3, 6)))
        lines, _ = split_frame(frame)
        assert lines == [b"~", b"012345", b"~"]

    def test_banner_without_padding_has_no_filler(self) -> None:
        frame = FrameCompositor(banner="abcd").compose(EditorState(screen=ScreenSize(3, 5)))
        lines, _ = split_frame(frame)
        assert lines[1] == b"abcd"


class TestDocumentRows:
    """Frames for documents with content."""

    @pytest.fixture
    def state(self, make_document) -> EditorState:
        doc = make_document(["hello world", "", "short", "x" * 30])
        return EditorState(screen=ScreenSize(6, 10), document=doc)

    def test_rows_then_filler(self, state: EditorState) -> None:
        lines, _ = split_frame(compose_frame(state))
        assert lines == [b"hello worl", b"", b"short", b"x" * 10, b"~", b"~"]

    def test_no_banner_when_document_has_rows(self, state: EditorState) -> None:
        assert b"Kilo editor" not in compose_frame(state)

    def test_column_offset_slices_rows(self, state: EditorState) -> None:
        state.scroll = ScrollOffset(0, 6)
        state.cursor = Cursor(col=6, row=0)
        lines, trailer = split_frame(compose_frame(state))
        assert lines[:4] == [b"world", b"", b"", b"x" * 10]
        assert trailer == cursor_position(1, 1) + SHOW_CURSOR

    def test_row_offset_and_cursor_position(self, state: EditorState) -> None:
        state.scroll = ScrollOffset(2, 0)
        state.cursor = Cursor(col=3, row=3)
        lines, trailer = split_frame(compose_frame(state))
        assert lines[0] == b"short"
        assert lines[2:] == [b"~"] * 4
        assert trailer == cursor_position(2, 4) + SHOW_CURSOR

    def test_fresh_buffer_per_frame(self, state: EditorState) -> None:
        compositor = FrameCompositor()
        first = compositor.compose(state)
        second = compositor.compose(state)
        assert first == second

    def test_frame_is_single_bytes_object(self, state: EditorState) -> None:
        assert isinstance(compose_frame(state), bytes)

    def test_document_not_modified(self, state: EditorState) -> None:
        before = [bytes(row) for row in state.document]
        compose_frame(state)
        assert [bytes(row) for row in state.document] == before


def test_cursor_position_sequence() -> None:
    assert cursor_position(1, 1) == b"\x1b[1;1H"
    assert cursor_position(12, 40) == b"\x1b[12;40H"
