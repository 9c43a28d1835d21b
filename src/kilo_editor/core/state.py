"""EditorState - everything one editing session knows about the screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from kilo_editor.core.document import Document
from kilo_editor.core.viewport import Cursor, ScreenSize, ScrollOffset


@dataclass
class EditorState:
    """
    Mutable session state, owned by the editor loop.

    Other components receive it by reference and only read it; the
    loop is the single writer of ``cursor`` and ``scroll``.
    """
    screen: ScreenSize
    document: Document = field(default_factory=Document)
    cursor: Cursor = field(default_factory=Cursor)
    scroll: ScrollOffset = field(default_factory=ScrollOffset)

    @property
    def current_row_length(self) -> int:
        """Length of the row under the cursor (0 past the last row)."""
        return self.document.row_length(self.cursor.row)
