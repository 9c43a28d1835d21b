"""Core data structures: document rows, cursor/viewport model, editor state."""

from kilo_editor.core.document import Document, Row
from kilo_editor.core.viewport import Cursor, ScreenSize, ScrollOffset
from kilo_editor.core.state import EditorState

__all__ = ["Document", "Row", "Cursor", "ScreenSize", "ScrollOffset", "EditorState"]
