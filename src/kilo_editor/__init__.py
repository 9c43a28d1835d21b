"""
kilo-editor: a minimal screen-oriented text editor for the terminal

Quick Start:
    $ kilo notes.txt

Library use:
    >>> import kilo_editor as kilo
    >>> doc = kilo.load("notes.txt")
    >>> doc.row_count
    3

Features:
    - Raw terminal mode with guaranteed restoration on every exit path
    - Escape-sequence key decoding (arrows, Home/End, PageUp/PageDown, Delete)
    - Flicker-free redraw: every frame is composed and written in one call
    - Viewport that scrolls just enough to keep the cursor on screen
"""

import logging

__version__ = "0.0.1"

# Core types
from kilo_editor.core.document import Document, Row
from kilo_editor.core.viewport import (
    Cursor,
    ScreenSize,
    ScrollOffset,
    clamp_cursor_to_row,
    recompute_scroll,
)
from kilo_editor.core.state import EditorState

# Convenience functions
from kilo_editor.io.reader import load, load_lines

# Rendering
from kilo_editor.render.frame import FrameCompositor, compose_frame

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Document",
    "Row",
    "Cursor",
    "ScreenSize",
    "ScrollOffset",
    "EditorState",
    "clamp_cursor_to_row",
    "recompute_scroll",
    # I/O
    "load",
    "load_lines",
    # Rendering
    "FrameCompositor",
    "compose_frame",
]
