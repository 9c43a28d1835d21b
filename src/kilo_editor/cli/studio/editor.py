"""Interactive text editor application.

This module provides the EditorApp loop that ties together:
- KeyDecoder: one logical key per blocking read
- FrameCompositor: one atomic write per frame
- the viewport model: scrolling and cursor clamping
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional

from kilo_editor.cli.core.input import Key, KeyDecoder, KeyEvent
from kilo_editor.cli.core.terminal import Terminal
from kilo_editor.config import EditorConfig
from kilo_editor.core.constants import CLEAR_AND_HOME
from kilo_editor.core.document import Document
from kilo_editor.core.state import EditorState
from kilo_editor.core.viewport import ScreenSize, clamp_cursor_to_row, recompute_scroll
from kilo_editor.render.frame import FrameCompositor

logger = logging.getLogger(__name__)

Writer = Callable[[bytes], None]

MOVEMENT_KEYS = frozenset({
    Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT,
    Key.HOME, Key.END, Key.PAGE_UP, Key.PAGE_DOWN,
})


class LoopState(Enum):
    RUNNING = auto()
    TERMINATING = auto()


class EditorApp:
    """Minimal screen-oriented text viewer/editor.

    Each cycle scrolls the viewport to the cursor, writes one frame,
    waits for one key and applies it.

    Keyboard Controls:
        Arrow keys: Move cursor (Left/Right wrap across line ends)
        Home / End: Start / end of line
        PageUp / PageDown: Move one screen up / down
        Ctrl-Q: Quit

    Every other key is ignored.
    """

    def __init__(
        self,
        screen: ScreenSize,
        document: Optional[Document] = None,
        decoder: Optional[KeyDecoder] = None,
        write: Optional[Writer] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.state = EditorState(screen=screen, document=document or Document())
        self.input = decoder or KeyDecoder()
        self._write = write or Terminal.write
        self.compositor = FrameCompositor()
        self.mode = LoopState.RUNNING

    @property
    def running(self) -> bool:
        return self.mode is LoopState.RUNNING

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            self.refresh_screen()
            self.process_keypress()

    def refresh_screen(self) -> None:
        """Scroll to the cursor and draw one frame."""
        state = self.state
        state.scroll = recompute_scroll(state.cursor, state.scroll, state.screen)
        self._write(self.compositor.compose(state))

    def process_keypress(self) -> None:
        """Wait for one key and act on it."""
        self.handle_key(self.input.next_key())

    def handle_key(self, event: KeyEvent) -> None:
        if event.code == self.config.quit_key:
            self.quit()
        elif event.key in MOVEMENT_KEYS:
            self.move_cursor(event.key)

    def quit(self) -> None:
        logger.info("quit requested at %s", self.state.cursor)
        self._write(CLEAR_AND_HOME)
        self.mode = LoopState.TERMINATING

    def move_cursor(self, key: Key) -> None:
        """Apply one movement key, then clamp the column to the new row."""
        state = self.state
        if key is Key.PAGE_UP:
            state.cursor = replace(state.cursor, row=state.scroll.row_offset)
            for _ in range(state.screen.rows):
                self._step(Key.UP)
        elif key is Key.PAGE_DOWN:
            bottom = state.scroll.row_offset + state.screen.rows - 1
            state.cursor = replace(state.cursor, row=min(bottom, state.document.row_count))
            for _ in range(state.screen.rows):
                self._step(Key.DOWN)
        else:
            self._step(key)

    def _step(self, key: Key) -> None:
        state = self.state
        doc = state.document
        col, row = state.cursor.col, state.cursor.row
        row_len = state.current_row_length

        if key is Key.LEFT:
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                col = doc.row_length(row)
        elif key is Key.RIGHT:
            if col < row_len:
                col += 1
            elif row + 1 < doc.row_count:
                row += 1
                col = 0
        elif key is Key.UP:
            if row > 0:
                row -= 1
        elif key is Key.DOWN:
            if row < doc.row_count:
                row += 1
        elif key is Key.HOME:
            col = 0
        elif key is Key.END:
            col = row_len

        state.cursor = clamp_cursor_to_row(replace(state.cursor, col=col, row=row), doc)


def run_editor(path: Optional[Path] = None, config: Optional[EditorConfig] = None) -> None:
    """
    Open ``path`` (or an empty document) and run the editor until quit.

    The terminal is in raw mode only inside this call; KiloError
    subclasses propagate after the terminal has been restored.
    """
    config = config or EditorConfig.from_env()
    document = Document.load(path) if path else Document()
    screen = Terminal.size()
    logger.info("editing %s on a %dx%d screen", document.title, screen.rows, screen.cols)

    with Terminal.raw_mode(read_timeout_ds=config.read_timeout_ds):
        app = EditorApp(screen, document, config=config)
        app.run()
