"""Editor configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from kilo_editor.core.constants import QUIT_KEY


@dataclass(frozen=True)
class EditorConfig:
    """
    Runtime settings for one editor session.

    Screen size is deliberately absent: it always comes from the
    terminal and is never overridden.
    """
    read_timeout_ds: int = 1  # VTIME, in tenths of a second
    quit_key: int = QUIT_KEY
    log_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.read_timeout_ds <= 255:
            raise ValueError(f"read timeout must be 0-255 deciseconds, got {self.read_timeout_ds}")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Build a config from KILO_* environment variables."""
        kwargs: dict[str, object] = {}
        if timeout := os.environ.get("KILO_READ_TIMEOUT"):
            kwargs["read_timeout_ds"] = int(timeout)
        if log_file := os.environ.get("KILO_LOG_FILE"):
            kwargs["log_file"] = Path(log_file).expanduser()
        return cls(**kwargs)
