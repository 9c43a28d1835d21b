"""Logging setup for interactive sessions.

The editor owns the terminal while it runs, so log records never go to
stdout/stderr; they go to a file when one is configured and are
dropped otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """Attach a file handler to the package logger if ``log_file`` is set."""
    logger = logging.getLogger("kilo_editor")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
