"""Load text files into documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from kilo_editor.core.document import Document
from kilo_editor.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def load(path: str | Path) -> Document:
    """
    Load a text file from disk, one row per line.

    Bytes are kept as-is (no decoding); trailing CR/LF is stripped
    from every line. Any failure to open or read the file raises
    DocumentLoadError.
    """
    path = Path(path)

    try:
        with open(path, 'rb') as f:
            doc = load_lines(f)
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or e) from e

    doc.source_path = path
    logger.info("loaded %s (%d rows)", path, doc.row_count)
    return doc


def load_lines(lines: Iterable[bytes]) -> Document:
    """Build a document from already-split raw lines, in order."""
    doc = Document()
    for line in lines:
        doc.append_row(line)
    return doc
