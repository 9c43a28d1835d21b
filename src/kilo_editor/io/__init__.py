"""File I/O for documents."""

from kilo_editor.io.reader import load, load_lines

__all__ = ["load", "load_lines"]
