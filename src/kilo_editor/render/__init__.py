"""Renderers for turning editor state into terminal output."""

from kilo_editor.render.frame import FrameCompositor, compose_frame

__all__ = ["FrameCompositor", "compose_frame"]
