"""Pygame front-end: board geometry and the window/event loop."""

from .layout import BoardLayout

__all__ = ["BoardLayout"]
