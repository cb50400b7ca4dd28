"""Viewport scrolling and full-frame rendering."""

from .renderer import FILLER, NO_NAME, Frame, Renderer
from .viewport import RESERVED_ROWS, Viewport

__all__ = ["Frame", "Renderer", "Viewport", "FILLER", "NO_NAME", "RESERVED_ROWS"]
