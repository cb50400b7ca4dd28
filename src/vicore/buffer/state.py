"""Cursor and status-message state tied to the active buffer."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Tuple

Position = Tuple[int, int]  # (row, column) in raw characters


@dataclass(slots=True)
class CursorState:
    """Logical cursor ``(cx, cy)`` plus the render position ``(rx, ry)``."""

    cx: int = 0
    cy: int = 0
    rx: int = 0
    ry: int = 0

    @property
    def position(self) -> Position:
        return (self.cy, self.cx)

    def move_to(self, position: Position) -> None:
        self.cy, self.cx = position

    def reset(self) -> None:
        self.cx = self.cy = self.rx = self.ry = 0


@dataclass(slots=True)
class StatusMessage:
    """Transient message shown under the status bar."""

    text: str = ""
    timestamp: float = 0.0

    def set(self, text: str, *, now: Optional[float] = None) -> None:
        self.text = text
        self.timestamp = time.time() if now is None else now

    def visible_text(self, timeout: float, *, now: Optional[float] = None) -> str:
        current = time.time() if now is None else now
        if self.text and current - self.timestamp < timeout:
            return self.text
        return ""
