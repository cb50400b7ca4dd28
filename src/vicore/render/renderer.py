"""Compose one full screen frame and encode it as ANSI output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from vicore import __version__
from vicore.buffer import Buffer, CursorState, StatusMessage
from vicore.runtime.config import EditorConfig

from . import ansi
from .viewport import Viewport

FILLER = "~"
NO_NAME = "No file"


@dataclass(slots=True)
class Frame:
    """Everything drawn in one refresh, before any escape sequences.

    ``cursor`` is the 0-based screen position the terminal cursor ends on.
    """

    rows: List[str] = field(default_factory=list)
    status_bar: str = ""
    message: str = ""
    cursor: Tuple[int, int] = (0, 0)

    def encode(self) -> bytes:
        out: List[str] = [ansi.HIDE_CURSOR, ansi.CURSOR_HOME]
        for line in self.rows:
            out.append(line)
            out.append(ansi.CLEAR_LINE)
            out.append("\r\n")
        out.append(ansi.REVERSE_VIDEO)
        out.append(self.status_bar)
        out.append(ansi.RESET_ATTRS)
        out.append("\r\n")
        out.append(ansi.CLEAR_LINE)
        out.append(self.message)
        out.append(ansi.move_cursor(*self.cursor))
        out.append(ansi.SHOW_CURSOR)
        return "".join(out).encode("utf-8", "surrogateescape")


class Renderer:
    """Turns editor state into :class:`Frame` values."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()

    def compose(
        self,
        buffer: Buffer,
        cursor: CursorState,
        viewport: Viewport,
        status: StatusMessage,
        *,
        mode_label: str,
        command_line: Optional[str] = None,
        now: Optional[float] = None,
    ) -> Frame:
        viewport.scroll(buffer, cursor)
        frame = Frame(
            rows=[self._draw_row(buffer, viewport, y) for y in range(viewport.screen_rows)],
            status_bar=self._draw_status_bar(buffer, cursor, viewport, mode_label),
        )

        if command_line is not None:
            frame.message = f":{command_line}"[: viewport.screen_cols]
            frame.cursor = (
                viewport.screen_rows + 1,
                min(len(frame.message), viewport.screen_cols - 1),
            )
        else:
            text = status.visible_text(self.config.status_timeout, now=now)
            frame.message = text[: viewport.screen_cols]
            frame.cursor = (
                cursor.ry - viewport.row_offset,
                cursor.rx - viewport.col_offset + viewport.gutter_width,
            )
        return frame

    def banner(self) -> str:
        return f"vicore -- version {__version__}"

    def _draw_row(self, buffer: Buffer, viewport: Viewport, y: int) -> str:
        file_row = y + viewport.row_offset
        if buffer.row_count == 0:
            return self._draw_banner_row(viewport, y)
        if file_row >= buffer.row_count:
            return FILLER

        number = ""
        if viewport.gutter_width:
            width = viewport.gutter_width - 1
            number = f"{file_row + 1:>{width}} "
        render = buffer.rows[file_row].render
        start = viewport.col_offset
        return (number + render[start : start + viewport.text_cols])[: viewport.screen_cols]

    def _draw_banner_row(self, viewport: Viewport, y: int) -> str:
        if y != viewport.screen_rows // 3:
            return FILLER
        message = self.banner()[: viewport.screen_cols]
        padding = (viewport.screen_cols - len(message)) // 2
        if padding > 0:
            return FILLER + " " * (padding - 1) + message
        return message

    def _draw_status_bar(
        self,
        buffer: Buffer,
        cursor: CursorState,
        viewport: Viewport,
        mode_label: str,
    ) -> str:
        name = (buffer.filename or NO_NAME)[:20]
        modified = " [+]" if buffer.dirty else ""
        left = f"-- {mode_label} -- {name} - {buffer.row_count} lines{modified}"
        right = f"{cursor.cx + 1}:{cursor.cy + 1}"
        width = viewport.screen_cols

        left = left[:width]
        gap = width - len(left) - len(right)
        if gap >= 0:
            return left + " " * gap + right
        return left.ljust(width)


__all__ = ["Frame", "Renderer", "FILLER", "NO_NAME"]
