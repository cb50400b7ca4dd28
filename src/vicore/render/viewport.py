"""Visible window into the buffer and the scroll algorithm that moves it."""

from __future__ import annotations

from dataclasses import dataclass

from vicore.buffer import Buffer, CursorState

# Status bar plus message line.
RESERVED_ROWS = 2


@dataclass(slots=True)
class Viewport:
    screen_rows: int
    screen_cols: int
    # Narrowest line-number gutter, separator included; 0 hides the gutter.
    min_gutter_width: int = 0
    gutter_width: int = 0
    row_offset: int = 0
    col_offset: int = 0

    @classmethod
    def for_terminal(cls, rows: int, cols: int, *, gutter_width: int = 0) -> "Viewport":
        return cls(
            screen_rows=max(1, rows - RESERVED_ROWS),
            screen_cols=max(1, cols),
            min_gutter_width=gutter_width,
            gutter_width=gutter_width,
        )

    @property
    def text_cols(self) -> int:
        """Columns left for row text once the line-number gutter is drawn."""

        return max(1, self.screen_cols - self.gutter_width)

    def resize(self, rows: int, cols: int) -> None:
        self.screen_rows = max(1, rows - RESERVED_ROWS)
        self.screen_cols = max(1, cols)

    def reset(self) -> None:
        self.row_offset = 0
        self.col_offset = 0

    def fit_gutter(self, row_count: int) -> None:
        """Widen the gutter so the largest line number still fits."""

        if not self.min_gutter_width or row_count == 0:
            self.gutter_width = 0
            return
        digits = len(str(row_count))
        self.gutter_width = min(max(self.min_gutter_width, digits + 1), self.screen_cols)

    def scroll(self, buffer: Buffer, cursor: CursorState) -> None:
        """Refresh ``cursor.rx``/``ry`` and shift the offsets minimally.

        Afterwards ``ry`` lies in ``[row_offset, row_offset + screen_rows)``
        and ``rx`` in ``[col_offset, col_offset + text_cols)``.
        """

        self.fit_gutter(buffer.row_count)
        row = buffer.row(cursor.cy)
        cursor.rx = row.cx_to_rx(cursor.cx) if row is not None else 0
        cursor.ry = cursor.cy

        if cursor.ry < self.row_offset:
            self.row_offset = cursor.ry
        if cursor.ry >= self.row_offset + self.screen_rows:
            self.row_offset = cursor.ry - self.screen_rows + 1
        if cursor.rx < self.col_offset:
            self.col_offset = cursor.rx
        if cursor.rx >= self.col_offset + self.text_cols:
            self.col_offset = cursor.rx - self.text_cols + 1


__all__ = ["Viewport", "RESERVED_ROWS"]
