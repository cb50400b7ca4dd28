"""Line-oriented text buffer owning every row of the open document."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, List, Optional

from vicore.runtime import telemetry

from .row import DEFAULT_TAB_STOP, Row
from .state import Position
from .validation import clamp_position, order_positions


class Buffer:
    """Ordered rows plus the ``dirty`` flag and optional ``filename``.

    Every mutating primitive marks the buffer dirty and re-renders the rows it
    touched before returning. Index arguments are validated up front: inserts
    clamp into range, deletes outside the buffer are ignored.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        filename: Optional[str] = None,
        tab_stop: int = DEFAULT_TAB_STOP,
    ) -> None:
        self.tab_stop = tab_stop
        self.rows: List[Row] = [Row(line, tab_stop) for line in lines]
        self.filename = filename
        self.dirty = False

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def lines(self) -> List[str]:
        return [row.chars for row in self.rows]

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def row_len(self, index: int) -> int:
        row = self.row(index)
        return row.len if row else 0

    def row_update(self, index: int) -> None:
        row = self.row(index)
        if row is not None:
            row.update()

    def insert_row(self, at: int, text: str = "") -> int:
        at = max(0, min(at, len(self.rows)))
        with Transaction(self, "insert_row"):
            self.rows.insert(at, Row(text, self.tab_stop))
        return at

    def delete_row(self, at: int) -> bool:
        if not 0 <= at < len(self.rows):
            return False
        with Transaction(self, "delete_row"):
            del self.rows[at]
        return True

    def append_text(self, index: int, text: str) -> bool:
        row = self.row(index)
        if row is None:
            return False
        with Transaction(self, "append_text"):
            row.set_chars(row.chars + text)
        return True

    def insert_char(self, index: int, at: int, char: str) -> bool:
        row = self.row(index)
        if row is None:
            return False
        if at < 0 or at > row.len:
            at = row.len
        with Transaction(self, "insert_char"):
            row.set_chars(row.chars[:at] + char + row.chars[at:])
        return True

    def delete_char(self, index: int, at: int) -> bool:
        row = self.row(index)
        if row is None or not 0 <= at < row.len:
            return False
        with Transaction(self, "delete_char"):
            row.set_chars(row.chars[:at] + row.chars[at + 1 :])
        return True

    def split_row(self, index: int, at: int) -> bool:
        """Move everything from column ``at`` onwards into a new row below."""

        row = self.row(index)
        if row is None:
            return False
        at = max(0, min(at, row.len))
        with Transaction(self, "split_row"):
            head, tail = row.chars[:at], row.chars[at:]
            row.set_chars(head)
            self.rows.insert(index + 1, Row(tail, self.tab_stop))
        return True

    def replace_rows(self, lines: Iterable[str]) -> None:
        """Rebuild the buffer wholesale; the result counts as saved."""

        with Transaction(self, "replace_rows"):
            self.rows = [Row(line, self.tab_stop) for line in lines]
        self.dirty = False

    def serialize(self) -> bytes:
        return "".join(f"{row.chars}\n" for row in self.rows).encode(
            "utf-8", "surrogateescape"
        )

    def get_text_range(self, start: Position, end: Position) -> str:
        if not self.rows:
            return ""
        start, end = order_positions(
            clamp_position(self, start), clamp_position(self, end)
        )
        (start_row, start_col), (end_row, end_col) = start, end
        if start_row == end_row:
            return self.rows[start_row].chars[start_col:end_col]
        parts = [self.rows[start_row].chars[start_col:]]
        parts.extend(row.chars for row in self.rows[start_row + 1 : end_row])
        parts.append(self.rows[end_row].chars[:end_col])
        return "\n".join(parts)

    def delete_range(self, start: Position, end: Position) -> str:
        """Remove the half-open range ``[start, end)`` and return its text."""

        if not self.rows:
            return ""
        start, end = order_positions(
            clamp_position(self, start), clamp_position(self, end)
        )
        text = self.get_text_range(start, end)
        if not text:
            return text
        (start_row, start_col), (end_row, end_col) = start, end
        with Transaction(self, "delete_range"):
            head = self.rows[start_row].chars[:start_col]
            tail = self.rows[end_row].chars[end_col:]
            del self.rows[start_row + 1 : end_row + 1]
            self.rows[start_row].set_chars(head + tail)
        return text

    def insert_text(self, position: Position, text: str) -> Position:
        """Insert ``text`` at ``position``; ``\\n`` starts a new row.

        Returns the position just past the inserted text.
        """

        if not text:
            return clamp_position(self, position)
        if not self.rows:
            self.insert_row(0, "")
        row_index, col = clamp_position(self, position)
        pieces = text.split("\n")
        with Transaction(self, "insert_text"):
            row = self.rows[row_index]
            head, tail = row.chars[:col], row.chars[col:]
            if len(pieces) == 1:
                row.set_chars(head + text + tail)
                return (row_index, col + len(text))
            row.set_chars(head + pieces[0])
            new_rows = [Row(piece, self.tab_stop) for piece in pieces[1:]]
            new_rows[-1].set_chars(pieces[-1] + tail)
            self.rows[row_index + 1 : row_index + 1] = new_rows
        return (row_index + len(pieces) - 1, len(pieces[-1]))


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer mutation in a telemetry span and marks it dirty."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.filename or "[unnamed]"},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.dirty = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction"]
