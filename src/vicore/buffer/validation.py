"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Position

if TYPE_CHECKING:
    from .buffer import Buffer


def clamp_position(buffer: "Buffer", position: Position) -> Position:
    """Pull ``position`` back inside the buffer.

    An empty buffer only has ``(0, 0)``.
    """

    row, col = position
    if buffer.row_count == 0:
        return (0, 0)
    row = max(0, min(row, buffer.row_count - 1))
    col = max(0, min(col, buffer.rows[row].len))
    return (row, col)


def order_positions(start: Position, end: Position) -> tuple[Position, Position]:
    if start <= end:
        return start, end
    return end, start
