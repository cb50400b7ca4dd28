"""Cursor motions as pure ``(buffer, start, count) -> position`` functions.

None of these touch the buffer. Column clamping is always recomputed from the
current column; there is no remembered "desired column".
"""

from __future__ import annotations

from vicore.buffer import Buffer, Position


def move_left(buffer: Buffer, start: Position, count: int) -> Position:
    row, col = start
    return (row, col - min(count, col))


def move_right(buffer: Buffer, start: Position, count: int) -> Position:
    row, col = start
    distance = max(0, buffer.row_len(row) - col)
    return (row, col + min(count, distance))


def move_down(buffer: Buffer, start: Position, count: int) -> Position:
    row, col = start
    if buffer.row_count == 0:
        return (0, 0)
    distance = max(0, buffer.row_count - 1 - row)
    target = row + min(count, distance)
    return (target, min(col, buffer.row_len(target)))


def move_up(buffer: Buffer, start: Position, count: int) -> Position:
    row, col = start
    target = row - min(count, row)
    return (target, min(col, buffer.row_len(target)))


def line_start(buffer: Buffer, start: Position, count: int) -> Position:
    row, _ = start
    return move_down(buffer, (row, 0), count - 1)


def line_end(buffer: Buffer, start: Position, count: int) -> Position:
    row, _ = start
    return move_down(buffer, (row, buffer.row_len(row)), count - 1)


def first_row(buffer: Buffer, start: Position, count: int) -> Position:
    del count
    _, col = start
    return (0, min(col, buffer.row_len(0)))


def last_row(buffer: Buffer, start: Position, count: int) -> Position:
    del count
    _, col = start
    row = max(0, buffer.row_count - 1)
    return (row, min(col, buffer.row_len(row)))


__all__ = [
    "move_left",
    "move_right",
    "move_down",
    "move_up",
    "line_start",
    "line_end",
    "first_row",
    "last_row",
]
