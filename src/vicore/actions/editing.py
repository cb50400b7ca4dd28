"""Insert-mode editing verbs: newline, backspace and forward delete."""

from __future__ import annotations

from vicore.keymaps import ResolutionMatch
from vicore.modes.base_mode import ModeContext, ModeResult


def insert_newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Split the current row at the cursor and move to the new row."""

    del match
    buffer, cursor = context.buffer, context.cursor
    if cursor.cy >= buffer.row_count:
        buffer.insert_row(buffer.row_count, "")
    buffer.split_row(cursor.cy, cursor.cx)
    cursor.cy += 1
    cursor.cx = 0
    return ModeResult(consumed=True, status="newline")


def delete_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Delete the character before the cursor, joining rows at column 0."""

    del match
    buffer, cursor = context.buffer, context.cursor
    if cursor.cy >= buffer.row_count:
        return ModeResult(consumed=True, status="noop")
    if cursor.cx > 0:
        buffer.delete_char(cursor.cy, cursor.cx - 1)
        cursor.cx -= 1
        return ModeResult(consumed=True, status="delete_char")
    if cursor.cy == 0:
        return ModeResult(consumed=True, status="noop")

    previous_len = buffer.row_len(cursor.cy - 1)
    row = buffer.row(cursor.cy)
    buffer.append_text(cursor.cy - 1, row.chars if row else "")
    buffer.delete_row(cursor.cy)
    cursor.cy -= 1
    cursor.cx = previous_len
    return ModeResult(consumed=True, status="join_rows")


def delete_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Delete the character under the cursor, pulling up the next row at EOL."""

    del match
    buffer, cursor = context.buffer, context.cursor
    if cursor.cy >= buffer.row_count:
        return ModeResult(consumed=True, status="noop")
    if cursor.cx < buffer.row_len(cursor.cy):
        buffer.delete_char(cursor.cy, cursor.cx)
        return ModeResult(consumed=True, status="delete_char")
    following = buffer.row(cursor.cy + 1)
    if following is None:
        return ModeResult(consumed=True, status="noop")
    buffer.append_text(cursor.cy, following.chars)
    buffer.delete_row(cursor.cy + 1)
    return ModeResult(consumed=True, status="join_rows")


__all__ = ["delete_backward", "delete_forward", "insert_newline"]
