"""Core action implementations shared across modes."""

from __future__ import annotations

from vicore.buffer import UNNAMED
from vicore.keymaps import ResolutionMatch
from vicore.modes.base_mode import ModeContext, ModeResult, Operator
from vicore.modes.operator_pipeline import OperatorPipeline


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def insert_at_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.cx = 0
    return ModeResult(consumed=True, switch_to="insert", message="insert_line_start")


def append_after_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    row_len = context.buffer.row_len(context.cursor.cy)
    context.cursor.cx = min(context.cursor.cx + 1, row_len)
    return ModeResult(consumed=True, switch_to="insert", message="append")


def append_at_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.cursor.cx = context.buffer.row_len(context.cursor.cy)
    return ModeResult(consumed=True, switch_to="insert", message="append_line_end")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Leave insert mode, stepping back one column like an ``h`` motion."""

    del match
    result = context.motions.resolve(context.buffer, "h", context.cursor.position)
    if result.ok:
        context.move_cursor(result.end)
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def enter_command_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def begin_delete(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return OperatorPipeline(context).begin(Operator.DELETE)


def begin_yank(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return OperatorPipeline(context).begin(Operator.YANK)


def begin_change(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return OperatorPipeline(context).begin(Operator.CHANGE)


def put_after_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Insert the unnamed register just after the cursor."""

    del match
    text = context.registers.get(UNNAMED).text
    if not text:
        return ModeResult(consumed=True, status="put_empty")

    buffer, cursor = context.buffer, context.cursor
    col = min(cursor.cx + 1, buffer.row_len(cursor.cy)) if buffer.row_count else 0
    row, end_col = buffer.insert_text((cursor.cy, col), text)
    context.move_cursor((row, max(end_col - 1, 0)))
    return ModeResult(consumed=True, status="put", message=text)


__all__ = [
    "append_after_cursor",
    "append_at_line_end",
    "begin_change",
    "begin_delete",
    "begin_yank",
    "enter_command_mode",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "insert_at_line_start",
    "put_after_cursor",
]
