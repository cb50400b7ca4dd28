"""High-level editing verbs reused across modes."""

from .core import (
    append_after_cursor,
    append_at_line_end,
    begin_change,
    begin_delete,
    begin_yank,
    enter_command_mode,
    enter_insert_mode,
    exit_to_normal_mode,
    insert_at_line_start,
    put_after_cursor,
)
from .editing import delete_backward, delete_forward, insert_newline
from .command import (
    cancel_command_line,
    command_backspace,
    evaluate,
    open_file,
    submit_command_line,
    write_file,
)

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
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "cancel_command_line",
    "command_backspace",
    "evaluate",
    "open_file",
    "submit_command_line",
    "write_file",
]
