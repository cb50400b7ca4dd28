"""Built-in keymaps that seed each mode with the editor's default keys."""

from __future__ import annotations

from typing import Iterable, Sequence

from vicore.actions import command as command_actions
from vicore.actions import core as core_actions
from vicore.actions import editing as editing_actions

from .models import ActionRef, Binding, SpecialKey
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.insert_line_start",
        handler=core_actions.insert_at_line_start,
        description="Insert at the start of the line",
    ),
    ActionRef(
        id="core.append",
        handler=core_actions.append_after_cursor,
        description="Append after the cursor",
    ),
    ActionRef(
        id="core.append_line_end",
        handler=core_actions.append_at_line_end,
        description="Append at the end of the line",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(
        id="operator.delete",
        handler=core_actions.begin_delete,
        description="Delete over the next motion",
    ),
    ActionRef(
        id="operator.yank",
        handler=core_actions.begin_yank,
        description="Yank over the next motion",
    ),
    ActionRef(
        id="operator.change",
        handler=core_actions.begin_change,
        description="Change over the next motion",
    ),
    ActionRef(
        id="core.put_after",
        handler=core_actions.put_after_cursor,
        description="Put the unnamed register after the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=editing_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=editing_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
    ActionRef(
        id="command.cancel_line",
        handler=command_actions.cancel_command_line,
        description="Abandon the command line",
    ),
    ActionRef(
        id="command.backspace",
        handler=command_actions.command_backspace,
        description="Delete the last command-line character",
    ),
)


def _bind(mode: str, key: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{mode}.{action_id.split('.', 1)[-1]}.{key}",
        mode=mode,
        key=key,
        action_id=action_id,
        description=description,
    )


ESC = SpecialKey.ESC.value
ENTER = SpecialKey.ENTER.value
BACKSPACE = SpecialKey.BACKSPACE.value
DELETE = SpecialKey.DELETE.value

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("normal", "i", "core.enter_insert", "Enter insert mode"),
    _bind("normal", "I", "core.insert_line_start", "Insert at line start"),
    _bind("normal", "a", "core.append", "Append after cursor"),
    _bind("normal", "A", "core.append_line_end", "Append at line end"),
    _bind("normal", ":", "core.enter_command", "Enter command-line mode"),
    _bind("normal", "d", "operator.delete", "Delete operator"),
    _bind("normal", "y", "operator.yank", "Yank operator"),
    _bind("normal", "c", "operator.change", "Change operator"),
    _bind("normal", "p", "core.put_after", "Put after cursor"),
    _bind("insert", ESC, "core.exit_to_normal", "Leave insert mode"),
    _bind("insert", "ctrl+c", "core.exit_to_normal", "Leave insert mode"),
    _bind("insert", ENTER, "edit.newline", "Split line"),
    _bind("insert", BACKSPACE, "edit.delete_backward", "Delete backward"),
    _bind("insert", "ctrl+h", "edit.delete_backward", "Delete backward"),
    _bind("insert", DELETE, "edit.delete_forward", "Delete forward"),
    _bind("command", ESC, "command.cancel_line", "Cancel command line"),
    _bind("command", "ctrl+c", "command.cancel_line", "Cancel command line"),
    _bind("command", ENTER, "command.submit_line", "Submit the command line"),
    _bind("command", BACKSPACE, "command.backspace", "Delete last character"),
    _bind("command", "ctrl+h", "command.backspace", "Delete last character"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
