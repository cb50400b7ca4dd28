"""Actions that edit and evaluate Ex-style command lines."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Optional

from vicore.buffer import load_lines, save_buffer
from vicore.keymaps import ResolutionMatch
from vicore.modes.base_mode import ModeContext, ModeResult
from vicore.modes.command_mode import command_state
from vicore.runtime import telemetry

CommandHandler = Callable[[ModeContext, Optional[str]], ModeResult]

DIRTY_GUARD = "No write since last change (add ! to override)"


def submit_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    state = command_state(context)
    text = str(state.get("text", "")).strip()
    state["text"] = ""
    if not text:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")
    return evaluate(context, text)


def cancel_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    command_state(context)["text"] = ""
    return ModeResult(consumed=True, switch_to="normal", status="command_cancel")


def command_backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Drop the last character; on an empty line, abandon the prompt."""

    state = command_state(context)
    text = str(state.get("text", ""))
    if not text:
        return cancel_command_line(context, match)
    state["text"] = text[:-1]
    return ModeResult(consumed=True, status="editing")


def evaluate(context: ModeContext, text: str) -> ModeResult:
    """Run one trimmed command line such as ``wq notes.txt``."""

    command, _, argument = text.strip().partition(" ")
    arg = argument.strip() or None
    telemetry.record_event(
        "command.execute", level="debug", data={"command": command, "arg": arg or ""}
    )
    context.bus.emit("command.submit", text)
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        return _unknown_command(context, command)
    return handler(context, arg)


def open_file(context: ModeContext, path: Optional[str], *, force: bool = False) -> ModeResult:
    """Replace the buffer with ``path`` (or the current file).

    The buffer is only rebuilt once the file has been read successfully.
    """

    buffer = context.buffer
    if buffer.dirty and not force:
        context.set_status(DIRTY_GUARD)
        return _finish("command_guard", DIRTY_GUARD)
    target = path or buffer.filename
    if not target:
        context.set_status("No file name")
        return _finish("command_error", "No file name")

    result = load_lines(target)
    if not result.ok:
        context.set_status(result.message)
        return _finish("command_error", result.message)

    buffer.replace_rows(result.lines)
    buffer.filename = target
    context.cursor.reset()
    context.viewport.reset()
    context.pending.clear()
    context.set_status(result.message)
    telemetry.record_event(
        "file.load", data={"path": target, "status": result.status, "lines": len(result.lines)}
    )
    return _finish("command_edit", result.message)


def write_file(context: ModeContext, path: Optional[str] = None) -> ModeResult:
    buffer = context.buffer
    result = save_buffer(buffer, path)
    if result.ok and path and not buffer.filename:
        buffer.filename = path
    context.set_status(result.message)
    return _finish("command_write" if result.ok else "command_error", result.message)


def request_quit(context: ModeContext, *, force: bool = False) -> None:
    context.bus.emit("editor.quit", {"force": force})


def _finish(status: str, message: Optional[str] = None) -> ModeResult:
    return ModeResult(consumed=True, switch_to="normal", status=status, message=message)


def _unknown_command(context: ModeContext, command: str) -> ModeResult:
    message = f"Not an editor command: {command}"
    context.bus.emit("command.error", command)
    context.set_status(message)
    return _finish("command_error", message)


def _handle_quit(
    context: ModeContext, arg: Optional[str], *, force: bool = False
) -> ModeResult:
    del arg
    if context.buffer.dirty and not force:
        context.set_status(DIRTY_GUARD)
        return _finish("command_guard", DIRTY_GUARD)
    request_quit(context, force=force)
    return _finish("command_quit_force" if force else "command_quit")


def _handle_write(context: ModeContext, arg: Optional[str]) -> ModeResult:
    return write_file(context, arg)


def _handle_wq(context: ModeContext, arg: Optional[str]) -> ModeResult:
    outcome = write_file(context, arg)
    request_quit(context, force=True)
    return _finish("command_wq", outcome.message)


def _handle_edit(
    context: ModeContext, arg: Optional[str], *, force: bool = False
) -> ModeResult:
    return open_file(context, arg, force=force)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": partial(_handle_quit, force=True),
    "quit!": partial(_handle_quit, force=True),
    "w": _handle_write,
    "write": _handle_write,
    "wq": _handle_wq,
    "e": _handle_edit,
    "edit": _handle_edit,
    "e!": partial(_handle_edit, force=True),
    "edit!": partial(_handle_edit, force=True),
}


__all__ = [
    "DIRTY_GUARD",
    "cancel_command_line",
    "command_backspace",
    "evaluate",
    "open_file",
    "request_quit",
    "submit_command_line",
    "write_file",
]
