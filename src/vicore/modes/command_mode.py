"""Command-line mode: edit an ex-command on the message line."""

from __future__ import annotations

from typing import MutableMapping, cast

from vicore.keymaps import KeyInput

from .base_mode import Mode, ModeContext, ModeResult


def command_state(context: ModeContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("text", "")
    return state


class CommandMode(Mode):
    name = "command"

    def on_enter(self, previous: str | None) -> None:
        del previous
        command_state(self.context)["text"] = ""
        self.context.bus.emit("command.start", None)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        command_state(self.context)["text"] = ""
        self.context.bus.emit("command.end", None)

    @property
    def current_command(self) -> str:
        return str(command_state(self.context)["text"])

    def handle_key(self, key: KeyInput) -> ModeResult:
        bound = self._resolve(key)
        if bound is not None:
            return bound

        if key.is_printable and key.text:
            state = command_state(self.context)
            state["text"] = f"{state['text']}{key.text}"
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")
