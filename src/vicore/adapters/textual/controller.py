"""Minimal Textual adapter that feeds key events into an :class:`Editor`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vicore.editor import Editor
from vicore.keymaps import KeyInput, SpecialKey
from vicore.modes import ModeResult
from vicore.render import Frame


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


TEXTUAL_KEY_MAP: Dict[str, SpecialKey] = {
    "escape": SpecialKey.ESC,
    "enter": SpecialKey.ENTER,
    "return": SpecialKey.ENTER,
    "backspace": SpecialKey.BACKSPACE,
    "delete": SpecialKey.DELETE,
    "tab": SpecialKey.TAB,
    "up": SpecialKey.UP,
    "down": SpecialKey.DOWN,
    "left": SpecialKey.LEFT,
    "right": SpecialKey.RIGHT,
    "home": SpecialKey.HOME,
    "end": SpecialKey.END,
    "pageup": SpecialKey.PAGE_UP,
    "pagedown": SpecialKey.PAGE_DOWN,
}


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Map a Textual key name (``"escape"``, ``"ctrl+h"``, ``"a"``) to a KeyInput."""

    special = TEXTUAL_KEY_MAP.get(key)
    if special is not None:
        return KeyInput.special(special)
    if key.startswith("ctrl+") and len(key) == len("ctrl+") + 1:
        return KeyInput.ctrl(key[-1])
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_screen: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    request_exit: Callable[[int], None] = _noop
    # Optional debug-line sink for the host
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an :class:`Editor` to a Textual-friendly surface."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self.editor.context.bus.subscribe("command.error", self._on_command_error)
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Translate one Textual key event and dispatch it to the editor."""

        key_input = translate_key(key, character)
        if key_input is None:
            self.hooks.log(f"key ignored: {key!r}")
            return None

        self.hooks.log(f"key -> {key_input.token} mode={self.editor.mode.value}")
        result = self.editor.process_key(key_input)
        self.hooks.log(f"result <- status={result.status} switch_to={result.switch_to}")
        status = result.message if result.status.startswith("command") else None
        if status:
            self.hooks.update_status(status)
        self.refresh()
        if not self.editor.running:
            self.hooks.request_exit(self.editor.exit_code)
        return result

    def resize(self, rows: int, cols: int) -> None:
        self.editor.resize(rows, cols)
        self.refresh()

    def refresh(self) -> Frame:
        frame = self.editor.compose_frame()
        self.hooks.update_screen(frame)
        return frame

    def _on_command_error(self, payload: object) -> None:
        self.hooks.log(f"command error: {payload}")


__all__ = ["TEXTUAL_KEY_MAP", "TextualEditorAdapter", "TextualUIHooks", "translate_key"]
