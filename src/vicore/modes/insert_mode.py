"""Insert mode: typed text goes into the buffer at the cursor."""

from __future__ import annotations

from vicore.keymaps import KeyInput, SpecialKey

from .base_mode import Mode, ModeContext, ModeResult

NAVIGATION_KEYS = frozenset(
    key.value
    for key in (
        SpecialKey.UP,
        SpecialKey.DOWN,
        SpecialKey.LEFT,
        SpecialKey.RIGHT,
        SpecialKey.HOME,
        SpecialKey.END,
        SpecialKey.PAGE_UP,
        SpecialKey.PAGE_DOWN,
    )
)


def insert_text_at_cursor(context: ModeContext, text: str) -> None:
    """Insert ``text`` one character at a time, advancing the cursor."""

    buffer, cursor = context.buffer, context.cursor
    for char in text:
        if cursor.cy >= buffer.row_count:
            buffer.insert_row(buffer.row_count, "")
        buffer.insert_char(cursor.cy, cursor.cx, char)
        cursor.cx += 1


class InsertMode(Mode):
    name = "insert"

    def handle_key(self, key: KeyInput) -> ModeResult:
        bound = self._resolve(key)
        if bound is not None:
            return bound

        if key.token in NAVIGATION_KEYS:
            result = self.context.motions.resolve(
                self.context.buffer, key.token, self.context.cursor.position
            )
            self.context.move_cursor(result.end)
            return ModeResult(consumed=True, status="motion", message=result.key)

        if key.is_printable and key.text:
            insert_text_at_cursor(self.context, key.text)
            return ModeResult(consumed=True, status="insert_text", message=key.text)

        return ModeResult(consumed=False, status="ignored", message=key.token)
