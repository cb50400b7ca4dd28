"""Turn raw terminal bytes into :class:`~vicore.keymaps.KeyInput` events."""

from __future__ import annotations

from typing import Callable, Dict

from vicore.keymaps import KeyInput, SpecialKey

ReadByte = Callable[[], bytes]

ESC_BYTE = 0x1B

CSI_LETTERS: Dict[bytes, SpecialKey] = {
    b"A": SpecialKey.UP,
    b"B": SpecialKey.DOWN,
    b"C": SpecialKey.RIGHT,
    b"D": SpecialKey.LEFT,
    b"H": SpecialKey.HOME,
    b"F": SpecialKey.END,
}

CSI_TILDE: Dict[bytes, SpecialKey] = {
    b"1": SpecialKey.HOME,
    b"3": SpecialKey.DELETE,
    b"4": SpecialKey.END,
    b"5": SpecialKey.PAGE_UP,
    b"6": SpecialKey.PAGE_DOWN,
    b"7": SpecialKey.HOME,
    b"8": SpecialKey.END,
}

SS3_LETTERS: Dict[bytes, SpecialKey] = {
    b"H": SpecialKey.HOME,
    b"F": SpecialKey.END,
}

CONTROL_KEYS: Dict[int, SpecialKey] = {
    0x0D: SpecialKey.ENTER,
    0x7F: SpecialKey.BACKSPACE,
    0x09: SpecialKey.TAB,
}


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


class KeyDecoder:
    """Blocks for one logical key, resolving escape sequences.

    ``read_byte`` returns one byte or ``b""`` on a poll timeout. Timeouts are
    retried while waiting for the first byte; inside an escape sequence they
    mean the sequence is incomplete and a bare Escape is reported.
    """

    def __init__(self, read_byte: ReadByte) -> None:
        self._read_byte = read_byte
        # A byte read too far while decoding UTF-8, replayed as the next key.
        self._pushback = b""

    def read_key(self) -> KeyInput:
        first = self._read_first()
        code = first[0]
        if code == ESC_BYTE:
            return self._read_escape()
        if code in CONTROL_KEYS:
            return KeyInput.special(CONTROL_KEYS[code])
        if code < 0x20:
            return KeyInput.ctrl(chr(code | 0x60))
        if code >= 0x80:
            return self._read_utf8(first)
        return KeyInput.char(chr(code))

    def _read_first(self) -> bytes:
        if self._pushback:
            byte, self._pushback = self._pushback, b""
            return byte
        while True:
            byte = self._read_byte()
            if byte:
                return byte[:1]

    def _read_escape(self) -> KeyInput:
        escape = KeyInput.special(SpecialKey.ESC)
        first = self._read_byte()
        if not first:
            return escape
        second = self._read_byte()
        if not second:
            return escape

        if first == b"[":
            if second.isdigit():
                third = self._read_byte()
                if third == b"~" and second in CSI_TILDE:
                    return KeyInput.special(CSI_TILDE[second])
                return escape
            if second in CSI_LETTERS:
                return KeyInput.special(CSI_LETTERS[second])
        elif first == b"O" and second in SS3_LETTERS:
            return KeyInput.special(SS3_LETTERS[second])
        return escape

    def _read_utf8(self, lead: bytes) -> KeyInput:
        data = bytearray(lead)
        for _ in range(_utf8_length(lead[0]) - 1):
            byte = self._read_byte()
            if not byte:
                break
            if not 0x80 <= byte[0] <= 0xBF:
                self._pushback = byte[:1]
                break
            data += byte[:1]
        text = bytes(data).decode("utf-8", "surrogateescape")
        return KeyInput.char(text[:1])


__all__ = ["KeyDecoder", "ReadByte"]
