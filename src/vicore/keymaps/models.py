"""Dataclasses describing decoded keys, bindings, and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional


class SpecialKey(str, Enum):
    """Symbolic keys the input decoder can produce besides plain characters."""

    ESC = "ESC"
    ENTER = "ENTER"
    BACKSPACE = "BACKSPACE"
    TAB = "TAB"
    DELETE = "DELETE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    HOME = "HOME"
    END = "END"
    PAGE_UP = "PAGE_UP"
    PAGE_DOWN = "PAGE_DOWN"

    def __str__(self) -> str:
        return self.value


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """One logical key event.

    ``key`` is either a single character or a :class:`SpecialKey` name;
    ``text`` carries what the key would insert, if anything.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", str(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def char(cls, char: str) -> "KeyInput":
        return cls(key=char, text=char)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyInput":
        return cls(key=letter.lower(), modifiers=("ctrl",))

    @classmethod
    def special(cls, key: SpecialKey) -> "KeyInput":
        text = "\t" if key is SpecialKey.TAB else None
        return cls(key=key.value, text=text)

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        return bool(self.text) and not self.modifiers


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token in one mode with an action."""

    id: str
    mode: str
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "mode", str(getattr(self.mode, "value", self.mode)))
        object.__setattr__(self, "key", str(self.key))


__all__ = [
    "SpecialKey",
    "KeyInput",
    "ActionRef",
    "Binding",
]
