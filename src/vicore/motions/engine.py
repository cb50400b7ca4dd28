"""Dispatch table from key tokens to cursor motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Literal, Optional

from vicore.buffer import Buffer, Position
from vicore.keymaps import SpecialKey

from . import basic

Motion = Callable[[Buffer, Position, int], Position]

UNSUPPORTED = object()

# Word boundaries are undecided (punctuation classes vs. whitespace only), so
# these keys are reserved and report that they are not supported yet.
WORD_MOTION_KEYS = ("w", "b", "W", "B")


@dataclass(frozen=True, slots=True)
class MotionResult:
    """Outcome of resolving one motion key."""

    status: Literal["ok", "unsupported", "unknown"]
    start: Position
    end: Position
    key: str
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class MotionEngine:
    """Maps trigger keys to motion functions and resolves them with a count."""

    def __init__(self, *, page_rows: Callable[[], int] = lambda: 1) -> None:
        self._motions: Dict[str, Motion | object] = {}
        self._page_rows = page_rows

    def register(self, key: str, motion: Motion, *, replace: bool = False) -> None:
        if not replace and key in self._motions:
            raise ValueError(f"Motion '{key}' already registered")
        self._motions[key] = motion

    def reserve(self, keys: Iterable[str]) -> None:
        """Declare keys whose motion exists in name only."""

        for key in keys:
            self._motions.setdefault(key, UNSUPPORTED)

    def __contains__(self, key: str) -> bool:
        return key in self._motions

    def resolve(
        self, buffer: Buffer, key: str, start: Position, count: int = 1
    ) -> MotionResult:
        count = max(1, count)
        motion = self._motions.get(key)
        if motion is None:
            return MotionResult(
                status="unknown",
                start=start,
                end=start,
                key=key,
                message=f"Unknown motion: {key}",
            )
        if motion is UNSUPPORTED:
            return MotionResult(
                status="unsupported",
                start=start,
                end=start,
                key=key,
                message=f"Motion not supported yet: {key}",
            )
        end = motion(buffer, start, count)  # type: ignore[operator]
        return MotionResult(status="ok", start=start, end=end, key=key)

    def page_down(self, buffer: Buffer, start: Position, count: int) -> Position:
        return basic.move_down(buffer, start, count * max(1, self._page_rows()))

    def page_up(self, buffer: Buffer, start: Position, count: int) -> Position:
        return basic.move_up(buffer, start, count * max(1, self._page_rows()))


DEFAULT_MOTIONS: Dict[str, Motion] = {
    "h": basic.move_left,
    "l": basic.move_right,
    "j": basic.move_down,
    "k": basic.move_up,
    "_": basic.line_start,
    "$": basic.line_end,
    "g": basic.first_row,
    "G": basic.last_row,
    SpecialKey.LEFT.value: basic.move_left,
    SpecialKey.RIGHT.value: basic.move_right,
    SpecialKey.DOWN.value: basic.move_down,
    SpecialKey.UP.value: basic.move_up,
    SpecialKey.HOME.value: basic.line_start,
    SpecialKey.END.value: basic.line_end,
}


def create_default_engine(*, page_rows: Callable[[], int] = lambda: 1) -> MotionEngine:
    engine = MotionEngine(page_rows=page_rows)
    for key, motion in DEFAULT_MOTIONS.items():
        engine.register(key, motion)
    engine.register(SpecialKey.PAGE_DOWN.value, engine.page_down)
    engine.register(SpecialKey.PAGE_UP.value, engine.page_up)
    engine.reserve(WORD_MOTION_KEYS)
    return engine


__all__ = [
    "Motion",
    "MotionEngine",
    "MotionResult",
    "DEFAULT_MOTIONS",
    "WORD_MOTION_KEYS",
    "create_default_engine",
]
