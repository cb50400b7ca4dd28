"""Base classes and the shared editor context every mode works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from vicore.buffer import Buffer, CursorState, Position, RegisterBank, StatusMessage
from vicore.buffer.validation import clamp_position
from vicore.keymaps import KeyInput, KeymapRegistry
from vicore.motions import MotionEngine
from vicore.render.viewport import Viewport
from vicore.runtime import telemetry
from vicore.runtime.config import EditorConfig


class Operator(str, Enum):
    DELETE = "d"
    YANK = "y"
    CHANGE = "c"


@dataclass(slots=True)
class PendingState:
    """Operator and repeat count waiting for a motion."""

    operator: Optional[Operator] = None
    count: int = 0
    # Count typed before the operator; multiplies the motion count.
    operator_count: int = 0

    def push_digit(self, digit: str) -> None:
        self.count = self.count * 10 + int(digit)

    def begin_operator(self, operator: Operator) -> None:
        self.operator = operator
        self.operator_count = self.count
        self.count = 0

    def take_count(self) -> int:
        return (self.operator_count or 1) * (self.count or 1)

    def clear(self) -> None:
        self.operator = None
        self.count = 0
        self.operator_count = 0

    @property
    def active(self) -> bool:
        return self.operator is not None or self.count > 0


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes signal the host (quit requests etc.)."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """The one editor context: buffer, cursor, viewport, and pending state.

    Modes and actions receive it explicitly; nothing else holds editor state.
    """

    buffer: Buffer
    registers: RegisterBank
    bus: ModeBus
    keymaps: KeymapRegistry
    motions: MotionEngine
    viewport: Viewport
    config: EditorConfig = field(default_factory=EditorConfig)
    cursor: CursorState = field(default_factory=CursorState)
    status: StatusMessage = field(default_factory=StatusMessage)
    pending: PendingState = field(default_factory=PendingState)
    extras: Dict[str, object] = field(default_factory=dict)

    def set_status(self, text: str) -> None:
        self.status.set(text)

    def move_cursor(self, position: Position) -> None:
        self.cursor.move_to(clamp_position(self.buffer, position))

    def clamp_cursor(self) -> None:
        self.move_cursor(self.cursor.position)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def _resolve(self, key: KeyInput) -> Optional[ModeResult]:
        """Run the action bound to ``key`` in this mode, if there is one."""

        match = self.context.keymaps.resolve(self.name, key.token)
        if match is None:
            return None
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)
        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)
