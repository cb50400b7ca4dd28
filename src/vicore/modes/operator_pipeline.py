"""Operator-pending handling: turn one resolved motion into a range edit."""

from __future__ import annotations

from typing import Callable, Dict

from vicore.buffer import UNNAMED, Position, order_positions
from vicore.motions import MotionResult
from vicore.runtime import telemetry

from .base_mode import ModeContext, ModeResult, Operator

RangeApplier = Callable[[ModeContext, Position, Position], ModeResult]


def delete_range(context: ModeContext, start: Position, end: Position) -> ModeResult:
    """Delete ``[start, end)`` into the unnamed register."""

    text = context.buffer.delete_range(start, end)
    if text:
        context.registers.yank_to(UNNAMED, text)
    context.move_cursor(start)
    return ModeResult(consumed=True, status="operator_delete", message=text)


def yank_range(context: ModeContext, start: Position, end: Position) -> ModeResult:
    text = context.buffer.get_text_range(start, end)
    context.registers.yank_to(UNNAMED, text)
    context.move_cursor(start)
    return ModeResult(consumed=True, status="operator_yank", message=text)


def change_range(context: ModeContext, start: Position, end: Position) -> ModeResult:
    result = delete_range(context, start, end)
    return ModeResult(
        consumed=True,
        switch_to="insert",
        status="operator_change",
        message=result.message,
    )


RANGE_APPLIERS: Dict[Operator, RangeApplier] = {
    Operator.DELETE: delete_range,
    Operator.YANK: yank_range,
    Operator.CHANGE: change_range,
}


class OperatorPipeline:
    """Consumes exactly one resolved motion for the pending operator."""

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def pending(self) -> bool:
        return self.context.pending.operator is not None

    def begin(self, operator: Operator) -> ModeResult:
        self.context.pending.begin_operator(operator)
        return ModeResult(consumed=True, status="operator_pending", message=operator.value)

    def apply(self, motion: MotionResult) -> ModeResult:
        """Apply the pending operator over the motion's half-open range.

        Pending state is cleared whatever the motion's outcome.
        """

        operator = self.context.pending.operator
        self.context.pending.clear()
        if operator is None:
            return ModeResult(consumed=False, status="no_operator")
        if not motion.ok:
            return ModeResult(consumed=True, status="motion_error", message=motion.message)

        start, end = order_positions(motion.start, motion.end)
        with telemetry.span(
            f"operator::{operator.name.lower()}",
            component="operators",
            metadata={"motion": motion.key, "start": start, "end": end},
        ):
            return RANGE_APPLIERS[operator](self.context, start, end)


__all__ = [
    "OperatorPipeline",
    "RANGE_APPLIERS",
    "change_range",
    "delete_range",
    "yank_range",
]
