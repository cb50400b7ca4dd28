"""Normal mode: counts, operators, mode switches, and cursor motions."""

from __future__ import annotations

from vicore.keymaps import KeyInput, SpecialKey
from vicore.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult
from .operator_pipeline import OperatorPipeline

CANCEL_TOKENS = frozenset({SpecialKey.ESC.value, "ctrl+c"})


class NormalMode(Mode):
    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vicore.modes.normal")
        self.operators = OperatorPipeline(context)

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.context.pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        pending = self.context.pending

        if key.token in CANCEL_TOKENS:
            pending.clear()
            return ModeResult(consumed=True, status="cancel")

        if self._is_count_digit(key):
            pending.push_digit(key.key)
            return ModeResult(consumed=True, status="count", message=str(pending.count))

        if self.operators.pending:
            return self._run_motion(key)

        bound = self._resolve(key)
        if bound is not None:
            if bound.status != "operator_pending":
                pending.clear()
            return bound

        return self._run_motion(key)

    def _is_count_digit(self, key: KeyInput) -> bool:
        if not key.is_printable or len(key.key) != 1 or key.key not in "0123456789":
            return False
        return key.key != "0" or self.context.pending.count > 0

    def _run_motion(self, key: KeyInput) -> ModeResult:
        context = self.context
        result = context.motions.resolve(
            context.buffer,
            key.token,
            context.cursor.position,
            context.pending.take_count(),
        )

        if self.operators.pending:
            outcome = self.operators.apply(result)
        else:
            context.pending.clear()
            if result.ok:
                context.move_cursor(result.end)
                outcome = ModeResult(consumed=True, status="motion", message=result.key)
            else:
                outcome = ModeResult(
                    consumed=False, status="motion_error", message=result.message
                )

        if outcome.status == "motion_error" and outcome.message:
            self.logger.debug(outcome.message)
            context.set_status(outcome.message)
        return outcome
