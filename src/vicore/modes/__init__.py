"""Editor modes, the shared context, and operator handling.

:class:`~vicore.modes.mode_manager.ModeManager` is imported from its own
module so that action modules can import this package without a cycle.
"""

from .base_mode import (
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    Operator,
    PendingState,
)
from .operator_pipeline import OperatorPipeline
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "Operator",
    "PendingState",
    "OperatorPipeline",
    "NormalMode",
    "InsertMode",
    "CommandMode",
]
