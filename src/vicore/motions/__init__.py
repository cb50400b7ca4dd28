"""Motion engine: pure cursor motions and their key dispatch table."""

from .basic import (
    first_row,
    last_row,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .engine import (
    DEFAULT_MOTIONS,
    WORD_MOTION_KEYS,
    Motion,
    MotionEngine,
    MotionResult,
    create_default_engine,
)

__all__ = [
    "Motion",
    "MotionEngine",
    "MotionResult",
    "DEFAULT_MOTIONS",
    "WORD_MOTION_KEYS",
    "create_default_engine",
    "move_left",
    "move_right",
    "move_down",
    "move_up",
    "line_start",
    "line_end",
    "first_row",
    "last_row",
]
