"""Text buffer, cursor state, registers, and file I/O."""

from .buffer import Buffer, Transaction
from .fileio import LoadResult, SaveResult, load_lines, save_buffer
from .registers import UNNAMED, RegisterBank, RegisterValue
from .row import DEFAULT_TAB_STOP, Row
from .state import CursorState, Position, StatusMessage
from .validation import clamp_position, order_positions

__all__ = [
    "Buffer",
    "Transaction",
    "Row",
    "DEFAULT_TAB_STOP",
    "CursorState",
    "Position",
    "StatusMessage",
    "RegisterBank",
    "RegisterValue",
    "UNNAMED",
    "LoadResult",
    "SaveResult",
    "load_lines",
    "save_buffer",
    "clamp_position",
    "order_positions",
]
