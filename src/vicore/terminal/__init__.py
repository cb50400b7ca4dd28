"""Raw terminal access and key decoding."""

from .errors import TerminalError
from .decoder import KeyDecoder
from .rawmode import RawTerminal, parse_cursor_report

__all__ = ["KeyDecoder", "RawTerminal", "TerminalError", "parse_cursor_report"]
