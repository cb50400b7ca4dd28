"""Raw-mode terminal guard plus byte-level reads, writes and size queries."""

from __future__ import annotations

import errno
import fcntl
import os
import re
import struct
import sys
import termios
from typing import Any, List, Optional, Tuple

from vicore.render import ansi
from vicore.runtime import telemetry

from .errors import TerminalError

logger = telemetry.get_logger("vicore.terminal")

_CURSOR_REPORT = re.compile(rb"^\x1b\[(\d+);(\d+)R?$")
_REPORT_LIMIT = 32


def parse_cursor_report(data: bytes) -> Optional[Tuple[int, int]]:
    """Parse an ``ESC [ rows ; cols R`` reply into ``(rows, cols)``."""

    match = _CURSOR_REPORT.match(data)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def _termios_failure(context: str, exc: Exception) -> TerminalError:
    args: List[Any] = list(getattr(exc, "args", ()))
    code = args[0] if args and isinstance(args[0], int) else None
    detail = str(args[1]) if len(args) > 1 else ""
    return TerminalError(context, code, detail)


class RawTerminal:
    """Context manager that puts a tty into raw mode for the block's duration.

    Input arrives byte by byte with a 0.1 s poll (``VMIN=0``/``VTIME``), output
    post-processing is disabled, and the saved attributes are restored on
    every exit path, including exceptions raised inside the block.
    """

    def __init__(
        self,
        fd_in: Optional[int] = None,
        fd_out: Optional[int] = None,
        *,
        read_timeout_ds: int = 1,
    ) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self.read_timeout_ds = read_timeout_ds
        self._saved: Optional[List[Any]] = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def __enter__(self) -> "RawTerminal":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    def enable(self) -> None:
        try:
            self._saved = termios.tcgetattr(self.fd_in)
        except termios.error as exc:
            raise _termios_failure("tcgetattr", exc) from exc

        raw = termios.tcgetattr(self.fd_in)
        raw[0] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = self.read_timeout_ds
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            self._saved = None
            raise _termios_failure("tcsetattr", exc) from exc
        telemetry.record_event("terminal.raw", level="debug", data={"fd": self.fd_in})

    def restore(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            logger.error(f"failed to restore terminal attributes: {exc}")
            raise _termios_failure("tcsetattr", exc) from exc

    def read_byte(self) -> bytes:
        """Return one byte, or ``b""`` when the poll timed out."""

        try:
            return os.read(self.fd_in, 1)
        except OSError as exc:
            if exc.errno in (errno.EAGAIN, errno.EINTR):
                return b""
            raise TerminalError.from_os_error("read", exc) from exc

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        written = 0
        try:
            while written < len(data):
                written += os.write(self.fd_out, view[written:])
        except OSError as exc:
            raise TerminalError.from_os_error("write", exc) from exc

    def window_size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)``, asking the terminal itself if ioctl fails."""

        try:
            packed = fcntl.ioctl(self.fd_out, termios.TIOCGWINSZ, b"\0" * 8)
            rows, cols, _, _ = struct.unpack("hhhh", packed)
        except OSError:
            rows = cols = 0
        if cols > 0 and rows > 0:
            return rows, cols
        return self._query_cursor_position()

    def _query_cursor_position(self) -> Tuple[int, int]:
        self.write(
            (ansi.CURSOR_FAR_CORNER + ansi.REQUEST_CURSOR_POSITION).encode("ascii")
        )
        reply = bytearray()
        while len(reply) < _REPORT_LIMIT:
            byte = self.read_byte()
            if not byte or byte == b"R":
                break
            reply += byte
        size = parse_cursor_report(bytes(reply))
        if size is None:
            raise TerminalError("getWindowSize", detail="could not determine window size")
        return size


__all__ = ["RawTerminal", "parse_cursor_report"]
