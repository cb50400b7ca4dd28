"""Load files into row lists and write buffers back to disk."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from vicore.runtime import telemetry

from .buffer import Buffer

logger = telemetry.get_logger("vicore.fileio")

ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass(slots=True)
class LoadResult:
    status: str  # "ok", "new_file" or "error"
    path: str
    lines: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status != "error"


@dataclass(slots=True)
class SaveResult:
    ok: bool
    path: Optional[str]
    message: str
    line_count: int = 0
    byte_count: int = 0


def split_lines(data: bytes) -> List[str]:
    """Decode ``data`` into rows, stripping line terminators."""

    text = data.decode(ENCODING, ERRORS)
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r\n") for line in lines]


def load_lines(path: str) -> LoadResult:
    """Read ``path`` completely before anything touches the buffer."""

    with telemetry.span("fileio::load", component="fileio", metadata={"path": path}):
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except FileNotFoundError:
            return LoadResult(status="new_file", path=path, message=f'"{path}" [New]')
        except OSError as exc:
            logger.warning(f"load failed for {path}: {exc.strerror or exc}")
            return LoadResult(
                status="error", path=path, message=exc.strerror or str(exc)
            )

    lines = split_lines(data)
    return LoadResult(
        status="ok",
        path=path,
        lines=lines,
        message=f'"{path}" {len(lines)}L, {len(data)}B',
    )


def save_buffer(buffer: Buffer, path: Optional[str] = None) -> SaveResult:
    """Write every row to ``path`` (or the buffer's filename) and fsync.

    ``buffer.dirty`` is cleared only when every byte reached the disk.
    """

    target = path or buffer.filename
    if not target:
        return SaveResult(ok=False, path=None, message="No file name")

    data = buffer.serialize()
    with telemetry.span("fileio::save", component="fileio", metadata={"path": target}):
        fd = -1
        try:
            fd = os.open(target, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)
            view = memoryview(data)
            written = 0
            while written < len(data):
                written += os.write(fd, view[written:])
            os.fsync(fd)
        except OSError as exc:
            logger.warning(f"save failed for {target}: {exc.strerror or exc}")
            return SaveResult(ok=False, path=target, message=exc.strerror or str(exc))
        finally:
            if fd != -1:
                os.close(fd)

    buffer.dirty = False
    telemetry.record_event(
        "file.save",
        data={"path": target, "lines": buffer.row_count, "bytes": len(data)},
    )
    return SaveResult(
        ok=True,
        path=target,
        message=f'"{target}" {buffer.row_count}L, {len(data)}B written',
        line_count=buffer.row_count,
        byte_count=len(data),
    )


__all__ = ["LoadResult", "SaveResult", "load_lines", "save_buffer", "split_lines"]
