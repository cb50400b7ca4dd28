"""Errors that end the editing session."""

from __future__ import annotations

import os
from typing import Optional


class TerminalError(RuntimeError):
    """A terminal operation failed and the session cannot continue.

    ``context`` names the operation (``tcsetattr``, ``read`` ...); the string
    form is ``"<context>: <strerror>"``.
    """

    def __init__(self, context: str, errno: Optional[int] = None, detail: str = "") -> None:
        self.context = context
        self.errno = errno
        if not detail:
            detail = os.strerror(errno) if errno is not None else "unknown error"
        self.detail = detail
        super().__init__(f"{context}: {detail}")

    @classmethod
    def from_os_error(cls, context: str, exc: OSError) -> "TerminalError":
        return cls(context, exc.errno, exc.strerror or str(exc))


__all__ = ["TerminalError"]
