"""Editor configuration and mode constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ENV_PREFIX = "VICORE_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, fallback: int) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def env_float(name: str, fallback: float) -> float:
    value = env(name)
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    # Reserved: no transition enters it yet.
    VISUAL = "visual"


MODE_LABELS = {
    EditorMode.NORMAL: "NORMAL",
    EditorMode.INSERT: "INSERT",
    EditorMode.COMMAND: "COMMAND",
    EditorMode.VISUAL: "VISUAL",
}


@dataclass(frozen=True)
class EditorConfig:
    """Tunables shared by the buffer, renderer, and terminal layers."""

    tab_stop: int = 8
    status_timeout: float = 5.0
    number_width: int = 4
    # Raw-mode VTIME, in tenths of a second.
    read_timeout_ds: int = 1

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.number_width < 0:
            raise ValueError("number_width cannot be negative")

    @property
    def gutter_width(self) -> int:
        """Columns taken by the line-number field plus its separator."""

        return self.number_width + 1 if self.number_width else 0

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            tab_stop=env_int("TAB_STOP", cls.tab_stop),
            status_timeout=env_float("STATUS_TIMEOUT", cls.status_timeout),
            number_width=env_int("NUMBER_WIDTH", cls.number_width),
            read_timeout_ds=env_int("READ_TIMEOUT_DS", cls.read_timeout_ds),
        )


__all__ = [
    "ENV_PREFIX",
    "EditorConfig",
    "EditorMode",
    "MODE_LABELS",
    "env",
    "env_flag",
    "env_float",
    "env_int",
]
