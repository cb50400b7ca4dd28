"""Key model plus the declarative action/binding registry.

Default bindings live in :mod:`vicore.keymaps.defaults`, imported on demand
because they pull in the action modules.
"""

from .models import ActionRef, Binding, KeyInput, SpecialKey
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "SpecialKey",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
