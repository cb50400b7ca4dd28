"""Modal, vi-like terminal text editor core."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "motions",
    "render",
    "runtime",
    "terminal",
]

__version__ = "0.0.7"
