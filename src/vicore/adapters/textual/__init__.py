"""Textual host for the editor core.

Only the controller is imported here; ``vicore.adapters.textual.app`` needs
the ``textual`` package itself.
"""

from .controller import TEXTUAL_KEY_MAP, TextualEditorAdapter, TextualUIHooks, translate_key

__all__ = ["TEXTUAL_KEY_MAP", "TextualEditorAdapter", "TextualUIHooks", "translate_key"]
