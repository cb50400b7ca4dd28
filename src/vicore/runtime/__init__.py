"""Configuration and telemetry shared by every editor component."""

from .config import EditorConfig, EditorMode, MODE_LABELS

__all__ = ["EditorConfig", "EditorMode", "MODE_LABELS"]
