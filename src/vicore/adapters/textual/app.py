"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vicore.adapters.textual.app"
    ) from exc

from vicore.editor import Editor
from vicore.render import Frame
from vicore.runtime import EditorConfig

from .controller import TextualEditorAdapter, TextualUIHooks


class EditorApp(App[int]):
    """Full-screen Textual host drawing the same frames as the terminal loop."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $accent;
		color: $text;
	}

	#message-line {
		height: 1;
	}
	"""

    def __init__(self, filename: Optional[str] = None) -> None:
        super().__init__()
        self._filename = filename
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget = Static("", id="buffer-view", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        self._message_widget = Static("", id="message-line", markup=False)

    def compose(self) -> ComposeResult:
        yield self._buffer_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        editor = Editor(
            EditorConfig.from_env(),
            screen_size=(self.size.height, self.size.width),
        )
        if self._filename:
            editor.open(self._filename)
        hooks = TextualUIHooks(
            update_screen=self._update_screen,
            update_status=self._update_status,
            request_exit=self.exit,
            log=self.log.debug,
        )
        self.adapter = TextualEditorAdapter(editor, hooks)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height, event.size.width)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None:
            event.stop()
            event.prevent_default()

    def _update_screen(self, frame: Frame) -> None:
        body = Text("\n".join(frame.rows), no_wrap=True)
        row, col = frame.cursor
        if row < len(frame.rows):
            offset = sum(len(line) + 1 for line in frame.rows[:row]) + col
            body.stylize("reverse", offset, offset + 1)
        self._buffer_widget.update(body)
        self._status_widget.update(frame.status_bar)
        self._message_widget.update(frame.message)

    def _update_status(self, status: str) -> None:
        self.log.info(status)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the editor inside Textual.")
    parser.add_argument("filename", nargs="?", help="file to open")
    args = parser.parse_args(argv)
    EditorApp(args.filename).run()


if __name__ == "__main__":  # pragma: no cover - manual launch
    main()
