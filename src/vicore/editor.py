"""The editor session: one owned context plus the render/read/process loop."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from vicore.actions.command import open_file
from vicore.buffer import Buffer, RegisterBank
from vicore.keymaps import KeyInput, KeymapRegistry
from vicore.keymaps.defaults import load_default_keymaps
from vicore.modes import CommandMode, InsertMode, ModeBus, ModeContext, ModeResult, NormalMode
from vicore.modes.command_mode import command_state
from vicore.modes.mode_manager import ModeManager
from vicore.motions import create_default_engine
from vicore.render import Frame, Renderer, Viewport
from vicore.runtime import MODE_LABELS, EditorConfig, EditorMode, telemetry

ReadKey = Callable[[], KeyInput]
WriteFrame = Callable[[bytes], None]


class Editor:
    """Owns the buffer, cursor, viewport and modes for one editing session."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        screen_size: Tuple[int, int] = (24, 80),
        keymaps: Optional[KeymapRegistry] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.logger = telemetry.get_logger("vicore.editor")
        rows, cols = screen_size
        viewport = Viewport.for_terminal(rows, cols, gutter_width=self.config.gutter_width)

        if keymaps is None:
            keymaps = KeymapRegistry()
            load_default_keymaps(keymaps)

        self.context = ModeContext(
            buffer=Buffer(tab_stop=self.config.tab_stop),
            registers=RegisterBank(),
            bus=ModeBus(),
            keymaps=keymaps,
            motions=create_default_engine(page_rows=lambda: viewport.screen_rows),
            viewport=viewport,
            config=self.config,
        )
        self.modes = ModeManager(self.context)
        self.modes.register_mode(NormalMode)
        self.modes.register_mode(InsertMode)
        self.modes.register_mode(CommandMode)
        self.renderer = Renderer(self.config)

        self.running = True
        self.exit_code = 0
        self.context.bus.subscribe("editor.quit", self._on_quit)

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def mode(self) -> EditorMode:
        return EditorMode(self.modes.active_name)

    def open(self, path: str) -> ModeResult:
        """Load ``path`` into the buffer; a missing file starts a new one."""

        return open_file(self.context, path, force=True)

    def resize(self, rows: int, cols: int) -> None:
        self.context.viewport.resize(rows, cols)

    def process_key(self, key: KeyInput) -> ModeResult:
        return self.modes.handle_key(key)

    def compose_frame(self, *, now: Optional[float] = None) -> Frame:
        command_line = None
        if self.mode is EditorMode.COMMAND:
            command_line = str(command_state(self.context)["text"])
        return self.renderer.compose(
            self.context.buffer,
            self.context.cursor,
            self.context.viewport,
            self.context.status,
            mode_label=MODE_LABELS[self.mode],
            command_line=command_line,
            now=now,
        )

    def refresh(self, *, now: Optional[float] = None) -> bytes:
        return self.compose_frame(now=now).encode()

    def run(self, read_key: ReadKey, write: WriteFrame) -> int:
        """Render, block for one key, process it; repeat until a quit."""

        telemetry.record_event("editor.start", data={"file": self.buffer.filename or ""})
        while self.running:
            write(self.refresh())
            self.process_key(read_key())
        telemetry.record_event("editor.stop", data={"exit_code": self.exit_code})
        return self.exit_code

    def _on_quit(self, payload: object) -> None:
        self.logger.info(f"quit requested: {payload}")
        self.running = False
        self.exit_code = 0


__all__ = ["Editor"]
