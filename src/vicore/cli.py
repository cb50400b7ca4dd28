"""Command-line entry point: ``editor [filename]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from vicore import __version__
from vicore.editor import Editor
from vicore.render import ansi
from vicore.runtime import EditorConfig, telemetry
from vicore.terminal import KeyDecoder, RawTerminal, TerminalError

CLEAR = ansi.CLEAR_SCREEN + ansi.CURSOR_HOME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="editor", description="Modal, vi-like terminal text editor."
    )
    parser.add_argument("filename", nargs="?", help="file to open")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _fatal(message: str) -> int:
    sys.stdout.write(CLEAR)
    sys.stdout.flush()
    print(message, file=sys.stderr)
    telemetry.record_event("editor.fatal", level="error", data={"reason": message})
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = EditorConfig.from_env()

    try:
        with RawTerminal(read_timeout_ds=config.read_timeout_ds) as terminal:
            editor = Editor(config, screen_size=terminal.window_size())
            if args.filename:
                editor.open(args.filename)
            decoder = KeyDecoder(terminal.read_byte)
            code = editor.run(decoder.read_key, terminal.write)
            terminal.write(CLEAR.encode("ascii"))
    except TerminalError as exc:
        return _fatal(str(exc))
    except MemoryError:
        return _fatal("memory: out of memory")
    return code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
