from __future__ import annotations

from typing import Iterator, List

import pytest

from vicore import cli
from vicore.editor import Editor
from vicore.keymaps import KeyInput, SpecialKey
from vicore.render import ansi
from vicore.runtime import EditorConfig
from vicore.terminal import TerminalError


def make_keys(*keys: KeyInput) -> Iterator[KeyInput]:
    return iter(keys)


def typed(text: str) -> List[KeyInput]:
    return [KeyInput.char(char) for char in text]


def test_run_writes_file_and_exits_cleanly(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    editor = Editor(screen_size=(24, 80))
    editor.buffer.replace_rows(["a", "b"])
    keys = make_keys(*typed(":wq test.txt"), KeyInput.special(SpecialKey.ENTER))
    frames: List[bytes] = []

    code = editor.run(lambda: next(keys), frames.append)

    assert code == 0
    assert (tmp_path / "test.txt").read_bytes() == b"a\nb\n"
    assert len(frames) == len(":wq test.txt") + 1
    assert frames[-1].count(b":wq test.txt") == 1


def test_each_frame_is_one_complete_write() -> None:
    editor = Editor(screen_size=(24, 80))
    keys = make_keys(*typed(":q"), KeyInput.special(SpecialKey.ENTER))
    frames: List[bytes] = []

    editor.run(lambda: next(keys), frames.append)

    for frame in frames:
        assert frame.startswith(ansi.HIDE_CURSOR.encode())
        assert frame.endswith(ansi.SHOW_CURSOR.encode())


def test_open_missing_file_starts_empty(tmp_path) -> None:
    editor = Editor()
    path = tmp_path / "new.txt"

    editor.open(str(path))

    assert editor.buffer.row_count == 0
    assert editor.buffer.filename == str(path)
    assert editor.context.status.text == f'"{path}" [New]'
    assert b"version" in editor.refresh()


def test_open_existing_file(tmp_path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"x\ny\n")
    editor = Editor()

    editor.open(str(path))

    assert editor.buffer.lines == ["x", "y"]
    assert editor.buffer.dirty is False


def test_config_drives_gutter_and_tabs() -> None:
    editor = Editor(EditorConfig(tab_stop=4, number_width=0), screen_size=(10, 40))
    editor.buffer.replace_rows(["\tx"])

    frame = editor.compose_frame()

    assert frame.rows[0] == "    x"


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("VICORE_TAB_STOP", "2")
    monkeypatch.setenv("VICORE_NUMBER_WIDTH", "not-a-number")

    config = EditorConfig.from_env()

    assert config.tab_stop == 2
    assert config.number_width == 4


def test_invalid_config_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tab_stop=0)


def test_resize_updates_viewport() -> None:
    editor = Editor(screen_size=(24, 80))

    editor.resize(12, 50)

    assert editor.context.viewport.screen_rows == 10
    assert len(editor.compose_frame().rows) == 10


class FailingTerminal:
    def __init__(self, *args, **kwargs) -> None:
        pass

    def __enter__(self):
        raise TerminalError("tcgetattr", 25)

    def __exit__(self, *exc) -> bool:
        return False


def test_cli_fatal_error_clears_screen_and_reports(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "RawTerminal", FailingTerminal)

    code = cli.main([])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out.startswith(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)
    assert captured.err.startswith("tcgetattr: ")
