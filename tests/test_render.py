from __future__ import annotations

import pytest

from vicore import __version__
from vicore.buffer import Buffer, CursorState, StatusMessage
from vicore.render import FILLER, Renderer, Viewport
from vicore.render import ansi
from vicore.runtime import EditorConfig


def make_viewport(rows: int = 24, cols: int = 80, gutter: int = 5) -> Viewport:
    return Viewport.for_terminal(rows, cols, gutter_width=gutter)


def compose(buffer: Buffer, cursor: CursorState, viewport: Viewport, **kwargs):
    return Renderer(EditorConfig()).compose(
        buffer, cursor, viewport, StatusMessage(), mode_label="NORMAL", **kwargs
    )


def test_empty_buffer_shows_banner_on_third_row() -> None:
    viewport = make_viewport()
    frame = compose(Buffer(), CursorState(), viewport)

    assert viewport.screen_rows == 22
    assert len(frame.rows) == 22
    banner_rows = [i for i, row in enumerate(frame.rows) if __version__ in row]
    assert banner_rows == [7]
    assert frame.rows[7].startswith(FILLER)
    assert all(row == FILLER for i, row in enumerate(frame.rows) if i != 7)


def test_banner_is_centered() -> None:
    frame = compose(Buffer(), CursorState(), make_viewport())

    text = f"vicore -- version {__version__}"
    row = frame.rows[7]
    assert row.endswith(text)
    assert len(row) - len(text) == (80 - len(text)) // 2


def test_rows_have_line_numbers_and_filler() -> None:
    frame = compose(Buffer(["alpha", "\tb"]), CursorState(), make_viewport())

    assert frame.rows[0] == "   1 alpha"
    assert frame.rows[1] == "   2         b"
    assert frame.rows[2] == FILLER


def test_cursor_accounts_for_gutter_and_tabs() -> None:
    cursor = CursorState(cx=1, cy=1)
    frame = compose(Buffer(["alpha", "\tb"]), cursor, make_viewport())

    assert (cursor.rx, cursor.ry) == (8, 1)
    assert frame.cursor == (1, 13)


def test_status_bar_layout() -> None:
    buffer = Buffer(["x"], filename="notes.txt")
    buffer.append_text(0, "y")
    frame = compose(buffer, CursorState(cx=1), make_viewport())

    assert frame.status_bar.startswith("-- NORMAL -- notes.txt - 1 lines [+]")
    assert frame.status_bar.endswith("2:1")
    assert len(frame.status_bar) == 80


def test_status_message_expires() -> None:
    status = StatusMessage()
    status.set("saved", now=100.0)
    renderer = Renderer(EditorConfig())
    args = (Buffer(["x"]), CursorState(), make_viewport(), status)

    assert renderer.compose(*args, mode_label="NORMAL", now=104.0).message == "saved"
    assert renderer.compose(*args, mode_label="NORMAL", now=105.0).message == ""


def test_frame_encoding_order() -> None:
    frame = compose(Buffer(["x"]), CursorState(), make_viewport(rows=4, cols=20))
    data = frame.encode().decode("utf-8")

    assert data.startswith(ansi.HIDE_CURSOR + ansi.CURSOR_HOME)
    assert data.endswith(ansi.move_cursor(0, 5) + ansi.SHOW_CURSOR)
    assert data.count(ansi.CLEAR_LINE) == 3
    assert ansi.REVERSE_VIDEO in data


@pytest.mark.parametrize(
    ("cy", "cx"), [(0, 0), (30, 2), (99, 120), (45, 0), (0, 150), (60, 3)]
)
def test_scroll_keeps_cursor_visible(cy: int, cx: int) -> None:
    buffer = Buffer(["x" * 200 for _ in range(100)])
    viewport = make_viewport(rows=12, cols=40)
    cursor = CursorState(cx=cx, cy=cy)

    viewport.scroll(buffer, cursor)

    assert viewport.row_offset <= cursor.ry < viewport.row_offset + viewport.screen_rows
    assert viewport.col_offset <= cursor.rx < viewport.col_offset + viewport.text_cols


def test_scroll_moves_minimally() -> None:
    buffer = Buffer([str(n) for n in range(50)])
    viewport = make_viewport(rows=12, cols=40)

    viewport.scroll(buffer, CursorState(cy=10))
    assert viewport.row_offset == 1

    viewport.scroll(buffer, CursorState(cy=5))
    assert viewport.row_offset == 1

    viewport.scroll(buffer, CursorState(cy=0))
    assert viewport.row_offset == 0


def test_gutter_widens_for_five_digit_line_numbers() -> None:
    buffer = Buffer(["x" * 200 for _ in range(10005)])
    cursor = CursorState(cx=3, cy=10002)
    viewport = make_viewport()

    frame = compose(buffer, cursor, viewport)

    assert viewport.gutter_width == 6
    assert all(len(row) <= 80 for row in frame.rows)
    assert frame.rows[21].startswith("10003 xxx")
    assert len(frame.rows[21]) == 80
    assert frame.cursor == (21, 9)


def test_gutter_keeps_minimum_width_for_short_buffers() -> None:
    viewport = make_viewport()
    compose(Buffer(["a"]), CursorState(), viewport)

    assert viewport.gutter_width == 5


def test_command_line_cursor_stays_on_screen() -> None:
    frame = compose(
        Buffer(["x"]), CursorState(), make_viewport(rows=4, cols=20), command_line="w" * 30
    )

    assert len(frame.message) == 20
    assert frame.cursor == (3, 19)
