from __future__ import annotations

from vicore.buffer import Buffer, Row


def make_buffer(*lines: str) -> Buffer:
    return Buffer(lines)


def test_row_renders_tab_to_next_stop() -> None:
    row = Row("ab\tc")

    assert row.render == "ab      c"
    assert row.rlen == 9
    assert row.cx_to_rx(3) == 8


def test_tab_at_stop_boundary_advances_a_full_stop() -> None:
    row = Row("12345678\tx")

    assert row.cx_to_rx(9) == 16
    assert row.render.index("x") == 16


def test_row_honours_custom_tab_stop() -> None:
    row = Row("\tx", tab_stop=4)

    assert row.render == "    x"


def test_insert_then_delete_restores_row() -> None:
    buffer = make_buffer("hello")

    buffer.insert_char(0, 2, "x")
    assert buffer.rows[0].chars == "hexllo"

    buffer.delete_char(0, 2)
    assert buffer.rows[0].chars == "hello"
    assert buffer.row_len(0) == 5


def test_mutations_mark_dirty_and_rerender() -> None:
    buffer = make_buffer("a")
    assert buffer.dirty is False

    buffer.append_text(0, "\tb")

    assert buffer.dirty is True
    assert buffer.rows[0].render == "a       b"


def test_insert_row_clamps_index() -> None:
    buffer = make_buffer("one")

    assert buffer.insert_row(99, "two") == 1
    assert buffer.insert_row(-5, "zero") == 0
    assert buffer.lines == ["zero", "one", "two"]


def test_out_of_range_deletes_are_ignored() -> None:
    buffer = make_buffer("one")

    assert buffer.delete_row(3) is False
    assert buffer.delete_char(0, 10) is False
    assert buffer.dirty is False
    assert buffer.lines == ["one"]


def test_split_row_moves_tail_down() -> None:
    buffer = make_buffer("hello world")

    buffer.split_row(0, 5)

    assert buffer.lines == ["hello", " world"]


def test_serialize_terminates_every_row() -> None:
    assert make_buffer("a", "b").serialize() == b"a\nb\n"
    assert make_buffer().serialize() == b""


def test_serialize_round_trips_undecodable_bytes() -> None:
    raw = b"caf\xe9".decode("utf-8", "surrogateescape")

    assert make_buffer(raw).serialize() == b"caf\xe9\n"


def test_delete_range_spanning_rows() -> None:
    buffer = make_buffer("abc", "def", "ghi")

    removed = buffer.delete_range((0, 1), (2, 1))

    assert removed == "bc\ndef\ng"
    assert buffer.lines == ["ahi"]


def test_empty_range_leaves_buffer_clean() -> None:
    buffer = make_buffer("abc")

    assert buffer.delete_range((0, 1), (0, 1)) == ""
    assert buffer.dirty is False


def test_insert_text_with_newlines() -> None:
    buffer = make_buffer("ad")

    end = buffer.insert_text((0, 1), "b\nc")

    assert buffer.lines == ["ab", "cd"]
    assert end == (1, 1)


def test_insert_text_into_empty_buffer_creates_row() -> None:
    buffer = make_buffer()

    end = buffer.insert_text((0, 0), "xy")

    assert buffer.lines == ["xy"]
    assert end == (0, 2)


def test_replace_rows_counts_as_clean() -> None:
    buffer = make_buffer("old")
    buffer.insert_char(0, 0, "x")

    buffer.replace_rows(["new", "rows"])

    assert buffer.lines == ["new", "rows"]
    assert buffer.dirty is False
