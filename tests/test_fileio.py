from __future__ import annotations

import os

from vicore.buffer import Buffer, load_lines, save_buffer


def test_save_then_load_round_trip(tmp_path) -> None:
    target = tmp_path / "notes.txt"
    buffer = Buffer(["first", "\tindented", "", "last"], filename=str(target))
    buffer.insert_char(3, 4, "!")

    saved = save_buffer(buffer)
    loaded = load_lines(str(target))

    assert saved.ok is True
    assert buffer.dirty is False
    assert loaded.status == "ok"
    assert loaded.lines == ["first", "\tindented", "", "last!"]


def test_save_reports_line_and_byte_counts(tmp_path) -> None:
    target = tmp_path / "out.txt"
    buffer = Buffer(["a", "b"])

    result = save_buffer(buffer, str(target))

    assert result.message == f'"{target}" 2L, 4B written'
    assert (result.line_count, result.byte_count) == (2, 4)
    assert target.read_bytes() == b"a\nb\n"


def test_save_truncates_existing_file(tmp_path) -> None:
    target = tmp_path / "out.txt"
    target.write_bytes(b"a much longer previous body\n")

    save_buffer(Buffer(["x"]), str(target))

    assert target.read_bytes() == b"x\n"


def test_save_without_name_fails() -> None:
    result = save_buffer(Buffer(["x"]))

    assert result.ok is False
    assert result.message == "No file name"


def test_save_failure_keeps_dirty(tmp_path) -> None:
    buffer = Buffer(["x"])
    buffer.append_text(0, "y")
    target = tmp_path / "missing-dir" / "out.txt"

    result = save_buffer(buffer, str(target))

    assert result.ok is False
    assert result.message == os.strerror(2)
    assert buffer.dirty is True


def test_load_missing_file_is_new_file(tmp_path) -> None:
    path = str(tmp_path / "absent.txt")

    result = load_lines(path)

    assert result.ok is True
    assert result.status == "new_file"
    assert result.lines == []


def test_load_strips_carriage_returns(tmp_path) -> None:
    target = tmp_path / "dos.txt"
    target.write_bytes(b"one\r\ntwo\r\n")

    result = load_lines(str(target))

    assert result.lines == ["one", "two"]


def test_load_directory_reports_error(tmp_path) -> None:
    result = load_lines(str(tmp_path))

    assert result.ok is False
    assert result.status == "error"
    assert result.message
