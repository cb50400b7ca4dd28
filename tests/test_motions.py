from __future__ import annotations

import pytest

from vicore.buffer import Buffer
from vicore.motions import WORD_MOTION_KEYS, MotionEngine, create_default_engine


def make_engine(page_rows: int = 5) -> MotionEngine:
    return create_default_engine(page_rows=lambda: page_rows)


def resolve(buffer: Buffer, key: str, start, count: int = 1):
    return make_engine().resolve(buffer, key, start, count)


def test_horizontal_motions_stop_at_line_bounds() -> None:
    buffer = Buffer(["abc"])

    assert resolve(buffer, "h", (0, 1), 5).end == (0, 0)
    assert resolve(buffer, "l", (0, 1), 5).end == (0, 3)


def test_vertical_count_clamps_to_buffer() -> None:
    buffer = Buffer(["abc", "de"])

    result = resolve(buffer, "j", (0, 3), 3)

    assert result.ok
    assert result.end == (1, 2)
    assert resolve(buffer, "k", (1, 0), 4).end == (0, 0)


@pytest.mark.parametrize("start", [(0, 0), (2, 1), (4, 3)])
def test_last_row_from_anywhere(start) -> None:
    buffer = Buffer(["alpha", "b", "gamma", "delta", "xy"])

    row, col = resolve(buffer, "G", start, 7).end

    assert row == 4
    assert col <= 2


def test_first_row_clamps_column() -> None:
    buffer = Buffer(["a", "long line"])

    assert resolve(buffer, "g", (1, 6)).end == (0, 1)


def test_line_start_and_end_apply_extra_rows() -> None:
    buffer = Buffer(["one", "two", "three"])

    assert resolve(buffer, "_", (0, 2), 3).end == (2, 0)
    assert resolve(buffer, "$", (0, 0)).end == (0, 3)
    assert resolve(buffer, "$", (0, 0), 2).end == (1, 3)


def test_special_keys_alias_basic_motions() -> None:
    buffer = Buffer(["abc", "defg"])

    assert resolve(buffer, "RIGHT", (0, 0)).end == (0, 1)
    assert resolve(buffer, "DOWN", (0, 2)).end == (1, 2)
    assert resolve(buffer, "END", (1, 0)).end == (1, 4)
    assert resolve(buffer, "HOME", (1, 3)).end == (1, 0)


def test_page_motions_move_by_screen_rows() -> None:
    buffer = Buffer([str(n) for n in range(20)])
    engine = make_engine(page_rows=5)

    assert engine.resolve(buffer, "PAGE_DOWN", (0, 0)).end == (5, 0)
    assert engine.resolve(buffer, "PAGE_DOWN", (0, 0), 9).end == (19, 0)
    assert engine.resolve(buffer, "PAGE_UP", (12, 0)).end == (7, 0)


@pytest.mark.parametrize("key", WORD_MOTION_KEYS)
def test_word_motions_are_not_supported_yet(key: str) -> None:
    result = resolve(Buffer(["some words"]), key, (0, 0))

    assert result.status == "unsupported"
    assert result.end == (0, 0)
    assert result.message == f"Motion not supported yet: {key}"


def test_unknown_motion_names_key() -> None:
    result = resolve(Buffer(["x"]), "Z", (0, 0))

    assert result.ok is False
    assert result.status == "unknown"
    assert result.message == "Unknown motion: Z"


def test_motions_on_empty_buffer_stay_at_origin() -> None:
    buffer = Buffer()

    for key in ("h", "l", "j", "k", "_", "$", "g", "G"):
        assert resolve(buffer, key, (0, 0), 3).end == (0, 0)


def test_register_rejects_duplicates() -> None:
    engine = make_engine()

    with pytest.raises(ValueError):
        engine.register("h", lambda buffer, start, count: start)

    engine.register("h", lambda buffer, start, count: (0, 0), replace=True)
    assert engine.resolve(Buffer(["ab"]), "h", (0, 2)).end == (0, 0)
