import io

import pytest

from sidescroll.screen import (
    BG_COLOR,
    SAMPLE_BOX,
    BorderThickness,
    Cell,
    Color,
    ScreenBuffer,
    TextAlignment,
    attributes,
    print_unicode_array,
)

W = Color.WHITE
B = BG_COLOR


def test_attributes_combines_foreground_and_background():
    assert attributes(Color.RED, Color.BLUE) == Color.RED | Color.BACKGROUND_BLUE
    assert attributes(Color.BACKGROUND_CYAN, Color.BLACK) == Color.BACKGROUND_CYAN
    assert attributes(Color.WHITE, Color.BLACK) == Color.WHITE


def test_new_and_cleared_buffer_is_blank():
    buf = ScreenBuffer(10, 4)
    buf.draw_char(2, 2, "x", W, B)
    buf.clear()
    assert buf.rows() == [" " * 10] * 4
    assert buf[2, 2] == Cell(" ", int(BG_COLOR))


def test_draw_char_sets_cell():
    buf = ScreenBuffer(10, 4)
    buf.draw_char(3, 1, "@", Color.RED, Color.BLUE)
    assert buf[3, 1] == Cell("@", attributes(Color.RED, Color.BLUE))


def test_draw_char_wraps_and_ignores_outside():
    buf = ScreenBuffer(10, 4)
    buf.draw_char(12, 0, "w", W, B)
    buf.draw_char(0, 4, "z", W, B)
    buf.draw_char(-1, 0, "n", W, B)
    assert buf[2, 1].char == "w"
    assert "z" not in "".join(buf.rows())
    assert "n" not in "".join(buf.rows())


def test_lines_exclude_end():
    buf = ScreenBuffer(10, 5)
    buf.draw_hline(0, 2, 5, "-", W, B)
    buf.draw_vline(9, 1, 4, "|", W, B)
    assert buf.rows()[0] == "  ---     "
    assert [row[9] for row in buf.rows()] == [" ", "|", "|", "|", " "]


@pytest.mark.parametrize(
    "alignment, start",
    [(TextAlignment.LEFT, 2), (TextAlignment.CENTER, 4), (TextAlignment.RIGHT, 6)],
)
def test_draw_text_alignment(alignment, start):
    buf = ScreenBuffer(12, 1)
    buf.draw_text(2, 8, 0, "abc", W, B, alignment)
    assert buf.rows()[0].index("abc") == start


def test_draw_text_truncates_to_span():
    buf = ScreenBuffer(12, 1)
    buf.draw_text(1, 4, 0, "abcdefgh", W, B, TextAlignment.RIGHT)
    assert buf.rows()[0].strip() == "abcd"
    assert buf.rows()[0].index("a") == 1


def test_draw_text_empty_span_draws_nothing():
    buf = ScreenBuffer(12, 1)
    buf.draw_text(5, 2, 0, "abc", W, B, TextAlignment.LEFT)
    assert buf.rows()[0] == " " * 12


@pytest.mark.parametrize(
    "thickness, corners",
    [
        (BorderThickness.LIGHT, "┌┐└┘"),
        (BorderThickness.MEDIUM, "╔╗╚╝"),
        (BorderThickness.HEAVY, "████"),
    ],
)
def test_draw_rect_corners(thickness, corners):
    buf = ScreenBuffer(8, 6)
    buf.draw_rect(1, 1, 5, 4, W, B, thickness)
    rows = buf.rows()
    assert rows[1][1] + rows[1][5] + rows[4][1] + rows[4][5] == corners
    assert rows[0] == " " * 8 and rows[5] == " " * 8


def test_draw_rect_matches_sample_box():
    buf = ScreenBuffer(5, 5)
    buf.draw_rect(0, 0, 5, 5, W, B, BorderThickness.MEDIUM)
    buf.draw_char(2, 2, "█", W, B)
    assert buf.rows() == list(SAMPLE_BOX)


def test_getitem_out_of_range():
    with pytest.raises(IndexError):
        ScreenBuffer(3, 3)[3, 0]


def test_bad_dimensions():
    with pytest.raises(ValueError):
        ScreenBuffer(0, 5)


def test_to_ansi_contains_rows_and_reset():
    buf = ScreenBuffer(4, 2)
    buf.draw_hline(0, 0, 4, "#", W, B)
    out = buf.to_ansi()
    assert out.endswith("\x1b[0m")
    assert "####" in out
    assert out.count("\n") == 1


def test_print_unicode_array_writes_box():
    stream = io.StringIO()
    print_unicode_array(stream, SAMPLE_BOX, Color.GREEN, Color.BLACK)
    out = stream.getvalue()
    assert out.startswith("\x1b[32;40m")
    for row in SAMPLE_BOX:
        assert row in out


def test_print_unicode_array_rejects_ragged_rows():
    with pytest.raises(ValueError):
        print_unicode_array(io.StringIO(), ["abc", "ab"], Color.GREEN, Color.BLACK)