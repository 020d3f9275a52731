import pytest

from pixeldemo.effects.scroller import (
    CHAR_WIDTHS,
    LEAD_COLUMNS,
    Scroller,
    crossx,
    crossy,
    plot_cross,
    render_text,
)
from pixeldemo.gfx import HEIGHT, WIDTH, Screen

FONT_WIDTH = sum(CHAR_WIDTHS)
FONT_HEIGHT = 5


def _patterned_font():
    return bytes((col * 3 + row * 7) & 0xFF for row in range(FONT_HEIGHT) for col in range(FONT_WIDTH))


def _samples():
    return [(k + 0.5) / 24 for k in range(24)]


def test_crossx_stays_in_unit_range():
    for t in _samples():
        assert 0.0 <= crossx(t) <= 1.0


def test_crossx_is_periodic():
    for t in _samples():
        assert crossx(t + 1.0) == pytest.approx(crossx(t), abs=1e-9)


def test_crossy_is_shifted_crossx():
    for t in _samples():
        assert crossy(t) == pytest.approx(crossx(t + 0.75), abs=1e-12)


def test_crossx_start_of_outline():
    assert crossx(0.0) == 0.0


def test_plot_cross_stays_inside_its_square():
    screen = Screen()
    plot_cross(screen, 96, 96, 40, 0.0, 0.0, 0x00FF0000)
    points = [(i % WIDTH, i // WIDTH) for i, p in enumerate(screen.pixels) if p]
    assert points
    assert all(76 <= x <= 116 and 76 <= y <= 116 for x, y in points)


def test_plot_cross_gap_hides_rest():
    screen = Screen()
    plot_cross(screen, 96, 96, 40, 0.0, 1.0, 0x00FF0000)
    assert sum(1 for p in screen.pixels if p) == 1


def test_plot_cross_negative_size_draws_nothing():
    screen = Screen()
    plot_cross(screen, 96, 96, -10, 0.0, 0.0, 0x00FF0000)
    assert set(screen.pixels) == {0}


def test_render_text_layout():
    font = _patterned_font()
    text = render_text(font, FONT_WIDTH, FONT_HEIGHT, "A")
    code = ord("A") - 32
    assert len(text) == (LEAD_COLUMNS + CHAR_WIDTHS[code]) * FONT_HEIGHT
    assert text[:LEAD_COLUMNS * FONT_HEIGHT] == bytes(LEAD_COLUMNS * FONT_HEIGHT)
    offset = sum(CHAR_WIDTHS[:code])
    first_column = text[LEAD_COLUMNS * FONT_HEIGHT:(LEAD_COLUMNS + 1) * FONT_HEIGHT]
    assert list(first_column) == [font[row * FONT_WIDTH + offset] for row in range(FONT_HEIGHT)]


def test_render_text_rejects_unknown_character():
    with pytest.raises(ValueError):
        render_text(_patterned_font(), FONT_WIDTH, FONT_HEIGHT, "\x7f")


def test_render_text_rejects_narrow_font():
    with pytest.raises(ValueError):
        render_text(bytes(10 * FONT_HEIGHT), 10, FONT_HEIGHT, "A")


def test_scroller_rejects_wrong_font_size():
    with pytest.raises(ValueError):
        Scroller(bytes(3), FONT_WIDTH, FONT_HEIGHT)


def _column_text_pixels(screen, x):
    return sum(1 for y in range(HEIGHT) if screen.pixels[y * WIDTH + x] == 0x00FF0000)


def test_text_hidden_before_bar():
    scroller = Scroller(bytes([255]) * (FONT_WIDTH * FONT_HEIGHT), FONT_WIDTH, FONT_HEIGHT)
    screen = Screen()
    scroller.frame(screen, 0)
    assert _column_text_pixels(screen, 0) == 0


def test_text_shown_after_bar():
    scroller = Scroller(bytes([255]) * (FONT_WIDTH * FONT_HEIGHT), FONT_WIDTH, FONT_HEIGHT)
    screen = Screen()
    scroller.frame(screen, 7000)
    assert _column_text_pixels(screen, 0) == FONT_HEIGHT