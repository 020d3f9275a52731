import pytest
from PIL import Image as PILImage

from pixeldemo.effects.credits import (
    NAME_COUNT,
    NAME_GAP,
    SPRITE_FILES,
    SPRITE_HEIGHT,
    SPRITE_WIDTH,
    Credits,
    draw_name,
    plot_sprite,
)
from pixeldemo.gfx import WIDTH, Screen

WHITE = bytes([255] * (SPRITE_WIDTH * SPRITE_HEIGHT))
BLACK = bytes(SPRITE_WIDTH * SPRITE_HEIGHT)
CENTRE = 96 * WIDTH + 96


def test_plot_sprite_unrotated_covers_its_rows():
    screen = Screen()
    plot_sprite(screen, WHITE, 96.0, 96.0, 0.0, 1.0, 0, 200)
    assert screen.pixels[64 * WIDTH + 10] == 200 << 16
    assert screen.pixels[127 * WIDTH + 10] == 200 << 16
    assert screen.pixels[63 * WIDTH + 10] == 0
    assert screen.pixels[128 * WIDTH + 10] == 0


def test_plot_sprite_threshold_hides_dim_pixels():
    screen = Screen()
    plot_sprite(screen, bytes([100] * len(WHITE)), 96.0, 96.0, 0.0, 1.0, 100, 255)
    assert all(p == 0 for p in screen.pixels)


def test_plot_sprite_rejects_wrong_size():
    with pytest.raises(ValueError):
        plot_sprite(Screen(), b"\x00" * 10, 96.0, 96.0, 0.0, 1.0, 0, 255)


def test_draw_name_faded_out_writes_black():
    screen = Screen()
    screen.clear(0x11223300)
    draw_name(screen, WHITE, 4000)
    assert screen.pixels[CENTRE] == 0
    assert screen.pixels[0] == 0x11223300


def test_credits_needs_all_sprites():
    with pytest.raises(ValueError):
        Credits([WHITE] * (NAME_COUNT - 1))
    with pytest.raises(ValueError):
        Credits([WHITE] * (NAME_COUNT - 1) + [b"\x00"])


def test_frame_at_start_is_full_flash():
    screen = Screen()
    Credits([WHITE] * NAME_COUNT).frame(screen, 0)
    assert all(p == 0xFF0000 for p in screen.pixels)


def test_frame_after_flash_has_black_background():
    screen = Screen()
    Credits([WHITE] * NAME_COUNT).frame(screen, 500)
    assert screen.pixels[0] == 0
    assert screen.pixels[CENTRE] == 0xFF0000


def test_previous_name_lingers():
    time = NAME_GAP + 180
    screen = Screen()
    Credits([WHITE] + [BLACK] * (NAME_COUNT - 1)).frame(screen, time)
    expected = Screen()
    draw_name(expected, WHITE, 180 + NAME_GAP)
    assert screen.pixels[CENTRE] == expected.pixels[CENTRE]


def test_from_assets_round_trip(tmp_path):
    for name in SPRITE_FILES:
        PILImage.new("L", (SPRITE_WIDTH, SPRITE_HEIGHT), 255).save(tmp_path / name)
    credits = Credits.from_assets(tmp_path)
    assert credits.sprites == [WHITE] * NAME_COUNT
    screen = Screen()
    credits.frame(screen, 0)
    assert screen.pixels[CENTRE] == 0xFF0000


def test_from_assets_rejects_wrong_dimensions(tmp_path):
    for name in SPRITE_FILES:
        PILImage.new("L", (10, 10), 255).save(tmp_path / name)
    with pytest.raises(ValueError):
        Credits.from_assets(tmp_path)