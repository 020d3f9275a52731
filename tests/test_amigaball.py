import pytest
from PIL import Image as PILImage

from pixeldemo.effects.amigaball import (
    BACKGROUND_GREY,
    FRAME_FILES,
    GRID_COLOUR,
    PATH_LENGTH,
    SHADOW_GREY,
    AmigaBall,
    ball_path,
    draw_shadow,
)
from pixeldemo.gfx import WIDTH, Image, Screen

RED = Image(1, 1, bytes([255, 0, 0, 255]))
CLEAR = Image(1, 1, bytes([0, 0, 0, 0]))


def test_path_length_and_start():
    path = ball_path()
    assert len(path) == PATH_LENGTH
    assert path[0] == pytest.approx((28.0333, 92.0))


def test_path_stays_low_while_bouncing_on_floor():
    path = ball_path()
    assert all(y < 101 for _, y in path[:1500])
    assert all(y < 165 for _, y in path)


def test_path_is_stable():
    first = ball_path()
    second = ball_path()
    assert len(second) == PATH_LENGTH
    assert second[0] == pytest.approx((28.0333, 92.0))
    assert list(second) == list(first)


def test_draw_shadow_only_darkens_background():
    screen = Screen()
    screen.clear(BACKGROUND_GREY)
    screen.put_pixel(1, 0, 0x12345600)
    image = Image(3, 1, bytes([255, 0, 0, 255, 255, 0, 0, 255, 0, 9, 9, 255]))
    draw_shadow(screen, image, 0, 0)
    assert screen.pixels[0] == SHADOW_GREY
    assert screen.pixels[1] == 0x12345600
    assert screen.pixels[2] == BACKGROUND_GREY


def test_draw_shadow_clips_offscreen():
    screen = Screen()
    screen.clear(BACKGROUND_GREY)
    image = Image(2, 2, bytes([255, 0, 0, 255] * 4))
    draw_shadow(screen, image, -1, -1)
    assert screen.pixels[0] == SHADOW_GREY
    assert screen.pixels[1] == BACKGROUND_GREY
    assert screen.pixels[WIDTH] == BACKGROUND_GREY


def test_needs_five_frames():
    with pytest.raises(ValueError):
        AmigaBall([RED] * 4)


def test_frame_draws_grid_and_background():
    screen = Screen()
    AmigaBall([CLEAR] * 5).frame(screen, 0)
    assert screen.pixels[5 * WIDTH] == GRID_COLOUR
    assert screen.pixels[8 * WIDTH + 8] == BACKGROUND_GREY


def test_frame_places_ball_on_path():
    t = 2000
    screen = Screen()
    AmigaBall([RED] * 5).frame(screen, t)
    x, y = ball_path()[t]
    bx, by = int(x) - 32, int(y) - 32
    assert screen.pixels[by * WIDTH + bx] == 0xFF000000


def test_from_assets_round_trip(tmp_path):
    for name in FRAME_FILES:
        PILImage.new("RGBA", (1, 1), (255, 0, 0, 255)).save(tmp_path / name)
    ball = AmigaBall.from_assets(tmp_path)
    assert [f.data for f in ball.frames] == [RED.data] * 5
    screen = Screen()
    ball.frame(screen, 2000)
    x, y = ball_path()[2000]
    assert screen.pixels[(int(y) - 32) * WIDTH + int(x) - 32] == 0xFF000000