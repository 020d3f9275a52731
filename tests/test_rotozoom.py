import math

import pytest

from pixeldemo.effects.rotozoom import Rotozoom
from pixeldemo.gfx import WIDTH, Image, Screen

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)

CHECKER = Image(2, 2, bytes(RED + GREEN + BLUE + WHITE))


def test_centre_maps_to_origin():
    assert Rotozoom(CHECKER).pixel(96, 96, 0.0, 1.0) == 0xFF000000


def test_axes_without_rotation():
    effect = Rotozoom(CHECKER)
    assert effect.pixel(97, 96, 0.0, 1.0) == 0x00FF0000
    assert effect.pixel(96, 97, 0.0, 1.0) == 0x0000FF00


def test_quarter_turn_moves_x_onto_y():
    effect = Rotozoom(CHECKER)
    assert effect.pixel(97, 96, math.pi / 2, 1.0) == effect.pixel(96, 97, 0.0, 1.0)


def test_image_tiles():
    effect = Rotozoom(CHECKER)
    for x in range(90, 100):
        assert effect.pixel(x, 96, 0.0, 1.0) == effect.pixel(x + 2, 96, 0.0, 1.0)


def test_empty_image_rejected():
    with pytest.raises(ValueError):
        Rotozoom(Image(0, 0, b""))


def test_frame_fills_plus_area_only():
    screen = Screen()
    screen.clear(0x12345600)
    Rotozoom(CHECKER).frame(screen, 0)
    assert screen.pixels[0] == 0x12345600
    assert screen.pixels[96 * WIDTH + 96] == 0xFF000000