import pytest

from pixeldemo.effects.patarty import Patarty
from pixeldemo.gfx import WIDTH, Image, Screen

LAVA_W = 448
LAVA_H = 512


def _uniform_lava(red):
    return Image(LAVA_W, LAVA_H, bytes((red, 0, 0, 255)) * (LAVA_W * LAVA_H))


def _patterned_lava():
    data = bytearray()
    for y in range(LAVA_H):
        for x in range(LAVA_W):
            data += bytes(((x * 7 + y * 13) & 0xFF, 0, 0, 255))
    return Image(LAVA_W, LAVA_H, bytes(data))


SPRITE = Image(4, 4, bytes((0x10, 0x20, 0x30, 255)) * 16)


def test_uniform_lava_lights_all_channels():
    effect = Patarty(SPRITE, _uniform_lava(0x80))
    assert effect.lava_pixel(10, 10, 0.0) == 0x80808000


def test_dark_lava_is_black():
    effect = Patarty(SPRITE, _uniform_lava(0x7F))
    assert effect.lava_pixel(10, 10, 1234.0) == 0


def test_lava_wraps_after_full_cycle():
    effect = Patarty(SPRITE, _patterned_lava())
    for x, y in ((0, 0), (70, 33), (191, 191), (100, 150)):
        assert effect.lava_pixel(x, y, 0.0) == effect.lava_pixel(x, y, 46080.0)


def test_small_lava_lamp_rejected():
    with pytest.raises(ValueError):
        Patarty(SPRITE, Image(10, 10, bytes(400)))


def test_frame_leaves_corners_and_draws_sprite():
    effect = Patarty(SPRITE, _uniform_lava(0x80))
    screen = Screen()
    screen.clear(0x12345600)
    effect.frame(screen, 0)
    assert screen.pixels[0] == 0x12345600
    assert screen.pixels[100 * WIDTH + 0] == 0x80808000
    assert screen.pixels[96 * WIDTH + 96] == 0x10203000