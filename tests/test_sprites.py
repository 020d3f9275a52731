import pytest

from pixeldemo.effects.sprites import Farjan, Jarig, NyanCat, Prescription, Tomato
from pixeldemo.gfx import WIDTH, Image, Screen


def solid(w, h, rgba):
    return Image(w, h, bytes(rgba) * (w * h))


RED = (0xFF, 0, 0, 255)
GREEN = (0, 0xFF, 0, 255)
BLUE = (0, 0, 0xFF, 255)
GREY = (0x40, 0x40, 0x40, 255)

RED_PX = 0xFF000000
GREEN_PX = 0x00FF0000
BLUE_PX = 0x0000FF00
GREY_PX = 0x40404000


def at(screen, x, y):
    return screen.pixels[y * WIDTH + x]


def test_farjan_scene():
    screen = Screen()
    Farjan(solid(40, 40, RED), solid(64, 8, BLUE)).frame(screen, 0)
    assert at(screen, 0, 0) == Farjan.SKY
    assert at(screen, 128, 0) == Farjan.SUN
    assert RED_PX in screen.pixels
    assert BLUE_PX in screen.pixels


def test_jarig_alternates():
    effect = Jarig(solid(20, 10, RED), solid(20, 10, GREEN), solid(10, 10, BLUE), solid(10, 10, GREY))
    screen = Screen()
    effect.frame(screen, 0)
    assert at(screen, 96, 64) == RED_PX
    assert at(screen, 191, 64) == BLUE_PX
    assert at(screen, 0, 0) == 0
    effect.frame(screen, 600)
    assert at(screen, 96, 64) == GREEN_PX
    assert at(screen, 191, 64) == GREY_PX


def _top_row(screen, x):
    return min(y for y in range(192) if at(screen, x, y) == RED_PX)


def test_tomato_bounces_up():
    effect = Tomato(solid(16, 16, RED))
    screen = Screen()
    effect.frame(screen, 0)
    rest = _top_row(screen, 64)
    effect.frame(screen, 200)
    assert rest == 80
    assert _top_row(screen, 64) < rest


def _nyan_image():
    data = b"".join(bytes((16 * k + 1, 0, 0, 255)) * (4 * 192) for k in range(12))
    return Image(4, 192 * 12, data)


def test_nyancat_selects_frame():
    effect = NyanCat(_nyan_image())
    screen = Screen()
    effect.frame(screen, 140)
    assert screen.pixels[0] == 33 << 24
    first = Screen()
    effect.frame(first, 0)
    again = Screen()
    effect.frame(again, 70 * 12)
    assert first.pixels[0] == again.pixels[0] == 1 << 24


def _text(width, lit_columns):
    data = bytearray()
    for _ in range(16):
        for x in range(width):
            data += bytes((255 if x < lit_columns else 0, 0, 0, 255))
    return Image(width, 16, bytes(data))


def _prescription():
    return Prescription(
        solid(192, 192, GREEN), solid(192, 192, BLUE), _text(100, 50), _text(100, 100)
    )


def test_prescription_first_screen():
    screen = Screen()
    _prescription().frame(screen, 0)
    assert at(screen, 73, 21) == GREEN_PX
    assert at(screen, 74, 21) == Prescription.TEXT_COLOUR
    assert at(screen, 115, 36) == Prescription.TEXT_COLOUR


def test_prescription_scrolls():
    screen = Screen()
    _prescription().frame(screen, 180)
    assert at(screen, 115, 21) == 0
    assert at(screen, 74, 21) == Prescription.TEXT_COLOUR


def test_prescription_second_screen():
    screen = Screen()
    _prescription().frame(screen, 6000)
    assert at(screen, 74, 21) == BLUE_PX
    assert at(screen, 74, 29) == Prescription.TEXT_COLOUR


def test_prescription_rejects_short_text():
    with pytest.raises(ValueError):
        Prescription(solid(4, 4, RED), solid(4, 4, RED), _text(50, 10), solid(50, 15, RED))