"""Sine-wave text scroller over rotating cross outlines."""

from __future__ import annotations

import math
from itertools import accumulate
from os import PathLike
from pathlib import Path
from typing import Union

from PIL import Image as _PILImage

from pixeldemo.effects.patterns import _f32
from pixeldemo.gfx import HEIGHT, WIDTH, Screen

FIRST_CHAR = 32
CHAR_WIDTHS = (
    4, 4, 5, 9, 7, 11, 9, 4, 5, 5, 7, 7, 5, 7, 4, 7,
    8, 5, 8, 8, 9, 8, 7, 8, 8, 8,
    4, 4, 7, 5, 7, 8, 11,
    8, 8, 8, 8, 7, 6, 8, 8, 4, 8, 9, 7, 12,
    9, 8, 8, 8, 8, 6, 7, 8, 8, 12, 8, 8, 8,
    5, 7, 5, 6, 7, 5,
    8, 8, 7, 8, 7, 6, 8, 8, 3, 7, 8, 4, 12,
    8, 8, 8, 8, 6, 7, 6, 8, 8, 12, 8, 8, 8,
)
_CHAR_OFFSETS = tuple(accumulate((0,) + CHAR_WIDTHS[:-1]))

LEAD_COLUMNS = 192
BAR_START_COLUMN = 350
CROSS_COUNT = 8
FONT_FILE = "chicago.png"

MESSAGE = (
    " " * 43
    + "Greetings party people! Are you tired of your regular pharmacy signs? "
    "Do you wish that they could be a bit more demosceneish? Time to make a demo about it..."
    + " " * 47
)


def crossx(t: float) -> float:
    """Horizontal position, 0 to 1, of a point tracing a plus-shaped outline."""
    t = math.fmod(t, 1.0)
    if t < 1 / 12.0:
        return t * 4
    if t < 2 / 12.0:
        return 1 / 3.0
    if t < 3 / 12.0:
        return t * 4 - 1 / 3.0
    if t < 4 / 12.0:
        return 2 / 3.0
    if t < 5 / 12.0:
        return t * 4 - 2 / 3.0
    if t < 6 / 12.0:
        return 1.0
    if t < 7 / 12.0:
        return -(t * 4) + 3.0
    if t < 8 / 12.0:
        return 2 / 3.0
    if t < 9 / 12.0:
        return -(t * 4) + 3.0 + 1 / 3.0
    if t < 10 / 12.0:
        return 1 / 3.0
    if t < 11 / 12.0:
        return -(t * 4) + 3.0 + 2 / 3.0
    return 0.0


def crossy(t: float) -> float:
    """Vertical position, 0 to 1, on the same outline as crossx."""
    return crossx(t + 9 / 12.0)


def plot_cross(
    screen: Screen, x: float, y: float, h: float, bpos: float, bsize: float, colour: int
) -> None:
    """Plot a plus outline of size h centred on (x, y), leaving a gap at bpos."""
    x, y, h = _f32(x), _f32(y), _f32(h)
    bpos, gap_end = _f32(bpos), _f32(_f32(bpos) + _f32(bsize))
    limit = h * 8
    if limit <= 0:
        return
    for i in range(math.ceil(limit)):
        t = i / h / 8
        if bpos < t < gap_end:
            continue
        screen.put_pixel(
            int(crossx(t) * h + x - h / 2),
            int(crossy(t) * h + y - h / 2),
            colour,
        )


def render_text(font: bytes, font_width: int, font_height: int, message: str) -> bytes:
    """Render a message column by column, each column font_height grey levels.

    The result starts with LEAD_COLUMNS blank columns.
    """
    font = bytes(font)
    if len(font) < font_width * font_height:
        raise ValueError("font data is smaller than its stated size")
    if font_width < sum(CHAR_WIDTHS):
        raise ValueError("font image is narrower than the glyph table")
    columns = bytearray(LEAD_COLUMNS * font_height)
    for ch in message:
        code = ord(ch) - FIRST_CHAR
        if not 0 <= code < len(CHAR_WIDTHS):
            raise ValueError(f"character {ch!r} is not in the font")
        offset = _CHAR_OFFSETS[code]
        for col in range(offset, offset + CHAR_WIDTHS[code]):
            columns.extend(font[col::font_width][:font_height])
    return bytes(columns)


class Scroller:
    """The opening greeting, scrolling one column every 20 milliseconds."""

    def __init__(self, font: bytes, font_width: int, font_height: int) -> None:
        font = bytes(font)
        if len(font) != font_width * font_height:
            raise ValueError(
                f"font must hold {font_width * font_height} grey levels, got {len(font)}"
            )
        self.font_height = font_height
        self.text = render_text(font, font_width, font_height, MESSAGE)

    @classmethod
    def from_assets(cls, directory: Union[str, PathLike]) -> "Scroller":
        with _PILImage.open(Path(directory) / FONT_FILE) as img:
            grey = img.convert("L")
            return cls(grey.tobytes(), grey.width, grey.height)

    def frame(self, screen: Screen, time: int) -> None:
        fh = self.font_height
        pos = math.fmod(time / 5000.0, 1.0)
        screen.clear(0x00000000)
        for i in range(CROSS_COUNT):
            scale = math.fmod(-i * (WIDTH // 8) + time / 10, 192.0)
            bpos = pos if i % 2 == 1 else -pos + 1
            plot_cross(screen, 96, 96, scale, bpos, 0.05, (i * 32) << 16)

        text = self.text
        pixels = screen.pixels
        bar_start = fh * BAR_START_COLUMN
        index = fh * (time // 20)
        for x in range(WIDTH):
            y_top = (96 - fh // 2) + int(8 * math.sin(x / 20 - time / 200))
            for y in range(fh):
                if bar_start <= index < len(text):
                    row = y_top + y
                    if 0 <= row < HEIGHT:
                        pixels[row * WIDTH + x] = text[index] << 16
                index += 1