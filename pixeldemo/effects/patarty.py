"""Dancing sprite over a three-channel scrolling lava lamp."""

from __future__ import annotations

import math
from os import PathLike
from pathlib import Path
from typing import Union

from pixeldemo.effects.patterns import _plus_region
from pixeldemo.gfx import WIDTH, Image, Screen

LAVA_ROWS = 512
LAVA_MIN_WIDTH = WIDTH + 256
PATARTY_FILE = "patarty.png"
LAVALAMP_FILE = "lavalamp.png"


class Patarty:
    """Red, green and blue lava layers scrolling at different speeds."""

    def __init__(self, patarty: Image, lavalamp: Image) -> None:
        if lavalamp.height < LAVA_ROWS or lavalamp.width < LAVA_MIN_WIDTH:
            raise ValueError(
                f"lava lamp image must be at least {LAVA_MIN_WIDTH}x{LAVA_ROWS}, "
                f"got {lavalamp.width}x{lavalamp.height}"
            )
        self.patarty = patarty
        self.lavalamp = lavalamp

    @classmethod
    def from_assets(cls, directory: Union[str, PathLike]) -> "Patarty":
        directory = Path(directory)
        return cls(Image.load(directory / PATARTY_FILE), Image.load(directory / LAVALAMP_FILE))

    def lava_pixel(self, x: int, y: int, dt: float) -> int:
        """Return the lava colour at a screen position dt milliseconds in."""
        w = self.lavalamp.width
        data = self.lavalamp.data
        mask = LAVA_ROWS - 1
        yr = (y - int(dt / 15)) & mask
        yg = (y - int(dt / 30)) & mask
        yb = (y - int(dt / 45)) & mask
        return (
            (data[(yr * w + x) * 4] & 0x80) << 24
            | (data[(yg * w + x + 128) * 4] & 0x80) << 16
            | (data[(yb * w + x + 256) * 4] & 0x80) << 8
        )

    def frame(self, screen: Screen, time: int) -> None:
        dt = float(time)
        pixels = screen.pixels
        for x, y in _plus_region():
            pixels[y * WIDTH + x] = self.lava_pixel(x, y, dt)
        bounce = -abs(int(20.0 * math.sin(time / 109)))
        screen.draw_image(
            self.patarty,
            96 - self.patarty.width // 2,
            96 + bounce - self.patarty.height // 2,
        )