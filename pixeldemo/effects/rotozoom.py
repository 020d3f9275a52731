"""Rotating, zooming tiled image."""

from __future__ import annotations

import math
from os import PathLike
from pathlib import Path
from typing import Union

from pixeldemo.effects.patterns import _plus_region
from pixeldemo.gfx import HEIGHT, WIDTH, Image, Screen

IMAGE_FILE = "patarty.png"

_CX = WIDTH / 2
_CY = HEIGHT / 2


class Rotozoom:
    """Tiles an image across the screen, turning and zooming it over time."""

    def __init__(self, image: Image) -> None:
        if image.width == 0 or image.height == 0:
            raise ValueError("rotozoom image has no pixels")
        self.image = image

    @classmethod
    def from_assets(cls, directory: Union[str, PathLike]) -> "Rotozoom":
        return cls(Image.load(Path(directory) / IMAGE_FILE))

    def pixel(self, x: int, y: int, a: float, r: float) -> int:
        """Return the colour at a screen position for rotation a and zoom r."""
        sx = x - _CX
        sy = y - _CY
        ca, sa = math.cos(a), math.sin(a)
        tx = int((sx * ca + sy * sa) * r) % self.image.width
        ty = int((sy * ca - sx * sa) * r) % self.image.height
        red, green, blue, _ = self.image.rgba(tx, ty)
        return (red << 24) | (green << 16) | (blue << 8)

    def frame(self, screen: Screen, time: int) -> None:
        a = time / 499.0
        r = 1.0 + 0.5 * math.sin(time / 400.0)
        pixels = screen.pixels
        for x, y in _plus_region():
            pixels[y * WIDTH + x] = self.pixel(x, y, a, r)