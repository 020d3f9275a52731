"""Credits sequence: greyscale name sprites spinning away into the distance."""

from __future__ import annotations

import math
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

from PIL import Image as _PILImage

from pixeldemo.gfx import HEIGHT, WIDTH, Screen, _round_half_away

SPRITE_WIDTH = 192
SPRITE_HEIGHT = 64
NAME_GAP = 1920
NAME_COUNT = 8
SPRITE_FILES = tuple(f"credit_{i}.png" for i in range(NAME_COUNT))


def _check_sprite(sprite: bytes) -> None:
    if len(sprite) != SPRITE_WIDTH * SPRITE_HEIGHT:
        raise ValueError(
            f"sprite must hold {SPRITE_WIDTH * SPRITE_HEIGHT} grey levels, got {len(sprite)}"
        )


def plot_sprite(
    screen: Screen,
    sprite: bytes,
    cx: float,
    cy: float,
    r: float,
    s: float,
    threshold: int,
    intensity: int,
) -> None:
    """Draw the sprite's pixels brighter than threshold in red at the given intensity."""
    _check_sprite(sprite)
    w = SPRITE_WIDTH / 2.0
    h = SPRITE_HEIGHT / 2.0
    cr = math.cos(r)
    sr = math.sin(r)
    wcr = abs(s * w * cr)
    hsr = abs(s * h * sr)
    hcr = abs(s * h * cr)
    wsr = abs(s * w * sr)

    min_x = max(int(math.floor(cx - wcr - hsr)), 0)
    max_x = min(int(math.ceil(cx + wcr + hsr)), WIDTH - 1)
    min_y = max(int(math.floor(cy - hcr - wsr)), 0)
    max_y = min(int(math.ceil(cy + hcr + wsr)), HEIGHT - 1)

    colour = intensity << 16
    pixels = screen.pixels
    for sy in range(min_y, max_y + 1):
        ry = (sy - cy) / s
        for sx in range(min_x, max_x + 1):
            rx = (sx - cx) / s
            ix = _round_half_away(rx * cr + ry * sr + w)
            iy = _round_half_away(ry * cr - rx * sr + h)
            if 0 <= ix < SPRITE_WIDTH and 0 <= iy < SPRITE_HEIGHT:
                if sprite[iy * SPRITE_WIDTH + ix] > threshold:
                    pixels[sy * WIDTH + sx] = colour


def draw_name(screen: Screen, sprite: bytes, time: int) -> None:
    """Draw one name sprite as it looks `time` milliseconds after it appeared."""
    threshold = 0.75 if time > 1000 else 0.75 * time / 1000
    if time < 2000:
        intensity = 1.0
    elif time < 4000:
        intensity = 1.0 - (time - 2000) / 2000
    else:
        intensity = 0.0
    z = 1.0 + time / 1000.0
    plot_sprite(
        screen, sprite, 96.0, 96.0, time / 1000.0, 1 / z,
        int(128 * threshold), int(255 * intensity),
    )


class Credits:
    """Cycles through NAME_COUNT name sprites, one every NAME_GAP milliseconds."""

    def __init__(self, sprites: Sequence[bytes]) -> None:
        sprites = [bytes(s) for s in sprites]
        if len(sprites) != NAME_COUNT:
            raise ValueError(f"expected {NAME_COUNT} sprites, got {len(sprites)}")
        for sprite in sprites:
            _check_sprite(sprite)
        self.sprites = sprites

    @classmethod
    def from_assets(cls, directory: Union[str, PathLike]) -> "Credits":
        """Load the sprites named in SPRITE_FILES from a directory as greyscale."""
        sprites = []
        for name in SPRITE_FILES:
            with _PILImage.open(Path(directory) / name) as img:
                grey = img.convert("L")
                if grey.size != (SPRITE_WIDTH, SPRITE_HEIGHT):
                    raise ValueError(
                        f"{name} is {grey.size[0]}x{grey.size[1]}, "
                        f"expected {SPRITE_WIDTH}x{SPRITE_HEIGHT}"
                    )
                sprites.append(grey.tobytes())
        return cls(sprites)

    def frame(self, screen: Screen, time: int) -> None:
        sprite_num = (time // NAME_GAP) % NAME_COUNT
        ntime = time % NAME_GAP
        flash = 0.0 if ntime > 400 else 1 - (ntime / 400) ** 0.5
        screen.clear(int(flash * 255) << 16)
        if time > 2000:
            previous = self.sprites[(sprite_num + NAME_COUNT - 1) % NAME_COUNT]
            draw_name(screen, previous, ntime + NAME_GAP)
        draw_name(screen, self.sprites[sprite_num], ntime)