"""The bouncing chequered ball over a purple grid, with a drop shadow."""

from __future__ import annotations

from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

from pixeldemo.gfx import HEIGHT, WIDTH, Image, Screen

BACKGROUND_GREY = 0x88888800
SHADOW_GREY = 0x66666600
GRID_COLOUR = 0xA1279F00
PATH_LENGTH = 10000
FRAME_COUNT = 5
FRAME_FILES = tuple(f"amiga{i}.png" for i in range(1, FRAME_COUNT + 1))


@lru_cache(maxsize=None)
def ball_path() -> tuple[tuple[float, float], ...]:
    """Return the ball's (x, y) position for each millisecond of the loop."""
    y, x = 92.0, 28.0
    yv, xv = 0.0, 0.0333
    path = []
    for t in range(PATH_LENGTH):
        y += yv
        x += xv
        yv += 0.0002
        path.append((x, y))
        if y > 100 and (t < 1500 or t > 3700):
            yv = -yv
        elif y > 164:
            yv = -yv
        if t in (2250, 2700):
            xv = -xv
    return tuple(path)


def draw_shadow(screen: Screen, image: Image, x: int, y: int) -> None:
    """Darken background pixels under the image wherever its red channel is set."""
    data = image.data
    pixels = screen.pixels
    x_from = max(0, -x)
    x_to = min(image.width, WIDTH - x)
    for iy in range(image.height):
        sy = y + iy
        if sy >= HEIGHT:
            return
        if sy < 0:
            continue
        row = sy * WIDTH + x
        for ix in range(x_from, x_to):
            if data[(iy * image.width + ix) * 4] != 0 and pixels[row + ix] == BACKGROUND_GREY:
                pixels[row + ix] = SHADOW_GREY


class AmigaBall:
    """Animates the ball along ball_path(), cycling its rotation frames."""

    def __init__(self, frames: Sequence[Image]) -> None:
        frames = list(frames)
        if len(frames) != FRAME_COUNT:
            raise ValueError(f"expected {FRAME_COUNT} frames, got {len(frames)}")
        self.frames = frames
        self.path = ball_path()

    @classmethod
    def from_assets(cls, directory: Union[str, PathLike]) -> "AmigaBall":
        return cls([Image.load(Path(directory) / name) for name in FRAME_FILES])

    def frame(self, screen: Screen, time: int) -> None:
        screen.clear(BACKGROUND_GREY)
        for x in range(0, WIDTH, 16):
            screen.line(x, 0, x, HEIGHT - 1, GRID_COLOUR)
        for y in range(0, HEIGHT, 16):
            screen.line(0, y, WIDTH - 1, y, GRID_COLOUR)

        px, py = self.path[time % PATH_LENGTH]
        ball_x, ball_y = int(px), int(py)
        image = self.frames[(time // 50) % FRAME_COUNT]
        draw_shadow(screen, image, ball_x - 16, ball_y - 28)
        screen.draw_image(image, ball_x - 32, ball_y - 32)