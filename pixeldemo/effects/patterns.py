"""Procedural full-screen patterns: boards, planes and plasma."""

from __future__ import annotations

import math
import struct
from typing import Iterator

from pixeldemo.gfx import HEIGHT, WIDTH, Screen

_CENTRE = WIDTH // 2


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _plus_region() -> Iterator[tuple[int, int]]:
    """Yield the (x, y) cells of the plus-shaped panel layout, row by row."""
    third = WIDTH // 3
    for y in range(HEIGHT):
        if third <= y < 2 * third:
            xs = range(WIDTH)
        else:
            xs = range(third, 2 * third)
        for x in xs:
            yield x, y


def boards_frame(screen: Screen, time: int) -> None:
    """Draw the diagonal checkerboard interference pattern."""
    t = time // 20
    zoom = _f32(math.sin(t // 24) * 2 + 3)
    tt = _f32(t)
    # Each term depends only on an integer distance, so tabulate it once.
    terms = [int(_f32(_f32(d * zoom) - tt)) for d in range(2 * _CENTRE + 1)]
    pixels = screen.pixels
    for y in range(HEIGHT):
        sy = abs(y - _CENTRE)
        row = y * WIDTH
        for x in range(WIDTH):
            sx = abs(x - _CENTRE)
            q = terms[sx + sy] & terms[abs(sx - sy)]
            pixels[row + x] = (q & 192) << 16


def _plane_term(a: int, b: int, t: float) -> int:
    z = _f32(b + 0.1)
    if z < 6:
        return 0
    return int(_f32(a * 8 / z)) & int(_f32(_f32(699 / z) + t))


def planes_frame(screen: Screen, time: int) -> None:
    """Draw the receding XOR-style floor and ceiling planes."""
    t = _f32(time // 20)
    terms = [[_plane_term(a, b, t) for b in range(_CENTRE + 1)] for a in range(_CENTRE + 1)]
    pixels = screen.pixels
    for y in range(HEIGHT):
        cy = abs(y - _CENTRE)
        row = y * WIDTH
        for x in range(WIDTH):
            cx = abs(x - _CENTRE)
            q = terms[cx][cy]
            q2 = terms[cy][cx]
            pixels[row + x] = (((q * q2) & 63) * 4) << 16


def plasma_pixel(x: int, y: int, dt: float) -> int:
    """Return the red-channel plasma colour at a position and phase."""
    v = math.sin(x / 50 + dt) + math.sin(y / 22 + dt) + math.sin(x / 16)
    return (int(128 + v * 64) & 255) << 24


def plasma_frame(screen: Screen, time: int) -> None:
    """Draw the plasma over the plus-shaped panel area."""
    dt = time / 499
    pixels = screen.pixels
    for x, y in _plus_region():
        pixels[y * WIDTH + x] = plasma_pixel(x, y, dt)