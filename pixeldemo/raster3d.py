"""Z-buffered triangle rasterisation: flat, Gouraud and textured Gouraud."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from pixeldemo.gfx import HEIGHT, WIDTH, Image, Screen, _trunc_div
from pixeldemo.matrix import Vec3

FAR_DEPTH = 100000.0

_HALF_W = WIDTH // 2
_HALF_H = HEIGHT // 2

# (screen y, interpolant state); state[0] is screen x in 16.16 fixed point.
_Point = tuple[int, tuple]
_Span = Callable[[int, int, tuple, tuple], None]


@dataclass
class VertexOut:
    """A projected vertex ready for rasterisation."""

    position: Vec3
    brightness: float = 0.0
    u: int = 0
    v: int = 0


class ZBuffer:
    """Per-pixel depth values; smaller is nearer."""

    def __init__(self) -> None:
        self.depths: list[float] = [FAR_DEPTH] * (WIDTH * HEIGHT)

    def clear(self) -> None:
        self.depths[:] = [FAR_DEPTH] * (WIDTH * HEIGHT)


def _is_back_facing(v1: Vec3, v2: Vec3, v3: Vec3) -> bool:
    return (v2.x - v1.x) * (v3.y - v1.y) - (v2.y - v1.y) * (v3.x - v1.x) > 0


def _point(position: Vec3, extra: tuple) -> _Point:
    sx = int(_HALF_W + _HALF_W * position.x)
    sy = int(_HALF_H - _HALF_H * position.y)
    return sy, (sx << 16, *extra)


def _steps(a: tuple, b: tuple, dy: int, int_mask: Sequence[bool]) -> tuple:
    steps = []
    for av, bv, is_int in zip(a, b, int_mask):
        d = bv - av
        if dy > 0:
            d = _trunc_div(d, dy) if is_int else d / dy
        steps.append(d)
    return tuple(steps)


def _add(state: tuple, step: tuple) -> tuple:
    return tuple(s + d for s, d in zip(state, step))


def _rasterise(p1: _Point, p2: _Point, p3: _Point, int_mask: Sequence[bool], span: _Span) -> None:
    """Walk the triangle's scanlines, calling span for each visible run."""
    if p1[0] > p2[0]:
        p1, p2 = p2, p1
    if p1[0] > p3[0]:
        p1, p3 = p3, p1
    if p2[0] > p3[0]:
        p2, p3 = p3, p2
    if p1[0] == p2[0] and p1[1][0] > p2[1][0]:
        p1, p2 = p2, p1
    (y1, s1), (y2, s2), (y3, s3) = p1, p2, p3

    step1 = _steps(s1, s3, y3 - y1, int_mask)
    step2 = _steps(s1, s2, y2 - y1, int_mask)
    step3 = _steps(s2, s3, y3 - y2, int_mask)

    long_on_left = step1[0] < step2[0]
    long_edge = short_edge = s1
    for ry in range(y1, y3 + 1):
        left, right = (long_edge, short_edge) if long_on_left else (short_edge, long_edge)
        startx, endx = left[0] >> 16, right[0] >> 16
        if 0 <= ry < HEIGHT and startx < WIDTH and endx >= 0:
            startx = max(startx, 0)
            endx = min(endx, WIDTH - 1)
            if endx - startx + 1 > 0:
                span(ry * WIDTH + startx, endx - startx + 1, left, right)
        long_edge = _add(long_edge, step1)
        if ry < y2:
            short_edge = _add(short_edge, step2)
        elif ry == y2:
            short_edge = s2
        else:
            short_edge = _add(short_edge, step3)


def flat_tri(screen: Screen, zbuffer: ZBuffer, v1: Vec3, v2: Vec3, v3: Vec3, colour: int) -> None:
    """Fill a front-facing triangle in one colour; each row uses one depth."""
    if _is_back_facing(v1, v2, v3):
        return
    pixels, depths = screen.pixels, zbuffer.depths

    def span(offset: int, length: int, left: tuple, right: tuple) -> None:
        z = left[1]
        for i in range(offset, offset + length):
            if z < depths[i]:
                pixels[i] = colour
                depths[i] = z

    _rasterise(
        _point(v1, (v1.z,)), _point(v2, (v2.z,)), _point(v3, (v3.z,)),
        (True, False), span,
    )


def gouraud_tri(
    screen: Screen,
    zbuffer: ZBuffer,
    va1: VertexOut,
    va2: VertexOut,
    va3: VertexOut,
    colour: int,
) -> None:
    """Fill a front-facing triangle with brightness interpolated per pixel."""
    if _is_back_facing(va1.position, va2.position, va3.position):
        return
    pixels, depths = screen.pixels, zbuffer.depths
    red = (colour & 0xFF000000) >> 8
    green = (colour & 0xFF0000) >> 8
    blue = (colour & 0xFF00) >> 8

    def span(offset: int, length: int, left: tuple, right: tuple) -> None:
        z, bright = left[1], left[2]
        zstep = (right[1] - z) / length
        bstep = (right[2] - bright) / length
        for i in range(offset, offset + length):
            if z < depths[i]:
                br = min(int(bright * 255), 255)
                pixels[i] = (red * br & 0xFF000000) | (green * br & 0xFF0000) | (blue * br & 0xFF00)
                depths[i] = z
            z += zstep
            bright += bstep

    _rasterise(
        *(_point(va.position, (va.position.z, va.brightness)) for va in (va1, va2, va3)),
        (True, False, False), span,
    )


def gouraud_tex_tri(
    screen: Screen,
    zbuffer: ZBuffer,
    texture: Image,
    va1: VertexOut,
    va2: VertexOut,
    va3: VertexOut,
) -> None:
    """Fill a front-facing triangle with a lit, affinely mapped texture."""
    if texture.width * texture.height == 0:
        raise ValueError("texture has no pixels")
    if _is_back_facing(va1.position, va2.position, va3.position):
        return
    pixels, depths = screen.pixels, zbuffer.depths
    data, tex_width = texture.data, texture.width
    last_texel = texture.width * texture.height - 1

    def span(offset: int, length: int, left: tuple, right: tuple) -> None:
        z, bright, u, v = left[1], left[2], left[3], left[4]
        zstep = (right[1] - z) / length
        bstep = (right[2] - bright) / length
        ustep = _trunc_div(right[3] - u, length)
        vstep = _trunc_div(right[4] - v, length)
        for i in range(offset, offset + length):
            if z < depths[i]:
                index = min(max((v >> 16) * tex_width + (u >> 16), 0), last_texel) * 4
                br = min(int(bright * 255), 255)
                pixels[i] = (
                    ((data[index] * br & 0xFF00) << 16)
                    | ((data[index + 1] * br & 0xFF00) << 8)
                    | (data[index + 2] * br & 0xFF00)
                )
                depths[i] = z
            z += zstep
            u += ustep
            v += vstep
            bright += bstep

    _rasterise(
        *(
            _point(va.position, (va.position.z, va.brightness, int(va.u) << 16, int(va.v) << 16))
            for va in (va1, va2, va3)
        ),
        (True, False, False, True, True), span,
    )