"""A stack of pastel slices that drop in and twist around the vertical axis."""

from __future__ import annotations

import math
from typing import Sequence

from pixeldemo.gfx import Screen
from pixeldemo.matrix import Mat4, Vec3
from pixeldemo.mesh import Face, Model, VertexIn, gouraud_mesh
from pixeldemo.raster3d import ZBuffer

SLICE_HEIGHT = 0.1
SLICE_COUNT = 12
LIGHT_POS = Vec3(0.1, 8, -2)

SLICE_COLOURS = (
    0xABDEE600, 0xCBAACB00, 0xFFFFB500, 0xFFCCB600,
    0xF3B0C300, 0xC6DBDA00, 0xFEE1E800, 0xFED7C300,
    0xF6EAC200, 0xECD5E300, 0xFF968A00, 0x97C1A900,
)

_UP = (0, 1, 0)
_DOWN = (0, -1, 0)
_FRONT = (0, 0, -1)
_BACK = (0, 0, 1)
_LEFT = (-1, 0, 0)
_RIGHT = (1, 0, 0)

_XZ = tuple[int, int]


def _flat_quad(normal: tuple, y: float, corners: Sequence[_XZ]) -> tuple:
    return normal, tuple((x, y, z) for x, z in corners)


def _side_quad(normal: tuple, a: _XZ, b: _XZ) -> tuple:
    h = SLICE_HEIGHT
    return normal, ((a[0], h, a[1]), (b[0], h, b[1]), (b[0], -h, b[1]), (a[0], -h, a[1]))


def _quads_to_model(quads: Sequence[tuple]) -> Model:
    vertices = []
    faces = []
    for normal, corners in quads:
        base = len(vertices)
        vertices.extend(VertexIn(Vec3(*corner), Vec3(*normal)) for corner in corners)
        faces.append(Face(base, base + 1, base + 2))
        faces.append(Face(base, base + 2, base + 3))
    return Model(vertices, faces)


def build_square() -> Model:
    """Return a thin 2x2 slab: six quads, twelve triangles."""
    h = SLICE_HEIGHT
    return _quads_to_model((
        _flat_quad(_UP, h, ((-1, -1), (-1, 1), (1, 1), (1, -1))),
        _flat_quad(_DOWN, -h, ((1, -1), (1, 1), (-1, 1), (-1, -1))),
        _side_quad(_FRONT, (-1, -1), (1, -1)),
        _side_quad(_LEFT, (-1, 1), (-1, -1)),
        _side_quad(_BACK, (1, 1), (-1, 1)),
        _side_quad(_RIGHT, (1, -1), (1, 1)),
    ))


def build_cross() -> Model:
    """Return a thin plus-shaped slab made of five 2x2 squares."""
    h = SLICE_HEIGHT
    squares = (
        ((-1, 1), (-1, 3), (1, 3), (1, 1)),        # back
        ((-3, -1), (-3, 1), (-1, 1), (-1, -1)),    # left
        ((-1, -1), (-1, 1), (1, 1), (1, -1)),      # centre
        ((1, -1), (1, 1), (3, 1), (3, -1)),        # right
        ((-1, -3), (-1, -1), (1, -1), (1, -3)),    # front
    )
    undersides = (
        ((1, 1), (1, 3), (-1, 3), (-1, 1)),
        ((-1, -1), (-1, 1), (-3, 1), (-3, -1)),
        ((1, -1), (1, 1), (-1, 1), (-1, -1)),
        ((3, -1), (3, 1), (1, 1), (1, -1)),
        ((1, -3), (1, -1), (-1, -1), (-1, -3)),
    )
    sides = (
        (_FRONT, (-1, -3), (1, -3)),
        (_RIGHT, (1, -3), (1, -1)),
        (_FRONT, (1, -1), (3, -1)),
        (_RIGHT, (3, -1), (3, 1)),
        (_BACK, (3, 1), (1, 1)),
        (_RIGHT, (1, 1), (1, 3)),
        (_BACK, (1, 3), (-1, 3)),
        (_LEFT, (-1, 3), (-1, 1)),
        (_BACK, (-1, 1), (-3, 1)),
        (_LEFT, (-3, 1), (-3, -1)),
        (_FRONT, (-3, -1), (-1, -1)),
        (_LEFT, (-1, -1), (-1, -3)),
    )
    quads = [_flat_quad(_UP, h, corners) for corners in squares]
    quads += [_flat_quad(_DOWN, -h, corners) for corners in undersides]
    quads += [_side_quad(normal, a, b) for normal, a, b in sides]
    return _quads_to_model(quads)


class Twister:
    """Twelve slices drop into a column, then twist; the middle four are crosses."""

    def __init__(self) -> None:
        self.square = build_square()
        self.cross = build_cross()
        self.zbuffer = ZBuffer()

    def frame(self, screen: Screen, time: int) -> None:
        t = time + 300.0
        screen.clear(0x00000000)
        self.zbuffer.clear()

        for slice_index, colour in enumerate(SLICE_COLOURS):
            latent_rotation = 5 * math.sin(t / 20000 + slice_index / 50)
            main_rotation = (
                (1 - math.cos((t / 5000) ** 2)) * 4 * math.sin(t / 1000 - slice_index / 15)
            )
            matrix = Mat4.identity().rotate_y(latent_rotation + main_rotation)
            normal_matrix = matrix.inverse_transpose_mat3()

            y_home = (slice_index - 5.8) * 0.6
            tsy = t - slice_index * 50
            y = y_home + (0.1 + 22 * 2 ** (-0.004 * tsy)) * (1 + math.sin(tsy / 200))
            matrix = matrix.translate(Vec3(0, y, 5.5))

            model = self.cross if 4 <= slice_index < 8 else self.square
            gouraud_mesh(screen, self.zbuffer, model, matrix, normal_matrix, LIGHT_POS, colour)