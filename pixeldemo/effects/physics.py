"""A static physics test scene: a grey-cell box holding a small sphere."""

from __future__ import annotations

import math

from pixeldemo.gfx import Screen
from pixeldemo.matrix import Mat4, Vec3
from pixeldemo.mesh import Face, Model, VertexIn, gouraud_mesh
from pixeldemo.raster3d import ZBuffer

SPHERE_LAT_STEP = 10
SPHERE_LNG_STEP = 10
SPHERE_RADIUS = 0.2
BOX_COLOUR = 0x00FFFF00
SPHERE_COLOUR = 0xFFFFFF00
LIGHT_POS = Vec3(0.1, 2, -2)
SPHERE_OFFSET = Vec3(0, 0, -1.3)

_T = 0.333333
_F = 1.333333

_UP = (0, 1, 0)
_DOWN = (0, -1, 0)
_RIGHT = (1, 0, 0)
_LEFT = (-1, 0, 0)
_TOWARDS = (0, 0, -1)

# Each entry is a quad: its normal and four corners in drawing order.
_BOX_QUADS = (
    # bottom cell
    (_UP, ((-_T, -1, 1), (-_T, -1, _F), (_T, -1, _F), (_T, -1, 1))),
    (_RIGHT, ((-_T, -1, 1), (-_T, -_T, 1), (-_T, -_T, _F), (-_T, -1, _F))),
    (_LEFT, ((_T, -1, _F), (_T, -_T, _F), (_T, -_T, 1), (_T, -1, 1))),
    # top cell
    (_RIGHT, ((-_T, _T, 1), (-_T, 1, 1), (-_T, 1, _F), (-_T, _T, _F))),
    (_LEFT, ((_T, _T, _F), (_T, 1, _F), (_T, 1, 1), (_T, _T, 1))),
    (_DOWN, ((-_T, 1, _F), (-_T, 1, 1), (_T, 1, 1), (_T, 1, _F))),
    # left cell
    (_UP, ((-1, -_T, 1), (-1, -_T, _F), (-_T, -_T, _F), (-_T, -_T, 1))),
    (_RIGHT, ((-1, -_T, 1), (-1, _T, 1), (-1, _T, _F), (-1, -_T, _F))),
    (_DOWN, ((-1, _T, _F), (-1, _T, 1), (-_T, _T, 1), (-_T, _T, _F))),
    # right cell
    (_UP, ((_T, -_T, 1), (_T, -_T, _F), (1, -_T, _F), (1, -_T, 1))),
    (_LEFT, ((1, -_T, _F), (1, _T, _F), (1, _T, 1), (1, -_T, 1))),
    (_DOWN, ((_T, _T, _F), (_T, _T, 1), (1, _T, 1), (1, _T, _F))),
    # back walls
    (_TOWARDS, ((-_T, -1, _F), (-_T, 1, _F), (_T, 1, _F), (_T, -1, _F))),
    (_TOWARDS, ((-1, -_T, _F), (-1, _T, _F), (-_T, _T, _F), (-_T, -_T, _F))),
    (_TOWARDS, ((_T, -_T, _F), (_T, _T, _F), (1, _T, _F), (1, -_T, _F))),
)


def build_box() -> Model:
    """Return the plus-shaped open box: fifteen quads split into thirty triangles."""
    vertices = []
    faces = []
    for normal, corners in _BOX_QUADS:
        base = len(vertices)
        vertices.extend(VertexIn(Vec3(*corner), Vec3(*normal)) for corner in corners)
        faces.append(Face(base, base + 1, base + 2))
        faces.append(Face(base, base + 2, base + 3))
    return Model(vertices, faces)


def build_sphere(radius: float) -> Model:
    """Return a UV sphere: two poles plus SPHERE_LAT_STEP - 1 rings of vertices."""
    if radius <= 0:
        raise ValueError("sphere radius must be positive")
    lng_step = SPHERE_LNG_STEP
    vertices = [VertexIn(Vec3(0, radius, 0), Vec3(0, 1, 0))]
    for sy in range(1, SPHERE_LAT_STEP):
        lat = math.pi * sy / SPHERE_LAT_STEP
        c_lat, s_lat = math.cos(lat), math.sin(lat)
        y = radius * c_lat
        ring_r = radius * s_lat
        for sx in range(lng_step):
            lng = math.pi * 2 * sx / lng_step
            s_lng, c_lng = math.sin(lng), math.cos(lng)
            vertices.append(VertexIn(
                Vec3(ring_r * s_lng, y, ring_r * c_lng),
                Vec3(c_lat * s_lng, s_lat, c_lat * c_lng),
            ))
    vertices.append(VertexIn(Vec3(0, -radius, 0), Vec3(0, -1, 0)))

    faces = [Face(0, sx + 1, (sx + 1) % lng_step + 1) for sx in range(lng_step)]
    for sy in range(1, SPHERE_LAT_STEP - 1):
        upper = 1 + (sy - 1) * lng_step
        lower = 1 + sy * lng_step
        for sx in range(lng_step):
            nxt = (sx + 1) % lng_step
            faces.append(Face(upper + sx, lower + sx, lower + nxt))
            faces.append(Face(upper + sx, lower + nxt, upper + nxt))
    last_ring = 1 + (SPHERE_LAT_STEP - 2) * lng_step
    south = 1 + (SPHERE_LAT_STEP - 1) * lng_step
    faces.extend(
        Face(last_ring + sx, south, last_ring + (sx + 1) % lng_step) for sx in range(lng_step)
    )
    return Model(vertices, faces)


class PhysicsScene:
    """Draws the box and a sphere in front of it; the scene does not move."""

    def __init__(self) -> None:
        self.box = build_box()
        self.sphere = build_sphere(SPHERE_RADIUS)
        self.zbuffer = ZBuffer()

    def frame(self, screen: Screen, time: int) -> None:
        screen.clear(0x00000000)
        self.zbuffer.clear()

        matrix = Mat4.identity()
        gouraud_mesh(
            screen, self.zbuffer, self.box, matrix,
            matrix.inverse_transpose_mat3(), LIGHT_POS, BOX_COLOUR,
        )

        matrix = matrix.translate(SPHERE_OFFSET)
        gouraud_mesh(
            screen, self.zbuffer, self.sphere, matrix,
            matrix.inverse_transpose_mat3(), LIGHT_POS, SPHERE_COLOUR,
        )