"""Triangle meshes and the routines that transform and draw them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from pixeldemo.gfx import HEIGHT, WIDTH, Image, Screen
from pixeldemo.matrix import Mat3, Mat4, Vec3
from pixeldemo.raster3d import VertexOut, ZBuffer, flat_tri, gouraud_tex_tri, gouraud_tri

_HALF_W = WIDTH // 2
_HALF_H = HEIGHT // 2


@dataclass(frozen=True)
class VertexIn:
    """A model-space vertex with its normal and texture coordinates in texels."""

    position: Vec3
    normal: Vec3 = Vec3()
    u: int = 0
    v: int = 0


@dataclass(frozen=True)
class Face:
    """A triangle given by three vertex indices."""

    index1: int
    index2: int
    index3: int

    def __iter__(self) -> Iterator[int]:
        return iter((self.index1, self.index2, self.index3))


@dataclass
class Model:
    """A mesh of vertices and triangular faces, optionally textured."""

    vertices: Sequence[VertexIn]
    faces: Sequence[Face] = ()
    texture: Optional[Image] = None

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.faces = list(self.faces)
        count = len(self.vertices)
        for face in self.faces:
            for index in face:
                if not 0 <= index < count:
                    raise IndexError(f"face index {index} outside {count} vertices")


def _project(pos: Vec3) -> Optional[Vec3]:
    """Divide x and y by depth; points on the eye plane cannot be projected."""
    if pos.z == 0:
        return None
    return Vec3(pos.x / pos.z, pos.y / pos.z, pos.z)


def _lit_vertices(
    model: Model, matrix: Mat4, normal_matrix: Mat3, light_pos: Vec3
) -> list[Optional[VertexOut]]:
    result: list[Optional[VertexOut]] = []
    for vertex in model.vertices:
        pos = matrix.transform(vertex.position)
        normal = normal_matrix.transform(vertex.normal.normalized())
        light_dir = (light_pos - pos).normalized()
        diffuse = max(normal.dot(light_dir), 0.0)
        projected = _project(pos)
        result.append(
            None if projected is None else VertexOut(projected, diffuse, vertex.u, vertex.v)
        )
    return result


def _flat_vertices(model: Model, matrix: Mat4) -> list[Optional[VertexOut]]:
    result: list[Optional[VertexOut]] = []
    for vertex in model.vertices:
        projected = _project(matrix.transform(vertex.position))
        result.append(None if projected is None else VertexOut(projected, 0.0, vertex.u, vertex.v))
    return result


def _triangles(
    model: Model, transformed: list[Optional[VertexOut]]
) -> Iterator[tuple[VertexOut, VertexOut, VertexOut]]:
    for face in model.faces:
        a, b, c = (transformed[i] for i in face)
        if a is not None and b is not None and c is not None:
            yield a, b, c


def gouraud_mesh(
    screen: Screen,
    zbuffer: ZBuffer,
    model: Model,
    matrix: Mat4,
    normal_matrix: Mat3,
    light_pos: Vec3,
    colour: int,
) -> None:
    """Draw a model in one colour, lit by a point light with Gouraud shading."""
    transformed = _lit_vertices(model, matrix, normal_matrix, light_pos)
    for va1, va2, va3 in _triangles(model, transformed):
        gouraud_tri(screen, zbuffer, va1, va2, va3, colour)


def gouraud_tex_mesh(
    screen: Screen,
    zbuffer: ZBuffer,
    model: Model,
    matrix: Mat4,
    normal_matrix: Mat3,
    light_pos: Vec3,
) -> None:
    """Draw a textured model lit by a point light with Gouraud shading."""
    if model.texture is None:
        raise ValueError("model has no texture")
    transformed = _lit_vertices(model, matrix, normal_matrix, light_pos)
    for va1, va2, va3 in _triangles(model, transformed):
        gouraud_tex_tri(screen, zbuffer, model.texture, va1, va2, va3)


def flat_mesh(screen: Screen, zbuffer: ZBuffer, model: Model, matrix: Mat4, colour: int) -> None:
    """Draw a model's faces filled in one unshaded colour."""
    transformed = _flat_vertices(model, matrix)
    for va1, va2, va3 in _triangles(model, transformed):
        flat_tri(screen, zbuffer, va1.position, va2.position, va3.position, colour)


def _draw_points(screen: Screen, zbuffer: ZBuffer, positions: Iterator[Vec3], colour: int) -> None:
    depths = zbuffer.depths
    for pos in positions:
        if pos.z <= 0.5:
            continue
        vx = int(_HALF_W + _HALF_W * (pos.x / pos.z))
        vy = int(_HALF_H - _HALF_H * (pos.y / pos.z))
        if 0 <= vx < WIDTH and 0 <= vy < HEIGHT and depths[vy * WIDTH + vx] > pos.z:
            screen.fill_circle(vx, vy, int(8.0 / pos.z), colour)


def point_mesh(screen: Screen, zbuffer: ZBuffer, model: Model, matrix: Mat4, colour: int) -> None:
    """Draw each vertex as a dot whose size shrinks with distance."""
    _draw_points(
        screen, zbuffer, (matrix.transform(v.position) for v in model.vertices), colour
    )


def point_mesh_starfield(
    screen: Screen, zbuffer: ZBuffer, model: Model, matrix: Mat4, colour: int, time: int
) -> None:
    """Draw vertices as dots, scrolling their z through the unit interval over time."""
    shift = time / 1000

    def positions() -> Iterator[Vec3]:
        for vertex in model.vertices:
            p = vertex.position
            yield matrix.transform(Vec3(p.x, p.y, math.fmod(p.z + shift, 1)))

    _draw_points(screen, zbuffer, positions(), colour)