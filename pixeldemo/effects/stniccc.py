"""Playback of the classic polygon stream: flat-shaded polygons per frame."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Sequence, Union

from pixeldemo.gfx import Screen

PALETTE_SIZE = 16
FRAME_MS = 50
FIRST_FRAME = 45
BLOCK_SIZE = 0x10000

END_OF_FRAME = 0xFF
END_OF_BLOCK = 0xFE
END_OF_STREAM = 0xFD

_X_OFFSET = 32
_Y_OFFSET = 4

Point = tuple[int, int]
Polygon = tuple[int, tuple[Point, ...]]


@dataclass(frozen=True)
class StnicccFrame:
    """One decoded frame: its palette and polygons as (colour index, points)."""

    clear_screen: bool
    is_indexed: bool
    palette: tuple[int, ...]
    polygons: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        if len(self.palette) != PALETTE_SIZE:
            raise ValueError(f"palette needs {PALETTE_SIZE} colours, got {len(self.palette)}")


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def byte(self) -> int:
        if self.pos >= len(self.data):
            raise ValueError(f"stream ends unexpectedly at offset {self.pos}")
        value = self.data[self.pos]
        self.pos += 1
        return value

    def point(self) -> Point:
        x = self.byte()
        y = self.byte()
        return x - _X_OFFSET, y - _Y_OFFSET


def _palette_colour(r: int, gb: int) -> int:
    return ((r & 0x07) << 29) | ((gb & 0x70) << 17) | ((gb & 0x07) << 13)


def parse_stream(data: bytes) -> list[StnicccFrame]:
    """Decode every frame of a polygon stream, ending at the end-of-stream marker."""
    reader = _Reader(bytes(data))
    palette = [0] * PALETTE_SIZE
    frames: list[StnicccFrame] = []

    while True:
        flags = reader.byte()
        clear_screen = bool(flags & 0x01)
        has_palette = bool(flags & 0x02)
        is_indexed = bool(flags & 0x04)

        if has_palette:
            bits = reader.byte() << 8
            bits |= reader.byte()
            for index in range(PALETTE_SIZE):
                if bits & (0x8000 >> index):
                    r = reader.byte()
                    gb = reader.byte()
                    palette[index] = _palette_colour(r, gb)

        vertices: list[Point] = []
        if is_indexed:
            count = reader.byte()
            vertices = [reader.point() for _ in range(count)]

        polygons: list[Polygon] = []
        while True:
            descriptor = reader.byte()
            if descriptor >= END_OF_STREAM:
                break
            count = descriptor & 0x0F
            if is_indexed:
                points = []
                for _ in range(count):
                    index = reader.byte()
                    if index >= len(vertices):
                        raise ValueError(
                            f"vertex index {index} outside {len(vertices)} vertices"
                        )
                    points.append(vertices[index])
            else:
                points = [reader.point() for _ in range(count)]
            polygons.append((descriptor >> 4, tuple(points)))

        frames.append(StnicccFrame(clear_screen, is_indexed, tuple(palette), tuple(polygons)))

        if descriptor == END_OF_STREAM:
            return frames
        if descriptor == END_OF_BLOCK:
            reader.pos = (reader.pos & ~(BLOCK_SIZE - 1)) + BLOCK_SIZE


def render_frame(screen: Screen, frame: StnicccFrame) -> None:
    """Draw a frame's polygons as triangle fans over the current screen."""
    if frame.clear_screen:
        screen.clear(0x00000000)
    for colour_index, points in frame.polygons:
        colour = frame.palette[colour_index]
        if len(points) < 3:
            continue
        first = points[0]
        for a, b in zip(points[1:], points[2:]):
            screen.fill_tri(first[0], first[1], a[0], a[1], b[0], b[1], colour)


class Stniccc:
    """Shows one frame every FRAME_MS milliseconds, starting at FIRST_FRAME."""

    def __init__(self, frames: Sequence[StnicccFrame]) -> None:
        self.frames = list(frames)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> "Stniccc":
        return cls(parse_stream(Path(path).read_bytes()))

    def frame(self, screen: Screen, time: int) -> None:
        index = time // FRAME_MS + FIRST_FRAME
        if not 0 <= index < len(self.frames):
            raise IndexError(f"frame {index} outside {len(self.frames)} frames")
        render_frame(screen, self.frames[index])