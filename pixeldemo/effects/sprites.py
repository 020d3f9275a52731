"""Simple image-based scenes: ferry, birthday, tomato, cat and prescription."""

from __future__ import annotations

import math
from os import PathLike
from pathlib import Path
from typing import Union

from pixeldemo.gfx import HEIGHT, WIDTH, Image, Screen

_PathArg = Union[str, PathLike]


class Farjan:
    """A ferry rocking on scrolling waves under a yellow sun."""

    SKY = 0x8585B200
    SUN = 0xFFFF0000

    def __init__(self, ferry: Image, waves: Image) -> None:
        self.ferry = ferry
        self.waves = waves

    @classmethod
    def from_assets(cls, directory: _PathArg) -> "Farjan":
        directory = Path(directory)
        return cls(Image.load(directory / "farjan.png"), Image.load(directory / "waves.png"))

    def frame(self, screen: Screen, time: int) -> None:
        t = float(time)
        screen.clear(self.SKY)
        screen.rotate_image(
            self.ferry, 96, 96 + 8 * math.cos((t - 200) / 400), -t / 20000, 0.3
        )
        screen.draw_image(
            self.waves, int(-32 + 8 * math.sin(t / 230)), int(100 + 8 * math.cos(t / 400))
        )
        screen.fill_circle(128, 0, 24, self.SUN)


class Jarig:
    """Two pairs of images flipping at different rates."""

    def __init__(self, jarig1: Image, jarig2: Image, dance1: Image, dance2: Image) -> None:
        self.jarig = (jarig1, jarig2)
        self.dance = (dance1, dance2)

    @classmethod
    def from_assets(cls, directory: _PathArg) -> "Jarig":
        directory = Path(directory)
        names = ("jarig1.png", "jarig2.png", "hetedansactie1.png", "hetedansactie2.png")
        return cls(*(Image.load(directory / name) for name in names))

    def frame(self, screen: Screen, time: int) -> None:
        screen.clear(0x00000000)
        jarig = self.jarig[0] if time % 800 < 400 else self.jarig[1]
        screen.draw_image(jarig, 96 - jarig.width // 2, 64)
        dance = self.dance[0] if time % 400 < 200 else self.dance[1]
        screen.draw_image(dance, WIDTH - dance.width, 64)


class Tomato:
    """A bouncing tomato."""

    def __init__(self, image: Image) -> None:
        self.image = image

    @classmethod
    def from_assets(cls, directory: _PathArg) -> "Tomato":
        return cls(Image.load(Path(directory) / "tomato.png"))

    def frame(self, screen: Screen, time: int) -> None:
        screen.clear(0x00000000)
        y = 80 - abs(32 * math.sin(time * math.pi / 400))
        screen.draw_image(self.image, 64, int(y))


class NyanCat:
    """An animation stored as twelve screen-high frames stacked vertically."""

    FRAME_COUNT = 12
    FRAME_MS = 70

    def __init__(self, image: Image) -> None:
        self.image = image

    @classmethod
    def from_assets(cls, directory: _PathArg) -> "NyanCat":
        return cls(Image.load(Path(directory) / "nyancat.png"))

    def frame(self, screen: Screen, time: int) -> None:
        index = (time // self.FRAME_MS) % self.FRAME_COUNT
        screen.draw_image(self.image, 0, -HEIGHT * index)


class Prescription:
    """A character picture with a small scrolling text window."""

    SCREEN_1_TIME = 6000
    TEXT_COLOUR = 0xF4F4F400
    WINDOW_X = 74
    WINDOW_WIDTH = 42
    WINDOW_HEIGHT = 16

    def __init__(self, doctor: Image, confused: Image, text1: Image, text2: Image) -> None:
        for text in (text1, text2):
            if text.height < self.WINDOW_HEIGHT:
                raise ValueError(
                    f"text image must be at least {self.WINDOW_HEIGHT} rows high, got {text.height}"
                )
        self.doctor = doctor
        self.confused = confused
        self.text1 = text1
        self.text2 = text2

    @classmethod
    def from_assets(cls, directory: _PathArg) -> "Prescription":
        directory = Path(directory)
        names = (
            "HuldenbergSprite.png",
            "Sprite-0001.png",
            "prescriptiontext1.png",
            "prescriptiontext2.png",
        )
        return cls(*(Image.load(directory / name) for name in names))

    def frame(self, screen: Screen, time: int) -> None:
        if time < self.SCREEN_1_TIME:
            picture, text = self.doctor, self.text1
            scroll = time // 18
            window_y = 21
        else:
            picture, text = self.confused, self.text2
            scroll = (time - self.SCREEN_1_TIME) // 18
            window_y = 29

        screen.draw_image(picture, 0, 0)

        pixels = screen.pixels
        data = text.data
        for y in range(self.WINDOW_HEIGHT):
            row = (window_y + y) * WIDTH + self.WINDOW_X
            for x in range(self.WINDOW_WIDTH):
                column = scroll + x
                lit = column < text.width and data[(y * text.width + column) * 4] != 0
                pixels[row + x] = self.TEXT_COLOUR if lit else 0x00000000