# pixeldemo

A small software renderer and a set of demoscene effects that draw into a
192×192 frame of packed `0xRRGGBB00` colours. Several effects only fill a
plus-shaped area of the frame: a 64-pixel-wide column down the middle and a
64-pixel-high band across the centre.

## What is in it

- `pixeldemo.gfx` – the 2D layer. `Screen` holds the frame as a flat list
  `pixels` (row by row, 192 ints) and draws into it: `clear`, `put_pixel`,
  `hline`, `line`, `rect`, `fill_rect`, `circle`, `fill_circle`, `tri`,
  `fill_tri`, `draw_image` and `rotate_image`. Everything is clipped to the
  frame. `Image` is an RGBA image; `Image.load(path)` reads any file Pillow
  can open, and `rgba(x, y)` returns one pixel. Pixels with zero alpha are
  skipped when drawing.
- `pixeldemo.matrix` – immutable `Vec3`, `Mat3` and `Mat4`. `Mat4` offers
  `identity()`, `ortho(...)`, multiplication with `a @ b`, `transform(vec)`
  (with the divide by w), and `rotate_x`, `rotate_y`, `translate` and
  `scale`, each returning a new matrix. `inverse_transpose_mat3()` gives the
  matrix for transforming normals and raises `ValueError` for a singular
  matrix.
- `pixeldemo.raster3d` – z-buffered triangle filling on projected vertices:
  `flat_tri`, `gouraud_tri` and `gouraud_tex_tri`, with `VertexOut` and a
  `ZBuffer` (smaller depth is nearer; `clear()` resets it). Triangles facing
  away are not drawn.
- `pixeldemo.mesh` – `Model`s built from `VertexIn`s and `Face`s (face
  indices are checked), drawn with `gouraud_mesh`, `gouraud_tex_mesh`,
  `flat_mesh`, `point_mesh` and `point_mesh_starfield`. Lighting is one
  point light with diffuse shading; projection divides x and y by z.
- `pixeldemo.effects` – the effects:
  - `patterns`: `boards_frame`, `planes_frame`, `plasma_frame` (and
    `plasma_pixel`).
  - `credits`: `Credits`, spinning name sprites, plus `plot_sprite` and
    `draw_name`.
  - `amigaball`: `AmigaBall`, the bouncing ball with a shadow, plus
    `ball_path` and `draw_shadow`.
  - `physics`: `PhysicsScene`, a still box and sphere (`build_box`,
    `build_sphere`).
  - `twister`: `Twister`, twelve twisting slices (`build_square`,
    `build_cross`).
  - `stniccc`: `Stniccc`, playback of a polygon stream (`parse_stream`,
    `render_frame`, `StnicccFrame`).
  - `scroller`: `Scroller`, a sine-wave text scroller over rotating cross
    outlines (`crossx`, `crossy`, `plot_cross`, `render_text`).
  - `patarty`: `Patarty`, a sprite over a scrolling lava lamp.
  - `rotozoom`: `Rotozoom`, a rotating, zooming tiled image.
  - `sprites`: `Farjan`, `Jarig`, `Tomato`, `NyanCat` and `Prescription`.

Every effect draws the frame for a given time in milliseconds. Most clear
the screen first; `Stniccc` clears only when the stream says so, and
`NyanCat`, `Patarty`, `Rotozoom` and the plus-shaped patterns draw over what
is already there outside their area.

## Drawing by hand

```python
from pixeldemo.gfx import Screen

screen = Screen()
screen.clear(0x00000000)
screen.fill_circle(96, 96, 40, 0xff000000)
screen.line(0, 0, 191, 191, 0xffffff00)
screen.fill_tri(10, 180, 96, 120, 182, 180, 0x00ff0000)
```

## Running an effect

Effects that need no assets are plain functions or classes built with no
arguments:

```python
from pixeldemo.gfx import Screen
from pixeldemo.effects.patterns import plasma_frame
from pixeldemo.effects.twister import Twister

screen = Screen()
plasma_frame(screen, 1500)

twister = Twister()
for time in range(0, 4000, 40):
    twister.frame(screen, time)
```

Effects built from images can be given `Image` objects (or, for `Credits`
and `Scroller`, greyscale bytes) directly, or built with
`from_assets(directory)`, which loads the files they expect from that
directory:

| Effect         | Files                                                                  |
|----------------|------------------------------------------------------------------------|
| `Credits`      | `credit_0.png` … `credit_7.png`, each 192×64, read as greyscale        |
| `AmigaBall`    | `amiga1.png` … `amiga5.png`                                            |
| `Scroller`     | `chicago.png`, read as greyscale                                       |
| `Patarty`      | `patarty.png`, `lavalamp.png` (at least 448×512)                       |
| `Rotozoom`     | `patarty.png`                                                          |
| `Farjan`       | `farjan.png`, `waves.png`                                              |
| `Jarig`        | `jarig1.png`, `jarig2.png`, `hetedansactie1.png`, `hetedansactie2.png` |
| `Tomato`       | `tomato.png`                                                           |
| `NyanCat`      | `nyancat.png`                                                          |
| `Prescription` | `HuldenbergSprite.png`, `Sprite-0001.png`, `prescriptiontext1.png`, `prescriptiontext2.png` |

`Stniccc.from_file(path)` reads a binary polygon stream instead; its
`frame` raises `IndexError` for a time past the last frame.

```python
from pathlib import Path

from pixeldemo.gfx import Image, Screen
from pixeldemo.effects.sprites import Tomato
from pixeldemo.effects.stniccc import Stniccc

screen = Screen()
assets = Path("assets")

tomato = Tomato(Image.load(assets / "tomato.png"))
tomato.frame(screen, 200)

polygons = Stniccc.from_file(assets / "stniccc.bin")
polygons.frame(screen, 1000)
```

## Saving a frame

The package does not write images itself; Pillow can turn `Screen.pixels`
into one:

```python
from PIL import Image as PILImage

data = b"".join((p >> 8).to_bytes(3, "big") for p in screen.pixels)
PILImage.frombytes("RGB", (192, 192), data).save("frame.png")
```

## What it does not do

There is no command, window or display output: effects only fill a
`Screen`, and showing or timing frames is left to the caller. There is no
sequencer that strings the effects into one show, no music or video
playback, and no loader for 3D model files — `Model`s are built in code
from `VertexIn` and `Face` values, as `build_box`, `build_sphere`,
`build_square` and `build_cross` do.

## Tests

The tests use pytest, installed with the `test` extra:

```
pip install -e ".[test]"
pytest
```