import pytest

from pixeldemo.effects.stniccc import (
    BLOCK_SIZE,
    FIRST_FRAME,
    Stniccc,
    StnicccFrame,
    parse_stream,
    render_frame,
)
from pixeldemo.gfx import WIDTH, Screen

BACKDROP = 0x11111100

# Frame 1: clear + palette (entry 0 only), one non-indexed triangle, end of frame.
FRAME1 = bytes([
    0x03, 0x80, 0x00, 0x07, 0x77,
    0x03, 32, 4, 42, 4, 32, 14,
    0xFF,
])
# Frame 2: indexed, three vertices, one triangle, end of stream.
FRAME2 = bytes([
    0x04, 3, 32, 4, 42, 4, 32, 14,
    0x03, 0, 1, 2,
    0xFD,
])


def _prefilled():
    screen = Screen()
    screen.clear(BACKDROP)
    return screen


def test_parse_two_frames():
    frames = parse_stream(FRAME1 + FRAME2)
    assert len(frames) == 2
    assert frames[0].clear_screen and not frames[0].is_indexed
    assert frames[1].is_indexed and not frames[1].clear_screen


def test_palette_colour_decoding():
    frames = parse_stream(FRAME1 + FRAME2)
    assert frames[0].palette[0] == 0xE0E0E000
    assert frames[0].palette[1:] == (0,) * 15


def test_palette_persists_across_frames():
    frames = parse_stream(FRAME1 + FRAME2)
    assert frames[1].palette == frames[0].palette


def test_indexed_and_plain_polygons_decode_alike():
    frames = parse_stream(FRAME1 + FRAME2)
    assert frames[0].polygons == frames[1].polygons
    assert frames[0].polygons[0] == (0, ((0, 0), (10, 0), (0, 10)))


def test_end_of_block_skips_to_next_block():
    first = bytes([0x00, 0xFE])
    padding = bytes(BLOCK_SIZE - len(first))
    second = bytes([0x01, 0xFD])
    frames = parse_stream(first + padding + second)
    assert len(frames) == 2
    assert frames[1].clear_screen


def test_truncated_stream_raises():
    with pytest.raises(ValueError):
        parse_stream(FRAME1)


def test_bad_vertex_index_raises():
    with pytest.raises(ValueError):
        parse_stream(bytes([0x04, 1, 32, 4, 0x03, 0, 5, 0, 0xFD]))


def test_render_clears_and_fills():
    frame = parse_stream(FRAME1 + FRAME2)[0]
    screen = _prefilled()
    render_frame(screen, frame)
    assert screen.pixels[0] == frame.palette[0]
    assert screen.pixels[2 * WIDTH + 2] == frame.palette[0]
    assert screen.pixels[150 * WIDTH + 150] == 0


def test_render_without_clear_keeps_backdrop():
    frame = parse_stream(FRAME1 + FRAME2)[1]
    screen = _prefilled()
    render_frame(screen, frame)
    assert screen.pixels[150 * WIDTH + 150] == BACKDROP
    assert screen.pixels[0] == frame.palette[0]


def test_player_starts_at_first_frame():
    palette = (0xFF000000,) + (0,) * 15
    empty = StnicccFrame(False, False, palette)
    drawn = StnicccFrame(False, False, palette, ((0, ((0, 0), (10, 0), (0, 10))),))
    frames = [empty] * FIRST_FRAME + [drawn]
    screen = _prefilled()
    Stniccc(frames).frame(screen, 0)
    assert screen.pixels[0] == 0xFF000000


def test_player_past_end_raises():
    palette = (0,) * 16
    player = Stniccc([StnicccFrame(False, False, palette)])
    with pytest.raises(IndexError):
        player.frame(Screen(), 0)


def test_frame_requires_full_palette():
    with pytest.raises(ValueError):
        StnicccFrame(False, False, (0,) * 3)


def test_from_file(tmp_path):
    path = tmp_path / "stream.bin"
    path.write_bytes(FRAME1 + FRAME2)
    player = Stniccc.from_file(path)
    assert len(player.frames) == 2