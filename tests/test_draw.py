"""
Tests for the Rasterizer drawing primitives.

Run from project root: pytest tests/test_draw.py -v
"""

import pytest

from netpbm.buffer import PixelBuffer, Rasterizer, Kind, Pixel, Point
from netpbm.errors import UnsupportedFormatError

from conftest import count_set

RED = Pixel(255, 0, 0)


def lit(buf: PixelBuffer) -> set:
    """Coordinates of every non-black pixel."""
    return {
        (x, y)
        for y in range(buf.height)
        for x in range(buf.width)
        if buf.at(x, y) != (0, 0, 0)
    }


# =============================================================================
# Setup Tests
# =============================================================================


@pytest.mark.parametrize("fixture", ["bitmap_buffer", "gray_buffer"])
def test_requires_color(request, fixture):
    with pytest.raises(UnsupportedFormatError):
        Rasterizer(request.getfixturevalue(fixture))


# =============================================================================
# Pixel Tests
# =============================================================================


def test_set_pixel(canvas):
    Rasterizer(canvas).set_pixel(Point(2, 3), RED)
    assert canvas.at(2, 3) == RED
    assert count_set(canvas) == 1


@pytest.mark.parametrize("p", [(-1, 0), (0, -1), (5, 0), (0, 5), (100, 100)])
def test_set_pixel_outside_is_ignored(canvas, p):
    before = canvas.copy()
    Rasterizer(canvas).set_pixel(p, RED)
    assert canvas == before


# =============================================================================
# Line Tests
# =============================================================================


def test_degenerate_line(canvas):
    Rasterizer(canvas).draw_line((2, 2), (2, 2), RED)
    assert lit(canvas) == {(2, 2)}


def test_horizontal_line_either_direction(canvas):
    draw = Rasterizer(canvas)
    draw.draw_line((4, 1), (0, 1), RED)
    assert lit(canvas) == {(x, 1) for x in range(5)}


def test_diagonal_line(canvas):
    Rasterizer(canvas).draw_line((0, 0), (3, 3), RED)
    assert lit(canvas) == {(0, 0), (1, 1), (2, 2), (3, 3)}


def test_shallow_line(canvas):
    Rasterizer(canvas).draw_line((0, 0), (4, 2), RED)
    assert lit(canvas) == {(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)}


def test_line_clips_at_edges(canvas):
    Rasterizer(canvas).draw_line((0, 4), (7, 4), RED)
    assert lit(canvas) == {(x, 4) for x in range(5)}


# =============================================================================
# Rectangle Tests
# =============================================================================


def test_rectangle_outline():
    buf = PixelBuffer(Kind.COLOR, 6, 5)
    Rasterizer(buf).draw_rectangle(Point(1, 1), 3, 2, RED)
    expected = {(x, y) for x in range(1, 5) for y in (1, 3)}
    expected |= {(1, 2), (4, 2)}
    assert lit(buf) == expected


def test_filled_rectangle(canvas):
    Rasterizer(canvas).draw_filled_rectangle((1, 1), 3, 2, RED)
    assert lit(canvas) == {(x, y) for x in range(1, 4) for y in range(1, 3)}


def test_filled_rectangle_clips(canvas):
    Rasterizer(canvas).draw_filled_rectangle((4, 4), 3, 3, RED)
    assert lit(canvas) == {(4, 4)}
