"""Shared fixtures for the netpbm test suite."""

import io

import pytest

from netpbm.buffer import PixelBuffer, Kind, Pixel


# The worked example: "P1\n3 2\n1 0 1\n0 1 0\n"
SCENARIO_P1 = b"P1\n3 2\n1 0 1\n0 1 0\n"


def stream(data: bytes) -> io.BytesIO:
    """Readable binary stream over data."""
    return io.BytesIO(data)


def count_set(buf: PixelBuffer) -> int:
    """Number of COLOR pixels that are not black."""
    return sum(1 for row in buf.to_rows() for p in row if p != (0, 0, 0))


@pytest.fixture
def bitmap_buffer() -> PixelBuffer:
    """10x2 bitmap spanning two bytes per row."""
    return PixelBuffer.from_rows(Kind.BITMAP, [
        [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
        [0, 1, 1, 0, 1, 0, 0, 1, 1, 0],
    ])


@pytest.fixture
def gray_buffer() -> PixelBuffer:
    """3x2 gray image with max value 15."""
    return PixelBuffer.from_rows(Kind.GRAY, [[0, 5, 15], [7, 3, 12]], max_value=15)


@pytest.fixture
def color_buffer() -> PixelBuffer:
    """2x2 color image with max value 255."""
    return PixelBuffer.from_rows(Kind.COLOR, [
        [Pixel(255, 0, 0), Pixel(0, 255, 0)],
        [Pixel(0, 0, 255), Pixel(10, 20, 30)],
    ])


@pytest.fixture
def canvas() -> PixelBuffer:
    """Blank 5x5 color buffer for drawing."""
    return PixelBuffer(Kind.COLOR, 5, 5)
