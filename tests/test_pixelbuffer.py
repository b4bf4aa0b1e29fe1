"""
Tests for PixelBuffer storage and accessors.

Run from project root: pytest tests/test_pixelbuffer.py -v
"""

import pytest

from netpbm.buffer import PixelBuffer, Kind, Pixel
from netpbm.errors import IndexOutOfRangeError, ValueOutOfRangeError


# =============================================================================
# Construction Tests
# =============================================================================


@pytest.mark.parametrize("kind, width, row_bytes", [
    (Kind.BITMAP, 1, 1),
    (Kind.BITMAP, 8, 1),
    (Kind.BITMAP, 10, 2),
    (Kind.GRAY, 10, 10),
    (Kind.COLOR, 10, 30),
])
def test_row_stride(kind, width, row_bytes):
    """Storage rows match the binary payload layout of each kind."""
    buf = PixelBuffer(kind, width, 3)
    assert buf.row_bytes == row_bytes
    assert len(buf.buffer) == row_bytes * 3


def test_defaults():
    """Bitmaps carry no max value; gray and color default to 255."""
    assert PixelBuffer(Kind.BITMAP, 2, 2, max_value=7).max_value is None
    assert PixelBuffer(Kind.GRAY, 2, 2).max_value == 255
    assert PixelBuffer(Kind.COLOR, 2, 2, max_value=100).max_value == 100
    assert PixelBuffer(Kind.GRAY, 4, 3).size() == (4, 3)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3)])
def test_non_positive_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        PixelBuffer(Kind.GRAY, width, height)


@pytest.mark.parametrize("max_value", [0, 256])
def test_max_value_range(max_value):
    with pytest.raises(ValueError):
        PixelBuffer(Kind.GRAY, 1, 1, max_value=max_value)


def test_data_length_checked():
    with pytest.raises(ValueError):
        PixelBuffer(Kind.GRAY, 2, 2, data=b"\x00\x00\x00")


def test_bitmap_padding_cleared_on_load():
    """Unused low bits of a bitmap row never reach storage."""
    buf = PixelBuffer(Kind.BITMAP, 3, 1, data=b"\xff")
    assert buf.buffer == bytearray(b"\xe0")
    assert buf.row(0) == [True, True, True]


def test_from_rows_ragged():
    with pytest.raises(ValueError):
        PixelBuffer.from_rows(Kind.GRAY, [[1, 2], [3]])


# =============================================================================
# Accessor Tests
# =============================================================================


def test_xy_is_column_row(gray_buffer):
    """(x, y) addresses column x of row y for every kind."""
    assert gray_buffer.at(2, 0) == 15
    assert gray_buffer.at(0, 1) == 7
    gray_buffer.set(1, 1, 9)
    assert gray_buffer.to_rows() == [[0, 5, 15], [7, 9, 12]]


def test_bitmap_accessors(bitmap_buffer):
    assert bitmap_buffer.at(0, 0) is True
    assert bitmap_buffer.at(9, 0) is True
    assert bitmap_buffer.at(8, 1) is True
    assert bitmap_buffer.at(9, 1) is False
    bitmap_buffer.set(3, 0, 1)
    assert bitmap_buffer.at(3, 0) is True
    bitmap_buffer.set(3, 0, 0)
    assert bitmap_buffer.at(3, 0) is False


def test_color_accessors(color_buffer):
    assert color_buffer.at(1, 1) == Pixel(10, 20, 30)
    assert color_buffer.at(1, 0).g == 255
    color_buffer.set(0, 1, (1, 2, 3))
    assert color_buffer.at(0, 1) == Pixel(1, 2, 3)


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_access(gray_buffer, x, y):
    """at() and set() reject coordinates outside the buffer."""
    with pytest.raises(IndexOutOfRangeError):
        gray_buffer.at(x, y)
    with pytest.raises(IndexError):
        gray_buffer.set(x, y, 0)


def test_set_respects_max_value(gray_buffer, color_buffer):
    with pytest.raises(ValueOutOfRangeError) as excinfo:
        gray_buffer.set(1, 0, 16)
    assert (excinfo.value.row, excinfo.value.col, excinfo.value.value) == (0, 1, 16)
    assert gray_buffer.at(1, 0) == 5

    limited = PixelBuffer(Kind.COLOR, 1, 1, max_value=100)
    with pytest.raises(ValueOutOfRangeError):
        limited.set(0, 0, (100, 101, 0))
    assert limited.at(0, 0) == Pixel(0, 0, 0)


@pytest.mark.parametrize("value", [2, -1, "0", "1"])
def test_bitmap_set_rejects_non_bits(bitmap_buffer, value):
    with pytest.raises(ValueOutOfRangeError):
        bitmap_buffer.set(0, 0, value)
    assert bitmap_buffer.at(0, 0) is True


def test_bitmap_set_accepts_bools_and_bits(bitmap_buffer):
    bitmap_buffer.set(0, 0, False)
    bitmap_buffer.set(1, 0, 1)
    assert bitmap_buffer.row(0)[:2] == [False, True]


# =============================================================================
# Equality & Copy Tests
# =============================================================================


def test_copy_is_independent(gray_buffer):
    dup = gray_buffer.copy()
    assert dup == gray_buffer
    dup.set(0, 0, 1)
    assert dup != gray_buffer
    assert gray_buffer.at(0, 0) == 0


def test_equality_includes_max_value():
    a = PixelBuffer(Kind.GRAY, 2, 2, max_value=10)
    b = PixelBuffer(Kind.GRAY, 2, 2, max_value=11)
    assert a != b
    assert a != PixelBuffer(Kind.COLOR, 2, 2, max_value=10)
