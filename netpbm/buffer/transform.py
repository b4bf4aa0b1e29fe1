"""
Buffer Transforms
=================
Inversion, mirroring, rotation and cross-kind conversion.

In place:       invert, flip, flop, set_max_value
New buffer:     rotate90cw, to_gray, to_bitmap

Functions that return a new buffer never modify their input; callers
replace their own reference with the result.
"""

from ..errors import UnsupportedFormatError
from .pixelbuffer import PixelBuffer, Kind

__all__ = [
    "invert",
    "flip",
    "flop",
    "rotate90cw",
    "to_gray",
    "to_bitmap",
    "set_max_value",
]

_BYTE_MASK = 0xFF

# Color inversion ignores max_value on purpose (gray inversion does not)
_LUT_INVERT_255 = bytes(_BYTE_MASK - v for v in range(256))


def _require(buf: PixelBuffer, kinds: tuple, op: str) -> None:
    if buf.kind not in kinds:
        raise UnsupportedFormatError(f"{op} is not supported for {Kind.name(buf.kind)} buffers")


# =============================================================================
# In-Place Transforms
# =============================================================================

def invert(buf: PixelBuffer) -> None:
    """
    Invert every sample in place.

    BITMAP: complement each sample.
    GRAY:   v -> max_value - v
    COLOR:  c -> 255 - c for each channel, independent of max_value.
    """
    data = buf.buffer
    if buf.kind == Kind.BITMAP:
        for i in range(len(data)): data[i] ^= _BYTE_MASK
        buf._clear_padding()
    elif buf.kind == Kind.GRAY:
        m = buf.max_value
        data[:] = data.translate(bytes(max(m - v, 0) for v in range(256)))
    else:
        data[:] = data.translate(_LUT_INVERT_255)


def flip(buf: PixelBuffer) -> None:
    """Mirror horizontally: reverse the samples of every row."""
    w = buf.width
    if buf.kind == Kind.BITMAP:
        for y in range(buf.height):
            row = [buf._get_bit(x, y) for x in range(w)]
            for x, value in enumerate(reversed(row)):
                buf._set_bit(x, y, value)
        return

    step = 1 if buf.kind == Kind.GRAY else 3
    data = buf.buffer
    stride = buf.row_bytes
    for y in range(buf.height):
        start = y * stride
        row = data[start:start + stride]
        out = bytearray(stride)
        for x in range(w):
            src = x * step
            dst = (w - 1 - x) * step
            out[dst:dst + step] = row[src:src + step]
        data[start:start + stride] = out


def flop(buf: PixelBuffer) -> None:
    """Mirror vertically: reverse the order of rows."""
    data = buf.buffer
    stride = buf.row_bytes
    h = buf.height
    for y in range(h // 2):
        top = y * stride
        bottom = (h - 1 - y) * stride
        data[top:top + stride], data[bottom:bottom + stride] = \
            data[bottom:bottom + stride], data[top:top + stride]


def set_max_value(buf: PixelBuffer, max_value: int) -> None:
    """
    Change max_value, rescaling every sample as v * new // old.

    Raises:
        UnsupportedFormatError: For BITMAP buffers
        ValueError: If max_value is outside 1..255
    """
    _require(buf, (Kind.GRAY, Kind.COLOR), "set_max_value")
    if not 1 <= max_value <= _BYTE_MASK:
        raise ValueError(f"max_value must be in 1..255, got {max_value}")
    old = buf.max_value
    if max_value != old:
        lut = bytes(v * max_value // old if v <= old else max_value for v in range(256))
        buf.buffer[:] = buf.buffer.translate(lut)
    buf._max = max_value


# =============================================================================
# Buffer-Replacing Transforms
# =============================================================================

def rotate90cw(buf: PixelBuffer) -> PixelBuffer:
    """
    Rotate 90 degrees clockwise into a new buffer.

    The new buffer is old.height wide and old.width tall; the sample at
    old column x, row y lands at new column (old.height - 1 - y), row x.
    """
    h = buf.height
    out = PixelBuffer(buf.kind, h, buf.width, buf.max_value)
    get = buf._get_raw
    put = out._set_raw
    for y in range(h):
        nx = h - 1 - y
        for x in range(buf.width):
            put(nx, x, get(x, y))
    return out


def to_gray(buf: PixelBuffer) -> PixelBuffer:
    """
    Convert COLOR to GRAY with gray = (R + G + B) // 3.

    max_value is carried over unchanged.
    """
    _require(buf, (Kind.COLOR,), "to_gray")
    out = PixelBuffer(Kind.GRAY, buf.width, buf.height, buf.max_value)
    src = buf.buffer
    dst = out.buffer
    for i in range(len(dst)):
        j = i * 3
        dst[i] = (src[j] + src[j + 1] + src[j + 2]) // 3
    return out


def to_bitmap(buf: PixelBuffer) -> PixelBuffer:
    """
    Binarize GRAY or COLOR into a BITMAP.

    threshold = max_value // 2; a sample is set when its value (the channel
    average for COLOR) is strictly below the threshold.
    """
    _require(buf, (Kind.GRAY, Kind.COLOR), "to_bitmap")
    threshold = buf.max_value // 2
    out = PixelBuffer(Kind.BITMAP, buf.width, buf.height)
    src = buf.buffer
    stride = buf.row_bytes
    color = buf.kind == Kind.COLOR
    for y in range(buf.height):
        base = y * stride
        for x in range(buf.width):
            if color:
                i = base + x * 3
                value = (src[i] + src[i + 1] + src[i + 2]) // 3
            else:
                value = src[base + x]
            if value < threshold:
                out._set_bit(x, y, True)
    return out
