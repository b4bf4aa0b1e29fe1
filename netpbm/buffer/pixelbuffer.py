"""
PixelBuffer - Core Raster Storage
=================================
In-memory raster for the three Netpbm sample kinds.

Supports:
- BITMAP: 1 bit per sample, packed 8 per byte (MSB first)
- GRAY:   1 byte per sample
- COLOR:  3 bytes per sample (R, G, B interleaved)

Storage is a single row-major bytearray with a fixed row stride, so every
row of the buffer is byte-for-byte the matching row of a P4/P5/P6 payload.
Unused low-order bits of the last byte of each bitmap row are kept at zero.

Coordinates are (x, y) = (column, row) for every kind.
"""

from collections import namedtuple

from ..errors import IndexOutOfRangeError, ValueOutOfRangeError

# =============================================================================
# Constants
# =============================================================================

MAX_SAMPLE_VALUE = 255

_BITS_PER_BYTE = 8
_BYTE_MASK = 0xFF

# =============================================================================
# Internal Lookup Tables
# =============================================================================

_BIT_MASKS = tuple(1 << (7 - i) for i in range(_BITS_PER_BYTE))
_INV_MASKS = tuple(~(1 << (7 - i)) & _BYTE_MASK for i in range(_BITS_PER_BYTE))

# Mask of the meaningful bits in the last byte of a row, indexed by width % 8
_TAIL_MASKS = (_BYTE_MASK,) + tuple((_BYTE_MASK << (8 - n)) & _BYTE_MASK for n in range(1, 8))

Pixel = namedtuple("Pixel", "r g b")
Point = namedtuple("Point", "x y")


class Kind:
    """
    Sample kind enumeration.

    The kind fixes the sample type and which magic tokens may encode it:
        BITMAP -> P1, P4   (bool samples)
        GRAY   -> P2, P5   (int samples)
        COLOR  -> P3, P6   (Pixel samples)
    """
    BITMAP = 0
    GRAY = 1
    COLOR = 2

    _names = {
        0: "BITMAP",
        1: "GRAY",
        2: "COLOR",
    }

    @classmethod
    def name(cls, kind: int) -> str:
        """Get human-readable kind name."""
        return cls._names.get(kind, f"UNKNOWN({kind})")


def row_stride(kind: int, width: int) -> int:
    """Bytes per storage row for a kind and width."""
    if kind == Kind.BITMAP:
        return (width + 7) // _BITS_PER_BYTE
    if kind == Kind.GRAY:
        return width
    return width * 3


class PixelBuffer:
    """
    Raster with a sample kind, dimensions and optional max value.

    Attributes:
        kind: Kind.BITMAP, Kind.GRAY or Kind.COLOR
        width: Columns (> 0)
        height: Rows (> 0)
        max_value: Upper bound for GRAY/COLOR samples (1..255), None for BITMAP
    """

    def __init__(self, kind: int, width: int, height: int,
                 max_value: int | None = None, data: bytes | None = None):
        if kind not in Kind._names:
            raise ValueError(f"unknown kind {kind}")
        if width <= 0 or height <= 0:
            raise ValueError(f"dimensions must be positive, got {width}x{height}")

        if kind == Kind.BITMAP:
            max_value = None
        else:
            if max_value is None:
                max_value = MAX_SAMPLE_VALUE
            if not 1 <= max_value <= MAX_SAMPLE_VALUE:
                raise ValueError(f"max_value must be in 1..{MAX_SAMPLE_VALUE}, got {max_value}")

        self._kind = kind
        self._w = width
        self._h = height
        self._max = max_value
        self._row_bytes = row_stride(kind, width)
        self._buffer_size = self._row_bytes * height

        if data is None:
            self._buffer = bytearray(self._buffer_size)
        else:
            if len(data) != self._buffer_size:
                raise ValueError(f"data must be {self._buffer_size} bytes, got {len(data)}")
            self._buffer = bytearray(data)
            if kind == Kind.BITMAP:
                self._clear_padding()

    @classmethod
    def from_rows(cls, kind: int, rows, max_value: int | None = None) -> "PixelBuffer":
        """
        Build a buffer from nested rows of samples.

        Args:
            kind: Sample kind
            rows: Sequence of equal-length rows (bools, ints or RGB triples)
            max_value: Max value for GRAY/COLOR (defaults to 255)

        Raises:
            ValueError: If rows are empty or ragged
        """
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise ValueError("rows must be non-empty")
        width = len(rows[0])
        buf = cls(kind, width, len(rows), max_value)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} samples, expected {width}")
            for x, value in enumerate(row):
                buf.set(x, y, value)
        return buf

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def kind(self) -> int: return self._kind

    @property
    def width(self) -> int: return self._w

    @property
    def height(self) -> int: return self._h

    @property
    def max_value(self) -> int | None: return self._max

    @property
    def row_bytes(self) -> int: return self._row_bytes

    @property
    def buffer(self) -> bytearray: return self._buffer

    def size(self) -> tuple[int, int]:
        return self._w, self._h

    # =========================================================================
    # Pixel Ops
    # =========================================================================

    def _get_bit(self, x: int, y: int) -> bool:
        return bool(self._buffer[y * self._row_bytes + (x >> 3)] & _BIT_MASKS[x & 7])

    def _set_bit(self, x: int, y: int, value: bool) -> None:
        idx = y * self._row_bytes + (x >> 3)
        if value: self._buffer[idx] |= _BIT_MASKS[x & 7]
        else: self._buffer[idx] &= _INV_MASKS[x & 7]

    def _get_raw(self, x: int, y: int):
        """Read sample at (x, y) without bounds checking."""
        if self._kind == Kind.BITMAP:
            return self._get_bit(x, y)
        if self._kind == Kind.GRAY:
            return self._buffer[y * self._row_bytes + x]
        i = y * self._row_bytes + x * 3
        return Pixel(self._buffer[i], self._buffer[i + 1], self._buffer[i + 2])

    def _set_raw(self, x: int, y: int, value) -> None:
        """Write sample at (x, y) without bounds or range checking."""
        if self._kind == Kind.BITMAP:
            self._set_bit(x, y, value)
        elif self._kind == Kind.GRAY:
            self._buffer[y * self._row_bytes + x] = value
        else:
            i = y * self._row_bytes + x * 3
            self._buffer[i:i + 3] = bytes(value)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._w and 0 <= y < self._h):
            raise IndexOutOfRangeError(x, y, self._w, self._h)

    def at(self, x: int, y: int):
        """Sample at column x, row y."""
        self._check_bounds(x, y)
        return self._get_raw(x, y)

    def set(self, x: int, y: int, value) -> None:
        """
        Set sample at column x, row y.

        BITMAP values must be a bool, 0 or 1. GRAY values and every COLOR
        channel must lie in 0..max_value.

        Raises:
            IndexOutOfRangeError: If (x, y) is outside the buffer
            ValueOutOfRangeError: If a value exceeds max_value
        """
        self._check_bounds(x, y)
        if self._kind == Kind.BITMAP:
            if value not in (0, 1):
                raise ValueOutOfRangeError(y, x, value, 1)
            self._set_bit(x, y, bool(value))
            return
        if self._kind == Kind.GRAY:
            self._check_value(x, y, value)
            self._buffer[y * self._row_bytes + x] = value
            return
        r, g, b = value
        for channel in (r, g, b):
            self._check_value(x, y, channel)
        self._set_raw(x, y, (r, g, b))

    def _check_value(self, x: int, y: int, value: int) -> None:
        if not 0 <= value <= self._max:
            raise ValueOutOfRangeError(y, x, value, self._max)

    # =========================================================================
    # Row Access
    # =========================================================================

    def row(self, y: int) -> list:
        """Samples of row y, left to right."""
        if not 0 <= y < self._h:
            raise IndexOutOfRangeError(0, y, self._w, self._h)
        return [self._get_raw(x, y) for x in range(self._w)]

    def to_rows(self) -> list:
        """All samples as a list of rows."""
        return [self.row(y) for y in range(self._h)]

    def row_view(self, y: int) -> memoryview:
        """Raw storage bytes of row y."""
        start = y * self._row_bytes
        return memoryview(self._buffer)[start:start + self._row_bytes]

    def _clear_padding(self) -> None:
        """Zero the unused bits at the end of every bitmap row."""
        tail = _TAIL_MASKS[self._w & 7]
        if tail == _BYTE_MASK: return
        buf = self._buffer
        for idx in range(self._row_bytes - 1, self._buffer_size, self._row_bytes):
            buf[idx] &= tail

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self._kind, self._w, self._h, self._max, self._buffer)

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self._kind == other._kind and self._w == other._w
                and self._h == other._h and self._max == other._max
                and self._buffer == other._buffer)

    def __repr__(self):
        extra = "" if self._max is None else f", max_value={self._max}"
        return f"PixelBuffer({Kind.name(self._kind)}, {self._w}x{self._h}{extra})"
