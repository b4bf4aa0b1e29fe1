"""
NetpbmImage - High-Level Image Interface
========================================
Owns a PixelBuffer together with the magic number it is saved as.

This is the primary entry point for most users. It provides:
- Loading from streams or paths (remembering the source encoding)
- Saving to streams or paths in the current magic number
- Transforms (invert, flip, flop, rotate, max-value rescaling)
- Conversions to gray and bitmap images
- Drawing primitives for color images

Usage:
    from netpbm import NetpbmImage

    img = NetpbmImage.open("photo.ppm")
    img.draw_rectangle((2, 2), 10, 5, (255, 0, 0))
    img.magic_number = "P3"
    img.save("photo_ascii.ppm")

    # Dependency injection of an existing buffer
    from netpbm.buffer import PixelBuffer, Kind

    img = NetpbmImage(PixelBuffer(Kind.GRAY, 4, 4, max_value=15))
"""

import logging

from .buffer import PixelBuffer, Rasterizer, Kind
from .buffer import transform
from .codec import decode_with_magic, encode, write, DEFAULT_COMMENT, DEFAULT_MAGIC
from .codec.formats import lookup_for_kind, MAGIC_PGM_ASCII, MAGIC_PBM_ASCII

__all__ = ["NetpbmImage"]

logger = logging.getLogger(__name__)


class NetpbmImage:
    """
    PixelBuffer plus the magic number used when saving.

    Buffer-replacing operations (rotate90cw) swap the owned buffer;
    conversions (to_gray, to_bitmap) return a new NetpbmImage.
    """

    def __init__(self, buffer: PixelBuffer, magic_number: str | None = None):
        """
        Initialize NetpbmImage.

        Args:
            buffer: Pixel buffer to own.
            magic_number: Save encoding. If None, the binary token of the
                buffer's kind.

        Raises:
            IncompatibleFormatError: If magic_number encodes another kind
        """
        self._buffer = buffer
        self._magic = DEFAULT_MAGIC[buffer.kind]
        self._rasterizer = None
        if magic_number is not None:
            self.magic_number = magic_number

    @classmethod
    def read(cls, stream) -> "NetpbmImage":
        """Decode an image from an open binary stream."""
        buffer, magic = decode_with_magic(stream)
        return cls(buffer, magic)

    @classmethod
    def open(cls, path: str) -> "NetpbmImage":
        """Load an image file."""
        with open(path, "rb") as f:
            return cls.read(f)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    @property
    def kind(self) -> int:
        return self._buffer.kind

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def max_value(self) -> int | None:
        return self._buffer.max_value

    @property
    def magic_number(self) -> str:
        return self._magic

    @magic_number.setter
    def magic_number(self, value: str):
        self._magic = lookup_for_kind(value, self._buffer.kind).magic

    def size(self) -> tuple[int, int]:
        return self._buffer.size()

    def at(self, x: int, y: int):
        return self._buffer.at(x, y)

    def set(self, x: int, y: int, value) -> None:
        self._buffer.set(x, y, value)

    # =========================================================================
    # Saving
    # =========================================================================

    def to_bytes(self, comment: str = DEFAULT_COMMENT) -> bytes:
        return encode(self._buffer, self._magic, comment)

    def write(self, stream, comment: str = DEFAULT_COMMENT) -> int:
        """Write the encoded image to an open binary stream. Returns bytes written."""
        return write(stream, self._buffer, self._magic, comment)

    def save(self, path: str, comment: str = DEFAULT_COMMENT) -> None:
        """
        Save to a file in the current magic number.

        The image is fully encoded before the file is created, so encoding
        errors never truncate an existing file.
        """
        data = self.to_bytes(comment)
        with open(path, "wb") as f:
            f.write(data)
        logger.info("File created: %s (%s, %d bytes)", path, self._magic, len(data))

    # =========================================================================
    # Transforms (Delegated to buffer.transform)
    # =========================================================================

    def invert(self):
        transform.invert(self._buffer)

    def flip(self):
        transform.flip(self._buffer)

    def flop(self):
        transform.flop(self._buffer)

    def rotate90cw(self):
        """Rotate clockwise, replacing the owned buffer."""
        self._buffer = transform.rotate90cw(self._buffer)
        self._rasterizer = None

    def set_max_value(self, max_value: int):
        """Rescale samples to a new max value (GRAY/COLOR only)."""
        transform.set_max_value(self._buffer, max_value)

    def to_gray(self) -> "NetpbmImage":
        """New gray image (P2) from a color image."""
        return NetpbmImage(transform.to_gray(self._buffer), MAGIC_PGM_ASCII)

    def to_bitmap(self) -> "NetpbmImage":
        """New bitmap image (P1) from a gray or color image."""
        return NetpbmImage(transform.to_bitmap(self._buffer), MAGIC_PBM_ASCII)

    # =========================================================================
    # Drawing Operations (Delegated to Rasterizer)
    # =========================================================================

    def _draw(self) -> Rasterizer:
        if self._rasterizer is None:
            self._rasterizer = Rasterizer(self._buffer)
        return self._rasterizer

    def set_pixel(self, p, color):
        self._draw().set_pixel(p, color)

    def draw_line(self, p1, p2, color):
        self._draw().draw_line(p1, p2, color)

    def draw_rectangle(self, origin, w, h, color):
        self._draw().draw_rectangle(origin, w, h, color)

    def draw_filled_rectangle(self, origin, w, h, color):
        self._draw().draw_filled_rectangle(origin, w, h, color)

    def __repr__(self) -> str:
        return (f"NetpbmImage({self._magic}, {Kind.name(self.kind)}, "
                f"{self.width}x{self.height})")
