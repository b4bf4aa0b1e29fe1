"""
Rasterizer - Shape Drawing Primitives
=====================================
Lines and rectangles on COLOR pixel buffers.

Drawing clips silently: points outside the buffer are skipped, unlike
PixelBuffer.set() which raises IndexOutOfRangeError.
"""

from ..errors import UnsupportedFormatError
from .pixelbuffer import PixelBuffer, Kind, Point

__all__ = ["Rasterizer", "Point"]


class Rasterizer:
    """
    Drawing operations bound to a COLOR buffer.

    Points are (x, y) pairs; colors are (r, g, b) triples whose channels
    must not exceed the buffer's max_value.
    """

    def __init__(self, buffer: PixelBuffer):
        if buffer.kind != Kind.COLOR:
            raise UnsupportedFormatError(
                f"drawing requires a COLOR buffer, got {Kind.name(buffer.kind)}"
            )
        self._buffer = buffer

    @property
    def buffer(self) -> PixelBuffer: return self._buffer

    # =========================================================================
    # Pixel
    # =========================================================================

    def set_pixel(self, p, color) -> None:
        x, y = p
        buf = self._buffer
        if not (0 <= x < buf.width and 0 <= y < buf.height): return
        buf.set(x, y, color)

    # =========================================================================
    # Line
    # =========================================================================

    def draw_line(self, p1, p2, color) -> None:
        """Draw a line using Bresenham's algorithm, both endpoints included."""
        x1, y1 = p1
        x2, y2 = p2

        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy

        while True:
            self.set_pixel((x1, y1), color)
            if x1 == x2 and y1 == y2:
                break

            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    # =========================================================================
    # Rectangle
    # =========================================================================

    def draw_rectangle(self, origin, w: int, h: int, color) -> None:
        x, y = origin
        p1 = Point(x, y)
        p2 = Point(x + w, y)
        p3 = Point(x + w, y + h)
        p4 = Point(x, y + h)

        self.draw_line(p1, p2, color)
        self.draw_line(p2, p3, color)
        self.draw_line(p3, p4, color)
        self.draw_line(p4, p1, color)

    def draw_filled_rectangle(self, origin, w: int, h: int, color) -> None:
        x0, y0 = origin
        for y in range(y0, y0 + h):
            for x in range(x0, x0 + w):
                self.set_pixel((x, y), color)
