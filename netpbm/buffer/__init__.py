"""
Buffer subsystem - pixel buffers, transforms and drawing primitives.

Modules:
    pixelbuffer: Core raster storage with (x, y) accessors
    transform: Invert, mirror, rotate and convert between kinds
    draw: Line and rectangle primitives for COLOR buffers
"""
from .pixelbuffer import PixelBuffer, Kind, Pixel, Point, MAX_SAMPLE_VALUE
from .draw import Rasterizer
from . import transform

__all__ = [
    "PixelBuffer",
    "Rasterizer",
    "Kind",
    "Pixel",
    "Point",
    "MAX_SAMPLE_VALUE",
    "transform",
]
