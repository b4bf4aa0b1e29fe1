"""
Netpbm Buffers
==============
Codec and in-memory transform engine for the Netpbm image family:
PBM bitmaps (P1/P4), PGM grayscale (P2/P5) and PPM color (P3/P6),
each in an ASCII and a binary variant, with 8-bit samples.

Architecture
------------
The library is organized into layers:

    NetpbmImage       High-level image + magic number + file I/O
       │
       ├── codec
       │      ├── reader      Byte stream -> PixelBuffer
       │      ├── writer      PixelBuffer -> bytes
       │      └── formats     Magic token descriptors
       │
       └── buffer
              ├── PixelBuffer     Row-major raster with (x, y) accessors
              ├── transform       invert / flip / flop / rotate / convert
              └── Rasterizer      Lines and rectangles (COLOR only)

Quick Start
-----------
    from netpbm import NetpbmImage

    img = NetpbmImage.open("input.pbm")
    img.invert()
    img.save("inverted.pbm")

Stream-Level Usage
------------------
    from netpbm.codec import decode, encode
    from netpbm.buffer import transform

    with open("input.pgm", "rb") as f:
        buf = decode(f)
    buf = transform.rotate90cw(buf)
    data = encode(buf, "P2")

Errors
------
All failures derive from netpbm.errors.NetpbmError. Stream errors are
plain OSError. The library never prints; it logs through the standard
`logging` module under the "netpbm" logger and installs no handlers.
"""

# Core buffer classes
from .buffer import PixelBuffer, Rasterizer, Kind, Pixel, Point, transform

# Codec
from .codec import decode, decode_with_magic, encode, write

# Errors
from .errors import (
    NetpbmError,
    UnsupportedFormatError,
    IncompatibleFormatError,
    ParseError,
    ValueOutOfRangeError,
    UnexpectedEOFError,
    IndexOutOfRangeError,
)

# High-level interface
from .image import NetpbmImage

__all__ = [
    # High-level
    "NetpbmImage",
    # Buffers
    "PixelBuffer",
    "Rasterizer",
    "Kind",
    "Pixel",
    "Point",
    "transform",
    # Codec
    "decode",
    "decode_with_magic",
    "encode",
    "write",
    # Errors
    "NetpbmError",
    "UnsupportedFormatError",
    "IncompatibleFormatError",
    "ParseError",
    "ValueOutOfRangeError",
    "UnexpectedEOFError",
    "IndexOutOfRangeError",
]

__version__ = "1.0.0"
