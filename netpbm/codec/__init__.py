"""
Codec subsystem - Netpbm stream decoding and encoding.

Modules:
    formats: Magic token descriptors
    reader: Byte stream -> PixelBuffer
    writer: PixelBuffer -> bytes
"""
from .formats import FormatSpec, FORMATS, DEFAULT_MAGIC, lookup
from .reader import decode, decode_with_magic
from .writer import encode, write, DEFAULT_COMMENT

__all__ = [
    "FormatSpec",
    "FORMATS",
    "DEFAULT_MAGIC",
    "DEFAULT_COMMENT",
    "lookup",
    "decode",
    "decode_with_magic",
    "encode",
    "write",
]
