"""
Netpbm Reader
=============
Decodes P1..P6 byte streams into PixelBuffers.

Stream Layout:
    [Magic line: "P1".."P6"]
    [Comment / blank lines: "# ..." (optional, repeatable)]
    [Dimensions line: "<width> <height>"]
    [Max-value line: "<1..255>"     (GRAY/COLOR only)]
    [Payload]

Payload Encodings:
    ASCII (P1, P2, P3): one line per row, whitespace-separated decimals,
        `channels` tokens per pixel. Extra tokens on a line are ignored.
    Binary (P4): ceil(width / 8) bytes per row, MSB first; trailing
        padding bits are ignored.
    Binary (P5, P6): width * channels bytes per row, no padding.

Decoding is all-or-nothing: either a complete buffer is returned or an
error is raised. OSError from the stream propagates unchanged. Storage grows
row by row, so a truncated payload fails before the declared size is
allocated.
"""

import logging

from ..buffer.pixelbuffer import PixelBuffer, Kind, MAX_SAMPLE_VALUE, row_stride, _BIT_MASKS
from ..errors import ParseError, UnexpectedEOFError, ValueOutOfRangeError
from .formats import FormatSpec, lookup

__all__ = ["decode", "decode_with_magic"]

logger = logging.getLogger(__name__)

_COMMENT = b"#"
_READ_CHUNK = 64 * 1024


def decode(stream) -> PixelBuffer:
    """
    Decode one image from a binary stream.

    Args:
        stream: Readable binary file-like object (readline() and read())

    Returns:
        The decoded PixelBuffer

    Raises:
        UnsupportedFormatError: If the magic token is not P1..P6
        ParseError: If a header field or payload token is malformed
        ValueOutOfRangeError: If a sample exceeds the declared max value
        UnexpectedEOFError: If the payload is shorter than declared
    """
    return decode_with_magic(stream)[0]


def decode_with_magic(stream) -> tuple[PixelBuffer, str]:
    """Decode one image and also return the magic token it was stored with."""
    magic = _text(stream.readline()).strip()
    spec = lookup(magic)

    width, height = _read_dimensions(stream)
    max_value = _read_max_value(stream) if spec.has_max_value else None

    if spec.is_ascii:
        data = _read_ascii_payload(stream, spec, width, height, max_value)
    else:
        data = _read_binary_payload(stream, spec, width, height, max_value)

    buf = PixelBuffer(spec.kind, width, height, max_value, data)
    logger.debug("Decoded %s image %dx%d (max_value=%s)", magic, width, height, max_value)
    return buf, magic


# =============================================================================
# Header
# =============================================================================

def _text(raw: bytes) -> str:
    return raw.decode("ascii", errors="replace")


def _next_header_line(stream, stage: str) -> str:
    """Next line that is neither blank nor a comment."""
    while True:
        raw = stream.readline()
        if not raw:
            raise ParseError(stage, "unexpected end of header")
        line = raw.strip()
        if line and not line.startswith(_COMMENT):
            return _text(line)


def _to_int(token: str) -> int | None:
    """Parse an optionally signed decimal token; None if it is not one."""
    body = token[1:] if token[:1] in ("-", "+") else token
    if not body.isdigit():
        return None
    return int(token)


def _read_dimensions(stream) -> tuple[int, int]:
    fields = _next_header_line(stream, "dimensions").split()
    if len(fields) != 2:
        raise ParseError("dimensions", f"expected 'width height', got {' '.join(fields)!r}")
    width, height = _to_int(fields[0]), _to_int(fields[1])
    if width is None or height is None:
        raise ParseError("dimensions", f"non-numeric dimensions {fields[0]!r} {fields[1]!r}")
    if width <= 0 or height <= 0:
        raise ParseError("dimensions", f"dimensions must be positive, got {width}x{height}")
    return width, height


def _read_max_value(stream) -> int:
    fields = _next_header_line(stream, "max_value").split()
    value = _to_int(fields[0]) if len(fields) == 1 else None
    if value is None:
        raise ParseError("max_value", f"expected one integer, got {' '.join(fields)!r}")
    if not 1 <= value <= MAX_SAMPLE_VALUE:
        raise ParseError("max_value", f"max value must be in 1..{MAX_SAMPLE_VALUE}, got {value}")
    return value


# =============================================================================
# Payload
# =============================================================================

def _read_ascii_payload(stream, spec: FormatSpec, width: int, height: int,
                        max_value: int | None) -> bytearray:
    stride = row_stride(spec.kind, width)
    channels = spec.channels
    need = width * channels
    bitmap = spec.kind == Kind.BITMAP
    data = bytearray()

    for y in range(height):
        tokens = _text(stream.readline()).split()[:need]
        row = bytearray(stride)
        for i, token in enumerate(tokens):
            col = i // channels
            if bitmap:
                if token == "1":
                    row[i >> 3] |= _BIT_MASKS[i & 7]
                elif token != "0":
                    raise ParseError("payload", f"invalid bit {token!r}", y, col)
                continue

            value = _to_int(token)
            if value is None:
                raise ParseError("payload", f"invalid sample {token!r}", y, col)
            if not 0 <= value <= max_value:
                raise ValueOutOfRangeError(y, col, value, max_value)
            row[i] = value

        if len(tokens) < need:
            raise UnexpectedEOFError(y, need, len(tokens))
        data += row
    return data


def _read_exact(stream, n: int) -> bytes:
    """Read n bytes in bounded chunks; fewer only at end of stream."""
    chunks = []
    remaining = n
    while remaining > 0:
        chunk = stream.read(min(remaining, _READ_CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_binary_payload(stream, spec: FormatSpec, width: int, height: int,
                         max_value: int | None) -> bytearray:
    stride = row_stride(spec.kind, width)
    check = not spec.bit_packed and max_value < MAX_SAMPLE_VALUE
    data = bytearray()

    for y in range(height):
        row = _read_exact(stream, stride)
        if len(row) < stride:
            raise UnexpectedEOFError(y, stride, len(row))
        if check and max(row) > max_value:
            i = next(i for i, v in enumerate(row) if v > max_value)
            raise ValueOutOfRangeError(y, i // spec.channels, row[i], max_value)
        data += row
    return data
