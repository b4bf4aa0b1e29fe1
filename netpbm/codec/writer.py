"""
Netpbm Writer
=============
Encodes PixelBuffers as P1..P6 bytes.

Every file gets the same header shape:
    <magic>
    # <comment>
    <width> <height>
    <max_value>          (GRAY/COLOR only)

ASCII payloads write one row per line with single spaces between values.
Binary payloads are the buffer's storage rows, which already follow the
P4/P5/P6 layout (bitmap rows are zero-padded to a whole byte).
"""

import logging

from ..buffer.pixelbuffer import PixelBuffer, Kind
from .formats import DEFAULT_MAGIC, lookup_for_kind

__all__ = ["encode", "write", "DEFAULT_COMMENT"]

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = "saved file"


def encode(buffer: PixelBuffer, magic: str | None = None,
           comment: str = DEFAULT_COMMENT) -> bytes:
    """
    Encode a buffer as a Netpbm file.

    Args:
        buffer: Buffer to encode
        magic: Target magic token; defaults to the binary token of the kind
        comment: Text of the single header comment line

    Returns:
        Complete file contents

    Raises:
        UnsupportedFormatError: If magic is not P1..P6
        IncompatibleFormatError: If magic encodes another kind
        ValueError: If comment spans more than one line
    """
    if magic is None:
        magic = DEFAULT_MAGIC[buffer.kind]
    spec = lookup_for_kind(magic, buffer.kind)
    if "\n" in comment or "\r" in comment:
        raise ValueError("comment must be a single line")

    header = [spec.magic, f"# {comment}", f"{buffer.width} {buffer.height}"]
    if spec.has_max_value:
        header.append(str(buffer.max_value))
    out = bytearray("\n".join(header).encode("ascii"))
    out += b"\n"

    if spec.is_ascii:
        out += _ascii_payload(buffer)
    else:
        out += buffer.buffer

    logger.debug("Encoded %dx%d %s buffer as %s (%d bytes)",
                 buffer.width, buffer.height, Kind.name(buffer.kind), magic, len(out))
    return bytes(out)


def write(stream, buffer: PixelBuffer, magic: str | None = None,
          comment: str = DEFAULT_COMMENT) -> int:
    """
    Encode a buffer and write it to a binary stream.

    The payload is encoded fully before the first write, so encoding errors
    leave the stream untouched. Write errors are not rolled back.

    Returns:
        Number of bytes written
    """
    data = encode(buffer, magic, comment)
    stream.write(data)
    return len(data)


def _ascii_payload(buffer: PixelBuffer) -> bytes:
    lines = []
    if buffer.kind == Kind.BITMAP:
        for y in range(buffer.height):
            lines.append(" ".join("1" if bit else "0" for bit in buffer.row(y)))
    else:
        # GRAY and COLOR rows are flat channel bytes
        for y in range(buffer.height):
            lines.append(" ".join(map(str, buffer.row_view(y))))
    return ("\n".join(lines) + "\n").encode("ascii")
