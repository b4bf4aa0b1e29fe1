"""
Netpbm Format Descriptors
=========================
One descriptor per magic token. The reader and writer select a descriptor
once from the magic and branch only on its three flags.

    Magic  Kind    Encoding  Channels  Bit-packed
    P1     BITMAP  ASCII     1         no
    P2     GRAY    ASCII     1         no
    P3     COLOR   ASCII     3         no
    P4     BITMAP  binary    1         yes
    P5     GRAY    binary    1         no
    P6     COLOR   binary    3         no
"""

from ..buffer.pixelbuffer import Kind
from ..errors import UnsupportedFormatError, IncompatibleFormatError

# =============================================================================
# Magic Tokens
# =============================================================================

MAGIC_PBM_ASCII = "P1"
MAGIC_PGM_ASCII = "P2"
MAGIC_PPM_ASCII = "P3"
MAGIC_PBM_BINARY = "P4"
MAGIC_PGM_BINARY = "P5"
MAGIC_PPM_BINARY = "P6"

# Encoding used when a caller does not pick one
DEFAULT_MAGIC = {
    Kind.BITMAP: MAGIC_PBM_BINARY,
    Kind.GRAY: MAGIC_PGM_BINARY,
    Kind.COLOR: MAGIC_PPM_BINARY,
}


class FormatSpec:
    """
    Encoding descriptor for a magic token.

    Attributes:
        magic: Magic token ("P1".."P6")
        kind: Kind family the token encodes
        is_ascii: True for whitespace-separated decimal payloads
        channels: Samples per pixel (3 for COLOR, else 1)
        bit_packed: True when 8 samples share a byte (P4 only)
    """

    __slots__ = ("magic", "kind", "is_ascii", "channels", "bit_packed")

    def __init__(self, magic: str, kind: int, is_ascii: bool,
                 channels: int = 1, bit_packed: bool = False):
        self.magic = magic
        self.kind = kind
        self.is_ascii = is_ascii
        self.channels = channels
        self.bit_packed = bit_packed

    @property
    def has_max_value(self) -> bool:
        """True when the header carries a max-value line."""
        return self.kind != Kind.BITMAP

    def __repr__(self) -> str:
        return (
            f"FormatSpec({self.magic}, {Kind.name(self.kind)}, "
            f"{'ascii' if self.is_ascii else 'binary'}, "
            f"channels={self.channels}, packed={self.bit_packed})"
        )


FORMATS = {
    MAGIC_PBM_ASCII: FormatSpec(MAGIC_PBM_ASCII, Kind.BITMAP, True),
    MAGIC_PGM_ASCII: FormatSpec(MAGIC_PGM_ASCII, Kind.GRAY, True),
    MAGIC_PPM_ASCII: FormatSpec(MAGIC_PPM_ASCII, Kind.COLOR, True, channels=3),
    MAGIC_PBM_BINARY: FormatSpec(MAGIC_PBM_BINARY, Kind.BITMAP, False, bit_packed=True),
    MAGIC_PGM_BINARY: FormatSpec(MAGIC_PGM_BINARY, Kind.GRAY, False),
    MAGIC_PPM_BINARY: FormatSpec(MAGIC_PPM_BINARY, Kind.COLOR, False, channels=3),
}


def lookup(magic: str) -> FormatSpec:
    """
    Descriptor for a magic token.

    Raises:
        UnsupportedFormatError: If the token is not P1..P6
    """
    spec = FORMATS.get(magic)
    if spec is None:
        raise UnsupportedFormatError(f"unsupported magic number: {magic!r}", magic)
    return spec


def lookup_for_kind(magic: str, kind: int) -> FormatSpec:
    """
    Descriptor for a magic token that must encode the given kind.

    Raises:
        UnsupportedFormatError: If the token is not P1..P6
        IncompatibleFormatError: If the token belongs to another kind
    """
    spec = lookup(magic)
    if spec.kind != kind:
        raise IncompatibleFormatError(magic, Kind.name(kind))
    return spec
