"""
Netpbm Errors
=============
Typed failures raised by the codec, buffer and drawing layers.

Every error derives from NetpbmError and from the closest builtin, so
callers that already catch ValueError / EOFError / IndexError keep working.

Hierarchy:
    NetpbmError
    ├── UnsupportedFormatError      (ValueError)
    │      └── IncompatibleFormatError
    ├── ParseError                  (ValueError)
    ├── ValueOutOfRangeError        (ValueError)
    ├── UnexpectedEOFError          (EOFError)
    └── IndexOutOfRangeError        (IndexError)

Stream failures are plain OSError and are never wrapped.
"""

__all__ = [
    "NetpbmError",
    "UnsupportedFormatError",
    "IncompatibleFormatError",
    "ParseError",
    "ValueOutOfRangeError",
    "UnexpectedEOFError",
    "IndexOutOfRangeError",
]


class NetpbmError(Exception):
    """Base class for all library errors."""


class UnsupportedFormatError(NetpbmError, ValueError):
    """Magic token not recognized, or operation not valid for a buffer kind."""

    def __init__(self, message: str, magic: str | None = None):
        super().__init__(message)
        self.magic = magic


class IncompatibleFormatError(UnsupportedFormatError):
    """Requested magic token belongs to another kind family than the buffer."""

    def __init__(self, magic: str, kind: str):
        super().__init__(f"Magic {magic} cannot encode a {kind} buffer", magic)
        self.kind = kind


class ParseError(NetpbmError, ValueError):
    """
    Header or payload token is malformed.

    Attributes:
        stage: "magic", "dimensions", "max_value" or "payload"
        row: Payload row (None for header stages)
        col: Payload column, when known
    """

    def __init__(self, stage: str, message: str,
                 row: int | None = None, col: int | None = None):
        where = ""
        if row is not None:
            where = f" at row {row}" if col is None else f" at row {row}, column {col}"
        super().__init__(f"{stage}: {message}{where}")
        self.stage = stage
        self.row = row
        self.col = col


class ValueOutOfRangeError(NetpbmError, ValueError):
    """Sample value exceeds the declared max value (or the 8-bit range)."""

    def __init__(self, row: int, col: int, value: int, max_value: int):
        super().__init__(
            f"value {value} out of range 0..{max_value} at row {row}, column {col}"
        )
        self.row = row
        self.col = col
        self.value = value
        self.max_value = max_value


class UnexpectedEOFError(NetpbmError, EOFError):
    """Payload is shorter than the declared dimensions require."""

    def __init__(self, row: int, expected: int, got: int):
        super().__init__(
            f"unexpected end of file at row {row}, expected {expected}, got {got}"
        )
        self.row = row
        self.expected = expected
        self.got = got


class IndexOutOfRangeError(NetpbmError, IndexError):
    """Accessor called with coordinates outside the buffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) outside {width}x{height} buffer")
        self.x = x
        self.y = y
