"""Error types raised by the Goldilocks field.

Each error also derives from the builtin exception Python code expects for
the condition, so `except ZeroDivisionError` / `except ValueError` still work.
"""


class FieldError(Exception):
    """Base class for all field errors."""


class ZeroInversionError(FieldError, ZeroDivisionError):
    """Zero has no multiplicative inverse (raised by inv and div)."""


class CreationError(FieldError, ValueError):
    """A field element could not be built from the given input."""


class InvalidHexStringError(CreationError):
    """Malformed hex string: bad digits, empty body, or more than 64 bits."""

    def __init__(self, hex_string: str):
        super().__init__(f"Invalid hex string for a 64-bit field element: {hex_string!r}")
        self.hex_string = hex_string


class ByteConversionError(FieldError, ValueError):
    """A field element could not be converted from bytes."""


class ByteLengthError(ByteConversionError):
    """Fewer bytes than the fixed element width were supplied."""

    def __init__(self, expected: int, actual: int, byteorder: str = "big"):
        super().__init__(
            f"Expected at least {expected} bytes ({byteorder}-endian), got {actual}"
        )
        self.expected = expected
        self.actual = actual
        self.byteorder = byteorder


class DeserializationError(ByteLengthError):
    """Wire-form (big-endian) decoding failed."""
