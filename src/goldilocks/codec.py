"""Fixed-width byte and hex codec for GF(P) base-type values.

Every element is exactly 8 bytes on the wire. Encoding writes the raw stored
value as is (no canonicalization); decoding returns the raw value unreduced.
The canonical wire form (serialize/deserialize) is big-endian.
"""

import logging
import string

from goldilocks.errors import ByteLengthError, DeserializationError, InvalidHexStringError
from goldilocks.gf64 import U64_MASK

logger = logging.getLogger(__name__)

BYTES = 8
_HEX_DIGITS = frozenset(string.hexdigits)


def _check_u64(x: int) -> None:
    if not 0 <= x <= U64_MASK:
        raise ValueError(f"Base value must fit in 64 bits, got {x}")


def to_bytes_be(x: int) -> bytes:
    """Big-endian 8-byte encoding of the raw value."""
    _check_u64(x)
    return x.to_bytes(BYTES, "big")


def to_bytes_le(x: int) -> bytes:
    """Little-endian 8-byte encoding of the raw value."""
    _check_u64(x)
    return x.to_bytes(BYTES, "little")


def _from_bytes(data: bytes, byteorder: str) -> int:
    if len(data) < BYTES:
        logger.debug("rejecting %d-byte %s-endian input", len(data), byteorder)
        raise ByteLengthError(BYTES, len(data), byteorder)
    # Only the first BYTES bytes are consumed; the rest belongs to the caller.
    return int.from_bytes(data[:BYTES], byteorder)


def from_bytes_be(data: bytes) -> int:
    """Decode the first 8 bytes of data as a big-endian raw value."""
    return _from_bytes(data, "big")


def from_bytes_le(data: bytes) -> int:
    """Decode the first 8 bytes of data as a little-endian raw value."""
    return _from_bytes(data, "little")


def from_hex(hex_string: str) -> int:
    """Parse a base-16 string, optionally prefixed with "0x".

    The prefix is only stripped when the string is longer than 2 characters,
    so "0x" alone is rejected. Only ASCII hex digits are accepted (no sign,
    whitespace or underscores) and the value must fit in 64 bits.
    """
    digits = hex_string
    if len(digits) > 2 and digits[:2] == "0x":
        digits = digits[2:]

    if not digits or not _HEX_DIGITS.issuperset(digits):
        logger.debug("rejecting malformed hex string %r", hex_string)
        raise InvalidHexStringError(hex_string)

    value = int(digits, 16)
    if value > U64_MASK:
        logger.debug("rejecting hex string %r: exceeds 64 bits", hex_string)
        raise InvalidHexStringError(hex_string)
    return value


def to_hex(x: int) -> str:
    """Lowercase 0x-prefixed hex of the raw value. Inverse of from_hex."""
    _check_u64(x)
    return f"0x{x:x}"


def serialize(x: int) -> bytes:
    return to_bytes_be(x)


def deserialize(data: bytes) -> int:
    try:
        return from_bytes_be(data)
    except ByteLengthError as exc:
        raise DeserializationError(exc.expected, exc.actual, exc.byteorder) from exc
