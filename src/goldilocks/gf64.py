"""GF(p) field arithmetic over the Goldilocks prime p = 2^64 - 2^32 + 1.

All operations take raw 64-bit integers (the base type) and return the
canonical residue in [0, p). Inputs may be unreduced (>= p); they are
treated as their residue mod p.
Uses Python int for the 128-bit intermediate of a 64x64-bit multiply, then
folds it back with the Goldilocks identities instead of a full division.
"""

import secrets

from goldilocks.errors import ZeroInversionError

P = 0xFFFF_FFFF_0000_0001  # 2^64 - 2^32 + 1 = 18446744069414584321
EPSILON = (1 << 32) - 1    # 2^64 mod P
U64_MASK = (1 << 64) - 1
U32_MASK = (1 << 32) - 1

GENERATOR = 7
BIT_SIZE = (P - 1).bit_length()


def _reduce(x: int) -> int:
    """Fast reduction mod P using the Goldilocks prime structure.

    For x < 2^128 (product of two 64-bit numbers), write
    x = lo + hi_lo * 2^64 + hi_hi * 2^96. Since 2^64 = EPSILON and
    2^96 = -1 (mod P):
      x mod P = lo - hi_hi + hi_lo * EPSILON, with final corrections.
    """
    lo = x & U64_MASK
    hi = x >> 64
    hi_lo = hi & U32_MASK
    hi_hi = hi >> 32

    t = lo - hi_hi
    if t < 0:
        t += P
    # t < 2^64 and hi_lo * EPSILON <= P - 2^32, so t < 2P
    t += hi_lo * EPSILON
    if t >= P:
        t -= P
    return t


def from_raw(x: int) -> int:
    """Canonical representative of an arbitrary non-negative integer."""
    if x < 0:
        raise ValueError(f"Raw value must be non-negative, got {x}")
    if x >= P:
        return x % P
    return x


def representative(a: int) -> int:
    """The stored raw integer, as is. Canonical only if it came from from_raw."""
    return a


def equal(a: int, b: int) -> bool:
    """Compare two raw values by their canonical residues."""
    return from_raw(a) == from_raw(b)


def add(a: int, b: int) -> int:
    """(a + b) mod P."""
    return _reduce(a + b)


def sub(a: int, b: int) -> int:
    """(a + P - b) mod P."""
    return _reduce(a + P - from_raw(b))


def neg(a: int) -> int:
    """(P - a) mod P. neg(0) == 0."""
    return _reduce(P - from_raw(a))


def mul(a: int, b: int) -> int:
    """(a * b) mod P. Python int holds the 128-bit intermediate."""
    return _reduce(a * b)


def power(a: int, e: int) -> int:
    """a^e mod P by left-to-right square-and-multiply over the bits of e."""
    if e < 0:
        raise ValueError(f"Exponent must be non-negative, got {e}")
    base = from_raw(a)
    result = 1
    for i in range(e.bit_length() - 1, -1, -1):
        result = mul(result, result)
        if (e >> i) & 1:
            result = mul(result, base)
    return result


def inv(a: int) -> int:
    """Multiplicative inverse via Fermat's little theorem: a^(P-2) mod P."""
    if from_raw(a) == 0:
        raise ZeroInversionError("Cannot invert zero in GF(P)")
    return power(a, P - 2)


def div(a: int, b: int) -> int:
    """(a / b) mod P = a * b^(-1) mod P."""
    return mul(a, inv(b))


def zero() -> int:
    return 0


def one() -> int:
    return 1


def generator() -> int:
    """Fixed generator of the multiplicative group used by external protocols."""
    return GENERATOR


def field_bit_size() -> int:
    """Number of bits needed to represent P - 1."""
    return BIT_SIZE


def rand_element(rng=None) -> int:
    """Sample a uniform random element of GF(P) via rejection sampling.

    Draws 64 random bits, rejects if >= P.
    """
    while True:
        if rng is not None:
            r = rng.getrandbits(64)
        else:
            r = secrets.randbits(64)
        if r < P:
            return r


def rand_nonzero(rng=None) -> int:
    """Sample a uniform random nonzero element of GF(P)."""
    while True:
        r = rand_element(rng)
        if r != 0:
            return r
