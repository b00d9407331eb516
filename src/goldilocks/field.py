"""Goldilocks field capability set and element value type.

GoldilocksField exposes the field operations over the base type (a raw
64-bit int) and satisfies the IsField / IsPrimeField protocols.
FieldElement is the immutable value wrapper used by code that prefers
operators; it satisfies ByteConversion, Serializable and Deserializable.
"""

from goldilocks import codec, gf64
from goldilocks.gf64 import P


class GoldilocksField:
    """Capability set for GF(2^64 - 2^32 + 1) over raw int values."""

    MODULUS = P

    add = staticmethod(gf64.add)
    sub = staticmethod(gf64.sub)
    neg = staticmethod(gf64.neg)
    mul = staticmethod(gf64.mul)
    div = staticmethod(gf64.div)
    inv = staticmethod(gf64.inv)
    pow = staticmethod(gf64.power)
    eq = staticmethod(gf64.equal)
    equal = staticmethod(gf64.equal)

    zero = staticmethod(gf64.zero)
    one = staticmethod(gf64.one)
    generator = staticmethod(gf64.generator)

    from_raw_integer = staticmethod(gf64.from_raw)
    from_u64 = staticmethod(gf64.from_raw)
    from_base_type = staticmethod(gf64.from_raw)

    representative = staticmethod(gf64.representative)
    field_bit_size = staticmethod(gf64.field_bit_size)
    from_hex = staticmethod(codec.from_hex)


class FieldElement:
    """Element of GF(P) holding one raw 64-bit value.

    The raw value may be unreduced (e.g. straight from bytes); arithmetic
    results are always canonical, and equality and hashing compare
    canonical residues.
    """

    __slots__ = ('value',)

    def __init__(self, value: int = 0):
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if not 0 <= value <= gf64.U64_MASK:
            raise ValueError(f"Base value must fit in 64 bits, got {value}")
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- Construction ---

    @classmethod
    def new(cls, x: int) -> 'FieldElement':
        """Reduce any non-negative integer into a canonical element."""
        return cls(gf64.from_raw(x))

    @classmethod
    def zero(cls) -> 'FieldElement':
        return cls(gf64.zero())

    @classmethod
    def one(cls) -> 'FieldElement':
        return cls(gf64.one())

    @classmethod
    def generator(cls) -> 'FieldElement':
        return cls(gf64.generator())

    @classmethod
    def random(cls, rng=None) -> 'FieldElement':
        return cls(gf64.rand_element(rng))

    # --- Accessors ---

    def representative(self) -> int:
        return gf64.representative(self.value)

    def canonical(self) -> 'FieldElement':
        return type(self)(gf64.from_raw(self.value))

    def __int__(self):
        return gf64.from_raw(self.value)

    def __bool__(self):
        return gf64.from_raw(self.value) != 0

    def __repr__(self):
        return f"{type(self).__name__}({self.value})"

    # --- Arithmetic ---

    def _coerce(self, other):
        """Raw value of a same-type or int operand; None for anything else."""
        if isinstance(other, FieldElement):
            return other.value
        if isinstance(other, int):
            return other % P
        return None

    def __add__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return type(self)(gf64.add(self.value, b))

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return type(self)(gf64.sub(self.value, b))

    def __rsub__(self, other):
        a = self._coerce(other)
        if a is None:
            return NotImplemented
        return type(self)(gf64.sub(a, self.value))

    def __mul__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return type(self)(gf64.mul(self.value, b))

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return type(self)(gf64.div(self.value, b))

    def __rtruediv__(self, other):
        a = self._coerce(other)
        if a is None:
            return NotImplemented
        return type(self)(gf64.div(a, self.value))

    def __neg__(self):
        return type(self)(gf64.neg(self.value))

    def __pow__(self, e):
        if not isinstance(e, int):
            return NotImplemented
        if e < 0:
            return self.inv() ** (-e)
        return type(self)(gf64.power(self.value, e))

    def inv(self) -> 'FieldElement':
        return type(self)(gf64.inv(self.value))

    def __eq__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return gf64.equal(self.value, b)

    def __hash__(self):
        return hash(gf64.from_raw(self.value))

    # --- Byte conversion ---

    def to_bytes_be(self) -> bytes:
        return codec.to_bytes_be(self.value)

    def to_bytes_le(self) -> bytes:
        return codec.to_bytes_le(self.value)

    def __bytes__(self):
        return self.to_bytes_be()

    @classmethod
    def from_bytes_be(cls, data: bytes) -> 'FieldElement':
        return cls(codec.from_bytes_be(data))

    @classmethod
    def from_bytes_le(cls, data: bytes) -> 'FieldElement':
        return cls(codec.from_bytes_le(data))

    def serialize(self) -> bytes:
        return codec.serialize(self.value)

    @classmethod
    def deserialize(cls, data: bytes) -> 'FieldElement':
        return cls(codec.deserialize(data))

    @classmethod
    def from_hex(cls, hex_string: str) -> 'FieldElement':
        return cls(codec.from_hex(hex_string))

    def to_hex(self) -> str:
        return codec.to_hex(self.value)
