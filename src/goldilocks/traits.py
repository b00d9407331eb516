"""Capability interfaces a field type can satisfy.

Structural protocols: a field plugs into higher-level code by providing the
methods, not by inheriting from anything here. Field capability sets work on
the base type (a plain int); byte capabilities work on element instances.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IsField(Protocol):
    """Arithmetic over base-type values."""

    @staticmethod
    def add(a: int, b: int) -> int: ...

    @staticmethod
    def sub(a: int, b: int) -> int: ...

    @staticmethod
    def neg(a: int) -> int: ...

    @staticmethod
    def mul(a: int, b: int) -> int: ...

    @staticmethod
    def div(a: int, b: int) -> int: ...

    @staticmethod
    def inv(a: int) -> int: ...

    @staticmethod
    def pow(a: int, e: int) -> int: ...

    @staticmethod
    def eq(a: int, b: int) -> bool: ...

    @staticmethod
    def zero() -> int: ...

    @staticmethod
    def one() -> int: ...

    @staticmethod
    def from_u64(x: int) -> int: ...

    @staticmethod
    def from_base_type(x: int) -> int: ...


@runtime_checkable
class IsPrimeField(IsField, Protocol):
    """A field of prime order with an integer representative."""

    @staticmethod
    def representative(a: int) -> int: ...

    @staticmethod
    def field_bit_size() -> int: ...

    @staticmethod
    def from_hex(hex_string: str) -> int: ...


@runtime_checkable
class ByteConversion(Protocol):
    def to_bytes_be(self) -> bytes: ...

    def to_bytes_le(self) -> bytes: ...

    @classmethod
    def from_bytes_be(cls, data: bytes): ...

    @classmethod
    def from_bytes_le(cls, data: bytes): ...


@runtime_checkable
class Serializable(Protocol):
    def serialize(self) -> bytes: ...


@runtime_checkable
class Deserializable(Protocol):
    @classmethod
    def deserialize(cls, data: bytes): ...
