"""
Arbitrary-precision integer capability used by the generator.

The generator never touches an integer's internal representation. It only
needs to query the bit length, read and write individual bits, and build a
value from a non-negative magnitude. Anything implementing BigIntegerLike can
be passed to LCGRandom.next_large_number() or fill_big_integer_bits().

Types that can also overwrite a whole run of bits at once may implement
SupportsBitRange. fill_big_integer_bits() then writes one chunk per call
instead of one bit per call; the resulting value is identical either way.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BigIntegerLike(Protocol):
    """Minimal bit-level interface of an arbitrary-precision integer."""

    @classmethod
    def from_magnitude(cls, magnitude: int) -> BigIntegerLike: ...

    def bit_length(self) -> int: ...

    def get_bit(self, index: int) -> bool: ...

    def set_bit(self, index: int, value: bool) -> None: ...

    def __int__(self) -> int: ...


@runtime_checkable
class SupportsBitRange(Protocol):
    """Optional bulk setter for BigIntegerLike types."""

    def set_bit_range(self, start_bit: int, num_bits: int, bits: int) -> None: ...


class BigInteger:
    """
    Mutable non-negative arbitrary-precision integer.

    Python's int is immutable, so bit-range fills need a wrapper that can be
    changed in place. Values compare and hash like the int they hold.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if value < 0:
            raise ValueError(f"BigInteger holds magnitudes only, got {value}")
        self._value = int(value)

    @classmethod
    def from_magnitude(cls, magnitude: int) -> BigInteger:
        return cls(magnitude)

    @classmethod
    def from_bytes(cls, data: bytes) -> BigInteger:
        """Build from a little-endian byte buffer."""
        return cls(int.from_bytes(data, "little", signed=False))

    def bit_length(self) -> int:
        return self._value.bit_length()

    def get_highest_bit(self) -> int:
        """Index of the highest set bit, or -1 for zero."""
        return self._value.bit_length() - 1

    def get_bit(self, index: int) -> bool:
        if index < 0:
            raise ValueError(f"Bit index must be non-negative, got {index}")
        return (self._value >> index) & 1 == 1

    def set_bit(self, index: int, value: bool = True) -> None:
        if index < 0:
            raise ValueError(f"Bit index must be non-negative, got {index}")
        if value:
            self._value |= 1 << index
        else:
            self._value &= ~(1 << index)

    def set_bit_range(self, start_bit: int, num_bits: int, bits: int) -> None:
        """Replace bits [start_bit, start_bit + num_bits) with the low bits of `bits`."""
        if start_bit < 0 or num_bits < 0:
            raise ValueError("Bit range must be non-negative")
        mask = ((1 << num_bits) - 1) << start_bit
        self._value = (self._value & ~mask) | ((bits << start_bit) & mask)

    def to_bytes(self) -> bytes:
        return self._value.to_bytes(max(1, (self._value.bit_length() + 7) // 8), "little")

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        try:
            return self._value == int(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other) -> bool:
        return self._value < int(other)

    def __le__(self, other) -> bool:
        return self._value <= int(other)

    def __gt__(self, other) -> bool:
        return self._value > int(other)

    def __ge__(self, other) -> bool:
        return self._value >= int(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BigInteger({self._value:#x})"
