"""
Deterministic linear-congruential random number generator.

The whole state is one 64-bit signed seed. Every output is derived from the
top bits of a 48-bit linear-congruential recurrence:

    seed = (seed * 0x5DEECE66D + 0xB) mod 2**48

All arithmetic is masked explicitly, so a given seed yields the same
sequence on every platform and interpreter. This generator is NOT suitable
for cryptographic use.
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar, Union

import structlog

from ..config import get_settings
from .big_integer import BigIntegerLike, SupportsBitRange
from .entropy import EntropySource, system_entropy

logger = structlog.get_logger(__name__)

T = TypeVar("T")

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
STATE_BITS = 48
STATE_MASK = (1 << STATE_BITS) - 1

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT31_MAX = 0x7FFFFFFF


def _to_int32(n: int) -> int:
    """Wrap to signed 32-bit two's complement."""
    n &= _MASK32
    return n - (1 << 32) if n & 0x80000000 else n


def _to_int64(n: int) -> int:
    """Wrap to signed 64-bit two's complement."""
    n &= _MASK64
    return n - (1 << 64) if n & 0x8000000000000000 else n


class LCGRandom:
    """
    A seeded pseudo-random generator.

    Construct with an explicit seed for a reproducible sequence, or with no
    seed to reseed from ambient entropy. Instances are not locked: one
    instance must only be used from one thread at a time. Use
    get_system_random() for a per-thread shared instance.
    """

    __slots__ = ("_seed", "_entropy", "is_system_random")

    def __init__(self, seed: Optional[int] = None, entropy: Optional[EntropySource] = None):
        """Initialize with a seed, or reseed randomly when seed is None."""
        self._entropy = entropy if entropy is not None else system_entropy
        self.is_system_random = False
        self._seed = 1

        if seed is None:
            self.set_seed_randomly()
        else:
            self._seed = _to_int64(seed)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    @property
    def seed(self) -> int:
        return self._seed

    def get_seed(self) -> int:
        """Return the raw state; LCGRandom(get_seed()) resumes the same sequence."""
        return self._seed

    def set_seed(self, new_seed: int) -> None:
        """Reset to a given seed. The following outputs restart deterministically."""
        self._warn_if_shared("set_seed")
        self._seed = _to_int64(new_seed)

    def combine_seed(self, value: int) -> None:
        """
        Merge a value into the current seed.

        The result depends on both the previous state and `value`, so this is
        not the same as set_seed(value).
        """
        self._warn_if_shared("combine_seed")
        self._mix(value)

    def set_seed_randomly(self) -> None:
        """
        Reseed from clocks, instance identity and a process-wide counter.

        The previous seed is folded in rather than replaced, so calling this
        repeatedly keeps adding entropy. Never use where results must be
        reproducible.
        """
        for value in self._entropy.gather(id(self)):
            self._mix(value)
        self._entropy.absorb(self._seed)

    def _mix(self, value: int) -> None:
        self._seed = _to_int64(self._seed ^ self.next_int64() ^ value)

    def _warn_if_shared(self, operation: str) -> None:
        if self.is_system_random and get_settings().warn_on_system_reseed:
            logger.warning(
                "system_random_reseeded",
                operation=operation,
                hint="create a private LCGRandom for reproducible sequences",
            )

    # ------------------------------------------------------------------
    # Primitive derivations
    # ------------------------------------------------------------------

    def _next_bits(self, bits: int) -> int:
        """Advance the state once and return its top `bits` bits, unsigned."""
        self._seed = (self._seed * MULTIPLIER + INCREMENT) & STATE_MASK
        return self._seed >> (STATE_BITS - bits)

    def next_int(self, max_value: Optional[int] = None) -> int:
        """
        Return the next random integer.

        With no argument the result covers the full signed 32-bit range.
        With `max_value` the result lies in [0, max_value); max_value must be
        positive and fit in a signed 32-bit int.
        """
        if max_value is None:
            return _to_int32(self._next_bits(32))

        assert 0 < max_value <= _INT31_MAX, f"max_value must be in (0, 2**31), got {max_value}"

        # Power of two: the top bits are uniform on their own
        if max_value & -max_value == max_value:
            return (max_value * self._next_bits(31)) >> 31

        while True:
            bits = self._next_bits(31)
            val = bits % max_value
            # Reject the incomplete last bucket near 2**31
            if bits - val + (max_value - 1) <= _INT31_MAX:
                return val

    def next_int_range(self, start: int, end: int) -> int:
        """Return a random integer in [start, end)."""
        assert end > start, f"empty range [{start}, {end})"
        return start + self.next_int(end - start)

    def next_int_in(self, value_range: range) -> int:
        """Return a random member of a step-1 range object."""
        assert value_range.step == 1, "only step-1 ranges are supported"
        return self.next_int_range(value_range.start, value_range.stop)

    def next_int64(self) -> int:
        """Return a signed 64-bit value built from two draws, high word first."""
        high = self._next_bits(32)
        low = self._next_bits(32)
        return _to_int64((high << 32) | low)

    def next_float(self) -> float:
        """Return a single-precision value in [0, 1)."""
        return self._next_bits(24) / float(1 << 24)

    def next_double(self) -> float:
        """Return a double-precision value in [0, 1), using two draws."""
        return ((self._next_bits(26) << 27) + self._next_bits(27)) / float(1 << 53)

    def next_bool(self) -> bool:
        """Return the parity of a 32-bit draw."""
        return bin(self._next_bits(32)).count("1") & 1 == 1

    # ------------------------------------------------------------------
    # Large numbers and bulk fills
    # ------------------------------------------------------------------

    def next_large_number(self, maximum_value: Union[int, BigIntegerLike]) -> Union[int, BigIntegerLike]:
        """
        Return a uniform value in [0, maximum_value).

        Accepts a plain int or a BigIntegerLike. Plain ints come back as
        ints; any other BigIntegerLike comes back as a new value of its own
        type, built with from_magnitude().
        """
        if isinstance(maximum_value, bool) or not isinstance(maximum_value, (int, BigIntegerLike)):
            raise TypeError(f"Unsupported big integer type: {type(maximum_value).__name__}")

        maximum = int(maximum_value)
        assert maximum > 0, f"maximum_value must be positive, got {maximum}"

        num_bits = maximum.bit_length()
        while True:
            if isinstance(maximum_value, int):
                candidate = self._next_magnitude(num_bits)
            else:
                candidate = type(maximum_value).from_magnitude(0)
                self.fill_big_integer_bits(candidate, 0, num_bits)
            if int(candidate) < maximum:
                return candidate

    def _next_magnitude(self, num_bits: int) -> int:
        """Draw a num_bits wide int with the fill_big_integer_bits() packing."""
        value = 0
        for chunk_start in range(0, num_bits, 32):
            width = min(32, num_bits - chunk_start)
            value |= (self._next_bits(32) & ((1 << width) - 1)) << chunk_start
        return value

    def fill_bits_randomly(self, buffer, size_in_bytes: Optional[int] = None) -> None:
        """
        Fill a writable buffer with random bytes.

        Every 4 bytes receive one 32-bit draw in little-endian order; a
        trailing 1-3 byte tail takes the low bytes of one more draw.
        """
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("Cannot fill a read-only buffer")

        if size_in_bytes is None:
            size_in_bytes = view.nbytes
        assert 0 <= size_in_bytes <= view.nbytes, "size_in_bytes exceeds the buffer"

        offset = 0
        while offset + 4 <= size_in_bytes:
            view[offset:offset + 4] = self._next_bits(32).to_bytes(4, "little")
            offset += 4

        tail = size_in_bytes - offset
        if tail:
            view[offset:size_in_bytes] = self._next_bits(32).to_bytes(4, "little")[:tail]

    def fill_big_integer_bits(self, target: BigIntegerLike, start_bit: int, num_bits: int) -> None:
        """
        Randomize bits [start_bit, start_bit + num_bits) of a big integer.

        Bits outside the range are left untouched. The range is walked in
        chunks aligned to multiples of 32 in the bit index; each chunk takes
        the low bits of one 32-bit draw.
        """
        assert start_bit >= 0 and num_bits >= 0, "bit range must be non-negative"

        bit = start_bit
        end = start_bit + num_bits
        bulk = isinstance(target, SupportsBitRange)

        while bit < end:
            chunk_end = min(end, (bit // 32 + 1) * 32)
            width = chunk_end - bit
            draw = self._next_bits(32)

            if bulk:
                target.set_bit_range(bit, width, draw)
            else:
                for k in range(width):
                    target.set_bit(bit + k, (draw >> k) & 1 == 1)
            bit = chunk_end

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def next_bytes(self, count: int) -> bytes:
        """Return `count` random bytes using the fill_bits_randomly() packing."""
        buffer = bytearray(count)
        self.fill_bits_randomly(buffer)
        return bytes(buffer)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int(len(seq))]

    def __repr__(self) -> str:
        return f"LCGRandom(seed={self._seed:#x})"
