"""Seedable xoshiro256** generator, seeded through splitmix64."""

from __future__ import annotations

import math
import struct

_U64_MASK = (1 << 64) - 1
_DEFAULT_SEED = 0xBEEFCACA54345678
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB
_DOUBLE_UNIT = 1.0 / (1 << 53)


def _f32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _U64_MASK


def splitmix64(seed: int) -> tuple[int, int]:
    """Advance a splitmix64 seed and return ``(next_seed, output)``."""
    seed = (seed + _GOLDEN_GAMMA) & _U64_MASK
    z = seed
    z = ((z ^ (z >> 30)) * _MIX1) & _U64_MASK
    z = ((z ^ (z >> 27)) * _MIX2) & _U64_MASK
    return seed, z ^ (z >> 31)


class Rng:
    """xoshiro256** pseudo-random number generator."""

    def __init__(self, seed: int = 0) -> None:
        seed &= _U64_MASK
        if seed == 0:
            seed = _DEFAULT_SEED
        state = []
        for _ in range(4):
            seed, value = splitmix64(seed)
            state.append(value)
        self._state = state

    @property
    def state(self) -> tuple[int, int, int, int]:
        """The four 64-bit words of the internal state."""
        return tuple(self._state)

    def next_u64(self) -> int:
        """Return the next raw 64-bit output."""
        s = self._state
        result = (_rotl((s[1] * 5) & _U64_MASK, 7) * 9) & _U64_MASK
        t = (s[1] << 17) & _U64_MASK
        s[2] ^= s[0]
        s[3] ^= s[1]
        s[1] ^= s[2]
        s[0] ^= s[3]
        s[2] ^= t
        s[3] = _rotl(s[3], 45)
        return result

    def random(self) -> float:
        """Uniform double in [0.0, 1.0) built from the top 53 bits."""
        return (self.next_u64() >> 11) * _DOUBLE_UNIT

    def int_range(self, low: int, high: int) -> int:
        """Integer in the closed range [low, high]."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        return low + self.next_u64() % (high - low + 1)

    def float_range(self, low: float, high: float) -> float:
        """Single-precision value in [low, high)."""
        low32 = _f32(low)
        span = _f32(_f32(high) - low32)
        return _f32(low32 + _f32(_f32(self.random()) * span))

    def double_range(self, low: float, high: float) -> float:
        """Double-precision value in [low, high)."""
        return low + self.random() * (high - low)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_u64()