"""Scalar helpers: angle conversion, fast square roots, clamping and comparisons."""

from __future__ import annotations

import math
import struct

FLOAT_EPSILON = 1e-6
DOUBLE_EPSILON = 1e-12

_INVSQRT_MAGIC = 0x5FE6EB50C7B537A9
_U64_MASK = (1 << 64) - 1


def _to_f32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def invsqrt(number: float) -> float:
    """Approximate 1/sqrt(number) with the bit-level trick and two Newton steps."""
    half = number * 0.5
    (bits,) = struct.unpack("<q", struct.pack("<d", number))
    bits = (_INVSQRT_MAGIC - (bits >> 1)) & _U64_MASK
    (y,) = struct.unpack("<d", struct.pack("<Q", bits))
    y = y * (1.5 - (half * y * y))
    y = y * (1.5 - (half * y * y))
    return y


def fast_sqrt(x: float) -> float:
    """Approximate sqrt(x) as x * invsqrt(x)."""
    return x * invsqrt(x)


def clamp(x, low, high):
    """Restrict x to the closed range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def int_normalize(x: int, low: int, high: int) -> int:
    """Integer position of x in [low, high], truncated toward zero."""
    numerator = x - low
    denominator = high - low
    if denominator == 0:
        raise ZeroDivisionError("empty range: low equals high")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def normalize(x: float, low: float, high: float) -> float:
    """Relative position of x in [low, high], 0.0 at low and 1.0 at high."""
    if high == low:
        raise ZeroDivisionError("empty range: low equals high")
    return (x - low) / (high - low)


def sign(x: float) -> int:
    """Return 1, 0 or -1 according to the sign of x."""
    return int(x > 0) - int(x < 0)


def double_equal(a: float, b: float) -> bool:
    """Whether a and b differ by less than DOUBLE_EPSILON."""
    return abs(a - b) < DOUBLE_EPSILON


def float_equal(a: float, b: float) -> bool:
    """Whether a and b, taken at single precision, differ by less than DOUBLE_EPSILON."""
    return abs(_to_f32(_to_f32(a) - _to_f32(b))) < DOUBLE_EPSILON


def round_to(x: float, step: float) -> float:
    """Round x to the nearest multiple of step, halves rounding up."""
    return math.floor(x / step + 0.5) * step