"""Blending helpers and easing curves mapping t in [0, 1] to a progress value."""

from __future__ import annotations

C1 = 1.70158
C2 = 2.5949
C3 = 2.70158


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def step(edge: float, x: float) -> float:
    """0.0 when x is below edge, 1.0 otherwise."""
    return 0.0 if x < edge else 1.0


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation of x between edge0 and edge1."""
    if x <= edge0:
        return 0.0
    if x >= edge1:
        return 1.0
    t = (x - edge0) / (edge1 - edge0)
    return t * t * (3.0 - 2.0 * t)


def ease_quad_in(t: float) -> float:
    return t * t


def ease_quad_out(t: float) -> float:
    return t * (2.0 - t)


def ease_quad_inout(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


def ease_cubic_in(t: float) -> float:
    return t * t * t


def ease_cubic_out(t: float) -> float:
    u = t - 1.0
    return u * u * u + 1.0


def ease_cubic_inout(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    u = 2.0 * t - 2.0
    return 0.5 * (u * u * u + 2.0)


def ease_back_in(t: float) -> float:
    return C3 * t * t * t - C1 * t * t


def ease_back_out(t: float) -> float:
    u = t - 1.0
    return 1.0 + C3 * u * u * u + C1 * u * u


def ease_back_inout(t: float) -> float:
    if t < 0.5:
        u = 2.0 * t
        return 0.5 * (u * u * ((C2 + 1.0) * u - C2))
    u = 2.0 * t - 2.0
    return 0.5 * (u * u * ((C2 + 1.0) * u + C2) + 2.0)


def _bounce_out(t: float) -> float:
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    if t < 2.0 / 2.75:
        u = t - 1.5 / 2.75
        return 7.5625 * u * u + 0.75
    if t < 2.5 / 2.75:
        u = t - 2.25 / 2.75
        return 7.5625 * u * u + 0.9375
    u = t - 2.625 / 2.75
    return 7.5625 * u * u + 0.984375


def ease_bounce_in(t: float) -> float:
    return 1.0 - _bounce_out(1.0 - t)


def ease_bounce_out(t: float) -> float:
    return _bounce_out(t)


def ease_bounce_inout(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1.0 - _bounce_out(1.0 - 2.0 * t))
    return 0.5 * (1.0 + _bounce_out(2.0 * t - 1.0))