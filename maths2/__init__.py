"""Scalar helpers, easing curves, a seeded xoshiro256** RNG, vectors and simple 2D/3D geometry."""

__version__ = "0.1.0"
__all__ = ["scalar", "easing", "rng", "vectors", "geometry2d", "geometry3d"]