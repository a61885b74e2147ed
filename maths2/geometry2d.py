"""Two-dimensional shapes, rays and overlap tests."""

from __future__ import annotations

import math
from dataclasses import dataclass

from maths2.vectors import Vec2


def point_direction(origin: Vec2, target: Vec2) -> float:
    """Angle in radians of the direction from origin to target."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return Vec2(x1, y1).distance(Vec2(x2, y2))


@dataclass(frozen=True)
class Ray2:
    """Ray with an origin and a unit direction."""

    origin: Vec2
    direction: Vec2

    @classmethod
    def from_angle(cls, origin: Vec2, angle: float) -> Ray2:
        return cls(Vec2(origin.x, origin.y), Vec2.from_angle(angle))

    @classmethod
    def from_points(cls, origin: Vec2, target: Vec2) -> Ray2:
        return cls(origin, (target - origin).normalized())

    def point_at(self, t: float) -> Vec2:
        """Point at distance parameter t along the ray."""
        return self.origin + self.direction.scale(t)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its corner and size."""

    pos: Vec2
    size: Vec2

    @classmethod
    def from_bounds(cls, low, high) -> Rect:
        """Rectangle spanning from low to the x and y of high."""
        return cls(low, Vec2(high.x - low.x, high.y - low.y))

    def contains_point(self, point: Vec2) -> bool:
        """Whether point lies inside or on the edge."""
        return (
            self.pos.x <= point.x <= self.pos.x + self.size.x
            and self.pos.y <= point.y <= self.pos.y + self.size.y
        )

    def overlaps(self, other: Rect) -> bool:
        """Whether the interiors of the two rectangles intersect."""
        return (
            self.pos.x < other.pos.x + other.size.x
            and self.pos.x + self.size.x > other.pos.x
            and self.pos.y < other.pos.y + other.size.y
            and self.pos.y + self.size.y > other.pos.y
        )


@dataclass(frozen=True)
class RectBounds:
    """Axis-aligned rectangle given by its minimum and maximum corners."""

    low: Vec2
    high: Vec2

    def to_rect(self) -> Rect:
        return Rect(self.low, self.high - self.low)

    def contains_point(self, point: Vec2) -> bool:
        return (
            self.low.x <= point.x <= self.high.x
            and self.low.y <= point.y <= self.high.y
        )


@dataclass(frozen=True)
class Circle:
    """Circle given by its centre and radius."""

    pos: Vec2
    radius: float

    def contains_point(self, point: Vec2) -> bool:
        return point.distance2(self.pos) <= self.radius * self.radius

    def overlaps_circle(self, other: Circle) -> bool:
        r = self.radius + other.radius
        return self.pos.distance2(other.pos) <= r * r

    def overlaps_rect(self, rect: Rect) -> bool:
        closest = Vec2(
            max(rect.pos.x, min(self.pos.x, rect.pos.x + rect.size.x)),
            max(rect.pos.y, min(self.pos.y, rect.pos.y + rect.size.y)),
        )
        return self.pos.distance2(closest) <= self.radius * self.radius


def _signed_area(p1: Vec2, p2: Vec2, p3: Vec2) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


@dataclass(frozen=True)
class Triangle:
    """Triangle given by its three corners."""

    a: Vec2
    b: Vec2
    c: Vec2

    def contains_point(self, point: Vec2) -> bool:
        """Whether point lies inside or on an edge, for either winding."""
        areas = (
            _signed_area(point, self.a, self.b),
            _signed_area(point, self.b, self.c),
            _signed_area(point, self.c, self.a),
        )
        has_neg = any(d < 0.0 for d in areas)
        has_pos = any(d > 0.0 for d in areas)
        return not (has_neg and has_pos)