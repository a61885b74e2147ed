"""Three-dimensional shapes, planes, rays and overlap tests."""

from __future__ import annotations

from dataclasses import dataclass

from maths2.scalar import FLOAT_EPSILON, float_equal
from maths2.vectors import Vec3


@dataclass(frozen=True)
class Plane3:
    """Plane of points p with normal.dot(p) + d == 0."""

    normal: Vec3
    d: float

    @classmethod
    def from_points(cls, a: Vec3, b: Vec3, c: Vec3) -> Plane3:
        """Plane through three points, with normal (b - a) x (c - a) made unit."""
        normal = (b - a).cross(c - a).normalized()
        return cls(normal, -normal.dot(a))

    def signed_distance(self, point: Vec3) -> float:
        """Distance from the plane, positive on the side the normal points to."""
        return self.normal.dot(point) + self.d

    def project(self, point: Vec3) -> Vec3:
        """Orthogonal projection of point onto the plane."""
        return point - self.normal.scale(self.signed_distance(point))

    def contains_point(self, point: Vec3) -> bool:
        """Whether point lies on the plane, within float tolerance."""
        return float_equal(self.signed_distance(point), 0.0)


@dataclass(frozen=True)
class Ray3:
    """Ray with an origin and a unit direction."""

    origin: Vec3
    direction: Vec3

    @classmethod
    def from_points(cls, origin: Vec3, target: Vec3) -> Ray3:
        return cls(origin, (target - origin).normalized())

    @classmethod
    def from_direction(cls, origin: Vec3, direction: Vec3) -> Ray3:
        return cls(origin, direction.normalized())

    def point_at(self, t: float) -> Vec3:
        """Point at distance parameter t along the ray."""
        return self.origin + self.direction.scale(t)

    def hit_plane(self, plane: Plane3) -> float | None:
        """Parameter t where the ray meets plane, or None if parallel or behind."""
        denom = plane.normal.dot(self.direction)
        if abs(denom) < FLOAT_EPSILON:
            return None
        t = -(plane.normal.dot(self.origin) + plane.d) / denom
        return t if t >= 0 else None


@dataclass(frozen=True)
class BBox:
    """Axis-aligned box given by its minimum and maximum corners."""

    low: Vec3
    high: Vec3

    def contains_point(self, point: Vec3) -> bool:
        """Whether point lies inside or on the surface."""
        return (
            self.low.x <= point.x <= self.high.x
            and self.low.y <= point.y <= self.high.y
            and self.low.z <= point.z <= self.high.z
        )

    def overlaps(self, other: BBox) -> bool:
        """Whether the interiors of the two boxes intersect."""
        return not (
            self.high.x <= other.low.x
            or self.low.x >= other.high.x
            or self.high.y <= other.low.y
            or self.low.y >= other.high.y
            or self.high.z <= other.low.z
            or self.low.z >= other.high.z
        )


@dataclass(frozen=True)
class Sphere:
    """Sphere given by its centre and radius."""

    pos: Vec3
    radius: float

    def contains_point(self, point: Vec3) -> bool:
        return point.distance2(self.pos) <= self.radius * self.radius

    def overlaps_sphere(self, other: Sphere) -> bool:
        r = self.radius + other.radius
        return self.pos.distance2(other.pos) <= r * r

    def overlaps_bbox(self, bbox: BBox) -> bool:
        closest = Vec3(
            max(bbox.low.x, min(self.pos.x, bbox.high.x)),
            max(bbox.low.y, min(self.pos.y, bbox.high.y)),
            max(bbox.low.z, min(self.pos.z, bbox.high.z)),
        )
        return self.pos.distance2(closest) <= self.radius * self.radius


@dataclass(frozen=True)
class Triangle3:
    """Triangle in space given by its three corners."""

    a: Vec3
    b: Vec3
    c: Vec3

    def contains_point(self, point: Vec3) -> bool:
        """Whether point lies in the triangle's plane and inside or on an edge."""
        normal = (self.b - self.a).cross(self.c - self.a).normalized()
        if abs((point - self.a).dot(normal)) > FLOAT_EPSILON:
            return False
        a = self.a - point
        b = self.b - point
        c = self.c - point
        u = b.cross(c)
        return u.dot(c.cross(a)) >= 0 and u.dot(a.cross(b)) >= 0