"""Core geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable


@dataclass(frozen=True)
class Vec2:
    """2D point in a plane local to an extruded outline."""

    x: float
    y: float


@dataclass(frozen=True)
class Vec3:
    """3D vector in wall coordinates.

    x runs along the wall, y through the wall (inside to outside) and
    z upwards. All lengths are in millimeters.
    """

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec3:
        """Return this vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def of(cls, values: Iterable[float]) -> Vec3:
        """Build a vector from any 3-item iterable."""
        x, y, z = values
        return cls(float(x), float(y), float(z))


@dataclass(frozen=True)
class Bounds3D:
    """Axis-aligned bounding box given by its min and max corners."""

    min: Vec3
    max: Vec3

    EMPTY: ClassVar[Bounds3D]

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> Bounds3D:
        """Create the tightest box containing all points.

        Returns:
            Bounds3D.EMPTY when no points are given.
        """
        pts = list(points)
        if not pts:
            return cls.EMPTY
        return cls(
            Vec3(min(p.x for p in pts), min(p.y for p in pts), min(p.z for p in pts)),
            Vec3(max(p.x for p in pts), max(p.y for p in pts), max(p.z for p in pts)),
        )

    @classmethod
    def from_origin_size(cls, origin: Vec3, size: Vec3) -> Bounds3D:
        """Create bounds from a corner and a (possibly negative) size."""
        return cls.from_points([origin, origin + size])

    @classmethod
    def merge(cls, *bounds: Bounds3D) -> Bounds3D:
        """Merge boxes into the box enclosing all of them.

        Empty boxes are ignored; merging nothing yields Bounds3D.EMPTY.
        """
        non_empty = [b for b in bounds if not b.is_empty]
        if not non_empty:
            return cls.EMPTY
        return cls.from_points([p for b in non_empty for p in (b.min, b.max)])

    @property
    def is_empty(self) -> bool:
        return (
            self.min.x > self.max.x or self.min.y > self.max.y or self.min.z > self.max.z
        )

    @property
    def size(self) -> Vec3:
        if self.is_empty:
            return Vec3.zero()
        return self.max - self.min

    @property
    def volume(self) -> float:
        s = self.size
        return s.x * s.y * s.z

    def contains(self, other: Bounds3D, epsilon: float = 1e-6) -> bool:
        """Check whether another box lies inside this one."""
        return (
            other.min.x >= self.min.x - epsilon
            and other.min.y >= self.min.y - epsilon
            and other.min.z >= self.min.z - epsilon
            and other.max.x <= self.max.x + epsilon
            and other.max.y <= self.max.y + epsilon
            and other.max.z <= self.max.z + epsilon
        )

    def intersection_volume(self, other: Bounds3D) -> float:
        """Volume shared by two boxes (0 when they only touch)."""
        dx = min(self.max.x, other.max.x) - max(self.min.x, other.min.x)
        dy = min(self.max.y, other.max.y) - max(self.min.y, other.min.y)
        dz = min(self.max.z, other.max.z) - max(self.min.z, other.min.z)
        if dx <= 0 or dy <= 0 or dz <= 0:
            return 0.0
        return dx * dy * dz


Bounds3D.EMPTY = Bounds3D(
    Vec3(float("inf"), float("inf"), float("inf")),
    Vec3(float("-inf"), float("-inf"), float("-inf")),
)


@dataclass(frozen=True)
class Transform:
    """Placement of an element: a translation with identity rotation."""

    translation: Vec3 = field(default_factory=Vec3.zero)

    def apply(self, point: Vec3) -> Vec3:
        return point + self.translation

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def from_translation(cls, translation: Vec3) -> Transform:
        return cls(translation=translation)
