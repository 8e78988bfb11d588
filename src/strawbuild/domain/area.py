"""Wall construction area: the region a layout algorithm fills."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .value_objects import Bounds3D, Vec2, Vec3

_EPSILON = 1e-9


@dataclass(frozen=True)
class WallConstructionArea:
    """A box-shaped wall region, optionally with a sloped top edge.

    The area spans ``size`` from ``position``: x along the wall, y through
    the wall and z upwards. ``top_offsets`` describe a non-horizontal top
    edge as ``(x, dz)`` pairs, x local to the area start and dz <= 0 the
    amount the top edge drops below ``height`` at that point. Without
    offsets the top is flat at ``height``.

    Attributes:
        position: Origin corner of the area.
        size: Width (x), depth (y) and height (z) of the area.
        top_offsets: Optional sorted sequence of top edge offsets.
    """

    position: Vec3
    size: Vec3
    top_offsets: tuple[Vec2, ...] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.size.x < 0 or self.size.y < 0 or self.size.z < 0:
            raise ValueError("Wall area dimensions cannot be negative")
        if self.top_offsets is not None:
            offsets = tuple(
                o if isinstance(o, Vec2) else Vec2(float(o[0]), float(o[1]))
                for o in self.top_offsets
            )
            if not offsets:
                offsets = None
            elif any(b.x < a.x for a, b in zip(offsets, offsets[1:])):
                raise ValueError("Top offsets must be sorted along the wall")
            object.__setattr__(self, "top_offsets", offsets)

    @classmethod
    def from_values(
        cls,
        position: Sequence[float],
        size: Sequence[float],
        top_offsets: Sequence[Sequence[float]] | None = None,
    ) -> WallConstructionArea:
        """Build an area from plain number sequences."""
        offsets = (
            tuple(Vec2(float(x), float(dz)) for x, dz in top_offsets)
            if top_offsets
            else None
        )
        return cls(Vec3.of(position), Vec3.of(size), offsets)

    @property
    def width(self) -> float:
        """Extent along the wall."""
        return self.size.x

    @property
    def depth(self) -> float:
        """Extent through the wall (wall thickness)."""
        return self.size.y

    @property
    def height(self) -> float:
        """Nominal (maximum) height of the area."""
        return self.size.z

    @property
    def bounds(self) -> Bounds3D:
        return Bounds3D(self.position, self.position + self.size)

    def offset_at(self, x: float) -> float:
        """Top edge offset at local position x, linearly interpolated."""
        if not self.top_offsets:
            return 0.0
        offsets = self.top_offsets
        if x <= offsets[0].x:
            return offsets[0].y
        if x >= offsets[-1].x:
            return offsets[-1].y
        for before, after in zip(offsets, offsets[1:]):
            if before.x <= x <= after.x:
                span = after.x - before.x
                if span == 0:
                    return after.y
                ratio = (x - before.x) / span
                return before.y + ratio * (after.y - before.y)
        return offsets[-1].y

    def height_at(self, x: float) -> float:
        """Height of the top edge at local position x."""
        return self.height + self.offset_at(x)

    @property
    def height_at_start(self) -> float:
        return self.height_at(0.0)

    @property
    def height_at_end(self) -> float:
        return self.height_at(self.width)

    @property
    def min_height(self) -> float:
        """Lowest point of the top edge; equals height for a flat top."""
        if not self.top_offsets:
            return self.height
        return self.height + min(0.0, min(o.y for o in self.top_offsets))

    @property
    def max_height(self) -> float:
        if not self.top_offsets:
            return self.height
        return self.height + max(0.0, max(o.y for o in self.top_offsets))

    @property
    def is_flat(self) -> bool:
        return self.min_height == self.height

    def get_sub_area(self, start: float, length: float) -> WallConstructionArea:
        """Cut a slice of the area along the wall.

        Args:
            start: Local x where the slice begins.
            length: Extent of the slice along the wall.

        Returns:
            A new area with re-based top offsets.

        Raises:
            ValueError: If the slice leaves the area.
        """
        end = start + length
        if start < -_EPSILON or length < 0 or end > self.width + _EPSILON:
            raise ValueError("Out of bounds")

        offsets: tuple[Vec2, ...] | None = None
        if self.top_offsets:
            inner = [
                Vec2(o.x - start, o.y) for o in self.top_offsets if start < o.x < end
            ]
            offsets = (
                Vec2(0.0, self.offset_at(start)),
                *inner,
                Vec2(length, self.offset_at(end)),
            )

        return WallConstructionArea(
            Vec3(self.position.x + start, self.position.y, self.position.z),
            Vec3(length, self.depth, self.height),
            offsets,
        )
