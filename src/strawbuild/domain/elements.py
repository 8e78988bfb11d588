"""Construction elements and their shapes."""

from __future__ import annotations

import itertools
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Literal

from .tags import Tag
from .value_objects import Bounds3D, Transform, Vec2, Vec3

ExtrusionPlane = Literal["xy", "xz", "yz"]


@dataclass(frozen=True)
class Cuboid:
    """Axis-aligned box starting at ``offset`` with extent ``size``."""

    offset: Vec3
    size: Vec3

    type: Literal["cuboid"] = field(default="cuboid", init=False)

    def local_bounds(self) -> Bounds3D:
        return Bounds3D.from_origin_size(self.offset, self.size)


@dataclass(frozen=True)
class ExtrudedPolygon:
    """A planar outline extruded perpendicular to its plane.

    Plane ``xy`` places outline points at (x, y) and extrudes along +z,
    ``xz`` places them at (x, z) and extrudes along +y, ``yz`` places them
    at (y, z) and extrudes along +x.
    """

    outline: tuple[Vec2, ...]
    plane: ExtrusionPlane
    extrude_length: float

    type: Literal["extruded-polygon"] = field(default="extruded-polygon", init=False)

    def __post_init__(self) -> None:
        if len(self.outline) < 3:
            raise ValueError("Outline needs at least three points")
        if self.plane not in ("xy", "xz", "yz"):
            raise ValueError(f"Unknown extrusion plane: {self.plane}")

    def _to_3d(self, point: Vec2, depth: float) -> Vec3:
        if self.plane == "xy":
            return Vec3(point.x, point.y, depth)
        if self.plane == "xz":
            return Vec3(point.x, depth, point.y)
        return Vec3(depth, point.x, point.y)

    def vertices(self) -> list[Vec3]:
        """Corner points of both caps of the extrusion."""
        return [
            self._to_3d(p, d) for d in (0.0, self.extrude_length) for p in self.outline
        ]

    def local_bounds(self) -> Bounds3D:
        return Bounds3D.from_points(self.vertices())


Shape = Cuboid | ExtrudedPolygon


@dataclass(frozen=True)
class PartInfo:
    """Bill-of-materials metadata of an element.

    Attributes:
        kind: Part kind, e.g. "post", "strawbale", "triangular-batten".
        size: Nominal box size of the part, if it has one.
    """

    kind: str
    size: Vec3 | None = None


def dimensional_part_info(kind: str, size: Vec3) -> PartInfo:
    """Part info for a part cut from dimensional stock."""
    return PartInfo(kind=kind, size=size)


# Elements created outside any id scope draw from this process-wide counter.
_unscoped_ids = itertools.count(1)
_scoped_ids: ContextVar[Iterator[int] | None] = ContextVar(
    "element_ids", default=None
)


@contextmanager
def element_id_scope(counter: Iterator[int] | None = None) -> Iterator[None]:
    """Number the elements created in the block from one counter.

    A scope opened while another is active is a no-op: nested layouts keep
    drawing ids from the outermost scope, so ids stay unique across it.
    """
    if _scoped_ids.get() is not None:
        yield
        return
    token = _scoped_ids.set(counter if counter is not None else itertools.count(1))
    try:
        yield
    finally:
        _scoped_ids.reset(token)


def next_element_id() -> str:
    """Allocate a new opaque element id."""
    counter = _scoped_ids.get()
    return f"element-{next(counter if counter is not None else _unscoped_ids)}"


@dataclass(frozen=True)
class ConstructionElement:
    """A single physical part produced by a layout algorithm.

    Elements are immutable once created; ``bounds`` is derived from the
    shape and the transform on construction and can never go stale.

    Attributes:
        id: Opaque id, unique per created element.
        material: Material id of the part.
        shape: Cuboid or extruded polygon in local coordinates.
        transform: Placement of the shape.
        tags: Descriptive tags for rendering and grouping.
        part_info: Optional bill-of-materials metadata.
        bounds: Axis-aligned box of the placed shape.
    """

    id: str
    material: str
    shape: Shape
    transform: Transform = field(default_factory=Transform.identity)
    tags: tuple[Tag, ...] = ()
    part_info: PartInfo | None = None

    bounds: Bounds3D = field(init=False)

    def __post_init__(self) -> None:
        local = self.shape.local_bounds()
        object.__setattr__(
            self,
            "bounds",
            Bounds3D(self.transform.apply(local.min), self.transform.apply(local.max)),
        )

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    @property
    def position(self) -> Vec3:
        """Min corner of the element's bounds."""
        return self.bounds.min

    @property
    def size(self) -> Vec3:
        """Extent of the element's bounds."""
        return self.bounds.size


def create_construction_element(
    material: str,
    shape: Shape,
    transform: Transform | None = None,
    tags: Iterable[Tag] = (),
    part_info: PartInfo | None = None,
) -> ConstructionElement:
    """Create an element with a freshly allocated id."""
    return ConstructionElement(
        id=next_element_id(),
        material=material,
        shape=shape,
        transform=transform or Transform.identity(),
        tags=tuple(tags),
        part_info=part_info,
    )


def create_cuboid(offset: Vec3, size: Vec3) -> Cuboid:
    return Cuboid(offset=offset, size=size)


def create_extruded_polygon(
    points: Iterable[tuple[float, float]],
    plane: ExtrusionPlane,
    extrude_length: float,
) -> ExtrudedPolygon:
    return ExtrudedPolygon(
        outline=tuple(Vec2(float(x), float(y)) for x, y in points),
        plane=plane,
        extrude_length=extrude_length,
    )
