"""Straw-bale layout: tiling a wall area with bales, flakes and stuffing."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterator

from ..area import WallConstructionArea
from ..elements import (
    ConstructionElement,
    PartInfo,
    create_construction_element,
    create_cuboid,
)
from ..exceptions import InvalidConfigurationError, MaterialNotFoundError
from ..materials import (
    DEFAULT_STRAW_MATERIAL_ID,
    MaterialResolver,
    StrawbaleMaterial,
    resolve_default_material,
)
from ..results import (
    ResultSequence,
    numbered_results,
    yield_element,
    yield_error,
    yield_warning,
)
from ..tags import (
    TAG_FULL_BALE,
    TAG_PARTIAL_BALE,
    TAG_STRAW_FLAKES,
    TAG_STRAW_INFILL,
    TAG_STRAW_STUFFED,
    Tag,
)
from ..value_objects import Vec3

logger = logging.getLogger(__name__)

_EPSILON = 1e-9


class BaleCategory(str, Enum):
    """How a straw tile is produced on site."""

    FULL = "full-bale"
    PARTIAL = "partial-bale"
    FLAKES = "straw-flakes"
    STUFFED = "straw-stuffed"

    @property
    def tag(self) -> Tag:
        return _CATEGORY_TAGS[self]


_CATEGORY_TAGS = {
    BaleCategory.FULL: TAG_FULL_BALE,
    BaleCategory.PARTIAL: TAG_PARTIAL_BALE,
    BaleCategory.FLAKES: TAG_STRAW_FLAKES,
    BaleCategory.STUFFED: TAG_STRAW_STUFFED,
}


def classify_bale(
    length: float, height: float, material: StrawbaleMaterial
) -> BaleCategory:
    """Classify a straw tile by its own size against the bale envelope.

    The thresholds encode carpentry heuristics and are compared exactly:
    a bale may be cut down in height by less than ``top_cutoff_limit``,
    pieces longer than half a minimum bale are still handled as bales,
    and anything thicker than ``flake_size`` can be placed as flakes.
    """
    tol = material.tolerance
    height_fits = abs(height - material.bale_height) <= tol
    height_trimmable = 0 < material.bale_height - height < material.top_cutoff_limit
    length_in_range = (
        material.bale_min_length - tol <= length <= material.bale_max_length + tol
    )

    if height_fits and length_in_range:
        return BaleCategory.FULL
    if (height_fits or height_trimmable) and (
        length > material.bale_min_length / 2 or length_in_range
    ):
        return BaleCategory.PARTIAL
    if min(length, height) > material.flake_size:
        return BaleCategory.FLAKES
    return BaleCategory.STUFFED


def resolve_straw_material(
    material_id: str | None, resolve_material: MaterialResolver | None = None
) -> StrawbaleMaterial:
    """Look up the strawbale material used for a layout.

    Raises:
        MaterialNotFoundError: If the id is unknown.
        InvalidConfigurationError: If the material is not a strawbale.
    """
    resolve = resolve_material or resolve_default_material
    material_id = material_id or DEFAULT_STRAW_MATERIAL_ID
    material = resolve(material_id)
    if material is None:
        raise MaterialNotFoundError(material_id)
    if not isinstance(material, StrawbaleMaterial):
        raise InvalidConfigurationError(
            f"Material {material_id} is not a strawbale material ({material.type.value})"
        )
    return material


def _tile(
    material: StrawbaleMaterial,
    position: Vec3,
    length: float,
    depth: float,
    height: float,
    category: BaleCategory | None = None,
) -> ConstructionElement:
    category = category or classify_bale(length, height, material)
    size = Vec3(length, depth, height)
    return create_construction_element(
        material.id,
        create_cuboid(position, size),
        tags=[category.tag],
        part_info=PartInfo(kind="strawbale", size=size),
    )


def _tile_row(
    material: StrawbaleMaterial,
    area: WallConstructionArea,
    z: float,
    height: float,
    step: float,
    category: BaleCategory | None = None,
) -> Iterator[ConstructionElement]:
    """Tile one row along the wall, last tile taking what is left."""
    origin = area.position
    x = 0.0
    while area.width - x > _EPSILON:
        length = min(step, area.width - x)
        yield _tile(
            material,
            Vec3(origin.x + x, origin.y, origin.z + z),
            length,
            area.depth,
            height,
            category,
        )
        x += length


def _course_heights(
    height: float, material: StrawbaleMaterial
) -> tuple[list[float], float]:
    """Split a height into full bale courses and a remainder.

    A height within tolerance of a whole number of courses is absorbed by
    the top course, so no remainder row is created for it.
    """
    bale_height = material.bale_height
    count = math.floor((height + material.tolerance) / bale_height)
    courses = [bale_height] * count
    remainder = height - count * bale_height
    if courses and remainder <= material.tolerance:
        courses[-1] += remainder
        remainder = 0.0
    return courses, remainder


def _construct_bales(
    area: WallConstructionArea, material: StrawbaleMaterial
) -> ResultSequence:
    """Tile full courses, then the remainder row on top.

    A remainder within ``top_cutoff_limit`` of a full bale is laid as one
    more course of bales cut down to the remainder height, not as flakes.
    """
    courses, remainder = _course_heights(area.height, material)
    logger.debug(
        f"Tiling straw area {area.width:g}x{area.height:g}: "
        f"{len(courses)} courses, remainder {remainder:g}"
    )

    z = 0.0
    for course_height in courses:
        for bale in _tile_row(
            material, area, z, course_height, material.bale_max_length
        ):
            yield yield_element(bale)
        z += course_height

    if remainder <= 0:
        return

    if material.bale_height - remainder < material.top_cutoff_limit:
        logger.debug(f"Top course cut down to {remainder:g}")
        tiles = _tile_row(material, area, z, remainder, material.bale_max_length)
    elif remainder > material.flake_size:
        logger.debug(f"Top row of {remainder:g} filled with flakes")
        tiles = _tile_row(material, area, z, remainder, material.bale_height)
    else:
        logger.debug(f"Top row of {remainder:g} stuffed")
        tiles = iter(
            [
                _tile(
                    material,
                    Vec3(area.position.x, area.position.y, area.position.z + z),
                    area.width,
                    area.depth,
                    remainder,
                    BaleCategory.STUFFED,
                )
            ]
        )
    for tile in tiles:
        yield yield_element(tile)


def _construct_placeholder(
    area: WallConstructionArea, material: StrawbaleMaterial
) -> ResultSequence:
    nominal = material.bale_width
    placeholder = create_construction_element(
        material.id,
        create_cuboid(area.position, area.size),
        tags=[TAG_STRAW_INFILL],
    )
    yield yield_element(placeholder)

    params = {"depth": area.depth, "bale_width": nominal}
    if area.depth > nominal:
        logger.debug(f"Wall depth {area.depth:g} too thick for bale width {nominal:g}")
        yield yield_error(
            [placeholder],
            "Wall is too thick for a single strawbale",
            group_key=f"straw-too-thick:{material.id}",
            message_key="construction.straw.too_thick",
            params=params,
        )
    else:
        logger.debug(f"Wall depth {area.depth:g} too thin for bale width {nominal:g}")
        yield yield_warning(
            [placeholder],
            "Wall is too thin for a single strawbale",
            group_key=f"straw-too-thin:{material.id}",
            message_key="construction.straw.too_thin",
            params=params,
        )


def construct_straw(
    area: WallConstructionArea,
    material_id: str | None = None,
    *,
    resolve_material: MaterialResolver | None = None,
) -> ResultSequence:
    """Fill a wall area with straw bales.

    When the area depth matches the bale width, the area is tiled in
    courses of ``bale_height``, each course split along the wall into
    bales of ``bale_max_length``. A short top row is cut from bales,
    filled with flakes or stuffed, depending on its height. Sloped tops
    are ignored; the area's bounding box is tiled.

    When the depth does not match, a single placeholder element covers
    the area and an error (too thick) or a warning (too thin) is reported.

    Args:
        area: Region to fill.
        material_id: Strawbale material id; None uses the default straw.
        resolve_material: Material lookup; defaults to the built-in catalog.

    Returns:
        Lazy sequence of construction results.

    Raises:
        MaterialNotFoundError: If the material id is unknown.
        InvalidConfigurationError: If the material is not a strawbale.
    """
    material = resolve_straw_material(material_id, resolve_material)

    if area.width <= 0 or area.height <= 0:
        return iter(())

    if abs(area.depth - material.bale_width) > material.tolerance:
        return numbered_results(_construct_placeholder(area, material))

    return numbered_results(_construct_bales(area, material))
