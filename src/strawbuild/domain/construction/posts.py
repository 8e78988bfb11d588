"""Post layout: one full post or two thin posts with infill between them."""

from __future__ import annotations

import logging

from ..area import WallConstructionArea
from ..elements import (
    ConstructionElement,
    create_construction_element,
    create_cuboid,
    dimensional_part_info,
)
from ..exceptions import InvalidConfigurationError
from ..materials import DimensionalMaterial, MaterialResolver
from ..results import (
    ResultSequence,
    numbered_results,
    yield_element,
    yield_error,
    yield_warning,
)
from ..tags import TAG_POST
from ..value_objects import DoublePostConfig, FullPostConfig, PostConfig, Vec3

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{value:g}mm"


def _check_cross_section(
    posts: list[ConstructionElement],
    material_id: str,
    width: float,
    thickness: float,
    resolve_material: MaterialResolver,
) -> ResultSequence:
    """Warn when a dimensional post material has no matching section."""
    material = resolve_material(material_id)
    if not isinstance(material, DimensionalMaterial):
        return
    if material.has_cross_section(width, thickness):
        return

    available = ", ".join(str(s) for s in material.cross_sections)
    logger.debug(
        f"Post section {width:g}x{thickness:g} not available in {material_id}"
    )
    yield yield_warning(
        posts,
        f"Post dimensions ({_fmt(width)}x{_fmt(thickness)}) don't match "
        f"material dimensions ({available})",
        group_key=f"post-cross-section:{material_id}",
        message_key="construction.post.cross_section_mismatch",
        params={
            "width": width,
            "thickness": thickness,
            "material": material_id,
            "available": available,
        },
    )


def _construct_full_post(
    area: WallConstructionArea,
    config: FullPostConfig,
    resolve_material: MaterialResolver,
) -> ResultSequence:
    size = Vec3(config.width, area.depth, area.height)
    post = create_construction_element(
        config.material,
        create_cuboid(area.position, size),
        tags=[TAG_POST],
        part_info=dimensional_part_info("post", size),
    )
    yield yield_element(post)
    yield from _check_cross_section(
        [post], config.material, config.width, area.depth, resolve_material
    )


def _construct_double_post(
    area: WallConstructionArea,
    config: DoublePostConfig,
    resolve_material: MaterialResolver,
) -> ResultSequence:
    minimum_depth = 2 * config.thickness
    if area.depth < minimum_depth:
        logger.debug(
            f"Wall depth {area.depth:g} below double post minimum {minimum_depth:g}"
        )
        placeholder = create_construction_element(
            config.material,
            create_cuboid(area.position, Vec3(config.width, area.depth, area.height)),
        )
        yield yield_element(placeholder)
        yield yield_error(
            [placeholder],
            f"Wall thickness ({_fmt(area.depth)}) is not wide enough for double "
            f"posts requiring {_fmt(minimum_depth)} minimum",
            group_key=f"double-post-thickness:{config.material}",
            message_key="construction.post.double_too_thin",
            params={"depth": area.depth, "minimum": minimum_depth},
        )
        return

    post_size = Vec3(config.width, config.thickness, area.height)
    part_info = dimensional_part_info("post", post_size)
    origin = area.position

    first = create_construction_element(
        config.material,
        create_cuboid(origin, post_size),
        tags=[TAG_POST],
        part_info=part_info,
    )
    yield yield_element(first)

    second = create_construction_element(
        config.material,
        create_cuboid(
            Vec3(origin.x, origin.y + area.depth - config.thickness, origin.z),
            post_size,
        ),
        tags=[TAG_POST],
        part_info=part_info,
    )
    yield yield_element(second)

    infill_depth = area.depth - minimum_depth
    if infill_depth > 0:
        infill = create_construction_element(
            config.infill_material,
            create_cuboid(
                Vec3(origin.x, origin.y + config.thickness, origin.z),
                Vec3(config.width, infill_depth, area.height),
            ),
        )
        yield yield_element(infill)

    yield from _check_cross_section(
        [first, second],
        config.material,
        config.width,
        config.thickness,
        resolve_material,
    )


def construct_post(
    area: WallConstructionArea,
    config: PostConfig,
    resolve_material: MaterialResolver,
) -> ResultSequence:
    """Lay out a post at the start of a wall area.

    The post spans the whole depth and height of the area and is
    ``config.width`` wide along the wall.

    Args:
        area: Region the post stands in.
        config: Full or double post configuration.
        resolve_material: Material lookup for the cross-section check.

    Returns:
        Lazy sequence of construction results.

    Raises:
        InvalidConfigurationError: If config is not a known post variant.
            Raised on the call itself, before the sequence is consumed.
    """
    match config:
        case FullPostConfig():
            return numbered_results(
                _construct_full_post(area, config, resolve_material)
            )
        case DoublePostConfig():
            return numbered_results(
                _construct_double_post(area, config, resolve_material)
            )
        case _:
            raise InvalidConfigurationError(
                f"Invalid post type: {type(config).__name__}"
            )
