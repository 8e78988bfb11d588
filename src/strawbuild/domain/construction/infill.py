"""Infill walls: straw bays alternating with posts along the wall."""

from __future__ import annotations

import logging

from ..area import WallConstructionArea
from ..elements import ConstructionElement, create_construction_element, create_cuboid
from ..exceptions import InvalidConfigurationError
from ..materials import MaterialResolver
from ..results import (
    ResultSequence,
    numbered_results,
    yield_and_collect_elements,
    yield_element,
    yield_error,
    yield_warning,
)
from ..tags import TAG_INFILL
from ..value_objects import DoublePostConfig, FullPostConfig, InfillConfig
from .posts import construct_post
from .straw import construct_straw, resolve_straw_material

logger = logging.getLogger(__name__)


def bale_bay_width(available: float, config: InfillConfig) -> float:
    """Width of the next straw bay given the space left along the wall.

    Bays are ``max_post_spacing`` wide. Near the end of the wall a bay is
    shortened so that the following post, plus a minimal straw bay where
    one fits, still has room.
    """
    spacing = config.max_post_spacing
    post_width = config.posts.width
    bay_and_post = spacing + post_width

    if available < spacing:
        return available
    if bay_and_post < available < bay_and_post + config.min_straw_space:
        return available - config.min_straw_space - post_width
    if available < bay_and_post:
        return available - post_width
    return spacing


def _error(
    area: WallConstructionArea, config: InfillConfig, description: str, key: str
) -> ResultSequence:
    placeholder = create_construction_element(
        config.posts.material,
        create_cuboid(area.position, area.size),
        tags=[TAG_INFILL],
    )
    yield yield_element(placeholder)
    yield yield_error(
        [placeholder],
        description,
        group_key=f"infill-{key}",
        message_key=f"construction.infill.{key.replace('-', '_')}",
        params={"width": area.width, "post_width": config.posts.width},
    )


def _construct_bays(
    area: WallConstructionArea,
    config: InfillConfig,
    resolve_material: MaterialResolver,
    start: float,
    width: float,
    at_start: bool,
) -> ResultSequence:
    post_width = config.posts.width
    while True:
        bay = bale_bay_width(width, config)
        straw_start = start if at_start else start + width - bay

        if bay > 0:
            straw: list[ConstructionElement] = []
            yield from yield_and_collect_elements(
                construct_straw(
                    area.get_sub_area(straw_start, bay),
                    config.straw_material,
                    resolve_material=resolve_material,
                ),
                straw,
            )
            if bay < config.min_straw_space and straw:
                yield yield_warning(
                    straw,
                    "Not enough space for infilling straw",
                    group_key="infill-narrow-bay",
                    message_key="construction.infill.narrow_bay",
                    params={"width": bay, "minimum": config.min_straw_space},
                )

        if bay + post_width > width:
            return

        post_x = straw_start + bay if at_start else straw_start - post_width
        yield from construct_post(
            area.get_sub_area(post_x, post_width), config.posts, resolve_material
        )

        if at_start:
            start = post_x + post_width
        width -= bay + post_width
        at_start = not at_start


def _infill(
    area: WallConstructionArea,
    config: InfillConfig,
    resolve_material: MaterialResolver,
    starts_with_stand: bool,
    ends_with_stand: bool,
    start_at_end: bool,
) -> ResultSequence:
    post_width = config.posts.width

    if starts_with_stand or ends_with_stand:
        if area.width < post_width:
            yield from _error(
                area, config, "Not enough space for a post", "no-post-space"
            )
            return
        if area.width == post_width:
            yield from construct_post(area, config.posts, resolve_material)
            return
        if starts_with_stand and ends_with_stand and area.width < 2 * post_width:
            yield from _error(
                area,
                config,
                "Space for more than one post, but not enough for two",
                "no-double-post-space",
            )
            return

    elements: list[ConstructionElement] = []
    start = 0.0
    width = area.width

    if starts_with_stand:
        yield from yield_and_collect_elements(
            construct_post(
                area.get_sub_area(0, post_width), config.posts, resolve_material
            ),
            elements,
        )
        start += post_width
        width -= post_width

    if ends_with_stand:
        yield from yield_and_collect_elements(
            construct_post(
                area.get_sub_area(area.width - post_width, post_width),
                config.posts,
                resolve_material,
            ),
            elements,
        )
        width -= post_width

    yield from yield_and_collect_elements(
        _construct_bays(
            area, config, resolve_material, start, width, not start_at_end
        ),
        elements,
    )

    if area.height < config.min_straw_space and elements:
        yield yield_warning(
            elements,
            "Not enough vertical space to fill with straw",
            group_key="infill-low-height",
            message_key="construction.infill.low_height",
            params={"height": area.height, "minimum": config.min_straw_space},
        )


def infill_wall_area(
    area: WallConstructionArea,
    config: InfillConfig,
    resolve_material: MaterialResolver,
    starts_with_stand: bool = False,
    ends_with_stand: bool = False,
    start_at_end: bool = False,
) -> ResultSequence:
    """Fill a wall area with straw bays separated by posts.

    Bays of at most ``max_post_spacing`` alternate with posts. Bays are
    placed alternately from the start and the end of the wall, so any
    shortened bays end up in the middle.

    Args:
        area: Region to fill.
        config: Infill configuration.
        resolve_material: Material lookup.
        starts_with_stand: Place a post at the start of the area.
        ends_with_stand: Place a post at the end of the area.
        start_at_end: Place the first bay at the end instead of the start.

    Returns:
        Lazy sequence of construction results.

    Raises:
        MaterialNotFoundError: If the straw material is unknown.
        InvalidConfigurationError: If the straw material is not a strawbale
            or the post configuration is not a known variant.
    """
    if not isinstance(config.posts, (FullPostConfig, DoublePostConfig)):
        raise InvalidConfigurationError(
            f"Invalid post type: {type(config.posts).__name__}"
        )
    resolve_straw_material(config.straw_material, resolve_material)
    logger.debug(
        f"Infill area {area.width:g}x{area.height:g} "
        f"(stands: start={starts_with_stand}, end={ends_with_stand})"
    )
    return numbered_results(
        _infill(
            area,
            config,
            resolve_material,
            starts_with_stand,
            ends_with_stand,
            start_at_end,
        )
    )
