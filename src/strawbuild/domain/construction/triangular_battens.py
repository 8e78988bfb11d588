"""Triangular air-seal battens along the edges of a wall opening."""

from __future__ import annotations

import logging

from ..area import WallConstructionArea
from ..elements import (
    ExtrusionPlane,
    PartInfo,
    create_construction_element,
    create_extruded_polygon,
)
from ..results import (
    ElementResult,
    ResultSequence,
    numbered_results,
    yield_element,
)
from ..tags import TAG_TRIANGULAR_BATTEN
from ..value_objects import Transform, TriangularBattenConfig, Vec3

logger = logging.getLogger(__name__)

Outline = list[tuple[float, float]]


def _batten(
    config: TriangularBattenConfig,
    outline: Outline,
    plane: ExtrusionPlane,
    length: float,
    offset: Vec3,
    area: WallConstructionArea,
) -> ElementResult:
    return yield_element(
        create_construction_element(
            config.material,
            create_extruded_polygon(outline, plane, length),
            Transform.from_translation(area.position + offset),
            tags=[TAG_TRIANGULAR_BATTEN],
            part_info=PartInfo(kind="triangular-batten"),
        )
    )


def _face_battens(
    area: WallConstructionArea,
    config: TriangularBattenConfig,
    outside: bool,
) -> ResultSequence:
    s = config.size
    d = area.depth
    start_height = area.height_at_start
    start_length = start_height - 2 * s
    end_length = area.height_at_end - 2 * s
    horizontal_length = area.width - 2 * s

    # Outline points sit on the face (y = 0 or y = depth) with the
    # hypotenuse facing into the cavity.
    if outside:
        start: Outline = [(0, d), (0, d - s), (s, d)]
        end: Outline = [(0, d), (0, d - s), (-s, d)]
        bottom: Outline = [(0, 0), (0, s), (-s, 0)]
        top: Outline = [(0, 0), (0, -s), (-s, 0)]
        face_y = d
    else:
        start = [(0, 0), (0, s), (s, 0)]
        end = [(0, 0), (0, s), (-s, 0)]
        bottom = [(0, 0), (0, s), (s, 0)]
        top = [(0, 0), (0, -s), (s, 0)]
        face_y = 0.0

    if start_length >= config.min_length:
        yield _batten(config, start, "xy", start_length, Vec3(0, 0, s), area)
    if end_length >= config.min_length:
        yield _batten(config, end, "xy", end_length, Vec3(area.width, 0, s), area)
    if horizontal_length >= config.min_length:
        yield _batten(
            config, bottom, "yz", horizontal_length, Vec3(s, face_y, 0), area
        )
        if area.min_height == area.height:
            yield _batten(
                config,
                top,
                "yz",
                horizontal_length,
                Vec3(s, face_y, start_height),
                area,
            )


def construct_triangular_battens(
    area: WallConstructionArea, config: TriangularBattenConfig
) -> ResultSequence:
    """Place triangular battens on the inside and/or outside face.

    Each face gets up to four battens: along the start and end edges
    (running ``height_at_start/end - 2 * size``) and along the bottom and
    top edges (running ``width - 2 * size``). A batten whose run is below
    ``min_length`` is skipped. Top battens are only placed on a flat top.
    """
    logger.debug(
        f"Battens for {area.width:g}x{area.height:g} "
        f"(inside={config.inside}, outside={config.outside})"
    )
    return numbered_results(_battens(area, config))


def _battens(
    area: WallConstructionArea, config: TriangularBattenConfig
) -> ResultSequence:
    if config.inside:
        yield from _face_battens(area, config, outside=False)
    if config.outside:
        yield from _face_battens(area, config, outside=True)
