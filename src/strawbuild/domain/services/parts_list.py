"""Bill of materials generated from construction elements.

Elements are grouped per material, then per part. Two elements are the same
part when they share the part kind and the (rounded) box size; straw bales
are grouped by straw category instead, since every cut bale differs in size.
Each distinct part gets a label per material: A, B, ..., Z, AA, AB, ...
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ..elements import ConstructionElement, Cuboid, ExtrudedPolygon
from ..materials import (
    CrossSection,
    DimensionalMaterial,
    MaterialResolver,
    StrawbaleMaterial,
)
from ..tags import (
    TAG_FULL_BALE,
    TAG_PARTIAL_BALE,
    TAG_STRAW_FLAKES,
    TAG_STRAW_STUFFED,
    Tag,
)
from ..value_objects import Vec3

logger = logging.getLogger(__name__)


class PartIssue(str, Enum):
    """Problems detected for a part of dimensional stock."""

    CROSS_SECTION_MISMATCH = "cross-section-mismatch"
    LENGTH_EXCEEDS_AVAILABLE = "length-exceeds-available"


class StrawCategory(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    FLAKES = "flakes"
    STUFFED = "stuffed"


STRAW_CATEGORY_LABELS = {
    StrawCategory.FULL: "Full bales",
    StrawCategory.PARTIAL: "Partial bales",
    StrawCategory.FLAKES: "Flakes",
    StrawCategory.STUFFED: "Stuffed fill",
}

_STRAW_CATEGORY_BY_TAG = {
    TAG_FULL_BALE.id: StrawCategory.FULL,
    TAG_PARTIAL_BALE.id: StrawCategory.PARTIAL,
    TAG_STRAW_FLAKES.id: StrawCategory.FLAKES,
    TAG_STRAW_STUFFED.id: StrawCategory.STUFFED,
}


@dataclass
class PartItem:
    """One distinct part of a material, with its quantity.

    Attributes:
        part_id: Grouping key of the part.
        label: Short label, unique per material.
        kind: Part kind ("post", "strawbale-full", "-" for untyped parts).
        material: Material id.
        size: Box size of the first element of the part.
        quantity: Number of elements.
        total_volume: Summed volume in mm^3.
        elements: Ids of the elements making up this part.
        length: Length along the stock for dimensional parts.
        total_length: Summed stock length for dimensional parts.
        cross_section: Matched (or measured) cross section.
        issue: Problem with the available stock, if any.
        straw_category: Straw category for strawbale parts.
        description: Display description.
    """

    part_id: str
    label: str
    kind: str
    material: str
    size: Vec3
    quantity: int = 0
    total_volume: float = 0.0
    elements: list[str] = field(default_factory=list)
    length: float | None = None
    total_length: float | None = None
    cross_section: CrossSection | None = None
    issue: PartIssue | None = None
    straw_category: StrawCategory | None = None
    description: str | None = None


@dataclass
class MaterialParts:
    """All parts of one material with material-wide totals."""

    material: str
    parts: dict[str, PartItem] = field(default_factory=dict)
    total_quantity: int = 0
    total_volume: float = 0.0
    total_length: float | None = None

    @property
    def issues(self) -> list[PartItem]:
        return [p for p in self.parts.values() if p.issue is not None]


@dataclass
class PartsList:
    """Parts grouped by material id, in order of first appearance."""

    materials: dict[str, MaterialParts] = field(default_factory=dict)

    def __getitem__(self, material_id: str) -> MaterialParts:
        return self.materials[material_id]

    def __contains__(self, material_id: object) -> bool:
        return material_id in self.materials

    def __iter__(self):
        return iter(self.materials.values())

    @property
    def total_quantity(self) -> int:
        return sum(m.total_quantity for m in self.materials.values())

    @property
    def has_issues(self) -> bool:
        return any(m.issues for m in self.materials.values())


def index_to_label(index: int) -> str:
    """Spreadsheet-style label for a zero-based index (0 -> A, 26 -> AA)."""
    label = ""
    current = index
    while current >= 0:
        label = chr(ord("A") + current % 26) + label
        current = current // 26 - 1
    return label


def straw_category_from_tags(tags: Iterable[Tag]) -> StrawCategory:
    for tag in tags:
        category = _STRAW_CATEGORY_BY_TAG.get(tag.id)
        if category is not None:
            return category
    return StrawCategory.STUFFED


def _polygon_area(points) -> float:
    area = 0.0
    for a, b in zip(points, points[1:] + points[:1]):
        area += a.x * b.y - b.x * a.y
    return abs(area) / 2


def element_volume(element: ConstructionElement) -> float:
    """Volume of an element's shape in mm^3."""
    shape = element.shape
    if isinstance(shape, ExtrudedPolygon):
        return _polygon_area(list(shape.outline)) * abs(shape.extrude_length)
    if isinstance(shape, Cuboid):
        return abs(shape.size.x * shape.size.y * shape.size.z)
    return element.bounds.volume


def _element_size(element: ConstructionElement) -> Vec3:
    if element.part_info is not None and element.part_info.size is not None:
        return element.part_info.size
    return element.bounds.size


def _rounded(size: Vec3) -> list[int]:
    return [round(size.x), round(size.y), round(size.z)]


def dimensional_details(
    size: Vec3, material: DimensionalMaterial
) -> tuple[float, CrossSection, PartIssue | None]:
    """Match a part size against the stock of a dimensional material.

    Two of the three (rounded) dimensions must equal one of the material's
    cross sections; the third is the length cut from the stock.

    Returns:
        Tuple of (length, cross section, issue).
    """
    dimensions = _rounded(size)
    for section in material.cross_sections:
        remaining = list(dimensions)
        try:
            remaining.remove(round(section.smaller))
            remaining.remove(round(section.bigger))
        except ValueError:
            continue
        length = float(remaining[0])
        if material.lengths and length > max(material.lengths):
            return length, section, PartIssue.LENGTH_EXCEEDS_AVAILABLE
        return length, section, None

    smaller, bigger, length = sorted(dimensions)
    return (
        float(length),
        CrossSection.of(max(smaller, 1), max(bigger, 1)),
        PartIssue.CROSS_SECTION_MISMATCH,
    )


def build_parts_list(
    elements: Iterable[ConstructionElement],
    resolve_material: MaterialResolver,
) -> PartsList:
    """Group construction elements into a parts list.

    Args:
        elements: Elements to list, typically ``AggregatedResults.elements``.
        resolve_material: Material lookup deciding how parts are grouped.

    Returns:
        The parts list, materials and parts in order of first appearance.
    """
    parts_list = PartsList()

    for element in elements:
        entry = parts_list.materials.get(element.material)
        if entry is None:
            entry = MaterialParts(material=element.material)
            parts_list.materials[element.material] = entry

        material = resolve_material(element.material)
        size = _element_size(element)
        volume = element_volume(element)
        kind = element.part_info.kind if element.part_info else "-"

        straw_category: StrawCategory | None = None
        if isinstance(material, StrawbaleMaterial):
            straw_category = straw_category_from_tags(element.tags)
            part_id = f"strawbale:{straw_category.value}"
            kind = f"strawbale-{straw_category.value}"
        else:
            dims = "x".join(str(d) for d in sorted(_rounded(size)))
            part_id = f"{kind}:{dims}"

        part = entry.parts.get(part_id)
        if part is None:
            part = PartItem(
                part_id=part_id,
                label=index_to_label(len(entry.parts)),
                kind=kind,
                material=element.material,
                size=size,
                straw_category=straw_category,
                description=(
                    STRAW_CATEGORY_LABELS[straw_category] if straw_category else None
                ),
            )
            if isinstance(material, DimensionalMaterial):
                length, section, issue = dimensional_details(size, material)
                part.length = length
                part.total_length = 0.0
                part.cross_section = section
                part.issue = issue
                if issue is not None:
                    logger.debug(
                        f"Part {part_id} of {element.material}: {issue.value}"
                    )
            entry.parts[part_id] = part

        part.quantity += 1
        part.total_volume += volume
        part.elements.append(element.id)
        entry.total_quantity += 1
        entry.total_volume += volume
        if part.length is not None:
            part.total_length = (part.total_length or 0.0) + part.length
            entry.total_length = (entry.total_length or 0.0) + part.length

    return parts_list


@dataclass
class StrawBucket:
    volume: float = 0.0
    count: int = 0


@dataclass
class StrawSummary:
    """Estimate of the bales needed for a set of straw parts.

    Partial bales are cut from full bales; the offcuts of several partial
    bales may add up to spare bales, which reduces the estimate. Flakes and
    stuffed straw are counted by volume.
    """

    buckets: dict[StrawCategory, StrawBucket]
    nominal_max_volume: float
    nominal_min_volume: float
    min_remaining_bale_count: int
    max_remaining_bale_count: int
    remaining_volume_min: float
    remaining_volume_max: float
    total_estimated_bales_max: int
    total_volume: float


def ceil_div(value: float, divisor: float) -> int:
    if value <= 0 or divisor <= 0:
        return 0
    return math.ceil(value / divisor)


def floor_div(value: float, divisor: float) -> int:
    if value <= 0 or divisor <= 0:
        return 0
    return math.floor(value / divisor)


def summarize_strawbales(
    parts: Iterable[PartItem], material: StrawbaleMaterial
) -> StrawSummary:
    """Estimate the number of bales to order for straw parts."""
    buckets = {category: StrawBucket() for category in StrawCategory}
    for part in parts:
        bucket = buckets[part.straw_category or StrawCategory.STUFFED]
        bucket.volume += part.total_volume
        bucket.count += part.quantity

    section = material.bale_height * material.bale_width
    nominal_max_volume = section * material.bale_max_length
    nominal_min_volume = max(section * material.bale_min_length, 1.0)
    total_volume = sum(b.volume for b in buckets.values())

    partial = buckets[StrawCategory.PARTIAL]
    remaining_volume_min = max(partial.count * nominal_min_volume - partial.volume, 0.0)
    remaining_volume_max = max(partial.count * nominal_max_volume - partial.volume, 0.0)
    remaining_by_min = floor_div(remaining_volume_min, nominal_min_volume)
    remaining_by_max = floor_div(remaining_volume_max, nominal_max_volume)
    min_remaining = min(remaining_by_min, remaining_by_max)

    total_estimated = (
        buckets[StrawCategory.FULL].count
        + partial.count
        - min_remaining
        + ceil_div(buckets[StrawCategory.FLAKES].volume, nominal_max_volume)
        + ceil_div(buckets[StrawCategory.STUFFED].volume, nominal_max_volume)
    )

    return StrawSummary(
        buckets=buckets,
        nominal_max_volume=nominal_max_volume,
        nominal_min_volume=nominal_min_volume,
        min_remaining_bale_count=min_remaining,
        max_remaining_bale_count=max(remaining_by_min, remaining_by_max),
        remaining_volume_min=remaining_volume_min,
        remaining_volume_max=remaining_volume_max,
        total_estimated_bales_max=total_estimated,
        total_volume=total_volume,
    )
