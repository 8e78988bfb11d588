"""Descriptive tags attached to construction elements."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """A tag used for rendering filters and bill-of-materials grouping.

    Attributes:
        id: Unique tag id, ``<category>_<name>``.
        category: Tag category id (e.g. "straw", "wall-part").
        label: Display label for custom tags; None for predefined tags.
    """

    id: str
    category: str
    label: str | None = None

    @property
    def is_custom(self) -> bool:
        return self.label is not None


def create_tag_id(category: str, name: str) -> str:
    """Build a custom tag id from a category and a free-form name."""
    slug = re.sub(r"[\W_]+", "-", name.strip().lower())
    return f"{category}_{slug}"


def create_tag(category: str, name: str) -> Tag:
    """Create a custom tag in a category."""
    return Tag(id=create_tag_id(category, name), category=category, label=name)


# Straw tags
TAG_FULL_BALE = Tag("straw_full-bale", "straw")
TAG_PARTIAL_BALE = Tag("straw_partial-bale", "straw")
TAG_STRAW_FLAKES = Tag("straw_flakes", "straw")
TAG_STRAW_STUFFED = Tag("straw_stuffed", "straw")
TAG_STRAW_INFILL = Tag("straw_infill", "straw")

# Wall part tags
TAG_POST = Tag("wall-part_post", "wall-part")
TAG_INFILL = Tag("wall-part_infill", "wall-part")
TAG_TRIANGULAR_BATTEN = Tag("wall-part_triangular-batten", "wall-part")

STRAW_TAGS: tuple[Tag, ...] = (
    TAG_FULL_BALE,
    TAG_PARTIAL_BALE,
    TAG_STRAW_FLAKES,
    TAG_STRAW_STUFFED,
)
