"""Domain services operating on construction results."""

from .parts_list import (
    MaterialParts,
    PartIssue,
    PartItem,
    PartsList,
    StrawCategory,
    StrawSummary,
    build_parts_list,
    element_volume,
    index_to_label,
    summarize_strawbales,
)

__all__ = [
    "MaterialParts",
    "PartIssue",
    "PartItem",
    "PartsList",
    "StrawCategory",
    "StrawSummary",
    "build_parts_list",
    "element_volume",
    "index_to_label",
    "summarize_strawbales",
]
