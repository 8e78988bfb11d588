"""Layout algorithms producing construction result sequences."""

from .infill import bale_bay_width, infill_wall_area
from .posts import construct_post
from .straw import BaleCategory, classify_bale, construct_straw, resolve_straw_material
from .triangular_battens import construct_triangular_battens

__all__ = [
    "BaleCategory",
    "bale_bay_width",
    "classify_bale",
    "construct_post",
    "construct_straw",
    "construct_triangular_battens",
    "infill_wall_area",
    "resolve_straw_material",
]
