"""Value objects for the construction domain.

This module provides immutable data types used throughout the
construction engine. All classes are re-exported from sub-modules for
convenience.
"""

from __future__ import annotations

# Core geometry
from ._geometry import (
    Bounds3D,
    Transform,
    Vec2,
    Vec3,
)

# Construction configuration
from ._configs import (
    DoublePostConfig,
    FullPostConfig,
    InfillConfig,
    PostConfig,
    PostType,
    TriangularBattenConfig,
)

__all__ = [
    "Bounds3D",
    "DoublePostConfig",
    "FullPostConfig",
    "InfillConfig",
    "PostConfig",
    "PostType",
    "Transform",
    "TriangularBattenConfig",
    "Vec2",
    "Vec3",
]
