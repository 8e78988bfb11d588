"""Construction configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PostType(str, Enum):
    """Kinds of posts a wall bay can be closed with."""

    FULL = "full"
    DOUBLE = "double"


@dataclass(frozen=True)
class FullPostConfig:
    """A single solid post spanning the full wall depth.

    Attributes:
        width: Post size along the wall in mm.
        material: Material id of the post timber.
    """

    width: float
    material: str

    type: PostType = field(default=PostType.FULL, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Post width must be positive")


@dataclass(frozen=True)
class DoublePostConfig:
    """Two posts flush with both wall faces, infill in between.

    Attributes:
        width: Post size along the wall in mm.
        thickness: Post size through the wall in mm.
        material: Material id of the post timber.
        infill_material: Material id used between the posts.
    """

    width: float
    thickness: float
    material: str
    infill_material: str

    type: PostType = field(default=PostType.DOUBLE, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Post width must be positive")
        if self.thickness <= 0:
            raise ValueError("Post thickness must be positive")


PostConfig = FullPostConfig | DoublePostConfig


@dataclass(frozen=True)
class TriangularBattenConfig:
    """Configuration for triangular air-seal battens along the wall edges.

    Attributes:
        size: Leg length of the triangular cross section in mm.
        material: Material id of the battens.
        inside: Place battens on the inside face.
        outside: Place battens on the outside face.
        min_length: Shortest batten worth placing in mm.
    """

    size: float = 30.0
    material: str = "triangular-batten"
    inside: bool = True
    outside: bool = True
    min_length: float = 100.0

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Batten size must be positive")
        if self.min_length < 0:
            raise ValueError("Batten minimum length cannot be negative")


@dataclass(frozen=True)
class InfillConfig:
    """Configuration for post-and-straw infill walls.

    Attributes:
        posts: Post configuration placed between straw bays.
        max_post_spacing: Largest straw bay between two posts in mm.
        min_straw_space: Narrowest bay worth filling with straw in mm.
        straw_material: Strawbale material id; None uses the catalog default.
    """

    posts: PostConfig
    max_post_spacing: float = 800.0
    min_straw_space: float = 70.0
    straw_material: str | None = None

    def __post_init__(self) -> None:
        if self.max_post_spacing <= 0:
            raise ValueError("max_post_spacing must be positive")
        if self.min_straw_space < 0:
            raise ValueError("min_straw_space cannot be negative")
