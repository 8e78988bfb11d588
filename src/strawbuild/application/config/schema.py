"""Pydantic models for strawbuild project configuration files.

A project file lists the walls to construct, each with its region and the
layout used to fill it. Custom materials may be added to (or override) the
built-in catalog. All lengths are in millimeters.

Example:
    {
      "schema_version": "1.0",
      "walls": [
        {
          "name": "north",
          "size": [4000, 360, 2500],
          "layout": {"type": "straw"}
        }
      ]
    }
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
    model_validator,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with walls, layouts and custom materials
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

PositiveLength = Annotated[float, Field(gt=0)]
CrossSectionPair = tuple[PositiveLength, PositiveLength]


# =============================================================================
# Materials
# =============================================================================


class _MaterialConfigBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    color: str = Field(default="#cccccc", pattern=r"^#[0-9a-fA-F]{6}$")
    density: float | None = Field(default=None, gt=0, description="kg/m^3")


class DimensionalMaterialConfig(_MaterialConfigBase):
    """Timber available in fixed cross sections and stock lengths."""

    type: Literal["dimensional"] = "dimensional"
    cross_sections: list[CrossSectionPair] = Field(..., min_length=1)
    lengths: list[PositiveLength] = Field(default_factory=list)


class StrawbaleMaterialConfig(_MaterialConfigBase):
    """Straw bales and the heuristics used to cut them."""

    type: Literal["strawbale"] = "strawbale"
    bale_min_length: float = Field(default=800.0, gt=0)
    bale_max_length: float = Field(default=900.0, gt=0)
    bale_height: float = Field(default=500.0, gt=0)
    bale_width: float = Field(default=360.0, gt=0)
    tolerance: float = Field(default=2.0, ge=0)
    top_cutoff_limit: float = Field(default=50.0, gt=0)
    flake_size: float = Field(default=70.0, gt=0)

    @model_validator(mode="after")
    def validate_length_range(self) -> "StrawbaleMaterialConfig":
        """Ensure the minimum bale length does not exceed the maximum."""
        if self.bale_min_length > self.bale_max_length:
            raise ValueError(
                f"bale_min_length ({self.bale_min_length}) cannot exceed "
                f"bale_max_length ({self.bale_max_length})"
            )
        return self


class SheetMaterialConfig(_MaterialConfigBase):
    type: Literal["sheet"] = "sheet"
    sizes: list[CrossSectionPair] = Field(..., min_length=1)
    thicknesses: list[PositiveLength] = Field(..., min_length=1)


class VolumeMaterialConfig(_MaterialConfigBase):
    type: Literal["volume"] = "volume"
    available_volumes: list[PositiveLength] = Field(default_factory=list)


class GenericMaterialConfig(_MaterialConfigBase):
    type: Literal["generic"] = "generic"


class PrefabMaterialConfig(_MaterialConfigBase):
    type: Literal["prefab"] = "prefab"
    module_width: float = Field(default=920.0, gt=0)
    module_thickness: float = Field(default=360.0, gt=0)


MaterialConfig = Annotated[
    DimensionalMaterialConfig
    | StrawbaleMaterialConfig
    | SheetMaterialConfig
    | VolumeMaterialConfig
    | GenericMaterialConfig
    | PrefabMaterialConfig,
    Field(discriminator="type"),
]


# =============================================================================
# Construction configuration
# =============================================================================


class FullPostConfigSchema(BaseModel):
    """A single solid post spanning the wall depth."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["full"] = "full"
    width: float = Field(default=60.0, gt=0)
    material: str = Field(default="wood-360x60", min_length=1)


class DoublePostConfigSchema(BaseModel):
    """Two posts flush with both faces with infill between them."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["double"] = "double"
    width: float = Field(default=60.0, gt=0)
    thickness: float = Field(default=120.0, gt=0)
    material: str = Field(default="wood-120x60", min_length=1)
    infill_material: str = Field(default="straw", min_length=1)


def _post_type(value: Any) -> str:
    """Post variant of raw or parsed input; a post without a type is full."""
    if isinstance(value, dict):
        return value.get("type", "full")
    return getattr(value, "type", "full")


PostConfigSchema = Annotated[
    Annotated[FullPostConfigSchema, Tag("full")]
    | Annotated[DoublePostConfigSchema, Tag("double")],
    Discriminator(_post_type),
]


class TriangularBattenConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    size: float = Field(default=30.0, gt=0)
    material: str = Field(default="triangular-batten", min_length=1)
    inside: bool = True
    outside: bool = True
    min_length: float = Field(default=100.0, ge=0)


class InfillConfigSchema(BaseModel):
    """Posts and straw bays for an infill wall."""

    model_config = ConfigDict(extra="forbid")

    max_post_spacing: float = Field(default=800.0, gt=0)
    min_straw_space: float = Field(default=70.0, ge=0)
    posts: PostConfigSchema = Field(default_factory=FullPostConfigSchema)
    straw_material: str | None = Field(
        default=None, description="Strawbale material (default straw if omitted)"
    )


# =============================================================================
# Layouts
# =============================================================================


class StrawLayoutConfig(BaseModel):
    """Fill the whole wall with straw bales."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["straw"] = "straw"
    material: str | None = Field(
        default=None, description="Strawbale material (default straw if omitted)"
    )


class PostLayoutConfig(BaseModel):
    """Place a single post at the wall start."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["post"] = "post"
    post: PostConfigSchema = Field(default_factory=FullPostConfigSchema)


class TriangularBattenLayoutConfig(BaseModel):
    """Place triangular battens along the edges of the wall."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["triangular_battens"] = "triangular_battens"
    battens: TriangularBattenConfigSchema = Field(
        default_factory=TriangularBattenConfigSchema
    )


class InfillLayoutConfig(BaseModel):
    """Fill the wall with straw bays separated by posts."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["infill"] = "infill"
    infill: InfillConfigSchema = Field(default_factory=InfillConfigSchema)
    starts_with_stand: bool = False
    ends_with_stand: bool = False
    start_at_end: bool = False


LayoutConfig = Annotated[
    StrawLayoutConfig
    | PostLayoutConfig
    | TriangularBattenLayoutConfig
    | InfillLayoutConfig,
    Field(discriminator="type"),
]


# =============================================================================
# Walls and root
# =============================================================================


class WallConfig(BaseModel):
    """A wall region and the layout that fills it.

    Attributes:
        name: Unique wall name used in reports.
        position: Origin of the region [x, y, z].
        size: Width along the wall, depth and height [x, y, z].
        top_offsets: Optional [x, dz] pairs lowering the top edge (dz <= 0).
        layout: Layout used to fill the region.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    size: tuple[
        Annotated[float, Field(ge=0)],
        Annotated[float, Field(ge=0)],
        Annotated[float, Field(ge=0)],
    ]
    top_offsets: list[tuple[float, float]] | None = None
    layout: LayoutConfig

    @model_validator(mode="after")
    def validate_top_offsets(self) -> "WallConfig":
        """Ensure top offsets lie on the wall, are sorted and only lower the top."""
        if not self.top_offsets:
            return self
        width, _, height = self.size
        previous_x = None
        for x, dz in self.top_offsets:
            if not 0 <= x <= width:
                raise ValueError(f"Top offset x={x} lies outside the wall (0..{width})")
            if dz > 0:
                raise ValueError(f"Top offset dz={dz} must not raise the top edge")
            if -dz > height:
                raise ValueError(f"Top offset dz={dz} drops below the wall bottom")
            if previous_x is not None and x < previous_x:
                raise ValueError("Top offsets must be sorted by x")
            previous_x = x
        return self


class ProjectConfiguration(BaseModel):
    """Root configuration model for a strawbuild project file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        materials: Custom materials added to the built-in catalog
        default_straw_material: Strawbale material used when a layout names none
        walls: Walls to construct (at least one)
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    materials: list[MaterialConfig] = Field(default_factory=list)
    default_straw_material: str | None = None
    walls: list[WallConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_names(self) -> "ProjectConfiguration":
        """Ensure wall names and custom material ids are unique."""
        seen: set[str] = set()
        for wall in self.walls:
            if wall.name in seen:
                raise ValueError(f"Duplicate wall name '{wall.name}'")
            seen.add(wall.name)

        seen = set()
        for material in self.materials:
            if material.id in seen:
                raise ValueError(f"Duplicate material id '{material.id}'")
            seen.add(material.id)
        return self
