"""Adapter converting ProjectConfiguration models to domain objects.

The Pydantic models only describe the file format; the construction engine
works on frozen domain dataclasses. These functions are the single place
where one is mapped onto the other.
"""

from strawbuild.application.config.schema import (
    DimensionalMaterialConfig,
    DoublePostConfigSchema,
    FullPostConfigSchema,
    GenericMaterialConfig,
    InfillConfigSchema,
    MaterialConfig,
    PostConfigSchema,
    PrefabMaterialConfig,
    ProjectConfiguration,
    SheetMaterialConfig,
    StrawbaleMaterialConfig,
    TriangularBattenConfigSchema,
    VolumeMaterialConfig,
    WallConfig,
)
from strawbuild.domain.area import WallConstructionArea
from strawbuild.domain.materials import (
    CrossSection,
    DimensionalMaterial,
    GenericMaterial,
    Material,
    MaterialCatalog,
    PrefabMaterial,
    SheetMaterial,
    StrawbaleMaterial,
    VolumeMaterial,
)
from strawbuild.domain.value_objects import (
    DoublePostConfig,
    FullPostConfig,
    InfillConfig,
    PostConfig,
    TriangularBattenConfig,
)


def config_to_material(config: MaterialConfig) -> Material:
    """Convert one material entry to its domain record."""
    common = {
        "id": config.id,
        "name": config.name,
        "color": config.color,
        "density": config.density,
    }
    match config:
        case DimensionalMaterialConfig():
            return DimensionalMaterial(
                **common,
                cross_sections=tuple(
                    CrossSection.of(a, b) for a, b in config.cross_sections
                ),
                lengths=tuple(config.lengths),
            )
        case StrawbaleMaterialConfig():
            return StrawbaleMaterial(
                **common,
                bale_min_length=config.bale_min_length,
                bale_max_length=config.bale_max_length,
                bale_height=config.bale_height,
                bale_width=config.bale_width,
                tolerance=config.tolerance,
                top_cutoff_limit=config.top_cutoff_limit,
                flake_size=config.flake_size,
            )
        case SheetMaterialConfig():
            return SheetMaterial(
                **common,
                sizes=tuple(CrossSection.of(a, b) for a, b in config.sizes),
                thicknesses=tuple(config.thicknesses),
            )
        case VolumeMaterialConfig():
            return VolumeMaterial(
                **common, available_volumes=tuple(config.available_volumes)
            )
        case PrefabMaterialConfig():
            return PrefabMaterial(
                **common,
                module_width=config.module_width,
                module_thickness=config.module_thickness,
            )
        case GenericMaterialConfig():
            return GenericMaterial(**common)
    raise TypeError(f"Unknown material config: {type(config).__name__}")


def config_to_catalog(
    config: ProjectConfiguration, base: MaterialCatalog | None = None
) -> MaterialCatalog:
    """Build the material catalog of a project.

    Custom materials extend the built-in catalog and replace built-in
    materials with the same id.

    Args:
        config: A validated ProjectConfiguration instance
        base: Catalog to extend (defaults to the built-in catalog)

    Returns:
        The project's MaterialCatalog.
    """
    base = base or MaterialCatalog.default()
    return base.with_materials(
        (config_to_material(m) for m in config.materials),
        default_straw_material_id=config.default_straw_material,
    )


def config_to_area(wall: WallConfig) -> WallConstructionArea:
    """Convert a wall entry to the region its layout fills."""
    return WallConstructionArea.from_values(
        wall.position, wall.size, wall.top_offsets
    )


def config_to_post(config: PostConfigSchema) -> PostConfig:
    match config:
        case FullPostConfigSchema():
            return FullPostConfig(width=config.width, material=config.material)
        case DoublePostConfigSchema():
            return DoublePostConfig(
                width=config.width,
                thickness=config.thickness,
                material=config.material,
                infill_material=config.infill_material,
            )
    raise TypeError(f"Unknown post config: {type(config).__name__}")


def config_to_battens(config: TriangularBattenConfigSchema) -> TriangularBattenConfig:
    return TriangularBattenConfig(
        size=config.size,
        material=config.material,
        inside=config.inside,
        outside=config.outside,
        min_length=config.min_length,
    )


def config_to_infill(
    config: InfillConfigSchema, default_straw_material: str | None = None
) -> InfillConfig:
    """Convert infill settings, falling back to the project's default straw."""
    return InfillConfig(
        posts=config_to_post(config.posts),
        max_post_spacing=config.max_post_spacing,
        min_straw_space=config.min_straw_space,
        straw_material=config.straw_material or default_straw_material,
    )
