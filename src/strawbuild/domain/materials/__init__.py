"""Material records and the catalog lookup."""

from .catalog import (
    CLAY_PLASTER,
    DEFAULT_MATERIALS,
    DEFAULT_STRAW_MATERIAL_ID,
    LOOSE_STRAW,
    OSB_18,
    STRAWBALE,
    TRIANGULAR_BATTEN,
    WOOD_120X60,
    WOOD_140X140,
    WOOD_360X60,
    MaterialCatalog,
    resolve_default_material,
)
from .models import (
    CrossSection,
    DimensionalMaterial,
    GenericMaterial,
    Material,
    MaterialResolver,
    MaterialType,
    PrefabMaterial,
    SheetMaterial,
    StrawbaleMaterial,
    VolumeMaterial,
)

__all__ = [
    "CLAY_PLASTER",
    "CrossSection",
    "DEFAULT_MATERIALS",
    "DEFAULT_STRAW_MATERIAL_ID",
    "DimensionalMaterial",
    "GenericMaterial",
    "LOOSE_STRAW",
    "Material",
    "MaterialCatalog",
    "MaterialResolver",
    "MaterialType",
    "OSB_18",
    "PrefabMaterial",
    "STRAWBALE",
    "SheetMaterial",
    "StrawbaleMaterial",
    "TRIANGULAR_BATTEN",
    "VolumeMaterial",
    "WOOD_120X60",
    "WOOD_140X140",
    "WOOD_360X60",
    "resolve_default_material",
]
