"""Domain layer - the construction engine."""

from .area import WallConstructionArea
from .construction import (
    BaleCategory,
    bale_bay_width,
    classify_bale,
    construct_post,
    construct_straw,
    construct_triangular_battens,
    infill_wall_area,
)
from .elements import (
    ConstructionElement,
    Cuboid,
    ExtrudedPolygon,
    PartInfo,
    create_construction_element,
    element_id_scope,
)
from .exceptions import (
    InvalidConfigurationError,
    MaterialNotFoundError,
    StrawbuildError,
)
from .materials import (
    DimensionalMaterial,
    Material,
    MaterialCatalog,
    MaterialResolver,
    MaterialType,
    StrawbaleMaterial,
)
from .results import (
    AggregatedResults,
    ConstructionResult,
    Diagnostic,
    ElementResult,
    ErrorResult,
    ResultSequence,
    WarningResult,
    aggregate_results,
    numbered_results,
)
from .services import PartsList, build_parts_list, summarize_strawbales
from .tags import Tag
from .value_objects import (
    Bounds3D,
    DoublePostConfig,
    FullPostConfig,
    InfillConfig,
    PostConfig,
    Transform,
    TriangularBattenConfig,
    Vec2,
    Vec3,
)

__all__ = [
    "AggregatedResults",
    "BaleCategory",
    "Bounds3D",
    "ConstructionElement",
    "ConstructionResult",
    "Cuboid",
    "Diagnostic",
    "DimensionalMaterial",
    "DoublePostConfig",
    "ElementResult",
    "ErrorResult",
    "ExtrudedPolygon",
    "FullPostConfig",
    "InfillConfig",
    "InvalidConfigurationError",
    "Material",
    "MaterialCatalog",
    "MaterialNotFoundError",
    "MaterialResolver",
    "MaterialType",
    "PartInfo",
    "PartsList",
    "PostConfig",
    "ResultSequence",
    "StrawbaleMaterial",
    "StrawbuildError",
    "Tag",
    "Transform",
    "TriangularBattenConfig",
    "Vec2",
    "Vec3",
    "WallConstructionArea",
    "WarningResult",
    "aggregate_results",
    "bale_bay_width",
    "build_parts_list",
    "classify_bale",
    "construct_post",
    "construct_straw",
    "construct_triangular_battens",
    "create_construction_element",
    "element_id_scope",
    "infill_wall_area",
    "numbered_results",
    "summarize_strawbales",
]
