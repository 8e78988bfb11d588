"""Project configuration schema, loading and conversion.

Public API:
    - ProjectConfiguration: Root configuration model
    - WallConfig: Wall region and layout model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Check material references
    - config_to_*: Convert configuration models to domain objects

Example:
    >>> from pathlib import Path
    >>> from strawbuild.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("house.json"))
    ...     print(f"{len(config.walls)} walls")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from strawbuild.application.config.adapter import (
    config_to_area,
    config_to_battens,
    config_to_catalog,
    config_to_infill,
    config_to_material,
    config_to_post,
)
from strawbuild.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from strawbuild.application.config.schema import (
    SUPPORTED_VERSIONS,
    DimensionalMaterialConfig,
    DoublePostConfigSchema,
    FullPostConfigSchema,
    InfillConfigSchema,
    InfillLayoutConfig,
    PostLayoutConfig,
    ProjectConfiguration,
    StrawbaleMaterialConfig,
    StrawLayoutConfig,
    TriangularBattenConfigSchema,
    TriangularBattenLayoutConfig,
    WallConfig,
)
from strawbuild.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DimensionalMaterialConfig",
    "DoublePostConfigSchema",
    "FullPostConfigSchema",
    "InfillConfigSchema",
    "InfillLayoutConfig",
    "PostLayoutConfig",
    "ProjectConfiguration",
    "SUPPORTED_VERSIONS",
    "StrawLayoutConfig",
    "StrawbaleMaterialConfig",
    "TriangularBattenConfigSchema",
    "TriangularBattenLayoutConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WallConfig",
    "config_to_area",
    "config_to_battens",
    "config_to_catalog",
    "config_to_infill",
    "config_to_material",
    "config_to_post",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
