"""Material reference checks for project configurations.

Schema validation only checks the shape of a project file. This module
checks that the materials it refers to exist in the project's catalog and
have the kind the layout needs, before anything is constructed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from strawbuild.application.config.adapter import config_to_catalog
from strawbuild.application.config.schema import (
    DoublePostConfigSchema,
    InfillLayoutConfig,
    PostConfigSchema,
    PostLayoutConfig,
    ProjectConfiguration,
    StrawLayoutConfig,
    TriangularBattenLayoutConfig,
)
from strawbuild.domain.materials import (
    DimensionalMaterial,
    MaterialCatalog,
    StrawbaleMaterial,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """A blocking configuration problem.

    Attributes:
        path: JSON path to the invalid field (e.g., "walls[0].layout.material")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking configuration concern."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """0 if clean, 1 if there are errors, 2 if there are only warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _check_straw(
    result: ValidationResult, catalog: MaterialCatalog, path: str, material_id: str
) -> None:
    material = catalog.resolve(material_id)
    if material is None:
        result.add_error(path, f"Unknown material '{material_id}'", material_id)
    elif not isinstance(material, StrawbaleMaterial):
        result.add_error(
            path,
            f"Material '{material_id}' is a {material.type.value} material, "
            "a strawbale material is required",
            material_id,
        )


def _check_known(
    result: ValidationResult,
    catalog: MaterialCatalog,
    path: str,
    material_id: str,
    suggestion: str | None = None,
) -> None:
    if material_id not in catalog:
        logger.warning(f"{path}: material '{material_id}' is not in the catalog")
        result.add_warning(
            path, f"Unknown material '{material_id}'", suggestion=suggestion
        )


def _check_post(
    result: ValidationResult,
    catalog: MaterialCatalog,
    path: str,
    post: PostConfigSchema,
) -> None:
    _check_known(
        result,
        catalog,
        f"{path}.material",
        post.material,
        suggestion="Cross sections of the post cannot be checked",
    )
    material = catalog.resolve(post.material)
    if material is not None and not isinstance(material, DimensionalMaterial):
        result.add_warning(
            f"{path}.material",
            f"Post material '{post.material}' is not dimensional timber",
        )
    if isinstance(post, DoublePostConfigSchema):
        _check_known(result, catalog, f"{path}.infill_material", post.infill_material)


def validate_config(
    config: ProjectConfiguration, catalog: MaterialCatalog | None = None
) -> ValidationResult:
    """Check the material references of a project configuration.

    Unknown or non-strawbale straw materials are errors, since straw layouts
    cannot be built without them. Unknown post, batten and infill materials
    are warnings; the layout is still built but cannot be checked against
    available stock.

    Args:
        config: A validated ProjectConfiguration instance
        catalog: Project catalog (built from the configuration if omitted)

    Returns:
        ValidationResult with all problems found.
    """
    catalog = catalog or config_to_catalog(config)
    result = ValidationResult()

    if config.default_straw_material is not None:
        _check_straw(
            result, catalog, "default_straw_material", config.default_straw_material
        )

    default_straw = catalog.default_straw_material_id
    for index, wall in enumerate(config.walls):
        path = f"walls[{index}].layout"
        layout = wall.layout
        match layout:
            case StrawLayoutConfig():
                _check_straw(
                    result,
                    catalog,
                    f"{path}.material",
                    layout.material or default_straw,
                )
            case PostLayoutConfig():
                _check_post(result, catalog, f"{path}.post", layout.post)
            case TriangularBattenLayoutConfig():
                _check_known(
                    result, catalog, f"{path}.battens.material", layout.battens.material
                )
            case InfillLayoutConfig():
                _check_straw(
                    result,
                    catalog,
                    f"{path}.infill.straw_material",
                    layout.infill.straw_material or default_straw,
                )
                _check_post(result, catalog, f"{path}.infill.posts", layout.infill.posts)

    return result
