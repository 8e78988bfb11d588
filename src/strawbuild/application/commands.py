"""Application commands (use cases) for wall construction."""

from __future__ import annotations

import logging

from strawbuild.application.config.adapter import (
    config_to_area,
    config_to_battens,
    config_to_catalog,
    config_to_infill,
    config_to_post,
)
from strawbuild.application.config.schema import (
    InfillLayoutConfig,
    PostLayoutConfig,
    ProjectConfiguration,
    StrawLayoutConfig,
    TriangularBattenLayoutConfig,
    WallConfig,
)
from strawbuild.domain import (
    MaterialCatalog,
    ResultSequence,
    StrawbaleMaterial,
    aggregate_results,
    build_parts_list,
    construct_post,
    construct_straw,
    construct_triangular_battens,
    element_id_scope,
    infill_wall_area,
    summarize_strawbales,
)

from .dtos import ProjectOutput, WallOutput

logger = logging.getLogger(__name__)


class ConstructWallsCommand:
    """Command constructing every wall of a project.

    Each wall is filled with its configured layout; the results are
    aggregated per wall and a parts list is built across all walls.
    """

    def __init__(self, catalog: MaterialCatalog | None = None) -> None:
        self.base_catalog = catalog or MaterialCatalog.default()

    def execute(self, config: ProjectConfiguration) -> ProjectOutput:
        """Construct all walls of a project configuration.

        Args:
            config: A validated ProjectConfiguration instance.

        Returns:
            ProjectOutput with per-wall results, parts list and straw estimates.

        Raises:
            MaterialNotFoundError: If a straw layout names an unknown material.
            InvalidConfigurationError: If a straw layout names a material
                that is not a strawbale.
        """
        catalog = config_to_catalog(config, self.base_catalog)
        output = ProjectOutput(catalog=catalog)

        # element ids are unique across all walls of the project
        with element_id_scope():
            for wall in config.walls:
                self._construct_wall(wall, catalog, output)

        output.parts_list = build_parts_list(output.results.elements, catalog.resolve)
        for material_parts in output.parts_list:
            material = catalog.resolve(material_parts.material)
            if isinstance(material, StrawbaleMaterial):
                output.straw_summaries[material.id] = summarize_strawbales(
                    material_parts.parts.values(), material
                )
        return output

    def _construct_wall(
        self, wall: WallConfig, catalog: MaterialCatalog, output: ProjectOutput
    ) -> None:
        logger.info(f"Constructing wall '{wall.name}' ({wall.layout.type})")
        results = aggregate_results(self._layout(wall, catalog))
        logger.info(
            f"Wall '{wall.name}': {len(results.elements)} elements, "
            f"{len(results.warnings)} warnings, {len(results.errors)} errors"
        )
        output.walls.append(
            WallOutput(name=wall.name, layout=wall.layout.type, results=results)
        )

    def _layout(self, wall: WallConfig, catalog: MaterialCatalog) -> ResultSequence:
        area = config_to_area(wall)
        layout = wall.layout
        match layout:
            case StrawLayoutConfig():
                return construct_straw(
                    area,
                    layout.material or catalog.default_straw_material_id,
                    resolve_material=catalog.resolve,
                )
            case PostLayoutConfig():
                return construct_post(
                    area, config_to_post(layout.post), catalog.resolve
                )
            case TriangularBattenLayoutConfig():
                return construct_triangular_battens(
                    area, config_to_battens(layout.battens)
                )
            case InfillLayoutConfig():
                return infill_wall_area(
                    area,
                    config_to_infill(
                        layout.infill, catalog.default_straw_material_id
                    ),
                    catalog.resolve,
                    starts_with_stand=layout.starts_with_stand,
                    ends_with_stand=layout.ends_with_stand,
                    start_at_end=layout.start_at_end,
                )
        raise TypeError(f"Unknown layout: {type(layout).__name__}")
