"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from strawbuild.domain import (
    AggregatedResults,
    ConstructionElement,
    Diagnostic,
    MaterialCatalog,
    PartsList,
)
from strawbuild.domain.services import StrawSummary


@dataclass
class WallOutput:
    """Construction result of a single wall.

    Attributes:
        name: Wall name from the project file.
        layout: Layout type used to fill the wall.
        results: Aggregated elements, warnings and errors of the wall.
    """

    name: str
    layout: str
    results: AggregatedResults

    @property
    def elements(self) -> list[ConstructionElement]:
        return self.results.elements

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.results.warnings

    @property
    def errors(self) -> list[Diagnostic]:
        return self.results.errors

    @property
    def is_valid(self) -> bool:
        return self.results.is_valid


@dataclass
class ProjectOutput:
    """Output DTO of constructing every wall of a project.

    Attributes:
        walls: Per-wall results in project file order.
        parts_list: Parts of all walls grouped by material.
        straw_summaries: Bale estimates per strawbale material id.
        catalog: Catalog the project was constructed with.
    """

    walls: list[WallOutput] = field(default_factory=list)
    parts_list: PartsList = field(default_factory=PartsList)
    straw_summaries: dict[str, StrawSummary] = field(default_factory=dict)
    catalog: MaterialCatalog = field(default_factory=MaterialCatalog.default)

    @property
    def results(self) -> AggregatedResults:
        """All walls' results combined in wall order."""
        combined = AggregatedResults()
        for wall in self.walls:
            combined.extend(wall.results)
        return combined

    @property
    def is_valid(self) -> bool:
        return all(wall.is_valid for wall in self.walls)

    @property
    def exit_code(self) -> int:
        """0 if clean, 1 if any wall has errors, 2 if there are only warnings."""
        return self.results.exit_code
