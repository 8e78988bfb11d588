"""Output formatters and exporters for construction results."""

from __future__ import annotations

import json
from typing import Any, Iterable

from strawbuild.application.dtos import ProjectOutput, WallOutput
from strawbuild.domain import (
    ConstructionElement,
    Cuboid,
    Diagnostic,
    ExtrudedPolygon,
    Material,
    PartsList,
)
from strawbuild.domain.materials import (
    DimensionalMaterial,
    SheetMaterial,
    StrawbaleMaterial,
)
from strawbuild.domain.services import StrawSummary
from strawbuild.domain.value_objects import Bounds3D, Vec3

# mm^3 per m^3
_M3 = 1e9


def _fmt_vec(v: Vec3) -> str:
    return f"{v.x:g} x {v.y:g} x {v.z:g}"


class ElementListFormatter:
    """Formats the elements of a wall as a table."""

    def format(self, wall: WallOutput) -> str:
        lines = [
            f"WALL {wall.name} ({wall.layout})",
            "=" * 90,
            f"{'Id':<14} {'Material':<20} {'Position':<24} {'Size':<22} {'Tags'}",
            "-" * 90,
        ]
        if not wall.elements:
            lines.append("No elements.")
        for element in wall.elements:
            tags = ", ".join(t.id for t in element.tags)
            lines.append(
                f"{element.id:<14} {element.material:<20} "
                f"{_fmt_vec(element.position):<24} {_fmt_vec(element.size):<22} {tags}"
            )
        return "\n".join(lines)


class DiagnosticsFormatter:
    """Formats warnings and errors.

    Args:
        grouped: Collapse diagnostics sharing a group key into one line.
    """

    def __init__(self, grouped: bool = True) -> None:
        self._grouped = grouped

    def format(self, output: ProjectOutput) -> str:
        lines: list[str] = []
        for wall in output.walls:
            if self._grouped:
                warnings, errors = wall.results.group_diagnostics()
            else:
                warnings, errors = wall.warnings, wall.errors
            for diagnostic in errors:
                lines.append(self._line("ERROR", wall.name, diagnostic))
            for diagnostic in warnings:
                lines.append(self._line("WARNING", wall.name, diagnostic))
        if not lines:
            return "No problems found."
        return "\n".join(lines)

    def _line(self, level: str, wall: str, diagnostic: Diagnostic) -> str:
        count = len(diagnostic.elements)
        suffix = "element" if count == 1 else "elements"
        return f"{level}: [{wall}] {diagnostic.description} ({count} {suffix})"


class PartsListFormatter:
    """Formats a parts list grouped by material."""

    def format(self, parts_list: PartsList, materials: dict[str, Material]) -> str:
        lines = ["PARTS LIST", "=" * 90]
        for material_parts in parts_list:
            material = materials.get(material_parts.material)
            name = material.name if material else material_parts.material
            lines.append("")
            lines.append(f"{name} [{material_parts.material}]")
            lines.append(
                f"  {'Label':<6} {'Kind':<22} {'Size':<26} {'Qty':<5} "
                f"{'Volume m3':<10} {'Issue'}"
            )
            for part in material_parts.parts.values():
                size = part.description or _fmt_vec(part.size)
                issue = part.issue.value if part.issue else ""
                lines.append(
                    f"  {part.label:<6} {part.kind:<22} {size:<26} "
                    f"{part.quantity:<5} {part.total_volume / _M3:<10.3f} {issue}"
                )
            total = (
                f"  Total: {material_parts.total_quantity} pieces, "
                f"{material_parts.total_volume / _M3:.3f} m3"
            )
            if material_parts.total_length is not None:
                total += f", {material_parts.total_length / 1000:.2f} m"
            lines.append(total)
        return "\n".join(lines)


class StrawSummaryFormatter:
    """Formats bale estimates."""

    def format(self, summaries: dict[str, StrawSummary]) -> str:
        lines = ["STRAW ESTIMATE", "=" * 60]
        for material_id, summary in summaries.items():
            lines.append(f"{material_id}:")
            for category, bucket in summary.buckets.items():
                if bucket.count:
                    lines.append(
                        f"  {category.value:<10} {bucket.count:>5} pieces "
                        f"{bucket.volume / _M3:>8.3f} m3"
                    )
            lines.append(
                f"  Estimated bales: {summary.total_estimated_bales_max} "
                f"({summary.total_volume / _M3:.3f} m3 straw)"
            )
        return "\n".join(lines)


class MaterialCatalogFormatter:
    """Formats catalog materials as a table."""

    def format(self, materials: Iterable[Material]) -> str:
        lines = [
            f"{'Id':<20} {'Type':<12} {'Name':<22} {'Details'}",
            "-" * 80,
        ]
        for material in materials:
            lines.append(
                f"{material.id:<20} {material.type.value:<12} "
                f"{material.name:<22} {self._details(material)}"
            )
        return "\n".join(lines)

    def _details(self, material: Material) -> str:
        match material:
            case DimensionalMaterial():
                sections = ", ".join(str(s) for s in material.cross_sections)
                lengths = ", ".join(f"{length:g}" for length in material.lengths)
                return f"sections {sections}; lengths {lengths or '-'}"
            case StrawbaleMaterial():
                return (
                    f"{material.bale_min_length:g}-{material.bale_max_length:g} x "
                    f"{material.bale_width:g} x {material.bale_height:g}"
                )
            case SheetMaterial():
                sizes = ", ".join(str(s) for s in material.sizes)
                thicknesses = ", ".join(f"{t:g}" for t in material.thicknesses)
                return f"sizes {sizes}; thicknesses {thicknesses}"
        return ""


class ReportFormatter:
    """Full text report of a constructed project."""

    def __init__(self, show_elements: bool = True) -> None:
        self._show_elements = show_elements

    def format(self, output: ProjectOutput) -> str:
        sections: list[str] = []
        if self._show_elements:
            element_formatter = ElementListFormatter()
            sections.extend(element_formatter.format(wall) for wall in output.walls)
        sections.append(
            PartsListFormatter().format(
                output.parts_list, {m.id: m for m in output.catalog}
            )
        )
        if output.straw_summaries:
            sections.append(StrawSummaryFormatter().format(output.straw_summaries))
        sections.append("DIAGNOSTICS\n" + "=" * 60)
        sections.append(DiagnosticsFormatter().format(output))
        return "\n\n".join(sections)


class JsonExporter:
    """Exports construction results as JSON."""

    def export(self, output: ProjectOutput) -> str:
        data = {
            "walls": [self._format_wall(wall) for wall in output.walls],
            "parts_list": self._format_parts_list(output.parts_list),
            "straw_summaries": {
                material_id: {
                    "estimated_bales": summary.total_estimated_bales_max,
                    "total_volume": summary.total_volume,
                    "buckets": {
                        category.value: {"count": b.count, "volume": b.volume}
                        for category, b in summary.buckets.items()
                    },
                }
                for material_id, summary in output.straw_summaries.items()
            },
            "exit_code": output.exit_code,
        }
        return json.dumps(data, indent=2)

    def _format_wall(self, wall: WallOutput) -> dict[str, Any]:
        return {
            "name": wall.name,
            "layout": wall.layout,
            "bounds": self._format_bounds(wall.results.bounds),
            "elements": [self._format_element(e) for e in wall.elements],
            "warnings": [self._format_diagnostic(d) for d in wall.warnings],
            "errors": [self._format_diagnostic(d) for d in wall.errors],
        }

    def _format_element(self, element: ConstructionElement) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": element.id,
            "material": element.material,
            "tags": [t.id for t in element.tags],
            "translation": list(element.transform.translation.as_tuple()),
            "bounds": self._format_bounds(element.bounds),
        }
        shape = element.shape
        if isinstance(shape, Cuboid):
            data["shape"] = {
                "type": shape.type,
                "offset": list(shape.offset.as_tuple()),
                "size": list(shape.size.as_tuple()),
            }
        elif isinstance(shape, ExtrudedPolygon):
            data["shape"] = {
                "type": shape.type,
                "plane": shape.plane,
                "outline": [[p.x, p.y] for p in shape.outline],
                "extrude_length": shape.extrude_length,
            }
        if element.part_info is not None:
            data["part"] = {
                "kind": element.part_info.kind,
                "size": (
                    list(element.part_info.size.as_tuple())
                    if element.part_info.size
                    else None
                ),
            }
        return data

    def _format_diagnostic(self, diagnostic: Diagnostic) -> dict[str, Any]:
        return {
            "description": diagnostic.description,
            "elements": list(diagnostic.elements),
            "bounds": self._format_bounds(diagnostic.bounds),
            "group_key": diagnostic.group_key,
            "message_key": diagnostic.message_key,
            "params": dict(diagnostic.params),
        }

    def _format_bounds(self, bounds: Bounds3D) -> dict[str, list[float]] | None:
        if bounds.is_empty:
            return None
        return {"min": list(bounds.min.as_tuple()), "max": list(bounds.max.as_tuple())}

    def _format_parts_list(self, parts_list: PartsList) -> list[dict[str, Any]]:
        return [
            {
                "material": material_parts.material,
                "total_quantity": material_parts.total_quantity,
                "total_volume": material_parts.total_volume,
                "total_length": material_parts.total_length,
                "parts": [
                    {
                        "label": part.label,
                        "part_id": part.part_id,
                        "kind": part.kind,
                        "size": list(part.size.as_tuple()),
                        "quantity": part.quantity,
                        "total_volume": part.total_volume,
                        "length": part.length,
                        "issue": part.issue.value if part.issue else None,
                    }
                    for part in material_parts.parts.values()
                ],
            }
            for material_parts in parts_list
        ]
