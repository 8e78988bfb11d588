"""Materials command listing the built-in material catalog."""

from typing import Annotated

import typer

from strawbuild.domain import MaterialCatalog, MaterialType
from strawbuild.infrastructure import MaterialCatalogFormatter


def materials_command(
    material_type: Annotated[
        MaterialType | None,
        typer.Option("--type", "-t", help="Only list materials of this type"),
    ] = None,
) -> None:
    """List the built-in materials.

    Example:
        strawbuild materials --type dimensional
    """
    catalog = MaterialCatalog.default()
    if material_type is None:
        materials = sorted(catalog, key=lambda m: (m.type.value, m.name))
    else:
        materials = catalog.by_type(material_type)

    if not materials:
        typer.echo(f"No materials of type {material_type.value}.")
        return
    typer.echo(MaterialCatalogFormatter().format(materials))
