"""Material catalog and the built-in default materials."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..exceptions import MaterialNotFoundError
from .models import (
    CrossSection,
    DimensionalMaterial,
    Material,
    MaterialType,
    SheetMaterial,
    StrawbaleMaterial,
    VolumeMaterial,
)

STRAWBALE = StrawbaleMaterial(
    id="strawbale",
    name="Strawbale",
    color="#e6c280",
    density=110.0,
    bale_min_length=800.0,
    bale_max_length=900.0,
    bale_height=500.0,
    bale_width=360.0,
    tolerance=2.0,
    top_cutoff_limit=50.0,
    flake_size=70.0,
)

LOOSE_STRAW = VolumeMaterial(
    id="straw",
    name="Loose straw",
    color="#f0d9a0",
    density=90.0,
)

WOOD_360X60 = DimensionalMaterial(
    id="wood-360x60",
    name="Timber 360x60",
    color="#c49a6c",
    density=450.0,
    cross_sections=(CrossSection.of(60, 360),),
    lengths=(5000.0,),
)

WOOD_120X60 = DimensionalMaterial(
    id="wood-120x60",
    name="Timber 120x60",
    color="#b8895a",
    density=450.0,
    cross_sections=(CrossSection.of(60, 120),),
    lengths=(5000.0,),
)

WOOD_140X140 = DimensionalMaterial(
    id="wood-140x140",
    name="Timber 140x140",
    color="#a87a4f",
    density=450.0,
    cross_sections=(CrossSection.of(140, 140),),
    lengths=(5000.0, 6000.0),
)

TRIANGULAR_BATTEN = DimensionalMaterial(
    id="triangular-batten",
    name="Triangular batten",
    color="#d8b088",
    density=450.0,
    cross_sections=(CrossSection.of(30, 30),),
    lengths=(4000.0,),
)

OSB_18 = SheetMaterial(
    id="osb-18",
    name="OSB 18mm",
    color="#d2b48c",
    density=600.0,
    sizes=(CrossSection.of(1250, 2500),),
    thicknesses=(18.0,),
)

CLAY_PLASTER = VolumeMaterial(
    id="clay-plaster",
    name="Clay plaster",
    color="#a0785a",
    density=1700.0,
)

DEFAULT_MATERIALS: dict[str, Material] = {
    m.id: m
    for m in (
        STRAWBALE,
        LOOSE_STRAW,
        WOOD_360X60,
        WOOD_120X60,
        WOOD_140X140,
        TRIANGULAR_BATTEN,
        OSB_18,
        CLAY_PLASTER,
    )
}

DEFAULT_STRAW_MATERIAL_ID = STRAWBALE.id


class MaterialCatalog:
    """Lookup of materials by id.

    The catalog is the material lookup collaborator of the layout
    algorithms; pass ``catalog.resolve`` wherever a ``MaterialResolver`` is
    expected. It also records which strawbale material is used when a
    straw layout does not name one.

    Example:
        catalog = MaterialCatalog.default()
        catalog.resolve("wood-360x60")  # DimensionalMaterial
        catalog.resolve("missing")      # None
    """

    def __init__(
        self,
        materials: Mapping[str, Material] | Iterable[Material],
        default_straw_material_id: str = DEFAULT_STRAW_MATERIAL_ID,
    ) -> None:
        if isinstance(materials, Mapping):
            self._materials = dict(materials)
        else:
            self._materials = {m.id: m for m in materials}
        self.default_straw_material_id = default_straw_material_id

    @classmethod
    def default(cls) -> MaterialCatalog:
        """Catalog containing the built-in default materials."""
        return cls(DEFAULT_MATERIALS)

    def resolve(self, material_id: str) -> Material | None:
        """Look up a material, returning None when it is unknown."""
        return self._materials.get(material_id)

    def get(self, material_id: str) -> Material:
        """Look up a material.

        Raises:
            MaterialNotFoundError: If no material has the given id.
        """
        material = self._materials.get(material_id)
        if material is None:
            raise MaterialNotFoundError(material_id)
        return material

    def by_type(self, material_type: MaterialType) -> list[Material]:
        """All materials of one type, sorted by name."""
        return sorted(
            (m for m in self._materials.values() if m.type == material_type),
            key=lambda m: m.name,
        )

    def register(self, material: Material) -> None:
        """Add a material, replacing any existing one with the same id."""
        self._materials[material.id] = material

    def with_materials(
        self,
        materials: Iterable[Material],
        default_straw_material_id: str | None = None,
    ) -> MaterialCatalog:
        """Return a new catalog extended (or overridden) by materials."""
        merged = dict(self._materials)
        for material in materials:
            merged[material.id] = material
        return MaterialCatalog(
            merged, default_straw_material_id or self.default_straw_material_id
        )

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._materials

    def __iter__(self):
        return iter(self._materials.values())

    def __len__(self) -> int:
        return len(self._materials)


def resolve_default_material(material_id: str) -> Material | None:
    """Resolver over the built-in default materials."""
    return DEFAULT_MATERIALS.get(material_id)
