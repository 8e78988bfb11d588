"""Material records, discriminated by material type."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class MaterialType(str, Enum):
    """Kinds of materials known to the catalog."""

    DIMENSIONAL = "dimensional"
    STRAWBALE = "strawbale"
    SHEET = "sheet"
    VOLUME = "volume"
    GENERIC = "generic"
    PREFAB = "prefab"


@dataclass(frozen=True, order=True)
class CrossSection:
    """A rectangular cross section, stored smaller side first.

    Use ``CrossSection.of(a, b)`` to build one from two sides in any order;
    two sections compare equal regardless of the order they were given in.
    """

    smaller: float
    bigger: float

    def __post_init__(self) -> None:
        if self.smaller <= 0 or self.bigger <= 0:
            raise ValueError("Cross section dimensions must be positive")
        if self.smaller > self.bigger:
            smaller, bigger = self.bigger, self.smaller
            object.__setattr__(self, "smaller", smaller)
            object.__setattr__(self, "bigger", bigger)

    @classmethod
    def of(cls, a: float, b: float) -> CrossSection:
        return cls(min(a, b), max(a, b))

    def matches(self, a: float, b: float) -> bool:
        """Check two sides against this section, in either order."""
        return self.smaller == min(a, b) and self.bigger == max(a, b)

    def __str__(self) -> str:
        return f"{_fmt(self.smaller)}x{_fmt(self.bigger)}"


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class _MaterialBase:
    id: str
    name: str
    color: str = "#cccccc"
    density: float | None = None  # kg/m^3


@dataclass(frozen=True)
class DimensionalMaterial(_MaterialBase):
    """Sawn timber available in fixed cross sections and stock lengths."""

    cross_sections: tuple[CrossSection, ...] = ()
    lengths: tuple[float, ...] = ()

    type: MaterialType = field(default=MaterialType.DIMENSIONAL, init=False)

    def __post_init__(self) -> None:
        if not self.cross_sections:
            raise ValueError("Cross sections must be a non-empty list")
        if any(length <= 0 for length in self.lengths):
            raise ValueError("All lengths must be positive")

    def has_cross_section(self, a: float, b: float) -> bool:
        return any(section.matches(a, b) for section in self.cross_sections)


@dataclass(frozen=True)
class StrawbaleMaterial(_MaterialBase):
    """Straw bales with their nominal dimensions and cutting heuristics.

    Attributes:
        bale_min_length: Shortest bale delivered by the baler in mm.
        bale_max_length: Longest bale delivered by the baler in mm.
        bale_height: Nominal bale height in mm (course height).
        bale_width: Nominal bale width in mm (wall thickness).
        tolerance: Deviation still treated as nominal in mm.
        top_cutoff_limit: Largest amount a top course may be cut down in mm.
        flake_size: Thinnest strip still placed as flakes in mm.
    """

    bale_min_length: float = 800.0
    bale_max_length: float = 900.0
    bale_height: float = 500.0
    bale_width: float = 360.0
    tolerance: float = 2.0
    top_cutoff_limit: float = 50.0
    flake_size: float = 70.0

    type: MaterialType = field(default=MaterialType.STRAWBALE, init=False)

    def __post_init__(self) -> None:
        if self.bale_min_length <= 0:
            raise ValueError("Bale minimum length must be positive")
        if self.bale_max_length <= 0:
            raise ValueError("Bale maximum length must be positive")
        if self.bale_min_length > self.bale_max_length:
            raise ValueError("Bale minimum length cannot exceed the maximum length")
        if self.bale_height <= 0:
            raise ValueError("Bale height must be positive")
        if self.bale_width <= 0:
            raise ValueError("Bale width must be positive")
        if self.tolerance < 0:
            raise ValueError("Tolerance cannot be negative")
        if self.top_cutoff_limit <= 0:
            raise ValueError("Top cutoff limit must be positive")
        if self.flake_size <= 0:
            raise ValueError("Flake size must be positive")


@dataclass(frozen=True)
class SheetMaterial(_MaterialBase):
    """Board material available in fixed sheet sizes and thicknesses."""

    sizes: tuple[CrossSection, ...] = ()
    thicknesses: tuple[float, ...] = ()

    type: MaterialType = field(default=MaterialType.SHEET, init=False)

    def __post_init__(self) -> None:
        if not self.sizes:
            raise ValueError("Sheet sizes must be a non-empty list")
        if not self.thicknesses:
            raise ValueError("Sheet thicknesses must be a non-empty list")
        if any(t <= 0 for t in self.thicknesses):
            raise ValueError("All sheet thicknesses must be positive")


@dataclass(frozen=True)
class VolumeMaterial(_MaterialBase):
    """Bulk material sold by volume (loose straw, plaster, insulation)."""

    available_volumes: tuple[float, ...] = ()

    type: MaterialType = field(default=MaterialType.VOLUME, init=False)

    def __post_init__(self) -> None:
        if any(v <= 0 for v in self.available_volumes):
            raise ValueError("All available volumes must be positive")


@dataclass(frozen=True)
class GenericMaterial(_MaterialBase):
    """Material without dimensional constraints."""

    type: MaterialType = field(default=MaterialType.GENERIC, init=False)


@dataclass(frozen=True)
class PrefabMaterial(_MaterialBase):
    """Prefabricated wall modules of fixed size."""

    module_width: float = 920.0
    module_thickness: float = 360.0

    type: MaterialType = field(default=MaterialType.PREFAB, init=False)

    def __post_init__(self) -> None:
        if self.module_width <= 0 or self.module_thickness <= 0:
            raise ValueError("Module dimensions must be positive")


Material = (
    DimensionalMaterial
    | StrawbaleMaterial
    | SheetMaterial
    | VolumeMaterial
    | GenericMaterial
    | PrefabMaterial
)

# Lookup collaborator passed into the layout algorithms
MaterialResolver = Callable[[str], "Material | None"]
