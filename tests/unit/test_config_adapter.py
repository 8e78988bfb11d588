"""Unit tests for configuration adapter functions.

These tests verify:
- config_to_catalog extends and overrides the built-in catalog
- config_to_area converts wall regions, including sloped tops
- Post, batten and infill settings map onto the domain value objects
"""

import pytest

from strawbuild.application.config import (
    DimensionalMaterialConfig,
    DoublePostConfigSchema,
    FullPostConfigSchema,
    InfillConfigSchema,
    ProjectConfiguration,
    StrawbaleMaterialConfig,
    TriangularBattenConfigSchema,
    WallConfig,
    config_to_area,
    config_to_battens,
    config_to_catalog,
    config_to_infill,
    config_to_material,
    config_to_post,
)
from strawbuild.domain import (
    DoublePostConfig,
    FullPostConfig,
    MaterialCatalog,
    StrawbaleMaterial,
    Vec2,
    Vec3,
)
from strawbuild.domain.materials import CrossSection, DimensionalMaterial


def _config(**overrides) -> ProjectConfiguration:
    data = {
        "schema_version": "1.0",
        "walls": [{"name": "north", "size": [4000, 360, 2500], "layout": {"type": "straw"}}],
    }
    data.update(overrides)
    return ProjectConfiguration.model_validate(data)


class TestConfigToMaterial:
    """Tests for config_to_material."""

    def test_dimensional(self) -> None:
        material = config_to_material(
            DimensionalMaterialConfig(
                id="kvh", name="KVH", cross_sections=[(200, 60)], lengths=[6000]
            )
        )
        assert isinstance(material, DimensionalMaterial)
        assert material.cross_sections == (CrossSection.of(60, 200),)
        assert material.lengths == (6000,)

    def test_strawbale(self) -> None:
        material = config_to_material(
            StrawbaleMaterialConfig(id="big", name="Big bale", bale_width=480)
        )
        assert isinstance(material, StrawbaleMaterial)
        assert material.bale_width == 480
        assert material.bale_height == 500


class TestConfigToCatalog:
    """Tests for config_to_catalog."""

    def test_without_materials_is_default(self) -> None:
        catalog = config_to_catalog(_config())
        assert len(catalog) == len(MaterialCatalog.default())
        assert catalog.default_straw_material_id == "strawbale"

    def test_custom_material_added(self) -> None:
        catalog = config_to_catalog(
            _config(materials=[{"type": "strawbale", "id": "big", "name": "Big bale"}])
        )
        assert isinstance(catalog.resolve("big"), StrawbaleMaterial)
        assert "strawbale" in catalog

    def test_custom_material_overrides_builtin(self) -> None:
        catalog = config_to_catalog(
            _config(
                materials=[
                    {
                        "type": "strawbale",
                        "id": "strawbale",
                        "name": "Jumbo",
                        "bale_width": 480,
                    }
                ]
            )
        )
        assert catalog.resolve("strawbale").bale_width == 480

    def test_default_straw_material(self) -> None:
        catalog = config_to_catalog(
            _config(
                materials=[{"type": "strawbale", "id": "big", "name": "Big bale"}],
                default_straw_material="big",
            )
        )
        assert catalog.default_straw_material_id == "big"


class TestConfigToArea:
    """Tests for config_to_area."""

    def test_flat_wall(self) -> None:
        area = config_to_area(
            WallConfig(
                name="north",
                position=(100, 0, 50),
                size=(4000, 360, 2500),
                layout={"type": "straw"},
            )
        )
        assert area.position == Vec3(100, 0, 50)
        assert area.size == Vec3(4000, 360, 2500)
        assert area.top_offsets is None

    def test_sloped_wall(self) -> None:
        area = config_to_area(
            WallConfig(
                name="gable",
                size=(4000, 360, 2500),
                top_offsets=[(0, -500), (2000, 0), (4000, -500)],
                layout={"type": "straw"},
            )
        )
        assert area.top_offsets == (
            Vec2(0, -500),
            Vec2(2000, 0),
            Vec2(4000, -500),
        )
        assert area.height_at(1000) == pytest.approx(2250)


class TestConfigToConstruction:
    """Tests for post, batten and infill conversion."""

    def test_full_post(self) -> None:
        post = config_to_post(FullPostConfigSchema(width=80, material="wood-140x140"))
        assert post == FullPostConfig(width=80, material="wood-140x140")

    def test_double_post(self) -> None:
        post = config_to_post(DoublePostConfigSchema())
        assert post == DoublePostConfig(
            width=60, thickness=120, material="wood-120x60", infill_material="straw"
        )

    def test_battens(self) -> None:
        battens = config_to_battens(
            TriangularBattenConfigSchema(size=40, outside=False, min_length=200)
        )
        assert battens.size == 40
        assert battens.inside
        assert not battens.outside
        assert battens.min_length == 200
        assert battens.material == "triangular-batten"

    def test_infill_uses_project_default_straw(self) -> None:
        infill = config_to_infill(InfillConfigSchema(), default_straw_material="big")
        assert infill.straw_material == "big"
        assert isinstance(infill.posts, FullPostConfig)

    def test_infill_own_straw_wins(self) -> None:
        infill = config_to_infill(
            InfillConfigSchema(straw_material="small", max_post_spacing=700),
            default_straw_material="big",
        )
        assert infill.straw_material == "small"
        assert infill.max_post_spacing == 700
