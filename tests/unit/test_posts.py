"""Unit tests for the post layout."""

import pytest

from strawbuild.domain import (
    DoublePostConfig,
    FullPostConfig,
    InvalidConfigurationError,
    Vec3,
    WallConstructionArea,
    aggregate_results,
    construct_post,
)
from strawbuild.domain.materials import MaterialResolver
from strawbuild.domain.tags import TAG_POST


def _area(depth: float = 360, height: float = 2500) -> WallConstructionArea:
    return WallConstructionArea.from_values((1000, 0, 0), (60, depth, height))


class TestFullPost:
    """Tests for full posts."""

    def test_single_post_spans_area(self, resolve: MaterialResolver) -> None:
        config = FullPostConfig(width=60, material="wood-360x60")
        results = aggregate_results(construct_post(_area(), config, resolve))

        assert len(results.elements) == 1
        post = results.elements[0]
        assert post.material == "wood-360x60"
        assert post.position == Vec3(1000, 0, 0)
        assert post.size == Vec3(60, 360, 2500)
        assert post.has_tag(TAG_POST)
        assert post.part_info.kind == "post"
        assert results.warnings == []
        assert results.errors == []

    def test_cross_section_mismatch_warns(self, resolve: MaterialResolver) -> None:
        config = FullPostConfig(width=60, material="wood-360x60")
        results = aggregate_results(construct_post(_area(depth=300), config, resolve))

        assert len(results.elements) == 1
        assert len(results.warnings) == 1
        warning = results.warnings[0]
        assert "don't match material dimensions" in warning.description
        assert "60x360" in warning.description
        assert warning.elements == (results.elements[0].id,)
        assert warning.message_key == "construction.post.cross_section_mismatch"

    def test_swapped_dimensions_match(self, resolve: MaterialResolver) -> None:
        """A 360 wide post in a 60 deep wall matches a 60x360 section."""
        area = WallConstructionArea.from_values((0, 0, 0), (360, 60, 2500))
        config = FullPostConfig(width=360, material="wood-360x60")
        results = aggregate_results(construct_post(area, config, resolve))
        assert results.warnings == []

    def test_unknown_material_is_not_checked(self, resolve: MaterialResolver) -> None:
        config = FullPostConfig(width=60, material="oak-beam")
        results = aggregate_results(construct_post(_area(depth=300), config, resolve))
        assert len(results.elements) == 1
        assert results.warnings == []


class TestDoublePost:
    """Tests for double posts."""

    def _config(self, thickness: float = 120) -> DoublePostConfig:
        return DoublePostConfig(
            width=60,
            thickness=thickness,
            material="wood-120x60",
            infill_material="straw",
        )

    def test_two_posts_and_infill(self, resolve: MaterialResolver) -> None:
        results = aggregate_results(construct_post(_area(), self._config(), resolve))

        assert len(results.elements) == 3
        first, second, infill = results.elements
        assert first.position == Vec3(1000, 0, 0)
        assert first.size == Vec3(60, 120, 2500)
        assert second.position == Vec3(1000, 240, 0)
        assert second.size == Vec3(60, 120, 2500)
        assert infill.material == "straw"
        assert infill.position == Vec3(1000, 120, 0)
        assert infill.size == Vec3(60, 120, 2500)
        assert results.warnings == []
        assert results.errors == []

    def test_exact_minimum_depth_has_no_infill(self, resolve: MaterialResolver) -> None:
        results = aggregate_results(
            construct_post(_area(depth=240), self._config(), resolve)
        )
        assert len(results.elements) == 2
        assert all(e.has_tag(TAG_POST) for e in results.elements)
        assert results.errors == []

    def test_below_minimum_depth_errors(self, resolve: MaterialResolver) -> None:
        results = aggregate_results(
            construct_post(_area(depth=239), self._config(), resolve)
        )

        assert len(results.elements) == 1
        assert len(results.errors) == 1
        error = results.errors[0]
        assert "not wide enough for double posts" in error.description
        assert "240mm minimum" in error.description
        assert error.elements == (results.elements[0].id,)
        assert results.elements[0].size == Vec3(60, 239, 2500)

    def test_mismatch_warning_references_both_posts(
        self, resolve: MaterialResolver
    ) -> None:
        results = aggregate_results(
            construct_post(_area(), self._config(thickness=100), resolve)
        )

        assert len(results.warnings) == 1
        post_ids = tuple(e.id for e in results.elements if e.has_tag(TAG_POST))
        assert results.warnings[0].elements == post_ids


class TestConstructPost:
    """Tests for config dispatch."""

    def test_unknown_config_raises_on_call(self, resolve: MaterialResolver) -> None:
        with pytest.raises(InvalidConfigurationError, match="Invalid post type"):
            construct_post(_area(), object(), resolve)

    def test_invalid_post_type_is_type_error(self, resolve: MaterialResolver) -> None:
        with pytest.raises(TypeError):
            construct_post(_area(), "full", resolve)
