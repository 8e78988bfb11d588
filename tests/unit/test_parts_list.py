"""Unit tests for the parts list and the straw bale estimate."""

import pytest

from strawbuild.domain import (
    FullPostConfig,
    TriangularBattenConfig,
    Vec3,
    WallConstructionArea,
    aggregate_results,
    build_parts_list,
    construct_post,
    construct_straw,
    construct_triangular_battens,
    summarize_strawbales,
)
from strawbuild.domain.materials import STRAWBALE, MaterialResolver
from strawbuild.domain.services import (
    PartIssue,
    PartItem,
    StrawCategory,
    element_volume,
    index_to_label,
)


def _posts(resolve: MaterialResolver, depth: float = 360, height: float = 2500):
    elements = []
    for x in (0, 1000):
        area = WallConstructionArea.from_values((x, 0, 0), (60, depth, height))
        config = FullPostConfig(width=60, material="wood-360x60")
        elements += aggregate_results(construct_post(area, config, resolve)).elements
    return elements


class TestIndexToLabel:
    """Tests for index_to_label."""

    @pytest.mark.parametrize(
        ("index", "label"),
        [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (701, "ZZ"), (702, "AAA")],
    )
    def test_labels(self, index: int, label: str) -> None:
        assert index_to_label(index) == label


class TestBuildPartsList:
    """Tests for build_parts_list."""

    def test_identical_posts_grouped(self, resolve: MaterialResolver) -> None:
        parts_list = build_parts_list(_posts(resolve), resolve)

        material_parts = parts_list["wood-360x60"]
        assert list(material_parts.parts) == ["post:60x360x2500"]
        part = material_parts.parts["post:60x360x2500"]
        assert part.label == "A"
        assert part.kind == "post"
        assert part.quantity == 2
        assert part.length == 2500
        assert part.total_length == 5000
        assert str(part.cross_section) == "60x360"
        assert part.issue is None
        assert material_parts.total_quantity == 2
        assert material_parts.total_length == 5000
        assert material_parts.total_volume == pytest.approx(2 * 60 * 360 * 2500)
        assert not parts_list.has_issues

    def test_post_longer_than_stock(self, resolve: MaterialResolver) -> None:
        parts_list = build_parts_list(_posts(resolve, height=6000), resolve)

        part = parts_list["wood-360x60"].parts["post:60x360x6000"]
        assert part.issue == PartIssue.LENGTH_EXCEEDS_AVAILABLE
        assert parts_list.has_issues

    def test_post_cross_section_mismatch(self, resolve: MaterialResolver) -> None:
        parts_list = build_parts_list(_posts(resolve, depth=300), resolve)

        material_parts = parts_list["wood-360x60"]
        assert [p.issue for p in material_parts.issues] == [
            PartIssue.CROSS_SECTION_MISMATCH
        ]

    def test_straw_grouped_by_category(self, resolve: MaterialResolver) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (2000, 360, 1000))
        elements = aggregate_results(construct_straw(area)).elements

        parts_list = build_parts_list(elements, resolve)

        parts = parts_list["strawbale"].parts
        assert list(parts) == ["strawbale:full", "strawbale:flakes"]
        assert parts["strawbale:full"].quantity == 4
        assert parts["strawbale:full"].kind == "strawbale-full"
        assert parts["strawbale:full"].straw_category == StrawCategory.FULL
        assert parts["strawbale:flakes"].quantity == 2
        assert parts["strawbale:flakes"].label == "B"
        assert parts["strawbale:flakes"].description == "Flakes"
        assert parts["strawbale:full"].length is None

    def test_batten_parts(self, resolve: MaterialResolver) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (1000, 360, 2000))
        elements = aggregate_results(
            construct_triangular_battens(area, TriangularBattenConfig())
        ).elements

        parts_list = build_parts_list(elements, resolve)

        parts = parts_list["triangular-batten"].parts
        assert set(parts) == {
            "triangular-batten:30x30x1940",
            "triangular-batten:30x30x940",
        }
        assert parts["triangular-batten:30x30x1940"].quantity == 4
        assert parts["triangular-batten:30x30x940"].length == 940
        assert parts_list.total_quantity == 8

    def test_materials_in_order_of_appearance(self, resolve: MaterialResolver) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (2000, 360, 1000))
        elements = _posts(resolve) + aggregate_results(construct_straw(area)).elements

        parts_list = build_parts_list(elements, resolve)

        assert [m.material for m in parts_list] == ["wood-360x60", "strawbale"]
        assert "strawbale" in parts_list
        assert "osb-18" not in parts_list

    def test_unknown_material_parts(self, resolve: MaterialResolver) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (60, 360, 2500))
        config = FullPostConfig(width=60, material="oak-beam")
        elements = aggregate_results(construct_post(area, config, resolve)).elements

        parts_list = build_parts_list(elements, resolve)

        part = parts_list["oak-beam"].parts["post:60x360x2500"]
        assert part.length is None
        assert part.issue is None


class TestElementVolume:
    """Tests for element_volume."""

    def test_triangular_batten_volume(self) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (1000, 360, 2000))
        batten = aggregate_results(
            construct_triangular_battens(area, TriangularBattenConfig(outside=False))
        ).elements[0]
        assert element_volume(batten) == pytest.approx(0.5 * 30 * 30 * 1940)


class TestSummarizeStrawbales:
    """Tests for summarize_strawbales."""

    def test_full_bales_and_flakes(self, resolve: MaterialResolver) -> None:
        area = WallConstructionArea.from_values((0, 0, 0), (2000, 360, 1000))
        parts_list = build_parts_list(
            aggregate_results(construct_straw(area)).elements, resolve
        )

        summary = summarize_strawbales(parts_list["strawbale"].parts.values(), STRAWBALE)

        assert summary.buckets[StrawCategory.FULL].count == 4
        assert summary.buckets[StrawCategory.FLAKES].count == 2
        # two 200mm flake stacks fit in one bale
        assert summary.total_estimated_bales_max == 5
        assert summary.total_volume == pytest.approx(2000 * 360 * 1000)

    def test_partial_offcuts_reduce_estimate(self) -> None:
        volume = 450 * 360 * 500
        partial = PartItem(
            part_id="strawbale:partial",
            label="A",
            kind="strawbale-partial",
            material="strawbale",
            size=Vec3(450, 360, 500),
            quantity=4,
            total_volume=4 * volume,
            straw_category=StrawCategory.PARTIAL,
        )

        summary = summarize_strawbales([partial], STRAWBALE)

        assert summary.min_remaining_bale_count == 1
        assert summary.max_remaining_bale_count == 2
        assert summary.total_estimated_bales_max == 3

    def test_nothing_to_summarize(self) -> None:
        summary = summarize_strawbales([], STRAWBALE)
        assert summary.total_estimated_bales_max == 0
        assert summary.total_volume == 0
