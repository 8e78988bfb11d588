"""Unit tests for ConstructWallsCommand."""

import logging

import pytest

from strawbuild.application import ConstructWallsCommand
from strawbuild.application.config import load_config_from_dict
from strawbuild.domain import MaterialNotFoundError
from strawbuild.domain.services import StrawCategory


def _project(*walls: dict, **overrides) -> dict:
    data = {"schema_version": "1.0", "walls": list(walls)}
    data.update(overrides)
    return data


def _wall(name: str, layout: dict, size=(2000, 360, 1000), **extra) -> dict:
    return {"name": name, "size": list(size), "layout": layout, **extra}


class TestConstructWallsCommand:
    """Tests for constructing whole projects."""

    def test_straw_wall(self) -> None:
        config = load_config_from_dict(_project(_wall("north", {"type": "straw"})))

        output = ConstructWallsCommand().execute(config)

        assert [w.name for w in output.walls] == ["north"]
        wall = output.walls[0]
        assert wall.layout == "straw"
        assert len(wall.elements) == 6
        assert wall.is_valid
        assert output.exit_code == 0

    def test_walls_in_file_order(self) -> None:
        config = load_config_from_dict(
            _project(
                _wall("b", {"type": "post"}, size=(60, 360, 2500)),
                _wall("a", {"type": "triangular_battens"}, size=(1000, 360, 2000)),
            )
        )

        output = ConstructWallsCommand().execute(config)

        assert [(w.name, w.layout) for w in output.walls] == [
            ("b", "post"),
            ("a", "triangular_battens"),
        ]
        assert len(output.results.elements) == 1 + 8

    def test_position_offsets_elements(self) -> None:
        config = load_config_from_dict(
            _project(_wall("east", {"type": "straw"}, position=[5000, 0, 0]))
        )
        output = ConstructWallsCommand().execute(config)
        assert output.walls[0].results.bounds.min.x == 5000

    def test_parts_list_and_straw_summary(self) -> None:
        config = load_config_from_dict(
            _project(_wall("north", {"type": "infill"}, size=(2000, 360, 500)))
        )

        output = ConstructWallsCommand().execute(config)

        assert "strawbale" in output.parts_list
        assert "wood-360x60" in output.parts_list
        summary = output.straw_summaries["strawbale"]
        assert summary.buckets[StrawCategory.FULL].count == 2
        assert summary.buckets[StrawCategory.FLAKES].count == 1

    def test_custom_default_straw_material(self) -> None:
        config = load_config_from_dict(
            _project(
                _wall("north", {"type": "straw"}, size=(2000, 480, 1000)),
                materials=[
                    {"type": "strawbale", "id": "jumbo", "name": "Jumbo", "bale_width": 480}
                ],
                default_straw_material="jumbo",
            )
        )

        output = ConstructWallsCommand().execute(config)

        assert output.walls[0].is_valid
        assert {e.material for e in output.walls[0].elements} == {"jumbo"}
        assert "jumbo" in output.straw_summaries

    def test_diagnostics_set_exit_code(self) -> None:
        config = load_config_from_dict(
            _project(
                _wall("thin", {"type": "straw"}, size=(2000, 300, 1000)),
                _wall("thick", {"type": "straw"}, size=(2000, 400, 1000)),
            )
        )

        output = ConstructWallsCommand().execute(config)

        assert len(output.walls[0].warnings) == 1
        assert len(output.walls[1].errors) == 1
        assert not output.is_valid
        assert output.exit_code == 1

    def test_unknown_straw_material_raises(self) -> None:
        config = load_config_from_dict(
            _project(_wall("north", {"type": "straw", "material": "hay"}))
        )
        with pytest.raises(MaterialNotFoundError):
            ConstructWallsCommand().execute(config)

    def test_ids_unique_across_walls(self) -> None:
        config = load_config_from_dict(
            _project(
                _wall("north", {"type": "straw"}),
                _wall("south", {"type": "infill"}),
            )
        )

        output = ConstructWallsCommand().execute(config)

        ids = [e.id for e in output.results.elements]
        assert len(ids) == len(set(ids))
        assert ids[0] == "element-1"

    def test_repeatable(self) -> None:
        config = load_config_from_dict(_project(_wall("north", {"type": "infill"})))
        first = ConstructWallsCommand().execute(config)
        second = ConstructWallsCommand().execute(config)
        assert first.results.elements == second.results.elements

    def test_logs_each_wall(self, caplog: pytest.LogCaptureFixture) -> None:
        config = load_config_from_dict(_project(_wall("north", {"type": "straw"})))
        with caplog.at_level(logging.INFO, logger="strawbuild"):
            ConstructWallsCommand().execute(config)
        assert "Constructing wall 'north'" in caplog.text
