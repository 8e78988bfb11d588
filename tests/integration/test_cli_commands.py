"""Integration tests for the strawbuild CLI.

These tests run the typer app end-to-end on project files written to a
temporary directory and verify:
- construct prints text and JSON reports
- validate reports material and construction problems
- materials lists the built-in catalog
- Exit codes are correct (0 clean, 2 warnings, 1 errors)
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from strawbuild.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def _write(tmp_path: Path, *walls: dict[str, Any], **extra: Any) -> Path:
    path = tmp_path / "project.json"
    path.write_text(json.dumps({"schema_version": "1.0", "walls": list(walls), **extra}))
    return path


STRAW_WALL = {"name": "north", "size": [2000, 360, 1000], "layout": {"type": "straw"}}
THIN_WALL = {"name": "thin", "size": [2000, 300, 1000], "layout": {"type": "straw"}}
THICK_WALL = {"name": "thick", "size": [2000, 400, 1000], "layout": {"type": "straw"}}


class TestConstructCommand:
    """Tests for the construct command."""

    def test_text_report(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["construct", str(_write(tmp_path, STRAW_WALL))])

        assert result.exit_code == 0
        assert "WALL north (straw)" in result.output
        assert "PARTS LIST" in result.output
        assert "No problems found." in result.output

    def test_text_report_without_elements(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app, ["construct", str(_write(tmp_path, STRAW_WALL)), "--no-elements"]
        )
        assert result.exit_code == 0
        assert "WALL north" not in result.output

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["construct", str(_write(tmp_path, STRAW_WALL)), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["walls"][0]["name"] == "north"
        assert data["exit_code"] == 0

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "out" / "result.json"
        result = runner.invoke(
            app,
            [
                "construct",
                str(_write(tmp_path, STRAW_WALL)),
                "-f",
                "json",
                "--output",
                str(out),
            ],
        )

        assert result.exit_code == 0
        assert "Output written to" in result.output
        assert json.loads(out.read_text())["walls"][0]["name"] == "north"

    def test_warnings_exit_code(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["construct", str(_write(tmp_path, THIN_WALL))])

        assert result.exit_code == 2
        assert "WARNING: [thin] Wall is too thin" in result.output

    def test_errors_exit_code(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["construct", str(_write(tmp_path, THIN_WALL, THICK_WALL))]
        )

        assert result.exit_code == 1
        assert "ERROR: [thick] Wall is too thick" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["construct", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_unknown_straw_material(self, runner: CliRunner, tmp_path: Path) -> None:
        wall = {**STRAW_WALL, "layout": {"type": "straw", "material": "hay"}}
        result = runner.invoke(app, ["construct", str(_write(tmp_path, wall))])

        assert result.exit_code == 1
        assert "walls[0].layout.material" in result.output

    def test_invalid_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["construct", str(_write(tmp_path, STRAW_WALL)), "--format", "svg"]
        )
        assert result.exit_code != 0

    def test_verbose_flag(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["--verbose", "construct", str(_write(tmp_path, STRAW_WALL))]
        )
        assert result.exit_code == 0


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_project(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, STRAW_WALL))])

        assert result.exit_code == 0
        assert "Validation passed. Project is valid." in result.output

    def test_construction_warning(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, THIN_WALL))])

        assert result.exit_code == 2
        assert "[thin] warning: Wall is too thin" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_construction_error(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, THICK_WALL))])

        assert result.exit_code == 1
        assert "[thick] error: Wall is too thick" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_grouped_post_warnings(self, runner: CliRunner, tmp_path: Path) -> None:
        wall = {
            "name": "posts",
            "size": [2000, 300, 1000],
            "layout": {"type": "infill"},
        }
        result = runner.invoke(app, ["validate", str(_write(tmp_path, wall))])

        assert result.exit_code == 2
        # one mismatch warning for all posts of the wall
        assert result.output.count("Post dimensions") == 1

    def test_unknown_material_warning(self, runner: CliRunner, tmp_path: Path) -> None:
        wall = {
            "name": "post",
            "size": [60, 360, 2500],
            "layout": {"type": "post", "post": {"material": "oak-beam"}},
        }
        result = runner.invoke(app, ["validate", str(_write(tmp_path, wall))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Unknown material 'oak-beam'" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0", "walls": [')

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_schema_error(self, runner: CliRunner, tmp_path: Path) -> None:
        path = _write(tmp_path, {**STRAW_WALL, "colour": "gold"})

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "walls[0].colour" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()


class TestMaterialsCommand:
    """Tests for the materials command."""

    def test_lists_all(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["materials"])

        assert result.exit_code == 0
        for material_id in ("strawbale", "wood-360x60", "triangular-batten", "osb-18"):
            assert material_id in result.output

    def test_filter_by_type(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["materials", "--type", "strawbale"])

        assert result.exit_code == 0
        assert "strawbale" in result.output
        assert "wood-360x60" not in result.output

    def test_unknown_type(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["materials", "--type", "brick"])
        assert result.exit_code != 0
