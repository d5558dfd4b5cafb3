"""Integration tests for the cutlist CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from typer.testing import CliRunner

from cutlist.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


WriteProject = Callable[..., Path]


class TestGenerateCommand:
    def test_generate_all(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        result = runner.invoke(app, ["generate", str(write_project(project_data))])
        assert result.exit_code == 0
        assert "CUT LIST" in result.output
        assert "COST ESTIMATE" in result.output
        assert "OV1-> Oven Shelf" in result.output

    def test_generate_json_to_file(
        self,
        runner: CliRunner,
        write_project: WriteProject,
        project_data: dict[str, Any],
        tmp_path: Path,
    ) -> None:
        target = tmp_path / "out.json"
        result = runner.invoke(
            app,
            ["generate", str(write_project(project_data)), "--format", "json", "-o", str(target)],
        )
        assert result.exit_code == 0
        assert "Wrote" in result.output
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["panels"][0]["label"] == "B1-> Side panel"
        assert [c["id"] for c in data["cabinets"]] == ["B1", "D1", "OV1"]

    def test_cutlist_only(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        result = runner.invoke(app, ["generate", str(write_project(project_data)), "-f", "cutlist"])
        assert result.exit_code == 0
        assert "CUT LIST" in result.output
        assert "COST ESTIMATE" not in result.output

    def test_unknown_format(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        result = runner.invoke(app, ["generate", str(write_project(project_data)), "-f", "xml"])
        assert result.exit_code == 1
        assert "unknown format" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["generate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_cabinet_needs_force(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][1]["drawer_heights"] = [60, 30]
        path = write_project(project_data)

        refused = runner.invoke(app, ["generate", str(path)])
        assert refused.exit_code == 1
        assert "--force" in refused.output

        forced = runner.invoke(app, ["generate", str(path), "--force"])
        assert forced.exit_code == 0
        assert "D1-> Drawer 2 Face" in forced.output

    def test_construction_conflict(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][2]["options"] = {"rabbet_back": True}
        result = runner.invoke(app, ["generate", str(write_project(project_data)), "--force"])
        assert result.exit_code == 1
        assert "cabinets[2].options" in result.output


class TestEstimateCommand:
    def test_estimate(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        result = runner.invoke(
            app, ["estimate", str(write_project(project_data)), "--currency", "EUR"]
        )
        assert result.exit_code == 0
        assert "COST ESTIMATE" in result.output
        assert "HARDWARE" in result.output
        assert "EUR" in result.output
        assert "CUT LIST" not in result.output


class TestValidateCommand:
    def test_valid(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        result = runner.invoke(app, ["validate", str(write_project(project_data))])
        assert result.exit_code == 0
        assert "Project is valid" in result.output

    def test_warnings(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][0]["options"] = {"inset_back": True, "rabbet_back": True}
        result = runner.invoke(app, ["validate", str(write_project(project_data))])
        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "inset back is used" in result.output

    def test_errors(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][2]["width"] = 650
        result = runner.invoke(app, ["validate", str(write_project(project_data))])
        assert result.exit_code == 1
        assert "cabinets[2]" in result.output
        assert "Validation failed" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_schema_error(
        self, runner: CliRunner, write_project: WriteProject, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][0]["depth"] = 0
        result = runner.invoke(app, ["validate", str(write_project(project_data))])
        assert result.exit_code == 1
        assert "cabinets[0].depth" in result.output


class TestSettingsCommand:
    def test_prints_defaults(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["settings"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["reveals"]["side_gap"] == 2.0
        assert data["drawers"]["rail_heights"][0] == {"rail": 93, "back_height": 63}
