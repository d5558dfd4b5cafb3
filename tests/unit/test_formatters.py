"""Tests for cut list and cost report formatters and the JSON exporter."""

from __future__ import annotations

import json

import pytest

from cutlist.application import CutListOutput, GenerateCutListCommand
from cutlist.domain import (
    CabinetOptions,
    CabinetSpec,
    ConstructionSettings,
    Dado,
    MaterialSet,
    Panel,
    Rabbet,
)
from cutlist.infrastructure import CostReportFormatter, CutListFormatter, JsonExporter
from cutlist.infrastructure.formatters import _banding_code, _joinery_note


def _panel(**overrides) -> Panel:
    values = dict(
        length=720,
        width=560,
        quantity=2,
        band_length_right=1,
        band_length_left=0,
        band_width_top=1,
        band_width_bottom=1,
        label="B1-> Side panel",
        material="Corpus",
        material_thickness=18,
    )
    values.update(overrides)
    return Panel(**values)


@pytest.fixture
def output(settings: ConstructionSettings, materials: MaterialSet) -> CutListOutput:
    command = GenerateCutListCommand(settings=settings, materials=materials)
    return command.execute(
        [
            CabinetSpec.door("B1", 600, 720, 560, doors=1, options=CabinetOptions(inset_back=True)),
            CabinetSpec.drawer("D1", 600, 720, 560, drawers=2, heights=[60, 40]),
        ]
    )


class TestHelpers:
    def test_banding_code(self) -> None:
        assert _banding_code(_panel()) == "RTB"
        assert _banding_code(_panel(band_length_right=0, band_width_top=0, band_width_bottom=0)) == "-"

    def test_joinery_note(self) -> None:
        assert _joinery_note(_panel(dados=(Dado(15, 7, 4),))) == "dado 15/7/4"
        assert _joinery_note(_panel(rabbets=(Rabbet(4, 9),))) == "rabbet 4x9"
        assert _joinery_note(_panel(hinge_location="2xDUZ")) == "hinges 2xDUZ"
        assert _joinery_note(_panel()) == ""


class TestCutListFormatter:
    def test_empty(self) -> None:
        assert CutListFormatter().format([]) == "No panels in cut list."

    def test_table(self, output: CutListOutput) -> None:
        text = CutListFormatter().format(output.panels)
        lines = text.splitlines()
        assert lines[0] == "CUT LIST"
        assert "B1-> Side panel" in text
        assert "dado 15/7/4" in text
        assert "hinges 2xDUZ" in text
        assert lines[-1].startswith("TOTAL")
        total_pieces = sum(p.quantity for p in output.panels)
        assert f"{total_pieces} pieces" in lines[-1]


class TestCostReportFormatter:
    def test_sections(self, output: CutListOutput) -> None:
        assert output.summary is not None
        text = CostReportFormatter().format(output.summary)
        assert text.startswith("COST ESTIMATE")
        assert "HARDWARE" in text
        assert "Drawer slides" in text
        for detail in output.summary.materials:
            assert detail.material in text

    def test_currency(self, output: CutListOutput) -> None:
        assert output.summary is not None
        text = CostReportFormatter(currency="EUR").format(output.summary)
        total_line = next(line for line in text.splitlines() if line.startswith("TOTAL"))
        assert total_line.endswith("EUR")


class TestJsonExporter:
    def test_export(self, output: CutListOutput) -> None:
        data = json.loads(JsonExporter().export(output))
        assert set(data) == {"panels", "summary", "cabinets"}
        assert len(data["panels"]) == len(output.panels)
        assert data["panels"][0]["label"] == "B1-> Side panel"
        assert data["panels"][0]["dados"] == [{"offset": 15, "depth": 7, "width": 4}]
        assert data["summary"]["bom"]["slides"] == 4
        assert data["cabinets"][1] == {
            "id": "D1",
            "kind": "drawer",
            "width": 600,
            "height": 720,
            "depth": 560,
            "panelCount": len(output.panels_for("D1")),
        }

    def test_export_errors(self) -> None:
        failed = CutListOutput(errors=["D1: drawer heights sum to 90%, expected 100%"])
        data = json.loads(JsonExporter().export(failed))
        assert data == {"errors": ["D1: drawer heights sum to 90%, expected 100%"]}
