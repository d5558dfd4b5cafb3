"""Output formatters and exporters for cut lists."""

from __future__ import annotations

import json
from typing import Any

from cutlist.application.dtos import CutListOutput
from cutlist.domain import CostSummary, Panel


def _banding_code(panel: Panel) -> str:
    """Compact banding marker: R, L, T, B for each banded edge, '-' for none."""
    flags = zip("RLTB", panel.banding)
    code = "".join(edge for edge, flag in flags if flag)
    return code or "-"


def _joinery_note(panel: Panel) -> str:
    notes = [
        f"dado {d.offset:g}/{d.depth:g}/{d.width:g}" for d in panel.dados
    ]
    notes.extend(f"rabbet {r.depth:g}x{r.width:g}" for r in panel.rabbets)
    if panel.hinge_location:
        notes.append(f"hinges {panel.hinge_location}")
    return ", ".join(notes)


class CutListFormatter:
    """Formats cut lists for display.

    Lengths are shown in mm. The Edges column names the banded edges:
    R and L along the length, T and B along the width.
    """

    def format(self, panels: list[Panel]) -> str:
        """Format panels as a table."""
        if not panels:
            return "No panels in cut list."

        label_width = max(24, max(len(p.label) for p in panels) + 1)
        rule = "=" * (label_width + 70)
        lines = [
            "CUT LIST",
            rule,
            f"{'Panel':<{label_width}} {'Length':>8} {'Width':>8} {'Qty':>4} "
            f"{'Mat':<8} {'T':>4} {'Edges':<6} {'Notes'}",
            "-" * len(rule),
        ]

        total_area = 0.0
        for panel in panels:
            lines.append(
                f"{panel.label:<{label_width}} {panel.length:>8g} {panel.width:>8g} "
                f"{panel.quantity:>4} {panel.material:<8} {panel.material_thickness:>4g} "
                f"{_banding_code(panel):<6} {_joinery_note(panel)}".rstrip()
            )
            total_area += panel.area

        lines.append("-" * len(rule))
        lines.append(
            f"{'TOTAL':<{label_width}} {sum(p.quantity for p in panels):>22} pieces, "
            f"{total_area / 1_000_000:.2f} m2"
        )
        return "\n".join(lines)


class CostReportFormatter:
    """Formats cost estimates and the hardware bill of materials."""

    def __init__(self, currency: str = "") -> None:
        self._currency = currency

    def _money(self, value: float) -> str:
        amount = f"{value:,.2f}"
        return f"{amount} {self._currency}" if self._currency else amount

    def format(self, summary: CostSummary) -> str:
        """Format a cost summary as a report."""
        lines = [
            "COST ESTIMATE",
            "=" * 60,
            f"{'Material':<20} {'Boards':>8} {'Waste':>8} {'Cost':>20}",
            "-" * 60,
        ]
        for detail in summary.materials:
            lines.append(
                f"{detail.material:<20} {detail.boards:>8} "
                f"{detail.waste_percentage:>7.1f}% {self._money(detail.cost):>20}"
            )
        if not summary.materials:
            lines.append("No panels to estimate.")

        lines.extend(
            [
                "-" * 60,
                f"{'Boards':<38} {self._money(summary.materials_cost):>20}",
                f"{'Edge banding (' + format(summary.edge_band_length_m, '.2f') + ' m)':<38} "
                f"{self._money(summary.edge_band_cost):>20}",
                f"{'Cutting (' + format(summary.cut_length_m, '.2f') + ' m)':<38} "
                f"{self._money(summary.cut_cost):>20}",
                "=" * 60,
                f"{'TOTAL':<38} {self._money(summary.total):>20}",
                "",
                "HARDWARE",
                "-" * 60,
                f"  {'Screws':<33} {summary.bom.screws:>8}",
                f"  {'Dowels':<33} {summary.bom.dowels:>8}",
                f"  {'Hinges':<33} {summary.bom.hinges:>8}",
                f"  {'Drawer slides':<33} {summary.bom.slides:>8}",
            ]
        )
        return "\n".join(lines)


class JsonExporter:
    """Exports cut lists as JSON in the panel and cost summary wire format."""

    def export(self, output: CutListOutput) -> str:
        """Export cut list output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: CutListOutput) -> dict[str, Any]:
        data = output.to_dict()
        data["cabinets"] = [
            {
                "id": cabinet.id,
                "kind": cabinet.kind.value,
                "width": cabinet.width,
                "height": cabinet.height,
                "depth": cabinet.depth,
                "panelCount": len(output.panels_for(cabinet.id)),
            }
            for cabinet in output.cabinets
        ]
        return data
