"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cutlist.domain import CabinetSpec, CostSummary, Panel


@dataclass
class CutListOutput:
    """Output DTO containing the generated cut list and its estimate.

    Attributes:
        cabinets: Cabinets the cut list was generated for.
        panels: Panels of all cabinets, in cabinet order.
        summary: Cost and hardware estimate, None if generation failed.
        errors: Error messages if generation failed.
    """

    cabinets: list[CabinetSpec] = field(default_factory=list)
    panels: list[Panel] = field(default_factory=list)
    summary: CostSummary | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the cut list was generated successfully."""
        return len(self.errors) == 0

    def panels_for(self, cabinet_id: str) -> list[Panel]:
        """Panels whose label belongs to the given cabinet."""
        prefix = f"{cabinet_id}->"
        return [panel for panel in self.panels if panel.label.startswith(prefix)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize panels and summary to the wire format."""
        return {
            "panels": [panel.to_dict() for panel in self.panels],
            "summary": self.summary.to_dict() if self.summary else None,
        }
