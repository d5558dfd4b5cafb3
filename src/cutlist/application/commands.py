"""Application commands (use cases) for cut list generation."""

from __future__ import annotations

import logging
from typing import Sequence

from cutlist.application.config.adapter import (
    config_to_board,
    config_to_cabinets,
    config_to_materials,
    config_to_settings,
)
from cutlist.application.config.schemas import ProjectConfiguration
from cutlist.domain import (
    BoardConfig,
    CabinetSpec,
    ConstructionSettings,
    MaterialSet,
    cabinet_issues,
    generate_panels,
    summarize,
)

from .dtos import CutListOutput

logger = logging.getLogger(__name__)


class GenerateCutListCommand:
    """Command to generate the cut list and cost estimate of a set of cabinets.

    Settings, materials and board size are fixed when the command is built,
    so repeated executions over the same cabinets give identical output.
    """

    def __init__(
        self,
        settings: ConstructionSettings | None = None,
        materials: MaterialSet | None = None,
        board: BoardConfig | None = None,
    ) -> None:
        self.settings = settings or ConstructionSettings()
        self.materials = materials or MaterialSet()
        self.board = board or BoardConfig()

    @classmethod
    def from_config(cls, config: ProjectConfiguration) -> GenerateCutListCommand:
        """Build a command with the effective values of a project file."""
        return cls(
            settings=config_to_settings(config),
            materials=config_to_materials(config),
            board=config_to_board(config),
        )

    def execute(
        self, cabinets: Sequence[CabinetSpec], validate: bool = True
    ) -> CutListOutput:
        """Execute the cut list generation command.

        Args:
            cabinets: Cabinets to build.
            validate: Refuse to generate when a cabinet fails validation.
                Without it, invalid cabinets still produce panels.

        Returns:
            CutListOutput with panels and summary, or with errors only.
        """
        if validate:
            errors = [
                issue
                for cabinet in cabinets
                for issue in cabinet_issues(cabinet, self.settings)
            ]
            if errors:
                logger.debug(f"Validation failed with {len(errors)} errors")
                return CutListOutput(cabinets=list(cabinets), errors=errors)

        panels = [
            panel
            for cabinet in cabinets
            for panel in generate_panels(cabinet, self.settings, self.materials)
        ]
        summary = summarize(panels, self.materials, cabinets, self.board)
        logger.info(
            f"Generated {len(panels)} panels for {len(cabinets)} cabinets "
            f"on {summary.board_count} boards"
        )
        return CutListOutput(cabinets=list(cabinets), panels=panels, summary=summary)

    def execute_config(
        self, config: ProjectConfiguration, validate: bool = True
    ) -> CutListOutput:
        """Convert the project's cabinets and execute the command on them."""
        return self.execute(config_to_cabinets(config), validate=validate)
