"""Cut list generation endpoints."""

from typing import Any

from fastapi import APIRouter

from cutlist.application import CutListOutput, GenerateCutListCommand
from cutlist.application.config import load_config_from_dict
from cutlist.web.exceptions import CutListGenerationError
from cutlist.web.schemas.requests import GenerateRequest
from cutlist.web.schemas.responses import (
    CostSummarySchema,
    CutListResponseSchema,
    ErrorResponseSchema,
    PanelSchema,
)

router = APIRouter(prefix="/generate", tags=["generate"])


def run_project(config_data: dict[str, Any], validate: bool) -> CutListOutput:
    """Load a project from request data and run the cut list command.

    Raises:
        ConfigError: If the project fails to load or convert.
        CutListGenerationError: If validation is requested and fails.
    """
    config = load_config_from_dict(config_data)
    command = GenerateCutListCommand.from_config(config)
    output = command.execute_config(config, validate=validate)
    if not output.is_valid:
        raise CutListGenerationError(output.errors)
    return output


def summary_to_schema(output: CutListOutput) -> CostSummarySchema | None:
    if output.summary is None:
        return None
    return CostSummarySchema.model_validate(output.summary.to_dict())


@router.post(
    "",
    response_model=CutListResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def generate_cut_list(request: GenerateRequest) -> CutListResponseSchema:
    """Generate the cut list and cost estimate of a project.

    Args:
        request: Request containing the project configuration.

    Returns:
        Panels in the cut list wire format plus the cost summary.
    """
    output = run_project(request.config, request.validate_cabinets)
    return CutListResponseSchema(
        panels=[PanelSchema.model_validate(panel.to_dict()) for panel in output.panels],
        summary=summary_to_schema(output),
    )
