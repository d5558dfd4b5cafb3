"""Cost estimate endpoints."""

from fastapi import APIRouter

from cutlist.web.routers.generate import run_project, summary_to_schema
from cutlist.web.schemas.requests import EstimateRequest
from cutlist.web.schemas.responses import CostSummarySchema, ErrorResponseSchema

router = APIRouter(prefix="/estimate", tags=["estimate"])


@router.post(
    "",
    response_model=CostSummarySchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def estimate_costs(request: EstimateRequest) -> CostSummarySchema | None:
    """Estimate board usage, processing cost and hardware of a project."""
    output = run_project(request.config, request.validate_cabinets)
    return summary_to_schema(output)
