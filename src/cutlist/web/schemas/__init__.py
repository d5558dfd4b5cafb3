"""Pydantic schemas for the REST API."""

from cutlist.web.schemas.requests import (
    ConfigValidateRequest,
    EstimateRequest,
    GenerateRequest,
)
from cutlist.web.schemas.responses import (
    BomSchema,
    CostSummarySchema,
    CutListResponseSchema,
    ErrorResponseSchema,
    MaterialDetailSchema,
    PanelSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "EstimateRequest",
    "GenerateRequest",
    # Responses
    "BomSchema",
    "CostSummarySchema",
    "CutListResponseSchema",
    "ErrorResponseSchema",
    "MaterialDetailSchema",
    "PanelSchema",
    "ValidationResultSchema",
]
