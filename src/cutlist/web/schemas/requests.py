"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Request for generating a cut list from a project."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    validate_cabinets: bool = Field(
        default=True,
        description="Refuse to generate when a cabinet fails validation",
    )


class EstimateRequest(BaseModel):
    """Request for a cost estimate of a project."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    validate_cabinets: bool = Field(
        default=True,
        description="Refuse to estimate when a cabinet fails validation",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a project."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
