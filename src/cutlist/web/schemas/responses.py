"""Pydantic response schemas for the REST API.

Panel and cost fields use the camelCase names of the cut list wire
format; FastAPI serializes them by alias.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DadoSchema(BaseModel):
    offset: float
    depth: float
    width: float


class RabbetSchema(BaseModel):
    edge: str = "back"
    depth: float
    width: float


class PanelSchema(BaseModel):
    """Panel in the cut list."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(..., description="Cabinet id and panel role")
    length: float = Field(..., description="Length in mm")
    width: float = Field(..., description="Width in mm")
    quantity: int = Field(default=1, description="Number of pieces")
    edge_banding_length_right: int = Field(default=0, alias="edgeBandingLengthRight")
    edge_banding_length_left: int = Field(default=0, alias="edgeBandingLengthLeft")
    edge_banding_width_bottom: int = Field(default=0, alias="edgeBandingWidthBottom")
    edge_banding_width_top: int = Field(default=0, alias="edgeBandingWidthTop")
    hinge_location: str = Field(default="", alias="hingeLocation")
    material: str = Field(..., description="Material name")
    material_thickness: float = Field(..., alias="materialThickness")
    dados: list[DadoSchema] | None = None
    rabbets: list[RabbetSchema] | None = None


class MaterialDetailSchema(BaseModel):
    """Board usage of one material."""

    material: str
    boards: int
    cost: float


class BomSchema(BaseModel):
    """Hardware bill of materials."""

    screws: int
    dowels: int
    hinges: int
    slides: int


class CostSummarySchema(BaseModel):
    """Cost estimate of a cut list."""

    model_config = ConfigDict(populate_by_name=True)

    materials: list[MaterialDetailSchema]
    edge_band_cost: float = Field(..., alias="edgeBandCost")
    cut_cost: float = Field(..., alias="cutCost")
    materials_cost: float = Field(..., alias="materialsCost")
    total: float
    bom: BomSchema


class CutListResponseSchema(BaseModel):
    """Response for cut list generation."""

    panels: list[PanelSchema] = Field(default_factory=list)
    summary: CostSummarySchema | None = None


class ValidationResultSchema(BaseModel):
    """Response for project validation."""

    is_valid: bool = Field(..., description="Whether the project is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None
