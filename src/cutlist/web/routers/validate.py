"""Project validation endpoints."""

from fastapi import APIRouter

from cutlist.application.config import load_config_from_dict, validate_config
from cutlist.web.schemas.requests import ConfigValidateRequest
from cutlist.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post(
    "",
    response_model=ValidationResultSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def validate_project(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a project without generating panels.

    Schema errors are returned as a 422 error body by the ConfigError
    handler; construction checks and advisories appear in the result.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
