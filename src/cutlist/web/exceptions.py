"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cutlist.application.config import ConfigError
from cutlist.domain.errors import ConstructionConflictError


class CutListGenerationError(Exception):
    """Raised when cabinets fail validation and generation is refused."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(ConstructionConflictError)
    async def construction_error_handler(
        request: Request, exc: ConstructionConflictError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "construction",
                "details": [{"cabinet_id": exc.cabinet_id, "options": list(exc.options)}],
            },
        )

    @app.exception_handler(CutListGenerationError)
    async def generation_error_handler(
        request: Request, exc: CutListGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cut list generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )
