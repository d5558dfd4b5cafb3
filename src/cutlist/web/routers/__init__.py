"""API routers for the REST API."""

from cutlist.web.routers.estimate import router as estimate_router
from cutlist.web.routers.generate import router as generate_router
from cutlist.web.routers.validate import router as validate_router

__all__ = ["estimate_router", "generate_router", "validate_router"]
