"""FastAPI REST API for cut list generation.

This module provides a REST API for generating cut lists, estimating
material costs and validating project files.

Usage:
    uvicorn cutlist.web:app --reload
"""

from cutlist.web.app import app, create_app

__all__ = ["app", "create_app"]
