"""Pytest configuration and shared fixtures for cut list tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from cutlist.domain import ConstructionSettings, Material, MaterialSet


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def settings() -> ConstructionSettings:
    """Default construction settings."""
    return ConstructionSettings()


@pytest.fixture
def materials() -> MaterialSet:
    """18 mm corpus and fronts, 3 mm back, 16 mm drawer boxes."""
    return MaterialSet(
        corpus=Material("Corpus", 18),
        front=Material("Front", 18),
        back=Material("Back", 3),
        drawer=Material("Drawer", 16),
    )


# =============================================================================
# Project file fixtures
# =============================================================================


@pytest.fixture
def project_data() -> dict[str, Any]:
    """A small kitchen: one door cabinet, one drawer cabinet, one oven housing."""
    return {
        "schema_version": "1.0",
        "materials": {
            "corpus": {"name": "Corpus", "thickness": 18, "cost_per_m2": 10.0},
            "front": {"name": "Front", "thickness": 18, "cost_per_m2": 20.0},
            "back": {"name": "Back", "thickness": 3, "cost_per_m2": 2.0},
            "drawer": {"name": "Drawer", "thickness": 16, "cost_per_m2": 8.0},
            "edge_banding_cost_per_meter": 0.5,
            "cut_cost_per_meter": 0.25,
        },
        "cabinets": [
            {
                "id": "B1",
                "kind": "door",
                "width": 600,
                "height": 720,
                "depth": 560,
                "doors": 1,
                "shelves": 1,
            },
            {
                "id": "D1",
                "kind": "drawer",
                "width": 600,
                "height": 720,
                "depth": 560,
                "drawer_heights": [60, 40],
                "options": {"inset_back": True},
            },
            {
                "id": "OV1",
                "kind": "oven",
                "width": 600,
                "height": 760,
                "depth": 580,
                "slider_length": 450,
                "rail_height": 131,
            },
        ],
    }


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write project data to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "project.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
