"""Integration tests for the REST API."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from cutlist.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_openapi_documents_error_body(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/api/v1/generate"]["post"]["responses"]
        assert "422" in responses
        assert "ErrorResponseSchema" in schema["components"]["schemas"]


class TestGenerateEndpoint:
    def test_generate(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/generate", json={"config": project_data})
        assert response.status_code == 200
        data = response.json()

        side = data["panels"][0]
        assert side["label"] == "B1-> Side panel"
        assert side["edgeBandingLengthRight"] == 1
        assert side["materialThickness"] == 18
        assert data["summary"]["bom"]["slides"] == 6
        assert "edgeBandCost" in data["summary"]

    def test_inset_panels_carry_dados(
        self, client: TestClient, project_data: dict[str, Any]
    ) -> None:
        data = client.post("/api/v1/generate", json={"config": project_data}).json()
        drawer_side = next(p for p in data["panels"] if p["label"] == "D1-> Side panel")
        assert drawer_side["dados"] == [{"offset": 15.0, "depth": 7.0, "width": 4.0}]

    def test_invalid_cabinet_refused(
        self, client: TestClient, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][1]["drawer_heights"] = [60, 30]
        response = client.post("/api/v1/generate", json={"config": project_data})
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "generation"
        assert "90%" in body["details"][0]["message"]

    def test_validation_can_be_skipped(
        self, client: TestClient, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][1]["drawer_heights"] = [60, 30]
        response = client.post(
            "/api/v1/generate", json={"config": project_data, "validate_cabinets": False}
        )
        assert response.status_code == 200

    def test_schema_error(self, client: TestClient, project_data: dict[str, Any]) -> None:
        project_data["cabinets"][0]["width"] = -1
        response = client.post("/api/v1/generate", json={"config": project_data})
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "cabinets[0].width"

    def test_construction_conflict(
        self, client: TestClient, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][2]["options"] = {"inset_back": True}
        response = client.post("/api/v1/generate", json={"config": project_data})
        assert response.status_code == 422
        assert response.json()["error_type"] == "construction"


class TestEstimateEndpoint:
    def test_estimate(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/estimate", json={"config": project_data})
        assert response.status_code == 200
        data = response.json()
        assert [m["material"] for m in data["materials"]] == ["Corpus", "Back", "Front", "Drawer"]
        assert data["total"] == pytest.approx(
            data["materialsCost"] + data["edgeBandCost"] + data["cutCost"]
        )


class TestValidateEndpoint:
    def test_valid(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": project_data})
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_errors_and_warnings(
        self, client: TestClient, project_data: dict[str, Any]
    ) -> None:
        project_data["cabinets"][0]["options"] = {"inset_back": True, "rabbet_back": True}
        project_data["cabinets"][2]["depth"] = 500
        data = client.post("/api/v1/validate", json={"config": project_data}).json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "cabinets[2]"
        assert data["warnings"][0]["path"] == "cabinets[0].options"
