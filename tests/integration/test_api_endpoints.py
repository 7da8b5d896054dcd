"""Integration tests for all API endpoints.

This module tests the Flask API endpoints through the full
request/response cycle.
"""

import json
from typing import Any, Dict


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_check_returns_healthy(self, client: Any) -> None:
        """Health endpoint should return healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["status"] == "healthy"
        assert "timestamp" in data


class TestStatusEndpoint:
    """Tests for the /api/v1/status endpoint."""

    def test_status_returns_service_info(self, client: Any) -> None:
        """Status endpoint should return service information."""
        response = client.get("/api/v1/status")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["ready"] is True
        assert data["history_size"] == 0
        assert data["history_capacity"] == 8


class TestReferenceEndpoint:
    """Tests for the /api/v1/reference endpoint."""

    def test_reference_tables(self, client: Any) -> None:
        """Reference endpoint should list the form enumerations."""
        response = client.get("/api/v1/reference")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["zones"][0] == "WEST"
        assert "Battery" in data["technologies"]
        assert [p["short"] for p in data["phases"]] == ["SCR", "SS", "FIS", "FISC", "IA"]
        assert len(data["counties"]) == 21
        assert data["defaults"]["zone"] == "WEST"


class TestPredictEndpoint:
    """Tests for the /api/v1/predict endpoint."""

    def test_predict_reference_project(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Prediction with the default form should match the reference figures."""
        response = client.post(
            "/api/v1/predict",
            json=sample_prediction_request,
            content_type="application/json"
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["success"] is True
        result = data["result"]
        assert abs(result["wd"] - 0.508) < 1e-9
        assert result["timeline"] == 27.8
        assert result["cost"] == 11.6
        assert result["score"] == 52
        assert result["costLow"] == 9.5
        assert result["tlHigh"] == 32.0
        assert result["irrHit"] == -4.23
        assert result["revenueAtRisk"] == 33.4
        assert len(result["phaseData"]) == 5
        assert result["mcSamples"][0]["month"] == "M3"
        assert result["mcSamples"][-1]["month"] == "M36"
        assert result["radarData"][0] == {"subject": "Location", "A": 90}
        assert result["comps"][2]["status"] == "IA Signed"
        assert len(result["scenarios"]) == 4
        assert data["assessment"]["riskLabel"] == "HIGH RISK"
        assert data["project"]["projectName"] == "Glasscock Solar"

    def test_predict_accepts_snake_case(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """snake_case field names should be accepted."""
        payload = {
            "tech_type": "Wind",
            "poi_count": 3,
            "firm_capacity": 0.8,
            "days_in_queue": 400,
            "energy_community": True,
            "behind_meter": "false",
        }
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 200
        project = json.loads(response.data)["project"]
        assert project["techType"] == "Wind"
        assert project["poiCount"] == 3
        assert project["energyCommunity"] is True
        assert project["behindMeter"] is False

    def test_predict_with_empty_object_uses_defaults(self, client: Any) -> None:
        """An empty body object should predict the default form."""
        response = client.post("/api/v1/predict", json={})

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["result"]["score"] == 52
        assert data["project"]["projectName"] == ""

    def test_predict_without_body(self, client: Any) -> None:
        """Missing body should return 400."""
        response = client.post("/api/v1/predict")

        assert response.status_code == 400
        assert "error" in json.loads(response.data)

    def test_predict_with_non_object_body(self, client: Any) -> None:
        """A JSON array body should return 400."""
        response = client.post("/api/v1/predict", json=[1, 2])

        assert response.status_code == 400

    def test_predict_out_of_range(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Values outside the form ranges should return 400."""
        payload = {**sample_prediction_request, "capacity": 5000}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "capacity must be between 1 and 999" in data["error"]

    def test_predict_unknown_zone(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Unknown zones should be rejected at the API boundary."""
        payload = {**sample_prediction_request, "zone": "MARS"}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 400

    def test_predict_wrong_type(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Non-numeric values should return 400."""
        payload = {**sample_prediction_request, "poiCount": "many"}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 400
        assert "Invalid data" in json.loads(response.data)["error"]

    def test_predict_non_finite_number(self, client: Any) -> None:
        """Infinity and NaN literals should return 400, not 500."""
        for body in ('{"phase": Infinity}', '{"capacity": NaN}', '{"poiCount": -Infinity}'):
            response = client.post(
                "/api/v1/predict",
                data=body,
                content_type="application/json"
            )

            assert response.status_code == 400
            assert "Invalid data" in json.loads(response.data)["error"]

    def test_predict_oversized_integer(self, client: Any) -> None:
        """An integer too large for a float should return 400."""
        response = client.post(
            "/api/v1/predict",
            data='{"daysInQueue": 1' + "0" * 400 + "}",
            content_type="application/json"
        )

        assert response.status_code == 400

    def test_predict_rejects_fractional_counts(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Fractional phase or POI counts should be rejected, not truncated."""
        payload = {**sample_prediction_request, "phase": 2.9, "poiCount": 6.9}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 400
        assert "phase must be a whole number" in json.loads(response.data)["error"]

        payload = {**sample_prediction_request, "daysInQueue": 210.5}
        assert client.post("/api/v1/predict", json=payload).status_code == 400

    def test_predict_accepts_whole_floats(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Whole-valued floats and numeric strings are accepted as integers."""
        payload = {**sample_prediction_request, "phase": 3.0, "poiCount": "6"}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 200
        project = json.loads(response.data)["project"]
        assert project["phase"] == 3
        assert project["poiCount"] == 6
        assert json.loads(response.data)["result"]["score"] == 72

    def test_predict_invalid_boolean(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        payload = {**sample_prediction_request, "behindMeter": "maybe"}
        response = client.post("/api/v1/predict", json=payload)

        assert response.status_code == 400

    def test_predict_is_deterministic(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Identical requests should produce identical results."""
        first = client.post("/api/v1/predict", json=sample_prediction_request)
        second = client.post("/api/v1/predict", json=sample_prediction_request)

        assert json.loads(first.data)["result"] == json.loads(second.data)["result"]


class TestHistoryEndpoint:
    """Tests for the /api/v1/history endpoint."""

    def test_history_empty(self, client: Any) -> None:
        response = client.get("/api/v1/history")

        assert response.status_code == 200
        assert json.loads(response.data) == {"runs": []}

    def test_history_keeps_eight_newest(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """More than eight predictions should keep the newest eight."""
        for run in range(10):
            payload = {**sample_prediction_request, "projectName": f"Run {run}"}
            assert client.post("/api/v1/predict", json=payload).status_code == 200

        response = client.get("/api/v1/history")

        assert response.status_code == 200
        runs = json.loads(response.data)["runs"]
        assert len(runs) == 8
        assert runs[0]["projectName"] == "Run 9"
        assert runs[-1]["projectName"] == "Run 2"
        assert "timestamp" in runs[0]
        assert runs[0]["score"] == 52

    def test_history_limit(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        for _ in range(6):
            client.post("/api/v1/predict", json=sample_prediction_request)

        response = client.get("/api/v1/history?limit=5")

        assert response.status_code == 200
        assert len(json.loads(response.data)["runs"]) == 5

    def test_history_invalid_limit(self, client: Any) -> None:
        assert client.get("/api/v1/history?limit=abc").status_code == 400
        assert client.get("/api/v1/history?limit=-1").status_code == 400

    def test_clear_history(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        client.post("/api/v1/predict", json=sample_prediction_request)

        response = client.delete("/api/v1/history")

        assert response.status_code == 200
        assert json.loads(response.data)["success"] is True
        assert json.loads(client.get("/api/v1/history").data)["runs"] == []


class TestPortfolioEndpoint:
    """Tests for the /api/v1/portfolio endpoint."""

    def test_portfolio_empty(self, client: Any) -> None:
        response = client.get("/api/v1/portfolio")

        assert response.status_code == 200
        assert json.loads(response.data) == {"summary": None}

    def test_portfolio_summary(
        self,
        client: Any,
        sample_prediction_request: Dict[str, Any],
    ) -> None:
        """Portfolio should aggregate the recorded runs."""
        client.post("/api/v1/predict", json=sample_prediction_request)
        client.post("/api/v1/predict", json={**sample_prediction_request, "phase": 3})

        response = client.get("/api/v1/portfolio")

        assert response.status_code == 200
        summary = json.loads(response.data)["summary"]
        assert summary == {
            "runCount": 2,
            "avgScore": 62,
            "highRisk": 1,
            "avgCost": 11.6,
            "totalMW": 300,
        }
