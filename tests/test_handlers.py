"""Unit tests for the forecast handler and HTTP routes."""
import pytest
from unittest.mock import AsyncMock, Mock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from floodrisk.errors import ForecastNotFoundError, WeatherProviderError
from floodrisk.handlers import ForecastHandler
from floodrisk.models import Forecast, GenerationReport, RiskAssessment
from floodrisk.routers import forecast_router, set_forecast_handler


@pytest.fixture
def mock_forecast_service():
    return Mock()


@pytest.fixture
def mock_automation_service():
    service = Mock()
    service.trigger_manual_generation = AsyncMock(
        return_value=GenerationReport(processed=["Lahore"], succeeded=["Lahore"])
    )
    return service


@pytest.fixture
def mock_location_report_service():
    service = Mock()
    service.generate_location_report = AsyncMock(return_value=RiskAssessment(
        risk_level="High Risk",
        river_level="Rising",
        description="Heavy rain expected.",
        recommendations=["Evacuate low areas"],
        confidence_score=82.0,
    ))
    return service


@pytest.fixture
def forecast_handler(mock_forecast_service, mock_automation_service, mock_location_report_service):
    return ForecastHandler(
        forecast_service=mock_forecast_service,
        automation_service=mock_automation_service,
        location_report_service=mock_location_report_service,
    )


@pytest.fixture
def client(forecast_handler):
    app = FastAPI()
    app.include_router(forecast_router)
    set_forecast_handler(forecast_handler)
    yield TestClient(app)
    set_forecast_handler(None)


class TestForecastHandler:
    """Test ForecastHandler delegation."""

    def test_ping(self, forecast_handler):
        assert forecast_handler.ping() == {"status": "pong"}

    def test_get_forecast_missing_raises(self, forecast_handler, mock_forecast_service):
        mock_forecast_service.get_forecast.return_value = None

        with pytest.raises(ForecastNotFoundError):
            forecast_handler.get_forecast("abc")

    @pytest.mark.asyncio
    async def test_generate_automated_uses_manual_trigger(
        self, forecast_handler, mock_automation_service
    ):
        report = await forecast_handler.generate_automated_forecasts()

        assert report.succeeded == ["Lahore"]
        mock_automation_service.trigger_manual_generation.assert_awaited_once()


class TestForecastRoutes:
    """Test HTTP status mapping and serialization."""

    def test_service_not_ready(self):
        app = FastAPI()
        app.include_router(forecast_router)
        set_forecast_handler(None)

        response = TestClient(app).get("/ping")

        assert response.status_code == 503

    def test_ping(self, client):
        assert client.get("/ping").json() == {"status": "pong"}

    def test_list_forecasts(self, client, mock_forecast_service):
        mock_forecast_service.get_all_forecasts.return_value = [
            Forecast(id="f1", region="Lahore", risk_level="High Risk", rainfall=140.0)
        ]

        response = client.get("/api/forecasts")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["id"] == "f1"
        assert body[0]["rainfall"] == 140.0

    def test_latest_is_not_treated_as_id(self, client, mock_forecast_service):
        mock_forecast_service.get_latest_forecasts.return_value = []

        response = client.get("/api/forecasts/latest")

        assert response.status_code == 200
        mock_forecast_service.get_latest_forecasts.assert_called_once()
        mock_forecast_service.get_forecast.assert_not_called()

    def test_get_forecast_not_found(self, client, mock_forecast_service):
        mock_forecast_service.get_forecast.return_value = None

        assert client.get("/api/forecasts/unknown").status_code == 404

    def test_update_forecast_not_found(self, client, mock_forecast_service):
        mock_forecast_service.update_forecast.side_effect = ForecastNotFoundError("unknown")

        response = client.put("/api/forecasts/unknown", json={"region": "Lahore"})

        assert response.status_code == 404

    def test_create_forecast(self, client, mock_forecast_service):
        mock_forecast_service.create_forecast.side_effect = (
            lambda data: Forecast(id="new", **data.model_dump())
        )

        response = client.post(
            "/api/forecasts", json={"region": "Karachi", "risk_level": "Low Risk"}
        )

        assert response.status_code == 200
        assert response.json()["region"] == "Karachi"
        assert response.json()["risk_level"] == "Low Risk"

    def test_delete_forecast(self, client, mock_forecast_service):
        mock_forecast_service.delete_forecast.return_value = True

        assert client.delete("/api/forecasts/f1").json() == {"deleted": True}

    def test_location_report_uses_camel_case(self, client, mock_location_report_service):
        response = client.get("/api/forecasts/location-report", params={"location": "Sialkot"})

        assert response.status_code == 200
        assert response.json() == {
            "riskLevel": "High Risk",
            "riverLevel": "Rising",
            "description": "Heavy rain expected.",
            "recommendations": ["Evacuate low areas"],
            "confidenceScore": 82.0,
        }
        mock_location_report_service.generate_location_report.assert_awaited_once_with("Sialkot")

    def test_location_report_requires_location(self, client):
        assert client.get("/api/forecasts/location-report").status_code == 422

    def test_location_report_weather_failure(self, client, mock_location_report_service):
        mock_location_report_service.generate_location_report.side_effect = (
            WeatherProviderError("Atlantis", "HTTP 400")
        )

        response = client.get("/api/forecasts/location-report", params={"location": "Atlantis"})

        assert response.status_code == 500

    def test_generate_automated(self, client):
        response = client.post("/api/forecasts/generate-automated")

        assert response.status_code == 200
        assert response.json()["succeeded"] == ["Lahore"]
