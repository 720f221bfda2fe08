"""Forecast handler for HTTP requests."""
import logging

from floodrisk.errors import ForecastNotFoundError
from floodrisk.models import Forecast, ForecastCreate, GenerationReport, RiskAssessment
from floodrisk.services import (
    ForecastAutomationService,
    ForecastService,
    LocationReportService,
)

logger = logging.getLogger(__name__)


class ForecastHandler:
    """Handler for forecast-related HTTP requests."""

    def __init__(
        self,
        forecast_service: ForecastService,
        automation_service: ForecastAutomationService,
        location_report_service: LocationReportService,
    ):
        self.forecast_service = forecast_service
        self.automation_service = automation_service
        self.location_report_service = location_report_service

    def get_all_forecasts(self) -> list[Forecast]:
        forecasts = self.forecast_service.get_all_forecasts()
        logger.info(f"[ForecastHandler] Returning {len(forecasts)} forecasts")
        return forecasts

    def get_latest_forecasts(self) -> list[Forecast]:
        return self.forecast_service.get_latest_forecasts()

    def get_forecast(self, forecast_id: str) -> Forecast:
        """Raises ForecastNotFoundError when the id is unknown."""
        forecast = self.forecast_service.get_forecast(forecast_id)
        if forecast is None:
            raise ForecastNotFoundError(forecast_id)
        return forecast

    def create_forecast(self, data: ForecastCreate) -> Forecast:
        return self.forecast_service.create_forecast(data)

    def update_forecast(self, forecast_id: str, data: ForecastCreate) -> Forecast:
        return self.forecast_service.update_forecast(forecast_id, data)

    def delete_forecast(self, forecast_id: str) -> bool:
        return self.forecast_service.delete_forecast(forecast_id)

    async def get_location_report(self, location: str) -> RiskAssessment:
        return await self.location_report_service.generate_location_report(location)

    async def generate_automated_forecasts(self) -> GenerationReport:
        return await self.automation_service.trigger_manual_generation()

    def ping(self) -> dict[str, str]:
        """Health check endpoint.

        Returns:
            {"status": "pong"}
        """
        logger.debug("[ForecastHandler] Ping")
        return {"status": "pong"}
