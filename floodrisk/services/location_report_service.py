"""On-demand flood risk reports for user-searched locations."""
import logging

from floodrisk.api import WeatherAPIClient
from floodrisk.models import RiskAssessment
from floodrisk.services.risk_analyzer import RiskAnalyzer

logger = logging.getLogger(__name__)


class LocationReportService:
    """Generates (but does not store) a risk assessment for any location."""

    def __init__(
        self,
        weather_client: WeatherAPIClient,
        risk_analyzer: RiskAnalyzer,
        forecast_days: int = 7,
    ):
        self.weather_client = weather_client
        self.risk_analyzer = risk_analyzer
        self.forecast_days = forecast_days

    async def generate_location_report(self, location: str) -> RiskAssessment:
        """Fetch the forecast for a location and analyze it.

        Raises:
            WeatherProviderError: If the weather provider call fails
            EmptyForecastError: If the provider returned no forecast days
        """
        logger.info(f"[LocationReport] Generating location report for: {location}")

        observations = await self.weather_client.get_forecast(location, days=self.forecast_days)
        assessment = await self.risk_analyzer.analyze(location, observations)

        logger.info(
            f"[LocationReport] Generated location report for {location}: "
            f"Risk Level = {assessment.risk_level}"
        )
        return assessment
