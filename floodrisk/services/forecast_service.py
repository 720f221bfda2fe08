"""Forecast service: CRUD over the DAO plus saving analysis results."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from floodrisk.dao import RedisForecastDAO
from floodrisk.models import Forecast, ForecastCreate, RiskAssessment, WeatherSummary

logger = logging.getLogger(__name__)


def build_forecast_description(assessment: RiskAssessment) -> str:
    """Render the stored description: text, recommendations, confidence footer."""
    description = assessment.description
    if assessment.recommendations:
        description += "\n\nRecommendations:\n"
        for rec in assessment.recommendations:
            description += f"• {rec}\n"
    description += f"\n[AI Confidence: {assessment.confidence_score:.0f}%]"
    return description


class ForecastService:
    """Service for forecast queries and persistence (wrapper over DAO)."""

    def __init__(self, forecast_dao: RedisForecastDAO):
        self.forecast_dao = forecast_dao

    def get_all_forecasts(self) -> list[Forecast]:
        return self.forecast_dao.list_all()

    def get_latest_forecasts(self) -> list[Forecast]:
        return self.forecast_dao.list_latest()

    def get_forecast(self, forecast_id: str) -> Optional[Forecast]:
        return self.forecast_dao.get(forecast_id)

    def create_forecast(self, data: ForecastCreate) -> Forecast:
        return self.forecast_dao.create(data)

    def update_forecast(self, forecast_id: str, data: ForecastCreate) -> Forecast:
        return self.forecast_dao.update(forecast_id, data)

    def delete_forecast(self, forecast_id: str) -> bool:
        return self.forecast_dao.delete(forecast_id)

    def save_assessment(
        self,
        summary: WeatherSummary,
        assessment: RiskAssessment,
        horizon_days: int = 7,
    ) -> Forecast:
        """Persist an analysis result as a forecast for the coming week.

        Args:
            summary: Weather summary the assessment was produced from
            assessment: LLM (or default) risk assessment
            horizon_days: forecast_date is set this many days from now

        Returns:
            The stored Forecast
        """
        forecast = self.forecast_dao.create(ForecastCreate(
            region=summary.region,
            risk_level=assessment.risk_level,
            river_level=assessment.river_level,
            rainfall=summary.total_rainfall,
            description=build_forecast_description(assessment),
            forecast_date=datetime.now(timezone.utc) + timedelta(days=horizon_days),
        ))
        logger.info(f"[ForecastService] Saved forecast for region: {summary.region}")
        return forecast
