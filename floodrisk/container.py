"""Dependency injection container for application components."""
import logging

from floodrisk.api import LLMClient, WeatherAPIClient
from floodrisk.config import Settings
from floodrisk.dao import RedisForecastDAO
from floodrisk.db import RedisClient
from floodrisk.handlers import ForecastHandler
from floodrisk.services import (
    ForecastAutomationService,
    ForecastService,
    LocationReportService,
    RiskAnalyzer,
    WeatherAggregator,
)

logger = logging.getLogger(__name__)


class Container:
    """Dependency injection container.

    Initializes and wires up all application dependencies from Settings.
    """

    def __init__(self, settings: Settings):
        """Initialize container with all dependencies.

        Args:
            settings: Application settings
        """
        logger.info("[Container] Initializing container")
        self.settings = settings

        logger.info(f"[Container] Connecting to Redis at {settings.redis_address}")
        self.redis_client = RedisClient.from_settings(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password,
            db=settings.redis_db,
        )
        self.forecast_dao = RedisForecastDAO(self.redis_client)

        if not settings.weather_api_key:
            logger.warning(
                "[Container] Weather API key not configured. "
                "Weather provider calls will be rejected."
            )
        self.weather_client = WeatherAPIClient(
            base_url=settings.weather_api_url,
            api_key=settings.weather_api_key,
            timeout=settings.weather_api_timeout_seconds,
        )

        if not settings.llm_api_key:
            logger.warning(
                "[Container] LLM API key not configured. "
                "All assessments will fall back to the default."
            )
        self.llm_client = LLMClient(
            api_key=settings.llm_api_key or "unset",
            base_url=settings.llm_api_url,
            timeout=settings.llm_timeout_seconds,
        )
        logger.info(f"[Container] LLM client initialized (model: {settings.llm_model})")

        self.aggregator = WeatherAggregator()
        self.risk_analyzer = RiskAnalyzer(
            self.llm_client, config=settings.analyzer_config, aggregator=self.aggregator
        )

        self.forecast_service = ForecastService(self.forecast_dao)
        self.automation_service = ForecastAutomationService(
            weather_client=self.weather_client,
            risk_analyzer=self.risk_analyzer,
            forecast_service=self.forecast_service,
            config=settings.automation_config,
            forecast_days=settings.weather_forecast_days,
            aggregator=self.aggregator,
        )
        self.location_report_service = LocationReportService(
            weather_client=self.weather_client,
            risk_analyzer=self.risk_analyzer,
            forecast_days=settings.weather_forecast_days,
        )

        self.forecast_handler = ForecastHandler(
            forecast_service=self.forecast_service,
            automation_service=self.automation_service,
            location_report_service=self.location_report_service,
        )

        logger.info(
            f"[Container] Container initialized successfully "
            f"({len(settings.region_list)} regions configured)"
        )

    async def shutdown(self):
        """Clean up resources on shutdown."""
        logger.info("[Container] Shutting down container")
        try:
            await self.weather_client.close()
            logger.info("[Container] Weather API client closed")
        except Exception as e:
            logger.error(f"[Container] Error closing Weather API client: {e}")

        try:
            await self.llm_client.close()
            logger.info("[Container] LLM client closed")
        except Exception as e:
            logger.error(f"[Container] Error closing LLM client: {e}")
