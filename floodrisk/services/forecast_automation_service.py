"""Weekly automated forecast generation across configured regions."""
import logging
from typing import Optional

from floodrisk.api import WeatherAPIClient
from floodrisk.config import AutomationConfig
from floodrisk.errors import EmptyForecastError, WeatherProviderError
from floodrisk.metrics import REGION_PROCESSING_RESULTS_TOTAL
from floodrisk.models import GenerationReport
from floodrisk.services.forecast_service import ForecastService
from floodrisk.services.risk_analyzer import RiskAnalyzer
from floodrisk.services.weather_aggregator import WeatherAggregator

logger = logging.getLogger(__name__)


class ForecastAutomationService:
    """Fetches weather, analyzes and saves a forecast for every region.

    Regions are processed one at a time; a failing region is logged and
    reported without stopping the others.
    """

    def __init__(
        self,
        weather_client: WeatherAPIClient,
        risk_analyzer: RiskAnalyzer,
        forecast_service: ForecastService,
        config: AutomationConfig,
        forecast_days: int = 7,
        aggregator: Optional[WeatherAggregator] = None,
    ):
        """Initialize ForecastAutomationService.

        Args:
            weather_client: Weather provider client
            risk_analyzer: LLM risk analyzer
            forecast_service: Forecast persistence service
            config: Enabled flag, regions, cron and horizon
            forecast_days: Days of weather to request per region
            aggregator: WeatherAggregator (default instance if omitted)
        """
        self.weather_client = weather_client
        self.risk_analyzer = risk_analyzer
        self.forecast_service = forecast_service
        self.config = config
        self.forecast_days = forecast_days
        self.aggregator = aggregator or WeatherAggregator()

    async def generate_weekly_forecasts(self) -> GenerationReport:
        """Generate and store forecasts for all configured regions."""
        if not self.config.enabled:
            logger.info("[ForecastAutomation] Forecast automation is disabled")
            return GenerationReport(enabled=False)

        logger.info("[ForecastAutomation] Starting automated weekly forecast generation...")
        report = GenerationReport()

        for region in self.config.regions:
            report.processed.append(region)
            result = await self._process_region(region)
            REGION_PROCESSING_RESULTS_TOTAL.labels(result=result).inc()

            if result in ("success", "degraded"):
                report.succeeded.append(region)
                if result == "degraded":
                    report.degraded.append(region)
            else:
                report.failed.append(region)

        logger.info(
            f"[ForecastAutomation] Completed automated weekly forecast generation for "
            f"{report.total} regions ({len(report.succeeded)} succeeded, "
            f"{len(report.failed)} failed, {len(report.degraded)} degraded)"
        )
        return report

    async def trigger_manual_generation(self) -> GenerationReport:
        """Run generation now, outside the cron schedule."""
        logger.info("[ForecastAutomation] Manually triggered forecast generation")
        return await self.generate_weekly_forecasts()

    async def _process_region(self, region: str) -> str:
        """Process one region. Returns a REGION_PROCESSING_RESULTS_TOTAL label."""
        logger.info(f"[ForecastAutomation] Processing region: {region}")
        try:
            observations = await self.weather_client.get_forecast(region, days=self.forecast_days)
            summary = self.aggregator.summarize(region, observations)
            result = await self.risk_analyzer.analyze_summary(summary)
            self.forecast_service.save_assessment(
                summary, result.assessment, horizon_days=self.config.horizon_days
            )
        except EmptyForecastError as e:
            logger.error(f"[ForecastAutomation] Error processing region {region}: {e}")
            return "empty_forecast"
        except WeatherProviderError as e:
            logger.error(f"[ForecastAutomation] Error processing region {region}: {e}")
            return "weather_error"
        except Exception as e:
            logger.error(f"[ForecastAutomation] Unexpected error processing region {region}: {e}")
            return "error"

        logger.info(
            f"[ForecastAutomation] Successfully processed region: {region} - "
            f"Risk: {result.assessment.risk_level}"
        )
        return "degraded" if result.is_default else "success"
