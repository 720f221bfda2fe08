"""Services package."""
from floodrisk.services.weather_aggregator import WeatherAggregator
from floodrisk.services.prompt_builder import PromptBuilder
from floodrisk.services.assessment_parser import AssessmentParser
from floodrisk.services.risk_analyzer import RiskAnalyzer
from floodrisk.services.forecast_service import ForecastService
from floodrisk.services.forecast_automation_service import ForecastAutomationService
from floodrisk.services.location_report_service import LocationReportService

__all__ = [
    "WeatherAggregator",
    "PromptBuilder",
    "AssessmentParser",
    "RiskAnalyzer",
    "ForecastService",
    "ForecastAutomationService",
    "LocationReportService",
]
