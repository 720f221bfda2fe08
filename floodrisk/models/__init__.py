"""Data models package for the flood risk server."""
from floodrisk.models.weather import (
    DailyObservation,
    WeatherSummary,
)
from floodrisk.models.assessment import (
    RiskAssessment,
    AnalysisResult,
    RISK_LEVELS,
    RIVER_LEVELS,
    default_assessment,
)
from floodrisk.models.forecast import (
    Forecast,
    ForecastCreate,
    GenerationReport,
)

__all__ = [
    # Weather models
    "DailyObservation",
    "WeatherSummary",
    # Assessment models
    "RiskAssessment",
    "AnalysisResult",
    "RISK_LEVELS",
    "RIVER_LEVELS",
    "default_assessment",
    # Forecast models
    "Forecast",
    "ForecastCreate",
    "GenerationReport",
]
