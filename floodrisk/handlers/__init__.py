"""HTTP handlers."""
from floodrisk.handlers.forecast_handler import ForecastHandler

__all__ = ["ForecastHandler"]
