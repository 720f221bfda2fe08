"""Routers package."""
from floodrisk.routers.forecast_router import router as forecast_router, set_forecast_handler

__all__ = ["forecast_router", "set_forecast_handler"]
