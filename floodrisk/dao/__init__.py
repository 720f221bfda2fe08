"""Data access objects."""
from floodrisk.dao.redis_forecast_dao import RedisForecastDAO

__all__ = ["RedisForecastDAO"]
