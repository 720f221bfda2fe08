"""Redis-based Data Access Object for forecast records."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from floodrisk.db.redis_client import RedisClient
from floodrisk.errors import ForecastNotFoundError
from floodrisk.models import Forecast, ForecastCreate

logger = logging.getLogger(__name__)

FORECAST_KEY_FORMAT = "forecast_v1:{}"
FORECASTS_INDEX_KEY = "forecasts_index_v1"  # sorted set of ids scored by created_at


class RedisForecastDAO:
    """Data Access Object for forecast operations using Redis."""

    def __init__(self, client: RedisClient):
        """Initialize RedisForecastDAO.

        Args:
            client: RedisClient instance
        """
        self.client = client

    def create(self, data: ForecastCreate) -> Forecast:
        """Store a new forecast under a generated id."""
        now = datetime.now(timezone.utc)
        forecast = Forecast(
            id=uuid.uuid4().hex,
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        self.save(forecast)
        logger.info(f"Created forecast {forecast.id} for region {forecast.region}")
        return forecast

    def save(self, forecast: Forecast) -> None:
        """Write the forecast JSON and (re)index it by creation time."""
        self.client.set(FORECAST_KEY_FORMAT.format(forecast.id), forecast.model_dump_json())
        self.client.zadd(FORECASTS_INDEX_KEY, forecast.id, forecast.created_at.timestamp())

    def get(self, forecast_id: str) -> Optional[Forecast]:
        """Retrieve a forecast by id, or None if missing or unreadable."""
        json_str = self.client.get(FORECAST_KEY_FORMAT.format(forecast_id))
        if json_str is None:
            return None
        try:
            return Forecast.model_validate_json(json_str)
        except ValidationError as e:
            logger.error(f"Failed to decode forecast {forecast_id}: {e}")
            return None

    def list_all(self) -> list[Forecast]:
        """All forecasts, newest first."""
        ids = self.client.zrevrange(FORECASTS_INDEX_KEY)
        raw = self.client.mget([FORECAST_KEY_FORMAT.format(i) for i in ids])

        forecasts = []
        for forecast_id, json_str in zip(ids, raw):
            if json_str is None:
                logger.warning(f"Forecast {forecast_id} indexed but missing, skipping")
                continue
            try:
                forecasts.append(Forecast.model_validate_json(json_str))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable forecast {forecast_id}: {e}")
        return forecasts

    def list_latest(self) -> list[Forecast]:
        """Newest forecast for each region, newest first."""
        latest = {}
        for forecast in self.list_all():
            latest.setdefault(forecast.region, forecast)
        return list(latest.values())

    def update(self, forecast_id: str, data: ForecastCreate) -> Forecast:
        """Replace the client-settable fields of an existing forecast.

        Raises:
            ForecastNotFoundError: If no forecast has this id
        """
        existing = self.get(forecast_id)
        if existing is None:
            raise ForecastNotFoundError(forecast_id)

        updated = existing.model_copy(update={
            **data.model_dump(),
            "updated_at": datetime.now(timezone.utc),
        })
        self.save(updated)
        logger.info(f"Updated forecast {forecast_id}")
        return updated

    def delete(self, forecast_id: str) -> bool:
        """Delete a forecast. Returns False if it did not exist."""
        removed = self.client.del_(FORECAST_KEY_FORMAT.format(forecast_id))
        self.client.zrem(FORECASTS_INDEX_KEY, forecast_id)
        if removed:
            logger.info(f"Deleted forecast {forecast_id}")
        return bool(removed)
