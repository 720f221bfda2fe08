"""Persisted forecast records and automation reports."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ForecastBase(BaseModel):
    """Fields a client may set on a forecast."""
    region: str
    risk_level: str = "Medium Risk"
    river_level: str = "Normal"
    rainfall: float = 0.0  # Total rainfall over the horizon, mm
    description: str = ""
    forecast_date: Optional[datetime] = None


class ForecastCreate(ForecastBase):
    """Request body for POST/PUT /api/forecasts."""


class Forecast(ForecastBase):
    """Forecast record stored in Redis.

    Stored at key: forecast_v1:{id}
    """
    id: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class GenerationReport(BaseModel):
    """Summary of one automated forecast generation run."""
    enabled: bool = True
    processed: list[str] = []
    succeeded: list[str] = []
    failed: list[str] = []
    degraded: list[str] = []  # Regions saved with the default assessment

    @property
    def total(self) -> int:
        return len(self.processed)
