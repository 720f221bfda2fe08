"""Weather observation and summary models using Pydantic."""
from pydantic import BaseModel, ConfigDict, Field


class DailyObservation(BaseModel):
    """One forecast day as returned by the weather provider.

    Temperatures are in °C, rainfall in mm, wind speed in kph.
    """
    date: str
    max_temp: float
    min_temp: float
    avg_temp: float
    total_rainfall: float = Field(default=0.0, ge=0)
    chance_of_rain: int = Field(default=0, ge=0, le=100)
    condition: str = ""
    humidity: float = 0.0
    wind_speed: float = 0.0

    model_config = ConfigDict(frozen=True)


class WeatherSummary(BaseModel):
    """Aggregated statistics over a region's daily observations.

    Built by WeatherAggregator; never holds an empty observation list.
    """
    region: str
    daily_observations: tuple[DailyObservation, ...]
    total_rainfall: float
    avg_temperature: float
    max_temperature: float
    min_temperature: float

    model_config = ConfigDict(frozen=True)

    @property
    def days(self) -> int:
        """Forecast horizon covered by this summary."""
        return len(self.daily_observations)
