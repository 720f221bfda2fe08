"""Shared fixtures for flood risk tests."""
import pytest

from floodrisk.models import DailyObservation


def make_observation(
    date: str = "2025-08-01",
    rainfall: float = 20.0,
    avg_temp: float = 30.0,
    max_temp: float = 35.0,
    min_temp: float = 25.0,
    chance: int = 80,
    condition: str = "Moderate rain",
) -> DailyObservation:
    return DailyObservation(
        date=date,
        max_temp=max_temp,
        min_temp=min_temp,
        avg_temp=avg_temp,
        total_rainfall=rainfall,
        chance_of_rain=chance,
        condition=condition,
        humidity=78.0,
        wind_speed=14.4,
    )


@pytest.fixture
def lahore_week():
    """Seven identical monsoon days: 20mm rain, 30°C average."""
    return [make_observation(date=f"2025-08-0{i}") for i in range(1, 8)]
