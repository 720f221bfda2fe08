"""Reduce daily weather observations into a region summary."""
import logging
from collections.abc import Sequence

from floodrisk.errors import EmptyForecastError
from floodrisk.models import DailyObservation, WeatherSummary

logger = logging.getLogger(__name__)


class WeatherAggregator:
    """Builds WeatherSummary objects from provider observations."""

    def summarize(
        self, region: str, observations: Sequence[DailyObservation]
    ) -> WeatherSummary:
        """Aggregate observations into totals and temperature extremes.

        Args:
            region: Region or location identifier
            observations: Chronological daily observations (must not be empty)

        Returns:
            WeatherSummary with total rainfall, mean of daily average
            temperatures, and overall max/min temperatures

        Raises:
            EmptyForecastError: If observations is empty
        """
        days = list(observations)
        if not days:
            raise EmptyForecastError(region)

        total_rainfall = sum(day.total_rainfall for day in days)
        avg_temperature = sum(day.avg_temp for day in days) / len(days)

        summary = WeatherSummary(
            region=region,
            daily_observations=tuple(days),
            total_rainfall=total_rainfall,
            avg_temperature=avg_temperature,
            max_temperature=max(day.max_temp for day in days),
            min_temperature=min(day.min_temp for day in days),
        )

        logger.info(
            f"[WeatherAggregator] {region}: {len(days)} days, "
            f"total rainfall: {total_rainfall:.1f}mm"
        )
        return summary
