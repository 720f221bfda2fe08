"""WeatherAPI.com forecast client with async HTTP support."""
import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from floodrisk.errors import WeatherProviderError
from floodrisk.models import DailyObservation
from floodrisk.metrics import (
    WEATHER_API_CALLS_TOTAL,
    WEATHER_API_CALL_DURATION_SECONDS,
    WEATHER_API_ERRORS_TOTAL,
)

logger = logging.getLogger(__name__)

FORECAST_ENDPOINT = "/forecast.json"


class WeatherAPIClient:
    """Async HTTP client for the WeatherAPI.com forecast endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
    ):
        """Initialize weather API client.

        Args:
            base_url: Base URL for the API (e.g., "https://api.weatherapi.com/v1")
            api_key: WeatherAPI.com key
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

        self.client = httpx.AsyncClient(
            timeout=timeout,
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        )

    async def close(self):
        """Close the HTTP client and clean up resources."""
        await self.client.aclose()

    async def get_forecast(self, location: str, days: int = 7) -> list[DailyObservation]:
        """Fetch a daily forecast for a region or free-text location.

        Args:
            location: Region name, city, or any query WeatherAPI.com accepts
            days: Number of forecast days

        Returns:
            Chronological list of DailyObservation (may be empty)

        Raises:
            WeatherProviderError: On HTTP, timeout, connection or payload errors
        """
        logger.info(f"[WeatherAPIClient] Fetching {days}-day forecast for: {location}")
        params = {
            "key": self.api_key,
            "q": location,
            "days": days,
            "aqi": "no",
            "alerts": "no",
        }
        payload = await self._request(location, FORECAST_ENDPOINT, params)

        try:
            observations = self.parse_forecast_days(payload)
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            WEATHER_API_ERRORS_TOTAL.labels(
                endpoint=FORECAST_ENDPOINT, error_type="invalid_payload"
            ).inc()
            logger.error(f"[WeatherAPIClient] Error parsing weather data for {location}: {e}")
            raise WeatherProviderError(location, f"invalid payload: {e}") from e

        total_rainfall = sum(o.total_rainfall for o in observations)
        logger.info(
            f"[WeatherAPIClient] Extracted weather data for {location}: "
            f"{len(observations)} days, total rainfall: {total_rainfall:.1f}mm"
        )
        return observations

    @staticmethod
    def parse_forecast_days(payload: dict[str, Any]) -> list[DailyObservation]:
        """Map forecast.forecastday[] entries onto DailyObservation."""
        forecast_days = payload.get("forecast", {}).get("forecastday", [])

        observations = []
        for entry in forecast_days:
            day = entry["day"]
            observations.append(DailyObservation(
                date=entry["date"],
                max_temp=day["maxtemp_c"],
                min_temp=day["mintemp_c"],
                avg_temp=day["avgtemp_c"],
                total_rainfall=day.get("totalprecip_mm", 0.0),
                chance_of_rain=int(day.get("daily_chance_of_rain", 0)),
                condition=day.get("condition", {}).get("text", ""),
                humidity=day.get("avghumidity", 0.0),
                wind_speed=day.get("maxwind_kph", 0.0),
            ))
        return observations

    async def _request(self, location: str, endpoint: str, params: dict) -> dict:
        url = f"{self.base_url}{endpoint}"
        start_time = time.perf_counter()

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            response_json = response.json()
        except httpx.HTTPStatusError as e:
            self._record_error(endpoint, start_time, "http_error")
            logger.error(f"[WeatherAPIClient] HTTP error on GET {endpoint}: {e}")
            raise WeatherProviderError(location, f"HTTP {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            self._record_error(endpoint, start_time, "timeout")
            logger.error(f"[WeatherAPIClient] Timeout on GET {endpoint}: {e}")
            raise WeatherProviderError(location, "request timed out") from e
        except httpx.RequestError as e:
            self._record_error(endpoint, start_time, "connection_error")
            logger.error(f"[WeatherAPIClient] Request error on GET {endpoint}: {e}")
            raise WeatherProviderError(location, str(e)) from e
        except ValueError as e:
            self._record_error(endpoint, start_time, "invalid_payload")
            logger.error(f"[WeatherAPIClient] Non-JSON response on GET {endpoint}: {e}")
            raise WeatherProviderError(location, "response was not JSON") from e

        duration = time.perf_counter() - start_time
        WEATHER_API_CALL_DURATION_SECONDS.labels(endpoint=endpoint).observe(duration)
        WEATHER_API_CALLS_TOTAL.labels(endpoint=endpoint, status="success").inc()
        return response_json

    def _record_error(self, endpoint: str, start_time: float, error_type: str) -> None:
        duration = time.perf_counter() - start_time
        WEATHER_API_CALL_DURATION_SECONDS.labels(endpoint=endpoint).observe(duration)
        WEATHER_API_CALLS_TOTAL.labels(endpoint=endpoint, status="error").inc()
        WEATHER_API_ERRORS_TOTAL.labels(endpoint=endpoint, error_type=error_type).inc()
