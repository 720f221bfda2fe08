"""External API clients."""
from floodrisk.api.weather_api_client import WeatherAPIClient
from floodrisk.api.llm_client import LLMClient

__all__ = ["WeatherAPIClient", "LLMClient"]
