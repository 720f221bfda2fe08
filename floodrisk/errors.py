"""Exception types raised across the flood risk pipeline."""


class FloodRiskError(Exception):
    """Base class for all flood risk service errors."""


class EmptyForecastError(FloodRiskError):
    """Raised when a weather summary is requested for zero observations."""

    def __init__(self, region: str):
        self.region = region
        super().__init__(f"No daily observations to summarize for region '{region}'")


class InvocationError(FloodRiskError):
    """Raised when the LLM call fails (network, auth, non-2xx, bad envelope, timeout)."""


class ParseError(FloodRiskError):
    """Raised when an LLM response does not contain a usable JSON object.

    Only raised by AssessmentParser.try_parse; never reaches HTTP callers.
    """

    def __init__(self, message: str, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(message)


class WeatherProviderError(FloodRiskError):
    """Raised when the weather provider call or payload mapping fails."""

    def __init__(self, region: str, message: str):
        self.region = region
        super().__init__(f"Failed to fetch weather data for {region}: {message}")


class ForecastNotFoundError(FloodRiskError):
    """Raised when a stored forecast id does not exist."""

    def __init__(self, forecast_id: str):
        self.forecast_id = forecast_id
        super().__init__(f"Forecast not found: {forecast_id}")
