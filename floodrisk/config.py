"""Configuration management using Pydantic BaseSettings with JSON file support."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


def flatten_json_config(config: dict[str, Any]) -> dict[str, Any]:
    """Flatten nested JSON config into flat key-value pairs.

    Supports nested structures like:
    {
        "llm": {"llm_model": "grok-beta", "llm_temperature": 0.7},
        "forecast": {"forecast_regions": "Lahore,Karachi"}
    }

    Becomes:
    {"llm_model": "grok-beta", "llm_temperature": 0.7, "forecast_regions": "Lahore,Karachi"}

    Keys starting with "_" (like "_comment") are skipped.
    """
    result = {}

    for key, value in config.items():
        if key.startswith("_"):
            continue

        if isinstance(value, dict):
            result.update(flatten_json_config(value))
        else:
            result[key] = value

    return result


def load_json_config(config_file: Optional[str] = None) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        config_file: Path to JSON config file. If None, checks CONFIG_FILE env var.

    Returns:
        Dictionary of configuration values (flattened), or empty dict if no file found.
    """
    file_path = config_file or os.getenv("CONFIG_FILE")

    if not file_path:
        return {}

    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Config file not found: {file_path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
            logger.info(f"Loaded configuration from: {file_path}")
            return flatten_json_config(config)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file {file_path}: {e}")
        return {}
    except OSError as e:
        logger.error(f"Error reading config file {file_path}: {e}")
        return {}


class AnalyzerConfig(BaseModel):
    """LLM invocation parameters handed to RiskAnalyzer at construction."""
    model: str = "grok-beta"
    temperature: float = 0.7
    max_tokens: int = 1000

    model_config = ConfigDict(frozen=True, protected_namespaces=())


class AutomationConfig(BaseModel):
    """Weekly forecast generation parameters."""
    enabled: bool = True
    regions: tuple[str, ...] = ()
    cron: str = "0 6 * * 1"
    horizon_days: int = 7

    model_config = ConfigDict(frozen=True)


class Settings(BaseSettings):
    """Application configuration with JSON file and environment variable support.

    Configuration priority (highest to lowest):
    1. Environment variables
    2. JSON config file (specified via CONFIG_FILE env var)
    3. Default values
    """

    # Redis Configuration
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_password: str = ""
    redis_db: int = 0

    # Weather provider (WeatherAPI.com)
    weather_api_key: str = ""
    weather_api_url: str = "https://api.weatherapi.com/v1"
    weather_forecast_days: int = 7
    weather_api_timeout_seconds: float = 10.0

    # LLM (OpenAI-compatible chat completions, xAI Grok by default)
    llm_api_key: str = ""
    llm_api_url: str = "https://api.x.ai/v1"
    llm_model: str = "grok-beta"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_timeout_seconds: float = 60.0

    # Forecast automation
    forecast_automation_enabled: bool = True
    forecast_automation_cron: str = "0 6 * * 1"  # Mondays at 06:00
    forecast_regions: str = "Lahore,Karachi,Islamabad,Peshawar,Quetta,Multan,Hyderabad,Sukkur"
    forecast_horizon_days: int = 7  # forecast_date = now + horizon for saved records
    generate_on_startup: bool = False

    # Server Configuration
    server_port: int = 8080
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def __init__(self, **kwargs):
        """Initialize settings from JSON file and environment variables.

        Priority: env vars > JSON config > defaults
        """
        # Init kwargs outrank env vars in pydantic-settings, so JSON keys that
        # are also set in the environment must be dropped here.
        json_config = {
            key: value
            for key, value in load_json_config().items()
            if key.upper() not in os.environ and key.lower() not in os.environ
        }

        merged_kwargs = {**json_config, **kwargs}

        super().__init__(**merged_kwargs)

    @property
    def region_list(self) -> list[str]:
        """Configured regions, trimmed, empty entries dropped."""
        return [r.strip() for r in self.forecast_regions.split(",") if r.strip()]

    @property
    def analyzer_config(self) -> AnalyzerConfig:
        return AnalyzerConfig(
            model=self.llm_model,
            temperature=self.llm_temperature,
            max_tokens=self.llm_max_tokens,
        )

    @property
    def automation_config(self) -> AutomationConfig:
        return AutomationConfig(
            enabled=self.forecast_automation_enabled,
            regions=tuple(self.region_list),
            cron=self.forecast_automation_cron,
            horizon_days=self.forecast_horizon_days,
        )

    @property
    def redis_address(self) -> str:
        """Get Redis connection address in host:port format."""
        return f"{self.redis_host}:{self.redis_port}"
