"""FastAPI routes for forecast endpoints."""
import logging

from fastapi import APIRouter, HTTPException, Query

from floodrisk.errors import ForecastNotFoundError
from floodrisk.models import Forecast, ForecastCreate, GenerationReport, RiskAssessment

logger = logging.getLogger(__name__)

router = APIRouter()

# Global handler reference - set during startup
_forecast_handler = None


def set_forecast_handler(handler):
    """Set the forecast handler instance (called during startup)."""
    global _forecast_handler
    _forecast_handler = handler
    logger.info("[ForecastRouter] Handler injected successfully")


def get_handler():
    """Get the forecast handler, raising error if not initialized."""
    if _forecast_handler is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return _forecast_handler


# Specific paths are registered before /api/forecasts/{forecast_id}

@router.get(
    "/api/forecasts",
    response_model=list[Forecast],
    summary="List forecasts",
    description="All stored forecasts, newest first",
)
def get_all_forecasts() -> list[Forecast]:
    try:
        return get_handler().get_all_forecasts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ForecastRouter] Error in get_all_forecasts: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/api/forecasts/latest",
    response_model=list[Forecast],
    summary="Latest forecast per region",
)
def get_latest_forecasts() -> list[Forecast]:
    try:
        return get_handler().get_latest_forecasts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ForecastRouter] Error in get_latest_forecasts: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get(
    "/api/forecasts/location-report",
    response_model=RiskAssessment,
    summary="AI flood risk report for a location",
    description="Fetches the 7-day forecast for the location and analyzes it; not stored",
)
async def get_location_report(
    location: str = Query(..., min_length=1, description="City, district or coordinates"),
) -> RiskAssessment:
    try:
        return await get_handler().get_location_report(location)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ForecastRouter] Error generating location report for {location}: {e}")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate location report for {location}"
        )


@router.post(
    "/api/forecasts/generate-automated",
    response_model=GenerationReport,
    summary="Trigger automated forecast generation",
)
async def generate_automated_forecasts() -> GenerationReport:
    try:
        return await get_handler().generate_automated_forecasts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[ForecastRouter] Error in generate_automated_forecasts: {e}")
        raise HTTPException(status_code=500, detail=f"Error: {e}")


@router.get("/api/forecasts/{forecast_id}", response_model=Forecast)
def get_forecast(forecast_id: str) -> Forecast:
    try:
        return get_handler().get_forecast(forecast_id)
    except ForecastNotFoundError:
        raise HTTPException(status_code=404, detail="Forecast not found")


@router.post("/api/forecasts", response_model=Forecast)
def create_forecast(data: ForecastCreate) -> Forecast:
    return get_handler().create_forecast(data)


@router.put("/api/forecasts/{forecast_id}", response_model=Forecast)
def update_forecast(forecast_id: str, data: ForecastCreate) -> Forecast:
    try:
        return get_handler().update_forecast(forecast_id, data)
    except ForecastNotFoundError:
        raise HTTPException(status_code=404, detail="Forecast not found")


@router.delete("/api/forecasts/{forecast_id}")
def delete_forecast(forecast_id: str) -> dict[str, bool]:
    deleted = get_handler().delete_forecast(forecast_id)
    return {"deleted": deleted}


@router.get(
    "/ping",
    summary="Health check",
    description="Health check endpoint",
)
def ping() -> dict[str, str]:
    """Health check endpoint."""
    return get_handler().ping()
