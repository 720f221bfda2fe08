"""Main entry point for the flood risk forecasting server.

Startup sequence:
1. Initialize DI container
2. Optionally run an initial forecast generation
3. Schedule the weekly forecast generation job
4. Start HTTP server with FastAPI
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from floodrisk.config import Settings
from floodrisk.container import Container
from floodrisk.routers import forecast_router, set_forecast_handler
from floodrisk.middleware import PrometheusMiddleware
from floodrisk.metrics import (
    BACKGROUND_JOB_RUNS_TOTAL,
    BACKGROUND_JOB_DURATION_SECONDS,
    BACKGROUND_JOB_LAST_RUN_TIMESTAMP,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global container and scheduler
container: Container = None
scheduler: AsyncIOScheduler = None


async def run_weekly_forecast_generation_job():
    """Background job: generate and store forecasts for all configured regions."""
    job_name = "weekly_forecast_generation"
    logger.info("[Scheduler] Running WeeklyForecastGenerationJob")
    start_time = time.perf_counter()
    try:
        report = await container.automation_service.generate_weekly_forecasts()
        duration = time.perf_counter() - start_time
        BACKGROUND_JOB_DURATION_SECONDS.labels(job_name=job_name).observe(duration)
        if not report.enabled:
            BACKGROUND_JOB_RUNS_TOTAL.labels(job_name=job_name, status="skipped").inc()
            return
        BACKGROUND_JOB_RUNS_TOTAL.labels(job_name=job_name, status="success").inc()
        BACKGROUND_JOB_LAST_RUN_TIMESTAMP.labels(job_name=job_name).set_to_current_time()
        logger.info(
            f"[Scheduler] WeeklyForecastGenerationJob completed: "
            f"{len(report.succeeded)}/{report.total} regions"
        )
    except Exception as e:
        duration = time.perf_counter() - start_time
        BACKGROUND_JOB_DURATION_SECONDS.labels(job_name=job_name).observe(duration)
        BACKGROUND_JOB_RUNS_TOTAL.labels(job_name=job_name, status="error").inc()
        logger.error(f"[Scheduler] WeeklyForecastGenerationJob failed: {e}")


def start_background_jobs(settings: Settings):
    """Start the forecast generation job using APScheduler."""
    global scheduler
    scheduler = AsyncIOScheduler()

    scheduler.add_job(
        run_weekly_forecast_generation_job,
        trigger=CronTrigger.from_crontab(settings.forecast_automation_cron),
        id="weekly_forecast_generation",
        name="Weekly Flood Forecast Generation",
        replace_existing=True,
    )
    logger.info(
        f"[Scheduler] Scheduled weekly forecast generation with cron: "
        f"{settings.forecast_automation_cron}"
    )

    scheduler.start()
    logger.info("[Scheduler] Background jobs started")


async def startup_sequence(settings: Settings):
    """Build the container, inject the handler and start jobs."""
    global container

    logger.info("[Main] Starting startup sequence")

    container = Container(settings)
    set_forecast_handler(container.forecast_handler)

    if settings.generate_on_startup:
        logger.info("[Main] Generating forecasts (initial load)")
        await run_weekly_forecast_generation_job()
    else:
        logger.info("[Main] Skipping initial generation (GENERATE_ON_STARTUP=false)")

    if settings.forecast_automation_enabled:
        start_background_jobs(settings)
    else:
        logger.info("[Main] Forecast automation disabled, no jobs scheduled")

    logger.info("[Main] Startup sequence completed")


async def shutdown_sequence():
    """Clean up resources on shutdown."""
    global container, scheduler

    logger.info("[Main] Starting shutdown sequence")

    if scheduler:
        scheduler.shutdown(wait=False)
        logger.info("[Main] Scheduler stopped")

    if container:
        await container.shutdown()
        logger.info("[Main] Container shut down")

    logger.info("[Main] Shutdown sequence completed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown."""
    await startup_sequence(settings)
    yield
    await shutdown_sequence()


settings = Settings()
logging.getLogger().setLevel(settings.log_level.upper())

app = FastAPI(
    title="Flood Risk Forecasting API",
    description="Weekly AI flood risk forecasts for Pakistani regions",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(PrometheusMiddleware)

# Register router at app creation time (before uvicorn starts)
app.include_router(forecast_router)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/metrics", response_class=PlainTextResponse)
def metrics():
    """Prometheus metrics endpoint for scraping."""
    return PlainTextResponse(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("[Main] Starting Flood Risk server")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
