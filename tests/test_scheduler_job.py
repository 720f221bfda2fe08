"""Unit tests for the weekly forecast generation job."""
import pytest
from unittest.mock import AsyncMock, Mock

import main
from floodrisk.models import GenerationReport


@pytest.fixture
def mock_container(monkeypatch):
    container = Mock()
    container.automation_service.generate_weekly_forecasts = AsyncMock()
    monkeypatch.setattr(main, "container", container)
    return container


class TestWeeklyForecastGenerationJob:

    @pytest.mark.asyncio
    async def test_runs_generation(self, mock_container):
        mock_container.automation_service.generate_weekly_forecasts.return_value = (
            GenerationReport(processed=["Lahore"], succeeded=["Lahore"])
        )

        await main.run_weekly_forecast_generation_job()

        mock_container.automation_service.generate_weekly_forecasts.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_does_not_propagate(self, mock_container):
        mock_container.automation_service.generate_weekly_forecasts.side_effect = (
            ConnectionError("redis down")
        )

        await main.run_weekly_forecast_generation_job()

    @pytest.mark.asyncio
    async def test_disabled_report_is_skipped(self, mock_container):
        mock_container.automation_service.generate_weekly_forecasts.return_value = (
            GenerationReport(enabled=False)
        )

        await main.run_weekly_forecast_generation_job()

        mock_container.automation_service.generate_weekly_forecasts.assert_awaited_once()
