"""Unit tests for RiskAnalyzer orchestration."""
import json

import pytest
from unittest.mock import AsyncMock, Mock

from floodrisk.config import AnalyzerConfig
from floodrisk.errors import EmptyForecastError, InvocationError, ParseError
from floodrisk.models import default_assessment
from floodrisk.services import RiskAnalyzer

HIGH_RISK_RESPONSE = json.dumps({
    "riskLevel": "High Risk",
    "riverLevel": "Rising",
    "description": "Sustained monsoon rain over the Ravi catchment.",
    "recommendations": ["Clear drainage channels", "Move valuables upstairs"],
    "confidenceScore": 82,
})


@pytest.fixture
def mock_llm_client():
    """Create mock LLM client."""
    client = Mock()
    client.complete = AsyncMock(return_value=HIGH_RISK_RESPONSE)
    return client


@pytest.fixture
def analyzer(mock_llm_client):
    return RiskAnalyzer(
        mock_llm_client,
        config=AnalyzerConfig(model="grok-beta", temperature=0.7, max_tokens=1000),
    )


class TestRiskAnalyzer:
    """Test the analyze pipeline and its failure boundary."""

    @pytest.mark.asyncio
    async def test_analyze_returns_parsed_assessment(self, analyzer, lahore_week):
        assessment = await analyzer.analyze("Lahore", lahore_week)

        assert assessment.risk_level == "High Risk"
        assert assessment.river_level == "Rising"
        assert assessment.confidence_score == 82.0
        assert assessment.recommendations == ["Clear drainage channels", "Move valuables upstairs"]

    @pytest.mark.asyncio
    async def test_single_call_with_prompt_and_config(self, analyzer, mock_llm_client, lahore_week):
        await analyzer.analyze("Lahore", lahore_week)

        mock_llm_client.complete.assert_awaited_once()
        call_args = mock_llm_client.complete.call_args
        prompt = call_args.args[0]
        assert "Region: Lahore" in prompt
        assert "Total Rainfall (7 days): 140.0 mm" in prompt
        assert call_args.kwargs == {"model": "grok-beta", "temperature": 0.7, "max_tokens": 1000}

    @pytest.mark.asyncio
    async def test_invocation_error_returns_default(self, analyzer, mock_llm_client, lahore_week):
        mock_llm_client.complete.side_effect = InvocationError("503 Service Unavailable")

        assessment = await analyzer.analyze("Lahore", lahore_week)

        assert assessment == default_assessment()
        mock_llm_client.complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_collaborator_error_returns_default(
        self, analyzer, mock_llm_client, lahore_week
    ):
        mock_llm_client.complete.side_effect = TimeoutError("read timed out")

        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.assessment == default_assessment()
        assert isinstance(result.error, InvocationError)

    @pytest.mark.asyncio
    async def test_unparseable_response_returns_default(
        self, analyzer, mock_llm_client, lahore_week
    ):
        mock_llm_client.complete.return_value = "I cannot help with that."

        assessment = await analyzer.analyze("Lahore", lahore_week)

        assert assessment == default_assessment()

    @pytest.mark.asyncio
    async def test_oversized_confidence_does_not_raise(
        self, analyzer, mock_llm_client, lahore_week
    ):
        mock_llm_client.complete.return_value = (
            '{"riskLevel": "High Risk", "confidenceScore": 1' + "0" * 400 + "}"
        )

        assessment = await analyzer.analyze("Lahore", lahore_week)

        assert assessment.risk_level == "High Risk"
        assert assessment.confidence_score == 75.0

    @pytest.mark.asyncio
    async def test_nan_confidence_returns_default(self, analyzer, mock_llm_client, lahore_week):
        mock_llm_client.complete.return_value = '{"riskLevel": "High Risk", "confidenceScore": NaN}'

        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.is_default
        assert isinstance(result.error, ParseError)

    @pytest.mark.asyncio
    async def test_empty_observations_raise_before_llm_call(self, analyzer, mock_llm_client):
        with pytest.raises(EmptyForecastError):
            await analyzer.analyze("Lahore", [])

        mock_llm_client.complete.assert_not_called()


class TestAnalysisResult:
    """Test the typed outcome exposed by analyze_with_result."""

    @pytest.mark.asyncio
    async def test_llm_source(self, analyzer, lahore_week):
        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.source == "llm"
        assert result.error is None
        assert not result.is_default

    @pytest.mark.asyncio
    async def test_invocation_failure_path(self, analyzer, mock_llm_client, lahore_week):
        error = InvocationError("connection refused")
        mock_llm_client.complete.side_effect = error

        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.source == "default"
        assert result.error is error
        assert result.is_default

    @pytest.mark.asyncio
    async def test_parse_failure_path(self, analyzer, mock_llm_client, lahore_week):
        mock_llm_client.complete.return_value = "not json at all"

        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.source == "default"
        assert isinstance(result.error, ParseError)
        assert result.assessment == default_assessment()

    @pytest.mark.asyncio
    async def test_partial_json_is_not_a_failure(self, analyzer, mock_llm_client, lahore_week):
        mock_llm_client.complete.return_value = 'Sure!\n{"riskLevel": "Low Risk"}'

        result = await analyzer.analyze_with_result("Lahore", lahore_week)

        assert result.source == "llm"
        assert result.assessment.risk_level == "Low Risk"
        assert result.assessment.confidence_score == 75.0
