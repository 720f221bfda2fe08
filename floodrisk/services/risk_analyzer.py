"""Flood risk analysis orchestrator.

Pipeline: observations -> WeatherSummary -> prompt -> one LLM call ->
RiskAssessment. LLM and parse failures collapse to the default assessment
here; EmptyForecastError is left to the caller as the per-region failure.
"""
import logging
from collections.abc import Sequence
from typing import Optional, Protocol

from floodrisk.config import AnalyzerConfig
from floodrisk.errors import InvocationError, ParseError
from floodrisk.metrics import RISK_ASSESSMENTS_TOTAL, RISK_ASSESSMENT_FALLBACKS_TOTAL
from floodrisk.models import (
    AnalysisResult,
    DailyObservation,
    RiskAssessment,
    WeatherSummary,
    default_assessment,
)
from floodrisk.services.assessment_parser import AssessmentParser
from floodrisk.services.prompt_builder import PromptBuilder
from floodrisk.services.weather_aggregator import WeatherAggregator

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that turns a prompt into completion text (see LLMClient)."""

    async def complete(
        self, prompt: str, model: str, temperature: float, max_tokens: int
    ) -> str:
        ...


class RiskAnalyzer:
    """Produces a RiskAssessment for a region's daily observations.

    Stateless apart from its collaborators; safe to share across regions.
    """

    def __init__(
        self,
        llm_client: CompletionClient,
        config: Optional[AnalyzerConfig] = None,
        aggregator: Optional[WeatherAggregator] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        parser: Optional[AssessmentParser] = None,
    ):
        """Initialize RiskAnalyzer.

        Args:
            llm_client: Collaborator exposing async complete(prompt, model, temperature, max_tokens)
            config: Model name and sampling parameters
            aggregator: WeatherAggregator (default instance if omitted)
            prompt_builder: PromptBuilder (default instance if omitted)
            parser: AssessmentParser (default instance if omitted)
        """
        self.llm_client = llm_client
        self.config = config or AnalyzerConfig()
        self.aggregator = aggregator or WeatherAggregator()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.parser = parser or AssessmentParser()

    async def analyze(
        self, region: str, observations: Sequence[DailyObservation]
    ) -> RiskAssessment:
        """Analyze flood risk; never raises for LLM or parse failures.

        Raises:
            EmptyForecastError: If observations is empty
        """
        result = await self.analyze_with_result(region, observations)
        return result.assessment

    async def analyze_with_result(
        self, region: str, observations: Sequence[DailyObservation]
    ) -> AnalysisResult:
        """Like analyze, but reports which path produced the assessment."""
        summary = self.aggregator.summarize(region, observations)
        return await self.analyze_summary(summary)

    async def analyze_summary(self, summary: WeatherSummary) -> AnalysisResult:
        """Run prompt -> LLM -> parse for an already aggregated summary."""
        region = summary.region
        logger.info(f"[RiskAnalyzer] Analyzing flood risk for region: {region}")

        prompt = self.prompt_builder.build(region, summary)

        try:
            raw_response = await self.llm_client.complete(
                prompt,
                model=self.config.model,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except InvocationError as e:
            return self._fallback(region, "invocation_error", e)
        except Exception as e:
            # Collaborators other than LLMClient may leak their own errors
            return self._fallback(
                region, "invocation_error", InvocationError(f"LLM invocation failed: {e}")
            )

        try:
            assessment = self.parser.try_parse(raw_response)
        except ParseError as e:
            return self._fallback(region, "parse_error", e)

        RISK_ASSESSMENTS_TOTAL.labels(source="llm").inc()
        logger.info(
            f"[RiskAnalyzer] {region}: {assessment.risk_level} / "
            f"{assessment.river_level} (confidence {assessment.confidence_score:.0f})"
        )
        return AnalysisResult(assessment=assessment, source="llm")

    def _fallback(self, region: str, reason: str, error: Exception) -> AnalysisResult:
        RISK_ASSESSMENTS_TOTAL.labels(source="default").inc()
        RISK_ASSESSMENT_FALLBACKS_TOTAL.labels(reason=reason).inc()
        logger.error(
            f"[RiskAnalyzer] Using default assessment for {region} ({reason}): {error}"
        )
        return AnalysisResult(assessment=default_assessment(), source="default", error=error)
