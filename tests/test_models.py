"""Unit tests for Pydantic data models."""
import pytest
from pydantic import ValidationError

from floodrisk.models import (
    AnalysisResult,
    DailyObservation,
    RiskAssessment,
    default_assessment,
)


class TestDailyObservation:
    """Test observation validation and immutability."""

    def test_frozen(self):
        obs = DailyObservation(date="2025-08-01", max_temp=35.0, min_temp=25.0, avg_temp=30.0)

        with pytest.raises(ValidationError):
            obs.total_rainfall = 10.0

    def test_rejects_negative_rainfall(self):
        with pytest.raises(ValidationError):
            DailyObservation(
                date="2025-08-01", max_temp=35.0, min_temp=25.0, avg_temp=30.0, total_rainfall=-1.0
            )

    def test_rejects_chance_over_100(self):
        with pytest.raises(ValidationError):
            DailyObservation(
                date="2025-08-01", max_temp=35.0, min_temp=25.0, avg_temp=30.0, chance_of_rain=101
            )


class TestRiskAssessment:
    """Test assessment aliases and the default constant."""

    def test_accepts_camel_case_and_snake_case(self):
        camel = RiskAssessment.model_validate({"riskLevel": "Critical", "confidenceScore": 95})
        snake = RiskAssessment(risk_level="Critical", confidence_score=95)

        assert camel == snake

    def test_serializes_with_aliases(self):
        data = default_assessment().model_dump(by_alias=True)

        assert data == {
            "riskLevel": "Medium Risk",
            "riverLevel": "Normal",
            "description": "Unable to generate AI assessment. Please monitor weather conditions closely.",
            "recommendations": [
                "Monitor local weather updates",
                "Stay informed through official channels",
                "Prepare emergency supplies",
            ],
            "confidenceScore": 50.0,
        }

    def test_default_never_alarms(self):
        assessment = default_assessment()

        assert assessment.risk_level not in ("Critical", "High Risk")
        assert assessment.river_level not in ("Flood", "High")
        assert assessment.confidence_score == 50.0

    def test_default_copy_is_independent(self):
        first = default_assessment()
        first.recommendations.clear()

        second = default_assessment()
        assert second is not first
        assert len(second.recommendations) == 3

    def test_default_constant_not_exported(self):
        import floodrisk.models

        assert not hasattr(floodrisk.models, "DEFAULT_ASSESSMENT")

    def test_analysis_result_default_flag(self):
        assert AnalysisResult(assessment=default_assessment(), source="default").is_default
        assert not AnalysisResult(assessment=default_assessment()).is_default
