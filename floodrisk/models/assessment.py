"""Risk assessment models produced by the LLM analysis pipeline."""
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from floodrisk.errors import InvocationError, ParseError

# Labels the LLM is asked to choose from. Advisory only: RiskAssessment
# accepts any string so drift in the model output never fails a request.
RISK_LEVELS = ("Low Risk", "Medium Risk", "High Risk", "Critical")
RIVER_LEVELS = ("Normal", "Rising", "High", "Flood")


class RiskAssessment(BaseModel):
    """Flood risk assessment for a region.

    Serialized with camelCase aliases to match the JSON schema the LLM is
    prompted with.
    """
    risk_level: str = Field(default="Medium Risk", alias="riskLevel")
    river_level: str = Field(default="Normal", alias="riverLevel")
    description: str = ""
    recommendations: list[str] = Field(default_factory=list)
    confidence_score: float = Field(default=75.0, alias="confidenceScore")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def is_known_risk_level(self) -> bool:
        return self.risk_level in RISK_LEVELS

    def is_known_river_level(self) -> bool:
        return self.river_level in RIVER_LEVELS


_DEFAULT_ASSESSMENT = RiskAssessment(
    risk_level="Medium Risk",
    river_level="Normal",
    description="Unable to generate AI assessment. Please monitor weather conditions closely.",
    recommendations=[
        "Monitor local weather updates",
        "Stay informed through official channels",
        "Prepare emergency supplies",
    ],
    confidence_score=50.0,
)


def default_assessment() -> RiskAssessment:
    """Return a fresh copy of the fallback assessment."""
    return _DEFAULT_ASSESSMENT.model_copy(deep=True)


class AnalysisResult(BaseModel):
    """Outcome of one analysis: the assessment plus which path produced it.

    source is "llm" when the response parsed, "default" when an
    InvocationError or ParseError forced the fallback (kept in error).
    """
    assessment: RiskAssessment
    source: Literal["llm", "default"] = "llm"
    error: Optional[Union[InvocationError, ParseError]] = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def is_default(self) -> bool:
        return self.source == "default"
