"""Lenient extraction of RiskAssessment objects from LLM text responses."""
import json
import logging
import math
from typing import Any

from floodrisk.errors import ParseError
from floodrisk.models import RiskAssessment, default_assessment

logger = logging.getLogger(__name__)

DEFAULT_RISK_LEVEL = "Medium Risk"
DEFAULT_RIVER_LEVEL = "Normal"
DEFAULT_DESCRIPTION = ""
DEFAULT_CONFIDENCE_SCORE = 75.0


def extract_json_payload(raw_response: str) -> str:
    """Return the span from the first "{" to the last "}" inclusive.

    Falls back to the raw string when no such ordered pair exists, so prose
    or markdown fences around the object are dropped but nothing is repaired.
    """
    start = raw_response.find("{")
    end = raw_response.rfind("}")
    if start >= 0 and end > start:
        return raw_response[start:end + 1]
    return raw_response


def _as_text(value: Any, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return ""
    return json.dumps(value)


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return default
    except (ValueError, OverflowError):
        return default
    # "nan"/"inf" strings and literals such as 1e400 parse to non-finite floats
    return number if math.isfinite(number) else default


def _as_text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_list_item(item) for item in value]


def _as_list_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, (dict, list)):
        return ""
    return json.dumps(item)


def _reject_constant(name: str) -> None:
    raise ParseError(f"Non-standard JSON constant in LLM response: {name}")


class AssessmentParser:
    """Turns raw LLM output into a RiskAssessment.

    try_parse raises ParseError on unusable input; parse never raises and
    substitutes the default assessment instead.
    """

    def try_parse(self, raw_response: str) -> RiskAssessment:
        """Parse a response, applying per-field defaults for missing keys.

        Args:
            raw_response: Text content of the LLM completion

        Returns:
            RiskAssessment built from the embedded JSON object

        Raises:
            ParseError: If the extracted text is not a strict JSON object
        """
        payload = extract_json_payload(raw_response or "")

        try:
            data = json.loads(payload, parse_constant=_reject_constant)
        except ParseError as e:
            raise ParseError(str(e), raw_response) from e
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integer literals, pathological nesting
            raise ParseError(f"Invalid JSON in LLM response: {e}", raw_response) from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a JSON object, got {type(data).__name__}", raw_response
            )

        assessment = RiskAssessment(
            risk_level=_as_text(data.get("riskLevel"), DEFAULT_RISK_LEVEL),
            river_level=_as_text(data.get("riverLevel"), DEFAULT_RIVER_LEVEL),
            description=_as_text(data.get("description"), DEFAULT_DESCRIPTION),
            recommendations=_as_text_list(data.get("recommendations")),
            confidence_score=_as_float(data.get("confidenceScore"), DEFAULT_CONFIDENCE_SCORE),
        )

        logger.info(
            f"[AssessmentParser] Parsed risk assessment: "
            f"{assessment.risk_level} - {assessment.river_level}"
        )
        return assessment

    def parse(self, raw_response: str) -> RiskAssessment:
        """Parse a response, returning the default assessment on failure."""
        try:
            return self.try_parse(raw_response)
        except ParseError as e:
            logger.error(f"[AssessmentParser] Error parsing AI response: {e}")
            return default_assessment()
