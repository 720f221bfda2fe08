"""Flood risk prompt rendering for the LLM."""
from floodrisk.models import WeatherSummary

# The parser relies on the model returning bare JSON; keep the closing
# instruction and the schema keys in sync with AssessmentParser.
FLOOD_RISK_PROMPT = """You are a flood risk assessment expert for Pakistan. Analyze the following {days}-day weather forecast data and provide a flood risk assessment.

Region: {region}
Total Rainfall ({days} days): {total_rainfall:.1f} mm
Average Temperature: {avg_temperature:.1f}°C
Temperature Range: {min_temperature:.1f}°C to {max_temperature:.1f}°C

Daily Breakdown:
{daily_breakdown}

Based on this data, provide a JSON response with the following structure:
{{
  "riskLevel": "Low Risk" | "Medium Risk" | "High Risk" | "Critical",
  "riverLevel": "Normal" | "Rising" | "High" | "Flood",
  "description": "A brief 2-3 sentence description of the flood risk situation",
  "recommendations": ["recommendation 1", "recommendation 2", "recommendation 3"],
  "confidenceScore": 0-100
}}

Consider:
- Rainfall intensity and distribution
- Regional geography and flood history
- River systems in the area
- Monsoon season patterns

Provide ONLY the JSON response, no additional text."""

DAILY_LINE = "- {date}: {rainfall:.1f}mm rain ({chance}% chance), {condition}, Temp: {avg_temp:.1f}°C"


class PromptBuilder:
    """Renders the flood risk analysis prompt. Pure and deterministic."""

    def build(self, region: str, summary: WeatherSummary) -> str:
        daily_breakdown = "\n".join(
            DAILY_LINE.format(
                date=day.date,
                rainfall=day.total_rainfall,
                chance=int(day.chance_of_rain),
                condition=day.condition,
                avg_temp=day.avg_temp,
            )
            for day in summary.daily_observations
        )

        return FLOOD_RISK_PROMPT.format(
            days=summary.days,
            region=region,
            total_rainfall=summary.total_rainfall,
            avg_temperature=summary.avg_temperature,
            min_temperature=summary.min_temperature,
            max_temperature=summary.max_temperature,
            daily_breakdown=daily_breakdown,
        )
