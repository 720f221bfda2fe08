"""Flood risk forecasting server: weather aggregation + LLM risk assessment."""
