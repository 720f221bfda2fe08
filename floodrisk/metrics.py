"""Prometheus metrics definitions for the flood risk server.

Exposes metrics for:
1. HTTP API metrics (requests, latency)
2. Weather provider and LLM client metrics (calls, latency, errors)
3. Risk assessment outcomes (LLM-parsed vs default fallback)
4. Background job metrics (runs, duration, last run)
"""
from prometheus_client import Counter, Histogram, Gauge

# =============================================================================
# HTTP API METRICS
# =============================================================================

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# =============================================================================
# WEATHER PROVIDER METRICS
# =============================================================================

WEATHER_API_CALLS_TOTAL = Counter(
    "weather_api_calls_total",
    "Total number of weather provider API calls",
    ["endpoint", "status"],  # status: success, error
)

WEATHER_API_CALL_DURATION_SECONDS = Histogram(
    "weather_api_call_duration_seconds",
    "Weather provider API call latency in seconds",
    ["endpoint"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

WEATHER_API_ERRORS_TOTAL = Counter(
    "weather_api_errors_total",
    "Total number of weather provider API errors",
    ["endpoint", "error_type"],  # error_type: http_error, timeout, connection_error, invalid_payload
)

# =============================================================================
# LLM CLIENT METRICS
# =============================================================================

LLM_API_CALLS_TOTAL = Counter(
    "llm_api_calls_total",
    "Total number of LLM chat completion calls",
    ["model", "status"],  # status: success, error
)

LLM_API_CALL_DURATION_SECONDS = Histogram(
    "llm_api_call_duration_seconds",
    "LLM chat completion latency in seconds",
    ["model"],
    buckets=(0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0),
)

# =============================================================================
# RISK ASSESSMENT METRICS
# =============================================================================

RISK_ASSESSMENTS_TOTAL = Counter(
    "risk_assessments_total",
    "Risk assessments produced, by source",
    ["source"],  # source: llm, default
)

RISK_ASSESSMENT_FALLBACKS_TOTAL = Counter(
    "risk_assessment_fallbacks_total",
    "Risk assessments that fell back to the default, by reason",
    ["reason"],  # reason: invocation_error, parse_error
)

REGION_PROCESSING_RESULTS_TOTAL = Counter(
    "region_processing_results_total",
    "Per-region results of automated forecast generation",
    ["result"],  # result: success, degraded, empty_forecast, weather_error, error
)

# =============================================================================
# BACKGROUND JOB METRICS
# =============================================================================

BACKGROUND_JOB_RUNS_TOTAL = Counter(
    "background_job_runs_total",
    "Total number of background job runs",
    ["job_name", "status"],  # status: success, error, skipped
)

BACKGROUND_JOB_DURATION_SECONDS = Histogram(
    "background_job_duration_seconds",
    "Background job duration in seconds",
    ["job_name"],
    buckets=(1.0, 5.0, 10.0, 30.0, 60.0, 120.0, 300.0, 600.0),
)

BACKGROUND_JOB_LAST_RUN_TIMESTAMP = Gauge(
    "background_job_last_run_timestamp",
    "Unix timestamp of the last successful job run",
    ["job_name"],
)
