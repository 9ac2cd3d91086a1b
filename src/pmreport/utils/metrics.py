"""Prometheus metrics for monitoring."""

from prometheus_client import Counter, Gauge, Histogram

# Fetch metrics
pages_downloaded = Counter(
    "pmreport_pages_downloaded_total",
    "Total number of source pages downloaded",
    ["source"],
)

cache_hits = Counter(
    "pmreport_cache_hits_total",
    "Total number of runs served from the cached page",
    ["source"],
)

fetch_duration = Histogram(
    "pmreport_fetch_duration_seconds",
    "Time spent downloading the source page",
    ["source"],
)

# Parse metrics
rows_parsed = Counter(
    "pmreport_rows_parsed_total",
    "Total number of biography strings parsed",
    ["status"],
)

# Report metrics
last_successful_report = Gauge(
    "pmreport_last_successful_report_timestamp",
    "Timestamp of the last successful report",
)
