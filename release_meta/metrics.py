"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

PARSE_LATENCY = Histogram(
    "release_meta_parse_latency_seconds",
    "Latency of message parsing pipeline executions",
    buckets=(0.0005, 0.001, 0.002, 0.005, 0.01, 0.02, 0.04, 0.08, 0.16),
    registry=REGISTRY,
)

EXTRACTOR_LATENCY = Histogram(
    "release_meta_extractor_latency_seconds",
    "Latency of individual extractor executions",
    labelnames=("extractor",),
    buckets=(0.0001, 0.0005, 0.001, 0.002, 0.005, 0.01, 0.02, 0.04),
    registry=REGISTRY,
)

EXTRACTOR_MATCHES = Counter(
    "release_meta_extractor_matches_total",
    "Number of values each extractor produced",
    labelnames=("extractor",),
    registry=REGISTRY,
)

LINES_TOTAL = Counter(
    "release_meta_lines_total",
    "Number of normalized lines processed",
    registry=REGISTRY,
)

MISSING_YEAR_TOTAL = Counter(
    "release_meta_messages_without_year_total",
    "Number of messages parsed without a release year",
    registry=REGISTRY,
)


def observe_parse_run(*, latency_ms: float, line_count: int, has_year: bool) -> None:
    PARSE_LATENCY.observe(latency_ms / 1000.0)
    LINES_TOTAL.inc(line_count)
    if not has_year:
        MISSING_YEAR_TOTAL.inc()


def observe_extractor(*, extractor: str, latency_ms: float, match_count: int) -> None:
    EXTRACTOR_LATENCY.labels(extractor=extractor).observe(latency_ms / 1000.0)
    EXTRACTOR_MATCHES.labels(extractor=extractor).inc(match_count)


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
