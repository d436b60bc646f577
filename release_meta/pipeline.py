"""Pipeline orchestration for message parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

import structlog

from release_meta import metrics, normalize
from release_meta.extractors import scan_all
from release_meta.message import Message
from release_meta.settings import Settings

LOGGER = structlog.get_logger(__name__)


@dataclass(slots=True)
class ParseRequest:
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class PipelineResult:
    message: Message
    steps: list[str]
    latency_ms: float
    version: str

    def asdict(self) -> dict[str, Any]:
        return {
            **self.message.asdict(),
            "steps": list(self.steps),
            "latency_ms": self.latency_ms,
            "version": self.version,
        }


def run_pipeline(parse_request: ParseRequest, *, settings: Settings) -> PipelineResult:
    """Parse a single message with logging and metrics."""

    start = perf_counter()
    request_id = parse_request.metadata.get("request_id")
    LOGGER.info("pipeline.start", request_id=request_id, length=len(parse_request.text))

    normalized = normalize.normalize_message(parse_request.text)
    policy = settings.policy

    matches: dict[str, list[str]] = {}
    for extractor_name, extractor_matches, extractor_latency in scan_all(
        normalized.lines, policy=policy
    ):
        if settings.metrics_enabled:
            metrics.observe_extractor(
                extractor=extractor_name,
                latency_ms=extractor_latency,
                match_count=len(extractor_matches),
            )
        matches[extractor_name] = extractor_matches

    message = Message._from_matches(normalized.lines, matches)

    latency_ms = (perf_counter() - start) * 1000
    if settings.metrics_enabled:
        metrics.observe_parse_run(
            latency_ms=latency_ms,
            line_count=len(message.lines),
            has_year=message.release_year is not None,
        )

    LOGGER.info(
        "pipeline.end",
        request_id=request_id,
        lines=len(message.lines),
        authors=len(message.authors),
        release_year_found=message.release_year is not None,
        latency_ms=latency_ms,
    )

    return PipelineResult(
        message=message,
        steps=normalized.steps,
        latency_ms=latency_ms,
        version=settings.parser_version,
    )
