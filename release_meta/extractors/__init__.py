"""Extractor registry orchestrating all extractor runs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from time import perf_counter

from release_meta.policy import DEFAULT_POLICY, ExtractionPolicy

from . import author, year

AUTHOR = "author"
YEAR = "year"


def scan_all(
    lines: Sequence[str],
    *,
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> Iterator[tuple[str, list[str], float]]:
    """Run each extractor and yield its matches with latency metrics."""

    extractors = (
        (AUTHOR, author.scan),
        (YEAR, year.scan),
    )

    for extractor_name, extractor_func in extractors:
        start = perf_counter()
        matches = extractor_func(lines, policy=policy)
        latency_ms = (perf_counter() - start) * 1000
        yield extractor_name, matches, latency_ms
