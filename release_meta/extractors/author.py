"""Author attribution extractor ("... by NAME ...")."""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

from release_meta.policy import DEFAULT_POLICY, DEFAULT_STOP_CHARS, ExtractionPolicy


@lru_cache(maxsize=32)
def _attribution_pattern(stop_chars: str) -> re.Pattern[str]:
    # Greedy prefix anchors the match on the last " by " of the line.
    # Only the delimiter ignores case; stop characters match exactly.
    return re.compile(
        rf"^.*(?i: by )([^{re.escape(stop_chars)}]*)",
        re.DOTALL,
    )


def get_author(line: str, *, stop_chars: str = DEFAULT_STOP_CHARS) -> str | None:
    """Return the name attributed on ``line`` or None when there is no attribution.

    The name starts after the last case-insensitive ``" by "`` and ends at the
    first stop character (or end of line). A leading space is prepended so a
    line starting with "by" still matches. Casing is preserved; an attribution
    with nothing after it yields an empty string.
    """
    match = _attribution_pattern(stop_chars).match(f" {line}")
    if match is None:
        return None
    return match.group(1).strip()


def scan(lines: Sequence[str], *, policy: ExtractionPolicy = DEFAULT_POLICY) -> list[str]:
    authors: list[str] = []
    for line in lines:
        author = get_author(line, stop_chars=policy.stop_chars)
        if author is not None:
            authors.append(author)
    return authors
