"""Release year extractor."""

from __future__ import annotations

from collections.abc import Sequence

from release_meta.policy import (
    DEFAULT_POLICY,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    ExtractionPolicy,
)


def _first_year(line: str, years: range) -> str | None:
    for year in years:
        candidate = str(year)
        if candidate in line:
            return candidate
    return None


def get_release_year(
    line: str,
    *,
    year_min: int = DEFAULT_YEAR_MIN,
    year_max: int = DEFAULT_YEAR_MAX,
) -> str | None:
    """Return the smallest supported year whose digits occur in ``line``.

    Containment is a plain substring test, so a year embedded in a longer
    number (``"119960"``) still matches. Both bounds are inclusive.
    """
    years = ExtractionPolicy(year_min=year_min, year_max=year_max).years()
    return _first_year(line, years)


def scan(lines: Sequence[str], *, policy: ExtractionPolicy = DEFAULT_POLICY) -> list[str]:
    """Return the year of the first line that has one, as a zero or one element list."""
    years = policy.years()
    for line in lines:
        year = _first_year(line, years)
        if year is not None:
            return [year]
    return []
