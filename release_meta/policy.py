"""Extraction policy shared by the author and year extractors."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_YEAR_MIN = 1996
DEFAULT_YEAR_MAX = 2025
DEFAULT_STOP_CHARS = "([,-"

_FOUR_DIGIT_YEARS = range(1000, 10000)


@dataclass(frozen=True, slots=True)
class ExtractionPolicy:
    """Year range and author stop characters in force for one run.

    Both year bounds are inclusive and must be four-digit years so that every
    recognized release year is exactly four ASCII digits.
    """

    year_min: int = DEFAULT_YEAR_MIN
    year_max: int = DEFAULT_YEAR_MAX
    stop_chars: str = DEFAULT_STOP_CHARS

    def __post_init__(self) -> None:
        for name in ("year_min", "year_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
            if value not in _FOUR_DIGIT_YEARS:
                raise ValueError(f"{name} must be a four-digit year, got {value}")
        if self.year_min > self.year_max:
            raise ValueError(
                f"year_min ({self.year_min}) must not exceed year_max ({self.year_max})"
            )
        if not self.stop_chars:
            raise ValueError("stop_chars must contain at least one character")
        if any(char.isspace() for char in self.stop_chars):
            raise ValueError("stop_chars must not contain whitespace")

    def years(self) -> range:
        return range(self.year_min, self.year_max + 1)


DEFAULT_POLICY = ExtractionPolicy()
