"""Structured view of a single release message."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from release_meta.extractors import AUTHOR, YEAR, scan_all
from release_meta.normalize import strip_line, to_lines
from release_meta.policy import DEFAULT_POLICY, ExtractionPolicy


@dataclass(frozen=True, slots=True)
class Message:
    """Cleaned lines, attributed authors and release year of one message."""

    lines: tuple[str, ...] = ()
    authors: tuple[str, ...] = ()
    release_year: str | None = None

    @classmethod
    def from_text(cls, message: str, *, policy: ExtractionPolicy = DEFAULT_POLICY) -> Message:
        """Build a message from raw text. Never fails; empty text gives ``Message()``."""
        return cls._from_clean_lines(to_lines(message), policy=policy)

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], *, policy: ExtractionPolicy = DEFAULT_POLICY
    ) -> Message:
        """Build a message from pre-split lines, cleaning each and dropping empties."""
        cleaned = [line for line in map(strip_line, lines) if line]
        return cls._from_clean_lines(cleaned, policy=policy)

    @classmethod
    def _from_clean_lines(
        cls, lines: Sequence[str], *, policy: ExtractionPolicy
    ) -> Message:
        matches = {name: found for name, found, _ in scan_all(lines, policy=policy)}
        return cls._from_matches(lines, matches)

    @classmethod
    def _from_matches(cls, lines: Sequence[str], matches: Mapping[str, Sequence[str]]) -> Message:
        # lines must already be normalized; matches come from scan_all over them.
        years = matches.get(YEAR) or ()
        return cls(
            lines=tuple(lines),
            authors=tuple(matches.get(AUTHOR) or ()),
            release_year=years[0] if years else None,
        )

    def asdict(self) -> dict[str, Any]:
        return {
            "lines": list(self.lines),
            "authors": list(self.authors),
            "release_year": self.release_year,
        }
