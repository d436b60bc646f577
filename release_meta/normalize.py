"""Text normalization: split a raw message into cleaned, non-empty lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)

# ASCII control characters: C0 range plus DEL.
_CONTROL_TO_SPACE = {codepoint: " " for codepoint in (*range(0x20), 0x7F)}

_WHITESPACE_RUN = re.compile(r"\s{2,}")


@dataclass(slots=True)
class NormalizationResult:
    """Outcome of the normalization stage."""

    lines: list[str]
    steps: list[str] = field(default_factory=list)


def _replace_control_characters(value: str) -> tuple[str, bool]:
    replaced = value.translate(_CONTROL_TO_SPACE)
    return replaced, replaced != value


def _collapse_whitespace(value: str) -> tuple[str, bool]:
    collapsed = _WHITESPACE_RUN.sub(" ", value)
    return collapsed, collapsed != value


def strip_line(value: str) -> str:
    """Clean a single line.

    Control characters become spaces, whitespace runs collapse to one space
    and the result is trimmed. The output may be empty.
    """
    value, _ = _replace_control_characters(value)
    value, _ = _collapse_whitespace(value)
    return value.strip()


def normalize_message(value: str | None) -> NormalizationResult:
    """Normalize a raw message into cleaned lines.

    Normalization order:
    1. Split on ``\\n`` (segments may be empty)
    2. Replace ASCII control characters with a space
    3. Collapse whitespace runs to a single space
    4. Trim each segment
    5. Drop segments left empty

    Args:
        value: Raw message text (None becomes empty string)

    Returns:
        NormalizationResult with the cleaned lines and the steps that changed something
    """
    if value is None:
        value = ""

    steps: list[str] = []
    lines: list[str] = []
    dropped = 0

    for segment in value.split("\n"):
        segment, mutated = _replace_control_characters(segment)
        if mutated and "strip_control" not in steps:
            steps.append("strip_control")

        segment, mutated = _collapse_whitespace(segment)
        if mutated and "collapse_whitespace" not in steps:
            steps.append("collapse_whitespace")

        segment = segment.strip()
        if not segment:
            dropped += 1
            continue
        lines.append(segment)

    if dropped:
        steps.append("drop_empty")

    LOGGER.debug(
        "normalized message",
        extra={
            "steps": steps,
            "length": len(value),
            "lines": len(lines),
            "dropped": dropped,
        },
    )

    return NormalizationResult(lines=lines, steps=steps)


def to_lines(message: str) -> list[str]:
    """Return the cleaned, non-empty lines of ``message`` in input order."""
    return normalize_message(message).lines
