"""Utility helpers shared between services and the page."""
from __future__ import annotations

from typing import Optional

NO_DESCRIPTION_PLACEHOLDER = "No description available."
SUMMARY_MAX_LINES = 5


def display_text(
    translated_instructions: Optional[str],
    instructions: Optional[str],
    placeholder: str = NO_DESCRIPTION_PLACEHOLDER,
) -> str:
    """Return the translated text, else the source text, else the placeholder."""
    if translated_instructions is not None:
        return translated_instructions
    if instructions is not None:
        return instructions
    return placeholder


def summarize(text: str, max_lines: int = SUMMARY_MAX_LINES) -> str:
    """Keep the first ``max_lines`` non-empty lines of ``text`` for the recipe card."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) <= max_lines:
        return "\n".join(lines)
    return "\n".join(lines[:max_lines]) + " …"


__all__ = [
    "NO_DESCRIPTION_PLACEHOLDER",
    "SUMMARY_MAX_LINES",
    "display_text",
    "summarize",
]
