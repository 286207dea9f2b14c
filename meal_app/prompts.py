"""Prompt templates shared across the application."""
from __future__ import annotations

TRANSLATION_SYSTEM_PROMPT_TEMPLATE = (
    "You are a translator who renders English cooking instructions into natural {language}. "
    "Translate the user's text faithfully and concisely. "
    "Respond only with the translation, without notes, explanations or quotation marks."
)


def build_translation_system_prompt(language: str) -> str:
    return TRANSLATION_SYSTEM_PROMPT_TEMPLATE.format(language=language)


__all__ = ["TRANSLATION_SYSTEM_PROMPT_TEMPLATE", "build_translation_system_prompt"]
