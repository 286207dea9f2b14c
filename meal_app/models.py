"""Dataclasses and type helpers used across the project."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .schemas import MealRecord
from .utils import display_text


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    thumbnail_url: Optional[str] = None
    instructions: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_record(cls, record: MealRecord) -> "Recipe":
        return cls(
            id=record.id_meal,
            name=record.str_meal,
            thumbnail_url=record.str_meal_thumb,
            instructions=record.str_instructions,
            category=record.str_category,
        )


class LoadPhase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS_TRANSLATED = "success_translated"
    SUCCESS_UNTRANSLATED = "success_untranslated"
    FAILED = "failed"


@dataclass
class LoadState:
    """Everything the page needs to render the current recommendation."""

    recipe: Optional[Recipe] = None
    translated_instructions: Optional[str] = None
    is_loading: bool = False
    error_message: Optional[str] = None

    @property
    def display_text(self) -> str:
        instructions = self.recipe.instructions if self.recipe else None
        return display_text(self.translated_instructions, instructions)

    @property
    def is_translated(self) -> bool:
        return self.translated_instructions is not None

    @property
    def phase(self) -> LoadPhase:
        if self.is_loading:
            return LoadPhase.LOADING
        if self.error_message is not None:
            return LoadPhase.FAILED
        if self.recipe is None:
            return LoadPhase.IDLE
        if self.is_translated:
            return LoadPhase.SUCCESS_TRANSLATED
        return LoadPhase.SUCCESS_UNTRANSLATED


__all__ = ["LoadPhase", "LoadState", "Recipe"]
