"""Pydantic schemas for the JSON payloads exchanged with remote services.

Responses are validated at the boundary: a missing required field raises a
``pydantic.ValidationError`` instead of silently becoming ``None``. Unknown
keys are ignored because TheMealDB returns dozens of ingredient columns we do
not use.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MealRecord(BaseModel):
    """A single recipe entry as returned by TheMealDB."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id_meal: str = Field(..., alias="idMeal")
    str_meal: str = Field(..., alias="strMeal")
    str_meal_thumb: Optional[str] = Field(None, alias="strMealThumb")
    str_instructions: Optional[str] = Field(None, alias="strInstructions")
    str_category: Optional[str] = Field(None, alias="strCategory")

    @field_validator("str_meal_thumb", "str_instructions", "str_category")
    @classmethod
    def _blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value


class MealResponse(BaseModel):
    """Envelope returned by the random recipe endpoint.

    TheMealDB reports "no results" as ``{"meals": null}``.
    """

    model_config = ConfigDict(extra="ignore")

    meals: Optional[List[MealRecord]]


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of a chat completion request."""

    model: str
    messages: List[ChatMessage]


class ChatChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int
    message: ChatMessage


class ChatCompletionResponse(BaseModel):
    """The subset of a chat completion response that we read."""

    model_config = ConfigDict(extra="ignore")

    choices: List[ChatChoice]


__all__ = [
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "MealRecord",
    "MealResponse",
]
