"""Best-effort translation of recipe instructions backed by the OpenAI API."""
from __future__ import annotations

import time
from typing import Optional

import openai
from openai import OpenAI  # type: ignore
from pydantic import ValidationError

from ..config import TranslationConfig, get_openai_client
from ..errors import (
    EmptyCompletionError,
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
)
from ..logging_config import get_logger
from ..prompts import build_translation_system_prompt
from ..schemas import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

logger = get_logger(__name__)


def build_translation_request(text: str, language: str, model: str) -> ChatCompletionRequest:
    """Return the chat completion body that asks for ``text`` in ``language``."""
    return ChatCompletionRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=build_translation_system_prompt(language)),
            ChatMessage(role="user", content=text),
        ],
    )


def parse_translation_response(body: str | bytes) -> str:
    """Validate a raw chat completion body and return the first answer, stripped."""
    try:
        parsed = ChatCompletionResponse.model_validate_json(body)
    except ValidationError as exc:
        logger.error("Translation response does not match the expected schema: %s", exc)
        raise MalformedResponseError("Translation provider returned malformed JSON") from exc

    if not parsed.choices:
        logger.warning("Translation provider returned no choices")
        raise EmptyCompletionError("Translation provider returned no choices")

    return parsed.choices[0].message.content.strip()


class TranslationService:
    """Translate free text with a single chat completion request."""

    def __init__(self, config: TranslationConfig, client: Optional[OpenAI] = None) -> None:
        self.config = config
        self.client = client or get_openai_client(config)

    def translate(self, text: str, target_language: Optional[str] = None) -> str:
        language = target_language or self.config.target_language
        request = build_translation_request(text, language, self.config.model)

        start_time = time.time()
        logger.info(
            "Sending text to OpenAI for translation into %s - Length: %s characters",
            language,
            len(text),
        )

        try:
            raw_response = self.client.chat.completions.with_raw_response.create(
                **request.model_dump()
            )
        except openai.APIConnectionError as exc:
            logger.error("Could not reach translation provider: %s", exc)
            raise NetworkError(f"Could not reach translation provider: {exc}") from exc
        except openai.APIStatusError as exc:
            logger.error("Translation provider returned HTTP %s", exc.status_code)
            raise HttpStatusError(exc.status_code, "translation provider") from exc

        elapsed_time = time.time() - start_time
        logger.info("Received translation from OpenAI in %.2f seconds", elapsed_time)

        translated = parse_translation_response(raw_response.text)
        logger.info("Translated %s characters into %s characters", len(text), len(translated))
        logger.debug("First 100 chars of translation: %s...", translated[:100])
        return translated


__all__ = [
    "TranslationService",
    "build_translation_request",
    "parse_translation_response",
]
