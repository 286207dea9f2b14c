"""Configuration helpers for environment-dependent services."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from openai import OpenAI  # type: ignore

from .errors import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MEAL_API_URL = "https://www.themealdb.com/api/json/v1/1/random.php"
DEFAULT_TRANSLATION_MODEL = "gpt-4.1-mini"
DEFAULT_TARGET_LANGUAGE = "Korean"


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        message = f"{name} must be a number of seconds, got '{raw}'."
        logger.error(message)
        raise ConfigurationError(message) from exc


def get_meal_api_url() -> str:
    """Return the random recipe endpoint of the catalog."""
    return os.getenv("MEAL_API_URL", DEFAULT_MEAL_API_URL)


def get_meal_api_timeout() -> Optional[float]:
    """Return the catalog request timeout, or None for the client default."""
    return _optional_float("MEAL_API_TIMEOUT")


@dataclass(frozen=True)
class TranslationConfig:
    api_key: str
    model: str = DEFAULT_TRANSLATION_MODEL
    target_language: str = DEFAULT_TARGET_LANGUAGE
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"TranslationConfig(api_key='***', model={self.model!r}, "
            f"target_language={self.target_language!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


def load_translation_config() -> TranslationConfig:
    """Build the translation settings from environment variables."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        message = "OPENAI_API_KEY environment variable is not set."
        logger.error(message)
        raise ConfigurationError(message)

    config = TranslationConfig(
        api_key=api_key,
        model=os.getenv("OPENAI_MODEL_TRANSLATION", DEFAULT_TRANSLATION_MODEL),
        target_language=os.getenv("TRANSLATION_TARGET_LANGUAGE", DEFAULT_TARGET_LANGUAGE),
        base_url=os.getenv("OPENAI_BASE_URL") or None,
        timeout=_optional_float("OPENAI_TIMEOUT"),
    )
    logger.debug("Loaded translation config: %r", config)
    return config


@lru_cache(maxsize=4)
def get_openai_client(config: TranslationConfig) -> OpenAI:
    """Instantiate (and cache) an OpenAI client for the given settings.

    SDK retries are disabled so that one translation is exactly one request.
    """
    logger.debug("Creating OpenAI client for model %s", config.model)
    kwargs = {"api_key": config.api_key, "max_retries": 0}
    if config.base_url:
        kwargs["base_url"] = config.base_url
    if config.timeout is not None:
        kwargs["timeout"] = config.timeout
    return OpenAI(**kwargs)


__all__ = [
    "DEFAULT_MEAL_API_URL",
    "DEFAULT_TARGET_LANGUAGE",
    "DEFAULT_TRANSLATION_MODEL",
    "TranslationConfig",
    "get_meal_api_timeout",
    "get_meal_api_url",
    "get_openai_client",
    "load_translation_config",
]
