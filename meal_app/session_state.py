"""Helpers for keeping the recipe orchestrator in Streamlit session state."""
from __future__ import annotations

import streamlit as st

from .config import load_translation_config
from .errors import ConfigurationError
from .logging_config import get_logger
from .services.orchestrator import RecipeOrchestrator
from .services.recipe_source import RecipeSource
from .services.translation import TranslationService

logger = get_logger(__name__)

SESSION_DEFAULTS = {
    "initial_load_done": False,
}


def build_orchestrator() -> RecipeOrchestrator:
    """Wire the catalog client and, when an API key is configured, the translator."""
    source = RecipeSource()
    try:
        config = load_translation_config()
    except ConfigurationError as exc:
        logger.warning("Translation disabled: %s", exc)
        return RecipeOrchestrator(source)

    return RecipeOrchestrator(
        source,
        TranslationService(config),
        target_language=config.target_language,
    )


def initialize_session_state() -> None:
    """Ensure Streamlit session state contains the expected keys."""
    for key, value in SESSION_DEFAULTS.items():
        st.session_state.setdefault(key, value)

    if "orchestrator" not in st.session_state:
        logger.info("Creating recipe orchestrator for new session")
        st.session_state.orchestrator = build_orchestrator()


def get_orchestrator() -> RecipeOrchestrator:
    initialize_session_state()
    return st.session_state.orchestrator


def request_load() -> bool:
    """Ask the session's orchestrator for a new random recipe."""
    return get_orchestrator().load()


__all__ = [
    "SESSION_DEFAULTS",
    "build_orchestrator",
    "get_orchestrator",
    "initialize_session_state",
    "request_load",
]
