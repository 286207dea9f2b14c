"""Fetch a random recipe, translate its instructions and keep the page state.

``RecipeOrchestrator.load`` is the only operation that changes ``LoadState``.
It runs the catalog request and then, if the recipe has instructions, the
translation request. A catalog failure ends the load with a fixed error
message; a translation failure is logged and the page falls back to the
source-language instructions.

Only one load runs at a time. A call that arrives while another is in flight
returns ``False`` without touching the state. State writes and snapshots share
a second lock, so readers on other threads always see a whole state.
"""
from __future__ import annotations

import threading
import time
from dataclasses import replace
from typing import Optional

from ..errors import MealAppError
from ..logging_config import get_logger
from ..models import LoadState
from .recipe_source import RecipeSource
from .translation import TranslationService

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load a recipe. Please try again."


class RecipeOrchestrator:
    def __init__(
        self,
        source: RecipeSource,
        translator: Optional[TranslationService] = None,
        target_language: Optional[str] = None,
    ) -> None:
        self.source = source
        self.translator = translator
        self.target_language = target_language
        self._state = LoadState()
        self._load_lock = threading.Lock()
        self._state_lock = threading.Lock()

    def snapshot(self) -> LoadState:
        """Return a copy of the current state."""
        with self._state_lock:
            return replace(self._state)

    @property
    def is_loading(self) -> bool:
        with self._state_lock:
            return self._state.is_loading

    def _update(self, **changes) -> None:
        with self._state_lock:
            self._state = replace(self._state, **changes)

    def load(self) -> bool:
        """Run one fetch-translate cycle. Return False if a load was already running."""
        if not self._load_lock.acquire(blocking=False):
            logger.info("Load requested while another load is in flight; ignoring")
            return False

        try:
            self._run_load()
        finally:
            self._load_lock.release()
        return True

    def _run_load(self) -> None:
        start_time = time.time()
        logger.info("Starting recipe load")
        self._update(is_loading=True, error_message=None, translated_instructions=None)

        try:
            recipe = self.source.fetch_random()
        except Exception as exc:  # noqa: BLE001 - nothing escapes load()
            if isinstance(exc, MealAppError):
                logger.error("Recipe fetch failed: %s", exc)
            else:
                logger.error("Unexpected error while fetching recipe: %s", exc, exc_info=True)
            self._update(
                recipe=None,
                translated_instructions=None,
                error_message=LOAD_ERROR_MESSAGE,
                is_loading=False,
            )
            return

        self._update(recipe=recipe)

        translated = None
        if recipe.instructions is None:
            logger.info("Recipe %s has no instructions; skipping translation", recipe.id)
        elif self.translator is None:
            logger.info("Translation is not configured; showing source instructions")
        else:
            translated = self._translate(recipe.instructions)

        self._update(translated_instructions=translated, is_loading=False)
        logger.info(
            "Recipe load completed in %.2f seconds (translated: %s)",
            time.time() - start_time,
            translated is not None,
        )

    def _translate(self, instructions: str) -> Optional[str]:
        try:
            return self.translator.translate(instructions, self.target_language)
        except Exception as exc:  # noqa: BLE001 - translation is best-effort
            logger.warning(
                "Translation failed, falling back to source text: %s", exc, exc_info=True
            )
            return None


__all__ = ["LOAD_ERROR_MESSAGE", "RecipeOrchestrator"]
