"""Client for the random recipe endpoint of TheMealDB."""
from __future__ import annotations

import time
from typing import Optional

import requests
from pydantic import ValidationError

from ..config import get_meal_api_timeout, get_meal_api_url
from ..errors import (
    EmptyCatalogError,
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
)
from ..logging_config import get_logger
from ..models import Recipe
from ..schemas import MealResponse

logger = get_logger(__name__)


class RecipeSource:
    """Fetch one random recipe per call. No retries, no caching."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or get_meal_api_url()
        self.timeout = timeout if timeout is not None else get_meal_api_timeout()
        self.session = session or requests.Session()

    def fetch_random(self) -> Recipe:
        logger.info("Fetching random recipe from %s", self.url)
        start_time = time.time()

        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else 0
            logger.error("Recipe catalog returned HTTP %s", status_code)
            raise HttpStatusError(status_code, "recipe catalog") from exc
        except requests.RequestException as exc:
            logger.error("Could not reach recipe catalog: %s", exc)
            raise NetworkError(f"Could not reach recipe catalog: {exc}") from exc

        elapsed_time = time.time() - start_time
        logger.info(
            "Received catalog response in %.2f seconds - Size: %.1fKB",
            elapsed_time,
            len(response.content) / 1024,
        )

        try:
            envelope = MealResponse.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error("Catalog response does not match the expected schema: %s", exc)
            raise MalformedResponseError("Recipe catalog returned malformed JSON") from exc

        if not envelope.meals:
            logger.warning("Recipe catalog returned no recipes")
            raise EmptyCatalogError("Recipe catalog returned no recipes")

        recipe = Recipe.from_record(envelope.meals[0])
        logger.info("Fetched recipe %s: '%s'", recipe.id, recipe.name)
        logger.debug(
            "Recipe has instructions: %s, category: %s",
            recipe.instructions is not None,
            recipe.category,
        )
        return recipe


__all__ = ["RecipeSource"]
