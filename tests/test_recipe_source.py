"""
Tests for the TheMealDB client using a mocked requests session.
"""

import json
import os
from unittest.mock import Mock, patch

import pytest
import requests

from meal_app.config import DEFAULT_MEAL_API_URL
from meal_app.errors import (
    EmptyCatalogError,
    HttpStatusError,
    MalformedResponseError,
    NetworkError,
)
from meal_app.models import Recipe
from meal_app.services.recipe_source import RecipeSource


def meal_payload(**overrides):
    meal = {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
        "strInstructions": "Preheat oven to 350 F.",
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strIngredient1": "soy sauce",
    }
    meal.update(overrides)
    return meal


def make_session(body):
    response = Mock()
    response.content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response.raise_for_status.return_value = None
    session = Mock()
    session.get.return_value = response
    return session


class TestFetchRandom:
    def test_returns_first_meal(self):
        second = meal_payload(idMeal="1", strMeal="Other")
        session = make_session({"meals": [meal_payload(), second]})

        recipe = RecipeSource(url="https://example.test/random", session=session).fetch_random()

        assert recipe == Recipe(
            id="52772",
            name="Teriyaki Chicken Casserole",
            thumbnail_url="https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
            instructions="Preheat oven to 350 F.",
            category="Chicken",
        )
        session.get.assert_called_once_with("https://example.test/random", timeout=None)

    @patch.dict(os.environ, {}, clear=True)
    def test_uses_default_endpoint(self):
        session = make_session({"meals": [meal_payload()]})

        RecipeSource(session=session).fetch_random()

        session.get.assert_called_once_with(DEFAULT_MEAL_API_URL, timeout=None)

    @patch.dict(os.environ, {"MEAL_API_URL": "https://mirror.test/r", "MEAL_API_TIMEOUT": "2.5"})
    def test_endpoint_and_timeout_from_environment(self):
        session = make_session({"meals": [meal_payload()]})

        RecipeSource(session=session).fetch_random()

        session.get.assert_called_once_with("https://mirror.test/r", timeout=2.5)

    def test_null_and_blank_optional_fields_are_absent(self):
        session = make_session(
            {"meals": [meal_payload(strInstructions=None, strMealThumb="", strCategory="  ")]}
        )

        recipe = RecipeSource(session=session).fetch_random()

        assert recipe.instructions is None
        assert recipe.thumbnail_url is None
        assert recipe.category is None

    def test_recipe_is_immutable(self):
        recipe = RecipeSource(session=make_session({"meals": [meal_payload()]})).fetch_random()

        with pytest.raises(AttributeError):
            recipe.name = "Changed"


class TestFetchRandomErrors:
    def test_connection_error_is_network_error(self):
        session = Mock()
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(NetworkError):
            RecipeSource(session=session).fetch_random()

    def test_timeout_is_network_error(self):
        session = Mock()
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(NetworkError):
            RecipeSource(session=session).fetch_random()

    def test_non_success_status(self):
        session = make_session({"meals": []})
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError(
            response=Mock(status_code=503)
        )

        with pytest.raises(HttpStatusError) as excinfo:
            RecipeSource(session=session).fetch_random()

        assert excinfo.value.status_code == 503

    def test_invalid_json_is_malformed(self):
        session = make_session(b"<html>not json</html>")

        with pytest.raises(MalformedResponseError):
            RecipeSource(session=session).fetch_random()

    def test_missing_required_field_is_malformed(self):
        meal = meal_payload()
        del meal["strMeal"]
        session = make_session({"meals": [meal]})

        with pytest.raises(MalformedResponseError):
            RecipeSource(session=session).fetch_random()

    def test_missing_envelope_is_malformed(self):
        session = make_session({"recipes": [meal_payload()]})

        with pytest.raises(MalformedResponseError):
            RecipeSource(session=session).fetch_random()

    @pytest.mark.parametrize("body", [{"meals": []}, {"meals": None}])
    def test_empty_catalog(self, body):
        session = make_session(body)

        with pytest.raises(EmptyCatalogError):
            RecipeSource(session=session).fetch_random()
