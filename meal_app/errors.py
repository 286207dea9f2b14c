"""Exception types raised by the recipe catalog and translation clients."""
from __future__ import annotations


class MealAppError(Exception):
    """Base class for all errors raised by the application services."""


class ConfigurationError(MealAppError):
    """A required setting (such as an API key) is missing or invalid."""


class NetworkError(MealAppError):
    """The remote service could not be reached or the transfer failed."""


class HttpStatusError(MealAppError):
    """The remote service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        detail = f"HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class MalformedResponseError(MealAppError):
    """The response body does not match the expected JSON schema."""


class EmptyCatalogError(MealAppError):
    """The recipe catalog answered with zero recipes."""


class EmptyCompletionError(MealAppError):
    """The translation provider answered without any completion choices."""


__all__ = [
    "ConfigurationError",
    "EmptyCatalogError",
    "EmptyCompletionError",
    "HttpStatusError",
    "MalformedResponseError",
    "MealAppError",
    "NetworkError",
]
