"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import Any


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def fetch(self, location: str) -> Any:
        """
        Fetch the raw weather document for a location.

        Args:
            location: Free-text location, e.g. "Paris, France"

        Returns:
            The decoded JSON document

        Raises:
            FetchError: If the request fails or returns a non-success status
            ParseError: If the body is not valid JSON
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class FetchError(WeatherProviderError):
    """Network failure or non-success HTTP status."""
    pass


class ParseError(WeatherProviderError):
    """Response body could not be decoded as JSON."""
    pass
