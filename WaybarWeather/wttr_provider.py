"""wttr.in JSON API provider implementation."""
import logging
from typing import Any
from urllib.parse import quote

import requests

from weather_provider import FetchError, ParseError, WeatherProviderBase


class WttrProvider(WeatherProviderBase):
    """
    Weather provider using the wttr.in j1 JSON format.

    wttr.in needs no API key; the location goes in the URL path and
    resolution of the place name is left to the service.
    """

    DEFAULT_HOST = "wttr.in"

    def __init__(self, host: str = DEFAULT_HOST, timeout: float = 10):
        """
        Initialize wttr.in provider.

        Args:
            host: Host serving the wttr.in API
            timeout: HTTP request timeout in seconds
        """
        self.host = host
        self.timeout = timeout

    def build_url(self, location: str) -> str:
        """Build the request URL for a location (query string excluded)."""
        return f"https://{self.host}/{quote(location, safe='')}"

    def fetch(self, location: str) -> Any:
        """
        Fetch the j1 forecast document for a location.

        Returns:
            The decoded JSON document

        Raises:
            FetchError: If the request fails or the status is not 2xx
            ParseError: If the body is not valid JSON
        """
        url = self.build_url(location)
        params = {"format": "j1"}

        try:
            logging.info(f"Making wttr.in API request: {url}")
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise FetchError(f"Network error: {str(e)}") from e

        logging.info(f"API response status: {response.status_code}")
        if not response.ok:
            logging.error(
                f"Non-success response: HTTP {response.status_code}, body: {response.text[:500]}"
            )
            raise FetchError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Failed to parse API response: {e}")
            raise ParseError(f"Failed to parse response: {str(e)}") from e

        if isinstance(data, dict):
            logging.debug(f"API response data keys: {list(data.keys())}")
        return data
