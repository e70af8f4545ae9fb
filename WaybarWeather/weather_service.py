"""Weather service running the fetch and format pipeline once."""
import logging
from datetime import datetime
from typing import Callable, Dict

from weather_layout import build_display_output
from weather_data import WeatherReport
from weather_provider import WeatherProviderBase


class WeatherService:
    """
    Service that turns a location into the status bar output.

    Each call makes exactly one provider request. Results are not cached and
    failed requests are not retried; provider errors propagate to the caller.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            clock: Returns the current local time; read once per call
        """
        self.provider = provider
        self.clock = clock

    def get_report(self, location: str) -> WeatherReport:
        """
        Fetch and parse the weather report for a location.

        Raises:
            WeatherProviderError: If the provider fails
        """
        logging.info(f"Fetching weather data for {location!r}...")
        document = self.provider.fetch(location)
        report = WeatherReport.from_json(document)
        logging.info(
            f"Weather fetch successful: {report.current.feels_like_c}°C feels like, "
            f"{report.current.description}, {len(report.days)} forecast days"
        )
        return report

    def get_display(self, location: str) -> Dict[str, str]:
        """
        Get the status bar output for a location.

        Returns:
            Dict with "text" and "tooltip"

        Raises:
            WeatherProviderError: If the provider fails
        """
        report = self.get_report(location)
        # Held fixed for the whole formatting pass
        current_hour = self.clock().hour
        logging.debug(f"Filtering today's forecast at local hour {current_hour}")
        return build_display_output(report, current_hour)
