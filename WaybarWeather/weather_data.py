"""Weather domain model - read-only views over a wttr.in j1 response.

Absent fields are expected, so every read falls back to a default instead
of raising. A field only counts as present when it is a JSON string.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from weather_formatters import CHANCE_FIELDS

DEFAULT_WEATHER_CODE = "113"


def _str_field(record: Any, key: str, default: Optional[str] = None) -> Optional[str]:
    if not isinstance(record, dict):
        return default
    value = record.get(key)
    return value if isinstance(value, str) else default


def _first(record: Any, key: str) -> Dict[str, Any]:
    """Return the first object of an array field, or an empty dict."""
    if not isinstance(record, dict):
        return {}
    items = record.get(key)
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def _list(record: Any, key: str) -> List[Any]:
    if not isinstance(record, dict):
        return []
    items = record.get(key)
    return items if isinstance(items, list) else []


@dataclass(frozen=True)
class CurrentCondition:
    """Observed conditions at fetch time."""
    weather_code: str = DEFAULT_WEATHER_CODE
    feels_like_c: str = "0"
    description: str = "Unknown"
    temp_c: str = "0"
    wind_speed_kmph: str = "0"
    humidity: str = "0"

    @classmethod
    def from_json(cls, record: Any) -> "CurrentCondition":
        return cls(
            weather_code=_str_field(record, "weatherCode", DEFAULT_WEATHER_CODE),
            feels_like_c=_str_field(record, "FeelsLikeC", "0"),
            description=_str_field(_first(record, "weatherDesc"), "value", "Unknown"),
            temp_c=_str_field(record, "temp_C", "0"),
            wind_speed_kmph=_str_field(record, "windspeedKmph", "0"),
            humidity=_str_field(record, "humidity", "0"),
        )


@dataclass(frozen=True)
class HourlyEntry:
    """One 3-hour forecast slot."""
    time: Optional[str] = None  # "0", "300", ..., "2100"; None if absent
    weather_code: str = DEFAULT_WEATHER_CODE
    feels_like_c: str = "0"
    description: str = ""
    chances: Dict[str, str] = field(default_factory=dict)  # raw chanceof* values

    @classmethod
    def from_json(cls, record: Any) -> "HourlyEntry":
        chances = {}
        for name, _label in CHANCE_FIELDS:
            value = _str_field(record, name)
            if value is not None:
                chances[name] = value
        return cls(
            time=_str_field(record, "time"),
            weather_code=_str_field(record, "weatherCode", DEFAULT_WEATHER_CODE),
            feels_like_c=_str_field(record, "FeelsLikeC", "0"),
            description=_str_field(_first(record, "weatherDesc"), "value", ""),
            chances=chances,
        )


@dataclass(frozen=True)
class ForecastDay:
    """A forecast day with its astronomy data and hourly slots."""
    date: str = ""
    max_temp_c: str = "0"
    min_temp_c: str = "0"
    sunrise: str = ""
    sunset: str = ""
    hourly: List[HourlyEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, record: Any) -> "ForecastDay":
        astronomy = _first(record, "astronomy")
        return cls(
            date=_str_field(record, "date", ""),
            max_temp_c=_str_field(record, "maxtempC", "0"),
            min_temp_c=_str_field(record, "mintempC", "0"),
            sunrise=_str_field(astronomy, "sunrise", ""),
            sunset=_str_field(astronomy, "sunset", ""),
            hourly=[HourlyEntry.from_json(hour) for hour in _list(record, "hourly")],
        )


@dataclass(frozen=True)
class WeatherReport:
    """Domain model for a full response: current conditions plus forecast days."""
    current: CurrentCondition
    days: List[ForecastDay] = field(default_factory=list)

    @classmethod
    def from_json(cls, document: Any) -> "WeatherReport":
        """
        Build a report from a decoded j1 document.

        Args:
            document: Decoded JSON (normally a dict)

        Returns:
            WeatherReport with defaults filled in for every missing field
        """
        return cls(
            current=CurrentCondition.from_json(_first(document, "current_condition")),
            days=[ForecastDay.from_json(day) for day in _list(document, "weather")],
        )
