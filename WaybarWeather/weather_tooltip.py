"""Forecast section of the tooltip - pure functions for testability."""
from typing import Iterable, List

from weather_formatters import format_chances, format_hour_time, format_temp, hour_of_day
from weather_codes import get_weather_icon
from weather_data import ForecastDay, HourlyEntry

DAY_PREFIXES = ("Today, ", "Tomorrow, ")

# Hours of look-back kept in today's forecast
LOOKBACK_HOURS = 2


def build_day_header(index: int, day: ForecastDay) -> str:
    """
    Build the header block for a forecast day.

    Day 0 is labelled "Today", day 1 "Tomorrow"; later days show only the date.
    Every header starts with a newline, the first one included.
    """
    prefix = DAY_PREFIXES[index] if index < len(DAY_PREFIXES) else ""
    return (
        f"\n<b>{prefix}{day.date}</b>\n"
        f"⬆️ {day.max_temp_c}° ⬇️ {day.min_temp_c}° "
        f"🌅 {day.sunrise} 🌆 {day.sunset}\n"
    )


def build_hour_line(hour: HourlyEntry) -> str:
    """Build one hourly forecast line, e.g. "12 ☀️ 18° Sunny, Sunshine 90%"."""
    return (
        f"{format_hour_time(hour.time or '')} "
        f"{get_weather_icon(hour.weather_code)} "
        f"{format_temp(hour.feels_like_c)} "
        f"{hour.description}, {format_chances(hour.chances)}\n"
    )


def is_hour_shown(index: int, hour: HourlyEntry, current_hour: int) -> bool:
    """
    Decide whether an hourly entry is rendered.

    Only today's entries are filtered: those more than LOOKBACK_HOURS before
    current_hour are dropped. Entries with an unparseable time are kept.
    """
    if index != 0:
        return True
    hour_value = hour_of_day(hour.time)
    if hour_value is None:
        return True
    return hour_value >= current_hour - LOOKBACK_HOURS


def build_tooltip(days: Iterable[ForecastDay], current_hour: int) -> str:
    """
    Build the forecast part of the tooltip.

    Args:
        days: Forecast days in response order (index 0 is today)
        current_hour: Local hour of day (0-23), read once per run

    Returns:
        Concatenated day headers and hourly lines
    """
    parts: List[str] = []
    for index, day in enumerate(days):
        parts.append(build_day_header(index, day))
        for hour in day.hourly:
            if is_hour_shown(index, hour, current_hour):
                parts.append(build_hour_line(hour))
    return "".join(parts)
