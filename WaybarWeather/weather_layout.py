"""Status bar output for weather display - pure functions for testability."""
import json
from typing import Dict

from weather_tooltip import build_tooltip
from weather_codes import get_weather_icon
from weather_data import CurrentCondition, WeatherReport


def build_text(current: CurrentCondition) -> str:
    """
    Get the compact status line shown in the bar.

    Args:
        current: Current conditions

    Returns:
        Icon and feels-like temperature, e.g. "☀️ 18°"
    """
    return f"{get_weather_icon(current.weather_code)} {current.feels_like_c}°"


def build_current_block(current: CurrentCondition) -> str:
    """Build the current-conditions lines at the top of the tooltip."""
    return (
        f"<b>{current.description} {current.temp_c}</b>\n"
        f"Feels like: {current.feels_like_c}°\n"
        f"Wind: {current.wind_speed_kmph}Km/h\n"
        f"Humidity: {current.humidity}%\n"
    )


def build_display_output(report: WeatherReport, current_hour: int) -> Dict[str, str]:
    """
    Build the two-field output consumed by the status bar.

    This is a pure function: the same report and hour always give the
    same output.

    Args:
        report: Parsed weather report
        current_hour: Local hour of day used to filter today's forecast

    Returns:
        Dict with exactly the keys "text" and "tooltip"
    """
    tooltip = build_current_block(report.current) + build_tooltip(report.days, current_hour)
    return {
        "text": build_text(report.current),
        "tooltip": tooltip,
    }


def serialize_output(output: Dict[str, str]) -> str:
    """Serialize the output as one JSON line, keeping emoji unescaped."""
    return json.dumps(output, ensure_ascii=False)
