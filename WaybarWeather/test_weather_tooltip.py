"""Tests for forecast tooltip building."""
import pytest
from weather_data import ForecastDay, HourlyEntry
from weather_tooltip import build_day_header, build_hour_line, build_tooltip, is_hour_shown


def make_hour(time, code="113", feels="18", desc="Sunny", **chances):
    return HourlyEntry(time=time, weather_code=code, feels_like_c=feels, description=desc, chances=chances)


@pytest.fixture
def four_hours():
    """Hourly entries at 06:00, 09:00, 12:00 and 15:00."""
    return [make_hour(t) for t in ("600", "900", "1200", "1500")]


def make_day(date, hourly):
    return ForecastDay(
        date=date,
        max_temp_c="21",
        min_temp_c="-3",
        sunrise="06:12 AM",
        sunset="08:45 PM",
        hourly=hourly,
    )


def shown_times(tooltip):
    """Display hours of the hourly lines in a tooltip."""
    lines = [line for line in tooltip.split("\n") if line and not line.startswith(("<b>", "⬆️"))]
    return [line.split(" ")[0] for line in lines]


def test_day_header_labels():
    """Test Today/Tomorrow prefixes and unlabelled later days."""
    day = make_day("2024-05-01", [])

    assert build_day_header(0, day).startswith("\n<b>Today, 2024-05-01</b>\n")
    assert build_day_header(1, day).startswith("\n<b>Tomorrow, 2024-05-01</b>\n")
    assert build_day_header(2, day).startswith("\n<b>2024-05-01</b>\n")
    assert build_day_header(5, day).startswith("\n<b>2024-05-01</b>\n")


def test_day_header_temperatures_not_truncated():
    """Test that day min/max use raw value plus degree sign."""
    day = ForecastDay(date="2024-01-10", max_temp_c="-12", min_temp_c="-25", sunrise="08:01 AM", sunset="04:10 PM")

    assert build_day_header(2, day) == (
        "\n<b>2024-01-10</b>\n"
        "⬆️ -12° ⬇️ -25° 🌅 08:01 AM 🌆 04:10 PM\n"
    )


def test_hour_line():
    """Test the hourly line layout."""
    hour = make_hour("1200", code="176", feels="14", desc="Patchy rain possible", chanceofrain="80", chanceofsnow="0")

    assert build_hour_line(hour) == "12 🌧 14° Patchy rain possible, Rain 80%\n"


def test_hour_line_keeps_trailing_separator():
    """Test that an empty chance summary leaves ', ' before the newline."""
    assert build_hour_line(make_hour("0")) == "0 ☀️ 18° Sunny, \n"


def test_hour_line_defaults():
    """Test an entry with nothing but defaults."""
    assert build_hour_line(HourlyEntry()) == "0 ☀️ 0° , \n"


def test_hour_line_unknown_code_and_truncated_temp():
    """Test fallback glyph and feels-like truncation."""
    hour = make_hour("2100", code="999", feels="-150", desc="Odd")

    assert build_hour_line(hour) == "21 ❓ -15 Odd, \n"


def test_today_filter_at_hour_14(four_hours):
    """Test that entries before 12:00 are dropped from today at 14:00."""
    tooltip = build_tooltip([make_day("2024-05-01", four_hours)], current_hour=14)

    assert shown_times(tooltip) == ["12", "15"]


def test_later_days_not_filtered(four_hours):
    """Test that only day 0 is filtered."""
    days = [make_day(d, four_hours) for d in ("2024-05-01", "2024-05-02", "2024-05-03")]
    tooltip = build_tooltip(days, current_hour=14)

    assert shown_times(tooltip) == ["12", "15"] + ["6", "9", "12", "15"] * 2


def test_is_hour_shown_boundary():
    """Test the look-back margin of two hours."""
    hour = make_hour("900")

    assert is_hour_shown(0, hour, 11) is True
    assert is_hour_shown(0, hour, 12) is False
    assert is_hour_shown(1, hour, 23) is True


def test_unparseable_time_always_shown():
    """Test that entries without a numeric time bypass the filter."""
    assert is_hour_shown(0, make_hour(None), 23) is True
    assert is_hour_shown(0, make_hour("noon"), 23) is True


def test_early_hours_show_everything(four_hours):
    """Test negative thresholds just after midnight keep every entry."""
    midnight = make_hour("0")
    tooltip = build_tooltip([make_day("2024-05-01", [midnight] + four_hours)], current_hour=1)

    assert shown_times(tooltip) == ["0", "6", "9", "12", "15"]


def test_tooltip_structure(four_hours):
    """Test order of headers and hourly lines across days."""
    days = [make_day("2024-05-01", four_hours[-1:]), make_day("2024-05-02", four_hours[:1])]
    tooltip = build_tooltip(days, current_hour=0)

    assert tooltip == (
        "\n<b>Today, 2024-05-01</b>\n"
        "⬆️ 21° ⬇️ -3° 🌅 06:12 AM 🌆 08:45 PM\n"
        "15 ☀️ 18° Sunny, \n"
        "\n<b>Tomorrow, 2024-05-02</b>\n"
        "⬆️ 21° ⬇️ -3° 🌅 06:12 AM 🌆 08:45 PM\n"
        "6 ☀️ 18° Sunny, \n"
    )


def test_empty_forecast():
    """Test that no days gives an empty string."""
    assert build_tooltip([], current_hour=10) == ""
