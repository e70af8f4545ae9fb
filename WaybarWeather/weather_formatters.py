"""String formatting for forecast fields - pure functions for testability."""
import re
from typing import List, Mapping, Optional, Tuple

# (field, label) pairs, in display order
CHANCE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("chanceoffog", "Fog"),
    ("chanceoffrost", "Frost"),
    ("chanceofovercast", "Overcast"),
    ("chanceofrain", "Rain"),
    ("chanceofsnow", "Snow"),
    ("chanceofsunshine", "Sunshine"),
    ("chanceofthunder", "Thunder"),
    ("chanceofwindy", "Wind"),
)


def format_hour_time(raw: str) -> str:
    """
    Turn an hourly time code into a display hour.

    Codes are multiples of 100 ("0", "300", ..., "2100"). Every "00" substring
    is removed, so "1200" becomes "12" and "000" becomes "0".
    """
    formatted = raw.replace("00", "")
    return formatted or "0"


def format_temp(raw: str) -> str:
    """Append a degree sign and keep the first three characters ("-150" -> "-15")."""
    return f"{raw}°"[:3]


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -2**31, 2**31 - 1


def _parse_int(value) -> Optional[int]:
    """Parse a signed 32-bit decimal integer; anything else (spaces, "1_0") is None."""
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return None
    return number


def hour_of_day(raw: Optional[str]) -> Optional[int]:
    """
    Get the hour of day an hourly time code stands for.

    Args:
        raw: Time code from the forecast, e.g. "900"

    Returns:
        The hour as an int (9 for "900"), or None if the code is missing
        or not numeric
    """
    if _parse_int(raw) is None:
        return None
    return _parse_int(format_hour_time(raw))


def format_chances(hour_record: Mapping[str, str]) -> str:
    """
    Summarize the non-zero event probabilities of an hourly record.

    Args:
        hour_record: Mapping holding any of the chanceof* fields as strings

    Returns:
        e.g. "Rain 80%, Sunshine 20%", or "" when no field is above zero
    """
    conditions: List[str] = []
    for field, label in CHANCE_FIELDS:
        value = hour_record.get(field)
        percent = _parse_int(value)
        if percent is not None and percent > 0:
            conditions.append(f"{label} {value}%")
    return ", ".join(conditions)
