"""wttr.in weather condition codes and their status bar glyphs."""
from types import MappingProxyType

FALLBACK_ICON = "❓"

# Several codes share a glyph; consumers depend on these exact assignments.
WEATHER_CODES = (
    ("113", "☀️"),
    ("116", "⛅️"),
    ("119", "☁️"),
    ("122", "☁️"),
    ("143", "🌧"),
    ("176", "🌧"),
    ("179", "🌧"),
    ("182", "🌧"),
    ("185", "🌧"),
    ("200", "⛈"),
    ("227", "🌨"),
    ("230", "❄️"),
    ("248", "🌫"),
    ("260", "🌫"),
    ("263", "🌧"),
    ("266", "🌧"),
    ("281", "🌧"),
    ("284", "🌧"),
    ("293", "🌧"),
    ("296", "🌧"),
    ("299", "🌧"),
    ("302", "🌧"),
    ("305", "🌧"),
    ("308", "🌧"),
    ("311", "🌧"),
    ("314", "🌧"),
    ("317", "🌧"),
    ("320", "🌧"),
    ("323", "🌧"),
    ("326", "🌧"),
    ("329", "❄️"),
    ("332", "❄️"),
    ("335", "❄️"),
    ("338", "❄️"),
    ("350", "🌧"),
    ("353", "🌧"),
    ("356", "🌧"),
    ("359", "🌧"),
    ("362", "🌧"),
    ("365", "🌧"),
    ("368", "🌧"),
    ("371", "❄️"),
    ("374", "🌧"),
    ("377", "🌧"),
    ("386", "⛈"),
    ("389", "🌩"),
    ("392", "⛈"),
    ("395", "❄️"),
)

_ICONS_BY_CODE = MappingProxyType(dict(WEATHER_CODES))


def get_weather_icon(code: str) -> str:
    """
    Get the glyph for a weather condition code.

    Args:
        code: wttr.in condition code, e.g. "113"

    Returns:
        The mapped glyph, or FALLBACK_ICON for codes not in the table
    """
    if not isinstance(code, str):
        return FALLBACK_ICON
    return _ICONS_BY_CODE.get(code, FALLBACK_ICON)
