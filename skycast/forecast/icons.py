"""Maps OpenWeather condition codes onto logical icon categories."""

from skycast.models.common import IconCategory

# Keyed on the numeric part of the icon token; the d/n suffix does not matter.
_CODE_MAP: dict[str, IconCategory] = {
    "01": IconCategory.CLEAR,
    "02": IconCategory.PARTLY_CLOUDY,
    "03": IconCategory.CLOUDY,
    "04": IconCategory.CLOUDY,
    "09": IconCategory.DRIZZLE,
    "10": IconCategory.RAIN,
    "11": IconCategory.THUNDERSTORM,
    "13": IconCategory.SNOW,
    "50": IconCategory.FOG,
}

_GROUP_MAP: dict[str, IconCategory] = {
    "clear": IconCategory.CLEAR,
    "clouds": IconCategory.CLOUDY,
    "drizzle": IconCategory.DRIZZLE,
    "rain": IconCategory.RAIN,
    "thunderstorm": IconCategory.THUNDERSTORM,
    "snow": IconCategory.SNOW,
    "mist": IconCategory.FOG,
    "fog": IconCategory.FOG,
    "haze": IconCategory.FOG,
    "smoke": IconCategory.FOG,
}

DEFAULT_ICON = IconCategory.CLOUDY


def resolve_icon(condition_code: str | None, condition_group: str | None = None) -> IconCategory:
    """Resolve an icon category. Never fails; unknown input maps to CLOUDY.

    The provider code wins; the condition group is only consulted when the
    code is missing or unrecognised.
    """
    if condition_code:
        category = _CODE_MAP.get(condition_code.strip()[:2])
        if category is not None:
            return category
    if condition_group:
        category = _GROUP_MAP.get(condition_group.strip().lower())
        if category is not None:
            return category
    return DEFAULT_ICON
